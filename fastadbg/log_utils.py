import logging
from . import __version__
from .config import SEPBIG, SEPSML, MONITOR_INFO, MONITOR_DEBUG


def log_lines_with_sep(lines, logfunc, sepchar=SEPSML, endsepline=False):
    # Accounts for the "{HH:MM:SS.mmm} " prefix before each logging message.
    # Note that this is brittle; it will break if the call to
    # logging.basicConfig() in start_log() is changed.
    seplen = len(lines[0]) + 15
    sepline = sepchar * seplen
    out = f"{lines[0]}\n{sepline}"
    if len(lines) > 1:
        linelist = "\n".join(lines[1:])
        out += f"\n{linelist}"
    if endsepline:
        out += f"\n{sepline}"
    logfunc(out)


def get_logging_level(monitor):
    """Maps a --monitor verbosity level to a logging level.

    0 (the default) only shows warnings, 1 shows progress (INFO), and 2 or
    above shows everything (DEBUG). Level 3 doesn't change the logging level,
    but it does make the graph builders log every sequence they add.
    """
    if monitor >= MONITOR_DEBUG:
        return logging.DEBUG
    elif monitor >= MONITOR_INFO:
        return logging.INFO
    return logging.WARNING


def start_log(monitor: int):
    # Log messages go to stderr (logging.basicConfig()'s default), so they
    # never get mixed in with graphs written to stdout.
    logging.basicConfig(
        level=get_logging_level(monitor),
        style="{",
        format="{{{asctime}.{msecs:03.0f}}} {message}",
        datefmt="%H:%M:%S",
    )
    logger = logging.getLogger(__name__)
    log_lines_with_sep(
        [f"Running fastadbg (version {__version__})..."],
        logger.info,
        SEPBIG,
    )
