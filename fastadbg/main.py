#!/usr/bin/env python3

import sys
import logging
from . import defaults, arg_utils, build
from .log_utils import start_log, log_lines_with_sep


def run(
    fasta: list = None,
    kmer_length: int = None,
    component: int = None,
    strand_specific: bool = defaults.STRAND_SPECIFIC,
    graph_per_record: bool = defaults.GRAPH_PER_RECORD,
    to_string: bool = defaults.TO_STRING,
    threads: int = defaults.THREADS,
    monitor: int = defaults.MONITOR,
    output=None,
):
    """Reads FASTA file(s) and writes out k-mer graph(s) built from them.

    Parameters
    ----------
    fasta: list of str
        FASTA filenames. Each entry can be a comma-separated list.

    kmer_length: int
        K-mer length.

    component: int or None
        Component ID to tag the merged graph with. Required unless
        graph_per_record is True.

    strand_specific: bool
        If True, don't add reverse complements of sequences to the graph(s).

    graph_per_record: bool
        If True, build a separate graph for each FASTA record (in parallel,
        using threads worker threads). Otherwise, build one graph.

    to_string: bool
        If True, write descriptive dumps of the graph(s) rather than the
        Chrysalis format.

    threads: int
        Number of worker threads (only used if graph_per_record is True).

    monitor: int
        Verbosity level (see log_utils.get_logging_level()).

    output: io.TextIOBase or None
        Where to write graph(s). If None, we'll use sys.stdout.

    Returns
    -------
    None

    Raises
    ------
    ValueError
        If a component ID is missing in merged mode.

    InputError
        If any of the FASTA files can't be read.
    """
    start_log(monitor)
    logger = logging.getLogger(__name__)
    if output is None:
        output = sys.stdout

    fasta_fps = arg_utils.split_fasta_fps(fasta or [])
    log_lines_with_sep(
        [
            "Settings:",
            f"FASTA file(s): {', '.join(fasta_fps)}",
            f"K-mer length: {kmer_length}",
            f"Component ID: {component}",
            f"Strand-specific?: {strand_specific}",
            f"Graph per record?: {graph_per_record}",
            f"Descriptive output?: {to_string}",
            f"Threads: {threads}",
            f"Monitor level: {monitor}",
        ],
        logger.info,
        endsepline=True,
    )

    # Check everything we can before writing anything
    arg_utils.validate_mode_settings(graph_per_record, component)
    arg_utils.validate_fasta_fps(fasta_fps)

    if graph_per_record:
        build.run_per_record(
            fasta_fps,
            kmer_length,
            strand_specific,
            to_string,
            output,
            threads=threads,
            monitor=monitor,
        )
    else:
        if threads > 1:
            logger.info(
                "Merged mode builds a single graph in one thread; ignoring "
                f"--threads {threads}."
            )
        build.run_merged(
            fasta_fps,
            kmer_length,
            component,
            strand_specific,
            to_string,
            output,
            monitor=monitor,
        )
    logger.info("Done.")
