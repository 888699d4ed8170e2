import os
from . import config
from .errors import InputError


def split_fasta_fps(fasta_values):
    """Flattens a bunch of --fasta values into a list of filenames.

    Each value can itself be a comma-separated list of filenames (this is how
    other stages of the pipeline pass us multiple files). Empty entries, like
    the one at the end of "a.fa,b.fa,", are ignored.
    """
    fps = []
    for val in fasta_values:
        for fp in val.split(config.FASTA_LIST_SEP):
            fp = fp.strip()
            if len(fp) > 0:
                fps.append(fp)
    return fps


def validate_fasta_fps(fasta_fps):
    """Raises an InputError if any of these FASTA files can't be read.

    This is vulnerable to race conditions (a file could be removed after we
    check it), but checking up front means that -- in the usual case -- we
    won't write out a bunch of graphs before finding out that the third FASTA
    file doesn't exist.
    """
    if len(fasta_fps) == 0:
        raise InputError("No FASTA files given.")
    for fp in fasta_fps:
        if not os.path.isfile(fp):
            raise InputError(f"FASTA file {fp} doesn't exist.")
        if not os.access(fp, os.R_OK):
            raise InputError(f"FASTA file {fp} isn't readable.")


def validate_mode_settings(graph_per_record, component):
    """Checks that merged mode was given a component ID to tag its graph with.

    In per-record mode component IDs come from accessions, so it doesn't
    matter if one was given.
    """
    if not graph_per_record and component is None:
        raise ValueError(
            "A component ID (-c / --component) is required unless "
            "--graph-per-record is used."
        )
