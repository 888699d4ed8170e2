import logging
from Bio import SeqIO


def read_fasta(fasta_fp):
    """Yields (accession, sequence) tuples for each record in a FASTA file.

    The accession of a record is the first whitespace-delimited token of its
    header line (i.e. ">s_123 len=500" has the accession "s_123"). Sequences
    are returned as-is; sanitizing them is up to the caller.

    This is a generator, so the file is only open while it's being iterated
    over. Errors opening or reading the file (FileNotFoundError, etc.) are
    raised when iteration starts.
    """
    with open(fasta_fp, "r") as fasta_file:
        for record in SeqIO.parse(fasta_file, "fasta"):
            yield record.id, str(record.seq)


def read_fastas(fasta_fps):
    """Yields (accession, sequence) tuples from multiple FASTA files, in order.

    Logs the name of each file (and how many records were in it) as we go.
    """
    logger = logging.getLogger(__name__)
    for fasta_fp in fasta_fps:
        logger.debug(f"Parsing file: {fasta_fp}")
        num_records = 0
        for record in read_fasta(fasta_fp):
            num_records += 1
            yield record
        logger.debug(f"Read {num_records:,} record(s) from {fasta_fp}.")
