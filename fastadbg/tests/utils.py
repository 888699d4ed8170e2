# Utility functions that should help simplify the process of writing tests
# for fastadbg.

import random


def gen_random_sequence(possible_lengths):
    """Generates a random DNA sequence with a length in the provided list."""

    seq_len = random.choice(possible_lengths)
    alphabet = "ACGT"
    seq = ""
    i = 0
    while i < seq_len:
        seq += random.choice(alphabet)
        i += 1
    return seq


def write_fasta(fp, records, line_width=60):
    """Writes a FASTA file containing some records.

    Parameters
    ----------
    fp: str or pathlib.Path
        Where to write the file.

    records: list of (str, str)
        Each entry is an (accession, sequence) tuple. Sequences are wrapped
        to line_width characters per line, to make sure that whoever reads
        this file handles multi-line sequences properly.

    Returns
    -------
    str
        fp, as a string (for convenience when passing it on to fastadbg).
    """
    with open(fp, "w") as f:
        for accession, seq in records:
            f.write(f">{accession}\n")
            for i in range(0, len(seq), line_width):
                f.write(seq[i : i + line_width] + "\n")
    return str(fp)
