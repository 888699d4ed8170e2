class FastaDBGError(Exception):
    """Base class for all of the errors fastadbg raises on purpose."""


class WeirdError(FastaDBGError):
    """Something that should never happen happened.

    If you see one of these, it's probably a bug in fastadbg rather than a
    problem with your input.
    """


class InputError(FastaDBGError):
    """One of the input FASTA files can't be used."""


class AccessionParsingError(FastaDBGError):
    """A FASTA accession doesn't contain a component ID where we expect one."""

    def __init__(self, accession, message):
        super().__init__(message)
        self.accession = accession


class GraphParsingError(FastaDBGError):
    """A serialized k-mer graph is malformed."""
