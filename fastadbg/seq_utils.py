from .config import ALPHABET, BUNDLE_DELIM, COMPLEMENT, SANITIZE_CHAR
from .errors import WeirdError


def reverse_complement(dna_string):
    """Returns the reverse complement of a string of DNA.

    Assumes that the string has already been sanitized (i.e. it only contains
    A, C, G, and T). If that isn't the case, this raises a WeirdError, since
    sanitize() should've been called first.
    """
    try:
        return "".join(COMPLEMENT[nt] for nt in reversed(dna_string))
    except KeyError as ke:
        raise WeirdError(
            f"Can't complement {ke.args[0]!r}: sequence isn't sanitized?"
        )


def contains_non_acgt(dna_string):
    return any(nt not in ALPHABET for nt in dna_string)


def sanitize(dna_string):
    """Uppercases a sequence and replaces non-ACGT characters with "A".

    This matches what the rest of the assembly pipeline does with ambiguous
    bases (N, R, Y, ...): they just become As. Lowercase (soft-masked) bases
    are uppercased first, so "acgt" becomes "ACGT" rather than "AAAA".

    Note that this differs from Trinity's FastaToDeBruijn, which
    replaces every character outside of "ACGT" (lowercase letters included)
    with an A. So, for soft-masked input, the graphs we build won't match
    that tool's graphs; they'll match the graphs it would build from the
    uppercased input.
    """
    dna_string = dna_string.upper()
    if not contains_non_acgt(dna_string):
        return dna_string
    return "".join(
        nt if nt in ALPHABET else SANITIZE_CHAR for nt in dna_string
    )


def split_bundles(dna_string, delim=BUNDLE_DELIM):
    """Splits a "bundled" sequence into its component sequences.

    Parameters
    ----------
    dna_string: str
        A sequence that may contain multiple sequences glued together with
        delim.

    delim: str
        The delimiter character.

    Returns
    -------
    list of str
        The sequences between delimiters, in order. We don't do anything
        special about adjacent delimiters (or delimiters at the start/end of
        the sequence): these just produce empty strings, which won't
        contribute any k-mers to a graph anyway.
    """
    if len(delim) != 1:
        raise WeirdError(f"Bundle delimiter must be one character: {delim!r}")
    return dna_string.split(delim)
