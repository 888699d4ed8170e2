from . import config
from .errors import AccessionParsingError


def get_component_id(accession):
    """Extracts the integer component ID embedded in a FASTA accession.

    We split the accession on config.ACCESSION_SEP ("_") and interpret the
    token at position config.ACCESSION_COMPONENT_TOKEN (the second token) as
    a non-negative integer. So "s_123" and "c_7_bundle" give 123 and 7.

    Parameters
    ----------
    accession: str

    Returns
    -------
    int

    Raises
    ------
    AccessionParsingError
        If the accession doesn't have enough tokens, or if the token isn't a
        non-negative integer.
    """
    tokens = accession.split(config.ACCESSION_SEP)
    idx = config.ACCESSION_COMPONENT_TOKEN
    if len(tokens) <= idx:
        raise AccessionParsingError(
            accession,
            f'Accession "{accession}" doesn\'t contain a component ID: '
            f'expected something like "s{config.ACCESSION_SEP}123".',
        )
    token = tokens[idx]
    # This rejects "", "-1", "1.5", " 1", etc. isdigit() alone would let
    # through non-ASCII digits like "²", which int() chokes on
    if not (token.isascii() and token.isdigit()):
        raise AccessionParsingError(
            accession,
            f'Accession "{accession}" has component ID "{token}", which '
            "isn't a non-negative integer.",
        )
    return int(token)
