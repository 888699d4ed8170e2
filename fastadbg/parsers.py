# This module contains utility functions for reading k-mer graphs back in from
# the Chrysalis-format text that KmerGraph.to_chrysalis_format() produces.
#
# This is mostly useful for checking that a file of graphs is well-formed
# before handing it to the downstream clustering stage, and for testing that
# serialization is lossless. The format is described in the docstring of
# KmerGraph.to_chrysalis_format(); in short, each graph is a header line
# followed by its node lines and then its edge lines, all tab-separated.

from collections import namedtuple
from . import config
from .graph import KmerGraph
from .errors import GraphParsingError, WeirdError


ChrysalisComponent = namedtuple(
    "ChrysalisComponent", ["component_id", "strand_specific", "graph"]
)


def is_ascii_digits(text):
    """Returns True if text is a non-empty string of the digits 0-9.

    str.isdigit() also accepts things like "²", which int() can't parse.
    """
    return text.isascii() and text.isdigit()


def is_not_pos_int(number_string):
    """Returns False if a str represents a positive integer; True otherwise.

    (Also, if number_string is actually an int, this'll return False if it's
    a *positive* int. If number_string is actually a float, this'll
    immediately return True.)

    Another way to think about this is "should we throw an error, given this
    input (which is supposed to represent a positive integer number)?" Note
    that we explicitly consider 0 as non-positive.
    """
    if type(number_string) == int:
        return number_string <= 0
    elif type(number_string) == float:
        return True
    elif type(number_string) == str:
        # Due to boolean short-circuiting, the int() call won't happen if
        # not is_ascii_digits(number_string) is True
        return (
            not is_ascii_digits(number_string) or int(number_string) <= 0
        )
    else:
        return True


def is_valid_kmer(kmer, k):
    return len(kmer) == k and all(nt in config.ALPHABET for nt in kmer)


def _parse_header_value(field, key, line_num, signed=False):
    """Parses a "key=value" field from a header line into an int.

    Raises a GraphParsingError if the field doesn't start with "key=" or if
    the value isn't a non-negative integer. If signed is True, the value may
    also start with a "-" (KmerGraph allows k <= 0, in which case the graph
    is just empty).
    """
    prefix = key + config.CHRYSALIS_KV_SEP
    if not field.startswith(prefix):
        raise GraphParsingError(
            f'Line {line_num}: Expected a "{prefix}" field in the header; '
            f'got "{field}".'
        )
    val = field[len(prefix) :]
    digits = val[1:] if signed and val.startswith("-") else val
    if not is_ascii_digits(digits):
        kind = "an" if signed else "a non-negative"
        raise GraphParsingError(
            f'Line {line_num}: The "{key}" value must be {kind} integer. '
            f'Currently, it\'s "{val}".'
        )
    return int(val)


def _parse_header(split_line, line_num):
    if len(split_line) != 6:
        raise GraphParsingError(
            f"Line {line_num}: Component header should have 6 fields; it "
            f"has {len(split_line):,}."
        )
    component_id_str = split_line[1]
    if not is_ascii_digits(component_id_str):
        raise GraphParsingError(
            f"Line {line_num}: Component ID must be a non-negative integer. "
            f'Currently, it\'s "{component_id_str}".'
        )
    k = _parse_header_value(
        split_line[2], config.CHRYSALIS_K, line_num, signed=True
    )
    ss = _parse_header_value(split_line[3], config.CHRYSALIS_SS, line_num)
    if ss not in (0, 1):
        raise GraphParsingError(
            f'Line {line_num}: The "{config.CHRYSALIS_SS}" value must be 0 '
            f"or 1. Currently, it's {ss}."
        )
    num_nodes = _parse_header_value(
        split_line[4], config.CHRYSALIS_NUM_NODES, line_num
    )
    num_edges = _parse_header_value(
        split_line[5], config.CHRYSALIS_NUM_EDGES, line_num
    )
    return int(component_id_str), k, bool(ss), num_nodes, num_edges


class _ComponentInProgress(object):
    """Keeps track of the component we're currently reading in."""

    def __init__(self, component_id, k, strand_specific, num_nodes, num_edges):
        self.component_id = component_id
        self.strand_specific = strand_specific
        self.exp_num_nodes = num_nodes
        self.exp_num_edges = num_edges
        self.graph = KmerGraph(k)
        self.seen_edge_line = False

    def finish(self):
        if self.graph.num_nodes != self.exp_num_nodes:
            raise GraphParsingError(
                f"Component {self.component_id}: The header indicated that "
                f"there were {self.exp_num_nodes:,} node(s), but we "
                f"identified {self.graph.num_nodes:,} node(s)."
            )
        if self.graph.num_edges != self.exp_num_edges:
            raise GraphParsingError(
                f"Component {self.component_id}: The header indicated that "
                f"there were {self.exp_num_edges:,} edge(s), but we "
                f"identified {self.graph.num_edges:,} edge(s)."
            )
        return ChrysalisComponent(
            self.component_id, self.strand_specific, self.graph
        )


def parse_chrysalis(graph_file):
    """Reads all of the k-mer graphs from a Chrysalis-format text stream.

    Parameters
    ----------
    graph_file: io.TextIOBase
        A "text stream." This can be the output of open(), or an io.StringIO
        object, or really anything that iterates over lines.

    Returns
    -------
    list of ChrysalisComponent
        One per header line in the stream, in order. Each contains the
        component ID, strand-specificity flag, and a KmerGraph with the same
        node and edge counts as the graph that was written out.

    Raises
    ------
    GraphParsingError
        If any of the following conditions hold in the stream:

        General:
        -A non-empty line occurs before the first component header
        -A line doesn't start with one of the known tags

        Any header:
        -doesn't have exactly 6 fields, or has a non-integer component ID,
         k, strand_specific, nodes, or edges value
        -declares a number of nodes / edges that doesn't match the number of
         node / edge lines that follow it

        Any node line:
        -doesn't have exactly 3 fields
        -has a k-mer that isn't of length k, or that has non-ACGT characters
        -has a count that isn't a positive integer
        -declares a k-mer that was already declared in this component
        -occurs after an edge line in the same component

        Any edge line:
        -doesn't have exactly 4 fields
        -has a count that isn't a positive integer
        -refers to a k-mer that hasn't been declared in this component
        -connects two k-mers that don't overlap by k - 1 characters
        -duplicates an edge already declared in this component
    """
    components = []
    curr = None
    sep = config.CHRYSALIS_SEP
    for line_num, line in enumerate(graph_file, 1):
        line = line.rstrip("\r\n")
        if len(line) == 0:
            continue
        split_line = line.split(sep)
        tag = split_line[0]

        if tag == config.CHRYSALIS_HEADER:
            if curr is not None:
                components.append(curr.finish())
            curr = _ComponentInProgress(*_parse_header(split_line, line_num))
            continue

        if curr is None:
            raise GraphParsingError(
                f"Line {line_num}: Found data before the first "
                f'"{config.CHRYSALIS_HEADER}" header.'
            )

        if tag == config.CHRYSALIS_NODE:
            if len(split_line) != 3:
                raise GraphParsingError(
                    f"Line {line_num}: Node line should have 3 fields."
                )
            if curr.seen_edge_line:
                raise GraphParsingError(
                    f"Line {line_num}: Node lines must come before edge "
                    "lines."
                )
            kmer, count = split_line[1], split_line[2]
            if not is_valid_kmer(kmer, curr.graph.k):
                raise GraphParsingError(
                    f'Line {line_num}: "{kmer}" isn\'t a valid k-mer for '
                    f"k = {curr.graph.k}."
                )
            if is_not_pos_int(count):
                raise GraphParsingError(
                    f"Line {line_num}: Counts must be positive integers."
                )
            if kmer in curr.graph.graph:
                raise GraphParsingError(
                    f"Line {line_num}: K-mer {kmer} declared multiple times."
                )
            curr.graph.add_kmer(kmer, int(count))

        elif tag == config.CHRYSALIS_EDGE:
            if len(split_line) != 4:
                raise GraphParsingError(
                    f"Line {line_num}: Edge line should have 4 fields."
                )
            curr.seen_edge_line = True
            src, tgt, count = split_line[1], split_line[2], split_line[3]
            if is_not_pos_int(count):
                raise GraphParsingError(
                    f"Line {line_num}: Counts must be positive integers."
                )
            for kmer in (src, tgt):
                if kmer not in curr.graph.graph:
                    raise GraphParsingError(
                        f"Line {line_num}: Unseen k-mer {kmer} referred to "
                        "in an edge."
                    )
            if curr.graph.graph.has_edge(src, tgt):
                raise GraphParsingError(
                    f"Line {line_num}: Edge {src} -> {tgt} declared multiple "
                    "times."
                )
            try:
                curr.graph.add_edge(src, tgt, int(count))
            except WeirdError:
                raise GraphParsingError(
                    f"Line {line_num}: K-mers {src} and {tgt} don't overlap "
                    "by k - 1 characters."
                )
        else:
            raise GraphParsingError(
                f'Line {line_num}: Unrecognized line tag "{tag}".'
            )

    if curr is not None:
        components.append(curr.finish())
    return components


def parse_chrysalis_file(filename):
    """Convenience wrapper: calls parse_chrysalis() on a file path."""
    with open(filename, "r") as graph_file:
        return parse_chrysalis(graph_file)
