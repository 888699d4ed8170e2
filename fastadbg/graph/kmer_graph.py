# Copyright (C) 2026-- The fastadbg Development Team
#
# This file is part of fastadbg.
#
# fastadbg is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# fastadbg is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with fastadbg.  If not, see <http://www.gnu.org/licenses/>.

import logging
import networkx as nx
from .. import config
from ..errors import WeirdError
from ..misc_utils import pluralize


class KmerGraph(object):
    """Represents a de Bruijn graph of k-mers, with multiplicities.

    Each node in the graph is a distinct k-mer; each (directed) edge connects
    two k-mers that were observed next to each other in some sequence (so the
    last k - 1 characters of the source k-mer match the first k - 1 characters
    of the target k-mer). Both nodes and edges store a "count" attribute
    describing how many times we've seen them.

    The graph is stored as a nx.DiGraph, in the .graph attribute. Node IDs in
    this DiGraph are just the k-mers themselves. This means that the same
    k-mer always maps to the same node, regardless of which sequence (or
    strand) it came from -- adding more sequences only increases counts.

    Notes
    -----
    We don't do anything to "canonicalize" k-mers here (i.e. a k-mer and its
    reverse complement are two separate nodes). If you want the graph to
    represent both strands, add each sequence and its reverse complement;
    see build.add_record_to_graph().
    """

    def __init__(self, k):
        """Initializes an empty KmerGraph.

        Parameters
        ----------
        k: int
            K-mer length. If this is <= 0, then we'll log a warning: the
            graph will stay empty regardless of what sequences you add to it.
        """
        self.k = k
        self.graph = nx.DiGraph()
        if self.k <= 0:
            logging.getLogger(__name__).warning(
                f"K-mer length is {self.k}; the graph will be empty."
            )

    def add_kmer(self, kmer, count=1):
        """Adds count to a k-mer's count, creating its node if needed."""
        if len(kmer) != self.k:
            raise WeirdError(
                f"K-mer {kmer} has length {len(kmer):,}, but k = {self.k:,}"
            )
        if kmer in self.graph:
            self.graph.nodes[kmer]["count"] += count
        else:
            self.graph.add_node(kmer, count=count)

    def add_edge(self, src, tgt, count=1):
        """Adds count to the count of the edge from src to tgt.

        Both src and tgt must already be nodes in the graph, and they must
        overlap by k - 1 characters.
        """
        for kmer in (src, tgt):
            if kmer not in self.graph:
                raise WeirdError(f"K-mer {kmer} isn't in the graph yet")
        if src[1:] != tgt[:-1]:
            raise WeirdError(
                f"K-mers {src} and {tgt} don't overlap by k - 1 = "
                f"{self.k - 1:,} characters"
            )
        if self.graph.has_edge(src, tgt):
            self.graph.edges[src, tgt]["count"] += count
        else:
            self.graph.add_edge(src, tgt, count=count)

    def add_sequence(self, seq):
        """Adds all of the k-mers and k-mer adjacencies in a sequence.

        Sequences shorter than k don't contribute anything. The sequence
        should only contain A, C, G, and T -- we don't check this here, for
        the sake of speed (sanitizing is the caller's job).
        """
        k = self.k
        if k <= 0:
            return
        prev_kmer = None
        for i in range(len(seq) - k + 1):
            kmer = seq[i : i + k]
            self.add_kmer(kmer)
            if prev_kmer is not None:
                if self.graph.has_edge(prev_kmer, kmer):
                    self.graph.edges[prev_kmer, kmer]["count"] += 1
                else:
                    self.graph.add_edge(prev_kmer, kmer, count=1)
            prev_kmer = kmer

    @property
    def num_nodes(self):
        return self.graph.number_of_nodes()

    @property
    def num_edges(self):
        return self.graph.number_of_edges()

    def is_empty(self):
        return self.num_nodes == 0

    def get_kmer_count(self, kmer):
        if kmer in self.graph:
            return self.graph.nodes[kmer]["count"]
        return 0

    def get_edge_count(self, src, tgt):
        if self.graph.has_edge(src, tgt):
            return self.graph.edges[src, tgt]["count"]
        return 0

    def get_node_counts(self):
        """Returns a dict mapping each k-mer to its count."""
        return dict(self.graph.nodes(data="count"))

    def get_edge_counts(self):
        """Returns a dict mapping each (src k-mer, tgt k-mer) to its count."""
        return {(u, v): c for u, v, c in self.graph.edges(data="count")}

    def _sorted_nodes(self):
        return sorted(self.graph.nodes(data="count"))

    def _sorted_edges(self):
        return sorted(self.graph.edges(data="count"))

    def summarize(self):
        return (
            f"{pluralize(self.num_nodes, 'k-mer')}, "
            f"{pluralize(self.num_edges, 'edge')}"
        )

    def __repr__(self):
        return f"KmerGraph (k = {self.k}): {self.summarize()}"

    def to_string(self):
        """Returns a human-readable description of this graph.

        The output looks like:

            KmerGraph (k = 4): 2 k-mers, 1 edge
            ACGT (count: 2)
              -> CGTA (count: 1)
            CGTA (count: 1)

        K-mers are listed in lexicographic order, and each k-mer's outgoing
        edges are listed (also in lexicographic order of their targets)
        underneath it. So, describing the same graph twice will always give
        you the same text.
        """
        lines = [repr(self)]
        for kmer, count in self._sorted_nodes():
            lines.append(f"{kmer} (count: {count})")
            for tgt in sorted(self.graph.successors(kmer)):
                lines.append(
                    f"{config.INDENT}-> {tgt} "
                    f"(count: {self.graph.edges[kmer, tgt]['count']})"
                )
        return "\n".join(lines) + "\n"

    def to_chrysalis_format(self, component_id, strand_specific):
        """Returns a component-tagged, line-oriented dump of this graph.

        Parameters
        ----------
        component_id: int
            Identifier of the component that this graph belongs to.

        strand_specific: bool
            Whether or not this graph was built strand-specifically (i.e.
            without adding reverse complements of sequences).

        Returns
        -------
        str
            All fields are tab-separated. The first line is a header:

                Component  ID  k=K  strand_specific=0|1  nodes=N  edges=E

            ... followed by N node lines (sorted by k-mer):

                N  KMER  COUNT

            ... followed by E edge lines (sorted by source, then target):

                E  SRC_KMER  TGT_KMER  COUNT

            The output ends with a newline, so concatenating the outputs of
            multiple graphs produces a file that parsers.parse_chrysalis()
            can read back in.
        """
        sep = config.CHRYSALIS_SEP
        kv = config.CHRYSALIS_KV_SEP
        header = sep.join(
            (
                config.CHRYSALIS_HEADER,
                str(component_id),
                f"{config.CHRYSALIS_K}{kv}{self.k}",
                f"{config.CHRYSALIS_SS}{kv}{int(strand_specific)}",
                f"{config.CHRYSALIS_NUM_NODES}{kv}{self.num_nodes}",
                f"{config.CHRYSALIS_NUM_EDGES}{kv}{self.num_edges}",
            )
        )
        lines = [header]
        for kmer, count in self._sorted_nodes():
            lines.append(sep.join((config.CHRYSALIS_NODE, kmer, str(count))))
        for src, tgt, count in self._sorted_edges():
            lines.append(
                sep.join((config.CHRYSALIS_EDGE, src, tgt, str(count)))
            )
        return "\n".join(lines) + "\n"
