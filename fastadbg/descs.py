#!/usr/bin/env python3

FASTA = (
    "FASTA file(s) to build the graph from. Can be given multiple times, and "
    "each value can be a comma-separated list of files."
)

KMER_LENGTH = "K-mer length."

COMPONENT = (
    "Component identifier to tag the graph with. Required unless "
    "--graph-per-record is used."
)

STRAND_SPECIFIC = "Input is strand-specific: don't add reverse complements."

GRAPH_PER_RECORD = (
    "Build a separate graph for each FASTA record. The component ID of each "
    "graph is taken from its record's accession (e.g. s_123 -> 123)."
)

TO_STRING = "Write a descriptive dump of each graph, not the Chrysalis format."

THREADS = "Number of worker threads (only used with --graph-per-record)."

MONITOR = "Verbosity: 1 logs progress, 2 logs details, 3 logs every sequence."

OUTPUT = "File to write graph(s) to. Defaults to stdout."
