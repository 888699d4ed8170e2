# Builds k-mer graphs from FASTA files and writes them out.
#
# There are two ways of doing this:
#
# - Merged mode (run_merged()): every record in every FASTA file gets added to
#   one big graph, which is written out once at the end. All of the records
#   modify the same graph, so this is done in a single thread.
#
# - Per-record mode (run_per_record()): each record gets its own graph, which
#   is written out as soon as it's built. Since these graphs are independent,
#   we can build them in parallel: a pool of worker threads repeatedly (1)
#   takes the next record from the FASTA file(s), (2) builds a graph for it,
#   and (3) writes the graph out. Steps (1) and (3) are done while holding a
#   lock; step (2) isn't, since nobody else can see the graph being built.
#   The order in which graphs are written out is therefore not guaranteed,
#   but each graph's output is self-contained (and tagged with its component
#   ID), so this shouldn't matter.

import logging
import threading
from collections import namedtuple
from concurrent.futures import ThreadPoolExecutor
from . import config
from .graph import KmerGraph
from .fasta_utils import read_fastas
from .name_utils import get_component_id
from .seq_utils import split_bundles, sanitize, reverse_complement
from .misc_utils import pluralize
from .errors import AccessionParsingError


RunSummary = namedtuple(
    "RunSummary", ["num_records", "num_graphs", "num_skipped"]
)


def add_record_to_graph(graph, sequence, strand_specific, log_sequences=False):
    """Adds a (possibly bundled) FASTA record's sequence to a graph.

    Parameters
    ----------
    graph: KmerGraph

    sequence: str
        Raw sequence of the record. This is split on config.BUNDLE_DELIM, and
        each bundle is sanitized and added to the graph separately -- so no
        k-mers or edges span a delimiter.

    strand_specific: bool
        If False, we'll also add the reverse complement of each bundle.

    log_sequences: bool
        If True, log (at the DEBUG level) every sequence added to the graph.
        This can produce a LOT of output.

    Returns
    -------
    int
        Number of bundles that the sequence was split into.
    """
    logger = logging.getLogger(__name__)
    bundles = split_bundles(sequence)
    for bundle in bundles:
        bundle = sanitize(bundle)
        if log_sequences:
            logger.debug(f"Adding sequence to graph: {bundle}")
        graph.add_sequence(bundle)
        if not strand_specific:
            revseq = reverse_complement(bundle)
            if log_sequences:
                logger.debug(f"Adding sequence to graph: {revseq}")
            graph.add_sequence(revseq)
    return len(bundles)


def serialize(graph, component_id, strand_specific, to_string):
    if to_string:
        return graph.to_string()
    return graph.to_chrysalis_format(component_id, strand_specific)


def build_merged_graph(fasta_fps, k, strand_specific, monitor=0):
    """Returns a KmerGraph of all records in all of the given FASTA files."""
    logger = logging.getLogger(__name__)
    log_sequences = monitor >= config.MONITOR_SEQS
    graph = KmerGraph(k)
    num_records = 0
    for accession, sequence in read_fastas(fasta_fps):
        add_record_to_graph(graph, sequence, strand_specific, log_sequences)
        num_records += 1
    logger.info(
        f"Built a graph from {pluralize(num_records, 'record')}: "
        f"{graph.summarize()}."
    )
    return graph


def run_merged(
    fasta_fps,
    k,
    component_id,
    strand_specific,
    to_string,
    out,
    monitor=0,
):
    """Builds one graph from all of the input FASTA files and writes it to out.

    Nothing is written until every record has been read, so if reading one
    of the files fails then out is left untouched.

    Returns
    -------
    KmerGraph
        The graph that was written out.
    """
    graph = build_merged_graph(fasta_fps, k, strand_specific, monitor=monitor)
    out.write(serialize(graph, component_id, strand_specific, to_string))
    return graph


def run_per_record(
    fasta_fps,
    k,
    strand_specific,
    to_string,
    out,
    threads=1,
    monitor=0,
):
    """Builds and writes out a separate graph for every input FASTA record.

    The component ID of each graph is extracted from its record's accession
    (see name_utils.get_component_id()). Records whose accessions don't
    contain a component ID are skipped, with a warning; this doesn't affect
    any other records.

    Parameters
    ----------
    fasta_fps: list of str

    k: int

    strand_specific: bool

    to_string: bool
        If True, write graphs using KmerGraph.to_string(); otherwise, use
        KmerGraph.to_chrysalis_format().

    out: io.TextIOBase
        Where graphs are written. Each graph is written in a single call to
        out.write(), while holding a lock.

    threads: int
        Number of worker threads to use. Must be at least 1.

    monitor: int
        Verbosity level.

    Returns
    -------
    RunSummary
        Number of records read, number of graphs written, and number of
        records skipped due to bad accessions.

    Raises
    ------
    ValueError
        If threads < 1.

    Any error raised while reading the FASTA files (e.g. an OSError) is
    re-raised here once all of the workers have stopped.
    """
    if threads < config.MIN_THREADS:
        raise ValueError(f"Number of threads must be at least 1: {threads}")
    logger = logging.getLogger(__name__)
    log_sequences = monitor >= config.MONITOR_SEQS

    records = read_fastas(fasta_fps)
    record_lock = threading.Lock()
    out_lock = threading.Lock()

    def take_next_record():
        with record_lock:
            # If reading the file raised an error earlier, the generator is
            # finished, so other workers will just see that it's exhausted
            return next(records, None)

    def worker():
        num_records = 0
        num_graphs = 0
        num_skipped = 0
        while True:
            record = take_next_record()
            if record is None:
                return RunSummary(num_records, num_graphs, num_skipped)
            num_records += 1
            accession, sequence = record
            try:
                component_id = get_component_id(accession)
            except AccessionParsingError as ape:
                logger.warning(f"Skipping record: {ape}")
                num_skipped += 1
                continue
            graph = KmerGraph(k)
            add_record_to_graph(
                graph, sequence, strand_specific, log_sequences
            )
            payload = serialize(
                graph, component_id, strand_specific, to_string
            )
            with out_lock:
                out.write(payload)
            num_graphs += 1
            logger.debug(
                f"Wrote graph for component {component_id} ({accession}): "
                f"{graph.summarize()}."
            )

    with ThreadPoolExecutor(max_workers=threads) as executor:
        futures = [executor.submit(worker) for _ in range(threads)]
        # .result() re-raises anything a worker raised
        summaries = [f.result() for f in futures]

    summary = RunSummary(*(sum(vals) for vals in zip(*summaries)))
    logger.info(
        f"Read {pluralize(summary.num_records, 'record')}; wrote "
        f"{pluralize(summary.num_graphs, 'graph')}."
    )
    if summary.num_skipped > 0:
        logger.warning(
            f"Skipped {pluralize(summary.num_skipped, 'record')} with no "
            "component ID in their accession."
        )
    return summary
