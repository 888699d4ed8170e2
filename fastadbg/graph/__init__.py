from .kmer_graph import KmerGraph

__all__ = ["KmerGraph"]
