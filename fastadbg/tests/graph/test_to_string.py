from fastadbg.graph import KmerGraph


def test_to_string_empty():
    g = KmerGraph(3)
    assert g.to_string() == "KmerGraph (k = 3): 0 k-mers, 0 edges\n"


def test_to_string_acgtacgt():
    g = KmerGraph(4)
    g.add_sequence("ACGTACGT")
    assert g.to_string() == (
        "KmerGraph (k = 4): 4 k-mers, 4 edges\n"
        "ACGT (count: 2)\n"
        "  -> CGTA (count: 1)\n"
        "CGTA (count: 1)\n"
        "  -> GTAC (count: 1)\n"
        "GTAC (count: 1)\n"
        "  -> TACG (count: 1)\n"
        "TACG (count: 1)\n"
        "  -> ACGT (count: 1)\n"
    )


def test_to_string_branching_sorted():
    g = KmerGraph(2)
    # Add these in "backwards" order to make sure that output is sorted
    g.add_sequence("TG")
    g.add_sequence("AT")
    g.add_sequence("AC")
    g.add_sequence("AA")
    assert g.to_string() == (
        "KmerGraph (k = 2): 4 k-mers, 0 edges\n"
        "AA (count: 1)\n"
        "AC (count: 1)\n"
        "AT (count: 1)\n"
        "TG (count: 1)\n"
    )
    g.add_sequence("TGT")
    g.add_sequence("TGA")
    g.add_sequence("TGC")
    assert g.to_string() == (
        "KmerGraph (k = 2): 7 k-mers, 3 edges\n"
        "AA (count: 1)\n"
        "AC (count: 1)\n"
        "AT (count: 1)\n"
        "GA (count: 1)\n"
        "GC (count: 1)\n"
        "GT (count: 1)\n"
        "TG (count: 4)\n"
        "  -> GA (count: 1)\n"
        "  -> GC (count: 1)\n"
        "  -> GT (count: 1)\n"
    )


def test_to_string_deterministic():
    seqs = ["ACGTTGCA", "TTGACCA", "GGGACGT"]
    g1 = KmerGraph(3)
    for s in seqs:
        g1.add_sequence(s)
    g2 = KmerGraph(3)
    for s in reversed(seqs):
        g2.add_sequence(s)
    assert g1.to_string() == g2.to_string()
