from io import StringIO
from click.testing import CliRunner
from fastadbg import __version__
from fastadbg._cli import run_script
from fastadbg.parsers import parse_chrysalis, parse_chrysalis_file
from fastadbg.tests import utils


BUNDLES_FASTA = "fastadbg/tests/input/bundles.fa"


def test_no_args_shows_help():
    result = CliRunner().invoke(run_script, [])
    assert "Usage:" in result.output
    assert "--kmer-length" in result.output


def test_version():
    result = CliRunner().invoke(run_script, ["-v"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_merged_requires_component():
    result = CliRunner().invoke(run_script, ["-f", BUNDLES_FASTA, "-k", "3"])
    assert result.exit_code == 2
    assert (
        "-c / --component is required unless --graph-per-record is used."
        in result.output
    )


def test_kmer_length_required_and_positive():
    result = CliRunner().invoke(run_script, ["-f", BUNDLES_FASTA, "-c", "1"])
    assert result.exit_code == 2
    result = CliRunner().invoke(
        run_script, ["-f", BUNDLES_FASTA, "-c", "1", "-k", "0"]
    )
    assert result.exit_code == 2


def test_threads_must_be_positive():
    result = CliRunner().invoke(
        run_script,
        ["-f", BUNDLES_FASTA, "-k", "3", "--graph-per-record", "-t", "0"],
    )
    assert result.exit_code == 2


def test_missing_fasta(tmp_path):
    missing = str(tmp_path / "nope.fa")
    result = CliRunner().invoke(
        run_script, ["-f", f"{BUNDLES_FASTA},{missing}", "-k", "3", "-c", "1"]
    )
    assert result.exit_code == 1
    assert f"FASTA file {missing} doesn't exist." in result.output


def test_merged_to_stdout():
    result = CliRunner().invoke(
        run_script, ["-f", BUNDLES_FASTA, "-k", "2", "-c", "7", "--ss"]
    )
    assert result.exit_code == 0
    components = parse_chrysalis(StringIO(result.stdout))
    assert len(components) == 1
    assert components[0].component_id == 7
    assert components[0].strand_specific is True
    # s_1 gives AA x3, TT x3; s_2 gives AC x2, CG x2, GT x2, TA x1; s_3
    # (ACGTAAACGT) gives AC x2, CG x2, GT x2, TA x1, AA x2
    assert components[0].graph.get_node_counts() == {
        "AA": 5,
        "TT": 3,
        "AC": 4,
        "CG": 4,
        "GT": 4,
        "TA": 2,
    }


def test_merged_multiple_fasta_options(tmp_path):
    fp1 = utils.write_fasta(tmp_path / "a.fa", [("x", "AAAC")])
    fp2 = utils.write_fasta(tmp_path / "b.fa", [("y", "AAAC")])
    fp3 = utils.write_fasta(tmp_path / "c.fa", [("z", "AAAC")])
    out_fp = str(tmp_path / "out.txt")
    result = CliRunner().invoke(
        run_script,
        [
            "-f",
            f"{fp1},{fp2}",
            "-f",
            fp3,
            "-k",
            "3",
            "-c",
            "0",
            "-o",
            out_fp,
        ],
    )
    assert result.exit_code == 0
    components = parse_chrysalis_file(out_fp)
    assert len(components) == 1
    g = components[0].graph
    assert components[0].strand_specific is False
    # Each file contributes AAAC and its reverse complement, GTTT
    assert g.get_node_counts() == {"AAA": 3, "AAC": 3, "GTT": 3, "TTT": 3}
    assert g.get_edge_counts() == {("AAA", "AAC"): 3, ("GTT", "TTT"): 3}


def test_graph_per_record(tmp_path):
    fp = utils.write_fasta(
        tmp_path / "in.fa",
        [("s_10", "ACGTACGT"), ("bad", "ACGT"), ("s_20", "AAAAXTTTT")],
    )
    out_fp = str(tmp_path / "out.txt")
    result = CliRunner().invoke(
        run_script,
        [
            "-f",
            fp,
            "-k",
            "2",
            "--graph-per-record",
            "--ss",
            "-t",
            "3",
            "-o",
            out_fp,
        ],
    )
    assert result.exit_code == 0
    components = parse_chrysalis_file(out_fp)
    id2comp = {c.component_id: c for c in components}
    assert sorted(id2comp) == [10, 20]
    assert id2comp[20].graph.get_node_counts() == {"AA": 3, "TT": 3}
    assert id2comp[20].graph.get_edge_counts() == {
        ("AA", "AA"): 2,
        ("TT", "TT"): 2,
    }


def test_to_string(tmp_path):
    fp = utils.write_fasta(tmp_path / "in.fa", [("s_1", "ACGTACGT")])
    result = CliRunner().invoke(
        run_script, ["-f", fp, "-k", "4", "-c", "1", "--ss", "--to-string"]
    )
    assert result.exit_code == 0
    assert result.stdout == (
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
