#!/usr/bin/env python3

import click
from . import __version__, defaults, descs, config, main
from .errors import FastaDBGError


@click.command(
    context_settings={
        # Make fastadbg -h (or just fastadbg by itself) show the help text
        "help_option_names": ["-h", "--help"],
        "max_content_width": 87,
    },
    no_args_is_help=True,
)
@click.option(
    "-f",
    "--fasta",
    type=str,
    required=True,
    multiple=True,
    help=descs.FASTA,
)
@click.option(
    "-k",
    "--kmer-length",
    type=click.IntRange(min=config.MIN_K),
    required=True,
    help=descs.KMER_LENGTH,
)
@click.option(
    "-c",
    "--component",
    type=click.IntRange(min=0),
    required=False,
    default=None,
    help=descs.COMPONENT,
)
@click.option(
    "--ss/--no-ss",
    "strand_specific",
    is_flag=True,
    default=defaults.STRAND_SPECIFIC,
    show_default=True,
    help=descs.STRAND_SPECIFIC,
)
@click.option(
    "--graph-per-record/--merged",
    is_flag=True,
    default=defaults.GRAPH_PER_RECORD,
    show_default=True,
    help=descs.GRAPH_PER_RECORD,
)
@click.option(
    "--to-string/--chrysalis",
    is_flag=True,
    default=defaults.TO_STRING,
    show_default=True,
    help=descs.TO_STRING,
)
@click.option(
    "-t",
    "--threads",
    type=click.IntRange(min=config.MIN_THREADS),
    default=defaults.THREADS,
    show_default=True,
    help=descs.THREADS,
)
@click.option(
    "-m",
    "--monitor",
    type=click.IntRange(min=0),
    default=defaults.MONITOR,
    show_default=True,
    help=descs.MONITOR,
)
@click.option(
    "-o",
    "--output",
    type=click.File("w"),
    default="-",
    help=descs.OUTPUT,
)
@click.version_option(__version__, "-v", "--version")
def run_script(
    fasta: tuple,
    kmer_length: int,
    component: int,
    strand_specific: bool,
    graph_per_record: bool,
    to_string: bool,
    threads: int,
    monitor: int,
    output,
) -> None:
    """Builds de Bruijn graph(s) of k-mers from FASTA file(s)."""
    # Fail before doing anything else, so that we show the usage message
    if not graph_per_record and component is None:
        raise click.UsageError(
            "-c / --component is required unless --graph-per-record is used."
        )
    try:
        main.run(
            fasta=list(fasta),
            kmer_length=kmer_length,
            component=component,
            strand_specific=strand_specific,
            graph_per_record=graph_per_record,
            to_string=to_string,
            threads=threads,
            monitor=monitor,
            output=output,
        )
    except (FastaDBGError, OSError, ValueError) as err:
        raise click.ClickException(str(err))


if __name__ == "__main__":
    run_script()
