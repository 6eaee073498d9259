from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

import click
import coloredlogs

from .config import STDOUT_PATH
from .modules.results_loader import load_results
from .modules.tbl_writer import GenbankTblFileWriter
from .utils.exceptions import FeatureTableError

log = logging.getLogger(__name__)


def run_pipeline(input_path: Path, output: str | Path = STDOUT_PATH) -> dict:
    results = load_results(input_path)

    feature_counts: Counter[str] = Counter()
    n_written = 0
    with GenbankTblFileWriter(output) as writer:
        for result in results:
            annotation = result.annotation
            writer.write_annotation(annotation)
            if annotation.is_empty():
                log.info("%s: no genes, skipped", result.seq_name or "<unnamed>")
                continue
            n_written += 1
            feature_counts["gene"] += len(annotation.genes)
            feature_counts["CDS"] += sum(len(gene.cdses) for gene in annotation.genes)

    return {
        "input": str(input_path),
        "output": str(output),
        "n_results": len(results),
        "n_blocks": n_written,
        "feature_counts": dict(feature_counts),
    }


@click.command()
@click.argument("input_json", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output",
    "-o",
    default=STDOUT_PATH,
    show_default=True,
    help="feature table path, '-' for standard output",
)
@click.option("--debug", is_flag=True, default=False)
def cli(input_json: Path, output: str, debug: bool):
    """Write the annotations in INPUT_JSON as a Genbank feature table."""
    coloredlogs.install(level=logging.DEBUG if debug else logging.INFO)
    try:
        summary = run_pipeline(input_path=input_json, output=output)
    except FeatureTableError as exc:
        raise click.ClickException(str(exc)) from exc

    to_stderr = output == STDOUT_PATH
    click.echo(f"Feature table: {summary['output']}", err=to_stderr)
    click.echo(f"Blocks: {summary['n_blocks']} of {summary['n_results']} results", err=to_stderr)
    for feature_name, count in summary["feature_counts"].items():
        click.echo(f"- {feature_name}: {count}", err=to_stderr)


if __name__ == "__main__":
    cli()
