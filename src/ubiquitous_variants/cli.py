"""Command-line interface for ubiquitous-variants.

ARCHITECTURE:
    CLI options → RunSettings → UbiquityEngine → variant lines on stdout

Key Design:
- Typer framework for auto-help and type validation
- Arguments validated before any sample file is opened
- Log messages on stderr, results on stdout
- Any error is logged and exits with code 1; no partial results are printed
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv

from ubiquitous_variants.config import RunSettings
from ubiquitous_variants.constants import DEFAULT_ANNOTATION_FIELD, DEFAULT_THRESHOLD
from ubiquitous_variants.engine import UbiquityEngine
from ubiquitous_variants.exceptions import UbiquitousVariantsError
from ubiquitous_variants.utils.logging_config import configure_logging

load_dotenv()

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="ubiquitous-variants",
    help="A tool for identifying ubiquitous variants in bcf files.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        from ubiquitous_variants import __version__
        typer.echo(f"ubiquitous-variants version {__version__}")
        raise typer.Exit()


@app.command()
def identify(
    bcf_paths: Optional[List[Path]] = typer.Option(None, "--bcf-paths", "-b", help="bcf files to be inspected (repeat for each file)"),
    threshold: float = typer.Option(
        DEFAULT_THRESHOLD, "--threshold", "-t", envvar="UBIQUITOUS_THRESHOLD",
        help="Minimum fraction of samples carrying a variant for it to be considered ubiquitous (0.0-1.0, exclusive)",
    ),
    ann_field: str = typer.Option(DEFAULT_ANNOTATION_FIELD, "--ann-field", envvar="UBIQUITOUS_ANN_FIELD", help="INFO field holding transcript annotations"),
    sort: bool = typer.Option(True, "--sort/--no-sort", help="Order output by gene and protein change"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also save the report as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log per-sample statistics"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True, help="Show version information"),
) -> None:
    """Report (gene, HGVSp) pairs whose prevalence across samples exceeds the threshold."""
    configure_logging(verbose)

    try:
        settings = RunSettings.from_arguments(
            bcf_paths=bcf_paths or [],
            threshold=threshold,
            annotation_field=ann_field,
            sort=sort,
        )
        report = UbiquityEngine(settings).run()
    except UbiquitousVariantsError as e:
        logger.error(f"{type(e).__name__}: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if output:
        try:
            with open(output, "w") as f:
                json.dump(report.model_dump(mode="json"), f, indent=2)
        except OSError as e:
            logger.error(f"Could not write report: {e}")
            typer.echo(f"Error: could not write report to {output}: {e}", err=True)
            raise typer.Exit(1)
        logger.info(f"Report saved to {output}")

    for line in report.to_lines():
        typer.echo(line)


if __name__ == "__main__":
    app()
