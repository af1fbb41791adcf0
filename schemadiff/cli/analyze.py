"""CLI analyze command implementation.

This module implements the `schemadiff analyze` command, which loads an edit
script, runs the edit operation analyzer and prints the semantic report as
a table or as JSON.
"""

import json
import sys
import traceback

from rich.console import Console
from rich.markup import escape
from rich.table import Table
import rich_click as click

from ..analysis import EditOperationAnalysisResult, analyze_edits
from ..config import get_settings
from ..core.errors import InternalConsistencyError
from ..core.logging import bind_context, clear_context, configure_logging, get_logger
from ..loader import EditScriptLoadError, load_edit_script
from .report import (
    KIND_SECTIONS,
    describe_detail,
    difference_status,
    result_to_dict,
)

# Create console for rich formatting - auto-detects if we're in interactive environment
console = Console()

logger = get_logger(__name__)

EXIT_LOAD_ERROR = 2
EXIT_INTERNAL_ERROR = 3

_STATUS_STYLES = {"added": "green", "removed": "red", "modified": "yellow"}


def _should_use_rich_formatting(force_colors: bool = False) -> bool:
    """Determine if we should use rich formatting based on environment."""
    return force_colors or console.is_terminal


def _output_table_format(
    result: EditOperationAnalysisResult, script: str, force_colors: bool
) -> None:
    """Output the analysis result as one table per type kind."""
    if result.is_empty():
        if _should_use_rich_formatting(force_colors):
            console.print(f"✅ [bold green]No schema differences[/bold green] in {script}")
        else:
            click.echo(f"No schema differences in {script}")
        return

    for kind, label in KIND_SECTIONS:
        differences = getattr(result, f"{kind}_differences")
        if not differences:
            continue

        if _should_use_rich_formatting(force_colors):
            table = Table(title=label, title_justify="left", show_lines=False)
            table.add_column("Name", style="bold cyan")
            table.add_column("Change")
            table.add_column("Details", style="dim")
            for name, difference in differences.items():
                status = difference_status(difference)
                details = getattr(difference, "details", ())
                table.add_row(
                    name,
                    f"[{_STATUS_STYLES[status]}]{status}[/{_STATUS_STYLES[status]}]",
                    "\n".join(describe_detail(detail) for detail in details),
                )
            console.print(table)
        else:
            click.echo(f"{label}:")
            for name, difference in differences.items():
                click.echo(f"  {name}: {difference_status(difference)}")
                for detail in getattr(difference, "details", ()):
                    click.echo(f"    - {describe_detail(detail)}")


def _output_json_format(result: EditOperationAnalysisResult) -> None:
    click.echo(json.dumps(result_to_dict(result), indent=2))


@click.command(name="analyze")
@click.argument(
    "script",
    type=click.Path(exists=True, dir_okay=False),
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default=None,
    help="Output format (defaults to SCHEMADIFF_OUTPUT_FORMAT or table)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level for diagnostics written to stderr",
)
@click.option(
    "--force-colors",
    is_flag=True,
    help="Use rich formatting even when stdout is not a terminal",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Show tracebacks for internal errors",
)
def analyze_command(
    script: str,
    output_format: str | None,
    log_level: str | None,
    force_colors: bool,
    verbose: bool,
) -> None:
    """🔍 **Analyze an edit script** and report semantic schema differences.

    Reads a YAML edit script (old and new schema graphs, vertex mapping and
    edit operations) and reports which types were added, removed or modified.

    \b
    Exit codes:
        0  analysis succeeded
        2  the edit script could not be loaded
        3  the edit operations violate the matcher contract

    \b
    Examples:
        schemadiff analyze edits.yaml
        schemadiff analyze edits.yaml --format json
    """
    settings = get_settings()
    configure_logging(
        environment=settings.environment,
        log_level=log_level or settings.log_level,
        json_logs=settings.json_logs,
    )
    output_format = (output_format or settings.output_format).lower()

    bind_context(script=script)
    try:
        edit_script = load_edit_script(script)
        result = analyze_edits(
            edit_script.old_graph,
            edit_script.new_graph,
            edit_script.edit_operations,
            edit_script.mapping,
        )
    except EditScriptLoadError as e:
        logger.error("Edit script load failed", error=str(e))
        console.print(
            f"❌ [bold red]Could not load edit script:[/bold red] {escape(str(e))}"
        )
        sys.exit(EXIT_LOAD_ERROR)
    except InternalConsistencyError as e:
        logger.error("Edit operation analysis aborted", error=str(e))
        console.print(f"❌ [bold red]Analysis aborted:[/bold red] {escape(str(e))}")
        if verbose:
            console.print("\n[dim]Traceback:[/dim]")
            console.print(traceback.format_exc())
        sys.exit(EXIT_INTERNAL_ERROR)
    finally:
        clear_context()

    if output_format == "json":
        _output_json_format(result)
    else:
        _output_table_format(result, script, force_colors)
