"""The analyze command - discover definition files and resolve their dependencies."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.table import Table

from ..console import console
from ..discovery import DEFAULT_EXCLUDES
from ..discovery import find_definition_files
from ..errors import AnalyzerError
from ..errors import ConfigurationError
from ..logging_setup import init_json_logging
from ..models import ResolutionResult
from ..orchestrator import resolve_dependencies
from ..output import OutputFormat
from ..output import result_path
from ..output import write_results
from ..registry import ResolverRegistry
from ..registry import create_default_registry
from ..settings import AnalyzerSettings
from ..ui.error_display import display_resolution_error
from ..utils.error_format import escape_markup
from ..utils.error_format import format_error_message

logger = logging.getLogger(__name__)


def _split_identifiers(value: str | None) -> list[str] | None:
    if value is None:
        return None
    return [part.strip() for part in value.split(",") if part.strip()]


def _build_registry(requested: list[str] | None) -> ResolverRegistry:
    registry = create_default_registry()
    if requested is None:
        return registry
    if not requested:
        raise ConfigurationError(
            f"No resolvers selected. Available resolvers: {', '.join(registry.identifiers())}"
        )
    return registry.select(requested)


@click.command("analyze")
@click.option(
    "--input-dir",
    "-i",
    required=True,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Project directory to analyze",
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for the result file (default: <input-dir>/.analyzer)",
)
@click.option(
    "--output-format",
    "-f",
    type=click.Choice([f.value for f in OutputFormat]),
    default=None,
    help="Result file format (default: from settings, else yaml)",
)
@click.option("--resolvers", "-r", help="Comma-separated resolver identifiers to run (default: all)")
@click.option("--overwrite", is_flag=True, help="Replace an existing result file")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level for the JSONL log file",
)
@click.option("--verbose", "-v", is_flag=True, help="Show tracebacks for failed resolvers")
def analyze(
    input_dir: Path,
    output_dir: Path | None,
    output_format: str | None,
    resolvers: str | None,
    overwrite: bool,
    log_level: str | None,
    verbose: bool,
):
    """Resolve the dependencies of every definition file in a project."""
    project_dir = input_dir.resolve()

    try:
        settings = AnalyzerSettings()
        log_settings = settings.get_log_settings()
        init_json_logging(path=log_settings.get("path"), level=log_level or log_settings.get("level"))

        requested = _split_identifiers(resolvers)
        registry = _build_registry(requested if requested is not None else settings.get_enabled_resolvers())
        fmt = OutputFormat(output_format or settings.get_output_format() or OutputFormat.YAML.value)
        exclude_dirs = DEFAULT_EXCLUDES | set(settings.get_exclude_dirs())

        definition_files = find_definition_files(project_dir, registry, exclude_dirs=exclude_dirs)
    except (ConfigurationError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape_markup(format_error_message(e, include_type=False))}")
        sys.exit(2)

    target_dir = output_dir or project_dir / ".analyzer"
    existing = result_path(target_dir, fmt)
    if not overwrite and existing.exists():
        console.print(
            f"[red]Error:[/red] Result file '{escape_markup(existing)}' already exists, use --overwrite to replace it"
        )
        sys.exit(1)

    if not definition_files:
        console.print(f"[yellow]No definition files found in {escape_markup(project_dir)}[/yellow]")

    results: dict[str, ResolutionResult] = {}
    failures: dict[str, BaseException] = {}

    # Resolvers run one after another; each one succeeds or fails as a whole
    for resolver, files in definition_files.items():
        identifier = resolver.identifier()
        console.print(f"[dim]Resolving {len(files)} {escape_markup(identifier)} definition file(s)...[/dim]")
        try:
            results[identifier] = resolve_dependencies(resolver, project_dir, files)
        except (AnalyzerError, NotImplementedError) as e:
            logger.error(f"{identifier} failed: {format_error_message(e)}", extra={"resolver": identifier})
            failures[identifier] = e
            display_resolution_error(console, identifier, e, verbose=verbose)

    _print_summary(project_dir, definition_files, results, failures)

    try:
        output_file = write_results(project_dir, results, target_dir, fmt, overwrite=overwrite)
    except FileExistsError as e:
        console.print(f"[red]Error:[/red] {escape_markup(e)}")
        sys.exit(1)

    console.print(f"[green]✓ Results written to {escape_markup(output_file)}[/green]")

    if failures:
        sys.exit(1)


def _print_summary(
    project_dir: Path,
    definition_files: dict,
    results: dict[str, ResolutionResult],
    failures: dict[str, BaseException],
) -> None:
    table = Table(
        title=f"Dependency Resolution: {escape_markup(project_dir)}",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Resolver", style="green")
    table.add_column("Definition files", justify="right")
    table.add_column("Dependencies", justify="right")
    table.add_column("Status")

    for resolver, files in definition_files.items():
        identifier = resolver.identifier()
        if identifier in results:
            count = sum(graph.dependency_count() for graph in results[identifier].values())
            table.add_row(identifier, str(len(files)), str(count), "[green]resolved[/green]")
        elif identifier in failures:
            kind = type(failures[identifier]).__name__
            table.add_row(identifier, str(len(files)), "-", f"[red]failed[/red] [dim]({kind})[/dim]")

    console.print()
    console.print(table)
