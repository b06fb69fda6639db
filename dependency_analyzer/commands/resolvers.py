"""Commands for inspecting the resolver registry."""

from __future__ import annotations

from pathlib import Path

import click
from rich.table import Table

from ..console import console
from ..discovery import select_resolver
from ..registry import create_default_registry
from ..utils.error_format import escape_markup


@click.command("resolvers")
def list_resolvers():
    """List known resolvers in priority order."""
    registry = create_default_registry()

    table = Table(title="Resolvers (highest priority first)", show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Identifier", style="green")
    table.add_column("Language", style="yellow")
    table.add_column("Definition files", style="magenta")
    table.add_column("Homepage", style="dim")

    for position, resolver in enumerate(registry, start=1):
        table.add_row(
            str(position),
            resolver.identifier(),
            resolver.primary_language,
            ", ".join(resolver.globs_for_definition_files),
            resolver.homepage_url,
        )

    console.print(table)


@click.command("match")
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
def match_paths(paths: tuple[Path, ...]):
    """Show which resolvers match each PATH and which one discovery would use."""
    registry = create_default_registry()

    for path in paths:
        candidates = registry.matching(path)
        if not candidates:
            console.print(f"[dim]{escape_markup(path)}: no matching resolver[/dim]")
            continue

        selected = select_resolver(registry, path)
        names = ", ".join(r.identifier() for r in candidates)
        console.print(
            f"{escape_markup(path)}: {escape_markup(names)} [green]→ {escape_markup(selected.identifier())}[/green]"
        )
