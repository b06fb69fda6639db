"""Clean error display for resolver failures."""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..errors import ConfigurationError
from ..errors import PrerequisiteError
from ..errors import ResolutionError
from ..errors import ResolverNotImplementedError
from ..utils.error_format import escape_markup
from ..utils.error_format import format_error_message


def classify_error(error: BaseException) -> str:
    """Name the kind of failure for display."""
    if isinstance(error, PrerequisiteError):
        return "Missing prerequisite"
    if isinstance(error, (ResolverNotImplementedError, NotImplementedError)):
        return "Not implemented"
    if isinstance(error, ResolutionError):
        return "Resolution failed"
    if isinstance(error, ConfigurationError):
        return "Configuration error"
    return "Unexpected error"


def _get_actionable_tip(error: BaseException) -> str | None:
    """Generate an actionable tip based on the error."""
    if isinstance(error, PrerequisiteError) and error.command:
        return f"Install '{error.command}' and make sure it is on PATH"
    if isinstance(error, (ResolverNotImplementedError, NotImplementedError)):
        return "Exclude this resolver with --resolvers until it supports these definition files"
    if isinstance(error, ResolutionError):
        return f"Check the definition file: {error.definition_file}"
    return None


def display_resolution_error(
    console: Console, identifier: str, error: BaseException, verbose: bool = False
) -> None:
    """
    Display a resolver failure with clean Rich formatting.

    Args:
        console: Rich console for output
        identifier: Identifier of the failed resolver
        error: The error that aborted the resolver's run
        verbose: If True, also print traceback
    """
    content = Text()

    content.append("Resolver: ", style="dim")
    content.append(identifier, style="bold cyan")
    content.append("\n")

    content.append("Kind: ", style="dim")
    content.append(classify_error(error), style="yellow")
    content.append("\n\n")

    content.append(format_error_message(error), style="red")

    console.print()
    console.print(
        Panel(
            content,
            title="[bold red]Dependency Resolution Failed[/bold red]",
            border_style="red",
            padding=(1, 2),
        )
    )

    tip = _get_actionable_tip(error)
    if tip:
        console.print(f"[dim]Tip: {escape_markup(tip)}[/dim]")
    console.print("[dim]No results were recorded for this resolver.[/dim]")

    if verbose:
        console.print("[dim]─── Traceback ───[/dim]")
        console.print_exception()
