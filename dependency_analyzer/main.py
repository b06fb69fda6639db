"""dependency-analyzer - resolve the dependencies of multi-ecosystem projects."""

import click

from .commands.analyze import analyze
from .commands.resolvers import list_resolvers
from .commands.resolvers import match_paths


@click.group(invoke_without_command=True)
@click.version_option(package_name="dependency-analyzer")
@click.pass_context
def cli(ctx):
    """Dependency analyzer - finds definition files and resolves their dependencies."""
    if ctx.invoked_subcommand is None:
        click.echo("\n" + ctx.get_help())
        ctx.exit()


cli.add_command(analyze)
cli.add_command(list_resolvers)
cli.add_command(match_paths)


def main():
    """Entry point for the console script."""
    cli()


if __name__ == "__main__":
    main()
