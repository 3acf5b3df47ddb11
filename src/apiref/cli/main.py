"""apiref CLI - UI5 API reference lookup."""

import click

from apiref.cli.index import index_group
from apiref.cli.lookup import lookup_command, type_info_command
from apiref.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="apiref")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """apiref - Search versioned UI5 API reference documents."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    # Commands that load a config file replace this with its logging section
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(lookup_command, name="lookup")
cli.add_command(type_info_command, name="type-info")
cli.add_command(index_group, name="index")


if __name__ == "__main__":
    cli()
