"""apiref index command - build index.json for a corpus directory."""

from pathlib import Path

import click
from rich.console import Console

from apiref.core.errors import ApiRefError
from apiref.reference.index import INDEX_FILE_NAME, build_index, find_documents, write_index


@click.group()
def index_group() -> None:
    """Manage API reference indexes."""


@index_group.command("build")
@click.argument("corpus_dir", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Index file to write (default: CORPUS_DIR/{INDEX_FILE_NAME})",
)
def build_command(corpus_dir: Path, output: Path | None) -> None:
    """Build an index over every *.api.json file in CORPUS_DIR."""
    console = Console(stderr=True)
    documents = find_documents(corpus_dir)
    if not documents:
        raise click.ClickException(f"No API JSON files found in {corpus_dir}")

    try:
        index = build_index(corpus_dir, documents)
    except ApiRefError as e:
        raise click.ClickException(e.message) from e

    target = output or corpus_dir / INDEX_FILE_NAME
    write_index(index, target)
    console.print(f"[green]✓[/green] Indexed {len(index)} symbols from {len(documents)} documents")
    console.print(f"  [dim]{target}[/dim]")
