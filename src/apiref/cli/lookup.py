"""apiref lookup / type-info commands - query the API reference."""

import asyncio
import json
from collections.abc import Callable, Coroutine
from pathlib import Path
from typing import IO, Any, TypeVar

import click
import structlog
from rich.console import Console

from apiref.config.loader import load_config
from apiref.config.models import ApiRefConfig
from apiref.core.errors import ApiRefError, ConfigError, is_client_error
from apiref.core.logging import clear_request_id, configure_logging, set_request_id
from apiref.reference.corpus import LocalCorpusProvider
from apiref.reference.formatter import FormattedSymbol
from apiref.reference.frameworks import parse_framework
from apiref.reference.providers import (
    ProviderCache,
    get_api_reference,
    get_api_reference_for_type_info,
    get_api_reference_summary,
    get_api_reference_summary_for_type_info,
)
from apiref.reference.type_info import TypeInfoNode
from apiref.reference.uri import create_uri_for_symbol

log = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])
T = TypeVar("T")


def corpus_options(func: F) -> F:
    """Options selecting the framework version and its data directory."""
    func = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        help="YAML config file (default: ~/.config/apiref/config.yaml)",
    )(func)
    func = click.option(
        "--json", "as_json", is_flag=True, help="Print raw JSON instead of rendered output"
    )(func)
    func = click.option(
        "--summary/--full",
        default=None,
        help="Abbreviate top-level symbols (default: lookup.summarize from config)",
    )(func)
    func = click.option(
        "--data-dir",
        type=click.Path(file_okay=False, path_type=Path),
        help="Root data directory (default: $UI5_DATA_DIR or ~/.ui5)",
    )(func)
    func = click.option(
        "--version", "framework_version", help="Framework version (default per framework)"
    )(func)
    func = click.option("-f", "--framework", help="OpenUI5 or SAPUI5")(func)
    return func


def _load(config_path: Path | None, data_dir: Path | None) -> ApiRefConfig:
    overrides: dict[str, Any] = {}
    if data_dir is not None:
        overrides["corpus"] = {"data_dir": str(data_dir)}
    try:
        config = load_config(config_path, **overrides)
    except ConfigError as e:
        raise click.ClickException(e.message) from e

    logging_config = config.logging
    root = click.get_current_context().find_root()
    if (root.obj or {}).get("verbose"):
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config)
    return config


def _resolve_target(
    config: ApiRefConfig, framework: str | None, framework_version: str | None
) -> tuple[str, str]:
    try:
        fw = parse_framework(framework or config.corpus.default_framework)
    except ApiRefError as e:
        raise click.ClickException(e.message) from e
    return fw.value, framework_version or config.corpus.default_version(fw.value)


def _run(operation: Callable[[], Coroutine[Any, Any, T]]) -> T:
    set_request_id()
    try:
        return asyncio.run(operation())
    except ApiRefError as e:
        if not is_client_error(e):
            log.error("lookup_failed", **e.to_dict())
            raise click.ClickException(str(e)) from e
        raise click.ClickException(e.message) from e
    finally:
        clear_request_id()


def _emit(
    records: list[FormattedSymbol], framework: str, version: str, *, as_json: bool
) -> None:
    results = [
        {"uri": create_uri_for_symbol(record, framework, version), "symbol": record}
        for record in records
    ]
    if as_json:
        click.echo(json.dumps(results, indent=2))
        return

    console = Console()
    for result in results:
        console.rule(f"[bold]{result['symbol'].get('name', '')}[/bold]")
        console.print(f"[cyan]{result['uri']}[/cyan]")
        console.print_json(data=result["symbol"])


@click.command()
@click.argument("query")
@corpus_options
def lookup_command(
    query: str,
    framework: str | None,
    framework_version: str | None,
    data_dir: Path | None,
    summary: bool | None,
    as_json: bool,
    config_path: Path | None,
) -> None:
    """Look up QUERY in the UI5 API reference.

    QUERY is a symbol, module or field, e.g. sap.m.Button, sap/m/library
    or sap.m.Button#text.
    """
    config = _load(config_path, data_dir)
    fw, version = _resolve_target(config, framework, framework_version)
    summarize = config.lookup.summarize if summary is None else summary
    cache = ProviderCache(LocalCorpusProvider(config.corpus))
    lookup = get_api_reference_summary if summarize else get_api_reference

    records = _run(lambda: lookup(query, fw, version, cache=cache))
    _emit(records, fw, version, as_json=as_json)


@click.command()
@click.argument("node_file", type=click.File("r"))
@corpus_options
def type_info_command(
    node_file: IO[str],
    framework: str | None,
    framework_version: str | None,
    data_dir: Path | None,
    summary: bool | None,
    as_json: bool,
    config_path: Path | None,
) -> None:
    """Resolve an analyzer type info node read from NODE_FILE ("-" for stdin)."""
    try:
        node = TypeInfoNode.from_dict(json.load(node_file))
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid type info JSON: {e}") from e
    except (KeyError, TypeError, AttributeError) as e:
        raise click.ClickException(f"Malformed type info node: {e!r}") from e

    config = _load(config_path, data_dir)
    fw, version = _resolve_target(config, framework, framework_version)
    summarize = config.lookup.summarize if summary is None else summary
    cache = ProviderCache(LocalCorpusProvider(config.corpus))
    lookup = (
        get_api_reference_summary_for_type_info if summarize else get_api_reference_for_type_info
    )

    record = _run(lambda: lookup(node, fw, version, cache=cache))
    _emit([record], fw, version, as_json=as_json)
