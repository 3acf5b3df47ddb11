"""UI5 API reference lookup: index, documents, resolution and formatting."""

from apiref.reference.corpus import CorpusProvider, LocalCorpusProvider
from apiref.reference.formatter import FormattedSymbol, format_symbol, summarize_symbol
from apiref.reference.frameworks import Framework, parse_framework, validate_version
from apiref.reference.index import ApiIndex, IndexEntry, build_index, write_index
from apiref.reference.providers import (
    ProviderCache,
    get_api_reference,
    get_api_reference_for_type_info,
    get_api_reference_summary,
    get_api_reference_summary_for_type_info,
    get_provider_cache,
    set_provider_cache,
)
from apiref.reference.resolver import SymbolResolver
from apiref.reference.type_info import TypeInfoKind, TypeInfoNode
from apiref.reference.uri import create_uri_for_symbol

__all__ = [
    "ApiIndex",
    "CorpusProvider",
    "FormattedSymbol",
    "Framework",
    "IndexEntry",
    "LocalCorpusProvider",
    "ProviderCache",
    "SymbolResolver",
    "TypeInfoKind",
    "TypeInfoNode",
    "build_index",
    "create_uri_for_symbol",
    "format_symbol",
    "get_api_reference",
    "get_api_reference_for_type_info",
    "get_api_reference_summary",
    "get_api_reference_summary_for_type_info",
    "get_provider_cache",
    "parse_framework",
    "set_provider_cache",
    "summarize_symbol",
    "validate_version",
    "write_index",
]
