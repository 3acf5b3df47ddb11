"""Resolver cache per framework version and the lookup entry points.

One SymbolResolver exists per ``<framework>-<version>`` key for the life of
the process. Creating one loads its index, so concurrent first requests for
the same key are collapsed into a single creation.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

import structlog

from apiref.reference.corpus import CorpusProvider, LocalCorpusProvider
from apiref.reference.formatter import FormattedSymbol
from apiref.reference.frameworks import parse_framework, validate_version
from apiref.reference.normalize import validate_query
from apiref.reference.resolver import SymbolResolver
from apiref.reference.type_info import TypeInfoNode

log = structlog.get_logger(__name__)


class ProviderCache:
    """Lazily created resolvers keyed by framework and version."""

    def __init__(self, corpus_provider: CorpusProvider | None = None) -> None:
        self._corpus_provider = corpus_provider or LocalCorpusProvider()
        self._resolvers: dict[str, SymbolResolver] = {}
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._resolvers)

    async def get(self, framework: str, version: str) -> SymbolResolver:
        """Return the resolver for *framework* and *version*, creating it once.

        Raises:
            InvalidInputError: If the framework or version is not acceptable.
            NotFoundError: If no corpus exists for this version.
        """
        fw = parse_framework(framework)
        ver = validate_version(version)
        key = f"{fw.value}-{ver}"
        if (resolver := self._resolvers.get(key)) is not None:
            return resolver

        async with self._lock:
            if (resolver := self._resolvers.get(key)) is not None:
                return resolver

            corpus_dir = await self._corpus_provider.get_corpus_dir(fw, ver)
            resolver = await SymbolResolver.create(corpus_dir)
            self._resolvers[key] = resolver
            log.info(
                "provider_created",
                framework=fw.value,
                version=ver,
                corpus=str(corpus_dir),
                symbols=len(resolver.index),
            )
            return resolver

    def clear(self) -> None:
        self._resolvers.clear()


_default_cache: ProviderCache | None = None


def get_provider_cache() -> ProviderCache:
    """Process-wide cache backed by the default local corpus location."""
    global _default_cache
    if _default_cache is None:
        _default_cache = ProviderCache()
    return _default_cache


def set_provider_cache(cache: ProviderCache | None) -> None:
    """Replace the process-wide cache. None resets it to the default on next use."""
    global _default_cache
    _default_cache = cache


def _cache_or_default(cache: ProviderCache | None) -> ProviderCache:
    # An empty cache is falsy, so test for None explicitly
    return cache if cache is not None else get_provider_cache()


def _as_list(result: FormattedSymbol | list[FormattedSymbol]) -> list[FormattedSymbol]:
    return result if isinstance(result, list) else [result]


def _as_node(node: TypeInfoNode | Mapping[str, Any]) -> TypeInfoNode:
    return node if isinstance(node, TypeInfoNode) else TypeInfoNode.from_dict(node)


async def get_api_reference(
    query: str, framework: str, version: str, *, cache: ProviderCache | None = None
) -> list[FormattedSymbol]:
    """Look up *query* and return every matching record in full."""
    validate_query(query)
    resolver = await _cache_or_default(cache).get(framework, version)
    return _as_list(await resolver.find_symbol(query))


async def get_api_reference_summary(
    query: str, framework: str, version: str, *, cache: ProviderCache | None = None
) -> list[FormattedSymbol]:
    """Look up *query* and return abbreviated records for top-level symbols."""
    validate_query(query)
    resolver = await _cache_or_default(cache).get(framework, version)
    return _as_list(await resolver.find_symbol_and_summarize(query))


async def get_api_reference_for_type_info(
    node: TypeInfoNode | Mapping[str, Any],
    framework: str,
    version: str,
    *,
    cache: ProviderCache | None = None,
) -> FormattedSymbol:
    resolver = await _cache_or_default(cache).get(framework, version)
    return await resolver.symbol_for_type_info(_as_node(node))


async def get_api_reference_summary_for_type_info(
    node: TypeInfoNode | Mapping[str, Any],
    framework: str,
    version: str,
    *,
    cache: ProviderCache | None = None,
) -> FormattedSymbol:
    resolver = await _cache_or_default(cache).get(framework, version)
    return await resolver.symbol_for_type_info_and_summarize(_as_node(node))
