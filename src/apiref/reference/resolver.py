"""Symbol resolution against one framework version's API reference.

Resolution of a text query runs a fixed fallback chain:

1. Exact index hit on the normalized query.
2. Dot-split retry: split off the last segment as a field name and retry
   the remainder, longest prefix first. Only the last split is kept.
3. Field lookup inside the found symbol.
4. Inheritance retry: ``<parent>#<field>`` for each declared parent.
5. Module containment: every symbol of the same document whose module is
   the query written as a module path (e.g. ``sap/m/library``).

Not-found results of step 4 are swallowed; the final miss is raised.
Integrity faults and load failures always propagate.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import structlog

from apiref.core.errors import InternalError, NotFoundError, TypeInfoError
from apiref.reference.documents import DocumentCache, SymbolDocument
from apiref.reference.fields import (
    ensure_type_info_owner,
    get_field_for_type_info,
    get_field_in_symbol,
)
from apiref.reference.formatter import FormattedSymbol, format_symbol, summarize_symbol
from apiref.reference.index import INDEX_FILE_NAME, ApiIndex, IndexEntry
from apiref.reference.models import SymbolInfo, SymbolRecord
from apiref.reference.normalize import normalize_for_index, normalize_for_module_name
from apiref.reference.type_info import TypeInfoNode, parse_type_info

log = structlog.get_logger(__name__)

Resolution = SymbolInfo | list[SymbolInfo]


def _format(info: SymbolInfo) -> FormattedSymbol:
    return format_symbol(info.symbol, info.library, info.module_name)


def _summarize(info: SymbolInfo) -> FormattedSymbol:
    # Fields are already compact; only top-level symbols get abbreviated
    if info.is_symbol and isinstance(info.symbol, SymbolRecord):
        return summarize_symbol(info.symbol, info.library, info.module_name)
    return _format(info)


class SymbolResolver:
    """Resolves queries and type info trees to symbol records.

    Holds the index and the document cache of one corpus directory. Safe to
    share between concurrent tasks: the index is read-only and the document
    cache serializes only cold loads.
    """

    def __init__(self, index: ApiIndex, documents: DocumentCache) -> None:
        self._index = index
        self._documents = documents

    @property
    def index(self) -> ApiIndex:
        return self._index

    @property
    def documents(self) -> DocumentCache:
        return self._documents

    @classmethod
    async def create(cls, corpus_dir: Path) -> SymbolResolver:
        """Load ``index.json`` from *corpus_dir* and bind a fresh document cache."""
        loop = asyncio.get_running_loop()
        index = await loop.run_in_executor(None, ApiIndex.load, corpus_dir / INDEX_FILE_NAME)
        return cls(index, DocumentCache(corpus_dir))

    # ------------------------------------------------------------------
    # Text queries
    # ------------------------------------------------------------------

    async def find_symbol(self, query: str) -> FormattedSymbol | list[FormattedSymbol]:
        result = await self.resolve(query)
        if isinstance(result, list):
            return [_format(info) for info in result]
        return _format(result)

    async def find_symbol_and_summarize(
        self, query: str
    ) -> FormattedSymbol | list[FormattedSymbol]:
        result = await self.resolve(query)
        if isinstance(result, list):
            return [_summarize(info) for info in result]
        return _summarize(result)

    async def resolve(self, query: str) -> Resolution:
        """Resolve *query* to one symbol/field, or to all symbols of a module.

        Raises:
            NotFoundError: If no fallback step yields a result, or the matched
                symbol is private/restricted.
            InternalError: If the index points at a missing document or symbol.
        """
        return await self._resolve(query, frozenset())

    async def _resolve(self, query: str, visited: frozenset[str]) -> Resolution:
        search_key = normalize_for_index(query)
        # Field names are matched case-insensitively but reported as written
        segments = normalize_for_index(query, lowercase=False).split(".")
        field_name: str | None = None
        entry = self._index.get(search_key)
        while entry is None:
            prefix, dot, _ = search_key.rpartition(".")
            if not dot:
                raise NotFoundError.symbol_not_found(query)
            search_key = prefix
            field_name = segments[search_key.count(".") + 1]
            entry = self._index.get(search_key)

        document, symbol = await self._load_symbol(entry)
        if not symbol.is_public:
            raise NotFoundError.not_public(symbol.name)

        if field_name is None:
            return SymbolInfo(symbol=symbol, library=document.library, module_name=symbol.module)

        found = get_field_in_symbol(symbol, field_name)
        if found is not None:
            return SymbolInfo(symbol=found, library=document.library, module_name=symbol.module)

        visited = visited | {symbol.name}
        for parent in symbol.extends:
            if parent in visited:
                continue
            try:
                return await self._resolve(f"{parent}#{field_name}", visited)
            except NotFoundError as e:
                log.debug(
                    "inherited_field_not_found", parent=parent, field=field_name, reason=e.message
                )

        module_matches = self._find_symbols_in_module(normalize_for_module_name(query), document)
        if module_matches:
            log.debug("module_containment_match", query=query, matches=len(module_matches))
            return module_matches

        raise NotFoundError.field_not_found(field_name, symbol.name, document.library)

    def _find_symbols_in_module(
        self, module_name: str, document: SymbolDocument
    ) -> list[SymbolInfo]:
        """All symbols of *document* exposed under *module_name* (lowercase path).

        Covers modules without a dedicated symbol, e.g. ``sap/ui/core/library``.
        """
        return [
            SymbolInfo(symbol=symbol, library=document.library, module_name=module_name)
            for symbol in document
            if symbol.module is not None and symbol.module.lower() == module_name
        ]

    async def _load_symbol(self, entry: IndexEntry) -> tuple[SymbolDocument, SymbolRecord]:
        document = await self._documents.get(entry.file_path)
        symbol = document.get(entry.name)
        if symbol is None:
            log.error("index_integrity_fault", name=entry.name, document=entry.file_path)
            raise InternalError.integrity_fault(entry.name, entry.file_path)
        return document, symbol

    # ------------------------------------------------------------------
    # Type info trees
    # ------------------------------------------------------------------

    async def symbol_for_type_info(self, node: TypeInfoNode) -> FormattedSymbol:
        return _format(await self.resolve_type_info(node))

    async def symbol_for_type_info_and_summarize(self, node: TypeInfoNode) -> FormattedSymbol:
        return _summarize(await self.resolve_type_info(node))

    async def resolve_type_info(self, node: TypeInfoNode) -> SymbolInfo:
        """Resolve the most specific relevant node of an analyzer type info tree.

        Raises:
            TypeInfoError: If no module can be derived from the tree, or the
                node kind does not fit the owning symbol's kind.
            NotFoundError: If the module or the field does not exist.
        """
        parsed = parse_type_info(node)
        if parsed is None:
            raise TypeInfoError.missing_module(node.name)

        entry = self._index.get(normalize_for_index(parsed.module_name))
        if entry is None:
            raise NotFoundError.module_not_found(parsed.module_name)

        document, symbol = await self._load_symbol(entry)
        if not symbol.is_public:
            raise NotFoundError.not_public(symbol.name)
        ensure_type_info_owner(symbol)

        found = get_field_for_type_info(symbol, parsed.relevant_node)
        if found is None:
            raise NotFoundError.field_not_found(
                parsed.relevant_node.name, symbol.name, document.library
            )
        # Fields are reported against the owning symbol, not its defining module
        module_name = entry.name
        return SymbolInfo(symbol=found, library=document.library, module_name=module_name)
