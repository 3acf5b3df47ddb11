"""Per-library API JSON documents and their in-process cache."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog

from apiref.core.errors import InternalError
from apiref.reference.models import SymbolRecord, parse_symbol

log = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SymbolDocument:
    """All symbols of one library, keyed by canonical name."""

    library: str
    symbols: Mapping[str, SymbolRecord]

    def get(self, name: str) -> SymbolRecord | None:
        return self.symbols.get(name)

    def __iter__(self) -> Iterator[SymbolRecord]:
        return iter(self.symbols.values())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SymbolDocument:
        symbols = {raw["name"]: parse_symbol(raw) for raw in data.get("symbols", [])}
        return cls(library=data["library"], symbols=symbols)


def _read_document(path: Path) -> SymbolDocument:
    data = json.loads(path.read_text(encoding="utf-8"))
    return SymbolDocument.from_dict(data)


class DocumentCache:
    """Loads each document at most once, even under concurrent requests.

    Cache hits never take the lock. A miss takes the cache-wide lock,
    checks again and only then reads and parses the file.
    """

    def __init__(self, root_dir: Path) -> None:
        self._root_dir = root_dir
        self._documents: dict[str, SymbolDocument] = {}
        self._lock = asyncio.Lock()

    @property
    def root_dir(self) -> Path:
        return self._root_dir

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, file_path: object) -> bool:
        return file_path in self._documents

    async def get(self, file_path: str) -> SymbolDocument:
        """Return the parsed document at *file_path* (relative to the root).

        Raises:
            InternalError: If the document cannot be read or parsed. The index
                promised it exists, so this is never retried.
        """
        if (document := self._documents.get(file_path)) is not None:
            return document

        async with self._lock:
            # Another task may have loaded it while we waited
            if (document := self._documents.get(file_path)) is not None:
                return document

            path = self._root_dir / file_path
            loop = asyncio.get_running_loop()
            try:
                document = await loop.run_in_executor(None, _read_document, path)
            except (OSError, ValueError, KeyError, TypeError) as e:
                raise InternalError.document_load_failed(str(path), str(e)) from e

            self._documents[file_path] = document
            log.debug(
                "document_loaded",
                path=file_path,
                library=document.library,
                symbols=len(document.symbols),
            )
            return document
