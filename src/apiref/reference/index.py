"""Index store: normalized symbol key -> (canonical name, document path).

One index exists per framework version. It is built once from the API JSON
documents in a corpus directory, written to ``index.json`` next to them and
only read afterwards.

Index file format::

    {
        "sap.m.button": {"name": "sap.m.Button", "filePath": "sap.m.api.json"},
        ...
    }
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog

from apiref.core.errors import InternalError
from apiref.reference.normalize import index_key_for_symbol

log = structlog.get_logger(__name__)

INDEX_FILE_NAME = "index.json"
DOCUMENT_SUFFIX = ".api.json"


@dataclass(frozen=True, slots=True)
class IndexEntry:
    """Where a symbol lives.

    Attributes:
        name: Value of the symbol's "name" property in the document (canonical name).
        file_path: Document path relative to the corpus directory.
    """

    name: str
    file_path: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "filePath": self.file_path}


class ApiIndex:
    """Read-only mapping of normalized keys to index entries."""

    def __init__(self, entries: dict[str, IndexEntry]) -> None:
        self._entries = entries

    def get(self, key: str) -> IndexEntry | None:
        return self._entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def items(self) -> Iterable[tuple[str, IndexEntry]]:
        return self._entries.items()

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {key: entry.to_dict() for key, entry in self._entries.items()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ApiIndex:
        entries = {
            key: IndexEntry(name=value["name"], file_path=value["filePath"])
            for key, value in data.items()
        }
        return cls(entries)

    @classmethod
    def load(cls, path: Path) -> ApiIndex:
        """Read an index file.

        Raises:
            InternalError: If the file is missing or not a valid index.
        """
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            index = cls.from_dict(data)
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            raise InternalError.index_load_failed(str(path), str(e)) from e
        log.debug("index_loaded", path=str(path), entries=len(index))
        return index


def find_documents(corpus_dir: Path) -> list[Path]:
    """All API JSON documents in *corpus_dir*, in stable order."""
    return sorted(corpus_dir.glob(f"*{DOCUMENT_SUFFIX}"))


def build_index(corpus_dir: Path, document_paths: Iterable[Path] | None = None) -> ApiIndex:
    """Build an index over every top-level symbol of the given documents.

    Documents are scanned in the order given (sorted file order by default).
    On a duplicate key the first entry is kept, unless the later symbol's
    module equals the key, in which case the later entry replaces it.
    """
    paths = list(document_paths) if document_paths is not None else find_documents(corpus_dir)
    entries: dict[str, IndexEntry] = {}

    for doc_path in paths:
        try:
            data = json.loads(doc_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise InternalError.document_load_failed(str(doc_path), str(e)) from e

        relative = doc_path.relative_to(corpus_dir).as_posix()
        for symbol in data.get("symbols", []):
            key = index_key_for_symbol(symbol["name"])
            if key in entries:
                log.debug("duplicate_index_key", key=key, document=relative)
                if key != symbol.get("module"):
                    continue
                log.debug("duplicate_index_key_override", key=key, document=relative)
            entries[key] = IndexEntry(name=symbol["name"], file_path=relative)

    log.info("index_built", corpus=str(corpus_dir), documents=len(paths), entries=len(entries))
    return ApiIndex(entries)


def write_index(index: ApiIndex, path: Path) -> None:
    """Persist *index* as pretty-printed JSON."""
    path.write_text(json.dumps(index.to_dict(), indent=4), encoding="utf-8")
