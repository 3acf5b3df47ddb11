"""Locating the API JSON corpus of a framework version.

Downloading documents is not done here: a corpus directory must already
hold the ``*.api.json`` files. ``index.json`` is built next to them when it
is missing and the configuration allows it.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol

import structlog

from apiref.config.models import CorpusConfig
from apiref.core.errors import NotFoundError
from apiref.reference.frameworks import Framework, corpus_dir_name
from apiref.reference.index import INDEX_FILE_NAME, build_index, find_documents, write_index

log = structlog.get_logger(__name__)

DATA_SUBDIR = Path("mcp-server") / "api_json_files"


class CorpusProvider(Protocol):
    """Returns a directory holding ``index.json`` and the documents it references."""

    async def get_corpus_dir(self, framework: Framework, version: str) -> Path: ...


def _ensure_index(corpus_dir: Path) -> None:
    index_path = corpus_dir / INDEX_FILE_NAME
    if index_path.exists():
        return
    log.info("building_missing_index", corpus=str(corpus_dir))
    write_index(build_index(corpus_dir, find_documents(corpus_dir)), index_path)


class LocalCorpusProvider:
    """Corpus directories under ``<data_dir>/mcp-server/api_json_files``."""

    def __init__(self, config: CorpusConfig | None = None) -> None:
        self._config = config or CorpusConfig()

    @property
    def root_dir(self) -> Path:
        return Path(self._config.data_dir) / DATA_SUBDIR

    def corpus_path(self, framework: Framework, version: str) -> Path:
        return self.root_dir / corpus_dir_name(framework, version)

    async def get_corpus_dir(self, framework: Framework, version: str) -> Path:
        """Return the corpus directory for *framework* and *version*.

        Raises:
            InvalidInputError: If the version is not a safe path component.
            NotFoundError: If no documents exist for this version.
        """
        corpus_dir = self.corpus_path(framework, version)
        if not corpus_dir.is_dir():
            raise NotFoundError.corpus_not_found(framework.value, version, str(corpus_dir))

        if self._config.build_missing_index:
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(None, _ensure_index, corpus_dir)
        return corpus_dir
