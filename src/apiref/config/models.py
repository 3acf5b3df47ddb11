"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (APIREF__SECTION__KEY)
3. YAML config file (explicit path or ~/.config/apiref/config.yaml)
4. Built-in defaults (this file)

Environment Variable Format:
    APIREF__<SECTION>__<KEY>=<VALUE>

Examples:
    APIREF__LOGGING__LEVEL=DEBUG
    APIREF__CORPUS__DATA_DIR=/srv/ui5-data
    APIREF__LOOKUP__SUMMARIZE=true
"""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
FrameworkName = Literal["OpenUI5", "SAPUI5"]


def _default_data_dir() -> str:
    if env_dir := os.environ.get("UI5_DATA_DIR"):
        return str(Path(env_dir).resolve())
    return str(Path.home() / ".ui5")


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        APIREF__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG logs every index and document load.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class CorpusConfig(BaseModel):
    """API reference corpus location.

    Env vars:
        APIREF__CORPUS__DATA_DIR: Root data directory (default: $UI5_DATA_DIR or ~/.ui5)
        APIREF__CORPUS__DEFAULT_FRAMEWORK: Framework used when none is given
        APIREF__CORPUS__BUILD_MISSING_INDEX: Build index.json when absent
    """

    data_dir: str = Field(
        default_factory=_default_data_dir,
        description="Root data directory. API JSON files live under "
        "<data_dir>/mcp-server/api_json_files/<framework>-<version>/.",
    )
    default_framework: FrameworkName = Field(
        default="OpenUI5",
        description="Framework used when a lookup does not name one.",
    )
    default_versions: dict[str, str] = Field(
        default_factory=lambda: {"OpenUI5": "1.136.5", "SAPUI5": "1.136.7"},
        description="Framework version used when a lookup does not name one.",
    )
    build_missing_index: bool = Field(
        default=True,
        description="Build index.json from the API JSON files when it is missing.",
    )

    @field_validator("data_dir")
    @classmethod
    def expand_data_dir(cls, v: str) -> str:
        return str(Path(v).expanduser())

    def default_version(self, framework: str) -> str:
        return self.default_versions.get(framework, self.default_versions["OpenUI5"])


class LookupConfig(BaseModel):
    """Lookup output configuration.

    Env vars:
        APIREF__LOOKUP__SUMMARIZE: Return abbreviated symbol records by default
    """

    summarize: bool = Field(
        default=False,
        description="Return abbreviated records for top-level symbols.",
    )


class ApiRefConfig(BaseModel):
    """Root configuration for apiref."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    corpus: CorpusConfig = Field(default_factory=CorpusConfig)
    lookup: LookupConfig = Field(default_factory=LookupConfig)
