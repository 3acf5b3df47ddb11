"""Config module exports."""

from apiref.config.loader import load_config
from apiref.config.models import (
    ApiRefConfig,
    CorpusConfig,
    LoggingConfig,
    LogOutputConfig,
    LookupConfig,
)

__all__ = [
    "load_config",
    "ApiRefConfig",
    "CorpusConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "LookupConfig",
]
