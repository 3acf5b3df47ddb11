"""Supported UI5 frameworks and version validation.

Framework name and version end up in a directory name, so both are checked
before any path is built from them.
"""

import re
from enum import StrEnum

from apiref.core.errors import InvalidInputError

_VERSION_PATTERN = re.compile(r"^[a-zA-Z0-9.-]+$")


class Framework(StrEnum):
    OPENUI5 = "OpenUI5"
    SAPUI5 = "SAPUI5"

    @property
    def sdk_domain(self) -> str:
        """Host serving the API reference pages for this framework."""
        if self is Framework.SAPUI5:
            return "https://ui5.sap.com"
        return "https://openui5.org"


def parse_framework(name: str) -> Framework:
    """Return the framework for *name*, accepting any casing."""
    for framework in Framework:
        if framework.value.lower() == name.strip().lower():
            return framework
    raise InvalidInputError.invalid_framework(name)


def validate_version(version: str) -> str:
    """Return the lowercased version, rejecting anything unsafe for a path."""
    normalized = version.strip().lower()
    if not _VERSION_PATTERN.match(normalized):
        raise InvalidInputError.invalid_version(version)
    return normalized


def corpus_dir_name(framework: Framework, version: str) -> str:
    """Directory name holding the API JSON files, e.g. ``openui5-1.120.30``."""
    return f"{framework.value.lower()}-{validate_version(version)}"
