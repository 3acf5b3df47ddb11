"""Query normalization for index lookups.

Index keys are lowercase and dotted. Queries arrive in any of the notations
users write: ``sap.m.Button``, ``sap/m/Button``, ``module:sap/m/Button``,
``sap.m.Button#text``, possibly with stray whitespace or line breaks.
"""

import re

from apiref.core.errors import InvalidInputError

_MODULE_PREFIX = "module:"
_WHITESPACE = re.compile(r"\s+")
_SEPARATORS = re.compile(r"[/#]")


def normalize_for_index(query: str, *, lowercase: bool = True) -> str:
    """Normalize a raw query to an index key.

    Example: `` module:sap/ui/core/Component#onInit `` -> ``sap.ui.core.component.oninit``

    With ``lowercase=False`` the same dotted form is returned in the caller's
    casing, segment for segment.
    """
    query = query.strip()
    if lowercase:
        query = query.lower()
    if query.lower().startswith(_MODULE_PREFIX):
        query = query[len(_MODULE_PREFIX) :]
    query = _WHITESPACE.sub("", query)
    return _SEPARATORS.sub(".", query)


def normalize_for_module_name(query: str) -> str:
    """Normalize a raw query to a lowercase module path (``sap/m/library``)."""
    return normalize_for_index(query).replace(".", "/")


def index_key_for_symbol(name: str) -> str:
    """Index key under which a document symbol is stored."""
    key = name.lower()
    if key.startswith(_MODULE_PREFIX):
        key = key[len(_MODULE_PREFIX) :].replace("/", ".")
    return key


_FORBIDDEN_QUERY_CHARS = frozenset('<>()"\'')


def validate_query(query: str) -> str:
    """Reject empty queries and queries containing markup or quoting characters."""
    if not query.strip():
        raise InvalidInputError.invalid_query(query, "query is empty")
    if bad := sorted(_FORBIDDEN_QUERY_CHARS.intersection(query)):
        raise InvalidInputError.invalid_query(query, f"unsupported characters: {' '.join(bad)}")
    return query
