"""Shape resolved records for display.

``format_symbol`` returns an independent copy with hidden members, empty
values and bookkeeping attributes removed, plus the library/module context.
``summarize_symbol`` reduces a top-level symbol to a few identifying
attributes and marks the result as abbreviated.
"""

from __future__ import annotations

import copy
from typing import Any

from apiref.reference.models import HIDDEN_VISIBILITIES, FieldRecord, SymbolRecord

FormattedSymbol = dict[str, Any]

REMOVE_ATTRIBUTES = ("basename", "resource", "visibility")

SUMMARY_ATTRIBUTES = frozenset(
    {"kind", "name", "module", "library", "export", "description", "extends"}
)
SUMMARY_INFO_KEY = "_summaryInfo"
SUMMARY_INFO = "Note: This object is a shortened version of the full API object"


def _is_hidden(value: Any) -> bool:
    return isinstance(value, dict) and value.get("visibility") in HIDDEN_VISIBILITIES


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == [] or value == {}


def delete_restricted(obj: dict[str, Any]) -> None:
    """Drop private/restricted members and every remaining ``visibility`` key, in place."""
    obj.pop("visibility", None)
    for key in list(obj):
        value = obj[key]
        if isinstance(value, list):
            kept = [entry for entry in value if not _is_hidden(entry)]
            for entry in kept:
                if isinstance(entry, dict):
                    delete_restricted(entry)
            obj[key] = kept
        elif isinstance(value, dict):
            if _is_hidden(value):
                del obj[key]
            else:
                delete_restricted(value)


def _prune_list(items: list[Any]) -> list[Any]:
    kept = []
    for item in items:
        if isinstance(item, dict):
            delete_empty_attributes(item)
        elif isinstance(item, list):
            item = _prune_list(item)
        if not _is_empty(item):
            kept.append(item)
    return kept


def delete_empty_attributes(obj: dict[str, Any]) -> None:
    """Remove None, "", [] and (after pruning) {} values recursively, in place."""
    for key in list(obj):
        value = obj[key]
        if isinstance(value, dict):
            delete_empty_attributes(value)
        elif isinstance(value, list):
            value = obj[key] = _prune_list(value)
        if _is_empty(value):
            del obj[key]


def format_symbol(
    record: SymbolRecord | FieldRecord, library: str, module_name: str | None
) -> FormattedSymbol:
    """Return a display copy of *record*.

    ``module`` is added only when the record has none of its own (fields,
    some namespaces). ``library`` is always set.
    """
    source = record.as_dict()
    symbol: FormattedSymbol = copy.deepcopy(dict(source))
    delete_restricted(symbol)
    delete_empty_attributes(symbol)
    for attr in REMOVE_ATTRIBUTES:
        symbol.pop(attr, None)

    if module_name and "module" not in source:
        symbol["module"] = module_name
    symbol["library"] = library
    return symbol


def summarize_symbol(
    record: SymbolRecord, library: str, module_name: str | None
) -> FormattedSymbol:
    """Return an abbreviated display copy of a top-level symbol."""
    symbol = format_symbol(record, library, module_name)
    summary: FormattedSymbol = {
        key: value for key, value in symbol.items() if key in SUMMARY_ATTRIBUTES
    }

    deprecated = symbol.get("deprecated")
    if isinstance(deprecated, dict) and deprecated.get("text"):
        summary["deprecatedText"] = deprecated["text"]
    experimental = symbol.get("experimental")
    if isinstance(experimental, dict) and experimental.get("text"):
        summary["experimentalText"] = experimental["text"]

    summary[SUMMARY_INFO_KEY] = SUMMARY_INFO
    return summary
