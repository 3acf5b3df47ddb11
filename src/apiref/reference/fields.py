"""Field lookup inside a resolved symbol.

Two entry points share the same collection search:

- ``get_field_in_symbol`` for a field name taken from a text query. The
  symbol's kind decides which collections are searched and in which order.
- ``get_field_for_type_info`` for an analyzer node. The node's kind decides
  the collection; a symbol of the wrong kind is a malformed input.

Names match case-insensitively and the first match wins.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from apiref.core.errors import TypeInfoError
from apiref.reference.models import (
    ClassSymbol,
    EnumSymbol,
    FieldRecord,
    FunctionSymbol,
    InterfaceSymbol,
    NamespaceSymbol,
    SymbolKind,
    SymbolRecord,
    TypedefSymbol,
)
from apiref.reference.type_info import TypeInfoKind, TypeInfoNode

_CONSTRUCTOR = "constructor"

# ui5-metadata collections, in search order
_METADATA_COLLECTIONS: tuple[tuple[str, SymbolKind], ...] = (
    ("properties", SymbolKind.UI5_PROPERTY),
    ("aggregations", SymbolKind.UI5_AGGREGATION),
    ("associations", SymbolKind.UI5_ASSOCIATION),
    ("events", SymbolKind.UI5_EVENT),
    ("specialSettings", SymbolKind.UI5_SPECIAL_SETTING),
)


def find_field_by_name(
    field_name: str, items: Sequence[Mapping[str, Any]], kind: SymbolKind
) -> FieldRecord | None:
    wanted = field_name.lower()
    for item in items:
        if str(item.get("name", "")).lower() == wanted:
            return FieldRecord(kind=kind, data=item)
    return None


def _search(
    symbol: SymbolRecord, field_name: str, collections: Sequence[tuple[str, SymbolKind]]
) -> FieldRecord | None:
    for key, kind in collections:
        if found := find_field_by_name(field_name, symbol.collection(key), kind):
            return found
    return None


def get_field_in_symbol(symbol: SymbolRecord, field_name: str) -> FieldRecord | None:
    """Find a method, property, event or other member by name within *symbol*."""
    if isinstance(symbol, ClassSymbol):
        if field_name.lower() == _CONSTRUCTOR and symbol.constructor is not None:
            return FieldRecord(kind=SymbolKind.CONSTRUCTOR, data=symbol.constructor)
        found = _search(
            symbol,
            field_name,
            (
                ("methods", SymbolKind.METHOD),
                ("properties", SymbolKind.PROPERTY),
                ("events", SymbolKind.EVENT),
            ),
        )
        if found:
            return found
        for key, kind in _METADATA_COLLECTIONS:
            if found := find_field_by_name(field_name, symbol.metadata_collection(key), kind):
                return found
        return None

    if isinstance(symbol, NamespaceSymbol):
        return _search(
            symbol,
            field_name,
            (
                ("methods", SymbolKind.METHOD),
                ("properties", SymbolKind.PROPERTY),
                ("events", SymbolKind.EVENT),
            ),
        )
    if isinstance(symbol, InterfaceSymbol):
        return _search(
            symbol,
            field_name,
            (("methods", SymbolKind.METHOD), ("events", SymbolKind.EVENT)),
        )
    if isinstance(symbol, EnumSymbol):
        return _search(symbol, field_name, (("properties", SymbolKind.ENUM_PROPERTY),))
    if isinstance(symbol, TypedefSymbol):
        return _search(
            symbol,
            field_name,
            (("properties", SymbolKind.PROPERTY), ("parameters", SymbolKind.PARAMETER)),
        )
    if isinstance(symbol, FunctionSymbol):
        return _search(symbol, field_name, (("parameters", SymbolKind.PARAMETER),))
    return None


def _is_namespace(symbol: SymbolRecord) -> bool:
    return symbol.kind in (SymbolKind.NAMESPACE, SymbolKind.MEMBER)


def _require(condition: bool, expected: str, symbol: SymbolRecord) -> None:
    if not condition:
        raise TypeInfoError.kind_mismatch(expected, symbol.kind)


def ensure_type_info_owner(symbol: SymbolRecord) -> None:
    """Only classes, interfaces, namespaces and enums can own analyzer nodes."""
    _require(
        isinstance(symbol, ClassSymbol | InterfaceSymbol | EnumSymbol) or _is_namespace(symbol),
        "class, interface or namespace or enum",
        symbol,
    )


def get_field_for_type_info(
    symbol: SymbolRecord, node: TypeInfoNode
) -> SymbolRecord | FieldRecord | None:
    """Map an analyzer node onto *symbol* or one of its fields.

    Raises:
        TypeInfoError: If the node's kind cannot occur on a symbol of this kind.
    """
    name = node.name
    kind = node.kind
    is_class = isinstance(symbol, ClassSymbol)

    if kind in (TypeInfoKind.MODULE, TypeInfoKind.NAMESPACE, TypeInfoKind.CLASS):
        return symbol

    if kind == TypeInfoKind.CONSTRUCTOR:
        if not isinstance(symbol, ClassSymbol):
            raise TypeInfoError.kind_mismatch("a class", symbol.kind)
        if symbol.constructor is None:
            return None
        return FieldRecord(kind=SymbolKind.CONSTRUCTOR, data=symbol.constructor)

    if kind in (TypeInfoKind.FUNCTION, TypeInfoKind.METHOD):
        _require(
            is_class or _is_namespace(symbol) or isinstance(symbol, InterfaceSymbol),
            "a class, namespace or interface",
            symbol,
        )
        field_kind = SymbolKind.METHOD if kind == TypeInfoKind.METHOD else SymbolKind.FUNCTION
        return find_field_by_name(name, symbol.collection("methods"), field_kind)

    if kind == TypeInfoKind.METADATA_EVENT:
        _require(
            is_class or _is_namespace(symbol) or isinstance(symbol, InterfaceSymbol),
            "a class, namespace or interface",
            symbol,
        )
        return find_field_by_name(name, symbol.collection("events"), SymbolKind.EVENT)

    if kind == TypeInfoKind.PROPERTY:
        _require(is_class or _is_namespace(symbol), "a class or namespace", symbol)
        return find_field_by_name(name, symbol.collection("properties"), SymbolKind.PROPERTY)

    if kind == TypeInfoKind.ENUM:
        _require(isinstance(symbol, EnumSymbol), "an enum", symbol)
        return find_field_by_name(name, symbol.collection("properties"), SymbolKind.ENUM_PROPERTY)

    metadata_kinds: dict[str, tuple[str, SymbolKind]] = {
        TypeInfoKind.METADATA_AGGREGATION: ("aggregations", SymbolKind.UI5_AGGREGATION),
        TypeInfoKind.METADATA_ASSOCIATION: ("associations", SymbolKind.UI5_ASSOCIATION),
        TypeInfoKind.METADATA_PROPERTY: ("properties", SymbolKind.UI5_PROPERTY),
    }
    if kind in metadata_kinds:
        if not isinstance(symbol, ClassSymbol):
            raise TypeInfoError.kind_mismatch("a class", symbol.kind)
        key, field_kind = metadata_kinds[kind]
        return find_field_by_name(name, symbol.metadata_collection(key), field_kind)

    return None
