"""Symbol and field records read from API JSON documents.

A document symbol is wrapped in one SymbolRecord subclass per kind so that
field lookup can dispatch on the variant instead of probing dict shapes.
Records are read-only views over the parsed JSON; the formatter produces
independent copies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class SymbolKind(StrEnum):
    """Kinds of top-level symbols and of the fields nested inside them."""

    # Top-level symbol kinds
    CLASS = "class"
    INTERFACE = "interface"
    NAMESPACE = "namespace"
    ENUM = "enum"
    MEMBER = "member"  # treated like namespace/object
    OBJECT = "object"
    TYPEDEF = "typedef"
    FUNCTION = "function"

    # Field kinds, attached during lookup
    PROPERTY = "property"
    CONSTRUCTOR = "constructor"
    METHOD = "method"
    EVENT = "event"
    PARAMETER = "parameter"
    ENUM_PROPERTY = "enum-property"
    UI5_PROPERTY = "ui5-property"
    UI5_EVENT = "ui5-event"
    UI5_AGGREGATION = "ui5-aggregation"
    UI5_ASSOCIATION = "ui5-association"
    UI5_SPECIAL_SETTING = "ui5-specialSetting"

    @classmethod
    def symbol_kinds(cls) -> frozenset[SymbolKind]:
        return frozenset(
            {
                cls.CLASS,
                cls.INTERFACE,
                cls.NAMESPACE,
                cls.ENUM,
                cls.MEMBER,
                cls.OBJECT,
                cls.TYPEDEF,
                cls.FUNCTION,
            }
        )


HIDDEN_VISIBILITIES = frozenset({"private", "restricted"})


def _as_list(value: Any) -> list[Mapping[str, Any]]:
    if isinstance(value, list):
        return [item for item in value if isinstance(item, Mapping)]
    return []


@dataclass(frozen=True, slots=True)
class SymbolRecord:
    """A top-level documented symbol.

    Used as-is for symbols whose kind is not one of the known variants.
    """

    data: Mapping[str, Any]

    @property
    def kind(self) -> str:
        return str(self.data.get("kind", ""))

    @property
    def name(self) -> str:
        return str(self.data["name"])

    @property
    def module(self) -> str | None:
        return self.data.get("module")

    @property
    def export(self) -> str | None:
        return self.data.get("export")

    @property
    def visibility(self) -> str | None:
        return self.data.get("visibility")

    @property
    def is_public(self) -> bool:
        return self.visibility not in HIDDEN_VISIBILITIES

    @property
    def extends(self) -> list[str]:
        """Parent symbol names, in declaration order."""
        value = self.data.get("extends")
        if isinstance(value, str):
            return [value] if value else []
        if isinstance(value, list):
            return [v for v in value if isinstance(v, str) and v]
        return []

    def collection(self, key: str) -> list[Mapping[str, Any]]:
        return _as_list(self.data.get(key))

    def as_dict(self) -> Mapping[str, Any]:
        return self.data


@dataclass(frozen=True, slots=True)
class ClassSymbol(SymbolRecord):
    """Class symbol, optionally carrying UI5 managed-object metadata."""

    @property
    def constructor(self) -> Mapping[str, Any] | None:
        value = self.data.get("constructor")
        return value if isinstance(value, Mapping) else None

    @property
    def metadata(self) -> Mapping[str, Any]:
        value = self.data.get("ui5-metadata")
        return value if isinstance(value, Mapping) else {}

    def metadata_collection(self, key: str) -> list[Mapping[str, Any]]:
        return _as_list(self.metadata.get(key))


@dataclass(frozen=True, slots=True)
class NamespaceSymbol(SymbolRecord):
    """Namespace, member or object symbol."""


@dataclass(frozen=True, slots=True)
class InterfaceSymbol(SymbolRecord):
    pass


@dataclass(frozen=True, slots=True)
class EnumSymbol(SymbolRecord):
    pass


@dataclass(frozen=True, slots=True)
class TypedefSymbol(SymbolRecord):
    pass


@dataclass(frozen=True, slots=True)
class FunctionSymbol(SymbolRecord):
    pass


_SYMBOL_TYPES: dict[str, type[SymbolRecord]] = {
    SymbolKind.CLASS: ClassSymbol,
    SymbolKind.NAMESPACE: NamespaceSymbol,
    SymbolKind.MEMBER: NamespaceSymbol,
    SymbolKind.OBJECT: NamespaceSymbol,
    SymbolKind.INTERFACE: InterfaceSymbol,
    SymbolKind.ENUM: EnumSymbol,
    SymbolKind.TYPEDEF: TypedefSymbol,
    SymbolKind.FUNCTION: FunctionSymbol,
}


def parse_symbol(data: Mapping[str, Any]) -> SymbolRecord:
    """Wrap a raw document symbol in the record type for its kind."""
    record_type = _SYMBOL_TYPES.get(str(data.get("kind", "")), SymbolRecord)
    return record_type(data)


@dataclass(frozen=True, slots=True)
class FieldRecord:
    """A member found inside a symbol, tagged with the collection it came from."""

    kind: SymbolKind
    data: Mapping[str, Any]

    @property
    def name(self) -> str:
        return str(self.data.get("name", ""))

    def as_dict(self) -> dict[str, Any]:
        # Keys of the member itself win over the attached tag
        return {"kind": self.kind.value, **self.data}


@dataclass(frozen=True, slots=True)
class SymbolInfo:
    """Resolution result: a symbol or field plus the context it was found in."""

    symbol: SymbolRecord | FieldRecord
    library: str
    module_name: str | None

    @property
    def is_symbol(self) -> bool:
        """True for top-level symbols of a known kind (these can be summarized)."""
        return (
            isinstance(self.symbol, SymbolRecord)
            and self.symbol.kind in SymbolKind.symbol_kinds()
        )
