"""Type info trees produced by a static analyzer.

A type info node describes a source position: the node itself plus a chain
of parent links up to the module (or global namespace) it belongs to, e.g.::

    metadata-property "activeIcon"
      -> managed-object-settings "$ButtonSettings"
        -> module "sap/m/Button"

Nodes are consumed read-only and never stored.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class TypeInfoKind(StrEnum):
    MODULE = "module"
    NAMESPACE = "namespace"
    CLASS = "class"
    CONSTRUCTOR = "constructor"
    FUNCTION = "function"
    METHOD = "method"
    PROPERTY = "property"
    ENUM = "enum"
    METADATA_AGGREGATION = "metadata-aggregation"
    METADATA_ASSOCIATION = "metadata-association"
    METADATA_EVENT = "metadata-event"
    METADATA_PROPERTY = "metadata-property"
    # Structural wrapper without an identity of its own
    MANAGED_OBJECT_SETTINGS = "managed-object-settings"


RELEVANT_KINDS = frozenset(
    {
        TypeInfoKind.MODULE,
        TypeInfoKind.NAMESPACE,
        TypeInfoKind.CLASS,
        TypeInfoKind.CONSTRUCTOR,
        TypeInfoKind.FUNCTION,
        TypeInfoKind.METHOD,
        TypeInfoKind.PROPERTY,
        TypeInfoKind.ENUM,
        TypeInfoKind.METADATA_AGGREGATION,
        TypeInfoKind.METADATA_ASSOCIATION,
        TypeInfoKind.METADATA_EVENT,
        TypeInfoKind.METADATA_PROPERTY,
    }
)


@dataclass(frozen=True, slots=True)
class TypeInfoNode:
    """One node of a type info tree.

    ``kind`` is kept as the analyzer's string so that wrapper kinds this
    package does not know about still walk correctly.
    """

    kind: str
    name: str
    parent: TypeInfoNode | None = None
    library: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TypeInfoNode:
        parent = data.get("parent")
        return cls(
            kind=str(data["kind"]),
            name=str(data["name"]),
            parent=cls.from_dict(parent) if parent else None,
            library=data.get("library"),
        )


@dataclass(frozen=True, slots=True)
class ParsedTypeInfo:
    """Lookup key for the owning symbol plus the node to resolve inside it."""

    module_name: str
    relevant_node: TypeInfoNode


def parse_type_info(node: TypeInfoNode) -> ParsedTypeInfo | None:
    """Walk parent links to find the owning module and the most specific node.

    Returns None if the walk ends without reaching a module or a namespace.
    """
    if node.kind == TypeInfoKind.MODULE:
        return ParsedTypeInfo(module_name=node.name, relevant_node=node)

    relevant: TypeInfoNode | None = None
    namespace: str | None = None
    current = node
    while current.parent is not None:
        parent = current.parent
        if parent.kind == TypeInfoKind.MODULE:
            return ParsedTypeInfo(module_name=parent.name, relevant_node=relevant or current)

        if parent.kind == TypeInfoKind.NAMESPACE:
            namespace = f"{parent.name}.{namespace}" if namespace else parent.name
        else:
            namespace = None

        if relevant is None and current.kind in RELEVANT_KINDS:
            relevant = current
        current = parent

    if current.kind == TypeInfoKind.NAMESPACE:
        # Global namespaces (e.g. jQuery) have no module; the path stands in for it
        return ParsedTypeInfo(
            module_name=namespace or current.name,
            relevant_node=relevant or current,
        )
    return None
