"""Links from formatted records to the hosted API reference pages."""

from collections.abc import Mapping
from typing import Any

from apiref.reference.frameworks import Framework, parse_framework
from apiref.reference.models import SymbolKind

# Field kinds with their own anchor section on the symbol page
_SECTION_BY_KIND = {
    SymbolKind.UI5_AGGREGATION: "aggregations",
    SymbolKind.UI5_ASSOCIATION: "associations",
    SymbolKind.METHOD: "methods",
    SymbolKind.FUNCTION: "functions",
    SymbolKind.UI5_PROPERTY: "controlProperties",
    SymbolKind.UI5_EVENT: "events",
}


def create_uri_for_symbol(
    symbol: Mapping[str, Any], framework: Framework | str, version: str
) -> str:
    """Build the API reference URL for a formatted symbol or field.

    Example: ``https://openui5.org/1.120.0/api/sap.m.Button/controlProperties/text``
    """
    if not isinstance(framework, Framework):
        framework = parse_framework(framework)

    module = symbol.get("module")
    entity = module.replace("/", ".") if module else symbol.get("name", "")
    url = f"{framework.sdk_domain}/{version}/api/{entity}/"
    if export := symbol.get("export"):
        url += f"{export}/"

    kind = symbol.get("kind")
    if kind == SymbolKind.CONSTRUCTOR:
        url += "constructor"
    elif section := _SECTION_BY_KIND.get(kind):
        url += f"{section}/{symbol.get('name', '')}"
    return url
