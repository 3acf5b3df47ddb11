"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages and
provides a small API reference corpus shared by the reference and CLI tests.
"""

import json
import sys
from pathlib import Path
from typing import Any

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local apiref package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of apiref modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("apiref"):
        del sys.modules[module_name]

from apiref.reference.index import build_index, write_index  # noqa: E402

FRAMEWORK = "OpenUI5"
VERSION = "1.120.0"

SAP_M_DOCUMENT: dict[str, Any] = {
    "$schema-ref": "http://schemas.sap.com/sapui5/designtime/api.json/1.0",
    "version": VERSION,
    "library": "sap.m",
    "symbols": [
        {
            "kind": "namespace",
            "name": "sap.m",
            "basename": "m",
            "resource": "sap/m/library.js",
            "module": "sap/m/library",
            "export": "",
            "visibility": "public",
            "description": "The main UI5 control library.",
            "methods": [
                {
                    "name": "getScrollDelegate",
                    "visibility": "public",
                    "static": True,
                    "returnValue": {"type": "object", "description": ""},
                }
            ],
        },
        {
            "kind": "class",
            "name": "sap.m.Button",
            "basename": "Button",
            "resource": "sap/m/Button.js",
            "module": "sap/m/Button",
            "export": "",
            "visibility": "public",
            "extends": "sap.ui.core.Control",
            "description": "Enables users to trigger actions.",
            "constructor": {
                "visibility": "public",
                "parameters": [
                    {"name": "sId", "type": "string", "optional": True, "description": ""},
                    {"name": "mSettings", "type": "object", "optional": True},
                ],
            },
            "ui5-metadata": {
                "stereotype": "control",
                "properties": [
                    {
                        "name": "text",
                        "type": "string",
                        "defaultValue": "",
                        "visibility": "public",
                        "description": "Button text",
                    },
                    {"name": "icon", "type": "sap.ui.core.URI", "visibility": "public"},
                ],
                "aggregations": [
                    {"name": "tooltip", "type": "sap.ui.core.TooltipBase", "visibility": "public"}
                ],
                "associations": [
                    {
                        "name": "ariaDescribedBy",
                        "type": "sap.ui.core.Control",
                        "visibility": "public",
                    }
                ],
                "events": [{"name": "press", "visibility": "public", "parameters": {}}],
                "specialSettings": [],
            },
            "events": [],
            "methods": [
                {
                    "name": "getText",
                    "visibility": "public",
                    "returnValue": {"type": "string", "description": "Value of property text"},
                },
                {"name": "firePress", "visibility": "protected"},
                {"name": "_activeButtonHandling", "visibility": "private"},
            ],
        },
        {
            "kind": "enum",
            "name": "sap.m.ButtonType",
            "basename": "ButtonType",
            "resource": "sap/m/library.js",
            "module": "sap/m/library",
            "export": "ButtonType",
            "visibility": "public",
            "description": "Different predefined button types.",
            "properties": [
                {"name": "Default", "visibility": "public", "value": "Default"},
                {"name": "Emphasized", "visibility": "public", "value": "Emphasized"},
            ],
        },
        {
            "kind": "enum",
            "name": "sap.m.ListType",
            "module": "sap/m/library",
            "export": "ListType",
            "visibility": "public",
            "properties": [{"name": "Inactive", "visibility": "public", "value": "Inactive"}],
        },
        {
            "kind": "class",
            "name": "sap.m.InternalHelper",
            "module": "sap/m/InternalHelper",
            "visibility": "restricted",
            "methods": [{"name": "help", "visibility": "public"}],
        },
        {
            "kind": "class",
            "name": "sap.m.OldButton",
            "module": "sap/m/OldButton",
            "visibility": "public",
            "extends": "sap.m.Button",
            "description": "Old button.",
            "deprecated": {"since": "1.38", "text": "Use sap.m.Button instead."},
            "experimental": {"since": "1.30", "text": "Never stabilized."},
        },
        {
            "kind": "class",
            "name": "sap.m.CycleA",
            "module": "sap/m/CycleA",
            "visibility": "public",
            "extends": "sap.m.CycleB",
        },
        {
            "kind": "class",
            "name": "sap.m.CycleB",
            "module": "sap/m/CycleB",
            "visibility": "public",
            "extends": "sap.m.CycleA",
        },
        {
            "kind": "typedef",
            "name": "sap.m.ButtonOptions",
            "module": "sap/m/library",
            "export": "ButtonOptions",
            "visibility": "public",
            "properties": [{"name": "width", "type": "string", "visibility": "public"}],
        },
        {
            "kind": "function",
            "name": "module:sap/m/formatDate",
            "module": "sap/m/formatDate",
            "visibility": "public",
            "parameters": [{"name": "value", "type": "Date", "optional": False}],
        },
    ],
}

SAP_UI_CORE_DOCUMENT: dict[str, Any] = {
    "version": VERSION,
    "library": "sap.ui.core",
    "symbols": [
        {
            "kind": "class",
            "name": "sap.ui.core.Element",
            "module": "sap/ui/core/Element",
            "visibility": "public",
            "methods": [{"name": "getId", "visibility": "public"}],
        },
        {
            "kind": "class",
            "name": "sap.ui.core.Control",
            "module": "sap/ui/core/Control",
            "visibility": "public",
            "extends": "sap.ui.core.Element",
            "ui5-metadata": {
                "properties": [{"name": "busy", "type": "boolean", "visibility": "public"}],
            },
            "methods": [{"name": "addStyleClass", "visibility": "public"}],
        },
        {
            "kind": "interface",
            "name": "sap.ui.core.IFormContent",
            "module": "sap/ui/core/IFormContent",
            "visibility": "public",
            "methods": [{"name": "getFormDoNotAdjustWidth", "visibility": "public"}],
        },
        {
            "kind": "namespace",
            "name": "jQuery",
            "visibility": "public",
            "methods": [{"name": "ajax", "visibility": "public"}],
        },
    ],
}


def write_corpus(corpus_dir: Path, documents: dict[str, dict[str, Any]]) -> Path:
    """Write API JSON documents plus their index into *corpus_dir*."""
    corpus_dir.mkdir(parents=True, exist_ok=True)
    for file_name, document in documents.items():
        (corpus_dir / file_name).write_text(json.dumps(document), encoding="utf-8")
    write_index(build_index(corpus_dir), corpus_dir / "index.json")
    return corpus_dir


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Data root laid out like ~/.ui5 with one OpenUI5 corpus."""
    root = tmp_path / "ui5"
    write_corpus(
        root / "mcp-server" / "api_json_files" / f"openui5-{VERSION}",
        {
            "sap.m.api.json": SAP_M_DOCUMENT,
            "sap.ui.core.api.json": SAP_UI_CORE_DOCUMENT,
        },
    )
    return root


@pytest.fixture
def corpus_dir(data_dir: Path) -> Path:
    return data_dir / "mcp-server" / "api_json_files" / f"openui5-{VERSION}"
