"""Tests for symbol and field records."""

import pytest

from apiref.reference.models import (
    ClassSymbol,
    FieldRecord,
    FunctionSymbol,
    InterfaceSymbol,
    NamespaceSymbol,
    SymbolInfo,
    SymbolKind,
    SymbolRecord,
    TypedefSymbol,
    parse_symbol,
)


class TestParseSymbol:
    @pytest.mark.parametrize(
        ("kind", "record_type"),
        [
            ("class", ClassSymbol),
            ("namespace", NamespaceSymbol),
            ("member", NamespaceSymbol),
            ("object", NamespaceSymbol),
            ("interface", InterfaceSymbol),
            ("typedef", TypedefSymbol),
            ("function", FunctionSymbol),
        ],
    )
    def test_given_kind_when_parsed_then_matching_variant(
        self, kind: str, record_type: type[SymbolRecord]
    ) -> None:
        assert type(parse_symbol({"kind": kind, "name": "x"})) is record_type


class TestSymbolRecord:
    @pytest.mark.parametrize(
        ("extends", "expected"),
        [
            ("sap.ui.core.Control", ["sap.ui.core.Control"]),
            (["a.A", "b.B"], ["a.A", "b.B"]),
            ("", []),
            (None, []),
        ],
    )
    def test_extends_normalized_to_list(self, extends: object, expected: list[str]) -> None:
        record = parse_symbol({"kind": "class", "name": "x", "extends": extends})

        assert record.extends == expected

    @pytest.mark.parametrize(
        ("visibility", "public"),
        [
            ("public", True),
            ("protected", True),
            (None, True),
            ("private", False),
            ("restricted", False),
        ],
    )
    def test_is_public(self, visibility: str | None, public: bool) -> None:
        record = parse_symbol({"kind": "class", "name": "x", "visibility": visibility})

        assert record.is_public is public

    def test_collection_skips_non_mapping_entries(self) -> None:
        record = parse_symbol({"kind": "class", "name": "x", "methods": [{"name": "a"}, "junk"]})

        assert record.collection("methods") == [{"name": "a"}]
        assert record.collection("events") == []

    def test_metadata_collection_without_metadata(self) -> None:
        record = parse_symbol({"kind": "class", "name": "x"})

        assert isinstance(record, ClassSymbol)
        assert record.metadata_collection("properties") == []
        assert record.constructor is None


class TestSymbolInfo:
    def test_top_level_symbol_is_symbol(self) -> None:
        info = SymbolInfo(parse_symbol({"kind": "enum", "name": "E"}), "lib", None)

        assert info.is_symbol

    def test_field_is_not_symbol(self) -> None:
        info = SymbolInfo(FieldRecord(SymbolKind.METHOD, {"name": "m"}), "lib", "x/Y")

        assert not info.is_symbol

    def test_unknown_kind_is_not_symbol(self) -> None:
        info = SymbolInfo(parse_symbol({"kind": "datatype", "name": "d"}), "lib", None)

        assert not info.is_symbol

    def test_field_dict_carries_kind_tag(self) -> None:
        field = FieldRecord(SymbolKind.UI5_EVENT, {"name": "press"})

        assert field.as_dict() == {"kind": "ui5-event", "name": "press"}
