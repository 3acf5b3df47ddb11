"""Tests for framework names, versions and documentation URIs."""

import pytest

from apiref.core.errors import ErrorCode, InvalidInputError
from apiref.reference.frameworks import (
    Framework,
    corpus_dir_name,
    parse_framework,
    validate_version,
)
from apiref.reference.uri import create_uri_for_symbol


class TestParseFramework:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("OpenUI5", Framework.OPENUI5),
            ("openui5", Framework.OPENUI5),
            ("SAPUI5", Framework.SAPUI5),
            (" sapui5 ", Framework.SAPUI5),
        ],
    )
    def test_given_any_casing_when_parsed_then_canonical(
        self, name: str, expected: Framework
    ) -> None:
        assert parse_framework(name) is expected

    def test_given_unknown_name_when_parsed_then_invalid_input(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            parse_framework("UI5")
        assert exc_info.value.code == ErrorCode.INVALID_FRAMEWORK


class TestValidateVersion:
    def test_given_version_when_validated_then_lowercased(self) -> None:
        assert validate_version("1.120.0-SNAPSHOT") == "1.120.0-snapshot"

    @pytest.mark.parametrize("version", ["../etc", "1.0/2", "", "1 0", "1.0;rm"])
    def test_given_unsafe_version_when_validated_then_rejected(self, version: str) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            validate_version(version)
        assert exc_info.value.code == ErrorCode.INVALID_VERSION

    def test_corpus_dir_name(self) -> None:
        assert corpus_dir_name(Framework.SAPUI5, "1.136.7") == "sapui5-1.136.7"


class TestCreateUriForSymbol:
    """Documentation links for formatted records."""

    def test_given_class_when_uri_built_then_points_to_module_page(self) -> None:
        symbol = {"kind": "class", "name": "sap.m.Button", "module": "sap/m/Button"}

        uri = create_uri_for_symbol(symbol, "OpenUI5", "1.120.0")

        assert uri == "https://openui5.org/1.120.0/api/sap.m.Button/"

    def test_given_export_when_uri_built_then_export_appended(self) -> None:
        symbol = {
            "kind": "enum",
            "name": "sap.m.ButtonType",
            "module": "sap/m/library",
            "export": "ButtonType",
        }

        uri = create_uri_for_symbol(symbol, Framework.SAPUI5, "1.136.7")

        assert uri == "https://ui5.sap.com/1.136.7/api/sap.m.library/ButtonType/"

    def test_given_no_module_when_uri_built_then_name_used(self) -> None:
        uri = create_uri_for_symbol({"kind": "namespace", "name": "jQuery"}, "OpenUI5", "1.0.0")

        assert uri == "https://openui5.org/1.0.0/api/jQuery/"

    @pytest.mark.parametrize(
        ("kind", "suffix"),
        [
            ("constructor", "constructor"),
            ("ui5-aggregation", "aggregations/tooltip"),
            ("ui5-association", "associations/tooltip"),
            ("method", "methods/tooltip"),
            ("function", "functions/tooltip"),
            ("ui5-property", "controlProperties/tooltip"),
            ("ui5-event", "events/tooltip"),
            ("property", ""),
        ],
    )
    def test_given_field_kind_when_uri_built_then_section_appended(
        self, kind: str, suffix: str
    ) -> None:
        symbol = {"kind": kind, "name": "tooltip", "module": "sap/m/Button"}

        uri = create_uri_for_symbol(symbol, "OpenUI5", "1.120.0")

        assert uri == f"https://openui5.org/1.120.0/api/sap.m.Button/{suffix}"

    def test_given_unknown_framework_when_uri_built_then_invalid_input(self) -> None:
        with pytest.raises(InvalidInputError):
            create_uri_for_symbol({"name": "x"}, "UI6", "1.0.0")
