"""Tests for the HCL/Terraform and property list adapters."""

from __future__ import annotations

import plistlib
import sys
from pathlib import Path

import pytest

from praetorian.adapters.hcl_file import HclFileAdapter, _unquote, fold_blocks
from praetorian.adapters.plist_file import PlistFileAdapter, parse_plist_bytes
from praetorian.adapters.registry import AdapterRegistry
from praetorian.exceptions import ConfigParseError, UnsupportedFormatError
from praetorian.validator.models import ConfigFormat


class TestHclDispatch:
    @pytest.mark.parametrize("name", ["main.tf", "vars.hcl", "prod.tfvars", "MAIN.TF"])
    def test_can_handle(self, name: str) -> None:
        assert HclFileAdapter().can_handle(name)

    def test_registry_supports_terraform(self) -> None:
        registry = AdapterRegistry()
        assert registry.is_supported("main.tf")
        assert registry.is_supported("vars.hcl")
        assert registry.get_adapter("main.tf").format == ConfigFormat.hcl

    def test_empty_content(self) -> None:
        assert HclFileAdapter().parse("  \n") == {}

    def test_missing_library_reported(self, monkeypatch) -> None:
        monkeypatch.setitem(sys.modules, "hcl2", None)
        with pytest.raises(UnsupportedFormatError, match="python-hcl2"):
            HclFileAdapter().parse("a = 1\n", source="main.tf")


class TestFoldBlocks:
    def test_block_lists_merge_by_label(self) -> None:
        tree = {
            "variable": [
                {"region": {"default": "us-west-2"}},
                {"zone": {"default": "a"}},
            ],
            "name": "app",
        }
        assert fold_blocks(tree) == {
            "variable": {
                "region": {"default": "us-west-2"},
                "zone": {"default": "a"},
            },
            "name": "app",
        }

    def test_nested_labels_merge(self) -> None:
        tree = {
            "resource": [
                {"aws_instance": {"web": {"ami": "x"}}},
                {"aws_instance": {"db": {"ami": "y"}}},
            ]
        }
        assert fold_blocks(tree) == {
            "resource": {"aws_instance": {"web": {"ami": "x"}, "db": {"ami": "y"}}}
        }

    def test_attribute_lists_untouched(self) -> None:
        assert fold_blocks({"zones": ["a", "b"]}) == {"zones": ["a", "b"]}

    def test_unquote_strings_and_labels(self) -> None:
        assert _unquote({'"region"': {"default": '"us-west-2"'}, "n": [1, '"x"']}) == {
            "region": {"default": "us-west-2"},
            "n": [1, "x"],
        }


class TestHclParse:
    @pytest.fixture(autouse=True)
    def _needs_hcl2(self) -> None:
        pytest.importorskip("hcl2")

    def test_variable_block(self) -> None:
        text = 'variable "region" {\n  default = "us-west-2"\n}\n'
        assert HclFileAdapter().parse(text) == {
            "variable": {"region": {"default": "us-west-2"}}
        }

    def test_attributes(self, write_file) -> None:
        path = write_file("prod.tfvars", 'instance_count = 3\nenv = "prod"\n')
        assert HclFileAdapter().read(path) == {"instance_count": 3, "env": "prod"}

    def test_syntax_error(self) -> None:
        with pytest.raises(ConfigParseError, match="Invalid HCL syntax in main.tf"):
            HclFileAdapter().parse('variable "x" {\n', source="main.tf")


class TestPlist:
    def test_xml_plist_file(self, tmp_path: Path) -> None:
        path = tmp_path / "Info.plist"
        path.write_bytes(plistlib.dumps({"CFBundleName": "App", "Version": 2}))
        assert PlistFileAdapter().read(path) == {"CFBundleName": "App", "Version": 2}

    def test_binary_plist_file(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.plist"
        path.write_bytes(
            plistlib.dumps({"debug": False, "blob": b"\x01\xff"}, fmt=plistlib.FMT_BINARY)
        )
        assert PlistFileAdapter().read(path) == {"debug": False, "blob": "01ff"}

    def test_non_mapping_root(self) -> None:
        with pytest.raises(ConfigParseError, match="expected object"):
            parse_plist_bytes(plistlib.dumps(["a", "b"]), source="list.plist")

    def test_malformed(self) -> None:
        with pytest.raises(ConfigParseError, match="Invalid plist"):
            PlistFileAdapter().parse("<plist><dict>", source="bad.plist")

    def test_registry_dispatch(self) -> None:
        assert AdapterRegistry().get_adapter("Info.plist").format == ConfigFormat.plist
