"""Tests for AdapterRegistry."""

from __future__ import annotations

import pytest

from praetorian.adapters.env_file import EnvFileAdapter
from praetorian.adapters.registry import AdapterRegistry
from praetorian.adapters.yaml_file import YamlFileAdapter
from praetorian.exceptions import ConfigFileNotFoundError, InvalidArgumentError, UnsupportedFormatError
from praetorian.validator.models import ConfigFormat


class TestDispatch:
    def test_default_order(self) -> None:
        formats = [a.format for a in AdapterRegistry().adapters]
        assert formats == [
            ConfigFormat.yaml,
            ConfigFormat.json,
            ConfigFormat.env,
            ConfigFormat.toml,
            ConfigFormat.ini,
            ConfigFormat.xml,
            ConfigFormat.properties,
            ConfigFormat.hcl,
            ConfigFormat.plist,
        ]

    def test_first_match_wins(self) -> None:
        class GreedyAdapter(EnvFileAdapter):
            def can_handle(self, path) -> bool:
                return True

        registry = AdapterRegistry([GreedyAdapter(), YamlFileAdapter()])
        assert isinstance(registry.get_adapter("a.yaml"), GreedyAdapter)

    def test_extension_case_insensitive(self) -> None:
        assert AdapterRegistry().get_adapter("CONFIG.YML").format == ConfigFormat.yaml

    def test_unsupported(self) -> None:
        registry = AdapterRegistry()
        assert not registry.is_supported("notes.txt")
        with pytest.raises(UnsupportedFormatError) as excinfo:
            registry.get_adapter("notes.txt")
        assert ".yaml" in excinfo.value.supported_extensions
        assert ".properties" in str(excinfo.value)

    def test_is_supported_tolerates_junk(self) -> None:
        assert AdapterRegistry().is_supported(None) is False

    def test_read_file_empty_path(self) -> None:
        with pytest.raises(InvalidArgumentError):
            AdapterRegistry().read_file("")


class TestReadFiles:
    @pytest.mark.asyncio
    async def test_order_preserved(self, write_file) -> None:
        paths = [
            write_file("b.json", '{"b": 1}'),
            write_file("a.yaml", "a: 1\n"),
            write_file("c.env", "C=1\n"),
        ]
        files = await AdapterRegistry().read_files(paths)
        assert [f.path for f in files] == paths
        assert [f.format for f in files] == [
            ConfigFormat.json, ConfigFormat.yaml, ConfigFormat.env,
        ]

    @pytest.mark.asyncio
    async def test_failure_propagates(self, write_file, tmp_path) -> None:
        good = write_file("a.yaml", "a: 1\n")
        with pytest.raises(ConfigFileNotFoundError):
            await AdapterRegistry().read_files([good, str(tmp_path / "gone.yaml")])


class TestLoadFiles:
    @pytest.mark.asyncio
    async def test_failures_become_errors(self, write_file, tmp_path) -> None:
        good = write_file("ok.yaml", "a: 1\n")
        broken = write_file("broken.json", "{not json")
        missing = str(tmp_path / "missing.yaml")
        unknown = write_file("notes.txt", "hello")

        files, errors = await AdapterRegistry().load_files([good, broken, missing, unknown])

        assert [f.path for f in files] == [good]
        assert [e.code for e in errors] == [
            "PARSE_ERROR", "FILE_NOT_FOUND", "UNSUPPORTED_FORMAT",
        ]
        assert [e.context["file"] for e in errors] == [broken, missing, unknown]
