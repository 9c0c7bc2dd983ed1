"""Tests for the YAML, JSON, TOML and XML adapters."""

from __future__ import annotations

import pytest

from praetorian.adapters.json_file import JsonFileAdapter
from praetorian.adapters.toml_file import TomlFileAdapter
from praetorian.adapters.xml_file import XmlFileAdapter, parse_xml_content
from praetorian.adapters.yaml_file import YamlFileAdapter
from praetorian.exceptions import (
    ConfigFileNotFoundError,
    ConfigParseError,
    InvalidArgumentError,
)


class TestYamlFileAdapter:
    def test_native_scalars(self) -> None:
        text = "port: 8080\ndebug: false\nratio: 0.5\nmissing: null\nname: app\n"
        assert YamlFileAdapter().parse(text) == {
            "port": 8080,
            "debug": False,
            "ratio": 0.5,
            "missing": None,
            "name": "app",
        }

    def test_block_scalar(self) -> None:
        text = "motd: |\n  line one\n  line two\n"
        assert YamlFileAdapter().parse(text) == {"motd": "line one\nline two\n"}

    def test_aliases_resolved(self) -> None:
        text = (
            "defaults: &defaults\n"
            "  timeout: 30\n"
            "service:\n"
            "  <<: *defaults\n"
            "  name: api\n"
        )
        result = YamlFileAdapter().parse(text)
        assert result["service"] == {"timeout": 30, "name": "api"}

    def test_dates_become_strings(self) -> None:
        result = YamlFileAdapter().parse("released: 2024-01-15\n")
        assert result == {"released": "2024-01-15"}

    def test_empty_document(self) -> None:
        assert YamlFileAdapter().parse("") == {}
        assert YamlFileAdapter().parse("# only a comment\n") == {}

    def test_array_root_rejected(self) -> None:
        with pytest.raises(ConfigParseError, match="expected object, got array"):
            YamlFileAdapter().parse("- a\n- b\n")

    def test_scalar_root_rejected(self) -> None:
        with pytest.raises(ConfigParseError, match="expected object, got string"):
            YamlFileAdapter().parse("just text\n")

    def test_syntax_error_has_line(self) -> None:
        with pytest.raises(ConfigParseError) as excinfo:
            YamlFileAdapter().parse("key: value: other\n", source="bad.yaml")
        assert "bad.yaml" in str(excinfo.value)
        assert excinfo.value.file_path == "bad.yaml"
        assert excinfo.value.details["line"] is not None

    def test_read_missing_file(self, tmp_path) -> None:
        with pytest.raises(ConfigFileNotFoundError):
            YamlFileAdapter().read(str(tmp_path / "nope.yaml"))

    def test_read_empty_path(self) -> None:
        with pytest.raises(InvalidArgumentError):
            YamlFileAdapter().read("")

    def test_read_config_file(self, write_file) -> None:
        path = write_file("app.yml", "a:\n  b: 1\n")
        config_file = YamlFileAdapter().read_config_file(path)
        assert config_file.path == path
        assert config_file.format.value == "yaml"
        assert config_file.content == {"a": {"b": 1}}


class TestJsonFileAdapter:
    def test_object_root(self) -> None:
        assert JsonFileAdapter().parse('{"a": {"b": [1, 2]}}') == {"a": {"b": [1, 2]}}

    def test_list_root_rejected(self) -> None:
        with pytest.raises(ConfigParseError, match="expected object, got array"):
            JsonFileAdapter().parse("[1, 2]")

    def test_invalid_json(self) -> None:
        with pytest.raises(ConfigParseError, match="Invalid JSON syntax"):
            JsonFileAdapter().parse("{nope}")


class TestTomlFileAdapter:
    def test_tables_and_types(self) -> None:
        text = '[server]\nhost = "0.0.0.0"\nport = 8000\n[server.tls]\nenabled = true\n'
        assert TomlFileAdapter().parse(text) == {
            "server": {"host": "0.0.0.0", "port": 8000, "tls": {"enabled": True}},
        }

    def test_datetime_normalized(self) -> None:
        result = TomlFileAdapter().parse("when = 1979-05-27\n")
        assert result == {"when": "1979-05-27"}

    def test_invalid(self) -> None:
        with pytest.raises(ConfigParseError):
            TomlFileAdapter().parse("key = \n")


class TestXmlAdapter:
    def test_root_unwrapped(self) -> None:
        text = "<config><database><host>db</host><port>5432</port></database></config>"
        assert parse_xml_content(text) == {"database": {"host": "db", "port": "5432"}}

    def test_attributes_merged_with_children(self) -> None:
        text = '<config><server port="80" tls="off"><name>web</name></server></config>'
        assert parse_xml_content(text) == {
            "server": {"port": "80", "tls": "off", "name": "web"}
        }

    def test_repeated_elements_collapse(self) -> None:
        text = "<config><host>a</host><host>b</host></config>"
        assert parse_xml_content(text) == {"host": "b"}

    def test_text_alongside_attributes(self) -> None:
        text = '<config><url secure="true">https://x</url></config>'
        assert parse_xml_content(text) == {"url": {"secure": "true", "_": "https://x"}}

    def test_empty_root(self) -> None:
        assert parse_xml_content("<config/>") == {}
        assert parse_xml_content("<config>text only</config>") == {}
        assert parse_xml_content("") == {}

    def test_namespaces_dropped(self) -> None:
        text = '<c:config xmlns:c="urn:x"><c:name>n</c:name></c:config>'
        assert parse_xml_content(text) == {"name": "n"}

    def test_malformed(self) -> None:
        with pytest.raises(ConfigParseError, match="XML parsing failed"):
            XmlFileAdapter().parse("<config><open></config>", source="bad.xml")
