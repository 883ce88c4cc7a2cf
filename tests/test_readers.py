"""Tests for the source readers."""

from typing import Protocol

import pytest
from confview import PropertiesReader, TomlReader, bind_reader

TOML = """
name = "app"
threshold = 300.0

[engine]
vendor-name = "FooBar"
engine-threshold = 300.0

[engine.extra]
ignored = 1

[lists]
values = [1, 2]
"""

PROPERTIES = """
# a comment
! another comment
vendor-name = FooBar
engine-threshold: 300
  description = a long \\
    value
empty
"""


class EngineConfig(Protocol):
    def getVendorName(self) -> str: ...
    def getEngineThreshold(self) -> float: ...


@pytest.fixture
def toml_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(TOML)
    return str(path)


@pytest.fixture
def properties_file(tmp_path):
    path = tmp_path / "config.properties"
    path.write_text(PROPERTIES)
    return str(path)


class TestTomlReader:
    """Test reading flat tables from TOML files."""

    def test_top_level(self, toml_file):
        assert TomlReader(toml_file)() == {"name": "app", "threshold": 300.0}

    def test_table(self, toml_file):
        assert TomlReader(toml_file, "engine")() == {
            "vendor-name": "FooBar",
            "engine-threshold": 300.0,
        }

    def test_dotted_table(self, toml_file):
        assert TomlReader(toml_file, "engine.extra")() == {"ignored": 1}

    def test_missing_table(self, toml_file):
        with pytest.raises(KeyError, match="nope"):
            TomlReader(toml_file, "engine.nope")()

    def test_not_a_table(self, toml_file):
        with pytest.raises(ValueError, match="not a table"):
            TomlReader(toml_file, "name")()

    def test_arrays_are_rejected(self, toml_file):
        with pytest.raises(ValueError, match="array"):
            TomlReader(toml_file, "lists")()

    def test_bind_reader(self, toml_file):
        config = bind_reader(TomlReader(toml_file, "engine"), EngineConfig)
        assert config.getVendorName() == "FooBar"
        assert config.getEngineThreshold() == 300.0


class TestPropertiesReader:
    """Test reading `.properties` files."""

    def test_parse(self):
        assert PropertiesReader.parse(PROPERTIES) == {
            "vendor-name": "FooBar",
            "engine-threshold": "300",
            "description": "a long value",
            "empty": "",
        }

    def test_first_separator_wins(self):
        assert PropertiesReader.parse("url = http://example.org") == {
            "url": "http://example.org"
        }

    def test_trailing_continuation(self):
        assert PropertiesReader.parse("key = a \\") == {"key": "a "}

    def test_whitespace_separator(self):
        assert PropertiesReader.parse("vendor-name   FooBar\nport\t8080") == {
            "vendor-name": "FooBar",
            "port": "8080",
        }

    def test_escaped_separators_in_key(self):
        text = "a\\=b=c\nhost\\:port : x\nmy\\ key value"
        assert PropertiesReader.parse(text) == {
            "a=b": "c",
            "host:port": "x",
            "my key": "value",
        }

    def test_escapes_in_value(self):
        text = "greeting = caf\\u00e9\\tbar\\\\n"
        assert PropertiesReader.parse(text) == {"greeting": "caf\u00e9\tbar\\n"}

    def test_escaped_backslash_is_not_a_continuation(self):
        text = "path = C:\\\\\nnext = 1"
        assert PropertiesReader.parse(text) == {"path": "C:\\", "next": "1"}

    def test_bind_reader(self, properties_file):
        config = bind_reader(PropertiesReader(properties_file), EngineConfig)
        assert config.getVendorName() == "FooBar"
        assert config.getEngineThreshold() == 300.0
