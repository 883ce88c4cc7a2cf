"""Tests for the `confview` command line tool."""

import io
from typing import Protocol

import pytest
from rich.console import Console

from confview import prop
from confview.cli import load_contract, main


class PortValidator:
    def is_valid(self, value: int) -> bool:
        return 0 < value < 65536


class ServerConfig(Protocol):
    def getHostName(self) -> str: ...

    @prop(validator=PortValidator)
    def getPort(self) -> int: ...

    def reload(self) -> None: ...


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200)


def output(console):
    return console.file.getvalue()


class TestLoadContract:
    def test_load(self):
        assert load_contract(f"{__name__}:ServerConfig") is ServerConfig

    def test_invalid_reference(self):
        with pytest.raises(ValueError, match="module:Contract"):
            load_contract("ServerConfig")


class TestDescribe:
    """Test listing the properties of a contract."""

    def test_describe(self, console):
        assert main(["describe", f"{__name__}:ServerConfig"], console) == 0
        text = output(console)
        assert "host-name" in text
        assert "PortValidator" in text
        assert "Not properties: reload" in text

    def test_describe_with_translator(self, console):
        args = ["describe", f"{__name__}:ServerConfig", "--translator", "dotted"]
        assert main(args, console) == 0
        assert "host.name" in output(console)

    def test_unknown_contract(self, console):
        assert main(["describe", "no_such_module:Config"], console) == 2
        assert "Error" in output(console)


class TestCheck:
    """Test checking configuration files against a contract."""

    def test_valid_toml(self, tmp_path, console):
        path = tmp_path / "server.toml"
        path.write_text('[server]\nhost-name = "localhost"\nport = 8080\n')
        args = ["check", f"{__name__}:ServerConfig", str(path), "--table", "server"]
        assert main(args, console) == 0
        text = output(console)
        assert "'localhost'" in text
        assert "8080" in text

    def test_invalid_properties(self, tmp_path, console):
        path = tmp_path / "server.properties"
        path.write_text("host-name=localhost\nport=70000\n")
        assert main(["check", f"{__name__}:ServerConfig", str(path)], console) == 1
        assert "Invalid configuration" in output(console)
        assert "port" in output(console)

    def test_missing_property(self, tmp_path, console):
        path = tmp_path / "server.properties"
        path.write_text("host-name=localhost\n")
        assert main(["check", f"{__name__}:ServerConfig", str(path)], console) == 1
        assert "port" in output(console)

    def test_table_requires_toml(self, tmp_path, console):
        path = tmp_path / "server.properties"
        path.write_text("")
        args = ["check", f"{__name__}:ServerConfig", str(path), "--table", "x"]
        assert main(args, console) == 2

    def test_missing_table(self, tmp_path, console):
        path = tmp_path / "server.toml"
        path.write_text('[server]\nhost-name = "localhost"\nport = 8080\n')
        args = ["check", f"{__name__}:ServerConfig", str(path), "--table", "nope"]
        assert main(args, console) == 2
        assert "nope" in output(console)

    def test_missing_file(self, tmp_path, console):
        path = tmp_path / "absent.toml"
        assert main(["check", f"{__name__}:ServerConfig", str(path)], console) == 2
        assert "Error" in output(console)
