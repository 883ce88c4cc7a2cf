"""Readers producing the flat raw sources that `bind` consumes.

A reader is any callable returning a dictionary, so a plain `dict` wrapped in
a lambda, `os.environ.copy` or one of the readers below all work.
"""

import logging
import re
import tomllib
from typing import Any, Protocol

__all__ = ["ConfigReader", "TomlReader", "PropertiesReader", "split_key"]

logger = logging.getLogger(__name__)


class ConfigReader(Protocol):
    def __call__(self) -> dict: ...


def split_key(key: str) -> list[str]:
    return key.split(".")


class TomlReader(ConfigReader):
    """Read the scalar values of a TOML table.

    Args:
        path: The TOML file.
        table: A dotted path to the table to read, e.g. `"app.engine"`. The
            top-level table is read if empty.
    """

    def __init__(self, path: str, table: str = ""):
        self.path = path
        self.table = table

    def __call__(self) -> dict:
        with open(self.path, "rb") as f:
            config: dict[str, Any] = tomllib.load(f)
        if self.table:
            for key in split_key(self.table):
                if key not in config:
                    raise KeyError(f"Key {key} not found in configuration file")
                config = config[key]
                if not isinstance(config, dict):
                    raise ValueError(f"{self.table} in {self.path} is not a table")

        flat = {}
        for key, value in config.items():
            if isinstance(value, dict):
                logger.debug("Skipped nested table %s in %s", key, self.path)
                continue
            if isinstance(value, list):
                raise ValueError(
                    f"Key {key} in {self.path} is an array, which is not supported"
                )
            flat[key] = value
        return flat


class PropertiesReader(ConfigReader):
    """Read a `.properties` file. All values are strings.

    Follows the usual `.properties` rules: lines starting with `#` or `!` are
    comments, the key ends at the first unescaped `=`, `:` or whitespace, a
    line ending with an odd number of backslashes continues on the next line,
    and `\\t`, `\\n`, `\\r`, `\\f` and `\\uXXXX` escapes are decoded, any other
    escaped character standing for itself (`\\=`, `\\:`, `\\ `). Whitespace
    after the value is kept.
    """

    def __init__(self, path: str, encoding: str = "utf-8"):
        self.path = path
        self.encoding = encoding

    def __call__(self) -> dict:
        with open(self.path, encoding=self.encoding) as f:
            return self.parse(f.read())

    @staticmethod
    def parse(text: str) -> dict[str, str]:
        properties = {}
        pending = ""
        for line in text.splitlines():
            line = pending + line.lstrip()
            pending = ""
            if not line or line[0] in "#!":
                continue
            if (len(line) - len(line.rstrip("\\"))) % 2 == 1:
                pending = line[:-1]
                continue
            properties.update([PropertiesReader._split_line(line)])
        if pending:
            properties.update([PropertiesReader._split_line(pending)])
        return properties

    @staticmethod
    def _split_line(line: str) -> tuple[str, str]:
        match = _KEY.match(line)  # always matches, possibly empty
        rest = line[match.end() :].lstrip()
        if rest[:1] in ("=", ":"):
            rest = rest[1:].lstrip()
        return _unescape(match.group()), _unescape(rest)


_KEY = re.compile(r"(?:\\.|[^\\=:\s])*")
_ESCAPE = re.compile(r"\\(u[0-9a-fA-F]{4}|.)", re.DOTALL)
_ESCAPED_CHARS = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _unescape(text: str) -> str:
    def replace(match: re.Match) -> str:
        escaped = match.group(1)
        if len(escaped) == 5:
            return chr(int(escaped[1:], 16))
        return _ESCAPED_CHARS.get(escaped, escaped)

    return _ESCAPE.sub(replace, text)
