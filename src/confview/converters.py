"""Converters turn the textual form of a raw value into a native value.

A converter is anything with a `convert_from_text` method. Converters are
expected to be stateless since a single instance is shared process-wide (see
`confview.strategies`). A malformed text must raise `ValueError`.
"""

from typing import Any, Protocol

from .natives import Byte, Char, Float32, Long, Short

__all__ = [
    "PropertyConverter",
    "BooleanConverter",
    "ByteConverter",
    "ShortConverter",
    "IntegerConverter",
    "LongConverter",
    "FloatConverter",
    "DoubleConverter",
    "CharConverter",
    "StringConverter",
]


def _plain_number(text: str) -> str:
    # int() and float() also accept digit separators and non-ASCII digits
    text = text.strip()
    if "_" in text or not text.isascii():
        raise ValueError(f"{text!r} is not a plain number")
    return text


class PropertyConverter(Protocol):
    def convert_from_text(self, text: str) -> Any: ...


class BooleanConverter:
    def convert_from_text(self, text: str) -> bool:
        match text.strip().lower():
            case "true":
                return True
            case "false":
                return False
            case _:
                raise ValueError(f"Cannot convert {text!r} to a boolean")


class IntegerConverter:
    native: type[int] = int

    def convert_from_text(self, text: str) -> int:
        return self.native(int(_plain_number(text)))


class ByteConverter(IntegerConverter):
    native = Byte


class ShortConverter(IntegerConverter):
    native = Short


class LongConverter(IntegerConverter):
    native = Long


class DoubleConverter:
    def convert_from_text(self, text: str) -> float:
        return float(_plain_number(text))


class FloatConverter:
    def convert_from_text(self, text: str) -> Float32:
        return Float32(float(_plain_number(text)))


class CharConverter:
    def convert_from_text(self, text: str) -> Char:
        return Char(text)


class StringConverter:
    def convert_from_text(self, text: str) -> str:
        return text
