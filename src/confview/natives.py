"""Native representations for the scalar types Python does not have.

Python has a single unbounded `int`, a double precision `float` and no
character type. The fixed-width integers, the single precision float and the
character are modelled as thin subclasses so that every property type owns a
distinct class and a value can be checked with `isinstance`.
"""

import struct

__all__ = ["Byte", "Short", "Long", "Float32", "Char"]


class _BoundedInt(int):
    bits = 0

    def __new__(cls, value=0, *args):
        instance = super().__new__(cls, value, *args)
        low, high = -(2 ** (cls.bits - 1)), 2 ** (cls.bits - 1) - 1
        if not low <= instance <= high:
            raise ValueError(
                f"{cls.__name__} value {int(instance)} is out of range [{low}, {high}]"
            )
        return instance

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"


class Byte(_BoundedInt):
    """A signed 8-bit integer."""

    bits = 8


class Short(_BoundedInt):
    """A signed 16-bit integer."""

    bits = 16


class Long(_BoundedInt):
    """A signed 64-bit integer."""

    bits = 64


class Float32(float):
    """A float rounded to single precision on construction."""

    def __new__(cls, value=0.0):
        try:
            single = struct.unpack("<f", struct.pack("<f", float(value)))[0]
        except OverflowError as e:
            raise ValueError(f"Float32 value {value!r} is out of range") from e
        return super().__new__(cls, single)

    def __repr__(self) -> str:
        return f"Float32({float(self)!r})"


class Char(str):
    """A string of exactly one character."""

    def __new__(cls, value=""):
        instance = super().__new__(cls, value)
        if len(instance) != 1:
            raise ValueError(f"Char requires exactly one character, got {value!r}")
        return instance

    def __repr__(self) -> str:
        return f"Char({str(self)!r})"
