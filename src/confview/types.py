from enum import Enum

from . import converters
from .natives import Byte, Char, Float32, Long, Short
from .validators import AcceptAllValidator

__all__ = ["PropertyType"]


class PropertyType(Enum):
    """The closed set of supported property types.

    Every member carries its native Python class, the converter used when the
    raw value is not already native, and the validator used when the accessor
    does not declare its own.
    """

    BOOLEAN = (bool, converters.BooleanConverter, AcceptAllValidator)
    BYTE = (Byte, converters.ByteConverter, AcceptAllValidator)
    SHORT = (Short, converters.ShortConverter, AcceptAllValidator)
    INTEGER = (int, converters.IntegerConverter, AcceptAllValidator)
    LONG = (Long, converters.LongConverter, AcceptAllValidator)
    FLOAT = (Float32, converters.FloatConverter, AcceptAllValidator)
    DOUBLE = (float, converters.DoubleConverter, AcceptAllValidator)
    CHAR = (Char, converters.CharConverter, AcceptAllValidator)
    STRING = (str, converters.StringConverter, AcceptAllValidator)

    def __init__(self, native: type, default_converter: type, default_validator: type):
        self.native = native
        self.default_converter = default_converter
        self.default_validator = default_validator

    @classmethod
    def from_native(cls, native: object) -> "PropertyType | None":
        """Return the type whose native class is exactly `native`, or None."""
        for member in cls:
            if member.native is native:
                return member
        return None

    def accepts(self, value: object) -> bool:
        """Whether `value` can be used as is, without conversion.

        `bool` is an `int` subclass in Python, but a boolean is never taken
        as a number.
        """
        if isinstance(value, bool) and self.native is not bool:
            return False
        return isinstance(value, self.native)
