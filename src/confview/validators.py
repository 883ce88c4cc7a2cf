"""Validators decide whether a converted value is acceptable.

A validator is anything with an `is_valid` method returning a bool. It must
not raise for a value of the property's type. Like converters, validators are
shared process-wide and must be stateless.
"""

from typing import Any, Protocol

__all__ = ["PropertyValidator", "AcceptAllValidator"]


class PropertyValidator(Protocol):
    def is_valid(self, value: Any) -> bool: ...


class AcceptAllValidator:
    """The default validator. Every value is valid."""

    def is_valid(self, value: Any) -> bool:
        return True
