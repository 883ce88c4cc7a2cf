from dataclasses import dataclass, field
from typing import Any

from .types import PropertyType

__all__ = ["PropertyDescriptor", "Metadata", "Unset"]


class _Unset:
    __instance = None

    def __new__(cls) -> "_Unset":
        if cls.__instance is None:
            cls.__instance = super().__new__(cls)
        return cls.__instance

    def __repr__(self) -> str:
        return "Unset"


Unset = _Unset()


@dataclass(frozen=True)
class PropertyDescriptor:
    """A single configuration property implied by an eligible accessor.

    Args:
        accessor_name: The name of the accessor the property comes from.
        words: The property name split into lowercase words, in order.
        type: The property type.
        validator: The validator strategy. Defaults to the type's default validator.
    """

    accessor_name: str
    words: tuple[str, ...]
    type: PropertyType
    validator: Any = field(default=Unset, hash=False)

    def __post_init__(self):
        if not self.accessor_name:
            raise ValueError("accessor_name can't be empty")
        if self.words is None:
            raise ValueError("words can't be None")
        words = tuple(self.words)
        if not any(words):
            raise ValueError(
                f"words of {self.accessor_name} must contain at least one non-empty word"
            )
        object.__setattr__(self, "words", words)
        if not isinstance(self.type, PropertyType):
            raise ValueError(
                f"type of {self.accessor_name} must be a PropertyType, got {self.type!r}"
            )
        if self.validator is Unset:
            object.__setattr__(self, "validator", self.type.default_validator)
        elif self.validator is None:
            raise ValueError(f"validator of {self.accessor_name} can't be None")

    @property
    def converter(self) -> type:
        return self.type.default_converter


@dataclass(frozen=True)
class Metadata:
    """The resolved shape of a contract: the translator and every property."""

    translator: Any
    properties: frozenset[PropertyDescriptor] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "properties", frozenset(self.properties))
