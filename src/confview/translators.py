"""Name translators join the words of a property into its lookup key."""

from typing import Protocol, Sequence

__all__ = [
    "NameTranslator",
    "SeparatorNameTranslator",
    "HyphenatedNameTranslator",
    "DottedNameTranslator",
    "UnderscoredNameTranslator",
    "EnvironmentNameTranslator",
]


class NameTranslator(Protocol):
    def join(self, words: Sequence[str]) -> str: ...


class SeparatorNameTranslator:
    """Join the words with a separator, optionally upper-casing the result."""

    def __init__(self, separator: str, *, upper: bool = False):
        self.separator = separator
        self.upper = upper

    def join(self, words: Sequence[str]) -> str:
        key = self.separator.join(words)
        return key.upper() if self.upper else key

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.separator!r}, upper={self.upper})"


class HyphenatedNameTranslator(SeparatorNameTranslator):
    """The default translator: `engine-threshold`."""

    def __init__(self):
        super().__init__("-")


class DottedNameTranslator(SeparatorNameTranslator):
    def __init__(self):
        super().__init__(".")


class UnderscoredNameTranslator(SeparatorNameTranslator):
    def __init__(self):
        super().__init__("_")


class EnvironmentNameTranslator(SeparatorNameTranslator):
    """Keys in environment variable style: `ENGINE_THRESHOLD`."""

    def __init__(self):
        super().__init__("_", upper=True)
