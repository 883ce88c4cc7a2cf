"""Name extractors decide which accessors are properties and split their names.

Example:

```python
>>> JavaBeanNameExtractor().split_name("getMyCoolName")
('my', 'cool', 'name')
>>> SnakeCaseNameExtractor().split_name("get_vendor_name")
('vendor', 'name')
```
"""

from typing import Protocol

from .contract import Accessor
from .types import PropertyType

__all__ = [
    "NameExtractor",
    "JavaBeanNameExtractor",
    "SnakeCaseNameExtractor",
    "split_camel_case",
]


class NameExtractor(Protocol):
    def is_eligible(self, accessor: Accessor) -> bool: ...

    def split_name(self, accessor_name: str) -> tuple[str, ...]: ...


def split_camel_case(name: str) -> tuple[str, ...]:
    """Split `name` before every uppercase letter but the first one.

    Every fragment is lowercased. A name without an inner uppercase letter is
    a single word.
    """
    words = []
    start = 0
    for index, char in enumerate(name):
        if index > 0 and char.isupper():
            words.append(name[start:index].lower())
            start = index
    words.append(name[start:].lower())
    return tuple(words)


def _is_typed_getter(accessor: Accessor) -> bool:
    return (
        not accessor.parameters
        and PropertyType.from_native(accessor.return_type) is not None
    )


class JavaBeanNameExtractor:
    """The default extractor: `getSomeValue` is the property `some value`."""

    GETTER_PREFIX = "get"

    def is_eligible(self, accessor: Accessor) -> bool:
        # A bare "get" has no property name.
        named = accessor.name.startswith(self.GETTER_PREFIX) and len(
            accessor.name
        ) > len(self.GETTER_PREFIX)
        return named and _is_typed_getter(accessor)

    def split_name(self, accessor_name: str) -> tuple[str, ...]:
        return split_camel_case(accessor_name.removeprefix(self.GETTER_PREFIX))


class SnakeCaseNameExtractor:
    """Reads Python style accessors: `vendor_name` and `get_vendor_name` alike."""

    GETTER_PREFIX = "get_"

    def is_eligible(self, accessor: Accessor) -> bool:
        return _is_typed_getter(accessor) and bool(self.split_name(accessor.name))

    def split_name(self, accessor_name: str) -> tuple[str, ...]:
        stripped = accessor_name.removeprefix(self.GETTER_PREFIX)
        return tuple(word.lower() for word in stripped.split("_") if word)
