"""Binding raw key/value sources to access contracts.

Example usage:

```python
class EngineConfig(Protocol):
    def getEngineThreshold(self) -> float: ...
    def getVendorName(self) -> str: ...

engine = bind({"engine-threshold": "300", "vendor-name": "FooBar"}, EngineConfig)
assert engine.getEngineThreshold() == 300.0
```
"""

import logging
import types
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping

from .contract import ContractOptions, accessors
from .descriptor import PropertyDescriptor
from .errors import (
    ContractShapeError,
    ConversionError,
    InvalidPropertyError,
    MissingPropertyError,
)
from .readers import ConfigReader
from .resolver import MetadataResolver
from .strategies import CONVERTERS, VALIDATORS, StrategyCache, instantiate

__all__ = ["Binder", "bind", "bind_reader"]

logger = logging.getLogger(__name__)


class Binder:
    """Bind sources to contracts.

    Args:
        resolver: The metadata resolver to use.
        converters: The cache converters are taken from.
        validators: The cache validators are taken from.
    """

    def __init__(
        self,
        resolver: MetadataResolver | None = None,
        *,
        converters: StrategyCache = CONVERTERS,
        validators: StrategyCache = VALIDATORS,
    ):
        self.resolver = resolver if resolver is not None else MetadataResolver()
        self.converters = converters
        self.validators = validators

    def bind[T](
        self,
        source: Mapping[str, Any],
        contract: type[T],
        *,
        options: ContractOptions | None = None,
    ) -> T:
        """Create a read-only object conforming to `contract` from `source`.

        Args:
            source: The raw properties, native values or their textual form.
            contract: The access contract class.
            options: Strategies overriding the ones declared on the contract.

        Raises:
            ContractShapeError: If `contract` is not a valid contract.
            MissingPropertyError: If a property is absent from `source`.
            ConversionError: If a textual value can't be converted.
            InvalidPropertyError: If a validator rejects a value.
        """
        metadata = self.resolver.resolve(contract, options)
        translator = instantiate(metadata.translator)
        values: dict[str, Any] = {}
        view = _make_view(
            contract,
            (descriptor.accessor_name for descriptor in metadata.properties),
            MappingProxyType(values),
        )
        for descriptor in metadata.properties:
            key = translator.join(descriptor.words)
            values[descriptor.accessor_name] = self.materialize(source, key, descriptor)
        return view

    def materialize(
        self, source: Mapping[str, Any], key: str, descriptor: PropertyDescriptor
    ) -> Any:
        """Fetch, convert and validate the value of a single property."""
        if key not in source:
            raise MissingPropertyError(key)
        raw = source[key]
        if raw is None:
            raise ConversionError(key, raw, descriptor.type.name.lower())
        value = raw
        if not descriptor.type.accepts(raw):
            converter = self.converters.get(descriptor.converter)
            try:
                value = converter.convert_from_text(str(raw))
            except (ValueError, TypeError) as e:
                raise ConversionError(key, raw, descriptor.type.name.lower()) from e
            logger.debug("Converted %s from %r to %r", key, raw, value)
        validator = self.validators.get(descriptor.validator)
        if not validator.is_valid(value):
            raise InvalidPropertyError(key, value)
        return value


def _getter(name: str, values: Mapping[str, Any]) -> Callable[[Any], Any]:
    def getter(self):
        return values[name]

    getter.__name__ = name
    return getter


def _unbound(name: str) -> Callable[[Any], Any]:
    def unbound(self):
        raise NotImplementedError(f"Accessor {name} is not a configuration property")

    unbound.__name__ = name
    return unbound


def _make_view[T](
    contract: type[T], properties: Iterable[str], values: Mapping[str, Any]
) -> T:
    """Implement `contract` with accessors answering from `values`.

    `values` is read on every call, so the view can be built before the
    properties are materialized.
    """
    properties = set(properties)
    name = contract.__name__

    def __init__(self):
        pass

    def __setattr__(self, attr: str, value: Any):
        raise AttributeError(f"{name} is read-only")

    def __delattr__(self, attr: str):
        raise AttributeError(f"{name} is read-only")

    def __repr__(self) -> str:
        items = ", ".join(f"{k}={v!r}" for k, v in sorted(values.items()))
        return f"{name}({items})"

    namespace: dict[str, Any] = {
        "__module__": contract.__module__,
        "__init__": __init__,
        "__setattr__": __setattr__,
        "__delattr__": __delattr__,
        "__repr__": __repr__,
    }
    for accessor in accessors(contract):
        if accessor.name in properties:
            namespace[accessor.name] = _getter(accessor.name, values)
        else:
            namespace[accessor.name] = _unbound(accessor.name)

    try:
        view_type = types.new_class(
            f"Bound{name}", (contract,), exec_body=lambda ns: ns.update(namespace)
        )
        return view_type()
    except TypeError as e:
        raise ContractShapeError(f"Cannot implement contract {name}: {e}") from e


_default_binder = Binder()


def bind[T](
    source: Mapping[str, Any],
    contract: type[T],
    *,
    options: ContractOptions | None = None,
) -> T:
    """Bind `source` to `contract` with the default binder. See `Binder.bind`."""
    return _default_binder.bind(source, contract, options=options)


def bind_reader[T](
    reader: ConfigReader,
    contract: type[T],
    *,
    options: ContractOptions | None = None,
) -> T:
    """Read a source with `reader` and bind it to `contract`."""
    return _default_binder.bind(reader(), contract, options=options)
