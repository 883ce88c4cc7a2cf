"""Access contracts and the declarations that customize how they are read.

A contract is a `typing.Protocol`, or an ABC whose accessors are all abstract,
made of accessor methods with return annotations:

```python
@configuration(translator=DottedNameTranslator)
class EngineConfig(Protocol):
    @prop(validator=ThresholdValidator)
    def getEngineThreshold(self) -> float: ...

    def getVendorName(self) -> str: ...
```

The decorators only attach plain data to the class and its methods.
`declared_options` turns that data into a `ContractOptions` record before any
metadata resolution happens.
"""

from abc import ABCMeta
import inspect
import logging
import typing
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Protocol

from .errors import ContractShapeError

__all__ = [
    "Accessor",
    "ContractOptions",
    "accessors",
    "check_contract",
    "configuration",
    "declared_options",
    "prop",
]

logger = logging.getLogger(__name__)

OPTIONS_ATTR = "__confview_options__"
VALIDATOR_ATTR = "__confview_validator__"

_SKIPPED_BASES = (object, Protocol, typing.Generic)


@dataclass(frozen=True)
class Accessor:
    """One accessor of a contract, as seen by the name extractors.

    Attributes:
        name: The method name.
        function: The underlying function.
        parameters: The parameters besides `self`.
        return_type: The resolved return annotation, or None when there is none.
    """

    name: str
    function: Callable[..., Any]
    parameters: tuple[inspect.Parameter, ...]
    return_type: Any

    @staticmethod
    def of(name: str, function: Callable[..., Any]) -> "Accessor":
        parameters = tuple(inspect.signature(function).parameters.values())[1:]
        return Accessor(name, function, parameters, _return_type(function))


def _return_type(function: Callable[..., Any]) -> Any:
    try:
        hints = typing.get_type_hints(function)
    except NameError:
        # Unresolvable forward references; such an accessor can't be a property.
        logger.debug("Cannot resolve annotations of %s", function.__qualname__)
        return function.__annotations__.get("return")
    return hints.get("return")


@dataclass(frozen=True)
class ContractOptions:
    """The strategies used to read a contract.

    Strategies may be given as classes, which are instantiated once and
    cached, or as instances.

    Attributes:
        extractor: The name extractor, or None for the default one.
        translator: The name translator, or None for the default one.
        validators: Validator overrides keyed by accessor name.
    """

    extractor: Any = None
    translator: Any = None
    validators: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "validators", MappingProxyType(dict(self.validators)))

    def over(self, base: "ContractOptions") -> "ContractOptions":
        """Return these options with unset strategies taken from `base`."""
        return ContractOptions(
            extractor=self.extractor if self.extractor is not None else base.extractor,
            translator=(
                self.translator if self.translator is not None else base.translator
            ),
            validators={**base.validators, **self.validators},
        )


def check_contract(contract: object) -> type:
    """Make sure `contract` has the shape of an access contract."""
    if not isinstance(contract, type):
        raise ContractShapeError(f"A contract must be a class, got {contract!r}")
    if contract.__module__ == "builtins":
        raise ContractShapeError(
            f"Builtin type {contract.__name__} can't be used as a contract"
        )
    if issubclass(contract, Enum):
        raise ContractShapeError(f"Enum {contract.__name__} can't be used as a contract")
    if getattr(contract, "_is_protocol", False):
        return contract
    if not isinstance(contract, ABCMeta):
        raise ContractShapeError(
            f"{contract.__name__} must be a Protocol or an ABC to be used as a contract"
        )
    concrete = [
        accessor.name
        for accessor in accessors(contract)
        if not getattr(accessor.function, "__isabstractmethod__", False)
    ]
    if concrete:
        raise ContractShapeError(
            f"Accessors of ABC contract {contract.__name__} must be abstract, "
            f"but {', '.join(sorted(concrete))} are implemented"
        )
    return contract


def accessors(contract: type) -> list[Accessor]:
    """Every public method reachable from `contract`, inherited ones included.

    The most derived definition of a name wins.
    """
    found: dict[str, Callable[..., Any]] = {}
    for klass in reversed(contract.__mro__):
        if klass in _SKIPPED_BASES:
            continue
        for name, member in vars(klass).items():
            if name.startswith("_"):
                continue
            if inspect.isfunction(member):
                found[name] = member
            else:
                found.pop(name, None)
    return [Accessor.of(name, function) for name, function in found.items()]


def declared_options(contract: type) -> ContractOptions:
    """Collect the options declared with `configuration` and `prop`.

    Class-level strategies are only read from `contract` itself, not from its
    bases. Validator overrides are read from every accessor, inherited ones
    included.
    """
    declared = vars(contract).get(OPTIONS_ATTR)
    validators = {
        accessor.name: getattr(accessor.function, VALIDATOR_ATTR)
        for accessor in accessors(contract)
        if hasattr(accessor.function, VALIDATOR_ATTR)
    }
    if declared is None:
        return ContractOptions(validators=validators)
    return ContractOptions(declared.extractor, declared.translator, validators)


def configuration(*, extractor: Any = None, translator: Any = None):
    """Decorator to declare the extraction and translation strategies of a contract.

    Args:
        extractor: The name extractor class or instance.
        translator: The name translator class or instance.
    """

    def decorator[T: type](cls: T) -> T:
        setattr(cls, OPTIONS_ATTR, ContractOptions(extractor, translator))
        return cls

    return decorator


def prop(*, validator: Any):
    """Decorator to override the validator of a single accessor.

    Args:
        validator: The validator class or instance.
    """
    if validator is None:
        raise ValueError("validator can't be None")

    def decorator[F: Callable[..., Any]](method: F) -> F:
        setattr(method, VALIDATOR_ATTR, validator)
        return method

    return decorator
