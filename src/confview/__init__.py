"""Bind flat key/value configuration sources to typed access contracts.

The shape of a configuration is declared as a class of typed, zero-argument
accessors. `bind` discovers which accessors are properties, derives the key of
each property from the accessor name, converts and validates the raw values
and returns a read-only object implementing the contract.

By default an accessor `getEngineThreshold` is the property `engine-threshold`.
The extraction strategy (which accessors are properties and how their names
split into words) and the translation strategy (how the words join into a key)
can be replaced per contract with the `configuration` decorator, and the
validator of a single property with the `prop` decorator.

Example usage:

```python
class ThresholdValidator:
    def is_valid(self, value: float) -> bool:
        return value > 250.0

@configuration(translator=DottedNameTranslator)
class EngineConfig(Protocol):
    @prop(validator=ThresholdValidator)
    def getEngineThreshold(self) -> float: ...

    def getVendorName(self) -> str: ...

engine = bind({"engine.threshold": "300", "vendor.name": "FooBar"}, EngineConfig)
assert engine.getEngineThreshold() == 300.0
```

Attributes:
    CONVERTERS: The process-wide converter instances.
    VALIDATORS: The process-wide validator instances.
"""

from .binder import Binder, bind, bind_reader
from .contract import Accessor, ContractOptions, configuration, declared_options, prop
from .descriptor import Metadata, PropertyDescriptor
from .errors import (
    ConfigurationError,
    ContractShapeError,
    ConversionError,
    InvalidPropertyError,
    MissingPropertyError,
)
from .extractors import (
    JavaBeanNameExtractor,
    NameExtractor,
    SnakeCaseNameExtractor,
    split_camel_case,
)
from .natives import Byte, Char, Float32, Long, Short
from .readers import ConfigReader, PropertiesReader, TomlReader
from .resolver import MetadataResolver, resolve_metadata
from .strategies import CONVERTERS, VALIDATORS, StrategyCache
from .translators import (
    DottedNameTranslator,
    EnvironmentNameTranslator,
    HyphenatedNameTranslator,
    NameTranslator,
    SeparatorNameTranslator,
    UnderscoredNameTranslator,
)
from .types import PropertyType
from .validators import AcceptAllValidator, PropertyValidator

__all__ = [
    "Accessor",
    "AcceptAllValidator",
    "Binder",
    "Byte",
    "CONVERTERS",
    "Char",
    "ConfigReader",
    "ConfigurationError",
    "ContractOptions",
    "ContractShapeError",
    "ConversionError",
    "DottedNameTranslator",
    "EnvironmentNameTranslator",
    "Float32",
    "HyphenatedNameTranslator",
    "InvalidPropertyError",
    "JavaBeanNameExtractor",
    "Long",
    "Metadata",
    "MetadataResolver",
    "MissingPropertyError",
    "NameExtractor",
    "NameTranslator",
    "PropertiesReader",
    "PropertyDescriptor",
    "PropertyType",
    "PropertyValidator",
    "SeparatorNameTranslator",
    "Short",
    "SnakeCaseNameExtractor",
    "StrategyCache",
    "TomlReader",
    "UnderscoredNameTranslator",
    "VALIDATORS",
    "bind",
    "bind_reader",
    "configuration",
    "declared_options",
    "prop",
    "resolve_metadata",
    "split_camel_case",
]
