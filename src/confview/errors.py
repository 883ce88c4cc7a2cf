__all__ = [
    "ConfigurationError",
    "MissingPropertyError",
    "ConversionError",
    "InvalidPropertyError",
    "ContractShapeError",
]


class ConfigurationError(ValueError):
    """Raised when a source can't be bound to a contract.

    Attributes:
        key: The lookup key of the offending property, if any.
        value: The rejected raw or converted value, if any.
    """

    def __init__(self, message: str, *, key: str | None = None, value: object = None):
        super().__init__(message)
        self.key = key
        self.value = value


class MissingPropertyError(ConfigurationError):
    def __init__(self, key: str):
        super().__init__(f'No property "{key}" found in given properties', key=key)


class ConversionError(ConfigurationError):
    def __init__(self, key: str, value: object, type_name: str):
        super().__init__(
            f'Property "{key}" value {value!r} cannot be converted to {type_name}',
            key=key,
            value=value,
        )


class InvalidPropertyError(ConfigurationError):
    def __init__(self, key: str, value: object):
        super().__init__(
            f'Property "{key}" value is invalid (value is {value!r})',
            key=key,
            value=value,
        )


class ContractShapeError(ConfigurationError):
    """Raised when the given contract is not a valid contract shape."""
