import logging
from typing import Any

from .contract import ContractOptions, accessors, check_contract, declared_options
from .descriptor import Metadata, PropertyDescriptor, Unset
from .extractors import JavaBeanNameExtractor
from .strategies import instantiate
from .translators import HyphenatedNameTranslator
from .types import PropertyType

__all__ = ["MetadataResolver", "resolve_metadata", "DEFAULT_OPTIONS"]

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = ContractOptions(
    extractor=JavaBeanNameExtractor, translator=HyphenatedNameTranslator
)


class MetadataResolver:
    """Resolve the `Metadata` of access contracts.

    Args:
        defaults: The strategies used when a contract declares none.
    """

    def __init__(self, defaults: ContractOptions = DEFAULT_OPTIONS):
        self.defaults = defaults

    def options_for(
        self, contract: type, options: ContractOptions | None = None
    ) -> ContractOptions:
        """The effective options of `contract`.

        Explicit `options` take precedence over the declared ones, which take
        precedence over the defaults.
        """
        effective = declared_options(contract).over(self.defaults)
        if options is not None:
            effective = options.over(effective)
        return effective

    def resolve(self, contract: Any, options: ContractOptions | None = None) -> Metadata:
        """Resolve every property of `contract`.

        Args:
            contract: The access contract class.
            options: Strategies overriding the declared ones.

        Raises:
            ContractShapeError: If `contract` is not a valid contract.
        """
        contract = check_contract(contract)
        effective = self.options_for(contract, options)
        extractor = instantiate(effective.extractor)

        properties: set[PropertyDescriptor] = set()
        for accessor in accessors(contract):
            if not extractor.is_eligible(accessor):
                logger.debug("Skipped accessor %s.%s", contract.__name__, accessor.name)
                continue
            properties.add(
                PropertyDescriptor(
                    accessor.name,
                    extractor.split_name(accessor.name),
                    PropertyType.from_native(accessor.return_type),
                    effective.validators.get(accessor.name, Unset),
                )
            )
        logger.debug(
            "Resolved %d properties of %s", len(properties), contract.__name__
        )
        return Metadata(effective.translator, frozenset(properties))


def resolve_metadata(contract: Any, options: ContractOptions | None = None) -> Metadata:
    """Resolve the metadata of `contract` with the default resolver."""
    return MetadataResolver().resolve(contract, options)
