"""Process-wide caches of strategy instances.

Converters and validators are assumed stateless, so a single instance per
strategy class is shared by every binding.
"""

import logging
from threading import Lock
from typing import Any

__all__ = ["StrategyCache", "CONVERTERS", "VALIDATORS", "instantiate"]

logger = logging.getLogger(__name__)


def instantiate(strategy: Any) -> Any:
    """Return an instance of `strategy` without caching it.

    A class is instantiated with no arguments; anything else is assumed to be
    an instance already.
    """
    if isinstance(strategy, type):
        return strategy()
    return strategy


class StrategyCache:
    """A thread-safe map from strategy class to its single instance.

    Instances passed in place of a class are returned unchanged and never
    cached.
    """

    def __init__(self, name: str):
        self.name = name
        self._instances: dict[type, Any] = {}
        self._lock = Lock()

    def get(self, strategy: Any) -> Any:
        if not isinstance(strategy, type):
            return strategy
        instance = self._instances.get(strategy)
        if instance is None:
            with self._lock:
                # Double check since another thread may have created it meanwhile
                instance = self._instances.get(strategy)
                if instance is None:
                    instance = strategy()
                    self._instances[strategy] = instance
                    logger.debug("Cached %s %s", self.name, strategy.__qualname__)
        return instance

    def __contains__(self, strategy: object) -> bool:
        return strategy in self._instances

    def __len__(self) -> int:
        return len(self._instances)

    def clear(self):
        with self._lock:
            self._instances.clear()


CONVERTERS = StrategyCache("converter")
VALIDATORS = StrategyCache("validator")
