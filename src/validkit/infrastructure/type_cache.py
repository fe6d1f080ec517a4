"""Memoizing type resolver.

Decorator pattern: wraps TypeRegistryPort.lookup with a name-keyed cache.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from validkit.domain.ports.type_registry import TypeRegistryPort

logger = logging.getLogger(__name__)


@dataclass
class TypeCache:
    """Type name → type cache owned by one factory.

    First resolution of a name performs the registry lookup,
    later resolutions return the cached type without a lookup.
    No eviction: entries live as long as the cache.

    Thread-safe: read-check-then-write runs under one lock.

    Attributes:
        _registry: Registry performing the actual lookups
        _cache: Exact type name → resolved type mapping
    """

    _registry: TypeRegistryPort
    _cache: dict[str, type] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self._registry is None:
            raise TypeError("_registry must not be None")

    def resolve(self, type_name: str) -> type:
        """Resolve type name, memoized.

        Args:
            type_name: Fully qualified type name

        Returns:
            Same type object on every call for the same name

        Raises:
            TypeNotFoundError: If the registry has no such type (not cached)
        """
        with self._lock:
            cached = self._cache.get(type_name)
            if cached is not None:
                return cached

            resolved = self._registry.lookup(type_name)
            self._cache[type_name] = resolved

        logger.debug("cached type %s", type_name)
        return resolved

    @property
    def size(self) -> int:
        """Number of cached types."""
        return len(self._cache)

    @property
    def cached_names(self) -> frozenset[str]:
        """Type names currently in cache."""
        return frozenset(self._cache)
