"""Factory configuration.

User-provided settings for rule lookup and message rendering.
No file parsing: callers build this object in code.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_NAMESPACE = "validkit"
"""Namespace of built-in rules. Always part of the search order."""


@dataclass(frozen=True, slots=True)
class FactoryConfig:
    """Factory configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        namespaces: Custom namespaces searched before the built-in one
        max_depth: Nesting depth rendered for containers in messages
        max_items: Items rendered per container before truncation
        missing_placeholder: Text substituted for unknown placeholders
    """

    namespaces: tuple[str, ...] = ()
    max_depth: int = 2
    max_items: int = 3
    missing_placeholder: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.namespaces, tuple):
            raise TypeError(f"namespaces must be tuple, got {type(self.namespaces).__name__}")
        for namespace in self.namespaces:
            if not isinstance(namespace, str) or not namespace.strip("."):
                raise ValueError(f"namespace must be non-empty string, got {namespace!r}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.max_items < 0:
            raise ValueError(f"max_items must be >= 0, got {self.max_items}")
        if not isinstance(self.missing_placeholder, str):
            raise TypeError("missing_placeholder must be str")


def effective_namespaces(namespaces: tuple[str, ...]) -> tuple[str, ...]:
    """Build the search order: given namespaces plus the built-in one.

    Duplicates keep their first position. The built-in namespace is
    appended only if absent, so it appears exactly once.

    Args:
        namespaces: Caller-supplied namespaces in priority order

    Returns:
        Search order ending with the built-in namespace unless the caller
        placed it earlier
    """
    ordered: list[str] = []
    for namespace in namespaces:
        if namespace not in ordered:
            ordered.append(namespace)
    if DEFAULT_NAMESPACE not in ordered:
        ordered.append(DEFAULT_NAMESPACE)
    return tuple(ordered)
