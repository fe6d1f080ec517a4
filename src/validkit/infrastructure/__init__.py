"""Infrastructure layer: type registry and type cache adapters."""

from validkit.infrastructure.registry import (
    TypeRegistry,
    default_registry,
    exception_type,
    exception_type_name,
    rule_type,
    rule_type_name,
)
from validkit.infrastructure.type_cache import TypeCache

__all__ = [
    "TypeCache",
    "TypeRegistry",
    "default_registry",
    "exception_type",
    "exception_type_name",
    "rule_type",
    "rule_type_name",
]
