"""Application layer: rule factory, message rendering, built-in rules, reporters."""

from validkit.application.factory import (
    Factory,
    derive_exception_name,
    get_default_factory,
    reset_default_factory,
    set_default_factory,
    ucfirst,
)

__all__ = [
    "Factory",
    "derive_exception_name",
    "get_default_factory",
    "reset_default_factory",
    "set_default_factory",
    "ucfirst",
]
