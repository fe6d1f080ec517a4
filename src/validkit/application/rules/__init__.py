"""Built-in rules of the "validkit" namespace.

Importing this package registers every built-in rule and its paired
exception in the default registry.
"""

from validkit.application.rules.between import Between, BetweenException
from validkit.application.rules.equals import Equals, EqualsException
from validkit.application.rules.in_ import In, InException
from validkit.application.rules.length import Length, LengthException
from validkit.application.rules.not_ import Not, NotException
from validkit.application.rules.types import (
    IntType,
    IntTypeException,
    StringType,
    StringTypeException,
)

__all__ = [
    "Between",
    "BetweenException",
    "Equals",
    "EqualsException",
    "In",
    "InException",
    "IntType",
    "IntTypeException",
    "Length",
    "LengthException",
    "Not",
    "NotException",
    "StringType",
    "StringTypeException",
]
