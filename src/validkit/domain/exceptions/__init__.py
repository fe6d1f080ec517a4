"""Domain exceptions."""

from validkit.domain.exceptions.base import ValidkitError
from validkit.domain.exceptions.component import (
    ComponentError,
    InvalidRuleError,
    RegistrationError,
    RuleNotFoundError,
    TemplateError,
    TypeNotFoundError,
)
from validkit.domain.exceptions.validation import (
    NestedValidationException,
    ValidationException,
)

__all__ = [
    "ValidkitError",
    "ComponentError",
    "RuleNotFoundError",
    "InvalidRuleError",
    "TypeNotFoundError",
    "TemplateError",
    "RegistrationError",
    "ValidationException",
    "NestedValidationException",
]
