"""validkit - rule factory and message builder for composable validation."""

__version__ = "0.1.0"

# Registers built-in rules in the default registry
import validkit.application.rules  # noqa: F401
from validkit.application.factory import Factory, get_default_factory, set_default_factory
from validkit.domain.exceptions import (
    ComponentError,
    InvalidRuleError,
    NestedValidationException,
    RuleNotFoundError,
    TemplateError,
    TypeNotFoundError,
    ValidationException,
    ValidkitError,
)
from validkit.domain.model import FactoryConfig, Result, Rule, Template, Templates
from validkit.infrastructure.registry import exception_type, rule_type
from validkit.presentation.api import Validator, v

__all__ = [
    "ComponentError",
    "Factory",
    "FactoryConfig",
    "InvalidRuleError",
    "NestedValidationException",
    "Result",
    "Rule",
    "RuleNotFoundError",
    "Template",
    "TemplateError",
    "Templates",
    "TypeNotFoundError",
    "ValidationException",
    "Validator",
    "ValidkitError",
    "__version__",
    "exception_type",
    "get_default_factory",
    "rule_type",
    "set_default_factory",
    "v",
]
