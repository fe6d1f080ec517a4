"""Domain model."""

from validkit.domain.model.configuration import (
    DEFAULT_NAMESPACE,
    FactoryConfig,
    effective_namespaces,
)
from validkit.domain.model.result import TEMPLATE_ID_KEY, Result
from validkit.domain.model.rule import Rule
from validkit.domain.model.template import STANDARD_TEMPLATE_ID, Template, Templates

__all__ = [
    "DEFAULT_NAMESPACE",
    "STANDARD_TEMPLATE_ID",
    "TEMPLATE_ID_KEY",
    "FactoryConfig",
    "Result",
    "Rule",
    "Template",
    "Templates",
    "effective_namespaces",
]
