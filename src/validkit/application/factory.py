"""Rule factory and exception builder.

Resolves short rule names to rule instances through an ordered list of
namespaces, and turns failed results into exceptions carrying rendered
messages.

Example:
    factory = Factory(["acme"])
    rule = factory.rule("length", [1, 5])
    result = rule.evaluate("too long for this")
    if not result.is_valid:
        raise factory.exception(result)
"""

from __future__ import annotations

import inspect
import logging
import threading
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from validkit.application.message.formatter import MessageFormatter
from validkit.application.message.selector import choose_template
from validkit.domain.exceptions.component import InvalidRuleError, RuleNotFoundError
from validkit.domain.model.configuration import FactoryConfig, effective_namespaces
from validkit.domain.model.rule import Rule
from validkit.infrastructure.registry import default_registry, rule_type_name
from validkit.infrastructure.type_cache import TypeCache

if TYPE_CHECKING:
    from validkit.domain.exceptions.validation import ValidationException
    from validkit.domain.model.result import Result
    from validkit.domain.ports.type_registry import TypeRegistryPort

logger = logging.getLogger(__name__)


def ucfirst(name: str) -> str:
    """Upper-case the first character if it is an ASCII lowercase letter.

    The remainder is kept as is: "notEmpty" → "NotEmpty".
    """
    if name and "a" <= name[0] <= "z":
        return name[0].upper() + name[1:]
    return name


def derive_exception_name(rule_type_name: str) -> str:
    """Derive exception type name from a rule type name.

    Plain string substitution, case-sensitive: every "Rule" becomes
    "Exception", then "Exception" is appended.

    Example:
        >>> derive_exception_name("validkit.Rules.Length")
        'validkit.Exceptions.LengthException'
    """
    return rule_type_name.replace("Rule", "Exception") + "Exception"


class Factory:
    """Creates rules by name and exceptions from failed results.

    Owns a TypeCache; the cache is never shared with other factories.

    Attributes:
        _namespaces: Effective search order (built-in namespace included)
        _registry: Source of rule/exception types and templates
        _cache: Memoized type lookups
        _formatter: Message renderer
    """

    def __init__(
        self,
        namespaces: Iterable[str] = (),
        *,
        config: FactoryConfig | None = None,
        registry: TypeRegistryPort | None = None,
    ) -> None:
        """Initialize factory.

        Args:
            namespaces: Namespaces searched first, in priority order
            config: Factory configuration. Uses defaults if None.
            registry: Type registry. Uses the default registry if None.
        """
        if isinstance(namespaces, str):
            raise TypeError("namespaces must be an iterable of str, not a str")

        self._config = config or FactoryConfig()
        self._namespaces = effective_namespaces((*namespaces, *self._config.namespaces))
        self._registry = registry if registry is not None else default_registry()
        self._cache = TypeCache(self._registry)
        self._formatter = MessageFormatter.from_config(self._config)

    @property
    def namespaces(self) -> tuple[str, ...]:
        """Effective namespace search order."""
        return self._namespaces

    @property
    def config(self) -> FactoryConfig:
        """Factory configuration."""
        return self._config

    @property
    def cache(self) -> TypeCache:
        """Type cache owned by this factory."""
        return self._cache

    def rule(self, rule_name: str, arguments: Sequence[object] = ()) -> Rule:
        """Create rule by short name.

        Namespaces are searched in order; the first namespace providing
        the type wins. A type that exists but is not an instantiable Rule
        stops the search.

        Args:
            rule_name: Short name (e.g. "length", "stringType")
            arguments: Positional constructor arguments

        Returns:
            New rule instance

        Raises:
            InvalidRuleError: If the found type is not an instantiable Rule
            RuleNotFoundError: If no namespace provides the rule
        """
        if not rule_name:
            raise ValueError("rule_name must not be empty")

        for namespace in self._namespaces:
            type_name = rule_type_name(namespace, ucfirst(rule_name))
            if not self._registry.exists(type_name):
                continue

            candidate = self._cache.resolve(type_name)

            if not (isinstance(candidate, type) and issubclass(candidate, Rule)):
                raise InvalidRuleError(type_name, "is not a valid rule")

            if inspect.isabstract(candidate):
                raise InvalidRuleError(type_name, "is not instantiable")

            logger.debug("resolved rule %r to %s", rule_name, type_name)
            return candidate(*arguments)

        raise RuleNotFoundError(rule_name)

    def exception(self, result: Result) -> ValidationException:
        """Build exception for a failed result.

        The exception type is paired with the rule type: declared
        explicitly at registration, or derived from the rule type name.
        Templates come from the rule type.

        Args:
            result: Result of a failed evaluation

        Returns:
            Exception instance carrying the rendered message

        Raises:
            TypeNotFoundError: If the paired exception type does not exist
            TemplateError: If the rule type declared no templates
        """
        rule_cls = type(result.rule)

        exception_name = self._registry.exception_name_for(rule_cls)
        if exception_name is None:
            exception_name = derive_exception_name(self._registry.name_of(rule_cls))

        exception_cls = self._cache.resolve(exception_name)
        message = self.message(result)

        return exception_cls(message)

    def message(self, result: Result) -> str:
        """Render the message a failed result produces.

        Args:
            result: Result of a failed evaluation

        Returns:
            Rendered message

        Raises:
            TemplateError: If the rule type declared no templates
        """
        templates = self._registry.templates_for(type(result.rule))
        template = choose_template(templates, result)
        return self._formatter.format(result.input, result.properties, template.message)

    def __repr__(self) -> str:
        return f"Factory(namespaces={list(self._namespaces)})"


_default_factory: Factory | None = None
_default_factory_lock = threading.Lock()


def get_default_factory() -> Factory:
    """Get process-wide factory, creating it on first access.

    The lazily created factory has no custom namespaces.
    """
    global _default_factory
    with _default_factory_lock:
        if _default_factory is None:
            _default_factory = Factory()
        return _default_factory


def set_default_factory(factory: Factory) -> None:
    """Install factory returned by get_default_factory().

    Args:
        factory: Factory to use process-wide

    Raises:
        TypeError: If factory is not a Factory
    """
    global _default_factory
    if not isinstance(factory, Factory):
        raise TypeError(f"factory must be Factory, got {type(factory).__name__}")
    with _default_factory_lock:
        _default_factory = factory


def reset_default_factory() -> None:
    """Drop process-wide factory; the next access creates a fresh one."""
    global _default_factory
    with _default_factory_lock:
        _default_factory = None
