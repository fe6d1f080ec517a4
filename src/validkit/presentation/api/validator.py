"""Fluent API for building and running rule chains.

Rules are created by attribute name through a Factory, so custom
namespaces (plugins) are reachable the same way as built-in rules.

Example:
    v = Validator()
    v.string_type().length(1, 15).check("alexandre")
    v.int_type().between(1, 10).is_valid(11)  # False
    v.not_(v.int_type()).check("abc")

Attribute names are converted to rule names: snake_case becomes camelCase
(string_type → stringType) and a trailing underscore is dropped, so
v.not_(...) and v.in_(...) resolve the "not" and "in" rules.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from validkit.application.factory import Factory, get_default_factory
from validkit.application.reporters.console import ConsoleReporter
from validkit.domain.exceptions.validation import NestedValidationException
from validkit.domain.model.rule import Rule

if TYPE_CHECKING:
    from validkit.domain.exceptions.validation import ValidationException
    from validkit.domain.model.result import Result
    from validkit.domain.ports.reporter import ReporterProtocol


@dataclass(frozen=True, slots=True)
class Validator:
    """Immutable chain of rules.

    Every rule call returns a new Validator; existing chains are
    never modified.

    Attributes:
        _rules: Rules evaluated in order
        _factory: Factory creating rules. None = process-wide default
        _name: Display name injected into results that carry none
    """

    _rules: tuple[Rule, ...] = ()
    _factory: Factory | None = None
    _name: str | None = None

    @classmethod
    def using(cls, factory: Factory) -> Validator:
        """Start a chain bound to a specific factory."""
        if not isinstance(factory, Factory):
            raise TypeError(f"factory must be Factory, got {type(factory).__name__}")
        return cls(_factory=factory)

    def __getattr__(self, attribute: str) -> Callable[..., Validator]:
        if attribute.startswith("_"):
            raise AttributeError(attribute)

        rule_name = to_rule_name(attribute)

        def add_rule(*arguments: object) -> Validator:
            rule = self.factory.rule(rule_name, [_unwrap(argument) for argument in arguments])
            return replace(self, _rules=(*self._rules, rule))

        return add_rule

    @property
    def factory(self) -> Factory:
        """Factory creating rules and exceptions for this chain."""
        if self._factory is not None:
            return self._factory
        return get_default_factory()

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Rules in evaluation order."""
        return self._rules

    def named(self, name: str) -> Validator:
        """Use name in messages instead of the input value."""
        if not name:
            raise ValueError("name must not be empty")
        return replace(self, _name=name)

    def rule(self, rule: Rule) -> Validator:
        """Append an already constructed rule."""
        if not isinstance(rule, Rule):
            raise TypeError(f"rule must be Rule, got {type(rule).__name__}")
        return replace(self, _rules=(*self._rules, rule))

    def evaluate(self, input: object) -> tuple[Result, ...]:
        """Evaluate every rule.

        Args:
            input: Value to validate

        Returns:
            One result per rule, in order
        """
        return tuple(self._named(rule.evaluate(input)) for rule in self._rules)

    def is_valid(self, input: object) -> bool:
        """Check input against every rule."""
        return all(result.is_valid for result in self.evaluate(input))

    def check(self, input: object) -> None:
        """Raise on the first failing rule.

        Args:
            input: Value to validate

        Raises:
            ValidationException: Exception paired with the first failed rule
        """
        for rule in self._rules:
            result = self._named(rule.evaluate(input))
            if not result.is_valid:
                raise self.factory.exception(result)

    def collect(self, input: object) -> tuple[ValidationException, ...]:
        """Build exceptions for every failing rule without raising.

        Args:
            input: Value to validate

        Returns:
            Exceptions in rule order (empty if valid)
        """
        factory = self.factory
        return tuple(
            factory.exception(result) for result in self.evaluate(input) if not result.is_valid
        )

    def assert_valid(self, input: object) -> None:
        """Raise one exception aggregating every failing rule.

        Args:
            input: Value to validate

        Raises:
            NestedValidationException: If at least one rule failed
        """
        failures = self.collect(input)
        if failures:
            raise NestedValidationException(failures)

    def report(self, input: object, reporter: ReporterProtocol | None = None) -> str:
        """Collect failures and format them with a reporter.

        Args:
            input: Value to validate
            reporter: Output formatter. Uses ConsoleReporter if None.

        Returns:
            Formatted report (also for valid input)
        """
        reporter = reporter if reporter is not None else ConsoleReporter()
        return reporter.report(self.collect(input))

    def _named(self, result: Result) -> Result:
        if self._name is None or "name" in result.properties:
            return result
        return replace(result, properties={**result.properties, "name": self._name})

    def __repr__(self) -> str:
        names = [type(rule).__name__ for rule in self._rules]
        return f"Validator(rules={names})"


def _unwrap(argument: object) -> object:
    """Pass single-rule chains as their rule (for v.not_(v.int_type()))."""
    if not isinstance(argument, Validator):
        return argument
    if len(argument.rules) != 1:
        raise TypeError(
            "only single-rule validators can be used as rule arguments, "
            f"got {len(argument.rules)} rules"
        )
    return argument.rules[0]


_SNAKE_PATTERN = re.compile(r"_([a-z0-9])")


def to_rule_name(attribute: str) -> str:
    """Convert Python attribute name to rule name.

    Example:
        >>> to_rule_name("string_type")
        'stringType'
        >>> to_rule_name("not_")
        'not'
    """
    return _SNAKE_PATTERN.sub(lambda match: match.group(1).upper(), attribute.removesuffix("_"))
