"""Not rule: evaluates another rule in negated mode."""

from __future__ import annotations

from typing import Self

from validkit.domain.exceptions.validation import ValidationException
from validkit.domain.model.result import Result
from validkit.domain.model.rule import Rule
from validkit.domain.model.template import Templates
from validkit.infrastructure.registry import exception_type, rule_type


@exception_type()
class NotException(ValidationException):
    pass


@rule_type(Templates.standard("{{name}} must not be valid", "{{name}} must be valid"))
class Not(Rule):
    """Negation wrapper.

    Results reference the wrapped rule with the inverted flag set, so
    messages come from the wrapped rule's inverted templates.
    """

    def __init__(self, rule: Rule) -> None:
        if not isinstance(rule, Rule):
            raise TypeError(f"rule must be Rule, got {type(rule).__name__}")
        self.rule = rule

    def is_valid(self, input: object) -> bool:
        return not self.rule.is_valid(input)

    def evaluate(self, input: object) -> Result:
        return self.rule.evaluate(input).invert()

    def set_name(self, name: str) -> Self:
        super().set_name(name)
        self.rule.set_name(name)
        return self
