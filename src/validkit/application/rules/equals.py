"""Equals rule."""

from __future__ import annotations

from collections.abc import Mapping

from validkit.domain.exceptions.validation import ValidationException
from validkit.domain.model.rule import Rule
from validkit.domain.model.template import Templates
from validkit.infrastructure.registry import exception_type, rule_type


@exception_type()
class EqualsException(ValidationException):
    pass


@rule_type(
    Templates.standard(
        "{{name}} must equal {{compare_to}}",
        "{{name}} must not equal {{compare_to}}",
    )
)
class Equals(Rule):
    def __init__(self, compare_to: object) -> None:
        self.compare_to = compare_to

    def is_valid(self, input: object) -> bool:
        return bool(input == self.compare_to)

    def properties(self) -> Mapping[str, object]:
        return {"compare_to": self.compare_to}
