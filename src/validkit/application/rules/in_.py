"""In rule: membership in a haystack."""

from __future__ import annotations

from collections.abc import Container, Mapping

from validkit.domain.exceptions.validation import ValidationException
from validkit.domain.model.rule import Rule
from validkit.domain.model.template import Templates
from validkit.infrastructure.registry import exception_type, rule_type


@exception_type()
class InException(ValidationException):
    """Input is not a member of the haystack."""


@rule_type(
    Templates.standard(
        "{{name}} must be in {{haystack}}",
        "{{name}} must not be in {{haystack}}",
    )
)
class In(Rule):
    """Input is contained in haystack (any container, substring for str)."""

    def __init__(self, haystack: Container[object]) -> None:
        if not isinstance(haystack, Container):
            raise TypeError(f"haystack must be a container, got {type(haystack).__name__}")
        self.haystack = haystack

    def is_valid(self, input: object) -> bool:
        if isinstance(self.haystack, str) and not isinstance(input, str):
            return False
        try:
            return input in self.haystack
        except TypeError:
            # Unhashable input against a set/dict haystack
            return False

    def properties(self) -> Mapping[str, object]:
        return {"haystack": self.haystack}
