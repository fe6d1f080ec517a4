"""Between rule: value within inclusive bounds."""

from __future__ import annotations

from collections.abc import Mapping

from validkit.domain.exceptions.validation import ValidationException
from validkit.domain.model.rule import Rule
from validkit.domain.model.template import Templates
from validkit.infrastructure.registry import exception_type, rule_type


@exception_type()
class BetweenException(ValidationException):
    """Input is outside the bounds."""


@rule_type(
    Templates.standard(
        "{{name}} must be between {{min_value}} and {{max_value}}",
        "{{name}} must not be between {{min_value}} and {{max_value}}",
    )
)
class Between(Rule):
    """min_value <= input <= max_value for any comparable input."""

    def __init__(self, min_value: object, max_value: object) -> None:
        try:
            inverted_bounds = min_value > max_value  # type: ignore[operator]
        except TypeError as exc:
            raise TypeError(f"bounds are not comparable: {min_value!r}, {max_value!r}") from exc
        if inverted_bounds:
            raise ValueError(
                f"min_value {min_value!r} cannot be greater than max_value {max_value!r}"
            )

        self.min_value = min_value
        self.max_value = max_value

    def is_valid(self, input: object) -> bool:
        try:
            return bool(self.min_value <= input <= self.max_value)  # type: ignore[operator]
        except TypeError:
            return False

    def properties(self) -> Mapping[str, object]:
        return {"min_value": self.min_value, "max_value": self.max_value}
