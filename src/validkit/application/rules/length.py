"""Length rule: size of strings and sized containers."""

from __future__ import annotations

from collections.abc import Mapping, Sized

from validkit.domain.exceptions.validation import ValidationException
from validkit.domain.model.result import TEMPLATE_ID_KEY
from validkit.domain.model.rule import Rule
from validkit.domain.model.template import Template, Templates
from validkit.infrastructure.registry import exception_type, rule_type

LENGTH_TEMPLATES = Templates(
    regular=(
        Template("standard", "{{name}} must have a length between {{min_value}} and {{max_value}}"),
        Template("lower", "{{name}} must have a length greater than {{min_value}}"),
        Template("greater", "{{name}} must have a length lower than {{max_value}}"),
    ),
    inverted=(
        Template(
            "standard",
            "{{name}} must not have a length between {{min_value}} and {{max_value}}",
        ),
        Template("lower", "{{name}} must not have a length greater than {{min_value}}"),
        Template("greater", "{{name}} must not have a length lower than {{max_value}}"),
    ),
)


@exception_type()
class LengthException(ValidationException):
    """Input length is out of bounds."""


@rule_type(LENGTH_TEMPLATES)
class Length(Rule):
    """Length within optional bounds.

    Attributes:
        min_value: Lower bound, None = unbounded
        max_value: Upper bound, None = unbounded
        inclusive: Whether bounds themselves are accepted
    """

    def __init__(
        self,
        min_value: int | None = None,
        max_value: int | None = None,
        inclusive: bool = True,
    ) -> None:
        # FAIL-FIRST: validate bounds
        if min_value is None and max_value is None:
            raise ValueError("at least one of min_value/max_value is required")
        if min_value is not None and max_value is not None and min_value > max_value:
            raise ValueError(f"min_value {min_value} cannot be greater than max_value {max_value}")

        self.min_value = min_value
        self.max_value = max_value
        self.inclusive = inclusive

    def is_valid(self, input: object) -> bool:
        if not isinstance(input, Sized):
            return False

        size = len(input)
        if self.min_value is not None and not self._above(size, self.min_value):
            return False
        if self.max_value is not None and not self._above(self.max_value, size):
            return False
        return True

    def properties(self) -> Mapping[str, object]:
        properties: dict[str, object] = {
            "min_value": self.min_value,
            "max_value": self.max_value,
            "inclusive": self.inclusive,
        }
        if self.max_value is None:
            properties[TEMPLATE_ID_KEY] = "lower"
        elif self.min_value is None:
            properties[TEMPLATE_ID_KEY] = "greater"
        return properties

    def _above(self, value: int, bound: int) -> bool:
        return value >= bound if self.inclusive else value > bound
