"""Type rules: StringType, IntType."""

from __future__ import annotations

from validkit.domain.exceptions.validation import ValidationException
from validkit.domain.model.rule import Rule
from validkit.domain.model.template import Templates
from validkit.infrastructure.registry import exception_type, rule_type


@exception_type()
class StringTypeException(ValidationException):
    pass


@exception_type()
class IntTypeException(ValidationException):
    pass


@rule_type(Templates.standard("{{name}} must be a string", "{{name}} must not be a string"))
class StringType(Rule):
    def is_valid(self, input: object) -> bool:
        return isinstance(input, str)


@rule_type(Templates.standard("{{name}} must be an integer", "{{name}} must not be an integer"))
class IntType(Rule):
    """Integers only: bool is rejected even though it subclasses int."""

    def is_valid(self, input: object) -> bool:
        return isinstance(input, int) and not isinstance(input, bool)
