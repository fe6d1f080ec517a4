"""Validation exceptions.

Base class for the per-rule exceptions built from failed results.
"""

from validkit.domain.exceptions.base import ValidkitError


class ValidationException(ValidkitError):
    """Input failed a rule.

    Concrete subclasses are paired with rule types by name
    (e.g. LengthException for Length). The factory instantiates them
    with a single argument: the rendered message.

    Attributes:
        message: Human-readable rendered message
    """

    def __init__(self, message: str) -> None:
        if not isinstance(message, str):
            raise TypeError(f"message must be str, got {type(message).__name__}")

        self.message = message
        super().__init__(message)


class NestedValidationException(ValidationException):
    """Several rules failed for one input.

    Attributes:
        failures: Exceptions of each failed rule, in rule order
    """

    def __init__(self, failures: tuple[ValidationException, ...]) -> None:
        # FAIL-FIRST: an aggregate of nothing is a caller bug
        if not failures:
            raise ValueError("failures must not be empty")

        self.failures = failures
        lines = [f"{len(failures)} rule(s) failed:"]
        lines.extend(f"- {failure.message}" for failure in failures)
        super().__init__("\n".join(lines))
