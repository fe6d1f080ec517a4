"""Reporter protocol for output formatting.

Users extend validkit by implementing this Protocol.
NOT rich-specific - users can adapt to any output format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from validkit.domain.exceptions.validation import ValidationException


class ReporterProtocol(Protocol):
    """Contract for reporters.

    Reporters turn collected validation failures into text.
    Output is str, not print(). Caller decides destination.

    Example:
        class LinesReporter:
            def report(self, failures: tuple[ValidationException, ...]) -> str:
                return "\\n".join(f"- {failure.message}" for failure in failures)
    """

    def report(self, failures: tuple[ValidationException, ...]) -> str:
        """Format validation failures.

        Args:
            failures: Exceptions built from failed results, in rule order

        Returns:
            Formatted text
        """
        ...
