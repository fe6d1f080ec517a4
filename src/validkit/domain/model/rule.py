"""Rule base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Self

from validkit.domain.model.result import TEMPLATE_ID_KEY, Result


class Rule(ABC):
    """Abstract base class for validation rules.

    Subclasses must implement:
    - is_valid: Predicate over the input

    Subclasses may override:
    - properties: Values exposed to message placeholders

    Rules are constructed from positional arguments by the factory,
    so __init__ parameters are the rule's public call signature.

    Example:
        class Positive(Rule):
            def is_valid(self, input: object) -> bool:
                return isinstance(input, int | float) and input > 0
    """

    name: str | None = None
    """Display name used for the {{name}} placeholder. None = input value."""

    template_id: str | None = None
    """Template requested for messages. None = standard template."""

    @abstractmethod
    def is_valid(self, input: object) -> bool:
        """Check input against the rule.

        Args:
            input: Value to validate

        Returns:
            True if input satisfies the rule
        """

    def properties(self) -> Mapping[str, object]:
        """Rule parameters available to message placeholders."""
        return {}

    def evaluate(self, input: object) -> Result:
        """Evaluate rule and snapshot everything messages need.

        Args:
            input: Value to validate

        Returns:
            Result referencing this rule
        """
        properties = dict(self.properties())
        if self.name is not None:
            properties.setdefault("name", self.name)
        if self.template_id is not None:
            properties[TEMPLATE_ID_KEY] = self.template_id

        return Result(
            rule=self,
            input=input,
            is_valid=self.is_valid(input),
            properties=properties,
        )

    def set_name(self, name: str) -> Self:
        """Set display name. Returns self for chaining."""
        if not name:
            raise ValueError("name must not be empty")
        self.name = name
        return self

    def set_template(self, template_id: str) -> Self:
        """Request a specific template. Returns self for chaining."""
        if not template_id:
            raise ValueError("template_id must not be empty")
        self.template_id = template_id
        return self
