"""Result of evaluating a rule against an input."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from validkit.domain.model.rule import Rule

TEMPLATE_ID_KEY = "templateId"
"""Reserved property key that overrides template selection."""


@dataclass(frozen=True, slots=True)
class Result:
    """Immutable snapshot of one rule evaluation.

    Attributes:
        rule: Rule that produced this result
        input: Original input value (opaque)
        is_valid: Whether the input satisfied the rule (after inversion)
        inverted: True if the rule was evaluated in negated mode
        properties: Values available to message placeholders
    """

    rule: Rule
    input: object
    is_valid: bool
    inverted: bool = False
    properties: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.rule is None:
            raise TypeError("rule must not be None")
        if not isinstance(self.properties, MappingProxyType):
            # Freeze caller-supplied dicts
            object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @property
    def template_id(self) -> object | None:
        """Requested template identifier, None if not requested."""
        return self.properties.get(TEMPLATE_ID_KEY)

    def invert(self) -> Result:
        """Create the negated counterpart of this result.

        Returns:
            Result with flipped is_valid and inverted flags
        """
        return Result(
            rule=self.rule,
            input=self.input,
            is_valid=not self.is_valid,
            inverted=not self.inverted,
            properties=self.properties,
        )
