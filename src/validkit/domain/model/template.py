"""Message templates declared per rule type."""

from __future__ import annotations

from dataclasses import dataclass

STANDARD_TEMPLATE_ID = "standard"
"""Template identifier used when a result does not request one."""


@dataclass(frozen=True, slots=True)
class Template:
    """Named message pattern.

    Attributes:
        id: Identifier matched against the result's templateId
        message: Message with {{placeholder}} markers
    """

    id: str
    message: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.id:
            raise ValueError("id must not be empty")
        if not isinstance(self.message, str):
            raise TypeError(f"message must be str, got {type(self.message).__name__}")


@dataclass(frozen=True, slots=True)
class Templates:
    """Regular and inverted template lists of one rule type.

    Declaration order matters: the first template of a list is the
    fallback when no identifier matches.

    Attributes:
        regular: Templates for rules evaluated normally
        inverted: Templates for rules evaluated in negated mode
    """

    regular: tuple[Template, ...]
    inverted: tuple[Template, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.regular, tuple):
            raise TypeError(f"regular must be tuple, got {type(self.regular).__name__}")
        if not isinstance(self.inverted, tuple):
            raise TypeError(f"inverted must be tuple, got {type(self.inverted).__name__}")
        if not self.regular:
            raise ValueError("regular templates must not be empty")
        if not self.inverted:
            raise ValueError("inverted templates must not be empty")

    @classmethod
    def standard(cls, regular: str, inverted: str) -> Templates:
        """Create templates holding one "standard" message per list.

        Args:
            regular: Message for the regular list
            inverted: Message for the inverted list

        Returns:
            Templates with a single standard template in each list
        """
        return cls(
            regular=(Template(STANDARD_TEMPLATE_ID, regular),),
            inverted=(Template(STANDARD_TEMPLATE_ID, inverted),),
        )
