"""Value stringifier for validation messages.

Renders arbitrary values compactly: containers are truncated by
depth and item count so that huge inputs keep messages readable.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

_ELLIPSIS = "..."


@dataclass(frozen=True, slots=True)
class Stringifier:
    """Configurable value → message text converter.

    Output format:
        None → null, True → true, "abc" → "abc" (quoted),
        [1, 2, 3, 4] → [1, 2, 3, ...] (max_items=3),
        {"a": [1]} → {"a": [...]} (beyond max_depth),
        other objects → `ClassName`

    Attributes:
        max_depth: Container nesting levels rendered before "..."
        max_items: Items rendered per container before "..."
    """

    max_depth: int = 2
    max_items: int = 3

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if self.max_items < 0:
            raise ValueError(f"max_items must be >= 0, got {self.max_items}")

    def stringify(self, value: object) -> str:
        """Render value for a message.

        Args:
            value: Any value

        Returns:
            Single-line text representation
        """
        return self._stringify(value, depth=0)

    def _stringify(self, value: object, depth: int) -> str:
        match value:
            case None:
                return "null"
            case bool():
                return "true" if value else "false"
            case str():
                return f'"{value}"'
            case int() | float():
                return repr(value)
            case type():
                return f"`{value.__qualname__}`"
            case Mapping():
                return self._mapping(value, depth)
            case list():
                return self._items(value, depth, "[", "]")
            case tuple():
                return self._items(value, depth, "(", ")")
            case set() | frozenset():
                return self._items(value, depth, "{", "}")
            case _:
                return f"`{type(value).__qualname__}`"

    def _items(
        self,
        values: list | tuple | set | frozenset,
        depth: int,
        open_: str,
        close: str,
    ) -> str:
        if depth >= self.max_depth:
            return f"{open_}{_ELLIPSIS}{close}"

        rendered = [self._stringify(item, depth + 1) for item in list(values)[: self.max_items]]
        if len(values) > self.max_items:
            rendered.append(_ELLIPSIS)
        return f"{open_}{', '.join(rendered)}{close}"

    def _mapping(self, value: Mapping, depth: int) -> str:
        if depth >= self.max_depth:
            return f"{{{_ELLIPSIS}}}"

        rendered = [
            f"{self._stringify(key, depth + 1)}: {self._stringify(item, depth + 1)}"
            for key, item in list(value.items())[: self.max_items]
        ]
        if len(value) > self.max_items:
            rendered.append(_ELLIPSIS)
        return f"{{{', '.join(rendered)}}}"
