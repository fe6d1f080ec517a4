"""Message formatter: template + input + properties → message."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from validkit.application.message.stringifier import Stringifier

if TYPE_CHECKING:
    from validkit.domain.model.configuration import FactoryConfig

_PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")


@dataclass(frozen=True, slots=True)
class MessageFormatter:
    """Pure placeholder substitution.

    Placeholders are {{key}}:
        {{name}}  - "name" property if it is a string, else the input
        {{input}} - the input value
        {{other}} - the "other" property
        unknown   - replaced with `missing`

    Values other than the name are rendered through the stringifier.
    Substituted text is never scanned again (no recursion).

    Attributes:
        stringifier: Value renderer
        missing: Text substituted for unknown placeholders
    """

    stringifier: Stringifier = field(default_factory=Stringifier)
    missing: str = ""

    @classmethod
    def from_config(cls, config: FactoryConfig) -> MessageFormatter:
        """Create formatter from factory configuration."""
        return cls(
            stringifier=Stringifier(max_depth=config.max_depth, max_items=config.max_items),
            missing=config.missing_placeholder,
        )

    def format(self, input: object, properties: Mapping[str, object], template: str) -> str:
        """Render template.

        Args:
            input: Validated value
            properties: Named values for placeholders
            template: Message with {{key}} placeholders

        Returns:
            Fully substituted message. Templates without placeholders
            are returned unchanged.
        """
        return _PLACEHOLDER_PATTERN.sub(
            lambda match: self._render(match.group(1), input, properties),
            template,
        )

    def _render(self, key: str, input: object, properties: Mapping[str, object]) -> str:
        if key == "name":
            name = properties.get("name")
            if isinstance(name, str):
                return name
            return self.stringifier.stringify(input)

        if key == "input":
            return self.stringifier.stringify(input)

        if key in properties:
            return self.stringifier.stringify(properties[key])

        return self.missing
