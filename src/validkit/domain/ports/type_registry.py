"""Type registry port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from validkit.domain.model.template import Templates


class TypeRegistryPort(ABC):
    """Port for looking up rule and exception types by qualified name.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def exists(self, type_name: str) -> bool:
        """Check whether a type is registered under type_name.

        Args:
            type_name: Fully qualified type name

        Returns:
            True if lookup(type_name) would succeed
        """
        ...

    @abstractmethod
    def lookup(self, type_name: str) -> type:
        """Get type registered under type_name.

        Args:
            type_name: Fully qualified type name

        Returns:
            Registered type

        Raises:
            TypeNotFoundError: If nothing is registered under type_name
        """
        ...

    @abstractmethod
    def name_of(self, cls: type) -> str:
        """Get qualified name a type was registered under.

        Args:
            cls: Registered or unregistered type

        Returns:
            Registered name, the name of the nearest registered rule
            ancestor, or module.qualname for unrelated unregistered types
        """
        ...

    @abstractmethod
    def templates_for(self, rule_type: type) -> Templates:
        """Get templates declared for a rule type.

        Args:
            rule_type: Rule class (no instance required)

        Returns:
            Templates of rule_type or of its nearest registered ancestor

        Raises:
            TemplateError: If neither rule_type nor an ancestor declared templates
        """
        ...

    @abstractmethod
    def exception_name_for(self, rule_type: type) -> str | None:
        """Get exception type name explicitly paired with a rule type.

        Args:
            rule_type: Rule class

        Returns:
            Exception type name declared for rule_type or its nearest
            registered ancestor, None if derived by convention
        """
        ...
