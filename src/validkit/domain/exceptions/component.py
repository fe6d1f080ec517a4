"""Component exceptions.

Raised when the factory, registry or templates are wired incorrectly.
These are configuration errors: deterministic, never retried.
"""

from __future__ import annotations

from validkit.domain.exceptions.base import ValidkitError


class ComponentError(ValidkitError):
    """Error in library wiring (namespaces, registry, templates)."""


class RuleNotFoundError(ComponentError):
    """No namespace in the search order provides the requested rule.

    Attributes:
        rule_name: Short rule name as requested (e.g. "length")
    """

    def __init__(self, rule_name: str) -> None:
        # FAIL-FIRST: validate required parameters
        if not rule_name:
            raise ValueError("rule_name must not be empty")

        self.rule_name = rule_name
        super().__init__(f'Could not find "{rule_name}" rule')


class InvalidRuleError(ComponentError):
    """Candidate type exists but is not an instantiable Rule.

    Attributes:
        type_name: Fully qualified candidate type name
        reason: Why the type was rejected
    """

    def __init__(self, type_name: str, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if not type_name:
            raise ValueError("type_name must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.type_name = type_name
        self.reason = reason
        super().__init__(f'"{type_name}" {reason}')


class TypeNotFoundError(ComponentError):
    """Type name is not known to the registry.

    Attributes:
        type_name: Fully qualified type name that failed to resolve
    """

    def __init__(self, type_name: str) -> None:
        if not type_name:
            raise ValueError("type_name must not be empty")

        self.type_name = type_name
        super().__init__(f'Type "{type_name}" does not exist')


class TemplateError(ComponentError):
    """Templates cannot produce a message (missing or empty list)."""


class RegistrationError(ComponentError):
    """Type cannot be registered under the requested name.

    Attributes:
        type_name: Name the registration targeted
        reason: Why registration was refused
    """

    def __init__(self, type_name: str, reason: str) -> None:
        if not type_name:
            raise ValueError("type_name must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.type_name = type_name
        self.reason = reason
        super().__init__(f'Cannot register "{type_name}": {reason}')
