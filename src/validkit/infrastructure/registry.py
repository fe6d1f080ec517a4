"""Type registry adapter.

Maps qualified type names to rule and exception classes.

Names follow the layout "<namespace>.Rules.<Name>" for rules and
"<namespace>.Exceptions.<Name>Exception" for their exceptions. The layout
is a naming scheme, not a module path: classes live wherever their
package puts them and register themselves through the decorators below.

Namespaces that are importable packages are imported on first lookup,
so a plugin package registers its types just by being importable.
"""

from __future__ import annotations

import importlib
import logging
import threading
from collections.abc import Callable
from typing import TypeVar

from validkit.domain.exceptions.component import (
    RegistrationError,
    TemplateError,
    TypeNotFoundError,
)
from validkit.domain.model.configuration import DEFAULT_NAMESPACE
from validkit.domain.model.template import Templates
from validkit.domain.ports.type_registry import TypeRegistryPort

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=type)

RULES_SEGMENT = "Rules"
EXCEPTIONS_SEGMENT = "Exceptions"


def rule_type_name(namespace: str, name: str) -> str:
    """Build qualified rule type name.

    Args:
        namespace: Dotted namespace (trailing dots ignored)
        name: Class-style rule name (e.g. "Length")

    Returns:
        "<namespace>.Rules.<name>"
    """
    return f"{namespace.rstrip('.')}.{RULES_SEGMENT}.{name}"


def exception_type_name(namespace: str, name: str) -> str:
    """Build qualified exception type name ("<namespace>.Exceptions.<name>")."""
    return f"{namespace.rstrip('.')}.{EXCEPTIONS_SEGMENT}.{name}"


class TypeRegistry(TypeRegistryPort):
    """In-memory registry of rule and exception types.

    Thread-safe: mutations are guarded by one lock, namespace imports
    by a separate reentrant lock. Threads asking for a namespace that
    is being imported wait until the import finishes; the imported
    module registers its own types through the mutation lock.

    Subclasses of a registered rule act as that rule: they share its
    templates, registered name and exception pairing unless they are
    registered themselves.

    Example:
        >>> registry = TypeRegistry()
        >>> registry.register_rule("acme.Rules.Even", Even, Templates.standard(
        ...     "{{name}} must be even", "{{name}} must not be even"))
        >>> registry.lookup("acme.Rules.Even")
        <class 'Even'>
    """

    def __init__(self, *, autoload: bool = False) -> None:
        """Initialize empty registry.

        Args:
            autoload: Import namespace packages on lookup misses
        """
        self._types: dict[str, type] = {}
        self._names: dict[type, str] = {}
        self._templates: dict[type, Templates] = {}
        self._exception_names: dict[type, str] = {}
        self._loaded_namespaces: set[str] = set()
        self._autoload = autoload
        self._lock = threading.Lock()
        # Reentrant: a namespace package may look up other namespaces
        self._load_lock = threading.RLock()

    def register(self, type_name: str, cls: type, *, override: bool = False) -> None:
        """Register any type under a qualified name.

        Args:
            type_name: Qualified name
            cls: Type to register
            override: Allow replacing an existing registration

        Raises:
            RegistrationError: If cls is not a type or name is taken
        """
        if not type_name:
            raise ValueError("type_name must not be empty")
        if not isinstance(cls, type):
            raise RegistrationError(type_name, f"expected a class, got {type(cls).__name__}")

        with self._lock:
            existing = self._types.get(type_name)
            if existing is not None and existing is not cls and not override:
                raise RegistrationError(
                    type_name,
                    f"already registered to {existing.__qualname__}. Use override=True to replace.",
                )
            self._types[type_name] = cls
            self._names.setdefault(cls, type_name)

        logger.debug("registered %s -> %s", type_name, cls.__qualname__)

    def register_rule(
        self,
        type_name: str,
        cls: type,
        templates: Templates,
        *,
        exception: str | None = None,
        override: bool = False,
    ) -> None:
        """Register rule type together with its message templates.

        Args:
            type_name: Qualified rule name ("<namespace>.Rules.<Name>")
            cls: Rule class
            templates: Regular and inverted templates of this rule
            exception: Explicit exception type name. None = derived by name
            override: Allow replacing an existing registration

        Raises:
            RegistrationError: If templates are missing or name is taken
        """
        if not isinstance(templates, Templates):
            raise RegistrationError(type_name, "templates must be a Templates instance")
        if exception is not None and not exception:
            raise RegistrationError(type_name, "exception name must not be empty")

        self.register(type_name, cls, override=override)
        with self._lock:
            self._templates[cls] = templates
            if exception is not None:
                self._exception_names[cls] = exception

    def exists(self, type_name: str) -> bool:
        if type_name in self._types:
            return True
        if self._autoload:
            self._load_namespace(_namespace_of(type_name))
        return type_name in self._types

    def lookup(self, type_name: str) -> type:
        cls = self._types.get(type_name)
        if cls is None:
            raise TypeNotFoundError(type_name)
        return cls

    def name_of(self, cls: type) -> str:
        name = self._names.get(cls)
        if name is not None:
            return name
        owner = self._rule_owner(cls)
        if owner is not None:
            return self._names[owner]
        return f"{cls.__module__}.{cls.__qualname__}"

    def templates_for(self, rule_type: type) -> Templates:
        owner = self._rule_owner(rule_type)
        if owner is None:
            raise TemplateError(f"No templates declared for {rule_type.__qualname__}")
        return self._templates[owner]

    def exception_name_for(self, rule_type: type) -> str | None:
        owner = self._rule_owner(rule_type)
        if owner is None:
            return None
        return self._exception_names.get(owner)

    def _rule_owner(self, rule_type: type) -> type | None:
        """Nearest class in rule_type's MRO registered as a rule."""
        for klass in rule_type.__mro__:
            if klass in self._templates:
                return klass
        return None

    def names(self) -> frozenset[str]:
        """All registered qualified names."""
        return frozenset(self._types)

    def _load_namespace(self, namespace: str) -> None:
        """Import namespace package once so its types self-register.

        A namespace that is not an importable package is simply empty.
        Errors raised while importing an existing package propagate, and
        the namespace stays unloaded so every later lookup raises again.
        """
        if not namespace:
            return
        with self._load_lock:
            if namespace in self._loaded_namespaces:
                return

            try:
                importlib.import_module(namespace)
            except ModuleNotFoundError as exc:
                if exc.name is None or not _is_same_or_parent(exc.name, namespace):
                    raise
                logger.debug("namespace %s is not an importable package", namespace)
            else:
                logger.debug("loaded namespace %s", namespace)

            self._loaded_namespaces.add(namespace)

    def __contains__(self, type_name: str) -> bool:
        """Support 'name in registry' syntax (no autoload)."""
        return type_name in self._types

    def __len__(self) -> int:
        """Count of registered types."""
        return len(self._types)

    def __repr__(self) -> str:
        return f"TypeRegistry(types={len(self)})"


def _namespace_of(type_name: str) -> str:
    """Namespace prefix of "<namespace>.<Segment>.<Name>"."""
    parts = type_name.rsplit(".", 2)
    if len(parts) < 3:
        return ""
    return parts[0]


def _is_same_or_parent(module_name: str, namespace: str) -> bool:
    return namespace == module_name or namespace.startswith(module_name + ".")


_default_registry: TypeRegistry | None = None
_default_registry_lock = threading.Lock()


def default_registry() -> TypeRegistry:
    """Get process-wide registry used by built-in rules and decorators.

    Created on first access with namespace autoloading enabled.
    """
    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = TypeRegistry(autoload=True)
        return _default_registry


def rule_type(
    templates: Templates,
    *,
    namespace: str = DEFAULT_NAMESPACE,
    name: str | None = None,
    exception: str | None = None,
    registry: TypeRegistry | None = None,
) -> Callable[[R], R]:
    """Class decorator registering a rule type.

    Args:
        templates: Message templates of the rule
        namespace: Namespace the rule belongs to
        name: Class-style name. None = class __name__
        exception: Explicit exception type name. None = derived by name
        registry: Target registry. None = default registry

    Returns:
        Decorator returning the class unchanged

    Example:
        @rule_type(Templates.standard("{{name}} must be even", "{{name}} must not be even"),
                   namespace="acme")
        class Even(Rule):
            def is_valid(self, input: object) -> bool:
                return isinstance(input, int) and input % 2 == 0
    """

    def decorator(cls: R) -> R:
        target = registry if registry is not None else default_registry()
        target.register_rule(
            rule_type_name(namespace, name or cls.__name__),
            cls,
            templates,
            exception=exception,
        )
        return cls

    return decorator


def exception_type(
    *,
    namespace: str = DEFAULT_NAMESPACE,
    name: str | None = None,
    registry: TypeRegistry | None = None,
) -> Callable[[R], R]:
    """Class decorator registering an exception type.

    Args:
        namespace: Namespace the exception belongs to
        name: Class-style name. None = class __name__
        registry: Target registry. None = default registry

    Returns:
        Decorator returning the class unchanged
    """

    def decorator(cls: R) -> R:
        target = registry if registry is not None else default_registry()
        target.register(exception_type_name(namespace, name or cls.__name__), cls)
        return cls

    return decorator
