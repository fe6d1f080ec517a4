"""Tests for infrastructure/registry.py."""

import sys
import textwrap
import threading
from pathlib import Path

import pytest

from tests.factories import (
    TEST_NAMESPACE,
    Accept,
    Reject,
    RejectException,
    make_registry,
    make_templates,
)
from validkit.domain.exceptions.component import (
    RegistrationError,
    TemplateError,
    TypeNotFoundError,
)
from validkit.infrastructure.registry import (
    TypeRegistry,
    default_registry,
    exception_type,
    exception_type_name,
    rule_type,
    rule_type_name,
)


class TestTypeNames:
    """Tests for qualified name builders."""

    def test_rule_type_name(self) -> None:
        assert rule_type_name("acme", "Even") == "acme.Rules.Even"

    def test_trailing_dot_is_ignored(self) -> None:
        assert rule_type_name("acme.", "Even") == "acme.Rules.Even"

    def test_exception_type_name(self) -> None:
        assert exception_type_name("acme", "EvenException") == "acme.Exceptions.EvenException"


class TestRegister:
    """Tests for TypeRegistry.register / register_rule."""

    def test_lookup_returns_registered_class(self) -> None:
        registry = make_registry()
        assert registry.lookup(f"{TEST_NAMESPACE}.Rules.Reject") is Reject

    def test_exists(self) -> None:
        registry = make_registry()
        assert registry.exists(f"{TEST_NAMESPACE}.Rules.Reject")
        assert not registry.exists(f"{TEST_NAMESPACE}.Rules.Missing")

    def test_lookup_unknown_fails(self) -> None:
        with pytest.raises(TypeNotFoundError) as exc_info:
            TypeRegistry().lookup("acme.Rules.Missing")
        assert exc_info.value.type_name == "acme.Rules.Missing"

    def test_duplicate_name_fails(self) -> None:
        registry = make_registry()
        with pytest.raises(RegistrationError, match="already registered"):
            registry.register(f"{TEST_NAMESPACE}.Rules.Reject", Accept)

    def test_duplicate_name_with_override(self) -> None:
        registry = make_registry()
        registry.register(f"{TEST_NAMESPACE}.Rules.Reject", Accept, override=True)
        assert registry.lookup(f"{TEST_NAMESPACE}.Rules.Reject") is Accept

    def test_same_class_twice_is_allowed(self) -> None:
        registry = make_registry()
        registry.register(f"{TEST_NAMESPACE}.Exceptions.RejectException", RejectException)
        assert len(registry) == len(make_registry())

    def test_non_class_fails(self) -> None:
        with pytest.raises(RegistrationError, match="expected a class"):
            TypeRegistry().register("acme.Rules.Even", lambda: None)  # type: ignore[arg-type]

    def test_rule_without_templates_fails(self) -> None:
        with pytest.raises(RegistrationError, match="Templates"):
            TypeRegistry().register_rule("acme.Rules.Even", Accept, None)  # type: ignore[arg-type]

    def test_contains_and_names(self) -> None:
        registry = make_registry()
        assert f"{TEST_NAMESPACE}.Rules.Accept" in registry
        assert f"{TEST_NAMESPACE}.Rules.Accept" in registry.names()


class TestMetadata:
    """Tests for name_of / templates_for / exception_name_for."""

    def test_name_of_registered(self) -> None:
        assert make_registry().name_of(Reject) == f"{TEST_NAMESPACE}.Rules.Reject"

    def test_name_of_unregistered_uses_module_path(self) -> None:
        class Local:
            pass

        name = TypeRegistry().name_of(Local)
        assert name == f"{Local.__module__}.{Local.__qualname__}"

    def test_templates_for(self) -> None:
        registry = TypeRegistry()
        templates = make_templates()
        registry.register_rule("acme.Rules.Accept", Accept, templates)
        assert registry.templates_for(Accept) is templates

    def test_templates_inherited_by_subclass(self) -> None:
        class StrictReject(Reject):
            pass

        registry = make_registry()
        assert registry.templates_for(StrictReject) is registry.templates_for(Reject)

    def test_templates_missing_fails(self) -> None:
        with pytest.raises(TemplateError, match="No templates"):
            TypeRegistry().templates_for(Accept)

    def test_exception_name_default_none(self) -> None:
        assert make_registry().exception_name_for(Reject) is None

    def test_exception_name_declared(self) -> None:
        registry = TypeRegistry()
        registry.register_rule(
            "acme.Rules.Reject",
            Reject,
            make_templates(),
            exception="acme.Exceptions.Custom",
        )
        assert registry.exception_name_for(Reject) == "acme.Exceptions.Custom"

    def test_unregistered_subclass_uses_parent_name(self) -> None:
        class StrictReject(Reject):
            pass

        assert make_registry().name_of(StrictReject) == f"{TEST_NAMESPACE}.Rules.Reject"

    def test_unregistered_subclass_inherits_declared_exception(self) -> None:
        class StrictReject(Reject):
            pass

        registry = TypeRegistry()
        registry.register_rule(
            "acme.Rules.Reject",
            Reject,
            make_templates(),
            exception="acme.Exceptions.Custom",
        )
        assert registry.exception_name_for(StrictReject) == "acme.Exceptions.Custom"

    def test_registered_subclass_keeps_own_metadata(self) -> None:
        class StrictReject(Reject):
            pass

        registry = TypeRegistry()
        registry.register_rule(
            "acme.Rules.Reject",
            Reject,
            make_templates(),
            exception="acme.Exceptions.Custom",
        )
        own_templates = make_templates(regular=(("standard", "strict"),))
        registry.register_rule("acme.Rules.StrictReject", StrictReject, own_templates)

        assert registry.name_of(StrictReject) == "acme.Rules.StrictReject"
        assert registry.templates_for(StrictReject) is own_templates
        assert registry.exception_name_for(StrictReject) is None


class TestDecorators:
    """Tests for rule_type / exception_type decorators."""

    def test_rule_type_registers_with_class_name(self) -> None:
        registry = TypeRegistry()

        @rule_type(make_templates(), namespace="acme", registry=registry)
        class Even(Accept):
            pass

        assert registry.lookup("acme.Rules.Even") is Even
        assert registry.name_of(Even) == "acme.Rules.Even"

    def test_rule_type_explicit_name(self) -> None:
        registry = TypeRegistry()

        @rule_type(make_templates(), namespace="acme", name="Pair", registry=registry)
        class Even(Accept):
            pass

        assert registry.lookup("acme.Rules.Pair") is Even

    def test_exception_type_registers(self) -> None:
        registry = TypeRegistry()

        @exception_type(namespace="acme", registry=registry)
        class EvenException(RejectException):
            pass

        assert registry.lookup("acme.Exceptions.EvenException") is EvenException

    def test_decorator_returns_class_unchanged(self) -> None:
        registry = TypeRegistry()
        decorated = rule_type(make_templates(), namespace="acme", registry=registry)(Accept)
        assert decorated is Accept


class TestDefaultRegistry:
    """Tests for the process-wide registry."""

    def test_same_instance(self) -> None:
        assert default_registry() is default_registry()

    def test_holds_builtin_rules(self) -> None:
        from validkit.application.rules import Length, LengthException

        registry = default_registry()
        assert registry.lookup("validkit.Rules.Length") is Length
        assert registry.lookup("validkit.Exceptions.LengthException") is LengthException


class TestAutoload:
    """Namespace packages are imported on lookup misses."""

    def test_autoload_imports_namespace(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        package = tmp_path / "autoload_plugin_pkg"
        package.mkdir()
        (package / "__init__.py").write_text(
            textwrap.dedent(
                """
                from validkit import Rule, Templates, rule_type

                @rule_type(Templates.standard("odd", "not odd"), namespace="autoload_plugin_pkg")
                class Odd(Rule):
                    def is_valid(self, input):
                        return input % 2 == 1
                """
            ),
            encoding="utf-8",
        )
        monkeypatch.syspath_prepend(str(tmp_path))
        monkeypatch.delitem(sys.modules, "autoload_plugin_pkg", raising=False)

        registry = default_registry()

        assert registry.exists("autoload_plugin_pkg.Rules.Odd")
        assert registry.lookup("autoload_plugin_pkg.Rules.Odd").__name__ == "Odd"

    def test_missing_namespace_is_empty(self) -> None:
        registry = TypeRegistry(autoload=True)
        assert not registry.exists("no_such_validkit_plugin.Rules.Even")

    def test_broken_namespace_propagates(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        package = tmp_path / "broken_plugin_pkg"
        package.mkdir()
        (package / "__init__.py").write_text("import no_such_dependency_xyz\n", encoding="utf-8")
        monkeypatch.syspath_prepend(str(tmp_path))

        registry = TypeRegistry(autoload=True)

        with pytest.raises(ModuleNotFoundError, match="no_such_dependency_xyz"):
            registry.exists("broken_plugin_pkg.Rules.Even")

    def test_broken_namespace_fails_on_every_lookup(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        package = tmp_path / "failing_plugin_pkg"
        package.mkdir()
        init = package / "__init__.py"
        init.write_text("raise RuntimeError('plugin setup failed')\n", encoding="utf-8")
        monkeypatch.syspath_prepend(str(tmp_path))

        registry = TypeRegistry(autoload=True)

        for _ in range(2):
            with pytest.raises(RuntimeError, match="plugin setup failed"):
                registry.exists("failing_plugin_pkg.Rules.Even")

        # Once the package imports cleanly, the namespace loads
        init.write_text("", encoding="utf-8")
        assert not registry.exists("failing_plugin_pkg.Rules.Even")

    def test_concurrent_lookups_wait_for_import(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        package = tmp_path / "slow_plugin_pkg"
        package.mkdir()
        (package / "__init__.py").write_text(
            textwrap.dedent(
                """
                import time

                from validkit import Rule, Templates, rule_type

                time.sleep(0.3)

                @rule_type(Templates.standard("even", "not even"), namespace="slow_plugin_pkg")
                class Even(Rule):
                    def is_valid(self, input):
                        return input % 2 == 0
                """
            ),
            encoding="utf-8",
        )
        monkeypatch.syspath_prepend(str(tmp_path))
        monkeypatch.delitem(sys.modules, "slow_plugin_pkg", raising=False)

        registry = default_registry()
        barrier = threading.Barrier(4)
        found: list[bool] = []
        errors: list[Exception] = []

        def worker() -> None:
            barrier.wait()
            try:
                found.append(registry.exists("slow_plugin_pkg.Rules.Even"))
            except Exception as exc:
                errors.append(exc)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert found == [True, True, True, True]

    def test_no_autoload_by_default(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        package = tmp_path / "never_imported_pkg"
        package.mkdir()
        (package / "__init__.py").write_text("raise RuntimeError('imported')\n", encoding="utf-8")
        monkeypatch.syspath_prepend(str(tmp_path))

        assert not TypeRegistry().exists("never_imported_pkg.Rules.Even")
