"""Tests for domain/model/configuration.py."""

import pytest

from validkit.domain.model.configuration import (
    DEFAULT_NAMESPACE,
    FactoryConfig,
    effective_namespaces,
)


class TestFactoryConfig:
    """Tests for FactoryConfig."""

    def test_default_values(self) -> None:
        config = FactoryConfig()
        assert config.namespaces == ()
        assert config.max_depth == 2
        assert config.max_items == 3
        assert config.missing_placeholder == ""

    def test_list_namespaces_fail(self) -> None:
        with pytest.raises(TypeError, match="namespaces must be tuple"):
            FactoryConfig(namespaces=["acme"])  # type: ignore[arg-type]

    def test_empty_namespace_fails(self) -> None:
        with pytest.raises(ValueError, match="namespace"):
            FactoryConfig(namespaces=("",))

    def test_negative_depth_fails(self) -> None:
        with pytest.raises(ValueError, match="max_depth"):
            FactoryConfig(max_depth=-1)

    def test_negative_items_fails(self) -> None:
        with pytest.raises(ValueError, match="max_items"):
            FactoryConfig(max_items=-1)


class TestEffectiveNamespaces:
    """Built-in namespace appears exactly once."""

    def test_empty_gets_default(self) -> None:
        assert effective_namespaces(()) == (DEFAULT_NAMESPACE,)

    def test_default_is_appended(self) -> None:
        assert effective_namespaces(("acme", "corp")) == ("acme", "corp", DEFAULT_NAMESPACE)

    def test_default_keeps_caller_position(self) -> None:
        assert effective_namespaces((DEFAULT_NAMESPACE, "acme")) == (DEFAULT_NAMESPACE, "acme")

    @pytest.mark.parametrize(
        "namespaces",
        [(), ("acme",), (DEFAULT_NAMESPACE,), ("acme", DEFAULT_NAMESPACE, DEFAULT_NAMESPACE)],
    )
    def test_default_present_exactly_once(self, namespaces: tuple[str, ...]) -> None:
        assert effective_namespaces(namespaces).count(DEFAULT_NAMESPACE) == 1
