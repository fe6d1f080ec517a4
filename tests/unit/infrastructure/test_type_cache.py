"""Tests for infrastructure/type_cache.py."""

import threading

import pytest

from tests.factories import TEST_NAMESPACE, Reject, make_registry
from validkit.domain.exceptions.component import TypeNotFoundError
from validkit.infrastructure.registry import TypeRegistry
from validkit.infrastructure.type_cache import TypeCache


class CountingRegistry(TypeRegistry):
    """Registry counting lookup() calls."""

    def __init__(self) -> None:
        super().__init__()
        self.lookups = 0

    def lookup(self, type_name: str) -> type:
        self.lookups += 1
        return super().lookup(type_name)


class TestTypeCacheResolve:
    """Tests for TypeCache.resolve."""

    def test_resolves_registered_type(self) -> None:
        cache = TypeCache(make_registry())
        assert cache.resolve(f"{TEST_NAMESPACE}.Rules.Reject") is Reject

    def test_second_call_returns_same_object(self) -> None:
        cache = TypeCache(make_registry())
        first = cache.resolve(f"{TEST_NAMESPACE}.Rules.Reject")
        second = cache.resolve(f"{TEST_NAMESPACE}.Rules.Reject")
        assert first is second

    def test_lookup_happens_once(self) -> None:
        registry = CountingRegistry()
        registry.register("acme.Rules.Reject", Reject)
        cache = TypeCache(registry)

        for _ in range(5):
            cache.resolve("acme.Rules.Reject")

        assert registry.lookups == 1

    def test_unknown_fails_and_is_not_cached(self) -> None:
        cache = TypeCache(TypeRegistry())
        with pytest.raises(TypeNotFoundError):
            cache.resolve("acme.Rules.Missing")
        assert cache.size == 0

    def test_keyed_by_exact_string(self) -> None:
        registry = CountingRegistry()
        registry.register("acme.Rules.Reject", Reject)
        registry.register("acme.Rules.Reject2", Reject)
        cache = TypeCache(registry)

        cache.resolve("acme.Rules.Reject")
        cache.resolve("acme.Rules.Reject2")

        assert registry.lookups == 2
        assert cache.cached_names == frozenset({"acme.Rules.Reject", "acme.Rules.Reject2"})

    def test_none_registry_fails(self) -> None:
        with pytest.raises(TypeError, match="_registry"):
            TypeCache(None)  # type: ignore[arg-type]


class TestTypeCacheThreads:
    """Concurrent resolution performs one lookup."""

    def test_concurrent_resolve(self) -> None:
        registry = CountingRegistry()
        registry.register("acme.Rules.Reject", Reject)
        cache = TypeCache(registry)
        results: list[type] = []
        barrier = threading.Barrier(8)

        def worker() -> None:
            barrier.wait()
            results.append(cache.resolve("acme.Rules.Reject"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert registry.lookups == 1
        assert all(result is Reject for result in results)
        assert len(results) == 8
