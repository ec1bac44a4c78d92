"""Tests for extension registries and the merge_values entry point."""
from __future__ import annotations

import pytest

from plugconf.core.extensions import (
    ExtensionRegistry,
    clear_extension_registries,
    get_extension_registry,
    merge_values,
)


class Filter:
    """Extension point used in these tests."""


class TracingFilter(Filter):
    pass


class MetricsFilter(Filter):
    pass


class TestExtensionRegistry:
    def test_register_and_lookup(self) -> None:
        registry = ExtensionRegistry(Filter)
        registry.register("tracing", TracingFilter)

        assert registry.has_extension("tracing")
        assert "tracing" in registry
        assert registry.get("tracing") is TracingFilter
        assert not registry.has_extension("metrics")
        assert registry.get("metrics") is None

    def test_register_replaces_existing_entry(self) -> None:
        registry = ExtensionRegistry(Filter)
        registry.register("f", TracingFilter)
        registry.register("f", MetricsFilter)
        assert registry.get("f") is MetricsFilter
        assert len(registry) == 1

    def test_list_names_is_sorted(self) -> None:
        registry = ExtensionRegistry(Filter)
        for name in ("zeta", "alpha", "mid"):
            registry.register(name, object())
        assert registry.list_names() == ["alpha", "mid", "zeta"]

    def test_unregister(self) -> None:
        registry = ExtensionRegistry(Filter)
        registry.register("tracing", TracingFilter)
        registry.unregister("tracing")
        registry.unregister("never-registered")
        assert not registry.has_extension("tracing")

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_names_are_rejected(self, name: str) -> None:
        with pytest.raises(ValueError):
            ExtensionRegistry(Filter).register(name, TracingFilter)


def test_get_extension_registry_returns_same_instance_per_type() -> None:
    first = get_extension_registry(Filter)
    assert get_extension_registry(Filter) is first
    assert get_extension_registry("other") is not first


def test_clear_extension_registries() -> None:
    get_extension_registry(Filter).register("tracing", TracingFilter)
    clear_extension_registries()
    assert not get_extension_registry(Filter).has_extension("tracing")


def test_merge_values_skips_unregistered_defaults() -> None:
    registry = get_extension_registry(Filter)
    registry.register("tracing", TracingFilter)
    registry.register("metrics", MetricsFilter)

    result = merge_values(Filter, "custom,default,-metrics", ["tracing", "missing", "metrics"])
    assert result == ["custom", "tracing"]


def test_merge_values_with_empty_registry_keeps_explicit_names() -> None:
    assert merge_values(Filter, "a,b", ["tracing"]) == ["a", "b"]
