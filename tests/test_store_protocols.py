"""
Tests for storage protocol definitions.

These tests verify that:
1. Protocol definitions are valid and importable
2. Protocols define the expected methods
3. The in-memory adapter and the test fake satisfy the Protocol contract
"""
import inspect

import pytest

# All tests in this module are pure logic tests - mark as unit
pytestmark = pytest.mark.unit

REQUIRED_METHODS = [
    "get",
    "put",
    "remove",
    "contains",
    "items",
    "size",
    "clear",
    "replace",
]


class TestProtocolImports:
    """Test that the protocol can be imported."""

    def test_string_map_store_import(self):
        """StringMapStore should be importable."""
        from application.ports import StringMapStore
        assert StringMapStore is not None


class TestStringMapStoreProtocol:
    """Test StringMapStore protocol definition."""

    def test_has_required_methods(self):
        """StringMapStore should define all required methods."""
        from application.ports import StringMapStore

        for method_name in REQUIRED_METHODS:
            assert hasattr(StringMapStore, method_name), \
                f"StringMapStore should have method '{method_name}'"

    def test_put_method_signature(self):
        """put() should take a key and a value."""
        from application.ports.string_map_store import StringMapStore

        params = list(inspect.signature(StringMapStore.put).parameters.keys())
        assert params == ["self", "key", "value"]

    def test_replace_method_signature(self):
        """replace() should take the new mapping."""
        from application.ports.string_map_store import StringMapStore

        params = list(inspect.signature(StringMapStore.replace).parameters.keys())
        assert params == ["self", "mapping"]


class TestImplementationsMatchProtocol:
    """Adapters must expose every Protocol method with the same parameters."""

    @pytest.mark.parametrize("implementation", [
        "infrastructure.memory.InMemoryStringMapStore",
        "tests.fakes.FakeStringMapStore",
    ])
    def test_methods_match(self, implementation):
        import importlib
        from application.ports import StringMapStore

        module_name, class_name = implementation.rsplit(".", 1)
        cls = getattr(importlib.import_module(module_name), class_name)

        for method_name in REQUIRED_METHODS:
            assert callable(getattr(cls, method_name, None)), \
                f"{class_name} should implement '{method_name}'"
            expected = list(inspect.signature(getattr(StringMapStore, method_name)).parameters)
            actual = list(inspect.signature(getattr(cls, method_name)).parameters)
            assert actual == expected, f"{class_name}.{method_name} parameters differ"
