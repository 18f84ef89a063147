"""Verify all modules can be imported without errors."""
import pytest

# All tests in this module are pure import checks - mark as unit tests
pytestmark = pytest.mark.unit


def test_core_module_imports():
    """Import core backend modules to catch bad import paths."""
    import backend.cli
    import backend.main
    import backend.settings
    import backend.core.string_map


def test_layer_imports():
    """Import domain, application and infrastructure packages."""
    import application.exceptions
    import application.ports
    import domain.converters
    import domain.models
    import infrastructure.memory


def test_package_exports():
    """Packages re-export their public names."""
    from domain import StringEntry, reverse_text, to_text
    from infrastructure import InMemoryStringMapStore
    from application.ports import StringMapStore

    assert StringEntry and reverse_text and to_text
    assert InMemoryStringMapStore and StringMapStore
