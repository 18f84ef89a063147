"""
Shared pytest fixtures for the string map tests.
"""
import pytest

from backend.core.string_map import StringMap
from backend.settings import get_settings
from tests.fakes import FakeStringMapStore


@pytest.fixture
def fake_store():
    """Fresh recording store."""
    return FakeStringMapStore()


@pytest.fixture
def string_map(fake_store):
    """StringMap backed by the recording store."""
    return StringMap(store=fake_store)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test see freshly loaded settings."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
