"""
Factory for StringMap instances.

This module provides a factory function that wires Settings into a StringMap.
The factory pattern allows for:
- Easy testing with custom settings
- Injecting an alternative store behind the StringMapStore port
- Clear separation of configuration from the map logic

Usage:
    from backend.main import create_string_map
    from backend.settings import Settings

    # Default map (uses get_settings())
    string_map = create_string_map()

    # Test map with custom settings
    test_settings = Settings(environment="test", log_mutations=True, _env_file=None)
    string_map = create_string_map(settings=test_settings)
"""

import logging
from typing import Optional

from application.ports import StringMapStore
from backend.core.string_map import StringMap
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logging from settings.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings().
    """
    if settings is None:
        settings = get_settings()

    logging.basicConfig(level=settings.log_level_value, format=LOG_FORMAT)
    logging.getLogger().setLevel(settings.log_level_value)


def create_string_map(
    settings: Optional[Settings] = None,
    store: Optional[StringMapStore] = None,
) -> StringMap:
    """
    Create and configure a StringMap instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.
        store: Optional store for the entries. Defaults to an in-memory store.

    Returns:
        Configured StringMap instance.
    """
    if settings is None:
        settings = get_settings()

    string_map = StringMap(
        store,
        log_mutations=settings.log_mutations,
        warn_on_key_collision=settings.warn_on_key_collision,
    )

    _log_feature_flags(settings)

    return string_map


def _log_feature_flags(settings: Settings) -> None:
    """Log the status of behaviour flags."""
    if settings.log_mutations:
        logger.debug("LOG_MUTATIONS is active")

    if not settings.warn_on_key_collision:
        logger.info("WARN_ON_KEY_COLLISION is disabled")
