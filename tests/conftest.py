"""
Shared pytest fixtures for the amplitude_event test suite.

Provides reusable fixtures for creating Event test objects.
"""

from typing import Any, Dict, Optional

import pytest

from amplitude_event.configs.config import Config
from amplitude_event.configs.settings import get_settings
from amplitude_event.normalization.inflector import Inflector, InflectorCache
from amplitude_event.schemas.event import Event


@pytest.fixture(autouse=True)
def _reset_caches():
    """Drop cached settings and tables so env overrides never leak between tests."""
    get_settings.cache_clear()
    Config.load_known_fields.cache_clear()
    yield
    get_settings.cache_clear()
    Config.load_known_fields.cache_clear()


@pytest.fixture
def known_fields():
    """The packaged known-field table."""
    return Config.load_known_fields()


@pytest.fixture
def inflector():
    """An Inflector with its own, empty cache."""
    return Inflector(InflectorCache())


@pytest.fixture
def create_event(inflector):
    """
    Return a function that creates Event objects with sensible defaults.

    All defaults can be overridden via keyword arguments.

    Example:
        event = create_event(event_type="purchase", price="9.99")
    """

    def _create_event(
        user_id: Optional[str] = "user-1",
        event_type: Optional[str] = "Test Event",
        **kwargs: Any,
    ) -> Event:
        properties: Dict[str, Any] = {}
        if user_id is not None:
            properties["user_id"] = user_id
        if event_type is not None:
            properties["event_type"] = event_type
        properties.update(kwargs)
        return Event(properties, inflector=inflector)

    return _create_event
