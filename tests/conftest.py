"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring a PostgreSQL database (deselect with '-m \"not db\"')"
    )


@pytest.fixture(autouse=True)
def clear_cached_config():
    """Reset lru_cached config/service singletons so env overrides in one test don't leak."""
    from web.backend.config import get_config
    from web.backend.dependencies import get_recommendation_service

    get_config.cache_clear()
    get_recommendation_service.cache_clear()
    yield
    get_config.cache_clear()
    get_recommendation_service.cache_clear()
