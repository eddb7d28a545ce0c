"""Pytest configuration and fixtures."""

import os

import pytest

# Keep a developer's .env from leaking into test settings
os.environ["APP_ENV"] = "test"
os.environ["LOG_LEVEL"] = "DEBUG"


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings for every test."""
    from geo_visibility.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def brand():
    """Tracked brand with a tag."""
    from geo_visibility.schemas import BrandIdentity

    return BrandIdentity(name="Juleo", domain="juleo.club", tags=["Juleo Club"])


@pytest.fixture
def competitors():
    """Two dating-app competitors."""
    from geo_visibility.schemas import CompetitorIdentity

    return [CompetitorIdentity(name="Bumble"), CompetitorIdentity(name="Tinder")]
