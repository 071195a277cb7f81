"""
Test Configuration
==================

Pytest configuration with fixtures for all test types.
Provides test settings, fixed render contexts and sample compat data.
"""

from typing import Any, Dict
from unittest.mock import patch

import pytest
from pydantic_settings import SettingsConfigDict

from compat_table.config.settings import Settings
from compat_table.models.schemas import RenderContext, TableLabels

from tests.data import get_sample_document


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    environment: str = "testing"
    debug: bool = True
    log_level: str = "DEBUG"
    locale: str = "en-US"

    model_config = SettingsConfigDict(env_file=".env.test")


@pytest.fixture(scope="session")
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture(autouse=True)
def override_settings(test_settings: TestSettings):
    """Override application settings for testing."""
    with patch("compat_table.config.settings.settings", test_settings):
        yield test_settings


@pytest.fixture
def render_context() -> RenderContext:
    """Render context with the standard five-browser catalog and English labels."""
    return RenderContext(
        locale="en-US",
        browsers={
            "chrome": "Chrome",
            "edge": "Edge",
            "firefox": "Firefox",
            "firefox_android": "Firefox for Android",
            "opera": "Opera",
        },
        labels=TableLabels(),
        label_column_width=30,
    )


@pytest.fixture
def two_browser_context() -> RenderContext:
    """Small localized render context for exact markup checks."""
    return RenderContext(
        locale="de",
        browsers={"chrome": "Chrome", "firefox": "Firefox"},
        labels=TableLabels(yes="Ja", no="Nein", unknown="?", basic_support="Grundlegende Unterstützung"),
        label_column_width=20,
    )


@pytest.fixture
def minimal_feature_document() -> Dict[str, Any]:
    """Feature document without sub-features."""
    return get_sample_document("minimal_feature")


@pytest.fixture
def fetch_feature_document() -> Dict[str, Any]:
    """Feature document with sub-features and shared notes."""
    return get_sample_document("fetch_feature")


@pytest.fixture
def aggregate_document() -> Dict[str, Any]:
    """Identifier document with three interface members."""
    return get_sample_document("aggregate")
