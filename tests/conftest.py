"""Pytest configuration and shared fixtures for all tests."""

from datetime import date
from pathlib import Path

import pytest

from lifecycle_timeline.catalog import load_catalog, load_site_mapping
from lifecycle_timeline.models import SupportWindow

TEST_DATA = Path(__file__).parent / "test-data"


@pytest.fixture(autouse=True)
def disable_sentry_for_tests(monkeypatch):
    """Disable Sentry telemetry for all tests."""
    monkeypatch.setenv("TELEMETRY", "false")


@pytest.fixture
def window():
    """The default 2025-01-01 .. 2031-12-31 timeline window."""
    return SupportWindow(date(2025, 1, 1), date(2031, 12, 31))


@pytest.fixture
def catalog_path():
    return str(TEST_DATA / "data.json")


@pytest.fixture
def site_mapping_path():
    return str(TEST_DATA / "site-mapping.json")


@pytest.fixture
def catalog(catalog_path):
    return load_catalog(catalog_path)


@pytest.fixture
def site_mapping(site_mapping_path):
    return load_site_mapping(site_mapping_path)
