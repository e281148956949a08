"""Unit test fixtures."""

from __future__ import annotations

import pytest

from tests.fakes import make_employee, make_employer, make_run
from wpsif.core.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached; tests that set env vars need a clean read."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def employee():
    return make_employee()


@pytest.fixture
def employer():
    return make_employer()


@pytest.fixture
def run():
    return make_run()
