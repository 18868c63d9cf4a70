"""Shared test configuration, fixtures and pytest markers."""

import pytest

from api.router import limiter
from services.analyzers.registry import clear as clear_registry

SAMPLE_RESUME = (
    "I have 3 years experience in javascript and react development "
    "with strong communication skills. "
) * 6

SAMPLE_JD = "We need a javascript developer with react and leadership experience"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "properties: invariants that must hold for any pair of inputs"
    )


@pytest.fixture(autouse=True)
def _reset_state():
    """Fresh analyzer registry and no rate limiting for every test."""
    clear_registry()
    limiter.enabled = False
    yield
    limiter.enabled = True
    clear_registry()


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def sample_jd() -> str:
    return SAMPLE_JD
