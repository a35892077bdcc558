"""
Shared pytest fixtures for the test suite.

Provides fresh registries, sessions and a loguru capture sink so tests can
inspect what the registry reported.
"""

import pytest
from loguru import logger

from masa.core import Dispatcher, Masa, Registry
from masa.precision import Precision
from masa.utils.logging import capture_messages


# =============================================================================
# Registry Fixtures
# =============================================================================

@pytest.fixture
def registry():
    """Empty double precision registry (raise mode)."""
    return Registry(Precision.DOUBLE)


@pytest.fixture
def long_registry():
    """Empty long double registry (raise mode)."""
    return Registry(Precision.LONG_DOUBLE)


@pytest.fixture
def dispatcher(registry):
    return Dispatcher(registry)


@pytest.fixture
def session():
    """Session with one registry per precision."""
    return Masa()


# =============================================================================
# Logging Fixtures
# =============================================================================

@pytest.fixture
def log_messages():
    """
    Collect loguru messages emitted during the test.

    Yields the list; the sink is removed afterwards.
    """
    messages, handler_id = capture_messages("DEBUG")
    yield messages
    logger.remove(handler_id)
