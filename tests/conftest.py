"""
Shared pytest fixtures for fixture-functions tests.

Provides fixtures for:
- Logging capture
- Fixture function instances with short delays
- Variant registries
- Timer handle capture on the running event loop
"""

import sys
import asyncio
import logging
from pathlib import Path
from typing import Any, List
from unittest.mock import Mock

import pytest
import pytest_asyncio

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from fixture_functions import FixtureConfig, FixtureFunctions, create_registry


# Short delay so timing tests stay fast
TEST_DELAY_MS = 20


# ============================================================================
# Logging Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def configure_test_logging(caplog):
    """Configure logging for all tests."""
    caplog.set_level(logging.DEBUG)
    return caplog


# ============================================================================
# Fixture Function Fixtures
# ============================================================================

@pytest.fixture
def doubling_collaborator() -> Mock:
    """Collaborator mock computing x * 2 and recording its calls."""
    return Mock(side_effect=lambda x: x * 2)


@pytest.fixture
def quick_functions(doubling_collaborator) -> FixtureFunctions:
    """FixtureFunctions with a short delay."""
    return FixtureFunctions(collaborator=doubling_collaborator, delay_ms=TEST_DELAY_MS)


@pytest.fixture
def test_fixture_config() -> FixtureConfig:
    """Configuration with short delays for both variants."""
    return FixtureConfig(fast_delay_ms=TEST_DELAY_MS, slow_delay_ms=TEST_DELAY_MS * 2)


@pytest.fixture
def registry(test_fixture_config):
    """Registry holding the fast and slow variants with short delays."""
    return create_registry(config=test_fixture_config)


# ============================================================================
# Event Loop Fixtures
# ============================================================================

@pytest_asyncio.fixture
async def timer_handles(monkeypatch) -> List[asyncio.TimerHandle]:
    """
    Capture every timer handle armed on the running loop.

    Usage:
        async def test_something(timer_handles):
            await delay(10)
            assert timer_handles[0].cancelled()
    """
    loop = asyncio.get_running_loop()
    original = loop.call_later
    handles: List[asyncio.TimerHandle] = []

    def recording_call_later(delay_s: float, callback, *args: Any, **kwargs: Any):
        handle = original(delay_s, callback, *args, **kwargs)
        handles.append(handle)
        return handle

    monkeypatch.setattr(loop, "call_later", recording_call_later)
    return handles
