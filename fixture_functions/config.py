"""
Fixture configuration.

Delay durations for the two fixture variants, validated with pydantic and
loaded from environment variables.
"""

import os
import logging

from pydantic import BaseModel, Field

from .functions import FAST_DELAY_MS, SLOW_DELAY_MS

logger = logging.getLogger(__name__)


class FixtureConfig(BaseModel):
    """Delay durations, in milliseconds, per fixture variant."""
    fast_delay_ms: int = Field(
        default=FAST_DELAY_MS,
        ge=0,
        description="Delay used by the fast variant.",
    )
    slow_delay_ms: int = Field(
        default=SLOW_DELAY_MS,
        ge=0,
        description="Delay used by the slow variant.",
    )


class FixtureConfigLoader:
    """Load fixture configuration from environment variables."""

    @staticmethod
    def load() -> FixtureConfig:
        """
        Load configuration from the environment.

        Reads FIXTURE_FAST_DELAY_MS and FIXTURE_SLOW_DELAY_MS, falling back
        to the defaults when unset.

        Raises:
            pydantic.ValidationError: If a value is not a non-negative integer
        """
        config = FixtureConfig(
            fast_delay_ms=os.getenv("FIXTURE_FAST_DELAY_MS", str(FAST_DELAY_MS)),
            slow_delay_ms=os.getenv("FIXTURE_SLOW_DELAY_MS", str(SLOW_DELAY_MS)),
        )
        logger.debug(
            f"Fixture config: fast={config.fast_delay_ms}ms slow={config.slow_delay_ms}ms"
        )
        return config
