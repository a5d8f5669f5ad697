# Fixture Functions - Sample sync/async operations used as test fixtures
from .collaborators import deep_fn
from .config import FixtureConfig, FixtureConfigLoader
from .errors import (
    DelayedFixtureError,
    DuplicateVariantError,
    FixtureError,
    ImmediateFixtureError,
    RegistryError,
    UnknownExportError,
    UnknownVariantError,
)
from .functions import (
    FAST_DELAY_MS,
    SLOW_DELAY_MS,
    FixtureFunctions,
    fail,
    forward,
    reject_after_delay,
    resolve_after_delay,
)
from .registry import FixtureRegistry, FixtureVariant, create_registry
from .timers import delay

__all__ = [
    "FixtureFunctions",
    "forward",
    "fail",
    "resolve_after_delay",
    "reject_after_delay",
    "delay",
    "deep_fn",
    "FAST_DELAY_MS",
    "SLOW_DELAY_MS",
    # Configuration
    "FixtureConfig",
    "FixtureConfigLoader",
    # Registry
    "FixtureRegistry",
    "FixtureVariant",
    "create_registry",
    # Errors
    "FixtureError",
    "ImmediateFixtureError",
    "DelayedFixtureError",
    "RegistryError",
    "DuplicateVariantError",
    "UnknownVariantError",
    "UnknownExportError",
]
