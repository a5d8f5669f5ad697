"""
Fixture Functions - Sample operations used as test fixtures.

Each FixtureFunctions instance binds one variant: the collaborator that
forward() calls and the delay used by the two async operations. Instances
hold no mutable state, so every call is independent of the previous ones.

Usage:
    fns = FixtureFunctions(collaborator=lambda x: x * 2, delay_ms=100)
    fns.forward(5)                      # 10
    await fns.resolve_after_delay(42)   # 42, after >= 100ms
    await fns.reject_after_delay()      # raises DelayedFixtureError("rejected")
"""

from typing import Any, Callable, List

from .collaborators import deep_fn
from .errors import DelayedFixtureError, ImmediateFixtureError
from .timers import delay

FAST_DELAY_MS = 100
SLOW_DELAY_MS = 1000

EXPORTS: List[str] = [
    "forward",
    "fail",
    "resolve_after_delay",
    "reject_after_delay",
]


class FixtureFunctions:
    """The four fixture operations bound to a collaborator and a delay."""

    def __init__(self, collaborator: Callable[[Any], Any] = deep_fn, delay_ms: int = FAST_DELAY_MS):
        self.collaborator = collaborator
        self.delay_ms = delay_ms

    def forward(self, value: Any) -> Any:
        """Call the collaborator with value and return its result as is."""
        return self.collaborator(value)

    @staticmethod
    def fail() -> None:
        raise ImmediateFixtureError()

    async def resolve_after_delay(self, value: Any) -> Any:
        await delay(self.delay_ms)
        return value

    async def reject_after_delay(self) -> None:
        await delay(self.delay_ms)
        raise DelayedFixtureError()

    def __repr__(self) -> str:
        return f"FixtureFunctions(collaborator={self.collaborator!r}, delay_ms={self.delay_ms})"


_default = FixtureFunctions(collaborator=deep_fn, delay_ms=FAST_DELAY_MS)

forward = _default.forward
fail = _default.fail
resolve_after_delay = _default.resolve_after_delay
reject_after_delay = _default.reject_after_delay
