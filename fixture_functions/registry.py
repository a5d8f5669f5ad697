"""
Variant Registry - Lookup of fixture variants by name.

The same fixture ships in two variants that differ only in their delay
constant: "fast" (100ms) and "slow" (1000ms). Each variant is registered
under its name and exposes the fixture operations listed in its exports.

Usage:
    registry = create_registry()
    variant = registry.require("slow")
    variant.export_exists("forward")               # True
    await registry.call("slow", "resolve_after_delay", 42)
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional
import logging

from .collaborators import deep_fn
from .config import FixtureConfig, FixtureConfigLoader
from .errors import DuplicateVariantError, UnknownExportError, UnknownVariantError
from .functions import EXPORTS, FixtureFunctions

logger = logging.getLogger(__name__)


@dataclass
class FixtureVariant:
    """A registered fixture variant and the names it exports."""
    name: str
    functions: FixtureFunctions
    exports: List[str] = field(default_factory=lambda: list(EXPORTS))
    registered_at: datetime = field(default_factory=datetime.now)

    @property
    def delay_ms(self) -> int:
        return self.functions.delay_ms

    def export_exists(self, key: str) -> bool:
        return key in self.exports

    def get_export(self, key: str) -> Callable[..., Any]:
        """
        Resolve an exported operation by name.

        Raises:
            UnknownExportError: If the variant does not export key
        """
        if not self.export_exists(key):
            logger.warning(f"Unknown export for fixture variant {self.name}: {key}")
            raise UnknownExportError(self.name, key)
        return getattr(self.functions, key)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "delay_ms": self.delay_ms,
            "exports": list(self.exports),
            "registered_at": self.registered_at.isoformat(),
        }


class FixtureRegistry:
    """Registry of fixture variants keyed by name."""

    def __init__(self):
        self._variants: Dict[str, FixtureVariant] = {}

    def register(self, name: str, functions: FixtureFunctions) -> FixtureVariant:
        """
        Register a variant under name.

        Raises:
            DuplicateVariantError: If name is already registered
        """
        if name in self._variants:
            raise DuplicateVariantError(name)

        variant = FixtureVariant(name=name, functions=functions)
        self._variants[name] = variant
        logger.info(f"Registered fixture variant: {name} ({functions.delay_ms}ms)")
        return variant

    def unregister(self, name: str) -> bool:
        """Remove a variant. Returns False if it was not registered."""
        if self._variants.pop(name, None) is None:
            logger.warning(f"Fixture variant not found for unregister: {name}")
            return False
        logger.info(f"Unregistered fixture variant: {name}")
        return True

    def get(self, name: str) -> Optional[FixtureVariant]:
        return self._variants.get(name)

    def require(self, name: str) -> FixtureVariant:
        """
        Get a variant by name.

        Raises:
            UnknownVariantError: If name is not registered
        """
        variant = self._variants.get(name)
        if variant is None:
            logger.warning(f"Unknown fixture variant: {name}")
            raise UnknownVariantError(name, self._variants.keys())
        return variant

    def has_variant(self, name: str) -> bool:
        return name in self._variants

    def list_variants(self) -> List[Dict[str, Any]]:
        return [variant.to_dict() for variant in self._variants.values()]

    def call(self, name: str, export: str, *args: Any) -> Any:
        """
        Invoke an exported operation of a variant.

        Coroutine exports return the coroutine, which the caller awaits.
        Errors raised by the operation propagate unchanged.
        """
        operation = self.require(name).get_export(export)
        logger.debug(f"Calling {name}.{export}")
        return operation(*args)

    def __len__(self) -> int:
        return len(self._variants)

    def __contains__(self, name: str) -> bool:
        return name in self._variants


def create_registry(
    config: Optional[FixtureConfig] = None,
    collaborator: Callable[[Any], Any] = deep_fn,
) -> FixtureRegistry:
    """
    Build a registry holding the fast and slow variants.

    Args:
        config: Delay durations. Loaded from the environment when omitted.
        collaborator: Function forward() calls in both variants.
    """
    if config is None:
        config = FixtureConfigLoader.load()

    registry = FixtureRegistry()
    registry.register("fast", FixtureFunctions(collaborator, config.fast_delay_ms))
    registry.register("slow", FixtureFunctions(collaborator, config.slow_delay_ms))
    return registry
