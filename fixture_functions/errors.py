"""
Fixture errors.

The fixture functions fail with fixed messages so callers can assert on
the exact text. Registry errors cover variant and export lookups.
"""

SOME_ERROR_MESSAGE = "some error"
REJECTED_MESSAGE = "rejected"


class FixtureError(Exception):
    """Base exception for fixture errors."""
    pass


class ImmediateFixtureError(FixtureError):
    """Raised synchronously by fail()."""

    def __init__(self, message: str = SOME_ERROR_MESSAGE):
        super().__init__(message)


class DelayedFixtureError(FixtureError):
    """Raised by reject_after_delay() once its timer has elapsed."""

    def __init__(self, message: str = REJECTED_MESSAGE):
        super().__init__(message)


class RegistryError(FixtureError):
    """Base exception for variant registry errors."""
    pass


class DuplicateVariantError(RegistryError):
    """Raised when a variant name is registered twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Variant already registered: {name}")


class UnknownVariantError(RegistryError):
    """Raised when a variant name is not registered."""

    def __init__(self, name: str, available=None):
        self.name = name
        self.available = list(available or [])
        super().__init__(f"Unknown variant: {name}. Available: {self.available}")


class UnknownExportError(RegistryError):
    """Raised when a variant does not export the requested function."""

    def __init__(self, variant: str, export: str):
        self.variant = variant
        self.export = export
        super().__init__(f"Variant {variant} has no export named {export}")
