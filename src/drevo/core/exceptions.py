class DrevoError(Exception):
    """Base exception for record store failures."""


class StoreLoadError(DrevoError):
    """Raised when the population file cannot be read."""


class ImportRejectedError(DrevoError):
    """Raised when an imported CSV yields no usable person rows."""


class MirrorError(DrevoError):
    """Raised by durable mirrors when a mutation could not be persisted."""
