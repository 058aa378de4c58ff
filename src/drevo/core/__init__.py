"""
Core orchestration for drevo: the exception hierarchy and the mutation
service that mirrors store changes to durable storage.
"""

from drevo.core.exceptions import (
    DrevoError,
    ImportRejectedError,
    MirrorError,
    StoreLoadError,
)

__all__ = [
    "DrevoError",
    "ImportRejectedError",
    "MirrorError",
    "StoreLoadError",
]
