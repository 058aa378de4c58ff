"""
Person graph store: the id-keyed population, its favorites slots, photo
filename index and biography lookup, guarded by a reader/writer lock.
"""

from .bio import BioDirectory
from .graph_store import PersonStore
from .locking import ReadWriteLock
from .photos import PhotoIndex

__all__ = [
    "BioDirectory",
    "PersonStore",
    "PhotoIndex",
    "ReadWriteLock",
]
