"""Core types, orderings and settings shared by the functional modules."""

from safeseq.core.config import Settings, settings
from safeseq.core.enums import Ordering, comparing, ordering_key

__all__ = [
    "Settings",
    "settings",
    "Ordering",
    "comparing",
    "ordering_key",
]
