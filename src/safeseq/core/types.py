"""Reusable type definitions for the safeseq functional modules.

This module provides the type variables and callable aliases shared by the
list functions so that signatures stay consistent across modules.

Type Aliases:
    Comparator: A two-argument comparison returning a negative number, zero
        or a positive number (an ``Ordering`` member qualifies).
    EqualityPredicate: A two-argument predicate assumed to define an
        equivalence.
    KeyFunc: A one-argument projection used for ordering or grouping.
"""

from typing import Any, Callable, TypeVar

__all__ = [
    "T",
    "U",
    "S",
    "Comparator",
    "EqualityPredicate",
    "KeyFunc",
]

T = TypeVar("T")
U = TypeVar("U")
S = TypeVar("S")

# cmp(a, b) < 0 when a sorts before b, == 0 when equal, > 0 otherwise
Comparator = Callable[[T, T], int]

# The predicate is assumed to define an equivalence
EqualityPredicate = Callable[[T, T], bool]

KeyFunc = Callable[[T], Any]
