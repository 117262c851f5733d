"""Prefix and suffix handling for sequences.

Matching is element-wise, so the affix and the sequence need not share a type:
``strip_prefix(["a"], "abc")`` matches just like ``strip_prefix("a", "abc")``.
Results are slices of the input sequence and keep its type.

The ``strip_*`` functions return ``None`` when the affix is absent; the
``drop_*`` functions return the sequence unchanged instead. Neither strips
repeatedly::

    >>> drop_prefix("a", "aab")
    'ab'
    >>> drop_prefix("a", drop_prefix("a", "aab"))
    'b'
"""

import typing as tp

from safeseq.core.types import T

__all__ = [
    "strip_prefix",
    "strip_suffix",
    "drop_prefix",
    "drop_suffix",
    "is_prefix_of",
    "is_suffix_of",
    "is_infix_of",
    "is_subsequence_of",
]


def is_prefix_of(prefix: tp.Sequence[T], seq: tp.Sequence[T]) -> bool:
    """Return True if ``seq`` starts with ``prefix``."""
    if len(prefix) > len(seq):
        return False
    return all(a == b for a, b in zip(prefix, seq))


def is_suffix_of(suffix: tp.Sequence[T], seq: tp.Sequence[T]) -> bool:
    """Return True if ``seq`` ends with ``suffix``."""
    return is_prefix_of(suffix[::-1], seq[::-1])


def is_infix_of(needle: tp.Sequence[T], seq: tp.Sequence[T]) -> bool:
    """Return True if ``needle`` occurs contiguously somewhere in ``seq``."""
    width = len(needle)
    return any(
        is_prefix_of(needle, seq[start : start + width])
        for start in range(len(seq) - width + 1)
    )


def is_subsequence_of(needle: tp.Iterable[T], seq: tp.Iterable[T]) -> bool:
    """Return True if the elements of ``needle`` appear in ``seq`` in order.

    The elements need not be contiguous.
    """
    remaining = iter(seq)
    return all(any(x == y for y in remaining) for x in needle)


def strip_prefix(
    prefix: tp.Sequence[T], seq: tp.Sequence[T]
) -> tp.Optional[tp.Sequence[T]]:
    """Remove ``prefix`` from the front of ``seq``.

    Returns:
        The rest of ``seq``, or None if ``seq`` does not start with ``prefix``.
    """
    if not is_prefix_of(prefix, seq):
        return None
    return seq[len(prefix) :]


def strip_suffix(
    suffix: tp.Sequence[T], seq: tp.Sequence[T]
) -> tp.Optional[tp.Sequence[T]]:
    """Remove ``suffix`` from the end of ``seq``.

    Works as a prefix strip on the reversed sequences, reversed back.

    Example:
        >>> strip_suffix("ing", "running")
        'runn'
        >>> strip_suffix("xyz", "running") is None
        True
    """
    stripped = strip_prefix(suffix[::-1], seq[::-1])
    if stripped is None:
        return None
    return stripped[::-1]


def drop_prefix(prefix: tp.Sequence[T], seq: tp.Sequence[T]) -> tp.Sequence[T]:
    """Drop ``prefix`` if present, otherwise return ``seq`` unchanged."""
    stripped = strip_prefix(prefix, seq)
    return seq if stripped is None else stripped


def drop_suffix(suffix: tp.Sequence[T], seq: tp.Sequence[T]) -> tp.Sequence[T]:
    """Drop ``suffix`` if present, otherwise return ``seq`` unchanged."""
    stripped = strip_suffix(suffix, seq)
    return seq if stripped is None else stripped
