"""Total variants of partial list operations.

Taking the head of an empty list, or the maximum of an empty iterable, has no
sensible answer. The functions here return ``None`` in that case instead of
raising, so the caller decides what absence means.

Every function accepts a keyword-only ``default`` which replaces ``None`` as
the empty result. Pass a private sentinel when the input may itself contain
``None``::

    >>> _missing = object()
    >>> head_maybe([None], default=_missing) is _missing
    False
    >>> head_maybe([], default=_missing) is _missing
    True

Emptiness is always checked on the INPUT. ``tail_maybe([x])`` is an empty
sequence, not ``None``, so test results with ``is None`` rather than by
truthiness.

Ties:
    ``maximum_maybe`` and ``minimum_maybe`` (and their ``_by`` variants)
    return the left-most of several equal extreme elements, which is what the
    built-in :func:`max` and :func:`min` do when scanning left to right.
    Haskell's ``Data.List.maximumBy`` keeps the right-most maximum instead,
    so ``maximum_by_maybe(comparing(fst), [(3, "a"), (3, "b")])`` returns
    ``(3, "a")`` here where ``maximumBy`` would give ``(3, "b")``.
"""

import typing as tp

from safeseq.core.enums import ordering_key
from safeseq.core.types import Comparator, KeyFunc, T
from safeseq.logger.logger import logger

__all__ = [
    "head_maybe",
    "last_maybe",
    "tail_maybe",
    "init_maybe",
    "maximum_maybe",
    "minimum_maybe",
    "maximum_by_maybe",
    "minimum_by_maybe",
]


def _safe_list_call(
    fn: tp.Callable[[tp.Sequence[T]], tp.Any], seq: tp.Sequence[T], default: tp.Any
) -> tp.Any:
    if len(seq) == 0:
        logger.debug(
            f"{fn.__name__.lstrip('_')} called on an empty sequence, returning default"
        )
        return default
    return fn(seq)


def _head(seq):
    return seq[0]


def _last(seq):
    return seq[-1]


def _tail(seq):
    return seq[1:]


def _init(seq):
    return seq[:-1]


def head_maybe(
    seq: tp.Sequence[T], *, default: tp.Optional[T] = None
) -> tp.Optional[T]:
    """Return the first element of ``seq``, or ``default`` if it is empty."""
    return _safe_list_call(_head, seq, default)


def last_maybe(
    seq: tp.Sequence[T], *, default: tp.Optional[T] = None
) -> tp.Optional[T]:
    """Return the last element of ``seq``, or ``default`` if it is empty."""
    return _safe_list_call(_last, seq, default)


def tail_maybe(seq: tp.Sequence[T], *, default: tp.Any = None) -> tp.Any:
    """Return ``seq`` without its first element, or ``default`` if it is empty.

    The result has the type of ``seq`` (slicing a ``str`` gives a ``str``).
    """
    return _safe_list_call(_tail, seq, default)


def init_maybe(seq: tp.Sequence[T], *, default: tp.Any = None) -> tp.Any:
    """Return ``seq`` without its last element, or ``default`` if it is empty."""
    return _safe_list_call(_init, seq, default)


# max/min only fall back to ``default`` when the iterable is empty, so a unique
# marker keeps a caller's ``None`` elements from being mistaken for absence.
_EMPTY = object()


def _extreme(
    pick: tp.Callable[..., tp.Any],
    iterable: tp.Iterable[T],
    key: tp.Optional[KeyFunc],
    default: tp.Any,
) -> tp.Any:
    result = pick(iterable, key=key, default=_EMPTY)
    if result is _EMPTY:
        logger.debug(f"{pick.__name__} called on an empty iterable, returning default")
        return default
    return result


def maximum_maybe(
    iterable: tp.Iterable[T],
    *,
    key: tp.Optional[KeyFunc] = None,
    default: tp.Optional[T] = None,
) -> tp.Optional[T]:
    """Return the greatest element, or ``default`` for an empty iterable.

    Args:
        iterable: Any finite iterable of mutually comparable elements.
        key: Optional projection to compare by, as for :func:`max`.
        default: Value returned when ``iterable`` is empty.

    Returns:
        The left-most maximal element, or ``default``.
    """
    return _extreme(max, iterable, key, default)


def minimum_maybe(
    iterable: tp.Iterable[T],
    *,
    key: tp.Optional[KeyFunc] = None,
    default: tp.Optional[T] = None,
) -> tp.Optional[T]:
    """Return the least element, or ``default`` for an empty iterable.

    The left-most minimal element wins ties.
    """
    return _extreme(min, iterable, key, default)


def maximum_by_maybe(
    cmp: Comparator, iterable: tp.Iterable[T], *, default: tp.Optional[T] = None
) -> tp.Optional[T]:
    """Return the greatest element under ``cmp``, or ``default`` if empty.

    Args:
        cmp: Comparison function returning negative, zero or positive (an
            :class:`~safeseq.core.enums.Ordering` works). It is assumed to
            define a total ordering.
        iterable: Elements to search.
        default: Value returned when ``iterable`` is empty.

    Returns:
        The left-most maximal element, or ``default``.

    Raises:
        TypeError: If ``cmp`` returns something that is not a number.
    """
    return _extreme(max, iterable, ordering_key(cmp), default)


def minimum_by_maybe(
    cmp: Comparator, iterable: tp.Iterable[T], *, default: tp.Optional[T] = None
) -> tp.Optional[T]:
    """Return the least element under ``cmp``, or ``default`` if empty."""
    return _extreme(min, iterable, ordering_key(cmp), default)
