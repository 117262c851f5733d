"""Enumerations used by comparison-based list functions."""

from enum import IntEnum
import functools
import numbers
import typing as tp

from safeseq.core.types import Comparator, KeyFunc


class Ordering(IntEnum):
    """Result of comparing two values.

    Members are plain integers, so any ``Comparator`` may return them and they
    work directly with :func:`functools.cmp_to_key`.
    """

    LT = -1
    EQ = 0
    GT = 1

    @classmethod
    def of(cls, result: tp.Union[int, float]) -> "Ordering":
        """Normalise a raw comparison result to an ``Ordering``.

        Args:
            result: Negative, zero or positive comparison result.

        Returns:
            The matching ``Ordering`` member.

        Raises:
            TypeError: If ``result`` is not a real number.
        """
        if isinstance(result, bool) or not isinstance(result, numbers.Real):
            raise TypeError(
                "Comparison functions must return a number, "
                f"got {type(result).__name__}."
            )
        if result < 0:
            return cls.LT
        if result > 0:
            return cls.GT
        return cls.EQ

    @classmethod
    def compare(cls, a: tp.Any, b: tp.Any) -> "Ordering":
        """Compare two values using their natural ordering."""
        if a < b:
            return cls.LT
        if b < a:
            return cls.GT
        return cls.EQ

    def invert(self) -> "Ordering":
        """Return the opposite ordering (``LT`` <-> ``GT``)."""
        return Ordering(-self.value)


def comparing(key: KeyFunc) -> Comparator:
    """Build a comparator that orders values by ``key``.

    Example:
        >>> sort_by(comparing(len), ["ccc", "a", "bb"])
        ['a', 'bb', 'ccc']
    """

    def _cmp(a: tp.Any, b: tp.Any) -> Ordering:
        return Ordering.compare(key(a), key(b))

    return _cmp


def ordering_key(cmp: Comparator) -> KeyFunc:
    """Wrap a comparator as a ``key`` for ``sorted``, ``max`` and ``min``.

    Results are passed through :meth:`Ordering.of`, so a comparator that
    returns a non-number raises ``TypeError`` instead of misordering.
    """
    return functools.cmp_to_key(lambda a, b: Ordering.of(cmp(a, b)))
