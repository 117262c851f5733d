"""General list operations under one namespace.

This module gathers the classic list vocabulary (folds, scans, sublists,
searching, zipping, set-like and ordered-list operations) so that code can
``import safeseq as L`` and find all of it in one place. Where Python already
ships an operation, the function here delegates to it.

Conventions:
    - Names that clash with Python keywords or builtins with different
      behaviour carry a trailing underscore: ``and_``, ``or_``, ``any_``,
      ``all_``, ``sum_``, ``map_``, ``filter_``, ``zip_``, ``break_``.
    - Functions that only cut a sequence (``take``, ``drop``, ``span``,
      ``group``, ``inits``, ...) return slices, so a ``str`` stays a ``str``.
      Functions that build new sequences return ``list``.
    - Functions that may run forever (``iterate``, ``repeat``, ``cycle``,
      ``unfoldr``) return iterators; combine them with ``take`` or
      ``take_while``.
    - Equality-based operations (``nub``, ``union``, ``difference``, ...)
      only need ``==``, so they work on unhashable elements and keep input
      order.
    - "By" variants take an equality predicate or a comparator (see
      :mod:`safeseq.core.enums`) instead of relying on ``==`` or ``<``.

Partial operations raise builtin exceptions: ``cycle`` of an empty input
raises ``ValueError`` and ``generic_index`` out of range raises ``IndexError``.
For total alternatives see :mod:`safeseq.functional.safe`.
"""

from collections.abc import Sequence, Sized
import functools
import itertools
import math
import operator
import typing as tp

from safeseq.core.enums import Ordering, ordering_key
from safeseq.core.types import Comparator, EqualityPredicate, KeyFunc, S, T, U
from safeseq.logger.logger import logger

__all__ = [
    # Basic functions
    "append",
    "uncons",
    "null",
    "length",
    # Transformations
    "map_",
    "reverse",
    "intersperse",
    "intercalate",
    "transpose",
    "subsequences",
    "permutations",
    # Folds
    "foldl",
    "foldr",
    "concat",
    "concat_map",
    "and_",
    "or_",
    "any_",
    "all_",
    "sum_",
    "product",
    # Scans and accumulating maps
    "scanl",
    "scanr",
    "scanl1",
    "scanr1",
    "map_accum_l",
    "map_accum_r",
    # Infinite lists and unfolding
    "iterate",
    "repeat",
    "replicate",
    "cycle",
    "unfoldr",
    # Sublists
    "take",
    "drop",
    "split_at",
    "take_while",
    "drop_while",
    "drop_while_end",
    "span",
    "break_",
    "group",
    "inits",
    "tails",
    # Searching
    "elem",
    "not_elem",
    "lookup",
    "find",
    "filter_",
    "partition",
    "elem_index",
    "elem_indices",
    "find_index",
    "find_indices",
    # Zipping
    "zip_",
    "zip_with",
    "unzip",
    # "Set" operations
    "nub",
    "delete",
    "difference",
    "union",
    "intersect",
    # Ordered lists
    "sort",
    "sort_on",
    "insert",
    # "By" operations
    "nub_by",
    "delete_by",
    "delete_firsts_by",
    "union_by",
    "intersect_by",
    "group_by",
    "sort_by",
    "insert_by",
    # Generic operations
    "generic_length",
    "generic_take",
    "generic_drop",
    "generic_split_at",
    "generic_index",
    "generic_replicate",
]


def _as_sequence(xs: tp.Iterable[T]) -> tp.Sequence[T]:
    return xs if isinstance(xs, Sequence) else list(xs)


def _count(n: tp.SupportsIndex) -> int:
    # Negative counts behave like zero
    return max(operator.index(n), 0)


# --- Basic functions ---


def append(xs: tp.Iterable[T], ys: tp.Iterable[T]) -> tp.List[T]:
    """Concatenate two iterables into a new list."""
    return [*xs, *ys]


def uncons(xs: tp.Sequence[T]) -> tp.Optional[tp.Tuple[T, tp.Sequence[T]]]:
    """Split ``xs`` into ``(head, tail)``, or return None if it is empty."""
    if len(xs) == 0:
        return None
    return xs[0], xs[1:]


def null(xs: tp.Sized) -> bool:
    """Return True if ``xs`` is empty."""
    return len(xs) == 0


def length(xs: tp.Iterable[T]) -> int:
    """Number of elements in ``xs``; consumes iterators."""
    if isinstance(xs, Sized):
        return len(xs)
    return sum(1 for _ in xs)


# --- Transformations ---


def map_(f: tp.Callable[[T], U], xs: tp.Iterable[T]) -> tp.List[U]:
    return [f(x) for x in xs]


def reverse(xs: tp.Iterable[T]) -> tp.Sequence[T]:
    """Reverse ``xs``; sequences keep their type."""
    return _as_sequence(xs)[::-1]


def intersperse(sep: T, xs: tp.Iterable[T]) -> tp.List[T]:
    """Put ``sep`` between every two elements of ``xs``.

    >>> intersperse(0, [1, 2, 3])
    [1, 0, 2, 0, 3]
    """
    result: tp.List[T] = []
    for i, x in enumerate(xs):
        if i:
            result.append(sep)
        result.append(x)
    return result


def intercalate(sep: tp.Sequence[T], xss: tp.Iterable[tp.Sequence[T]]) -> tp.Any:
    """Insert ``sep`` between the sequences of ``xss`` and flatten the result.

    A ``str`` separator joins strings and returns a ``str``; any other
    separator returns a flat ``list``.
    """
    if isinstance(sep, str):
        return sep.join(xss)
    return concat(intersperse(sep, xss))


def transpose(xss: tp.Iterable[tp.Iterable[T]]) -> tp.List[tp.List[T]]:
    """Swap rows and columns.

    Short rows are skipped rather than padded:

    >>> transpose([[10, 11], [20], [], [30, 31, 32]])
    [[10, 20, 30], [11, 31], [32]]
    """
    rows = [list(row) for row in xss]
    width = max((len(row) for row in rows), default=0)
    return [[row[i] for row in rows if i < len(row)] for i in range(width)]


def subsequences(xs: tp.Iterable[T]) -> tp.List[tp.List[T]]:
    """All subsequences of ``xs``, shortest-prefix first.

    >>> subsequences("abc")
    [[], ['a'], ['b'], ['a', 'b'], ['c'], ['a', 'c'], ['b', 'c'], ['a', 'b', 'c']]
    """
    result: tp.List[tp.List[T]] = [[]]
    for x in xs:
        result += [sub + [x] for sub in result]
    return result


def permutations(xs: tp.Iterable[T]) -> tp.List[tp.List[T]]:
    """All orderings of ``xs``, in :func:`itertools.permutations` order."""
    return [list(p) for p in itertools.permutations(xs)]


# --- Folds ---


def foldl(f: tp.Callable[[U, T], U], initial: U, xs: tp.Iterable[T]) -> U:
    """Left fold: ``f(f(f(initial, x0), x1), x2)``."""
    return functools.reduce(f, xs, initial)


def foldr(f: tp.Callable[[T, U], U], initial: U, xs: tp.Iterable[T]) -> U:
    """Right fold: ``f(x0, f(x1, f(x2, initial)))``."""
    acc = initial
    for x in reversed(_as_sequence(xs)):
        acc = f(x, acc)
    return acc


def concat(xss: tp.Iterable[tp.Iterable[T]]) -> tp.List[T]:
    return list(itertools.chain.from_iterable(xss))


def concat_map(f: tp.Callable[[T], tp.Iterable[U]], xs: tp.Iterable[T]) -> tp.List[U]:
    return [y for x in xs for y in f(x)]


def and_(xs: tp.Iterable[bool]) -> bool:
    return all(xs)


def or_(xs: tp.Iterable[bool]) -> bool:
    return any(xs)


def any_(pred: tp.Callable[[T], bool], xs: tp.Iterable[T]) -> bool:
    return any(pred(x) for x in xs)


def all_(pred: tp.Callable[[T], bool], xs: tp.Iterable[T]) -> bool:
    return all(pred(x) for x in xs)


def sum_(xs: tp.Iterable[T]) -> T:
    return sum(xs)


def product(xs: tp.Iterable[T]) -> T:
    return math.prod(xs)


# --- Scans and accumulating maps ---


def scanl(f: tp.Callable[[U, T], U], initial: U, xs: tp.Iterable[T]) -> tp.List[U]:
    """Intermediate results of ``foldl``, starting with ``initial``.

    >>> scanl(operator.add, 0, [1, 2, 3])
    [0, 1, 3, 6]
    """
    return list(itertools.accumulate(xs, f, initial=initial))


def scanl1(f: tp.Callable[[T, T], T], xs: tp.Iterable[T]) -> tp.List[T]:
    """``scanl`` seeded with the first element; empty input gives ``[]``."""
    return list(itertools.accumulate(xs, f))


def scanr(f: tp.Callable[[T, U], U], initial: U, xs: tp.Iterable[T]) -> tp.List[U]:
    """Intermediate results of ``foldr``, ending with ``initial``.

    >>> scanr(operator.add, 0, [1, 2, 3])
    [6, 5, 3, 0]
    """
    acc = [initial]
    for x in reversed(_as_sequence(xs)):
        acc.append(f(x, acc[-1]))
    return acc[::-1]


def scanr1(f: tp.Callable[[T, T], T], xs: tp.Iterable[T]) -> tp.List[T]:
    """``scanr`` seeded with the last element; empty input gives ``[]``."""
    items = _as_sequence(xs)
    if len(items) == 0:
        return []
    return scanr(f, items[-1], items[:-1])


def map_accum_l(
    f: tp.Callable[[S, T], tp.Tuple[S, U]], acc: S, xs: tp.Iterable[T]
) -> tp.Tuple[S, tp.List[U]]:
    """Map left to right while threading an accumulator.

    Args:
        f: Takes ``(acc, x)`` and returns ``(new_acc, y)``.
        acc: Initial accumulator.
        xs: Input elements.

    Returns:
        The final accumulator and the mapped list.
    """
    ys: tp.List[U] = []
    for x in xs:
        acc, y = f(acc, x)
        ys.append(y)
    return acc, ys


def map_accum_r(
    f: tp.Callable[[S, T], tp.Tuple[S, U]], acc: S, xs: tp.Iterable[T]
) -> tp.Tuple[S, tp.List[U]]:
    """Like ``map_accum_l`` but walking right to left.

    The mapped list is still returned in input order.
    """
    ys: tp.List[U] = []
    for x in reversed(_as_sequence(xs)):
        acc, y = f(acc, x)
        ys.append(y)
    ys.reverse()
    return acc, ys


# --- Infinite lists and unfolding ---


def iterate(f: tp.Callable[[T], T], x: T) -> tp.Iterator[T]:
    """Yield ``x``, ``f(x)``, ``f(f(x))``, ... forever."""
    while True:
        yield x
        x = f(x)


def repeat(x: T) -> tp.Iterator[T]:
    return itertools.repeat(x)


def replicate(n: int, x: T) -> tp.List[T]:
    """A list of ``n`` copies of ``x``; ``n <= 0`` gives ``[]``."""
    return [x] * _count(n)


def cycle(xs: tp.Iterable[T]) -> tp.Iterator[T]:
    """Repeat the elements of ``xs`` forever.

    Raises:
        ValueError: If ``xs`` is empty.
    """
    items = list(xs)
    if not items:
        logger.debug("cycle called on an empty iterable")
        raise ValueError("Cannot cycle an empty iterable.")
    return itertools.cycle(items)


def unfoldr(
    f: tp.Callable[[S], tp.Optional[tp.Tuple[T, S]]], seed: S
) -> tp.Iterator[T]:
    """Build elements from a seed until ``f`` returns None.

    >>> list(unfoldr(lambda n: None if n > 3 else (n, n + 1), 1))
    [1, 2, 3]
    """
    while True:
        step = f(seed)
        if step is None:
            return
        value, seed = step
        yield value


# --- Sublists ---


def take(n: int, xs: tp.Iterable[T]) -> tp.Sequence[T]:
    """The first ``n`` elements; iterators are consumed lazily into a list."""
    n = _count(n)
    if isinstance(xs, Sequence):
        return xs[:n]
    return list(itertools.islice(xs, n))


def drop(n: int, xs: tp.Iterable[T]) -> tp.Sequence[T]:
    return _as_sequence(xs)[_count(n) :]


def split_at(n: int, xs: tp.Iterable[T]) -> tp.Tuple[tp.Sequence[T], tp.Sequence[T]]:
    """``(take(n, xs), drop(n, xs))`` in one pass over the input."""
    items = _as_sequence(xs)
    n = _count(n)
    return items[:n], items[n:]


def _prefix_length(pred: tp.Callable[[T], bool], xs: tp.Sequence[T]) -> int:
    n = 0
    for x in xs:
        if not pred(x):
            break
        n += 1
    return n


def take_while(pred: tp.Callable[[T], bool], xs: tp.Iterable[T]) -> tp.Sequence[T]:
    """Longest prefix whose elements all satisfy ``pred``."""
    if isinstance(xs, Sequence):
        return xs[: _prefix_length(pred, xs)]
    return list(itertools.takewhile(pred, xs))


def drop_while(pred: tp.Callable[[T], bool], xs: tp.Iterable[T]) -> tp.Sequence[T]:
    items = _as_sequence(xs)
    return items[_prefix_length(pred, items) :]


def drop_while_end(pred: tp.Callable[[T], bool], xs: tp.Iterable[T]) -> tp.Sequence[T]:
    """Drop the longest suffix whose elements all satisfy ``pred``.

    >>> drop_while_end(str.isspace, "foo\\n ")
    'foo'
    """
    items = _as_sequence(xs)
    return items[: len(items) - _prefix_length(pred, items[::-1])]


def span(
    pred: tp.Callable[[T], bool], xs: tp.Iterable[T]
) -> tp.Tuple[tp.Sequence[T], tp.Sequence[T]]:
    """``(take_while(pred, xs), drop_while(pred, xs))``."""
    items = _as_sequence(xs)
    n = _prefix_length(pred, items)
    return items[:n], items[n:]


def break_(
    pred: tp.Callable[[T], bool], xs: tp.Iterable[T]
) -> tp.Tuple[tp.Sequence[T], tp.Sequence[T]]:
    """Split where ``pred`` first holds: ``span`` with the predicate negated."""
    return span(lambda x: not pred(x), xs)


def group_by(eq: EqualityPredicate, xs: tp.Iterable[T]) -> tp.List[tp.Sequence[T]]:
    """Split ``xs`` into runs of elements equal to the run's first element."""
    items = _as_sequence(xs)
    groups: tp.List[tp.Sequence[T]] = []
    start = 0
    for i in range(1, len(items) + 1):
        if i == len(items) or not eq(items[start], items[i]):
            groups.append(items[start:i])
            start = i
    return groups


def group(xs: tp.Iterable[T]) -> tp.List[tp.Sequence[T]]:
    """Split ``xs`` into runs of equal adjacent elements.

    >>> group("mississippi")
    ['m', 'i', 'ss', 'i', 'ss', 'i', 'pp', 'i']
    """
    return group_by(operator.eq, xs)


def inits(xs: tp.Iterable[T]) -> tp.List[tp.Sequence[T]]:
    """All prefixes of ``xs``, shortest first, including the empty one."""
    items = _as_sequence(xs)
    return [items[:i] for i in range(len(items) + 1)]


def tails(xs: tp.Iterable[T]) -> tp.List[tp.Sequence[T]]:
    """All suffixes of ``xs``, longest first, including the empty one."""
    items = _as_sequence(xs)
    return [items[i:] for i in range(len(items) + 1)]


# --- Searching ---


def elem(x: T, xs: tp.Iterable[T]) -> bool:
    return any(x == y for y in xs)


def not_elem(x: T, xs: tp.Iterable[T]) -> bool:
    return not elem(x, xs)


def lookup(key: T, pairs: tp.Iterable[tp.Tuple[T, U]]) -> tp.Optional[U]:
    """Value of the first ``(key, value)`` pair with a matching key, or None."""
    for k, v in pairs:
        if k == key:
            return v
    return None


def find(pred: tp.Callable[[T], bool], xs: tp.Iterable[T]) -> tp.Optional[T]:
    """First element satisfying ``pred``, or None."""
    return next((x for x in xs if pred(x)), None)


def filter_(pred: tp.Callable[[T], bool], xs: tp.Iterable[T]) -> tp.List[T]:
    return [x for x in xs if pred(x)]


def partition(
    pred: tp.Callable[[T], bool], xs: tp.Iterable[T]
) -> tp.Tuple[tp.List[T], tp.List[T]]:
    """Split ``xs`` into the elements that satisfy ``pred`` and those that don't."""
    yes: tp.List[T] = []
    no: tp.List[T] = []
    for x in xs:
        (yes if pred(x) else no).append(x)
    return yes, no


def find_indices(pred: tp.Callable[[T], bool], xs: tp.Iterable[T]) -> tp.List[int]:
    return [i for i, x in enumerate(xs) if pred(x)]


def find_index(pred: tp.Callable[[T], bool], xs: tp.Iterable[T]) -> tp.Optional[int]:
    return next((i for i, x in enumerate(xs) if pred(x)), None)


def elem_indices(x: T, xs: tp.Iterable[T]) -> tp.List[int]:
    return find_indices(lambda y: y == x, xs)


def elem_index(x: T, xs: tp.Iterable[T]) -> tp.Optional[int]:
    return find_index(lambda y: y == x, xs)


# --- Zipping ---


def zip_(*iterables: tp.Iterable[tp.Any]) -> tp.List[tp.Tuple[tp.Any, ...]]:
    """Zip any number of iterables into a list of tuples, stopping at the shortest."""
    return list(zip(*iterables))


def zip_with(f: tp.Callable[..., U], *iterables: tp.Iterable[tp.Any]) -> tp.List[U]:
    """Combine elements at the same position with ``f``.

    >>> zip_with(operator.add, [1, 2, 3], [10, 20])
    [11, 22]
    """
    return [f(*args) for args in zip(*iterables)]


def unzip(
    rows: tp.Iterable[tp.Sequence[tp.Any]], width: int = 2
) -> tp.Tuple[tp.List[tp.Any], ...]:
    """Turn a list of ``width``-tuples into ``width`` lists.

    Args:
        rows: Tuples (or other sequences) of exactly ``width`` elements.
        width: Number of columns, so that empty input still yields
            ``width`` empty lists.

    Returns:
        A tuple of ``width`` lists.

    Raises:
        ValueError: If a row does not have ``width`` elements.
    """
    columns: tp.Tuple[tp.List[tp.Any], ...] = tuple([] for _ in range(width))
    for row in rows:
        if len(row) != width:
            raise ValueError(f"Expected rows of {width} elements, got {len(row)}.")
        for column, value in zip(columns, row):
            column.append(value)
    return columns


# --- "By" operations ---


def nub_by(eq: EqualityPredicate, xs: tp.Iterable[T]) -> tp.List[T]:
    """Drop elements equal under ``eq`` to an earlier one; first occurrence wins."""
    kept: tp.List[T] = []
    for x in xs:
        if not any(eq(y, x) for y in kept):
            kept.append(x)
    return kept


def delete_by(eq: EqualityPredicate, x: T, xs: tp.Iterable[T]) -> tp.List[T]:
    """Remove the first element equal to ``x`` under ``eq``."""
    result = list(xs)
    for i, y in enumerate(result):
        if eq(x, y):
            del result[i]
            break
    return result


def delete_firsts_by(
    eq: EqualityPredicate, xs: tp.Iterable[T], ys: tp.Iterable[T]
) -> tp.List[T]:
    """Remove from ``xs`` the first match of each element of ``ys`` in turn."""
    return foldl(lambda acc, y: delete_by(eq, y, acc), list(xs), ys)


def union_by(
    eq: EqualityPredicate, xs: tp.Iterable[T], ys: tp.Iterable[T]
) -> tp.List[T]:
    """``xs`` followed by the elements of ``ys`` not already present.

    Duplicates within ``ys`` are removed; duplicates within ``xs`` are kept.
    """
    left = list(xs)
    return left + delete_firsts_by(eq, nub_by(eq, ys), left)


def intersect_by(
    eq: EqualityPredicate, xs: tp.Iterable[T], ys: tp.Iterable[T]
) -> tp.List[T]:
    """Elements of ``xs`` that have a match in ``ys``, in ``xs`` order."""
    right = list(ys)
    return [x for x in xs if any(eq(x, y) for y in right)]


def sort_by(cmp: Comparator, xs: tp.Iterable[T]) -> tp.List[T]:
    """Stable sort using a comparator."""
    return sorted(xs, key=ordering_key(cmp))


def insert_by(cmp: Comparator, x: T, xs: tp.Iterable[T]) -> tp.List[T]:
    """Insert ``x`` before the first element it does not compare greater than.

    If ``xs`` is sorted under ``cmp`` the result is too.
    """
    result = list(xs)
    for i, y in enumerate(result):
        if Ordering.of(cmp(x, y)) is not Ordering.GT:
            result.insert(i, x)
            return result
    result.append(x)
    return result


# --- "Set" operations and ordered lists ---


def nub(xs: tp.Iterable[T]) -> tp.List[T]:
    """Remove duplicates, keeping the first occurrence of each element."""
    return nub_by(operator.eq, xs)


def delete(x: T, xs: tp.Iterable[T]) -> tp.List[T]:
    return delete_by(operator.eq, x, xs)


def difference(xs: tp.Iterable[T], ys: tp.Iterable[T]) -> tp.List[T]:
    """Remove one occurrence from ``xs`` for each element of ``ys``.

    >>> difference([1, 2, 3, 2, 1], [2, 1])
    [3, 2, 1]
    """
    return delete_firsts_by(operator.eq, xs, ys)


def union(xs: tp.Iterable[T], ys: tp.Iterable[T]) -> tp.List[T]:
    return union_by(operator.eq, xs, ys)


def intersect(xs: tp.Iterable[T], ys: tp.Iterable[T]) -> tp.List[T]:
    return intersect_by(operator.eq, xs, ys)


def sort(xs: tp.Iterable[T]) -> tp.List[T]:
    return sorted(xs)


def sort_on(key: KeyFunc, xs: tp.Iterable[T]) -> tp.List[T]:
    """Stable sort by ``key``; ``key`` is evaluated once per element."""
    return sorted(xs, key=key)


def insert(x: T, xs: tp.Iterable[T]) -> tp.List[T]:
    return insert_by(Ordering.compare, x, xs)


# --- Generic operations ---
# Python ints are unbounded, so these only widen the accepted count types to
# anything implementing __index__ (numpy integers, IntEnum members, ...).


def generic_length(xs: tp.Iterable[T]) -> int:
    return length(xs)


def generic_take(n: tp.SupportsIndex, xs: tp.Iterable[T]) -> tp.Sequence[T]:
    return take(operator.index(n), xs)


def generic_drop(n: tp.SupportsIndex, xs: tp.Iterable[T]) -> tp.Sequence[T]:
    return drop(operator.index(n), xs)


def generic_split_at(
    n: tp.SupportsIndex, xs: tp.Iterable[T]
) -> tp.Tuple[tp.Sequence[T], tp.Sequence[T]]:
    return split_at(operator.index(n), xs)


def generic_replicate(n: tp.SupportsIndex, x: T) -> tp.List[T]:
    return replicate(operator.index(n), x)


def generic_index(xs: tp.Iterable[T], n: tp.SupportsIndex) -> T:
    """Element at position ``n``, counting from zero.

    Unlike ``xs[n]`` a negative ``n`` is an error rather than counting from
    the end.

    Raises:
        IndexError: If ``n`` is negative or not less than the length of ``xs``.
    """
    n = operator.index(n)
    if n < 0:
        logger.debug(f"generic_index called with negative index {n}")
        raise IndexError(f"Negative index {n}.")
    for i, x in enumerate(xs):
        if i == n:
            return x
    logger.debug(f"generic_index called with index {n} past the end")
    raise IndexError(f"Index {n} is too large.")
