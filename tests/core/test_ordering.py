import functools

import numpy as np
import pytest
from safeseq.core.enums import Ordering, comparing, ordering_key


@pytest.mark.parametrize(
    "raw, expected",
    [(-5, Ordering.LT), (0, Ordering.EQ), (3, Ordering.GT), (-0.5, Ordering.LT)],
)
def test_of_normalises_numbers(raw, expected):
    assert Ordering.of(raw) is expected


def test_of_accepts_numpy_scalars():
    assert Ordering.of(np.int64(-2)) is Ordering.LT
    assert Ordering.of(np.float64(1.0)) is Ordering.GT


@pytest.mark.parametrize("raw", ["1", None, True])
def test_of_rejects_non_numbers(raw):
    with pytest.raises(TypeError):
        Ordering.of(raw)


def test_compare_and_invert():
    assert Ordering.compare(1, 2) is Ordering.LT
    assert Ordering.compare("b", "a") is Ordering.GT
    assert Ordering.compare((1, 2), (1, 2)) is Ordering.EQ
    assert Ordering.LT.invert() is Ordering.GT
    assert Ordering.EQ.invert() is Ordering.EQ


def test_ordering_members_are_integers():
    assert sorted([3, 1, 2], key=functools.cmp_to_key(Ordering.compare)) == [1, 2, 3]
    assert Ordering.GT == 1


def test_comparing_builds_comparator():
    by_len = comparing(len)
    assert by_len("aa", "b") is Ordering.GT
    assert by_len("a", "b") is Ordering.EQ
    assert sorted(["ccc", "a", "bb"], key=ordering_key(by_len)) == ["a", "bb", "ccc"]
