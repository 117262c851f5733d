import logging

import pytest
from safeseq.core.enums import Ordering, comparing
from safeseq.functional.safe import (
    head_maybe,
    last_maybe,
    tail_maybe,
    init_maybe,
    maximum_maybe,
    minimum_maybe,
    maximum_by_maybe,
    minimum_by_maybe,
)
from safeseq.logger.logger import logger

_MISSING = object()


@pytest.fixture
def sequences():
    return [[], [7], [1, 2, 3], (4, 5), "", "x", "hello", range(0), range(3, 6)]


def test_head_and_last_absent_iff_empty(sequences):
    for s in sequences:
        head = head_maybe(s, default=_MISSING)
        last = last_maybe(s, default=_MISSING)
        if len(s) == 0:
            assert head is _MISSING
            assert last is _MISSING
        else:
            assert head == s[0]
            assert last == s[-1]


def test_tail_and_init_drop_one_element(sequences):
    for s in sequences:
        if len(s) == 0:
            assert tail_maybe(s) is None
            assert init_maybe(s) is None
        else:
            assert len(tail_maybe(s)) == len(s) - 1
            assert len(init_maybe(s)) == len(s) - 1
            assert tail_maybe(s) == s[1:]
            assert init_maybe(s) == s[:-1]


def test_single_element_tail_is_empty_not_absent():
    assert tail_maybe([1]) == []
    assert init_maybe([1]) == []
    assert tail_maybe("a") == ""
    assert init_maybe(("a",)) == ()
    assert tail_maybe([1]) is not None


def test_results_keep_sequence_type():
    assert tail_maybe("abc") == "bc"
    assert init_maybe((1, 2, 3)) == (1, 2)


def test_none_elements_distinguishable_with_default():
    assert head_maybe([None]) is None
    assert head_maybe([None], default=_MISSING) is None
    assert head_maybe([], default=_MISSING) is _MISSING
    assert maximum_maybe([None], key=lambda x: 0, default=_MISSING) is None


def test_inputs_not_mutated():
    data = [3, 1, 2]
    tail_maybe(data)
    init_maybe(data)
    maximum_maybe(data)
    assert data == [3, 1, 2]


def test_maximum_and_minimum():
    assert maximum_maybe([]) is None
    assert minimum_maybe([]) is None
    assert maximum_maybe([3, 1, 2]) == 3
    assert minimum_maybe([3, 1, 2]) == 1
    assert maximum_maybe("banana") == "n"
    assert maximum_maybe(iter([5, 9, 2])) == 9
    assert minimum_maybe([], default=0) == 0


def test_maximum_with_key_prefers_leftmost_on_ties():
    words = ["bb", "aa", "c", "dd"]
    assert maximum_maybe(words, key=len) == "bb"
    assert minimum_maybe(["x", "yy", "z"], key=len) == "x"


@pytest.mark.parametrize(
    "cmp",
    [
        Ordering.compare,
        lambda a, b: a - b,
        comparing(abs),
    ],
)
def test_by_variants_empty_for_any_comparator(cmp):
    assert maximum_by_maybe(cmp, []) is None
    assert minimum_by_maybe(cmp, []) is None


def test_by_variants_use_comparator():
    pairs = [(1, "a"), (3, "b"), (2, "c"), (3, "d")]
    by_first = comparing(lambda p: p[0])
    assert maximum_by_maybe(by_first, pairs) == (3, "b")
    assert minimum_by_maybe(by_first, pairs) == (1, "a")
    assert maximum_by_maybe(lambda a, b: b - a, [4, 2, 8]) == 2


def test_by_variants_reject_non_numeric_comparator():
    with pytest.raises(TypeError):
        maximum_by_maybe(lambda a, b: "greater", [1, 2])


def test_empty_fallback_is_logged(caplog, monkeypatch):
    monkeypatch.setattr(logger, "propagate", True)
    with caplog.at_level(logging.DEBUG, logger="safeseq"):
        head_maybe([])
        maximum_maybe([])
    messages = [r.getMessage() for r in caplog.records]
    assert "head called on an empty sequence, returning default" in messages
    assert "max called on an empty iterable, returning default" in messages


def test_comparator_ties_keep_leftmost_element():
    pairs = [(3, "a"), (1, "x"), (3, "b"), (1, "y")]
    by_first = comparing(lambda p: p[0])
    assert maximum_by_maybe(by_first, pairs) == (3, "a")
    assert minimum_by_maybe(by_first, pairs) == (1, "x")
