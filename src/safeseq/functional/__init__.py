"""Functional primitives for safeseq.

This package provides the list functions exported by :mod:`safeseq`. They
are stateless and side-effect-free and never mutate their inputs, so they can
be composed freely:

    - :mod:`~safeseq.functional.safe`: total head/last/tail/init and
      maximum/minimum variants returning ``None`` on empty input.
    - :mod:`~safeseq.functional.affixes`: prefix and suffix stripping.
    - :mod:`~safeseq.functional.text`: line and word splitting.
    - :mod:`~safeseq.functional.lists`: the general list vocabulary.
"""
