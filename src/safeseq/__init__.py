"""List utilities with total alternatives to partial operations.

Import as::

    import safeseq as L

    L.head_maybe([])  # None
    L.strip_suffix("ing", "running")  # 'runn'
    L.lines_cr("a\\r\\nb\\n")  # ['a', 'b']
"""

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
from safeseq.functional.affixes import (
    strip_prefix,
    strip_suffix,
    drop_prefix,
    drop_suffix,
    is_prefix_of,
    is_suffix_of,
    is_infix_of,
    is_subsequence_of,
)
from safeseq.functional.text import lines, lines_cr, words, unlines, unwords
from safeseq.functional.lists import (
    append,
    uncons,
    null,
    length,
    map_,
    reverse,
    intersperse,
    intercalate,
    transpose,
    subsequences,
    permutations,
    foldl,
    foldr,
    concat,
    concat_map,
    and_,
    or_,
    any_,
    all_,
    sum_,
    product,
    scanl,
    scanr,
    scanl1,
    scanr1,
    map_accum_l,
    map_accum_r,
    iterate,
    repeat,
    replicate,
    cycle,
    unfoldr,
    take,
    drop,
    split_at,
    take_while,
    drop_while,
    drop_while_end,
    span,
    break_,
    group,
    inits,
    tails,
    elem,
    not_elem,
    lookup,
    find,
    filter_,
    partition,
    elem_index,
    elem_indices,
    find_index,
    find_indices,
    zip_,
    zip_with,
    unzip,
    nub,
    delete,
    difference,
    union,
    intersect,
    sort,
    sort_on,
    insert,
    nub_by,
    delete_by,
    delete_firsts_by,
    union_by,
    intersect_by,
    group_by,
    sort_by,
    insert_by,
    generic_length,
    generic_take,
    generic_drop,
    generic_split_at,
    generic_index,
    generic_replicate,
)

__version__ = "0.1.0"

__all__ = [
    # Orderings
    "Ordering",
    "comparing",
    # Basic functions
    "append",
    "uncons",
    "null",
    "length",
    "head_maybe",
    "last_maybe",
    "tail_maybe",
    "init_maybe",
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
    "maximum_maybe",
    "minimum_maybe",
    "maximum_by_maybe",
    "minimum_by_maybe",
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
    "strip_prefix",
    "strip_suffix",
    "drop_prefix",
    "drop_suffix",
    "group",
    "inits",
    "tails",
    "is_prefix_of",
    "is_suffix_of",
    "is_infix_of",
    "is_subsequence_of",
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
    # Strings
    "lines",
    "lines_cr",
    "words",
    "unlines",
    "unwords",
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
