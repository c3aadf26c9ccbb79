from enum import IntEnum


class Ordering(IntEnum):
    """
    Ordering policy of a `BinaryHeap`.

    ASCENDING keeps the smallest element at the root, DESCENDING the largest.
    CUSTOM delegates to a comparator ``cmp(a, b) -> int`` and treats ``a`` as
    having priority over ``b`` when ``cmp(a, b) > 0``, i.e. the same direction
    as DESCENDING: a natural-order comparator yields the largest element first.

    The integer values match the legacy mode switch (0, 1, 2).
    """
    ASCENDING = 0
    DESCENDING = 1
    CUSTOM = 2
