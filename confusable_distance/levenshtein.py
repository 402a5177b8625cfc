"""Levenshtein edit distance over Unicode code points.

Based on the approach used by ``js-levenshtein``: a single working row instead
of the full matrix, common prefix/suffix elision and four columns of the longer
string per pass over the row.
"""

from __future__ import annotations

from typing import List

__all__ = ["levenshtein_distance", "min_cost"]


def min_cost(d0: int, d1: int, d2: int, bx: int, ay: int) -> int:
    """Cost of one cell of the edit-distance matrix.

    ``d1`` is the diagonal predecessor, ``d0`` and ``d2`` are the two
    orthogonal neighbours. ``bx``/``ay`` are the code points being compared.
    Equivalent to ``min(d0 + 1, d2 + 1, d1 + (bx != ay))``.
    """
    if d0 < d1 or d2 < d1:
        return d2 + 1 if d0 > d2 else d0 + 1
    return d1 if bx == ay else d1 + 1


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single code point insertions, deletions or
    substitutions needed to turn ``a`` into ``b``.

        >>> levenshtein_distance("kitten", "sitting")
        3
    """
    if a == b:
        return 0

    # Keep the working row as short as possible.
    if len(a) > len(b):
        a, b = b, a

    la = len(a)
    lb = len(b)

    while la > 0 and a[la - 1] == b[lb - 1]:
        la -= 1
        lb -= 1

    offset = 0
    while offset < la and a[offset] == b[offset]:
        offset += 1

    la -= offset
    lb -= offset

    if la == 0 or lb < 3:
        return lb

    # row[y] is the distance for a[:y + 1] against the columns of b seen so
    # far; codes[y] is the code point of a at that position.
    row: List[int] = list(range(1, la + 1))
    codes: List[int] = [ord(ch) for ch in a[offset : offset + la]]

    x = 0
    dd = 0

    while x < lb - 3:
        d0 = x
        d1 = x + 1
        d2 = x + 2
        d3 = x + 3
        bx0 = ord(b[offset + d0])
        bx1 = ord(b[offset + d1])
        bx2 = ord(b[offset + d2])
        bx3 = ord(b[offset + d3])
        x += 4
        dd = x
        for y in range(la):
            dy = row[y]
            ay = codes[y]
            d0 = min_cost(dy, d0, d1, bx0, ay)
            d1 = min_cost(d0, d1, d2, bx1, ay)
            d2 = min_cost(d1, d2, d3, bx2, ay)
            dd = min_cost(d2, d3, dd, bx3, ay)
            row[y] = dd
            d3 = d2
            d2 = d1
            d1 = d0
            d0 = dy

    # Remaining 1-3 columns when lb is not a multiple of four.
    while x < lb:
        d0 = x
        bx0 = ord(b[offset + d0])
        x += 1
        dd = x
        for y in range(la):
            dy = row[y]
            dd = min_cost(dy, d0, dd, bx0, codes[y])
            row[y] = dd
            d0 = dy

    return dd
