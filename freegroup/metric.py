# Freegroup: Free Group Word Canonicalizer
# Licensed under the Apache License, Version 2.0

"""Word norm, word metric and growth series.

The norm of an element is the length of its reduced word. It is
subadditive (``|ab| <= |a| + |b|``), symmetric (``|a^-1| = |a|``) and
vanishes only at the identity, so ``d(a, b) = |a^-1 b|`` is a
left-invariant metric.
"""

from typing import Sequence

import numpy as np

from freegroup.free_group import FreeGroup, FreeGroupElement, norm


def distance(a: FreeGroupElement, b: FreeGroupElement) -> int:
    """Word metric ``|a^-1 b|``."""
    return norm(~a * b)


def distance_matrix(elements: Sequence[FreeGroupElement]) -> np.ndarray:
    """Pairwise word distances.

    Args:
        elements: Elements to compare.

    Returns:
        np.ndarray: Symmetric integer matrix ``[N, N]`` with zero diagonal.
    """
    n = len(elements)
    out = np.zeros((n, n), dtype=np.int64)
    for i in range(n):
        for j in range(i + 1, n):
            out[i, j] = out[j, i] = distance(elements[i], elements[j])
    return out


def sphere_sizes(group: FreeGroup, max_length: int) -> np.ndarray:
    """Counts elements of each norm ``0..max_length`` by enumeration."""
    counts = np.zeros(max_length + 1, dtype=np.int64)
    for element in group.elements(max_length):
        counts[norm(element)] += 1
    return counts


def expected_sphere_sizes(rank: int, max_length: int) -> np.ndarray:
    """Closed form of the growth series of a free group of rank ``k``.

    ``1`` element of norm 0 and ``2k (2k - 1)^(n - 1)`` of norm ``n >= 1``.
    Entries are Python ints (``dtype=object``); the counts outgrow int64
    quickly.
    """
    counts = [1] + [2 * rank * (2 * rank - 1) ** (n - 1) for n in range(1, max_length + 1)]
    return np.array(counts, dtype=object)


def ball_size(rank: int, radius: int) -> int:
    """Number of elements of norm at most ``radius``."""
    return int(expected_sphere_sizes(rank, radius).sum())
