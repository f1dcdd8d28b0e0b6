# Freegroup: Free Group Word Canonicalizer
# Licensed under the Apache License, Version 2.0

"""Canonical-form reducer.

Computes the unique irreducible word reachable from a word by repeated
cancellation. The algorithm is a right fold: scan the word from the back,
keeping a partially reduced suffix on a stack whose top is the suffix's
first letter. A letter that cancels against the top pops it, any other
letter is pushed. One linear pass, like bracket matching.
"""

from dataclasses import dataclass
from typing import Tuple

from freegroup.letter import Word, as_word, inv_rev


@dataclass(frozen=True)
class ReductionTrace:
    """Normal form together with the work done to reach it.

    Attributes:
        word (Word): The reduced word.
        cancellations (int): Number of cancelled pairs. Always satisfies
            ``len(source) - 2 * cancellations == len(word)``.
    """

    word: Word
    cancellations: int


def reduce_trace(word: Word) -> ReductionTrace:
    """Reduces ``word`` and counts the cancellations performed.

    Args:
        word (Word): Any word, possibly empty.

    Returns:
        ReductionTrace: Normal form and cancellation count.
    """
    acc = []  # acc[-1] is the head of the reduced suffix
    cancellations = 0
    for letter in reversed(as_word(word)):
        if acc and letter.cancels(acc[-1]):
            acc.pop()
            cancellations += 1
        else:
            acc.append(letter)
    acc.reverse()
    return ReductionTrace(tuple(acc), cancellations)


def reduce(word: Word) -> Word:
    """The unique reduced word equivalent to ``word``.

    Idempotent, and ``Red(w1, w2)`` implies ``reduce(w1) == reduce(w2)``.
    The empty word reduces to itself.
    """
    return reduce_trace(word).word


def is_reduced(word: Word) -> bool:
    """True when ``word`` has no adjacent cancelling pair."""
    word = as_word(word)
    return all(not word[i].cancels(word[i + 1]) for i in range(len(word) - 1))


def boundary_cancellation(u: Word, v: Word) -> Tuple[Word, Word, Word]:
    """Splits the cancellation across the seam of two reduced words.

    For reduced ``u`` and ``v`` the only cancellations in ``u ++ v`` happen
    at the seam: a suffix ``s`` of ``u`` meets its formal inverse at the
    front of ``v``.

    Args:
        u (Word): Reduced left factor.
        v (Word): Reduced right factor.

    Returns:
        Tuple[Word, Word, Word]: ``(p, s, q)`` with ``u == p ++ s``,
        ``v == inv_rev(s) ++ q`` and ``reduce(u ++ v) == p ++ q``.
    """
    u, v = as_word(u), as_word(v)
    k = 0
    while k < len(u) and k < len(v) and u[len(u) - 1 - k].cancels(v[k]):
        k += 1
    s = u[len(u) - k:]
    assert inv_rev(s) == v[:k]
    return u[:len(u) - k], s, v[k:]
