# Freegroup: Free Group Word Canonicalizer
# Licensed under the Apache License, Version 2.0

"""Diamond lemma and Church-Rosser witnesses for the cancellation system.

Local confluence: two steps out of the same word either give the same
result or can be closed with one more step each. Together with the length
decrease of every step (no infinite chains) this gives the join property
for ``Red``, so every word has exactly one normal form.

The functions here compute the witnesses constructively. They are what
:mod:`tasks.verify` and the test-suite check exhaustively.
"""

from typing import Optional

from freegroup.letter import Word, as_word
from freegroup.reduce import reduce
from freegroup.reduction import is_red, one_step_reducts, step_at
from log import get_logger

logger = get_logger(__name__)


def diamond_at(word: Word, i: int, j: int) -> Optional[Word]:
    """Closes the diamond for the steps at positions ``i`` and ``j``.

    Three cases, with ``i <= j`` after sorting:

    - ``j - i <= 1``: the pairs coincide or overlap (``x x^-1 x``); both
      steps give the same word and ``None`` is returned.
    - ``j - i >= 2``: the pairs are disjoint; cancelling both gives the
      common one-step descendant.

    Args:
        word (Word): Common source.
        i (int): Position of the first step.
        j (int): Position of the second step.

    Returns:
        Optional[Word]: ``None`` when the two results are equal, otherwise
        ``w3`` with ``Step(step_at(word, i), w3)`` and
        ``Step(step_at(word, j), w3)``.

    Raises:
        ValueError: If either position does not start a cancelling pair.
    """
    word = as_word(word)
    w1 = step_at(word, i)
    w2 = step_at(word, j)
    i, j = min(i, j), max(i, j)
    if j - i <= 1:
        assert w1 == w2
        return None
    # j shifts left by two once the pair at i is gone
    return step_at(step_at(word, i), j - 2)


def diamond(word: Word, w1: Word, w2: Word) -> Optional[Word]:
    """Closes the diamond for two one-step reducts of ``word``.

    Returns:
        Optional[Word]: ``None`` when ``w1 == w2``, else the common
        one-step descendant.

    Raises:
        ValueError: If ``w1`` or ``w2`` is not a one-step reduct of ``word``.
    """
    word, w1, w2 = as_word(word), as_word(w1), as_word(w2)
    if w1 == w2:
        return None
    reducts = one_step_reducts(word)
    i = next((pos for pos, r in reducts if r == w1), None)
    j = next((pos for pos, r in reducts if r == w2), None)
    if i is None or j is None:
        raise ValueError(f"{w1!r} and {w2!r} must both be one-step reducts of {word!r}")
    return diamond_at(word, i, j)


def check_local_confluence(word: Word) -> bool:
    """Verifies the diamond for every pair of steps out of ``word``."""
    word = as_word(word)
    reducts = one_step_reducts(word)
    for a, (i, w1) in enumerate(reducts):
        for j, w2 in reducts[a + 1:]:
            w3 = diamond_at(word, i, j)
            if w3 is None:
                if w1 != w2:
                    logger.debug("Overlapping steps %d, %d of %r disagree", i, j, word)
                    return False
                continue
            if len(w3) != len(word) - 4 or not (is_red(w1, w3) and is_red(w2, w3)):
                logger.debug("Diamond for steps %d, %d of %r does not close", i, j, word)
                return False
    return True


def join(w1: Word, w2: Word) -> Optional[Word]:
    """A common ``Red``-descendant of two words, if they are equivalent.

    By Church-Rosser, equivalent words share their normal form, which is
    then returned. Inequivalent words have no common descendant.
    """
    r1, r2 = reduce(w1), reduce(w2)
    if r1 != r2:
        return None
    return r1


def equivalent(w1: Word, w2: Word) -> bool:
    """True when ``w1`` and ``w2`` represent the same free-group element."""
    return join(w1, w2) is not None
