# Freegroup: Free Group Word Canonicalizer
# Licensed under the Apache License, Version 2.0

"""One-step cancellation and its reflexive-transitive closure.

``Step(w1, w2)`` holds when ``w1 = p ++ [(x, b), (x, not b)] ++ q`` and
``w2 = p ++ q``. ``Red`` is the reflexive-transitive closure of ``Step``.

A step only ever looks at two adjacent letters, so it commutes with adding
a common prefix or suffix, and it shortens the word by exactly two letters.
Every word therefore reaches only finitely many words, all of them
sublists of the original.
"""

from typing import Dict, List, Tuple

from freegroup.letter import Word, as_word, concat


def step_positions(word: Word) -> List[int]:
    """Indices ``i`` where ``word[i]`` and ``word[i + 1]`` cancel.

    Args:
        word (Word): Any word.

    Returns:
        List[int]: Ascending positions; empty for words shorter than 2.
    """
    word = as_word(word)
    return [i for i in range(len(word) - 1) if word[i].cancels(word[i + 1])]


def step_at(word: Word, i: int) -> Word:
    """Cancels the adjacent pair starting at position ``i``.

    Args:
        word (Word): Source word.
        i (int): Index of the first letter of the pair.

    Returns:
        Word: ``word`` with letters ``i`` and ``i + 1`` removed.

    Raises:
        ValueError: If no cancelling pair starts at ``i``.
    """
    word = as_word(word)
    if not 0 <= i < len(word) - 1 or not word[i].cancels(word[i + 1]):
        raise ValueError(f"No cancelling pair at position {i} of {word!r}")
    return word[:i] + word[i + 2:]


def one_step_reducts(word: Word) -> List[Tuple[int, Word]]:
    """All ``(i, w')`` with ``Step(word, w')`` by cancelling at ``i``."""
    word = as_word(word)
    return [(i, word[:i] + word[i + 2:]) for i in step_positions(word)]


def is_step(w1: Word, w2: Word) -> bool:
    """Decides ``Step(w1, w2)``."""
    w1, w2 = as_word(w1), as_word(w2)
    if len(w1) != len(w2) + 2:
        return False
    return any(reduct == w2 for _, reduct in one_step_reducts(w1))


def is_red(w1: Word, w2: Word) -> bool:
    """Decides ``Red(w1, w2)``: can ``w1`` be cancelled down to ``w2``?

    Consumes ``w1`` from the left against a stack holding ``w2``:

    - ``Red([], L)`` iff ``L`` is empty.
    - ``Red(p :: L1, p :: L2)`` iff ``Red(L1, L2)``.
    - otherwise ``Red((x, b) :: L1, L2)`` iff ``Red(L1, (x, not b) :: L2)``.

    Linear in ``len(w1) + len(w2)``.

    Args:
        w1 (Word): Source word.
        w2 (Word): Candidate descendant.

    Returns:
        bool: Whether ``w2`` is reachable from ``w1``.
    """
    # Top of the stack is the head of the remaining target.
    stack = list(reversed(as_word(w2)))
    for letter in as_word(w1):
        if stack and stack[-1] == letter:
            stack.pop()
        else:
            stack.append(letter.inverse())
    return not stack


def red_closure(word: Word) -> List[Word]:
    """Every word reachable from ``word`` by ``Red``, longest first.

    The source word is included (reflexivity). Generators must be hashable.

    Args:
        word (Word): Source word.

    Returns:
        List[Word]: Distinct descendants ordered by decreasing length.
    """
    word = as_word(word)
    seen: Dict[Word, None] = {word: None}
    frontier = [word]
    while frontier:
        nxt = []
        for w in frontier:
            for _, reduct in one_step_reducts(w):
                if reduct not in seen:
                    seen[reduct] = None
                    nxt.append(reduct)
        frontier = nxt
    return list(seen)


def reduction_path(word: Word) -> List[Word]:
    """One explicit chain of steps from ``word`` to its normal form.

    Always cancels the leftmost pair. The first entry is ``word`` and the
    last is irreducible; consecutive entries are related by ``Step``.
    """
    word = as_word(word)
    path = [word]
    while True:
        positions = step_positions(word)
        if not positions:
            return path
        word = step_at(word, positions[0])
        path.append(word)


def red_append(prefix: Word, w1: Word, w2: Word, suffix: Word = ()) -> bool:
    """``Red(prefix ++ w1 ++ suffix, prefix ++ w2 ++ suffix)``.

    Holds whenever ``Red(w1, w2)`` does.
    """
    return is_red(concat(prefix, w1, suffix), concat(prefix, w2, suffix))
