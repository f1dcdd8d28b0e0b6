# Freegroup: Free Group Word Canonicalizer
# Licensed under the Apache License, Version 2.0

"""Letters and words over an arbitrary alphabet.

A letter is a generator paired with a sign: ``True`` for the generator
itself, ``False`` for its formal inverse. A word is a tuple of letters.
Words are immutable values; every operation here returns a new tuple.
"""

from typing import Any, Iterable, NamedTuple, Tuple

from freegroup.validation import check_letter


class Letter(NamedTuple):
    """A signed generator ``(generator, sign)``.

    Attributes:
        generator: Any value supporting ``==``.
        sign (bool): ``True`` for the generator, ``False`` for its inverse.
    """

    generator: Any
    sign: bool

    def inverse(self) -> "Letter":
        """Flips the sign."""
        return Letter(self.generator, not self.sign)

    def cancels(self, other: "Letter") -> bool:
        """True when ``self`` and ``other`` form an adjacent inverse pair."""
        return self.generator == other.generator and self.sign != other.sign

    def __repr__(self):
        return f"({self.generator!r}, {self.sign})"


Word = Tuple[Letter, ...]

EMPTY: Word = ()


def as_word(letters: Iterable) -> Word:
    """Normalises an iterable of ``(generator, sign)`` pairs into a word.

    Args:
        letters: Letters or plain 2-tuples.

    Returns:
        Word: A tuple of :class:`Letter`.
    """
    word = []
    for item in letters:
        if not isinstance(item, Letter):
            item = Letter(*item)
        check_letter(item)
        word.append(item)
    return tuple(word)


def concat(*words: Word) -> Word:
    """Concatenates words left to right."""
    out = []
    for w in words:
        out.extend(w)
    return tuple(out)


def inv_rev(word: Word) -> Word:
    """Formal inverse: reverse the word and flip every sign.

    ``inv_rev(inv_rev(w)) == w`` and ``reduce(inv_rev(w)) == inv_rev(reduce(w))``.
    """
    return tuple(letter.inverse() for letter in reversed(as_word(word)))
