# Freegroup: Free Group Word Canonicalizer
# Licensed under the Apache License, Version 2.0

"""Compact text notation for words over single-character generators.

A lower-case letter is a generator, the matching upper-case letter is its
inverse: ``"abBA"`` is ``a b b^-1 a^-1``. The empty word is written ``"1"``.
"""

from typing import Iterable, Optional

from freegroup.letter import Letter, Word

IDENTITY = "1"


def parse_word(text: str, alphabet: Optional[Iterable[str]] = None) -> Word:
    """Parses ``text`` into a word.

    Whitespace is ignored; ``""`` and ``"1"`` give the empty word.

    Args:
        text (str): Word in case notation.
        alphabet (Iterable[str], optional): Allowed lower-case generators.

    Returns:
        Word: Parsed (not reduced) word.

    Raises:
        ValueError: On characters that are not letters, or generators outside
            ``alphabet``.
    """
    text = "".join(text.split())
    if text == IDENTITY:
        return ()
    allowed = None if alphabet is None else set(alphabet)
    word = []
    for ch in text:
        if not ch.isalpha():
            raise ValueError(f"Invalid character {ch!r} in word {text!r}")
        gen = ch.lower()
        if allowed is not None and gen not in allowed:
            raise ValueError(
                f"Generator {gen!r} in {text!r} not in alphabet {sorted(allowed)}"
            )
        word.append(Letter(gen, ch == gen))
    return tuple(word)


def format_word(word: Word) -> str:
    """Inverse of :func:`parse_word` for single-character generators.

    Words over other generators fall back to ``x`` / ``x^-1`` tokens joined by
    spaces.
    """
    if not word:
        return IDENTITY
    if all(isinstance(l.generator, str) and len(l.generator) == 1 for l in word):
        return "".join(l.generator if l.sign else l.generator.upper() for l in word)
    return " ".join(
        str(l.generator) if l.sign else f"{l.generator}^-1" for l in word
    )
