# Freegroup: Free Group Word Canonicalizer
# Licensed under the Apache License, Version 2.0

"""Lightweight input validation for letters and words.

All checks use ``assert`` so they are free under ``python -O``.
Set ``VALIDATE = False`` to disable even without the -O flag.
"""

VALIDATE = True


def check_letter(letter, name: str = "letter") -> None:
    """Assert *letter* is a ``(generator, sign)`` pair with a bool sign."""
    if not VALIDATE:
        return
    assert len(letter) == 2, (
        f"{name}: expected a (generator, sign) pair, got {letter!r}"
    )
    assert isinstance(letter[1], bool), (
        f"{name}: sign must be a bool, got {type(letter[1]).__name__} "
        f"({letter!r})"
    )


def check_word(word, name: str = "word") -> None:
    """Assert *word* is a tuple of well-formed letters."""
    if not VALIDATE:
        return
    assert isinstance(word, tuple), (
        f"{name}: expected a tuple of letters, got {type(word).__name__}"
    )
    for i, letter in enumerate(word):
        check_letter(letter, name=f"{name}[{i}]")


def check_reduced(word, name: str = "word") -> None:
    """Assert *word* has no adjacent cancelling pair."""
    if not VALIDATE:
        return
    for i in range(len(word) - 1):
        assert not word[i].cancels(word[i + 1]), (
            f"{name}: letters {i} and {i + 1} cancel ({word[i]!r}, {word[i + 1]!r})"
        )
