# Freegroup: Free Group Word Canonicalizer
# Licensed under the Apache License, Version 2.0

"""Free-group elements.

An element is stored as its unique reduced word, so equality is plain
tuple comparison and no equivalence-class bookkeeping is needed. Every
operation re-reduces its result.

Provides an object-oriented wrapper with operator overloading
(``a * b``, ``~a``, ``a ** n``) and the functional surface
``mk``/``of``/``one``/``mul``/``inv``/``to_word``/``equals``/``norm``.
"""

from typing import Any, Iterable, Iterator, Optional, Sequence, Tuple, Union

from freegroup.letter import Letter, Word, as_word, inv_rev
from freegroup.notation import format_word, parse_word
from freegroup.reduce import reduce
from freegroup.validation import check_reduced, check_word


class FreeGroupElement:
    """Element of a free group, held as its canonical reduced word.

    Allows natural syntax like ``a * b``, ``~a``, ``a ** -3``.

    Attributes:
        word (Word): The reduced word. Read-only.
    """

    __slots__ = ("_word",)

    def __init__(self, word: Iterable = ()):
        """Builds the element represented by ``word``.

        Args:
            word: Letters or ``(generator, sign)`` pairs; need not be reduced.
        """
        self._word = reduce(as_word(word))

    @classmethod
    def _from_reduced(cls, word: Word) -> "FreeGroupElement":
        """Wraps an already reduced word without re-reducing it."""
        check_word(word)
        check_reduced(word)
        obj = cls.__new__(cls)
        obj._word = word
        return obj

    @property
    def word(self) -> Word:
        return self._word

    def __iter__(self) -> Iterator[Letter]:
        return iter(self._word)

    def __repr__(self):
        return f"FreeGroupElement({format_word(self._word)})"

    def __eq__(self, other):
        if not isinstance(other, FreeGroupElement):
            return NotImplemented
        return self._word == other._word

    def __hash__(self):
        return hash(self._word)

    def __mul__(self, other):
        """Group product: concatenate, then reduce."""
        if not isinstance(other, FreeGroupElement):
            return NotImplemented
        return FreeGroupElement._from_reduced(reduce(self._word + other._word))

    def __invert__(self):
        """Group inverse. The inverse of a reduced word is already reduced."""
        return FreeGroupElement._from_reduced(inv_rev(self._word))

    def __pow__(self, n: int):
        """Integer power by repeated squaring; negative powers invert."""
        if not isinstance(n, int):
            return NotImplemented
        if n < 0:
            return (~self) ** -n
        result = one()
        base = self
        while n:
            if n & 1:
                result = result * base
            base = base * base
            n >>= 1
        return result

    def is_one(self) -> bool:
        """True for the identity."""
        return not self._word

    def norm(self) -> int:
        """Length of the canonical word."""
        return len(self._word)

    def conjugate(self, other: "FreeGroupElement") -> "FreeGroupElement":
        """``other * self * other^-1``."""
        return other * self * ~other


def mk(word: Iterable) -> FreeGroupElement:
    """The canonical element for an arbitrary word."""
    return FreeGroupElement(word)


def of(generator: Any) -> FreeGroupElement:
    """The element of a single generator."""
    return FreeGroupElement._from_reduced((Letter(generator, True),))


def one() -> FreeGroupElement:
    """The identity (empty word)."""
    return FreeGroupElement._from_reduced(())


def mul(a: FreeGroupElement, b: FreeGroupElement) -> FreeGroupElement:
    return a * b


def inv(a: FreeGroupElement) -> FreeGroupElement:
    return ~a


def to_word(a: FreeGroupElement) -> Word:
    """The canonical reduced word of ``a``."""
    return a.word


def equals(a: FreeGroupElement, b: FreeGroupElement) -> bool:
    return a.word == b.word


def norm(a: FreeGroupElement) -> int:
    """Word length of ``a``; zero exactly for the identity."""
    return len(a.word)


def commutator(a: FreeGroupElement, b: FreeGroupElement) -> FreeGroupElement:
    """``a * b * a^-1 * b^-1``."""
    return a * b * ~a * ~b


class FreeGroup:
    """A free group on a fixed, finite alphabet.

    Elements are ordinary :class:`FreeGroupElement` values; the group object
    checks that words only use its generators and enumerates elements.

    Attributes:
        alphabet (Tuple): The generators, in order.
        name (str, optional): Display name.
    """

    def __init__(self, gens: Union[int, Sequence[Any]], name: Optional[str] = None):
        """Initializes the group.

        Args:
            gens: Either a rank ``n`` (generators ``a``, ``b``, ... ) or an
                explicit sequence of distinct generators.
            name (str, optional): Display name.
        """
        if isinstance(gens, int):
            assert 0 <= gens <= 26, f"rank must be in [0, 26], got {gens}"
            alphabet = tuple(chr(ord("a") + i) for i in range(gens))
        else:
            alphabet = tuple(gens)
        if len(set(alphabet)) != len(alphabet):
            raise ValueError(f"Generators must be distinct, got {alphabet!r}")
        self.alphabet = alphabet
        self.name = name

    @property
    def rank(self) -> int:
        return len(self.alphabet)

    def __repr__(self):
        if self.name is not None:
            return self.name
        return f"FreeGroup({', '.join(map(str, self.alphabet))})"

    def __eq__(self, other):
        if not isinstance(other, FreeGroup):
            return NotImplemented
        return self.alphabet == other.alphabet

    def __hash__(self):
        return hash(("FreeGroup", self.alphabet))

    def __contains__(self, element) -> bool:
        if not isinstance(element, FreeGroupElement):
            return False
        return all(l.generator in self.alphabet for l in element)

    def gens(self) -> Tuple[FreeGroupElement, ...]:
        return tuple(of(g) for g in self.alphabet)

    def identity(self) -> FreeGroupElement:
        return one()

    def of(self, generator: Any) -> FreeGroupElement:
        if generator not in self.alphabet:
            raise ValueError(f"Generator {generator!r} not in {self!r}")
        return of(generator)

    def mk(self, word: Iterable) -> FreeGroupElement:
        word = as_word(word)
        for letter in word:
            if letter.generator not in self.alphabet:
                raise ValueError(f"Generator {letter.generator!r} not in {self!r}")
        return FreeGroupElement(word)

    def parse(self, text: str) -> FreeGroupElement:
        """Element from case notation, e.g. ``"abBA"``."""
        return FreeGroupElement(parse_word(text, alphabet=self.alphabet))

    def elements(self, max_length: int) -> Iterator[FreeGroupElement]:
        """All elements of norm at most ``max_length``, shortest first.

        Extends reduced words one letter at a time, never appending the
        inverse of the last letter, so every yielded word is reduced.
        """
        letters = [Letter(g, s) for g in self.alphabet for s in (True, False)]
        layer = [()]
        for length in range(max_length + 1):
            for w in layer:
                yield FreeGroupElement._from_reduced(w)
            if length == max_length:
                break
            layer = [
                w + (l,)
                for w in layer
                for l in letters
                if not w or not w[-1].cancels(l)
            ]
