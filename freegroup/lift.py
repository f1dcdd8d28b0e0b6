# Freegroup: Free Group Word Canonicalizer
# Licensed under the Apache License, Version 2.0

"""Universal property of the free group.

Any map from generators into a group extends to exactly one group
homomorphism out of the free group. ``lift`` builds it by folding the
reduced word left to right in the target. ``map_generators`` and ``bind``
are the special cases landing back in a free group.
"""

from typing import Any, Callable, Optional

from freegroup.free_group import FreeGroupElement, mk, of
from freegroup.letter import Letter
from freegroup.targets import FREE_GROUP, AdditiveGroup, Group


def lift(f: Callable[[Any], Any], target: Group) -> Callable[[FreeGroupElement], Any]:
    """Extends ``f`` on generators to a homomorphism into ``target``.

    ``(x, True)`` maps to ``f(x)`` and ``(x, False)`` to ``target.inv(f(x))``;
    the images are multiplied left to right.

    Args:
        f: Generator to target element.
        target (Group): Codomain.

    Returns:
        Callable: The homomorphism. It satisfies ``hom(of(x)) == f(x)`` and
        ``hom(a * b) == target.mul(hom(a), hom(b))``.
    """
    def hom(element: FreeGroupElement) -> Any:
        acc = target.one()
        for letter in element.word:
            image = f(letter.generator)
            if not letter.sign:
                image = target.inv(image)
            acc = target.mul(acc, image)
        return acc

    return hom


def map_generators(f: Callable[[Any], Any]) -> Callable[[FreeGroupElement], FreeGroupElement]:
    """The functorial map between free groups induced by ``f`` on generators.

    Renames every letter and re-reduces. Preserves the identity, products and
    composition: ``map_generators(g)(map_generators(f)(x)) ==
    map_generators(lambda t: g(f(t)))(x)``.
    """
    def apply(element: FreeGroupElement) -> FreeGroupElement:
        return mk(Letter(f(l.generator), l.sign) for l in element.word)

    return apply


pure = of


def bind(element: FreeGroupElement,
         f: Callable[[Any], FreeGroupElement]) -> FreeGroupElement:
    """Monadic bind: substitute the element ``f(x)`` for each generator ``x``."""
    return lift(f, FREE_GROUP)(element)


def prod(element: FreeGroupElement, target: Group) -> Any:
    """Evaluates a word whose generators are elements of ``target``."""
    return lift(lambda g: g, target)(element)


def additive_sum(element: FreeGroupElement, zero: Any = 0) -> Any:
    """Additive counterpart of :func:`prod`: generators are summed."""
    return prod(element, AdditiveGroup(zero))


def to_int(element: FreeGroupElement, generator: Optional[Any] = None) -> int:
    """Exponent of an element of the rank-one free group on ``generator``.

    Raises:
        ValueError: If ``element`` uses more than one generator, or one other
            than ``generator`` when given.
    """
    gens = {l.generator for l in element.word}
    if generator is not None:
        gens.add(generator)
    if len(gens) > 1:
        raise ValueError(f"{element!r} does not lie in a rank-one free group")
    return lift(lambda g: 1, AdditiveGroup())(element)


def from_int(n: int, generator: Any) -> FreeGroupElement:
    """``generator ** n``; inverse of :func:`to_int`."""
    return of(generator) ** n
