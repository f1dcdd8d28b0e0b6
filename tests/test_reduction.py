# Freegroup: Free Group Word Canonicalizer
# Licensed under the Apache License, Version 2.0

import itertools
import unittest

from freegroup.letter import Letter, inv_rev
from freegroup.notation import parse_word as w
from freegroup.reduce import reduce
from freegroup.reduction import (
    is_red,
    is_step,
    one_step_reducts,
    red_append,
    red_closure,
    reduction_path,
    step_at,
    step_positions,
)

LETTERS = [Letter(g, s) for g in 'ab' for s in (True, False)]


def _all_words(max_length):
    for n in range(max_length + 1):
        yield from itertools.product(LETTERS, repeat=n)


class TestStep(unittest.TestCase):

    def test_positions(self):
        self.assertEqual(step_positions(w("aAbBab")), [0, 2])
        self.assertEqual(step_positions(w("aAa")), [0, 1])
        self.assertEqual(step_positions(w("abA")), [])

    def test_step_at(self):
        self.assertEqual(step_at(w("abBA"), 1), w("aA"))
        with self.assertRaises(ValueError):
            step_at(w("abBA"), 0)
        with self.assertRaises(ValueError):
            step_at(w("abBA"), 3)

    def test_never_on_short_words(self):
        for word in _all_words(1):
            self.assertEqual(one_step_reducts(word), [])
            for other in _all_words(1):
                self.assertFalse(is_step(word, other))

    def test_shortens_by_two(self):
        for word in _all_words(6):
            for _, reduct in one_step_reducts(word):
                self.assertEqual(len(reduct), len(word) - 2)
                self.assertTrue(is_step(word, reduct))

    def test_is_step(self):
        self.assertTrue(is_step(w("abBA"), w("aA")))
        self.assertFalse(is_step(w("abBA"), w("1")))
        self.assertFalse(is_step(w("aa"), w("1")))

    def test_prefix_suffix_locality(self):
        """w ++ L1 Step w ++ L2 iff L1 Step L2, and symmetrically."""
        words = list(_all_words(4))
        context = w("bA")
        for l1 in words:
            for l2 in words:
                if len(l1) != len(l2) + 2:
                    continue
                expected = is_step(l1, l2)
                self.assertEqual(is_step(context + l1, context + l2), expected)
                self.assertEqual(is_step(l1 + context, l2 + context), expected)


class TestRed(unittest.TestCase):

    def test_reflexive(self):
        for word in _all_words(4):
            self.assertTrue(is_red(word, word))

    def test_examples(self):
        self.assertTrue(is_red(w("abBA"), w("1")))
        self.assertTrue(is_red(w("abBA"), w("aA")))
        self.assertTrue(is_red(w("aAa"), w("a")))
        self.assertFalse(is_red(w("aa"), w("1")))
        self.assertFalse(is_red(w("1"), w("a")))
        self.assertFalse(is_red(w("ab"), w("ba")))

    def test_agrees_with_closure(self):
        """The linear decision procedure matches brute-force reachability."""
        words = list(_all_words(4))
        for source in words:
            reachable = set(red_closure(source))
            for target in words:
                if len(target) > len(source):
                    continue
                self.assertEqual(is_red(source, target), target in reachable,
                                 f"is_red({source}, {target})")

    def test_transitive(self):
        for source in _all_words(5):
            closure = red_closure(source)
            for mid in closure:
                for target in red_closure(mid):
                    self.assertTrue(is_red(source, target))

    def test_monotone_under_concatenation(self):
        prefix, suffix = w("Ba"), w("ab")
        for source in _all_words(4):
            for target in red_closure(source):
                self.assertTrue(red_append(prefix, source, target))
                self.assertTrue(red_append((), source, target, suffix))

    def test_append_nil_duality(self):
        """Red(w1 ++ w2, []) iff w1 and invRev(w2) share a normal form."""
        words = list(_all_words(4))
        for w1 in words:
            for w2 in words:
                self.assertEqual(is_red(w1 + w2, ()),
                                 reduce(w1) == inv_rev(reduce(w2)))
                if is_red(w1 + w2, ()):
                    self.assertTrue(is_red(w1, inv_rev(reduce(w2))))

    def test_closure_is_sublists_longest_first(self):
        closure = red_closure(w("aAbB"))
        self.assertEqual(closure[0], w("aAbB"))
        self.assertEqual(set(closure), {w("aAbB"), w("bB"), w("aA"), w("1")})
        lengths = [len(x) for x in closure]
        self.assertEqual(lengths, sorted(lengths, reverse=True))

    def test_reduction_path(self):
        for word in _all_words(6):
            path = reduction_path(word)
            self.assertEqual(path[0], word)
            self.assertEqual(path[-1], reduce(word))
            for before, after in zip(path, path[1:]):
                self.assertTrue(is_step(before, after))


class TestPlainPairs(unittest.TestCase):
    """Every entry point accepts plain ``(generator, sign)`` tuples."""

    def setUp(self):
        self.raw = [('a', True), ('b', True), ('b', False), ('a', False)]

    def test_steps(self):
        self.assertEqual(step_positions(self.raw), [1])
        self.assertEqual(step_at(self.raw, 1), w("aA"))
        self.assertEqual(one_step_reducts(self.raw), [(1, w("aA"))])
        self.assertTrue(is_step(self.raw, [('a', True), ('a', False)]))

    def test_red(self):
        self.assertTrue(is_red(self.raw, []))
        self.assertTrue(is_red(self.raw, [('a', True), ('a', False)]))
        self.assertFalse(is_red([('a', True)], [('a', False)]))
        self.assertTrue(is_red(w("abBA"), [('a', True), ('a', False)]))

    def test_closure_and_path(self):
        self.assertEqual(set(red_closure(self.raw)), {w("abBA"), w("aA"), w("1")})
        self.assertEqual(reduction_path(self.raw), [w("abBA"), w("aA"), w("1")])


if __name__ == '__main__':
    unittest.main()
