# Freegroup: Free Group Word Canonicalizer
# Licensed under the Apache License, Version 2.0

import itertools
import unittest

import numpy as np

from freegroup import metric
from freegroup.free_group import FreeGroup, norm, of, one
from freegroup.metric import (
    ball_size,
    distance,
    distance_matrix,
    expected_sphere_sizes,
    sphere_sizes,
)


class TestNorm(unittest.TestCase):

    def setUp(self):
        self.F = FreeGroup(2)
        self.elements = list(self.F.elements(3))

    def test_single_norm_definition(self):
        self.assertIs(metric.norm, norm)

    def test_subadditive(self):
        for x, y in itertools.product(self.elements, repeat=2):
            self.assertLessEqual(norm(x * y), norm(x) + norm(y))

    def test_symmetric(self):
        for x in self.elements:
            self.assertEqual(norm(~x), norm(x))

    def test_zero_iff_identity(self):
        for x in self.elements:
            self.assertEqual(norm(x) == 0, x == one())

    def test_product_of_generators(self):
        self.assertEqual(norm(of('a') * of('b')), 2)
        self.assertEqual(norm(of('a') * ~of('a')), 0)


class TestDistance(unittest.TestCase):
    def setUp(self):
        self.elements = list(FreeGroup(2).elements(2))

    def test_metric_axioms(self):
        for x, y in itertools.product(self.elements, repeat=2):
            self.assertEqual(distance(x, y), distance(y, x))
            self.assertEqual(distance(x, y) == 0, x == y)
        for x, y, z in itertools.product(self.elements[:9], repeat=3):
            self.assertLessEqual(distance(x, z), distance(x, y) + distance(y, z))

    def test_left_invariant(self):
        g = of('a') * ~of('b')
        for x, y in itertools.product(self.elements, repeat=2):
            self.assertEqual(distance(g * x, g * y), distance(x, y))

    def test_distance_matrix(self):
        elements = [one(), of('a'), of('b'), of('a') * of('b')]
        d = distance_matrix(elements)
        self.assertEqual(d.shape, (4, 4))
        self.assertTrue(np.array_equal(d, d.T))
        self.assertTrue(np.all(np.diag(d) == 0))
        self.assertEqual(d[1, 2], 2)
        self.assertEqual(d[0, 3], 2)
        self.assertEqual(d[1, 3], 1)


class TestGrowth(unittest.TestCase):

    def test_counted_matches_closed_form(self):
        for rank in (1, 2, 3):
            counted = sphere_sizes(FreeGroup(rank), 4)
            expected = expected_sphere_sizes(rank, 4)
            self.assertTrue(np.array_equal(counted, expected), f"rank {rank}: {counted}")

    def test_known_values(self):
        self.assertEqual(expected_sphere_sizes(2, 3).tolist(), [1, 4, 12, 36])
        self.assertEqual(expected_sphere_sizes(0, 3).tolist(), [1, 0, 0, 0])
        self.assertEqual(ball_size(2, 2), 17)

    def test_large_radius_stays_exact(self):
        sizes = expected_sphere_sizes(2, 41)
        self.assertEqual(sizes[40], 4 * 3 ** 39)
        self.assertTrue(all(n > 0 for n in sizes))
        self.assertEqual(ball_size(2, 41), 2 * 3 ** 41 - 1)
        self.assertEqual(ball_size(3, 30), sum([1] + [6 * 5 ** (n - 1) for n in range(1, 31)]))


if __name__ == '__main__':
    unittest.main()
