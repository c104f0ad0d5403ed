"""Tests for tuples module.

This module tests homogeneous points and vectors: the point/vector
discriminant, arithmetic operators, tolerance-based equality and the
vector helpers.
"""

import math
import sys
import unittest
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from raytracer.tuples import Tuple, point, vector


class TestTuple(unittest.TestCase):
    """Test tuple construction and arithmetic."""

    def test_tuple_with_w1_is_point(self):
        a = Tuple(4.3, -4.2, 3.1, 1.0)

        self.assertEqual((a.x, a.y, a.z, a.w), (4.3, -4.2, 3.1, 1.0))
        self.assertTrue(a.is_point())
        self.assertFalse(a.is_vector())

    def test_tuple_with_w0_is_vector(self):
        a = Tuple(4.3, -4.2, 3.1, 0.0)

        self.assertFalse(a.is_point())
        self.assertTrue(a.is_vector())

    def test_point_and_vector_constructors(self):
        self.assertEqual(point(4, -4, 3), Tuple(4, -4, 3, 1))
        self.assertEqual(vector(4, -4, 3), Tuple(4, -4, 3, 0))

    def test_discriminant_tolerates_rounding(self):
        self.assertTrue(Tuple(0, 0, 0, 0.99995).is_point())
        self.assertTrue(Tuple(0, 0, 0, -0.00004).is_vector())
        self.assertFalse(Tuple(0, 0, 0, 0.5).is_point())
        self.assertFalse(Tuple(0, 0, 0, 0.5).is_vector())

    def test_equality_uses_tolerance(self):
        self.assertEqual(point(1, 2, 3), point(1.0005, 2, 3))
        self.assertNotEqual(point(1, 2, 3), point(1.01, 2, 3))
        self.assertNotEqual(point(1, 2, 3), (1, 2, 3, 1))

    def test_tuples_are_immutable(self):
        a = point(1, 2, 3)

        with self.assertRaises(AttributeError):
            a.x = 5.0
        with self.assertRaises(TypeError):
            hash(a)

    def test_add(self):
        self.assertEqual(Tuple(3, -2, 5, 1) + Tuple(-2, 3, 1, 0), Tuple(1, 1, 6, 1))

    def test_subtract_points(self):
        self.assertEqual(point(3, 2, 1) - point(5, 6, 7), vector(-2, -4, -6))

    def test_subtract_vector_from_point(self):
        self.assertEqual(point(3, 2, 1) - vector(5, 6, 7), point(-2, -4, -6))

    def test_negate(self):
        self.assertEqual(-Tuple(1, -2, 3, -4), Tuple(-1, 2, -3, 4))

    def test_scalar_multiply_and_divide(self):
        a = Tuple(1, -2, 3, -4)

        self.assertEqual(a * 3.5, Tuple(3.5, -7, 10.5, -14))
        self.assertEqual(0.5 * a, Tuple(0.5, -1, 1.5, -2))
        self.assertEqual(a / 2, Tuple(0.5, -1, 1.5, -2))

    def test_iteration(self):
        self.assertEqual(list(point(1, 2, 3)), [1.0, 2.0, 3.0, 1.0])


class TestVectorHelpers(unittest.TestCase):
    """Test magnitude, normalization, dot and cross products."""

    def test_magnitude(self):
        self.assertEqual(vector(1, 0, 0).magnitude(), 1.0)
        self.assertAlmostEqual(vector(-1, -2, -3).magnitude(), math.sqrt(14))

    def test_normalize(self):
        self.assertEqual(vector(4, 0, 0).normalize(), vector(1, 0, 0))
        self.assertEqual(vector(1, 2, 3).normalize(), vector(0.26726, 0.53452, 0.80178))
        self.assertAlmostEqual(vector(1, 2, 3).normalize().magnitude(), 1.0)

    def test_normalize_zero_vector(self):
        with self.assertRaises(ZeroDivisionError):
            vector(0, 0, 0).normalize()

    def test_dot(self):
        self.assertEqual(vector(1, 2, 3).dot(vector(2, 3, 4)), 20.0)

    def test_cross(self):
        a = vector(1, 2, 3)
        b = vector(2, 3, 4)

        self.assertEqual(a.cross(b), vector(-1, 2, -1))
        self.assertEqual(b.cross(a), vector(1, -2, 1))

    def test_cross_requires_vectors(self):
        with self.assertRaises(ValueError):
            point(1, 2, 3).cross(vector(1, 0, 0))


if __name__ == "__main__":
    pytest.main([__file__])
