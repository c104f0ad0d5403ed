"""Tests for transformations module.

This module tests the affine transform builders by applying them to
points and vectors, and cross-checks the rotation matrices against
scipy's rotation implementation.
"""

import math
import sys
import unittest
from pathlib import Path

import numpy as np
import pytest
from scipy.spatial.transform import Rotation

# Add parent directory to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from raytracer import transformations
from raytracer.matrix import Matrix
from raytracer.transformations import (
    chain,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from raytracer.tuples import point, vector

HALF_SQRT2 = math.sqrt(2) / 2


class TestTranslationScaling(unittest.TestCase):
    """Test translation and scaling."""

    def test_translation_moves_point(self):
        transform = translation(5, -3, 2)

        self.assertEqual(transform * point(-3, 4, 5), point(2, 1, 7))

    def test_inverse_translation_moves_back(self):
        inverse = translation(5, -3, 2).inverse()

        self.assertEqual(inverse * point(-3, 4, 5), point(-8, 7, 3))

    def test_translation_ignores_vectors(self):
        v = vector(-3, 4, 5)

        self.assertEqual(translation(5, -3, 2) * v, v)

    def test_scaling(self):
        transform = scaling(2, 3, 4)

        self.assertEqual(transform * point(-4, 6, 8), point(-8, 18, 32))
        self.assertEqual(transform * vector(-4, 6, 8), vector(-8, 18, 32))
        self.assertEqual(transform.inverse() * vector(-4, 6, 8), vector(-2, 2, 2))

    def test_reflection_is_negative_scaling(self):
        self.assertEqual(scaling(-1, 1, 1) * point(2, 3, 4), point(-2, 3, 4))


class TestRotationShearing(unittest.TestCase):
    """Test rotations and shearing."""

    def test_rotation_x(self):
        p = point(0, 1, 0)

        self.assertEqual(rotation_x(math.pi / 4) * p, point(0, HALF_SQRT2, HALF_SQRT2))
        self.assertEqual(rotation_x(math.pi / 2) * p, point(0, 0, 1))

    def test_inverse_rotation_x(self):
        inverse = rotation_x(math.pi / 4).inverse()

        self.assertEqual(inverse * point(0, 1, 0), point(0, HALF_SQRT2, -HALF_SQRT2))

    def test_rotation_y(self):
        p = point(0, 0, 1)

        self.assertEqual(rotation_y(math.pi / 4) * p, point(HALF_SQRT2, 0, HALF_SQRT2))
        self.assertEqual(rotation_y(math.pi / 2) * p, point(1, 0, 0))

    def test_rotation_z(self):
        p = point(0, 1, 0)

        self.assertEqual(rotation_z(math.pi / 4) * p, point(-HALF_SQRT2, HALF_SQRT2, 0))
        self.assertEqual(rotation_z(math.pi / 2) * p, point(-1, 0, 0))

    def test_rotations_match_scipy(self):
        angle = 0.7
        builders = {"x": rotation_x, "y": rotation_y, "z": rotation_z}

        for axis, builder in builders.items():
            expected = Rotation.from_euler(axis, angle).as_matrix()
            np.testing.assert_allclose(builder(angle).to_numpy()[:3, :3], expected, atol=1e-12)

    def test_rotation_is_orthogonal(self):
        rotation = rotation_z(1.1)

        self.assertEqual(rotation.inverse(), rotation.transpose())

    def test_shearing(self):
        p = point(2, 3, 4)

        self.assertEqual(shearing(1, 0, 0, 0, 0, 0) * p, point(5, 3, 4))
        self.assertEqual(shearing(0, 1, 0, 0, 0, 0) * p, point(6, 3, 4))
        self.assertEqual(shearing(0, 0, 1, 0, 0, 0) * p, point(2, 5, 4))
        self.assertEqual(shearing(0, 0, 0, 1, 0, 0) * p, point(2, 7, 4))
        self.assertEqual(shearing(0, 0, 0, 0, 1, 0) * p, point(2, 3, 6))
        self.assertEqual(shearing(0, 0, 0, 0, 0, 1) * p, point(2, 3, 7))


class TestChainingAndView(unittest.TestCase):
    """Test transform composition and the view transform."""

    def test_individual_transforms_in_sequence(self):
        p = point(1, 0, 1)
        a = rotation_x(math.pi / 2)
        b = scaling(5, 5, 5)
        c = translation(10, 5, 7)

        p2 = a * p
        self.assertEqual(p2, point(1, -1, 0))
        p3 = b * p2
        self.assertEqual(p3, point(5, -5, 0))
        self.assertEqual(c * p3, point(15, 0, 7))

    def test_chain_applies_in_reverse_product_order(self):
        a = rotation_x(math.pi / 2)
        b = scaling(5, 5, 5)
        c = translation(10, 5, 7)

        self.assertEqual(chain(a, b, c), c * b * a)
        self.assertEqual(chain(a, b, c) * point(1, 0, 1), point(15, 0, 7))

    def test_chain_without_transforms_is_identity(self):
        self.assertEqual(chain(), Matrix.identity_of(4))

    def test_chain_logs(self):
        with self.assertLogs(transformations.logger, level="DEBUG") as captured:
            chain(translation(1, 2, 3), scaling(2, 2, 2))

        self.assertIn("Chaining 2 transforms", captured.output[0])

    def test_view_transform_default_orientation(self):
        transform = view_transform(point(0, 0, 0), point(0, 0, -1), vector(0, 1, 0))

        self.assertEqual(transform, Matrix.identity_of(4))

    def test_view_transform_looking_positive_z(self):
        transform = view_transform(point(0, 0, 0), point(0, 0, 1), vector(0, 1, 0))

        self.assertEqual(transform, scaling(-1, 1, -1))

    def test_view_transform_moves_world(self):
        transform = view_transform(point(0, 0, 8), point(0, 0, 0), vector(0, 1, 0))

        self.assertEqual(transform, translation(0, 0, -8))

    def test_arbitrary_view_transform(self):
        transform = view_transform(point(1, 3, 2), point(4, -2, 8), vector(1, 1, 0))

        self.assertEqual(
            transform,
            Matrix.from_rows([
                [-0.50709, 0.50709, 0.67612, -2.36643],
                [0.76772, 0.60609, 0.12122, -2.82843],
                [-0.35857, 0.59761, -0.71714, 0.00000],
                [0.00000, 0.00000, 0.00000, 1.00000],
            ]),
        )


if __name__ == "__main__":
    pytest.main([__file__])
