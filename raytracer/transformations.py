"""Affine transformation matrices.

This module builds the 4x4 matrices used to place geometry in a scene:
translation, scaling, rotation about each axis, shearing and the camera
view transform, plus a helper to compose them in application order.
"""

from __future__ import annotations

import logging
import math
from functools import reduce

from raytracer.matrix import Matrix
from raytracer.tuples import Tuple

logger = logging.getLogger(__name__)


def translation(x: float, y: float, z: float) -> Matrix:
    """Translation matrix.

    Moves points by (x, y, z). Vectors (w = 0) are unaffected.
    """
    return Matrix.from_rows([
        [1, 0, 0, x],
        [0, 1, 0, y],
        [0, 0, 1, z],
        [0, 0, 0, 1],
    ])


def scaling(x: float, y: float, z: float) -> Matrix:
    """Scaling matrix with per-axis factors (x, y, z)."""
    return Matrix.from_rows([
        [x, 0, 0, 0],
        [0, y, 0, 0],
        [0, 0, z, 0],
        [0, 0, 0, 1],
    ])


def rotation_x(radians: float) -> Matrix:
    """Rotation about the x axis (left-handed: +y turns towards +z)."""
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    return Matrix.from_rows([
        [1, 0, 0, 0],
        [0, cos_r, -sin_r, 0],
        [0, sin_r, cos_r, 0],
        [0, 0, 0, 1],
    ])


def rotation_y(radians: float) -> Matrix:
    """Rotation about the y axis (+z turns towards +x)."""
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    return Matrix.from_rows([
        [cos_r, 0, sin_r, 0],
        [0, 1, 0, 0],
        [-sin_r, 0, cos_r, 0],
        [0, 0, 0, 1],
    ])


def rotation_z(radians: float) -> Matrix:
    """Rotation about the z axis (+x turns towards +y)."""
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    return Matrix.from_rows([
        [cos_r, -sin_r, 0, 0],
        [sin_r, cos_r, 0, 0],
        [0, 0, 1, 0],
        [0, 0, 0, 1],
    ])


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shearing matrix.

    Each argument moves one component in proportion to another, e.g.
    ``xy`` moves x in proportion to y.

    Args:
        xy: x in proportion to y
        xz: x in proportion to z
        yx: y in proportion to x
        yz: y in proportion to z
        zx: z in proportion to x
        zy: z in proportion to y

    Returns:
        4x4 shearing matrix
    """
    return Matrix.from_rows([
        [1, xy, xz, 0],
        [yx, 1, yz, 0],
        [zx, zy, 1, 0],
        [0, 0, 0, 1],
    ])


def view_transform(from_point: Tuple, to_point: Tuple, up: Tuple) -> Matrix:
    """Orient the world relative to an eye position.

    Args:
        from_point: Eye position (point)
        to_point: Point the eye looks at
        up: Approximate up direction (vector)

    Returns:
        4x4 matrix mapping world space to eye space
    """
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)

    orientation = Matrix.from_rows([
        [left.x, left.y, left.z, 0],
        [true_up.x, true_up.y, true_up.z, 0],
        [-forward.x, -forward.y, -forward.z, 0],
        [0, 0, 0, 1],
    ])
    return orientation * translation(-from_point.x, -from_point.y, -from_point.z)


def chain(*transforms: Matrix) -> Matrix:
    """Compose transforms listed in the order they are applied.

    ``chain(a, b, c)`` equals ``c * b * a``: ``a`` acts on a tuple first.
    """
    if not transforms:
        return Matrix.identity_of(4)

    logger.debug(f"Chaining {len(transforms)} transforms")
    return reduce(lambda composed, transform: transform * composed, transforms)
