"""Matrix and tuple algebra for a 3D ray tracer.

Dense matrices with transpose, determinant, cofactor expansion and
inversion, homogeneous points and vectors, affine transform builders and
the small value types (colors, canvas, rays) that consume them.
"""

from __future__ import annotations

__version__ = "0.1.0"
