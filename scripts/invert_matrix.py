#!/usr/bin/env python3
"""
Matrix Inversion

Reads a matrix as a JSON list of rows, prints its determinant and inverse,
and verifies that the product with the inverse is the identity.

Example:
    python scripts/invert_matrix.py '[[4, 7], [2, 6]]'
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

# Add parent directory to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from raytracer.errors import NonSquareMatrixError, SingularMatrixError
from raytracer.matrix import Matrix


# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
    handlers=[
        logging.StreamHandler(),
    ],
)
logger = logging.getLogger("invert")

# Exit codes
EXIT_INVALID_INPUT = 2
EXIT_NON_SQUARE = 3
EXIT_SINGULAR = 4


def format_matrix(matrix: Matrix) -> str:
    """Render a matrix as aligned rows of 5-decimal numbers."""
    return "\n".join(
        "  ".join(f"{value:10.5f}" for value in row) for row in matrix.rows()
    )


def invert(matrix_json: str, max_size: Optional[int] = None) -> Matrix:
    """Parse a JSON matrix and return its inverse.

    Args:
        matrix_json: JSON list of equally long rows of numbers
        max_size: Largest accepted matrix size for this call; the
            library default applies when None

    Returns:
        Inverse matrix

    Raises:
        ValueError: If the JSON is malformed, the rows are ragged or an
            entry is not a number
        NonSquareMatrixError: If the matrix is not square
        SingularMatrixError: If the matrix has no inverse
    """
    try:
        rows = json.loads(matrix_json)
    except json.JSONDecodeError as e:
        raise ValueError(f"invalid JSON matrix: {e}") from e

    if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
        raise ValueError("matrix must be a JSON list of rows")
    for row in rows:
        for value in row:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"matrix entries must be numbers, got {value!r}")

    matrix = Matrix.from_rows(rows)
    if max_size is not None:
        matrix.max_determinant_size = max_size

    determinant = matrix.determinant()
    logger.info(f"Determinant: {determinant:.5f}")

    inverse = matrix.inverse()
    if matrix * inverse != Matrix.identity_of(matrix.width):
        logger.warning("Product with the inverse deviates from identity beyond tolerance")

    return inverse


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main function to parse arguments and print the inverse."""
    parser = argparse.ArgumentParser(description="Invert a square matrix")
    parser.add_argument(
        "matrix",
        help="Matrix as a JSON list of rows, e.g. '[[4, 7], [2, 6]]'"
    )
    parser.add_argument(
        "--max-size", dest="max_size", type=int, default=None,
        help="Largest accepted matrix size (default: library setting)"
    )

    args = parser.parse_args(argv)

    try:
        inverse = invert(args.matrix, max_size=args.max_size)
    except NonSquareMatrixError as e:
        logger.error(f"Matrix must be square: {e}")
        return EXIT_NON_SQUARE
    except SingularMatrixError as e:
        logger.error(f"Matrix is singular: {e}")
        return EXIT_SINGULAR
    except (ValueError, TypeError) as e:
        logger.error(f"Invalid matrix: {e}")
        return EXIT_INVALID_INPUT

    print(format_matrix(inverse))
    return 0


if __name__ == "__main__":
    sys.exit(main())
