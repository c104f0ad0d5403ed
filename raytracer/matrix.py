"""Dense matrices and the cofactor-expansion algebra kernel.

This module implements the matrix type used to build and apply affine
transforms: construction, entrywise arithmetic, products with matrices
and tuples, transpose, submatrix/minor/cofactor, determinant and
inversion through the adjugate.

Storage is a flat row-major float64 array. ``width`` is the number of
rows, ``height`` the number of columns, and entry ``(row, col)`` lives at
``col + row * height``.
"""

from __future__ import annotations

import logging
import numbers
from typing import Iterable, List, Optional, Sequence, Union

import numpy as np

from raytracer.errors import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    MatrixTooLargeError,
    NonSquareMatrixError,
    SingularMatrixError,
)
from raytracer.floats import EPSILON, ROUNDING_PLACES, round_half_away
from raytracer.tuples import Tuple

logger = logging.getLogger(__name__)


class Matrix:
    """Dense rectangular matrix of floats.

    ``max_determinant_size`` bounds the size accepted by ``determinant``.
    Assigning it on the class changes the default for every matrix in the
    process; assigning it on an instance applies to that matrix and the
    submatrices taken from it.
    """

    # Cofactor expansion is exponential in the matrix size; None disables the guard
    max_determinant_size: Optional[int] = 4

    def __init__(self, width: int, height: int, data: Iterable[float]):
        """Initialize a matrix from explicit row-major data.

        Args:
            width: Number of rows
            height: Number of columns
            data: ``width * height`` entries, row by row

        Raises:
            DimensionMismatchError: If a dimension is not positive or the
                data length does not match ``width * height``
        """
        if width < 1 or height < 1:
            raise DimensionMismatchError(f"matrix dimensions must be positive, got {width}x{height}")

        data = np.array(list(data), dtype=np.float64)
        if data.ndim != 1 or data.size != width * height:
            raise DimensionMismatchError(
                f"expected {width * height} entries for a {width}x{height} matrix, got shape {data.shape}"
            )

        self.width = width
        self.height = height
        self.data = data

    @classmethod
    def zero(cls, width: int, height: int) -> Matrix:
        """Create a matrix with every entry set to 0."""
        return cls.from_numpy(np.zeros((width, height)))

    @classmethod
    def identity_of(cls, size: int) -> Matrix:
        """Create a ``size`` x ``size`` identity matrix."""
        return cls.from_numpy(np.eye(size))

    def identity(self) -> Matrix:
        """Identity-patterned matrix with the same shape as this one."""
        return Matrix.from_numpy(np.eye(self.width, self.height))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Create a matrix from a list of equally long rows.

        Raises:
            DimensionMismatchError: If the rows are empty or ragged
        """
        if not rows or not rows[0]:
            raise DimensionMismatchError("cannot build a matrix from empty rows")

        n_cols = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != n_cols:
                raise DimensionMismatchError(f"row {i} has {len(row)} entries, expected {n_cols}")

        return cls(len(rows), n_cols, [value for row in rows for value in row])

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> Matrix:
        """Create a matrix from a 2D numpy array."""
        array = np.asarray(array, dtype=np.float64)
        if array.ndim != 2:
            raise DimensionMismatchError(f"expected a 2D array, got shape {array.shape}")
        return cls(array.shape[0], array.shape[1], array.ravel())

    def rows(self) -> List[List[float]]:
        return self.to_numpy().tolist()

    def to_numpy(self) -> np.ndarray:
        """Copy the entries into a ``width`` x ``height`` numpy array."""
        return self.data.reshape(self.width, self.height).copy()

    def is_square(self) -> bool:
        return self.width == self.height

    # ------------------------------------------------------------------
    # Indexed access

    def _check_index(self, row: int, col: int) -> None:
        if not (0 <= row < self.width and 0 <= col < self.height):
            raise IndexOutOfRangeError(
                f"index ({row}, {col}) out of bounds for matrix of size ({self.width}, {self.height})"
            )

    def _offset(self, row: int, col: int) -> int:
        self._check_index(row, col)
        return col + row * self.height

    def __getitem__(self, index: tuple) -> float:
        row, col = index
        return float(self.data[self._offset(row, col)])

    def __setitem__(self, index: tuple, value: float) -> None:
        row, col = index
        self.data[self._offset(row, col)] = float(value)

    # ------------------------------------------------------------------
    # Equality and representation

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.width != other.width or self.height != other.height:
            return False
        return bool(np.all(np.abs(self.data - other.data) <= EPSILON))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({self.width}, {self.height}, {self.data.tolist()!r})"

    # ------------------------------------------------------------------
    # Arithmetic

    def _check_same_shape(self, other: Matrix, operation: str) -> None:
        if self.width != other.width or self.height != other.height:
            raise DimensionMismatchError(
                f"cannot {operation} matrices of different dimensions: "
                f"{self.width}x{self.height} and {other.width}x{other.height}"
            )

    def add(self, other: Matrix) -> Matrix:
        self._check_same_shape(other, "add")
        return Matrix(self.width, self.height, self.data + other.data)

    def subtract(self, other: Matrix) -> Matrix:
        self._check_same_shape(other, "subtract")
        return Matrix(self.width, self.height, self.data - other.data)

    def scalar_multiply(self, scalar: float) -> Matrix:
        return Matrix(self.width, self.height, self.data * scalar)

    def multiply(self, other: Matrix) -> Matrix:
        """Matrix product, each entry rounded to 5 decimal places.

        Args:
            other: Right-hand matrix; its row count must equal this
                matrix's column count

        Returns:
            ``self.width`` x ``other.height`` matrix

        Raises:
            DimensionMismatchError: If the inner dimensions differ
        """
        if self.height != other.width:
            raise DimensionMismatchError(
                f"number of columns in the first matrix ({self.height}) should be equal "
                f"to number of rows in the second matrix ({other.width})"
            )

        product = self.to_numpy() @ other.to_numpy()
        return Matrix.from_numpy(round_half_away(product, ROUNDING_PLACES))

    def multiply_tuple(self, other: Tuple) -> Tuple:
        """Apply this matrix to a homogeneous tuple.

        Raises:
            DimensionMismatchError: If the matrix is smaller than 4x4 or
                does not have 4 columns
        """
        if self.height != 4 or self.width < 4:
            raise DimensionMismatchError(
                f"cannot multiply a {self.width}x{self.height} matrix with a 4-component tuple"
            )

        column = Matrix(4, 1, [other.x, other.y, other.z, other.w])
        result = self.multiply(column)
        return Tuple(result[0, 0], result[1, 0], result[2, 0], result[3, 0])
    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Union[Matrix, Tuple, float]) -> Union[Matrix, Tuple]:
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, Tuple):
            return self.multiply_tuple(other)
        if isinstance(other, numbers.Real):
            return self.scalar_multiply(other)
        return NotImplemented

    def __rmul__(self, other: float) -> Matrix:
        if isinstance(other, numbers.Real):
            return self.scalar_multiply(other)
        return NotImplemented

    def __matmul__(self, other: Union[Matrix, Tuple]) -> Union[Matrix, Tuple]:
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, Tuple):
            return self.multiply_tuple(other)
        return NotImplemented

    # ------------------------------------------------------------------
    # Algebra kernel

    def transpose(self) -> Matrix:
        """Swap rows and columns.

        A non-square ``w`` x ``h`` matrix becomes ``h`` x ``w``.
        """
        return Matrix.from_numpy(self.to_numpy().T)

    def _check_square(self, operation: str) -> None:
        if not self.is_square():
            raise NonSquareMatrixError(
                f"cannot calculate {operation} for non-square matrix {self.width}x{self.height}"
            )

    def submatrix(self, row: int, col: int) -> Matrix:
        """Copy of this matrix with ``row`` and ``col`` removed.

        Raises:
            IndexOutOfRangeError: If ``row`` or ``col`` is out of bounds
            DimensionMismatchError: If the matrix has a single row or column
        """
        self._check_index(row, col)
        if self.width < 2 or self.height < 2:
            raise DimensionMismatchError(
                f"cannot take a submatrix of a {self.width}x{self.height} matrix"
            )

        submatrix = Matrix.from_numpy(np.delete(np.delete(self.to_numpy(), row, 0), col, 1))
        if "max_determinant_size" in vars(self):
            submatrix.max_determinant_size = self.max_determinant_size
        return submatrix

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row.

        Raises:
            NonSquareMatrixError: If the matrix is not square
            MatrixTooLargeError: If the matrix exceeds ``max_determinant_size``
        """
        self._check_square("determinant")
        limit = self.max_determinant_size
        if limit is not None and self.width > limit:
            raise MatrixTooLargeError(
                f"determinant of a {self.width}x{self.height} matrix exceeds the size limit of {limit}"
            )

        if self.width == 1:
            return self[0, 0]
        if self.width == 2:
            return self[0, 0] * self[1, 1] - self[0, 1] * self[1, 0]

        determinant = 0.0
        for col in range(self.width):
            determinant += self[0, col] * self.cofactor(0, col)
        return determinant

    def minor(self, row: int, col: int) -> float:
        """Determinant of the submatrix at (``row``, ``col``).

        The minor of a 1x1 matrix is 1, the determinant of the empty matrix.
        """
        self._check_square("minor")
        if self.width == 1:
            self._check_index(row, col)
            return 1.0
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        """Minor at (``row``, ``col``), negated when ``row + col`` is odd."""
        self._check_square("cofactor")
        minor = self.minor(row, col)
        if (row + col) % 2 != 0:
            return -minor
        return minor

    def is_invertible(self) -> bool:
        # Exact zero test: near-singular matrices are still inverted
        return self.determinant() != 0.0

    def inverse(self) -> Matrix:
        """Inverse via the adjugate divided by the determinant.

        Each entry is rounded to 5 decimal places.

        Raises:
            NonSquareMatrixError: If the matrix is not square
            SingularMatrixError: If the determinant is zero
        """
        self._check_square("inverse")
        determinant = self.determinant()
        if determinant == 0.0:
            raise SingularMatrixError("cannot invert matrices with determinant of 0")

        cofactors = np.array(
            [[self.cofactor(row, col) for col in range(self.width)] for row in range(self.width)]
        )
        # The adjugate is the transposed cofactor matrix
        inverse = Matrix.from_numpy(round_half_away(cofactors.T / determinant, ROUNDING_PLACES))

        logger.debug(f"Inverted {self.width}x{self.height} matrix: determinant={determinant:.5f}")
        return inverse
