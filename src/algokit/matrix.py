"""
Set matrix zeroes
=================
Zero every cell whose row or column contains a zero in the ORIGINAL matrix.

All variants mutate the matrix in place and return the same reference:

    BruteForceZeroer     remember zero rows/cols in two sets, then overwrite.
                         O(m*n) time, O(m+n) extra space.
    ConstantSpaceZeroer  use row 0 / column 0 as marker storage.
                         O(m*n) time, O(1) extra space.
    VectorizedZeroer     numpy boolean masks. O(m+n) extra space, fast on
                         ndarrays.

Example:
    >>> zero_matrix([[1, 0, 3], [4, 5, 6]])
    [[0, 0, 0], [4, 0, 6]]
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple, Type, Union

import numpy as np

from algokit import config
from algokit.errors import InvalidShape

logger = logging.getLogger("algokit.matrix")

Matrix = Any  # list of lists of ints, or a 2-D numpy array


def validate_shape(matrix: Matrix) -> Tuple[int, int]:
    """Return (rows, cols), raising InvalidShape for ragged or non 2-D input."""
    if isinstance(matrix, np.ndarray):
        if matrix.ndim != 2:
            raise InvalidShape(f"expected a 2-D array, got {matrix.ndim}-D")
        rows, cols = matrix.shape
        return int(rows), int(cols)

    rows = len(matrix)
    if rows == 0:
        return 0, 0
    cols = len(matrix[0])
    for i, row in enumerate(matrix):
        if len(row) != cols:
            raise InvalidShape(
                f"row {i} has {len(row)} columns, expected {cols}",
                row=i, expected=cols, actual=len(row),
            )
    return rows, cols


class MatrixZeroer(ABC):
    """Common contract for every zeroing strategy."""

    name = "base"

    def zero(self, matrix: Matrix, validate: Optional[bool] = None) -> Matrix:
        if validate is None:
            validate = config.VALIDATE_SHAPE
        if validate:
            rows, cols = validate_shape(matrix)
        else:
            rows = len(matrix)
            cols = len(matrix[0]) if rows else 0

        if rows == 0 or cols == 0:
            return matrix

        logger.debug("zeroing %dx%d matrix with %s", rows, cols, self.name)
        self._zero(matrix, rows, cols)
        return matrix

    @abstractmethod
    def _zero(self, matrix: Matrix, rows: int, cols: int) -> None:
        ...

    def __repr__(self):
        return f"{type(self).__name__}()"


class BruteForceZeroer(MatrixZeroer):
    name = "brute_force"

    def _zero(self, matrix, rows, cols):
        zero_rows = set()
        zero_cols = set()
        for i in range(rows):
            for j in range(cols):
                if matrix[i][j] == 0:
                    zero_rows.add(i)
                    zero_cols.add(j)

        if not zero_rows:
            return

        for i in range(rows):
            row = matrix[i]
            for j in range(cols):
                if i in zero_rows or j in zero_cols:
                    row[j] = 0


class ConstantSpaceZeroer(MatrixZeroer):
    """
    Row 0 and column 0 double as marker storage.

    Their own original state is kept in two booleans, and they are
    overwritten only after every marker has been read.
    """

    name = "constant_space"

    def _zero(self, matrix, rows, cols):
        first_row_has_zero = any(matrix[0][j] == 0 for j in range(cols))
        first_col_has_zero = any(matrix[i][0] == 0 for i in range(rows))

        # mark
        for i in range(1, rows):
            for j in range(1, cols):
                if matrix[i][j] == 0:
                    matrix[i][0] = 0
                    matrix[0][j] = 0

        # apply markers to the interior
        for i in range(1, rows):
            for j in range(1, cols):
                if matrix[i][0] == 0 or matrix[0][j] == 0:
                    matrix[i][j] = 0

        # boundary last, markers are gone after this
        if first_row_has_zero:
            for j in range(cols):
                matrix[0][j] = 0
        if first_col_has_zero:
            for i in range(rows):
                matrix[i][0] = 0


class VectorizedZeroer(MatrixZeroer):
    name = "vectorized"

    def _zero(self, matrix, rows, cols):
        zeros = np.asarray(matrix) == 0
        row_mask = zeros.any(axis=1)
        col_mask = zeros.any(axis=0)
        if not row_mask.any():
            return

        if isinstance(matrix, np.ndarray):
            matrix[row_mask, :] = 0
            matrix[:, col_mask] = 0
            return

        zero_cols = [int(j) for j in np.flatnonzero(col_mask)]
        for i in range(rows):
            row = matrix[i]
            if row_mask[i]:
                for j in range(cols):
                    row[j] = 0
            else:
                for j in zero_cols:
                    row[j] = 0


ZEROERS: Dict[str, Type[MatrixZeroer]] = {
    BruteForceZeroer.name: BruteForceZeroer,
    ConstantSpaceZeroer.name: ConstantSpaceZeroer,
    VectorizedZeroer.name: VectorizedZeroer,
}


def available_zeroers() -> List[str]:
    return sorted(ZEROERS)


def get_zeroer(name: str) -> MatrixZeroer:
    try:
        return ZEROERS[name]()
    except KeyError:
        raise ValueError(
            f"unknown zeroer {name!r}; expected one of {', '.join(available_zeroers())}"
        ) from None


def zero_matrix(matrix: Matrix,
                strategy: Union[str, MatrixZeroer, None] = None,
                validate: Optional[bool] = None) -> Matrix:
    """
    Zero every row and column of `matrix` that contains a zero, in place.

    Args:
        matrix: list of equal-length rows, or a 2-D numpy array.
        strategy: registry name or MatrixZeroer instance. Defaults to
            "vectorized" for ndarrays and config.DEFAULT_ZEROER otherwise.
        validate: check the matrix is rectangular first. Defaults to
            config.VALIDATE_SHAPE.

    Returns:
        The same matrix object.
    """
    if strategy is None:
        strategy = VectorizedZeroer.name if isinstance(matrix, np.ndarray) else config.DEFAULT_ZEROER
    zeroer = strategy if isinstance(strategy, MatrixZeroer) else get_zeroer(strategy)
    return zeroer.zero(matrix, validate=validate)
