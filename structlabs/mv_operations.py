"""Matrix by column-vector multiplication in full and in sparse form."""

from __future__ import annotations

from itertools import pairwise

from .matrix import DenseMatrix, SparseMatrix
from .vector import SparseVector


def _check_sizes(cols: int, rows: int) -> None:
    if cols != rows:
        raise ValueError(
            f"matrix has {cols} columns but the vector has {rows} rows"
        )


def matrix_mul_vector(matrix: DenseMatrix, vector: SparseVector) -> SparseVector:
    """Full product; every row of the result is stored, zeros included."""
    _check_sizes(matrix.cols, vector.rows)
    dense = vector.to_dense()
    values = [sum(a * b for a, b in zip(row, dense)) for row in matrix.data]
    return SparseVector(matrix.rows, values, list(range(matrix.rows)))


def sparse_matrix_mul_vector(matrix: SparseMatrix, vector: SparseVector) -> SparseVector:
    """CSR product; only non-zero rows of the result are stored."""
    _check_sizes(matrix.cols, vector.rows)
    position = {index: at for at, index in enumerate(vector.indices)}
    values: list[int] = []
    indices: list[int] = []
    for row, (start, end) in enumerate(pairwise(matrix.row_starts)):
        total = sum(
            value * vector.values[position[col]]
            for value, col in zip(matrix.values[start:end], matrix.columns[start:end])
            if col in position
        )
        if total != 0:
            values.append(total)
            indices.append(row)
    return SparseVector(matrix.rows, values, indices)