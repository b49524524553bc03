"""Dense and sparse matrix transposition and display."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SparseElement:
    """One non-zero element of a sparse matrix."""

    row: int
    col: int
    value: int


def transpose(matrix):
    """Return the transpose of a matrix given as a list of rows."""
    return [list(column) for column in zip(*matrix)]


def format_matrix(matrix, title):
    """Return the title followed by one line per matrix row."""
    lines = [title]
    lines.extend("".join(f" {value:3d}" for value in row) for row in matrix)
    return "\n".join(lines)


def transpose_sparse(elements):
    """Return the sparse elements with rows and columns swapped."""
    return [SparseElement(e.col, e.row, e.value) for e in elements]


def format_sparse(elements, title):
    """Return the sparse elements as ``title: (r,c,v) ...``."""
    body = "".join(f" ({e.row},{e.col},{e.value})" for e in elements)
    return f"{title}: {body}"