"""
Row operations shared by the elimination routines.

All helpers operate in place on a list of row lists that the caller has
already copied out of a Matrix; they never touch Matrix storage.
"""

from __future__ import annotations

from typing import Any

from pymatrix.core.elements import is_zero


def find_pivot(rows: list[list[Any]], start: int, col: int, zero: Any) -> int | None:
    """
    First row index >= start with a nonzero entry in column col.

    Returns None if the column is zero from start downwards.
    """
    for j in range(start, len(rows)):
        if not is_zero(rows[j][col], zero):
            return j
    return None


def swap_rows(rows: list[list[Any]], i: int, j: int) -> None:
    rows[i], rows[j] = rows[j], rows[i]


def subtract_row(
    rows: list[list[Any]],
    target: int,
    source: int,
    ratio: Any,
    start: int = 0,
) -> None:
    """rows[target][k] -= rows[source][k] * ratio for every k >= start."""
    pivot_row = rows[source]
    row = rows[target]
    for k in range(start, len(row)):
        row[k] = row[k] - pivot_row[k] * ratio


def divide_row(rows: list[list[Any]], i: int, divisor: Any, start: int = 0) -> None:
    """rows[i][k] /= divisor for every k >= start."""
    row = rows[i]
    for k in range(start, len(row)):
        row[k] = row[k] / divisor
