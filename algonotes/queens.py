"""The n-queens puzzle."""

from __future__ import annotations


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of n non-attacking queens on an n-by-n board.

    Each board is a list of rows drawn with ``Q`` and ``.``; boards come in
    lexicographic order of their queens' columns.
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    solutions: list[list[str]] = []
    placement: list[int] = []
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(["." * c + "Q" + "." * (n - c - 1) for c in placement])
            return
        for col in range(n):
            if col in columns or row + col in diagonals or row - col in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row + col)
            anti_diagonals.add(row - col)
            placement.append(col)
            place(row + 1)
            placement.pop()
            columns.discard(col)
            diagonals.discard(row + col)
            anti_diagonals.discard(row - col)

    place(0)
    return solutions