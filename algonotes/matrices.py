"""Walking and filling matrices in spiral order."""

from __future__ import annotations

from collections.abc import Sequence

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of ``matrix`` clockwise from the top-left corner."""
    if not matrix:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: list[int] = []
    while top <= bottom and left <= right:
        result.extend(matrix[top][left:right + 1])
        top += 1
        result.extend(matrix[i][right] for i in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][i] for i in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[i][left] for i in range(bottom, top - 1, -1))
            left += 1
    return result


def spiral_matrix(n: int) -> list[list[int]]:
    """Return an n-by-n matrix filled clockwise with 1..n*n; empty for n <= 0."""
    if n <= 0:
        return []
    matrix = [[0] * n for _ in range(n)]
    i, j, d = 0, -1, 0
    for value in range(1, n * n + 1):
        di, dj = _DIRECTIONS[d]
        while not (0 <= i + di < n and 0 <= j + dj < n and matrix[i + di][j + dj] == 0):
            d = (d + 1) % 4
            di, dj = _DIRECTIONS[d]
        i, j = i + di, j + dj
        matrix[i][j] = value
    return matrix