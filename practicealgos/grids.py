"""Problems on two-dimensional grids and boards."""

from __future__ import annotations

from itertools import accumulate
from typing import Any, Iterator, List, Sequence, Set, Tuple

Cell = Tuple[int, int]


def _neighbours(r: int, c: int) -> Tuple[Cell, Cell, Cell, Cell]:
    return ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1))


def _component(
    grid: Sequence[Sequence[Any]], start: Cell, land: Any, seen: Set[Cell]
) -> int:
    """Mark the 4-connected region of land holding start; return its size."""
    rows, cols = len(grid), len(grid[0])
    stack = [start]
    size = 0
    while stack:
        r, c = stack.pop()
        if not (0 <= r < rows and 0 <= c < cols) or (r, c) in seen:
            continue
        if grid[r][c] != land:
            continue
        seen.add((r, c))
        size += 1
        stack.extend(_neighbours(r, c))
    return size


def _cells(grid: Sequence[Sequence[Any]]) -> Iterator[Cell]:
    for r, row in enumerate(grid):
        for c in range(len(row)):
            yield r, c


def flood_fill(
    image: List[List[int]], sr: int, sc: int, new_color: int
) -> List[List[int]]:
    """Recolour, in place, the region of equal colour holding (sr, sc)."""
    old = image[sr][sc]
    if old == new_color:
        return image
    rows, cols = len(image), len(image[0])
    stack = [(sr, sc)]
    while stack:
        r, c = stack.pop()
        if 0 <= r < rows and 0 <= c < cols and image[r][c] == old:
            image[r][c] = new_color
            stack.extend(_neighbours(r, c))
    return image


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of 4-connected regions of '1' cells."""
    seen: Set[Cell] = set()
    count = 0
    for r, c in _cells(grid):
        if grid[r][c] == "1" and (r, c) not in seen:
            _component(grid, (r, c), "1", seen)
            count += 1
    return count


def max_area_of_island(grid: Sequence[Sequence[int]]) -> int:
    """Size of the largest 4-connected region of 1 cells."""
    seen: Set[Cell] = set()
    best = 0
    for r, c in _cells(grid):
        if grid[r][c] == 1 and (r, c) not in seen:
            best = max(best, _component(grid, (r, c), 1, seen))
    return best


def word_exists(board: List[List[str]], word: str) -> bool:
    """Whether word can be traced through adjacent cells, each used once."""
    rows, cols = len(board), len(board[0])
    if not word or len(word) > rows * cols:
        return False

    def search(k: int, r: int, c: int) -> bool:
        if k == len(word):
            return True
        if not (0 <= r < rows and 0 <= c < cols) or board[r][c] != word[k]:
            return False
        board[r][c] = None  # type: ignore[call-overload]
        found = any(search(k + 1, nr, nc) for nr, nc in _neighbours(r, c))
        board[r][c] = word[k]
        return found

    return any(
        board[r][c] == word[0] and search(0, r, c) for r, c in _cells(board)
    )


def pacific_atlantic(heights: Sequence[Sequence[int]]) -> List[List[int]]:
    """Cells from which water can flow to both the top/left and bottom/right edges.

    Cells are listed in the order the searches reach them.
    """
    if not heights:
        return []
    rows, cols = len(heights), len(heights[0])
    pacific = [[False] * cols for _ in range(rows)]
    atlantic = [[False] * cols for _ in range(rows)]
    result: List[List[int]] = []

    def flow(ocean: List[List[bool]], i: int, j: int) -> None:
        stack = [(i, j)]
        while stack:
            r, c = stack.pop()
            if ocean[r][c]:
                continue
            ocean[r][c] = True
            if pacific[r][c] and atlantic[r][c]:
                result.append([r, c])
            height = heights[r][c]
            uphill = [
                (a, b)
                for a, b in _neighbours(r, c)
                if 0 <= a < rows and 0 <= b < cols and heights[a][b] >= height
            ]
            stack.extend(reversed(uphill))

    for i in range(rows):
        flow(pacific, i, 0)
        flow(atlantic, i, cols - 1)
    for j in range(cols):
        flow(pacific, 0, j)
        flow(atlantic, rows - 1, j)
    return result


class NumMatrix:
    """Answers rectangle-sum queries over a fixed matrix."""

    def __init__(self, matrix: Sequence[Sequence[int]]) -> None:
        self._prefix = [list(accumulate(row, initial=0)) for row in matrix]

    def sum_region(self, row1: int, col1: int, row2: int, col2: int) -> int:
        """Sum of the cells in rows row1..row2 and columns col1..col2, inclusive."""
        return sum(
            prefix[col2 + 1] - prefix[col1] for prefix in self._prefix[row1 : row2 + 1]
        )


def surround_regions(board: List[List[str]]) -> None:
    """Flip, in place, every 'O' region not touching the border to 'X'."""
    if not board or len(board) == 1 or len(board[0]) == 1:
        return
    rows, cols = len(board), len(board[0])
    border = [(r, c) for r in range(rows) for c in (0, cols - 1)]
    border += [(r, c) for c in range(cols) for r in (0, rows - 1)]
    for start in border:
        stack = [start]
        while stack:
            r, c = stack.pop()
            if 0 <= r < rows and 0 <= c < cols and board[r][c] == "O":
                board[r][c] = "T"
                stack.extend(_neighbours(r, c))
    flip = {"O": "X", "T": "O"}
    for row in board:
        row[:] = [flip.get(ch, ch) for ch in row]


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Whether no digit repeats in any row, column or 3x3 box; '.' is empty."""
    seen: Set[Tuple[Any, ...]] = set()
    for r, c in _cells(board):
        digit = board[r][c]
        if digit == ".":
            continue
        keys = (("row", r, digit), ("col", c, digit), ("box", r // 3, c // 3, digit))
        if any(key in seen for key in keys):
            return False
        seen.update(keys)
    return True


def maximum_path(mat: Sequence[Sequence[int]]) -> int:
    """Largest sum of a top-to-bottom path stepping down, down-left or down-right."""
    n = len(mat)
    below = [0] * n
    for row in reversed(mat):
        below = [
            row[j]
            + max(
                below[j],
                below[j - 1] if j > 0 else 0,
                below[j + 1] if j < n - 1 else 0,
            )
            for j in range(n)
        ]
    return max([-1, *below])