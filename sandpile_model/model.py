"""Abelian sandpile on a grid that grows whenever grains fall off its edge."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

Grid = list[list[int]]
SnapshotHook = Callable[[int, Grid], None]

CRITICAL = 4


@dataclass
class Sandpile:
    """A rectangular grid of piles with a running count of unstable cells.

    When ``unstables`` is not given it is computed from the matrix.
    """

    matrix: Grid = field(default_factory=list)
    unstables: int | None = None

    def __post_init__(self) -> None:
        if self.unstables is None:
            self.unstables = sum(
                1 for row in self.matrix for piles in row if piles >= CRITICAL
            )

    def is_stable(self) -> bool:
        """Return True when no cell holds four or more grains."""
        return self.unstables == 0

    def _add_grain(self, i: int, j: int) -> None:
        self.matrix[i][j] += 1
        if self.matrix[i][j] == CRITICAL:
            self.unstables += 1

    def collapse(self, i: int, j: int) -> bool:
        """Topple cell (i, j) once, growing the grid where a neighbour is missing.

        Returns False, changing nothing, when the cell is stable.
        """
        matrix = self.matrix
        if not 0 <= i < len(matrix) or not 0 <= j < len(matrix[i]):
            raise IndexError(f"cell ({i}, {j}) is outside the grid")
        if matrix[i][j] < CRITICAL:
            return False

        matrix[i][j] -= CRITICAL
        if matrix[i][j] < CRITICAL:
            self.unstables -= 1

        if i == 0:
            matrix.insert(0, [0] * len(matrix[i]))
            i += 1
        self._add_grain(i - 1, j)

        if j + 1 >= len(matrix[i]):
            for row in matrix:
                row.append(0)
        self._add_grain(i, j + 1)

        if i + 1 >= len(matrix):
            matrix.append([0] * len(matrix[i]))
        self._add_grain(i + 1, j)

        if j == 0:
            for row in matrix:
                row.insert(0, 0)
            j += 1
        self._add_grain(i, j - 1)

        return True

    def shake(
        self,
        max_iter: int = 0,
        freq: int = 0,
        on_snapshot: SnapshotHook | None = None,
    ) -> int:
        """Sweep the grid toppling cells until stable or ``max_iter`` topplings.

        ``max_iter`` of 0 means no limit. Every ``freq`` topplings the hook
        receives the toppling count and the grid, except on the toppling just
        before the last allowed one. Returns the number of topplings done.
        """
        i = j = done = 0
        while (max_iter == 0 or done < max_iter) and not self.is_stable():
            if self.collapse(i, j):
                done += 1
                if (
                    on_snapshot is not None
                    and freq
                    and done % freq == 0
                    and max_iter - done != 1
                ):
                    on_snapshot(done, self.matrix)
            width = len(self.matrix[0])
            if j == width - 1:
                i = (i + 1) % len(self.matrix)
            j = (j + 1) % width
        return done