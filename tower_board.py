"""Board: collision, placement, row clearing, ghost"""
from enum import Enum
from typing import Iterable, List, Sequence, Tuple

from tower_piece import ActivePiece, COLS, ROWS

EMPTY = 0

Grid = Tuple[Tuple[int, ...], ...]


class PlaceResult(Enum):
    OK = "ok"
    OVERFLOW = "overflow"


class Board:
    """Fixed ROWS x COLS grid of locked cells; 0 is empty, 1..7 is kind + 1."""

    def __init__(self, width: int = COLS, height: int = ROWS):
        self.width = width
        self.height = height
        self._grid: List[List[int]] = [[EMPTY] * width for _ in range(height)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        b = cls(len(rows[0]), len(rows))
        for y, row in enumerate(rows):
            if len(row) != b.width:
                raise ValueError(f"row {y} has {len(row)} cells, expected {b.width}")
            b._grid[y][:] = row
        return b

    def cell(self, x: int, y: int) -> int:
        return self._grid[y][x]

    def rows(self) -> Grid:
        return tuple(tuple(r) for r in self._grid)

    def is_valid_placement(self, piece: ActivePiece) -> bool:
        return self.cells_fit(piece.cells())

    def cells_fit(self, cells: Iterable[Tuple[int, int]]) -> bool:
        for x, y in cells:
            if x < 0 or x >= self.width or y >= self.height: return False
            if y >= 0 and self._grid[y][x] != EMPTY: return False
        return True

    def place(self, piece: ActivePiece) -> PlaceResult:
        overflow = False
        value = int(piece.kind) + 1
        for x, y in piece.cells():
            if y < 0:
                overflow = True
                continue
            if 0 <= x < self.width and y < self.height:
                self._grid[y][x] = value
        return PlaceResult.OVERFLOW if overflow else PlaceResult.OK

    def clear_full_rows(self) -> int:
        # two-pointer compaction from the bottom, rows are reused in place
        write = self.height - 1
        for read in range(self.height - 1, -1, -1):
            row = self._grid[read]
            if all(row):
                continue
            if write != read:
                self._grid[write][:] = row
            write -= 1
        cleared = write + 1
        for y in range(cleared):
            row = self._grid[y]
            for x in range(self.width):
                row[x] = EMPTY
        return cleared

    def ghost_y(self, piece: ActivePiece) -> int:
        t = piece
        while self.is_valid_placement(t.moved(0, 1)):
            t = t.moved(0, 1)
        return t.y
