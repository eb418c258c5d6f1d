"""Board tests: placement validity, locking and row compaction."""

from tower_board import Board, PlaceResult
from tower_piece import COLS, ROWS, ActivePiece, PieceKind


def _rows_with(cells):
    rows = [[0] * COLS for _ in range(ROWS)]
    for (x, y), v in cells.items():
        rows[y][x] = v
    return rows


def test_fresh_board_is_empty():
    b = Board()
    assert (b.width, b.height) == (COLS, ROWS)
    assert all(v == 0 for row in b.rows() for v in row)


def test_rejects_cells_outside_columns_or_below_floor():
    b = Board()
    i = ActivePiece.spawn(PieceKind.I)
    assert b.is_valid_placement(i)
    assert not b.is_valid_placement(i.moved(-4, 0))
    assert not b.is_valid_placement(i.moved(4, 0))
    assert b.is_valid_placement(i.moved(0, 18))
    assert not b.is_valid_placement(i.moved(0, 19))


def test_rejects_overlap_with_locked_cell():
    b = Board.from_rows(_rows_with({(4, 1): 3}))
    assert not b.is_valid_placement(ActivePiece.spawn(PieceKind.I))
    assert b.is_valid_placement(ActivePiece.spawn(PieceKind.I).moved(0, 1))


def test_cells_above_top_skip_occupancy_but_not_columns():
    b = Board.from_rows(_rows_with({(x, 0): 1 for x in range(COLS - 1)}))
    vertical = ActivePiece(PieceKind.I, 1, 7, -4)  # column 9, rows -4..-1
    assert b.is_valid_placement(vertical)
    assert not b.is_valid_placement(ActivePiece(PieceKind.I, 1, 8, -4))
    assert not b.is_valid_placement(ActivePiece(PieceKind.I, 1, 6, -3))


def test_place_writes_kind_plus_one():
    b = Board()
    assert b.place(ActivePiece(PieceKind.T, 0, 0, 18)) is PlaceResult.OK
    assert b.cell(1, 18) == PieceKind.T + 1
    assert [b.cell(x, 19) for x in range(4)] == [3, 3, 3, 0]


def test_place_above_top_overflows_without_writing_off_board():
    b = Board()
    result = b.place(ActivePiece(PieceKind.I, 1, 0, -2))  # column 2, rows -2..1
    assert result is PlaceResult.OVERFLOW
    assert b.cell(2, 0) == 1 and b.cell(2, 1) == 1
    assert sum(v != 0 for row in b.rows() for v in row) == 2


def test_clear_single_row_shifts_rows_down():
    cells = {(x, ROWS - 1): 2 for x in range(COLS)}
    cells[(0, ROWS - 2)] = 5
    cells[(3, 0)] = 7
    b = Board.from_rows(_rows_with(cells))
    assert b.clear_full_rows() == 1
    assert b.cell(0, ROWS - 1) == 5
    assert b.cell(3, 1) == 7
    assert all(v == 0 for v in b.rows()[0])
    assert len(b.rows()) == ROWS


def test_clear_non_adjacent_rows_preserves_order():
    cells = {}
    for y in (19, 17):
        for x in range(COLS):
            cells[(x, y)] = 1
    cells[(1, 18)] = 4
    cells[(2, 16)] = 6
    b = Board.from_rows(_rows_with(cells))
    assert b.clear_full_rows() == 2
    assert b.cell(1, 19) == 4
    assert b.cell(2, 18) == 6
    assert all(v == 0 for y in range(18) for v in b.rows()[y])


def test_clear_is_idempotent_when_no_full_rows():
    b = Board.from_rows(_rows_with({(x, 19): 1 for x in range(COLS - 1)}))
    before = b.rows()
    assert b.clear_full_rows() == 0
    assert b.clear_full_rows() == 0
    assert b.rows() == before


def test_rows_is_a_copy():
    b = Board()
    rows = b.rows()
    b.place(ActivePiece.spawn(PieceKind.O).moved(0, 10))
    assert all(v == 0 for row in rows for v in row)


def test_ghost_y_lands_on_stack():
    b = Board.from_rows(_rows_with({(4, 15): 1}))
    assert b.ghost_y(ActivePiece.spawn(PieceKind.I)) == 13
    assert b.ghost_y(ActivePiece.spawn(PieceKind.I).moved(-3, 0)) == 18
