# tower_layout.py
from dataclasses import dataclass
from tower_config import CONFIG
from tower_piece import COLS, ROWS

@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    touch_h: int

def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    panel_w = 150
    touch_h = int(CONFIG["TOUCH_STRIP_H"]) if CONFIG["TOUCH_CONTROLS"] else 0

    board_w = COLS * cell
    board_h = ROWS * cell

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin + touch_h

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=margin, board_y=margin,
        panel_x=margin + board_w + margin, panel_y=margin,
        touch_h=touch_h,
    )
