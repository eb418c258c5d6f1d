"""
Session: one self-contained match.

Owns the Board, SevenBag, Scoring and Simulation plus the gravity frame
counter. A driver calls ``step`` (or ``apply_input`` then ``tick``) once per
frame and polls ``snapshot`` to render. Several sessions can coexist; seed them
(or pass a ``random.Random``) to reproduce a bag sequence exactly.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from tower_board import Board, Grid
from tower_game import Simulation
from tower_piece import PieceKind
from tower_rng import SevenBag
from tower_score import Scoring, gravity_frames

log = logging.getLogger(__name__)

Cell = Tuple[int, int]


class Command(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    ROTATE_CW = "rotate_cw"
    ROTATE_CCW = "rotate_ccw"
    HARD_DROP = "hard_drop"
    RESTART = "restart"


@dataclass(frozen=True)
class Snapshot:
    board: Grid
    active_cells: Tuple[Cell, ...]
    active_kind: Optional[PieceKind]
    ghost_cells: Tuple[Cell, ...]
    next_kind: PieceKind
    score: int
    lines: int
    level: int
    game_over: bool


class Session:
    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        if rng is not None and seed is not None:
            raise ValueError("pass either rng or seed, not both")
        self.rng = rng if rng is not None else random.Random(seed)
        self.reset()

    def reset(self):
        self.board = Board()
        self.scoring = Scoring()
        self.bag = SevenBag(self.rng)
        self.sim = Simulation(self.board, self.bag, self.scoring)
        self.frame_counter = 0
        self.sim.spawn()
        log.info("session reset, first piece %s", self.sim.current.kind.name)

    @property
    def game_over(self) -> bool:
        return self.sim.game_over

    def apply_input(self, commands: Iterable[Command]):
        if self.game_over:
            if any(self._check(c) is Command.RESTART for c in commands):
                self.reset()
            return
        for c in commands:
            c = self._check(c)
            # the rest of the frame's commands are dropped once the match ends
            if self.game_over: break
            if c is Command.MOVE_LEFT: self.sim.move(-1, 0)
            elif c is Command.MOVE_RIGHT: self.sim.move(1, 0)
            elif c is Command.ROTATE_CW: self.sim.rotate(1)
            elif c is Command.ROTATE_CCW: self.sim.rotate(-1)
            elif c is Command.HARD_DROP:
                self.sim.hard_drop()
                self.frame_counter = 0

    @staticmethod
    def _check(c) -> Command:
        if not isinstance(c, Command):
            raise TypeError(f"expected Command, got {type(c).__name__}")
        return c

    def tick(self, soft_drop_active: bool = False):
        if self.game_over: return
        self.frame_counter += 1
        if soft_drop_active or self.frame_counter >= gravity_frames(self.scoring.level):
            self.sim.gravity_step()
            self.frame_counter = 0

    def step(self, commands: Iterable[Command] = (), soft_drop_active: bool = False):
        self.apply_input(commands)
        self.tick(soft_drop_active)

    def snapshot(self) -> Snapshot:
        cur = self.sim.current
        return Snapshot(
            board=self.board.rows(),
            active_cells=cur.cells() if cur else (),
            active_kind=cur.kind if cur else None,
            ghost_cells=self.sim.ghost_cells(),
            next_kind=self.sim.next_kind,
            score=self.scoring.score,
            lines=self.scoring.lines,
            level=self.scoring.level,
            game_over=self.game_over,
        )
