"""Piece lifecycle: spawn, move, rotate, drop, lock"""
import logging
from enum import Enum
from typing import Optional, Tuple

from tower_board import Board, PlaceResult
from tower_piece import ActivePiece, PieceKind
from tower_rng import SevenBag
from tower_score import Scoring

log = logging.getLogger(__name__)

# x offsets tried, in order, when a rotation collides
KICK_OFFSETS = (0, -1, 1, -2, 2)


class GameState(Enum):
    FALLING = "falling"
    GAME_OVER = "game_over"


class Simulation:
    """
    Owns the active piece and drives it against a Board.

    The Board, SevenBag and Scoring are handed in by the caller (the Session);
    gravity is not timed here, the caller invokes ``gravity_step`` when due.
    Every mutating call is a no-op once the state is GAME_OVER.
    """

    def __init__(self, board: Board, bag: SevenBag, scoring: Scoring):
        self.board = board
        self.bag = bag
        self.scoring = scoring
        self.state = GameState.FALLING
        self.current: Optional[ActivePiece] = None
        self.next_kind: PieceKind = bag.next()

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    def spawn(self):
        if self.game_over: return
        self.current = ActivePiece.spawn(self.next_kind)
        self.next_kind = self.bag.next()
        log.debug("spawn %s, next %s", self.current.kind.name, self.next_kind.name)
        if not self.board.is_valid_placement(self.current):
            self._end("spawn blocked")

    def move(self, dx: int, dy: int) -> bool:
        if self.game_over: return False
        t = self.current.moved(dx, dy)
        if not self.board.is_valid_placement(t): return False
        self.current = t
        return True

    def rotate(self, direction: int) -> bool:
        if self.game_over: return False
        rotated = self.current.with_rotation(self.current.rotation + direction)
        for ox in KICK_OFFSETS:
            t = rotated.moved(ox, 0)
            if self.board.is_valid_placement(t):
                self.current = t
                return True
        return False

    def hard_drop(self):
        if self.game_over: return
        while self.move(0, 1):
            pass
        self.lock()

    def gravity_step(self) -> bool:
        """Drop one row, locking if blocked; returns True if a lock happened."""
        if self.game_over: return False
        if self.move(0, 1): return False
        self.lock()
        return True

    def lock(self):
        if self.game_over: return
        if self.board.place(self.current) is PlaceResult.OVERFLOW:
            self._end("lock above the top")
            return
        cleared = self.board.clear_full_rows()
        points = self.scoring.record_clear(cleared)
        if cleared:
            log.debug("cleared %d rows for %d points", cleared, points)
        self.spawn()

    def ghost_cells(self) -> Tuple[Tuple[int, int], ...]:
        if self.current is None: return ()
        gy = self.board.ghost_y(self.current)
        return self.current.moved(0, gy - self.current.y).cells()

    def _end(self, reason: str):
        self.state = GameState.GAME_OVER
        log.info("game over (%s): score=%d lines=%d", reason, self.scoring.score, self.scoring.lines)
