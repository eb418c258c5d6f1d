"""7-bag randomizer module"""
import logging
import random
from typing import List, Optional, Tuple

from tower_piece import PieceKind

log = logging.getLogger(__name__)


class SevenBag:
    """
    Hands out the 7 kinds in shuffled batches.

    The bag is refilled with one of each kind and shuffled (random.Random.shuffle
    is Fisher-Yates) only when empty, so every 7 draws starting at a bag
    boundary form a permutation of all kinds. Pass a seeded ``random.Random``
    to reproduce a sequence.
    """

    PIECES = tuple(PieceKind)

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self._bag: List[PieceKind] = []

    def _refill(self):
        self._bag = list(self.PIECES)
        self.rng.shuffle(self._bag)
        log.debug("bag refilled: %s", "".join(k.name for k in self._bag))

    def next(self) -> PieceKind:
        if not self._bag:
            self._refill()
        return self._bag.pop(0)

    @property
    def remaining(self) -> Tuple[PieceKind, ...]:
        return tuple(self._bag)
