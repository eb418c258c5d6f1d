"""Piece model, shape catalog"""
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Dict, Tuple

COLS, ROWS = 10, 20
SPAWN_X, SPAWN_Y = 3, 0

Offset = Tuple[int, int]
Shape = Tuple[Offset, Offset, Offset, Offset]


class ShapeTableError(ValueError):
    pass


class PieceKind(IntEnum):
    I = 0
    O = 1
    T = 2
    S = 3
    Z = 4
    J = 5
    L = 6


# (x, y) offsets inside a 4x4 box, one entry per rotation state
SHAPES: Dict[PieceKind, Tuple[Shape, ...]] = {
    PieceKind.I: (
        ((0,1),(1,1),(2,1),(3,1)),
        ((2,0),(2,1),(2,2),(2,3)),
        ((0,2),(1,2),(2,2),(3,2)),
        ((1,0),(1,1),(1,2),(1,3)),
    ),
    PieceKind.O: (
        ((1,1),(2,1),(1,2),(2,2)),
        ((1,1),(2,1),(1,2),(2,2)),
        ((1,1),(2,1),(1,2),(2,2)),
        ((1,1),(2,1),(1,2),(2,2)),
    ),
    PieceKind.T: (
        ((1,0),(0,1),(1,1),(2,1)),
        ((1,0),(1,1),(2,1),(1,2)),
        ((0,1),(1,1),(2,1),(1,2)),
        ((1,0),(0,1),(1,1),(1,2)),
    ),
    PieceKind.S: (
        ((1,0),(2,0),(0,1),(1,1)),
        ((1,0),(1,1),(2,1),(2,2)),
        ((1,1),(2,1),(0,2),(1,2)),
        ((0,0),(0,1),(1,1),(1,2)),
    ),
    PieceKind.Z: (
        ((0,0),(1,0),(1,1),(2,1)),
        ((2,0),(1,1),(2,1),(1,2)),
        ((0,1),(1,1),(1,2),(2,2)),
        ((1,0),(0,1),(1,1),(0,2)),
    ),
    PieceKind.J: (
        ((0,0),(0,1),(1,1),(2,1)),
        ((1,0),(2,0),(1,1),(1,2)),
        ((0,1),(1,1),(2,1),(2,2)),
        ((1,0),(1,1),(0,2),(1,2)),
    ),
    PieceKind.L: (
        ((2,0),(0,1),(1,1),(2,1)),
        ((1,0),(1,1),(1,2),(2,2)),
        ((0,1),(1,1),(2,1),(0,2)),
        ((0,0),(1,0),(1,1),(1,2)),
    ),
}


def validate_shapes(shapes) -> None:
    """Reject a table that is missing kinds, rotations or cells, or leaves the 4x4 box."""
    missing = set(PieceKind) - set(shapes)
    if missing:
        raise ShapeTableError(f"missing kinds: {sorted(k.name for k in missing)}")
    for kind, rotations in shapes.items():
        if len(rotations) != 4:
            raise ShapeTableError(f"{PieceKind(kind).name}: expected 4 rotations, got {len(rotations)}")
        for r, cells in enumerate(rotations):
            if len(cells) != 4 or len(set(cells)) != 4:
                raise ShapeTableError(f"{PieceKind(kind).name}/{r}: expected 4 distinct cells")
            for x, y in cells:
                if not (0 <= x < 4 and 0 <= y < 4):
                    raise ShapeTableError(f"{PieceKind(kind).name}/{r}: offset ({x},{y}) outside 4x4 box")


validate_shapes(SHAPES)


def shape_of(kind: PieceKind, rotation: int) -> Shape:
    return SHAPES[kind][rotation % 4]


@dataclass(frozen=True)
class ActivePiece:
    kind: PieceKind
    rotation: int
    x: int
    y: int

    @staticmethod
    def spawn(kind: PieceKind) -> "ActivePiece":
        return ActivePiece(PieceKind(kind), 0, SPAWN_X, SPAWN_Y)

    def cells(self) -> Tuple[Offset, ...]:
        return tuple((self.x + dx, self.y + dy) for dx, dy in shape_of(self.kind, self.rotation))

    def moved(self, dx: int, dy: int) -> "ActivePiece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def with_rotation(self, rotation: int) -> "ActivePiece":
        return replace(self, rotation=rotation % 4)
