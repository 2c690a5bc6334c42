"""Board geometry: squares, direction vectors and coordinate helpers.

Board layout (row-major, White at the bottom):
    row 0 = rank 8 (a8 ... h8)
    ...
    row 7 = rank 1 (a1 ... h1)
"""

from __future__ import annotations

from dataclasses import dataclass

from chesslogic.core.enums import Color

BOARD_SIZE = 8


@dataclass(frozen=True, slots=True)
class Direction:
    """Immutable (row, column) step vector."""

    row_delta: int
    column_delta: int

    def __add__(self, other: Direction) -> Direction:
        if not isinstance(other, Direction):
            return NotImplemented
        return Direction(
            self.row_delta + other.row_delta,
            self.column_delta + other.column_delta,
        )

    def __mul__(self, scalar: int) -> Direction:
        if not isinstance(scalar, int):
            return NotImplemented
        return Direction(self.row_delta * scalar, self.column_delta * scalar)

    __rmul__ = __mul__


NORTH = Direction(-1, 0)
SOUTH = Direction(1, 0)
EAST = Direction(0, 1)
WEST = Direction(0, -1)
NORTH_EAST = NORTH + EAST
NORTH_WEST = NORTH + WEST
SOUTH_EAST = SOUTH + EAST
SOUTH_WEST = SOUTH + WEST

ORTHOGONALS: tuple[Direction, ...] = (NORTH, SOUTH, EAST, WEST)
DIAGONALS: tuple[Direction, ...] = (NORTH_EAST, NORTH_WEST, SOUTH_EAST, SOUTH_WEST)
ALL_DIRECTIONS: tuple[Direction, ...] = ORTHOGONALS + DIAGONALS


def is_inside(row: int, column: int) -> bool:
    """Check whether (row, column) lies on the 8x8 board."""
    return 0 <= row < BOARD_SIZE and 0 <= column < BOARD_SIZE


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable on-board square, equal by value."""

    row: int
    column: int

    def __post_init__(self) -> None:
        if not is_inside(self.row, self.column):
            raise ValueError(f"Square out of range: ({self.row}, {self.column})")

    def __add__(self, direction: Direction) -> Position:
        if not isinstance(direction, Direction):
            return NotImplemented
        return Position(
            self.row + direction.row_delta,
            self.column + direction.column_delta,
        )

    def offset(self, direction: Direction) -> Position | None:
        """Square one *direction* step away, or ``None`` past the edge."""
        row = self.row + direction.row_delta
        column = self.column + direction.column_delta
        if not is_inside(row, column):
            return None
        return Position(row, column)

    def square_color(self) -> Color:
        """Colour of the square itself (a8 and h1 are light)."""
        return Color.WHITE if (self.row + self.column) % 2 == 0 else Color.BLACK

    @property
    def name(self) -> str:
        """Algebraic name, e.g. Position(4, 4) -> 'e4'."""
        return chr(ord("a") + self.column) + str(BOARD_SIZE - self.row)

    def __str__(self) -> str:
        return self.name


def parse_square(name: str) -> Position:
    """Parse square name, e.g. 'e4' -> Position(4, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Position(BOARD_SIZE - int(name[1]), ord(name[0]) - ord("a"))


def all_positions() -> list[Position]:
    """Every square in row-major order (a8 first, h1 last)."""
    return [Position(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Position(0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Position(1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Position(2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Position(3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Position(4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Position(5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Position(6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Position(7, c) for c in range(8))
