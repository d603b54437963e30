"""Board model for the sliding puzzle game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple

from slidingcore.errors import OutOfBoundsError, TileNotFoundError

EMPTY = 0


class Direction(StrEnum):
    """Direction a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Position(NamedTuple):
    row: int
    col: int


@dataclass(frozen=True)
class Tile:
    """A numbered tile (or the blank) at its current cell.

    ``id`` is an opaque tag fixed at board creation so a renderer can
    follow a tile across moves. The core never reads it.
    """

    id: int
    value: int
    position: Position


@dataclass(frozen=True)
class Board:
    """Represents the sliding puzzle board.

    Tiles are kept in ``id`` order. 0 represents the blank space.
    """

    size: int
    tiles: tuple[Tile, ...]

    def __post_init__(self) -> None:
        if self.size < 2:
            raise ValueError(f"Board size must be at least 2, got {self.size}.")
        cells = self.size * self.size
        if len(self.tiles) != cells:
            raise ValueError(
                f"Expected {cells} tiles for a {self.size}×{self.size} board, "
                f"got {len(self.tiles)}."
            )
        values = {t.value for t in self.tiles}
        if values != set(range(cells)):
            raise ValueError(
                f"Tile values must be exactly 0..{cells - 1}, "
                f"got {sorted(t.value for t in self.tiles)}."
            )
        positions = {t.position for t in self.tiles}
        grid = {
            Position(r, c) for r in range(self.size) for c in range(self.size)
        }
        if positions != grid:
            raise ValueError("Tile positions must cover every cell exactly once.")

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major value list.

        The tile at linear index ``i`` gets ``id=i``.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        tiles = tuple(
            Tile(id=i, value=v, position=Position(*divmod(i, size)))
            for i, v in enumerate(flat)
        )
        return cls(size=size, tiles=tiles)

    # -- queries --------------------------------------------------------------

    def position_of(self, value: int) -> Position:
        """Return the cell currently holding *value*."""
        for tile in self.tiles:
            if tile.value == value:
                return tile.position
        raise TileNotFoundError(value, self.size)

    def tile_at(self, position: tuple[int, int]) -> int:
        """Return the value sitting at *position*."""
        row, col = position
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise OutOfBoundsError(row, col, self.size)
        for tile in self.tiles:
            if tile.position == (row, col):
                return tile.value
        # Unreachable while the constructor invariants hold.
        raise OutOfBoundsError(row, col, self.size)

    @property
    def empty_position(self) -> Position:
        return self.position_of(EMPTY)

    def rows(self) -> list[list[int]]:
        """Return the values as a 2D row-major grid."""
        grid = [[EMPTY] * self.size for _ in range(self.size)]
        for tile in self.tiles:
            grid[tile.position.row][tile.position.col] = tile.value
        return grid

    def to_flat(self) -> list[int]:
        return [v for row in self.rows() for v in row]

    def is_tile_correct(self, position: tuple[int, int]) -> bool:
        """Check if the tile at *position* is in its goal cell."""
        row, col = position
        return canonical_position(self.tile_at(position), self.size) == (row, col)


def canonical_position(value: int, size: int) -> Position:
    """Goal cell of *value*: row-major from 1, blank bottom-right."""
    if value == EMPTY:
        return Position(size - 1, size - 1)
    return Position(*divmod(value - 1, size))
