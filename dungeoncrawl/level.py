"""Dungeon level model: tiles, movement statuses, the player and level loading."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, IntEnum
from pathlib import Path

_INT32_MAX = 2**31 - 1
_HEADER = re.compile(r"\s*([+-]?\d+)\s*([+-]?\d+)\s*([+-]?\d+)\s*([+-]?\d+)")


class Tile(str, Enum):
    """A single square of the dungeon map, identified by its display character."""

    OPEN = "-"
    PLAYER = "o"
    TREASURE = "$"
    AMULET = "@"
    MONSTER = "M"
    PILLAR = "+"
    DOOR = "?"
    EXIT = "!"

    def __str__(self) -> str:
        return self.value


class Status(IntEnum):
    """Outcome of a player's turn."""

    STAY = 0
    MOVE = 1
    TREASURE = 2
    AMULET = 3
    LEAVE = 4
    ESCAPE = 5


@dataclass
class Player:
    """The adventurer's position and the treasure collected so far."""

    row: int = 0
    col: int = 0
    treasure: int = 0


class LevelError(ValueError):
    """Raised when a level description cannot be loaded."""


class Dungeon:
    """A rectangular grid of tiles addressed as ``dungeon[row, col]``."""

    def __init__(self, rows: int, cols: int, fill: Tile | str = Tile.OPEN) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"dungeon size must not be negative: {rows}x{cols}")
        tile = Tile(fill)
        self._cols = cols
        self._cells = [[tile] * cols for _ in range(rows)]

    @property
    def rows(self) -> int:
        """Number of rows (height)."""
        return len(self._cells)

    @property
    def cols(self) -> int:
        """Number of columns (width)."""
        return self._cols

    def in_bounds(self, row: int, col: int) -> bool:
        """Whether the given position lies on the map."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _position(self, key: tuple[int, int]) -> tuple[int, int]:
        row, col = key
        if not self.in_bounds(row, col):
            raise IndexError(f"position ({row}, {col}) is outside the dungeon")
        return row, col

    def __getitem__(self, key: tuple[int, int]) -> Tile:
        row, col = self._position(key)
        return self._cells[row][col]

    def __setitem__(self, key: tuple[int, int], value: Tile | str) -> None:
        row, col = self._position(key)
        self._cells[row][col] = Tile(value)

    def __iter__(self) -> Iterator[tuple[Tile, ...]]:
        return (tuple(row) for row in self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dungeon):
            return NotImplemented
        return self._cols == other._cols and self._cells == other._cells

    def __repr__(self) -> str:
        body = "/".join("".join(tile.value for tile in row) for row in self._cells)
        return f"Dungeon({self.rows}x{self.cols}: {body})"


def create_map(rows: int, cols: int) -> Dungeon:
    """Return a new dungeon of the given size with every tile open."""
    return Dungeon(rows, cols)


_LOADABLE = frozenset(
    {
        Tile.OPEN,
        Tile.TREASURE,
        Tile.AMULET,
        Tile.MONSTER,
        Tile.PILLAR,
        Tile.DOOR,
        Tile.EXIT,
    }
)


def parse_level(text: str) -> tuple[Dungeon, Player]:
    """Parse a level description into its map and the player's starting position.

    The text holds the row count, column count, starting row and starting
    column, followed by one character per tile; whitespace between tiles is
    ignored. The player is placed on the map at the starting position.
    """
    header = _HEADER.match(text)
    if header is None:
        raise LevelError("level header must hold four integers")
    rows, cols, start_row, start_col = (int(value) for value in header.groups())

    if rows < 1 or cols < 1:
        raise LevelError(f"dungeon must have at least one row and column: {rows}x{cols}")
    if not (0 <= start_row < rows and 0 <= start_col < cols):
        raise LevelError(f"starting position ({start_row}, {start_col}) is outside the dungeon")
    if cols > _INT32_MAX // rows:
        raise LevelError(f"dungeon of {rows}x{cols} tiles is too large")

    symbols = [char for char in text[header.end():] if not char.isspace()]
    expected = rows * cols
    for char in symbols[:expected]:
        if char not in {tile.value for tile in _LOADABLE}:
            raise LevelError(f"unrecognised tile character {char!r}")
    if len(symbols) < expected:
        raise LevelError(f"expected {expected} tiles, found {len(symbols)}")
    if len(symbols) > expected:
        raise LevelError("unexpected data after the last tile")

    dungeon = create_map(rows, cols)
    for index, char in enumerate(symbols):
        dungeon[divmod(index, cols)] = char

    if not any(tile in (Tile.DOOR, Tile.EXIT) for row in dungeon for tile in row):
        raise LevelError("level has neither a door nor an exit")
    if dungeon[start_row, start_col] is not Tile.OPEN:
        raise LevelError(f"starting position ({start_row}, {start_col}) is not an open tile")

    dungeon[start_row, start_col] = Tile.PLAYER
    return dungeon, Player(row=start_row, col=start_col)


def load_level(path: str | Path) -> tuple[Dungeon, Player]:
    """Read and parse the level file at ``path``."""
    try:
        text = Path(path).read_text()
    except (OSError, UnicodeDecodeError) as error:
        raise LevelError(f"cannot read level file {path}: {error}") from error
    return parse_level(text)