"""Turn mechanics: commands, player movement, amulet resizing and monster pursuit."""

from __future__ import annotations

from enum import Enum

from dungeoncrawl.level import Dungeon, Player, Status, Tile


class Command(str, Enum):
    """A keyboard command entered by the player."""

    QUIT = "q"
    STAY = "e"
    UP = "w"
    LEFT = "a"
    DOWN = "s"
    RIGHT = "d"

    def __str__(self) -> str:
        return self.value


_DELTAS = {
    Command.UP: (-1, 0),
    Command.DOWN: (1, 0),
    Command.LEFT: (0, -1),
    Command.RIGHT: (0, 1),
}


def next_position(command: Command | str, row: int, col: int) -> tuple[int, int]:
    """Return the position one step from ``(row, col)`` in the command's direction.

    Commands that are not movements leave the position unchanged.
    """
    try:
        delta_row, delta_col = _DELTAS.get(Command(command), (0, 0))
    except ValueError:
        delta_row, delta_col = 0, 0
    return row + delta_row, col + delta_col


def resize_map(dungeon: Dungeon) -> Dungeon:
    """Return a map twice as tall and wide holding four copies of ``dungeon``.

    The original sits in the top-left quadrant; in the other three copies the
    player's tile is replaced by an open tile so the player is not duplicated.
    """
    if dungeon.rows <= 0 or dungeon.cols <= 0:
        raise ValueError("cannot resize an empty dungeon")

    rows, cols = dungeon.rows, dungeon.cols
    resized = Dungeon(rows * 2, cols * 2)
    for row, line in enumerate(dungeon):
        for col, tile in enumerate(line):
            copy = Tile.OPEN if tile is Tile.PLAYER else tile
            resized[row, col] = tile
            resized[row, col + cols] = copy
            resized[row + rows, col] = copy
            resized[row + rows, col + cols] = copy
    return resized


def _step_onto(dungeon: Dungeon, player: Player, row: int, col: int) -> None:
    dungeon[player.row, player.col] = Tile.OPEN
    player.row, player.col = row, col
    dungeon[row, col] = Tile.PLAYER


def player_move(dungeon: Dungeon, player: Player, next_row: int, next_col: int) -> Status:
    """Move the player to ``(next_row, next_col)`` if allowed and report the outcome.

    The player cannot leave the map, walk into pillars or monsters, or use
    the exit without at least one treasure; in those cases nothing changes
    and ``Status.STAY`` is returned.
    """
    if not dungeon.in_bounds(next_row, next_col):
        return Status.STAY

    target = dungeon[next_row, next_col]
    if target in (Tile.MONSTER, Tile.PILLAR):
        return Status.STAY
    if target is Tile.EXIT and player.treasure < 1:
        return Status.STAY

    outcomes = {
        Tile.TREASURE: Status.TREASURE,
        Tile.AMULET: Status.AMULET,
        Tile.DOOR: Status.LEAVE,
        Tile.EXIT: Status.ESCAPE,
        Tile.OPEN: Status.MOVE,
    }
    if target not in outcomes:
        raise ValueError(f"cannot move onto tile {target.value!r} at ({next_row}, {next_col})")

    if target is Tile.TREASURE:
        player.treasure += 1
    _step_onto(dungeon, player, next_row, next_col)
    return outcomes[target]


def _advance_along(dungeon: Dungeon, cells: list[tuple[int, int]]) -> None:
    """Move every monster in sight along ``cells`` one step towards the first cell."""
    for closer, here in zip(cells, cells[1:]):
        tile = dungeon[here]
        if tile is Tile.PILLAR:
            break
        if tile is Tile.MONSTER:
            dungeon[here] = Tile.OPEN
            dungeon[closer] = Tile.MONSTER


def monster_attack(dungeon: Dungeon, player: Player) -> bool:
    """Move monsters in line of sight one tile towards the player.

    Sight lines run up, down, left and right from the player and are blocked
    by pillars. Returns whether a monster has reached the player's tile.
    """
    origin = (player.row, player.col)
    rays = (
        [(row, player.col) for row in range(player.row - 1, -1, -1)],
        [(row, player.col) for row in range(player.row + 1, dungeon.rows)],
        [(player.row, col) for col in range(player.col - 1, -1, -1)],
        [(player.row, col) for col in range(player.col + 1, dungeon.cols)],
    )
    for ray in rays:
        _advance_along(dungeon, [origin, *ray])
    return dungeon[origin] is Tile.MONSTER