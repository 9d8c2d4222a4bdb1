"""Text rendering of instructions, dungeon maps and turn results."""

from __future__ import annotations

from dungeoncrawl.level import Dungeon, Player, Status, Tile

DISPLAY_WIDTH = 3

_INSTRUCTIONS = (
    "---------------------------------------------------------",
    "Good day, adventurer!",
    "Your goal is to get the treasure and escape the dungeon!",
    " --- SYMBOLS ---",
    " o          : That is you, the adventurer!",
    " $          : These are treasures. Lots of money!",
    " @          : These magical amulets resize the level.",
    " M          : These are monsters; avoid them!",
    " +, -, |    : These are unpassable obstacles.",
    " ?          : A door to another level.",
    " !          : A door to escape the dungeon.",
    " --- CONTROLS ---",
    " w, a, s, d : Keys for moving up, left, down, and right.",
    " e          : Key for staying still for a turn.",
    " q          : Key for abandoning your quest.",
    "---------------------------------------------------------",
)


def instructions() -> str:
    """Return the greeting that explains the symbols and controls."""
    return "\n" + "\n".join(_INSTRUCTIONS) + "\n\n"


def render_map(dungeon: Dungeon) -> str:
    """Return the map framed by a border, one tile per three characters."""
    border = "+" + "-" * (dungeon.cols * DISPLAY_WIDTH) + "+"
    lines = [border]
    for row in dungeon:
        cells = "".join(f" {' ' if tile is Tile.OPEN else tile.value} " for tile in row)
        lines.append(f"|{cells}|")
    lines.append(border)
    return "\n".join(lines) + "\n"


def _treasure_word(count: int) -> str:
    return "treasures" if count > 1 else "treasure"


def render_status(status: Status | int, player: Player, moves: int) -> str:
    """Return the report shown after a turn with the given outcome."""
    status = Status(status)
    lines = []
    if status is not Status.STAY:
        lines.append(f"You have moved to row {player.row} and column {player.col}")

    if status is Status.STAY:
        lines.append(f"You stayed at row {player.row} and column {player.col}")
        lines.append("You didn't move. Are you lost?")
    elif status is Status.TREASURE:
        lines.append("Well done, adventurer! You found some treasure.")
        lines.append(f"You now have {player.treasure} {_treasure_word(player.treasure)}.")
    elif status is Status.AMULET:
        lines.append("The magic amulet sparkles and crumbles into dust.")
        lines.append("The ground begins to rumble. Are the walls moving?")
    elif status is Status.LEAVE:
        lines.append("You go through the doorway into the unknown beyond...")
    elif status is Status.ESCAPE:
        lines.append("Congratulations, adventurer! You have escaped the dungeon!")
        lines.append(
            f"You escaped with {player.treasure} {_treasure_word(player.treasure)} "
            f"and in {moves} total moves."
        )

    return "".join(f"{line}\n" for line in lines) + "\n"