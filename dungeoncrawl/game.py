"""The interactive dungeon crawl played over text streams."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from dungeoncrawl.display import instructions, render_map, render_status
from dungeoncrawl.level import LevelError, Player, Status, load_level
from dungeoncrawl.moves import Command, monster_attack, next_position, player_move, resize_map

_PROMPT = "Enter command (w,a,s,d: move, e: stay still, q: quit): "


class _Tokens:
    """Reads whitespace-separated words and single characters from a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _fill(self) -> bool:
        self._buffer = self._buffer.lstrip()
        while not self._buffer:
            line = self._stream.readline()
            if not line:
                return False
            self._buffer = line.lstrip()
        return True

    def word(self) -> str | None:
        if not self._fill():
            return None
        parts = self._buffer.split(maxsplit=1)
        self._buffer = parts[1] if len(parts) > 1 else ""
        return parts[0]

    def char(self) -> str | None:
        if not self._fill():
            return None
        char, self._buffer = self._buffer[0], self._buffer[1:]
        return char


def play(stdin: TextIO, stdout: TextIO) -> int:
    """Run a game reading commands from ``stdin``; return the exit status."""
    out = stdout.write
    tokens = _Tokens(stdin)

    out(instructions())
    out("Please enter the dungeon name and number of levels: ")
    name = tokens.word()
    count = tokens.word()
    try:
        total_rooms = int(count) if count is not None else None
    except ValueError:
        total_rooms = None
    if name is None or total_rooms is None:
        out("\nI could not read the dungeon name and number of levels.\n")
        return 1

    player = Player()
    total_moves = 0
    for room in range(1, total_rooms + 1):
        out(f"Level {room}\n")
        try:
            dungeon, start = load_level(f"{name}{room}.txt")
        except LevelError as error:
            out(f"{error}\n")
            out("Returning you back to the real word, adventurer!\n")
            return 1
        player = Player(row=start.row, col=start.col, treasure=player.treasure)

        out(render_map(dungeon))

        while True:
            out(_PROMPT)
            key = tokens.char()
            if key is None or key == Command.QUIT.value:
                out("Thank you for playing!\n")
                return 0
            try:
                command = Command(key)
            except ValueError:
                out("I did not understand your command, adventurer!\n")
                continue

            total_moves += 1
            if command is Command.STAY:
                status = Status.STAY
            else:
                next_row, next_col = next_position(command, player.row, player.col)
                status = player_move(dungeon, player, next_row, next_col)

            if status is Status.ESCAPE:
                out(render_map(dungeon))
                out(render_status(status, player, total_moves))
                return 0

            if status is Status.LEAVE:
                out(render_map(dungeon))
                out(render_status(status, player, total_moves))
                break

            if monster_attack(dungeon, player):
                out(render_map(dungeon))
                out("You died, adventurer! Better luck next time!\n")
                return 0

            if status is Status.AMULET:
                dungeon = resize_map(dungeon)

            out(render_map(dungeon))
            out(render_status(status, player, total_moves))

    return 0


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point: play on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="dungeoncrawl",
        description="Collect treasure and escape the dungeon.",
    )
    parser.parse_args(argv)
    return play(sys.stdin, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())