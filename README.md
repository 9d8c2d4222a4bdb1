# dungeoncrawl

A small turn-based dungeon crawler for the terminal. Collect treasure, avoid
the monsters, and find your way out of the dungeon.

## Installation

    pip install .

## Playing

Start the game with:

    dungeoncrawl

You are asked for a dungeon name and a number of levels. For a dungeon named
`castle` with 2 levels, the game loads `castle1.txt` and then `castle2.txt`
from the current directory. Going through a door (`?`) takes you on to the
next level. Going through the exit (`!`) while you carry treasure ends the game.

### Symbols

    o        you, the adventurer
    $        treasure
    @        magic amulet: doubles the size of the level
    M        monster: avoid it
    +        pillar: impassable
    ?        door to the next level
    !        exit out of the dungeon
    -        open floor (shown blank)

### Controls

    w, a, s, d   move up, left, down, right
    e            stay still for a turn
    q            abandon the quest

After each move, every monster that can see you in a straight line along your
row or column, with no pillar between, steps one tile closer. If a monster
reaches your tile, the game is over.

## Level files

A level file starts with four integers: the number of rows, the number of
columns, and the player's starting row and column. Then come exactly
rows × columns tile symbols, separated by whitespace. The starting tile must be
open floor, and the level must hold at least one door or exit:

    5 3
    3 0
    M + -
    - + -
    - + !
    - - -
    @ - $

## Library use

The game logic can be used without the terminal loop:

```python
from dungeoncrawl.level import load_level
from dungeoncrawl.moves import Command, next_position, player_move, monster_attack
from dungeoncrawl.display import render_map

dungeon, player = load_level("castle1.txt")
row, col = next_position(Command.UP, player.row, player.col)
status = player_move(dungeon, player, row, col)
caught = monster_attack(dungeon, player)
print(render_map(dungeon))
```

`load_level` and `parse_level` raise `LevelError` when a level file is
malformed.

## Running the tests

    pip install .[test]
    pytest