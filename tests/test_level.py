import pytest

from dungeoncrawl.level import (
    Dungeon,
    LevelError,
    Player,
    Status,
    Tile,
    create_map,
    load_level,
    parse_level,
)

EXAMPLE = """5 3
3 0
M + -
- + -
- + !
- - -
@ - $
"""

EXAMPLE_ROWS = ["M+-", "-+-", "-+!", "o--", "@-$"]


def _rows(dungeon):
    return ["".join(tile.value for tile in row) for row in dungeon]


@pytest.mark.parametrize(
    "char, expected",
    [
        ("-", Tile.OPEN),
        ("o", Tile.PLAYER),
        ("$", Tile.TREASURE),
        ("@", Tile.AMULET),
        ("M", Tile.MONSTER),
        ("+", Tile.PILLAR),
        ("?", Tile.DOOR),
        ("!", Tile.EXIT),
    ],
)
def test_tile_characters(char, expected):
    tile = Tile(char)
    assert tile is expected
    assert str(tile) == char
    assert tile == char


def test_tile_rejects_unknown_character():
    with pytest.raises(ValueError):
        Tile("x")


def test_status_values():
    assert [int(Status(value)) for value in range(6)] == [0, 1, 2, 3, 4, 5]
    assert Status(5) is Status.ESCAPE
    assert len(list(Status)) == 6
    with pytest.raises(ValueError):
        Status(6)


def test_player_defaults():
    player = Player()
    assert (player.row, player.col, player.treasure) == (0, 0, 0)


def test_create_map_is_all_open():
    dungeon = create_map(3, 4)
    assert dungeon.rows == 3
    assert dungeon.cols == 4
    assert all(tile is Tile.OPEN for row in dungeon for tile in row)


def test_create_map_rejects_negative_size():
    with pytest.raises(ValueError):
        create_map(-1, 2)


def test_in_bounds():
    dungeon = create_map(2, 3)
    assert dungeon.in_bounds(0, 0)
    assert dungeon.in_bounds(1, 2)
    assert not dungeon.in_bounds(2, 0)
    assert not dungeon.in_bounds(0, 3)
    assert not dungeon.in_bounds(-1, 0)
    assert not dungeon.in_bounds(0, -1)


def test_setitem_converts_characters():
    dungeon = create_map(2, 2)
    dungeon[1, 0] = "$"
    assert dungeon[1, 0] is Tile.TREASURE
    dungeon[0, 1] = Tile.MONSTER
    assert dungeon[0, 1] is Tile.MONSTER
    assert dungeon[0, 0] is Tile.OPEN


def test_setitem_rejects_unknown_character():
    dungeon = create_map(1, 1)
    with pytest.raises(ValueError):
        dungeon[0, 0] = "x"
    assert dungeon[0, 0] is Tile.OPEN


@pytest.mark.parametrize("key", [(2, 0), (0, 2), (-1, 0), (0, -1)])
def test_index_outside_raises(key):
    dungeon = create_map(2, 2)
    with pytest.raises(IndexError):
        dungeon[key]
    with pytest.raises(IndexError):
        dungeon[key] = Tile.PILLAR
    assert dungeon == create_map(2, 2)
    assert not dungeon.in_bounds(*key)


def test_equality():
    first = create_map(2, 2)
    second = create_map(2, 2)
    assert first == second
    second[0, 0] = Tile.PILLAR
    assert first != second
    assert create_map(0, 2) != create_map(0, 3)


def test_parse_example_level():
    dungeon, player = parse_level(EXAMPLE)
    assert dungeon.rows == 5
    assert dungeon.cols == 3
    assert (player.row, player.col, player.treasure) == (3, 0, 0)
    assert _rows(dungeon) == EXAMPLE_ROWS
    assert dungeon[3, 0] is Tile.PLAYER


def test_load_example_level(tmp_path):
    path = tmp_path / "example.txt"
    path.write_text(EXAMPLE)
    dungeon, player = load_level(path)
    assert _rows(dungeon) == EXAMPLE_ROWS
    assert (player.row, player.col) == (3, 0)
    dungeon_again, _ = load_level(str(path))
    assert dungeon_again == dungeon


def test_load_missing_file(tmp_path):
    with pytest.raises(LevelError):
        load_level(tmp_path / "absent.txt")


def test_tiles_may_be_adjacent():
    dungeon, player = parse_level("1 3 0 0\n-$!")
    assert _rows(dungeon) == ["o$!"]
    assert (player.row, player.col) == (0, 0)


def test_door_alone_is_enough():
    dungeon, _ = parse_level("1 2 0 1 ? -")
    assert _rows(dungeon) == ["?o"]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "x 3 0 0",
        "2 3 0",
        "2 y 0 0 - - - - - !",
    ],
)
def test_bad_header(text):
    with pytest.raises(LevelError):
        parse_level(text)


@pytest.mark.parametrize("text", ["0 1 0 0 !", "1 0 0 0 !", "-1 2 0 0 - !"])
def test_empty_dimensions(text):
    with pytest.raises(LevelError):
        parse_level(text)


@pytest.mark.parametrize(
    "text",
    ["1 2 0 2 - !", "1 2 1 0 - !", "1 2 -1 0 - !", "1 2 0 -1 - !"],
)
def test_start_outside(text):
    with pytest.raises(LevelError):
        parse_level(text)


def test_too_large():
    with pytest.raises(LevelError):
        parse_level("65536 65536 0 0")


def test_too_few_tiles():
    with pytest.raises(LevelError):
        parse_level("2 2 0 0 - ! -")


def test_extra_tiles():
    with pytest.raises(LevelError):
        parse_level("1 2 0 0 - ! $")


@pytest.mark.parametrize("text", ["1 2 0 0 - x", "1 3 0 0 - ! o"])
def test_unrecognised_tile(text):
    with pytest.raises(LevelError):
        parse_level(text)


def test_no_door_or_exit():
    with pytest.raises(LevelError):
        parse_level("1 2 0 0 - $")


@pytest.mark.parametrize("start_tile", ["+", "M", "$", "@"])
def test_start_must_be_open(start_tile):
    with pytest.raises(LevelError):
        parse_level(f"1 2 0 0 {start_tile} !")


def test_level_error_is_value_error():
    with pytest.raises(ValueError):
        parse_level("1 2 0 0 - $")