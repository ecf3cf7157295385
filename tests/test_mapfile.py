import pytest

from kirbymaze.mapfile import (
    GameMap,
    MapError,
    Point,
    parse_map,
    read_lines,
    validate_characters,
    validate_extension,
    validate_length,
    validate_wall,
)

VALID = ["11111", "1PCE1", "11111"]


def _text(game_map):
    return ["".join(row) for row in game_map.rows]


@pytest.mark.parametrize("name", ["map", "map.txt", "map.be", "maps.ber/level"])
def test_extension_rejected(name):
    with pytest.raises(MapError, match="ExtensionError"):
        validate_extension(name)


@pytest.mark.parametrize("name", ["map.ber", "maps/level.ber", "map.berx"])
def test_extension_accepted(name):
    assert validate_extension(name) is None
    with pytest.raises(MapError, match="ExtensionError"):
        validate_extension(name.replace(".ber", ".bar"))


def test_characters():
    assert validate_characters("10CEP") is None
    with pytest.raises(MapError, match="CharacterError : invalid character in map"):
        validate_characters("10X1")
    with pytest.raises(MapError, match="CharacterError"):
        validate_characters("1 1")


def test_length():
    assert validate_length("111", 3) is None
    with pytest.raises(MapError, match="LengthError : inconsistent row width in map"):
        validate_length("1111", 3)


def test_wall_top_and_bottom():
    rows = ["11011", "1P0E1", "11111"]
    with pytest.raises(MapError, match="top/bottom wall must be closed"):
        validate_wall(rows, 0)
    rows = ["11111", "1P0E1", "11101"]
    with pytest.raises(MapError, match="top/bottom wall must be closed"):
        validate_wall(rows, 2)


def test_wall_sides():
    rows = ["11111", "0P0E1", "11111"]
    with pytest.raises(MapError, match="sides must be closed by walls"):
        validate_wall(rows, 1)
    rows = ["11111", "1P0E0", "11111"]
    with pytest.raises(MapError, match="sides must be closed by walls"):
        validate_wall(rows, 1)


def test_read_lines_strips_newlines(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("\n".join(VALID) + "\n")
    assert read_lines(path) == VALID
    path.write_text("\n".join(VALID))
    assert read_lines(path) == VALID


def test_read_lines_keeps_blank_lines(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("111\n\n111\n")
    assert read_lines(path) == ["111", "", "111"]


def test_read_lines_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("")
    assert read_lines(path) == []


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(MapError, match="FileError : failed to open map"):
        read_lines(tmp_path / "missing.ber")


def test_parse_valid_map():
    game_map = parse_map(VALID)
    assert isinstance(game_map, GameMap)
    assert game_map.player == Point(1, 1)
    assert game_map.tile(game_map.player) == "0"
    assert game_map.width == len(VALID[0])
    assert game_map.height == len(VALID)
    assert game_map.count("C") == 1
    assert game_map.count("E") == 1
    assert game_map.count("P") == 0
    assert _text(game_map) == ["11111", "10CE1", "11111"]


def test_tile_outside_grid():
    game_map = parse_map(VALID)
    with pytest.raises(IndexError):
        game_map.tile(Point(len(VALID[0]), 0))
    with pytest.raises(IndexError):
        game_map.tile(Point(0, -1))


def test_parse_read_round_trip(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("\n".join(VALID) + "\n")
    game_map = parse_map(read_lines(path))
    assert game_map.tile(Point(2, 1)) == "C"
    assert game_map.tile(Point(3, 1)) == "E"


@pytest.mark.parametrize(
    "lines, message",
    [
        (["111111", "1PPCE1", "111111"], "more than one player"),
        (["11111", "10CE1", "11111"], "player not found"),
        (["11111", "1P0E1", "11111"], "no coins on map"),
        (["11111", "1PC01", "11111"], "no exit on map"),
        (["111111", "1PCEE1", "111111"], "more than one exit"),
        (["11111", "1PCE1", "1111"], "LengthError"),
        (["11111", "1PXE1", "11111"], "CharacterError"),
        (["11111", "1PCE0", "11111"], "sides must be closed"),
        (["11101", "1PCE1", "11111"], "top/bottom wall"),
        ([], "empty"),
    ],
)
def test_parse_errors(lines, message):
    with pytest.raises(MapError, match=message):
        parse_map(lines)


def test_first_line_characters_caught_by_wall_check():
    with pytest.raises(MapError, match="WallError"):
        parse_map(["1X111", "1PCE1", "11111"])


def test_duplicate_player_reported_before_later_wall_error():
    with pytest.raises(MapError, match="more than one player"):
        parse_map(["111111", "1PPCE1", "100001", "111101"])