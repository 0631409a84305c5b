import pytest

from fdfview.mapfile import HeightMap, MapError, parse_map, read_map


def test_parse_simple_map():
    heightmap = parse_map(["0 0 0\n", "0 10 0\n"])
    assert heightmap.width == 3
    assert heightmap.height == 2
    assert heightmap.at(1, 1) == 10
    assert heightmap.rows[0] == (0, 0, 0)


def test_last_line_without_newline():
    heightmap = parse_map(["1 2\n", "3 4"])
    assert heightmap.rows == ((1, 2), (3, 4))


def test_repeated_spaces_and_negative_values():
    heightmap = parse_map(["  -5   7\n"])
    assert heightmap.rows == ((-5, 7),)


def test_trailing_text_after_digits_is_ignored():
    heightmap = parse_map(["10,0xFF 3\n"])
    assert heightmap.rows == ((10, 3),)


def test_ragged_map_is_rejected():
    with pytest.raises(MapError):
        parse_map(["1 2 3\n", "1 2\n"])


def test_empty_map_is_rejected():
    with pytest.raises(MapError):
        parse_map([])


def test_value_out_of_int_range():
    with pytest.raises(MapError):
        parse_map(["1 2147483648\n"])


def test_int_limits_accepted():
    heightmap = parse_map(["-2147483648 2147483647\n"])
    assert heightmap.rows == ((-2147483648, 2147483647),)


def test_at_outside_map():
    heightmap = parse_map(["1 2\n"])
    with pytest.raises(IndexError):
        heightmap.at(2, 0)


def test_inconsistent_heightmap():
    with pytest.raises(MapError):
        HeightMap(2, 1, ((1,),))


def test_read_map_file(tmp_path):
    path = tmp_path / "pyramid.fdf"
    path.write_text("0 0 0\n0 5 0\n0 0 0\n")
    heightmap = read_map(path)
    assert (heightmap.width, heightmap.height) == (3, 3)
    assert heightmap.at(1, 1) == 5


def test_read_missing_file(tmp_path):
    with pytest.raises(MapError):
        read_map(tmp_path / "missing.fdf")


def test_read_empty_file(tmp_path):
    path = tmp_path / "empty.fdf"
    path.write_text("")
    with pytest.raises(MapError):
        read_map(path)