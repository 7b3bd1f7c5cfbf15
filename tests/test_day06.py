import pytest

from advent2024.day06 import (
    Direction,
    Lab,
    PatrolLoopError,
    count_loop_positions,
    main,
)

SAMPLE = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

SAMPLE_PATH = """\
....#.....
....XXXXX#
....X...X.
..#.X...X.
..XXXXX#X.
..X.X.X.X.
.#XXXXXXX.
.XXXXXXX#.
#XXXXXXX..
......#X.."""

TRAPPED = """\
.#..
...#
#^..
..#.
"""


@pytest.fixture
def lab():
    return Lab.parse(SAMPLE)


def test_turn_right_cycle():
    assert Direction.NORTH.turn_right() is Direction.EAST
    assert Direction.WEST.turn_right() is Direction.NORTH
    d = Direction.SOUTH
    for _ in range(4):
        d = d.turn_right()
    assert d is Direction.SOUTH


def test_parse_sample(lab):
    assert lab.start == (6, 4)
    assert lab.height == 10 and lab.width == 10
    assert (0, 4) in lab.obstacles
    assert len(lab.obstacles) == SAMPLE.count("#")


def test_parse_without_guard_raises():
    with pytest.raises(ValueError):
        Lab.parse("..#\n...\n")


def test_parse_ragged_raises():
    with pytest.raises(ValueError):
        Lab.parse("..^\n.\n")


def test_patrol_sample_count(lab):
    assert len(lab.patrol()) == 41


def test_patrol_includes_start_and_avoids_obstacles(lab):
    visited = lab.patrol()
    assert lab.start in visited
    assert not visited & lab.obstacles


def test_render_matches_worked_example(lab):
    assert lab.render(lab.patrol()) == SAMPLE_PATH


def test_render_round_trips_obstacles(lab):
    assert Lab.parse(lab.render(set()) .replace(".", ".", 1)[:0] + SAMPLE).obstacles == lab.obstacles
    assert lab.render(set()).count("#") == len(lab.obstacles)


def test_patrol_straight_out():
    assert Lab.parse("...\n.^.\n").patrol() == frozenset({(0, 1), (1, 1)})


def test_patrol_that_loops_raises():
    with pytest.raises(PatrolLoopError):
        Lab.parse(TRAPPED).patrol()


def test_loops_with_existing_obstacle_or_start_is_false(lab):
    assert lab.loops_with((0, 4)) is False
    assert lab.loops_with(lab.start) is False


def test_loops_with_outside_raises(lab):
    with pytest.raises(ValueError):
        lab.loops_with((10, 0))


def test_loops_with_off_path_cell_is_false(lab):
    off_path = next(
        (r, c)
        for r in range(lab.height)
        for c in range(lab.width)
        if (r, c) not in lab.patrol() and (r, c) not in lab.obstacles
    )
    assert lab.loops_with(off_path) is False


def test_loops_with_already_trapped_lab():
    assert Lab.parse(TRAPPED).loops_with((3, 3)) is True


def test_count_loop_positions_sample(lab):
    assert count_loop_positions(lab) == 6


def test_main_part_one(tmp_path, capsys):
    path = tmp_path / "map.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    assert main([str(path)]) == 0
    assert "Count: 41" in capsys.readouterr().out


def test_main_part_two(tmp_path, capsys):
    path = tmp_path / "map.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    assert main([str(path), "--part", "2"]) == 0
    assert "Count: 6" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 1