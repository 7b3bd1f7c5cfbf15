import pytest

from advent2024.day01 import main, parse_lists, similarity_score, total_distance

SAMPLE = """3   4
4   3
2   5
1   3
3   9
3   3
"""


def test_parse_lists_sample():
    assert parse_lists(SAMPLE) == ([3, 4, 2, 1, 3, 3], [4, 3, 5, 3, 9, 3])


def test_parse_lists_skips_blank_lines_and_leading_space():
    assert parse_lists("\n   7   8\n\n9 10\n") == ([7, 9], [8, 10])


@pytest.mark.parametrize("text", ["3   4\n5\n", "3   x\n"])
def test_parse_lists_rejects_bad_lines(text):
    with pytest.raises(ValueError):
        parse_lists(text)


def test_sample_answers():
    left, right = parse_lists(SAMPLE)
    assert total_distance(left, right) == 11
    assert total_distance(right, left) == 11
    assert similarity_score(left, right) == 31


def test_total_distance_of_same_values_in_any_order_is_zero():
    assert total_distance([5, 1, 9, 2], [2, 9, 1, 5]) == 0


def test_total_distance_rejects_uneven_lists():
    with pytest.raises(ValueError):
        total_distance([1, 2], [1])


def test_similarity_score_edges():
    assert similarity_score([1, 2, 3], [4, 5, 6]) == 0
    assert similarity_score([10, 20, 30], [10, 20, 30]) == 60


@pytest.mark.parametrize("extra, expected", [([], "Count: 11"), (["--part", "2"], "Count: 31")])
def test_main_parts(tmp_path, capsys, extra, expected):
    path = tmp_path / "lists.txt"
    path.write_text(SAMPLE)
    assert main([str(path), *extra]) == 0
    assert expected in capsys.readouterr().out


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nowhere.txt")]) == 1
    assert "nowhere.txt" in capsys.readouterr().err