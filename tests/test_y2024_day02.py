import pytest

from advent.y2024_day02 import is_safe, is_safe_with_dampener, parse_reports, solve

EXAMPLE = """\
7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


def test_example_answers():
    assert solve(EXAMPLE) == (2, 4)


def test_parse_reports_reads_every_line():
    reports = parse_reports(EXAMPLE)
    assert len(reports) == 6
    assert reports[0] == [7, 6, 4, 2, 1]
    assert reports[-1] == [1, 3, 6, 7, 9]


def test_parse_reports_skips_blank_lines():
    assert parse_reports("1 2\n\n3 4\n") == [[1, 2], [3, 4]]


def test_parse_reports_rejects_garbage():
    with pytest.raises(ValueError):
        parse_reports("1 2 x\n")


@pytest.mark.parametrize("report", [[7, 6, 4, 2, 1], [1, 3, 6, 7, 9]])
def test_steady_reports_are_safe(report):
    assert is_safe(report)
    assert is_safe(list(reversed(report)))


@pytest.mark.parametrize("report", [[1, 2, 7, 8, 9], [9, 7, 6, 2, 1], [1, 3, 2, 4, 5], [8, 6, 4, 4, 1]])
def test_unsteady_reports_are_unsafe(report):
    assert not is_safe(report)


def test_dampener_rescues_single_bad_level():
    assert is_safe_with_dampener([1, 3, 2, 4, 5])
    assert is_safe_with_dampener([8, 6, 4, 4, 1])


def test_dampener_cannot_rescue_two_big_jumps():
    assert not is_safe_with_dampener([1, 2, 7, 8, 9])


def test_single_level_is_safe():
    assert is_safe([5])


def test_empty_report_raises():
    with pytest.raises(ValueError):
        is_safe([])