import pytest

from advent.cli import main

DAY01 = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"

DAY14 = """\
p=0,4 v=3,-3
p=6,3 v=-1,-3
p=10,3 v=-1,2
p=2,0 v=2,-1
p=0,0 v=1,3
p=3,0 v=-2,-2
p=7,6 v=-1,-3
p=3,0 v=-1,-2
p=9,3 v=2,3
p=7,3 v=-1,2
p=2,4 v=2,-3
p=9,5 v=-3,-3
"""


def test_day01_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "day01.txt"
    path.write_text(DAY01)
    assert main(["2024", "1", str(path)]) == 0
    out = capsys.readouterr().out
    assert out == "2024: Day 01 part 1: 11\n2024: Day 01 part 2: 31\n"


def test_day14_uses_area_options(tmp_path, capsys):
    path = tmp_path / "day14.txt"
    path.write_text(DAY14)
    assert main(["2024", "14", str(path), "--rows", "7", "--cols", "11"]) == 0
    assert capsys.readouterr().out == "2024: Day 14 part 1: 12\n"


def test_day25_prints_listing(tmp_path, capsys):
    path = tmp_path / "day25.txt"
    path.write_text("jqt: rhn xhk\nrsh: frs\n")
    assert main(["2023", "25", str(path)]) == 0
    assert capsys.readouterr().out == "Node 0: jqt: rhn -- xhk -- \nNode 1: rsh: frs -- \n"


def test_missing_input_file_fails(tmp_path, capsys):
    assert main(["2024", "1", str(tmp_path / "absent.txt")]) == 1
    assert "Error reading" in capsys.readouterr().err


def test_unknown_day_is_a_usage_error(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(DAY01)
    with pytest.raises(SystemExit) as excinfo:
        main(["2024", "30", str(path)])
    assert excinfo.value.code == 2


def test_malformed_input_fails(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("p=1,2 v=x,y\n")
    assert main(["2024", "14", str(path)]) == 1
    assert "Error solving" in capsys.readouterr().err