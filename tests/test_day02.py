from aoc24.solutions.day02 import main, part_one, part_two

EXAMPLE = "7 6 4 2 1\n1 2 7 8 9\n9 7 6 2 1\n1 3 2 4 5\n8 6 4 4 1\n1 3 6 7 9\n"


def test_part_one():
    assert part_one(EXAMPLE) == 2


def test_part_two():
    assert part_two(EXAMPLE) == 4


def test_single_bad_level_can_be_removed():
    assert part_one("1 3 2 4 5") == 0
    assert part_two("1 3 2 4 5") == 1


def test_main_prints_results(tmp_path, monkeypatch, capsys):
    inputs = tmp_path / "data" / "inputs"
    inputs.mkdir(parents=True)
    (inputs / "02.txt").write_text(EXAMPLE, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    main([])
    out = capsys.readouterr().out
    assert "\x1b[1m2\x1b[0m" in out
    assert "\x1b[1m4\x1b[0m" in out