from aoc24.solutions.day03 import main, part_one, part_two

EXAMPLE = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part_one():
    assert part_one(EXAMPLE) == 161


def test_part_two():
    assert part_two(EXAMPLE) == 48


def test_malformed_instructions_are_ignored():
    assert part_one("mul(4*mul(6,9!?(12,34)mul ( 2 , 4 )") == 0


def test_main_prints_results(tmp_path, monkeypatch, capsys):
    inputs = tmp_path / "data" / "inputs"
    inputs.mkdir(parents=True)
    (inputs / "03.txt").write_text(EXAMPLE, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    main([])
    out = capsys.readouterr().out
    assert "\x1b[1m161\x1b[0m" in out
    assert "\x1b[1m48\x1b[0m" in out