import subprocess

import pytest

from aoc24 import aoc_cli
from aoc24.aoc_cli import (
    BadExitStatusError,
    CommandNotCallableError,
    CommandNotFoundError,
    build_args,
)
from aoc24.day import Day


class _Recorder:
    def __init__(self, returncode=0, error=None):
        self.returncode = returncode
        self.error = error
        self.calls = []

    def __call__(self, cmd, *args, **kwargs):
        self.calls.append(list(cmd))
        if self.error is not None:
            raise self.error
        return subprocess.CompletedProcess(cmd, self.returncode)


@pytest.fixture
def no_year(monkeypatch):
    monkeypatch.delenv("AOC_YEAR", raising=False)


def test_build_args_without_year(no_year):
    assert build_args("read", ["--x"], Day(5)) == ["--x", "--day", "05", "read"]


def test_build_args_with_year(monkeypatch):
    monkeypatch.setenv("AOC_YEAR", "2024")
    assert build_args("read", [], Day(5)) == ["--year", "2024", "--day", "05", "read"]


@pytest.mark.parametrize("value", ["abc", "70000", ""])
def test_build_args_ignores_bad_year(monkeypatch, value):
    monkeypatch.setenv("AOC_YEAR", value)
    assert "--year" not in build_args("read", [], Day(5))


def test_read_invokes_tool(monkeypatch, no_year):
    recorder = _Recorder()
    monkeypatch.setattr(subprocess, "run", recorder)
    process = aoc_cli.read(Day(5))
    assert process.returncode == 0
    assert recorder.calls == [
        ["aoc", "--description-only", "--puzzle-file", "data/puzzles/05.md", "--day", "05", "read"]
    ]


def test_download_invokes_tool(monkeypatch, no_year, capsys):
    recorder = _Recorder()
    monkeypatch.setattr(subprocess, "run", recorder)
    aoc_cli.download(Day(5))
    assert recorder.calls[0][-3:] == ["--day", "05", "download"]
    assert "--input-file" in recorder.calls[0]
    out = capsys.readouterr().out
    assert '"data/inputs/05.txt"' in out
    assert '"data/puzzles/05.md"' in out


def test_submit_puts_part_and_answer_last(monkeypatch, no_year):
    recorder = _Recorder()
    monkeypatch.setattr(subprocess, "run", recorder)
    process = aoc_cli.submit(Day(3), 1, "42")
    assert process.returncode == 0
    assert process.args == ["aoc", "--day", "03", "submit", "1", "42"]
    assert recorder.calls == [["aoc", "--day", "03", "submit", "1", "42"]]


def test_bad_exit_status(monkeypatch, no_year):
    monkeypatch.setattr(subprocess, "run", _Recorder(returncode=1))
    with pytest.raises(BadExitStatusError) as info:
        aoc_cli.read(Day(1))
    assert info.value.process.returncode == 1
    assert str(info.value) == "aoc-cli exited with a non-zero status."


def test_not_callable(monkeypatch, no_year):
    monkeypatch.setattr(subprocess, "run", _Recorder(error=OSError("missing")))
    with pytest.raises(CommandNotCallableError, match="aoc-cli could not be called."):
        aoc_cli.read(Day(1))


def test_check_not_found(monkeypatch):
    monkeypatch.setattr(subprocess, "run", _Recorder(error=FileNotFoundError("aoc")))
    with pytest.raises(CommandNotFoundError, match="aoc-cli is not present in environment."):
        aoc_cli.check()


def test_check_runs_version(monkeypatch):
    recorder = _Recorder(returncode=2)
    monkeypatch.setattr(subprocess, "run", recorder)
    assert aoc_cli.check() is None
    assert recorder.calls == [["aoc", "-V"]]