import pytest

from aoc24.day import Day
from aoc24.files import read_file, read_file_part


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    folder = tmp_path / "data" / "examples"
    folder.mkdir(parents=True)
    return folder


def test_read_file(data_dir):
    (data_dir / "05.txt").write_text("hello\nworld\n", encoding="utf-8")
    assert read_file("examples", Day(5)) == "hello\nworld\n"


def test_read_file_accepts_int(data_dir):
    (data_dir / "12.txt").write_text("content", encoding="utf-8")
    assert read_file("examples", 12) == "content"


def test_read_file_part(data_dir):
    (data_dir / "01-2.txt").write_text("second", encoding="utf-8")
    assert read_file_part("examples", Day(1), 2) == "second"


def test_missing_file(data_dir):
    with pytest.raises(FileNotFoundError):
        read_file("examples", Day(9))