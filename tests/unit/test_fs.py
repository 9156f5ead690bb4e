"""Unit tests for platform filesystem utilities."""

import pytest

from platdetect.platform import fs


class TestIsFile:
    """Tests for regular-file checks."""

    def test_regular_file(self, tmp_path):
        target = tmp_path / "present"
        target.touch()
        assert fs.is_file(target)

    def test_missing(self, tmp_path):
        assert not fs.is_file(tmp_path / "missing")

    def test_directory_is_not_file(self, tmp_path):
        assert not fs.is_file(tmp_path)

    def test_accepts_str_path(self, tmp_path):
        target = tmp_path / "present"
        target.touch()
        assert fs.is_file(str(target))


class TestReadLines:
    """Tests for reading text files line by line."""

    def test_strips_terminators(self, tmp_path):
        target = tmp_path / "lines.txt"
        target.write_bytes(b"one\ntwo\r\nthree")
        assert list(fs.read_lines(target)) == ["one", "two", "three"]

    def test_keeps_blank_lines(self, tmp_path):
        target = tmp_path / "lines.txt"
        target.write_text("a\n\nb\n", encoding="utf-8")
        assert list(fs.read_lines(target)) == ["a", "", "b"]

    def test_is_lazy(self, tmp_path):
        lines = fs.read_lines(tmp_path / "missing")
        with pytest.raises(FileNotFoundError):
            next(lines)

    def test_replaces_bad_bytes(self, tmp_path):
        target = tmp_path / "latin1.txt"
        target.write_bytes(b"NAME=Caf\xe9\nID=x\n")
        lines = list(fs.read_lines(target))
        assert lines[1] == "ID=x"
        assert lines[0].startswith("NAME=Caf")
