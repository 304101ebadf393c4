"""Tests for the command-line driver in main.py"""

import io

import pytest

from main import main


@pytest.fixture
def square(tmp_path):
    path = tmp_path / "square.txt"
    path.write_text("4 4\n0 1\n1 2\n2 3\n3 0\n")
    return path


class TestMain:
    def test_order(self, square, capsys):
        assert main(["order", "--input", str(square)]) == 0
        assert capsys.readouterr().out == "0 3 1 2\n"

    def test_chordal(self, square, capsys):
        assert main(["chordal", "--input", str(square)]) == 0
        assert capsys.readouterr().out == "No Chordal Graph\n"

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("3 3\n0 1\n1 2\n2 0\n"))
        assert main(["chordal"]) == 0
        assert capsys.readouterr().out == "Yes Chordal Graph\n"

    def test_malformed_input(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_text("3 2\n0 1\n")
        assert main(["order", "--input", str(path)]) == 1
        assert capsys.readouterr().out == ""

    def test_missing_file(self, tmp_path):
        assert main(["order", "--input", str(tmp_path / "missing.txt")]) == 1

    def test_unknown_mode(self):
        with pytest.raises(SystemExit):
            main(["diameter"])
