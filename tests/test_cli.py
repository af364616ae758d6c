"""Tests for the interactive console program."""

from pyqr import cli


def _answers(monkeypatch, *answers):
    replies = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))


def test_main_prints_and_saves(monkeypatch, tmp_path, capsys):
    """The program prints the symbol and writes the PNG."""
    monkeypatch.chdir(tmp_path)
    _answers(monkeypatch, "HELLO WORLD", "Q", "n", "n")
    assert cli.main() == 0
    out = capsys.readouterr().out
    assert "Using Version 1-Q QR Code (21x21)!" in out
    assert "Best mask:" in out
    assert (tmp_path / "qr_output.png").exists()


def test_main_explains_steps(monkeypatch, tmp_path, capsys):
    """The walkthrough shows every pipeline step."""
    monkeypatch.chdir(tmp_path)
    _answers(monkeypatch, "HELLO WORLD", "", "y", "y")
    assert cli.main() == 0
    out = capsys.readouterr().out
    assert "Step 1: Segment (alphanumeric mode, 11 characters)." in out
    assert "Step 2: Version 1-M selected." in out
    assert "[32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236, 17, 236, 17]" in out
    assert "block 0: [196, 35, 39, 119, 235, 215, 231, 226, 93, 23]" in out


def test_main_reports_bad_level(monkeypatch, tmp_path, capsys):
    """An invalid level is reported instead of raised."""
    monkeypatch.chdir(tmp_path)
    _answers(monkeypatch, "text", "Z", "n", "n")
    assert cli.main() == 1
    assert "Error: Invalid value for ec_level" in capsys.readouterr().out
    assert not (tmp_path / "qr_output.png").exists()
