"""Tests for the command line entry point."""

from __future__ import annotations

import pytest

from havarot import main as cli
from havarot.connectors import BaseConnector


class StubConnector(BaseConnector):
    def __init__(self, verses):
        self.verses = verses
        self.references = []

    def get_verses(self, reference):
        self.references.append(reference)
        return self.verses


def test_prints_syllables_and_flags(capsys):
    assert cli.main(["מַדּוּעַ"]) == 0
    out = capsys.readouterr().out.strip()
    syllables, flags = out.split("  ")
    assert syllables.count("·") == 2
    assert flags == "[C, -, CAF]"


def test_one_line_per_word(capsys):
    assert cli.main(["אֵ֥ת הַשָּׁמַ֖יִם"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 2


def test_structure(capsys):
    assert cli.main(["יָם", "--structure"]) == 0
    out = capsys.readouterr().out
    assert "י|ָ|ם" in out


def test_schema_changes_syllables(capsys):
    cli.main(["שָׁמְרוּ"])
    traditional = capsys.readouterr().out
    cli.main(["שָׁמְרוּ", "--schema", "tiberian"])
    tiberian = capsys.readouterr().out
    assert traditional.count("·") == 2
    assert tiberian.count("·") == 1


def test_no_qamets_qatan(capsys):
    cli.main(["כָּל־", "--no-qamets-qatan"])
    assert "\u05C7" not in capsys.readouterr().out


def test_reads_file(tmp_path, capsys):
    path = tmp_path / "verse.txt"
    path.write_text("אֵ֥ת\n", encoding="utf-8")
    assert cli.main(["--file", str(path)]) == 0
    assert capsys.readouterr().out.startswith("א")


def test_fetches_reference(monkeypatch, capsys):
    stub = StubConnector(["אֵ֥ת"])
    monkeypatch.setattr(cli, "get_default_connector", lambda config: stub)
    assert cli.main(["--ref", "Genesis 1:1"]) == 0
    assert stub.references == ["Genesis 1:1"]
    assert capsys.readouterr().out.strip() != ""


def test_text_without_niqqud_fails(capsys):
    assert cli.main(["שלום"]) == 1
    assert "niqqud" in capsys.readouterr().err


def test_missing_file_fails(tmp_path, capsys):
    assert cli.main(["--file", str(tmp_path / "missing.txt")]) == 1
    assert "error" in capsys.readouterr().err


def test_connection_error_fails(monkeypatch, capsys):
    class Offline(BaseConnector):
        def get_verses(self, reference):
            raise ConnectionError("offline")

    monkeypatch.setattr(cli, "get_default_connector", lambda config: Offline())
    assert cli.main(["--ref", "Genesis 1:1"]) == 1
    assert "offline" in capsys.readouterr().err


def test_source_is_required():
    with pytest.raises(SystemExit):
        cli.main([])


def test_structure_of_verse_with_divine_name(capsys):
    assert cli.main(["וַיֹּ֥אמֶר יְהוָ֖ה אֶל־מֹשֶׁ֥ה", "--structure"]) == 0
    captured = capsys.readouterr()
    assert len(captured.out.splitlines()) == 3
    assert captured.err == ""
