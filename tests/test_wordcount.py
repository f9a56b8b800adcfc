import pytest

from crawlkit.wordcount import SAMPLE_TEXT, count_file_words, main


def test_counts_sample_text(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("rrr pal pardhan", encoding="utf-8")
    assert count_file_words(str(path)) == 3


def test_empty_file_has_no_words(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert count_file_words(str(path)) == 0


def test_any_whitespace_separates_words(tmp_path):
    words = ["one", "two", "three", "four"]
    path = tmp_path / "spaced.txt"
    path.write_text("  one\ttwo\n\n three   four \n", encoding="utf-8")
    assert count_file_words(str(path)) == len(words)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        count_file_words(str(tmp_path / "absent.txt"))


def test_main_writes_sample_and_reports(tmp_path, capsys):
    path = tmp_path / "input.txt"
    assert main([str(path)]) == 0
    assert path.read_text(encoding="utf-8") == SAMPLE_TEXT
    out = capsys.readouterr().out
    assert "Open successfully" in out
    assert f"Words in this file: {len(SAMPLE_TEXT.split())}" in out


def test_main_overwrites_existing_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("old content that is longer than the sample", encoding="utf-8")
    assert main([str(path)]) == 0
    assert path.read_text(encoding="utf-8") == SAMPLE_TEXT


def test_main_reports_unwritable_path(tmp_path, capsys):
    assert main([str(tmp_path / "missing" / "input.txt")]) == 1
    assert "Failed to open file" in capsys.readouterr().err