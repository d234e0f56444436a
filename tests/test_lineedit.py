from unittest.mock import patch

import pytest

from winix.lineedit import LineEditor


def test_basic_input_simulation(tmp_path):
    editor = LineEditor(tmp_path / "history.txt")
    line = editor.feed_input(["h", "e", "l", "l", "o", "\n"])
    assert line.strip() == "hello"


def test_feed_input_stops_at_newline_and_handles_backspace(tmp_path):
    editor = LineEditor(tmp_path / "history.txt")
    assert editor.feed_input(list("helx\x7flo\nrest")) == "hello"


def test_history_ignores_duplicates_and_empty_lines(tmp_path):
    editor = LineEditor(tmp_path / "history.txt")
    for entry in ["ls", "ls", "", "pwd", "ls"]:
        editor.add_history_entry(entry)
    assert editor.history == ["ls", "pwd", "ls"]


def test_history_round_trips_through_file(tmp_path):
    path = tmp_path / "history.txt"
    first = LineEditor(path)
    first.add_history_entry("cd somewhere")
    first.add_history_entry("pwd")
    second = LineEditor(path)
    assert second.history == ["cd somewhere", "pwd"]


def test_missing_history_file_starts_empty(tmp_path):
    editor = LineEditor(tmp_path / "absent.txt")
    assert editor.history == []


def test_unwritable_history_still_records(tmp_path):
    editor = LineEditor(tmp_path)
    editor.add_history_entry("echo hi")
    assert editor.history == ["echo hi"]


def test_read_line_uses_prompt(tmp_path):
    editor = LineEditor(tmp_path / "history.txt")
    with patch("builtins.input", return_value="pwd") as fake_input:
        assert editor.read_line() == "pwd"
    assert fake_input.call_args[0][0] == ">> "


def test_read_line_propagates_end_of_input(tmp_path):
    editor = LineEditor(tmp_path / "history.txt")
    with patch("builtins.input", side_effect=EOFError):
        with pytest.raises(EOFError):
            editor.read_line()