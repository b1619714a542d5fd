import io
import sys
import time

import pytest

from doggie_daycare import menu


@pytest.fixture
def fake_io(monkeypatch):
    def setup(text):
        stdout = io.StringIO()
        monkeypatch.setattr(sys, "stdin", io.StringIO(text))
        monkeypatch.setattr(sys, "stdout", stdout)
        monkeypatch.setattr(time, "sleep", lambda seconds: None)
        return stdout

    return setup


def test_visible_length_plain_text():
    assert menu.visible_length("hello") == 5
    assert menu.visible_length("") == 0


def test_visible_length_counts_emoji_as_one():
    assert menu.visible_length("🐶 dog") == len("🐶 dog")


def test_visible_length_skips_colour_code_and_following_text():
    assert menu.visible_length("\033[31mred") == 0
    assert menu.visible_length("ab\033[31m") == 2


def test_bordered_box_borders():
    lines = menu.bordered_box([]).splitlines()
    assert lines[0] == "\033[36m╭" + "-" * 58 + "╮\033[0m"
    assert lines[-1] == "\033[36m╰" + "-" * 58 + "╯\033[0m"
    assert len(lines) == 2


def test_bordered_box_centres_lines():
    lines = menu.bordered_box(["hi", "odd"]).splitlines()
    assert len(lines) == 4
    side = "\033[36m│\033[0m"
    for row, text in zip(lines[1:3], ["hi", "odd"]):
        assert row.startswith(side) and row.endswith(side)
        body = row[len(side):-len(side)]
        assert len(body) == 58
        assert body.strip() == text
        left = len(body) - len(body.lstrip(" "))
        right = len(body) - len(body.rstrip(" "))
        assert right - left in (0, 1)


def test_bordered_box_long_line_gets_no_padding():
    text = "x" * 70
    body = menu.bordered_box([text]).splitlines()[1]
    assert text in body
    assert " " not in body


def test_read_intro_reads_lines(tmp_path):
    path = tmp_path / "intro.txt"
    path.write_text("first\n\nthird 🐾\n", encoding="utf-8")
    assert menu.read_intro(path) == ["first", "", "third 🐾"]


def test_read_intro_missing_file_falls_back(tmp_path, capsys):
    lines = menu.read_intro(tmp_path / "missing.txt")
    assert lines == list(menu.DEFAULT_INTRO)
    assert lines[0] == "🐶  Welcome to Doggie Day Care!  🐶"
    assert "Could not open intro file" in capsys.readouterr().err


def test_main_exit(fake_io, tmp_path):
    intro = tmp_path / "intro.txt"
    intro.write_text("Hello pups\n", encoding="utf-8")
    out = fake_io("8\n")
    assert menu.main([str(intro)]) == 0
    text = out.getvalue()
    assert "Hello pups" in text
    assert "Goodbye! Woof woof!" in text
    assert "Exit Game" in text


def test_main_invalid_choice_then_exit(fake_io, tmp_path):
    intro = tmp_path / "intro.txt"
    intro.write_text("Hi\n", encoding="utf-8")
    out = fake_io("9\nabc\n8\n")
    assert menu.main([str(intro)]) == 0
    assert out.getvalue().count("Invalid choice! Please try again.") == 2


def test_main_starts_a_game(fake_io, tmp_path):
    intro = tmp_path / "intro.txt"
    intro.write_text("Hi\n", encoding="utf-8")
    out = fake_io("2\n\nquit\n8\n")
    assert menu.main([str(intro)]) == 0
    text = out.getvalue()
    assert "Starting Tic-Tac-Bone 🐾..." in text
    assert "BONE vs SKULL TIC-TAC-TOE" in text
    assert "Goodbye! Woof woof!" in text


def test_main_end_of_input_returns(fake_io, tmp_path):
    intro = tmp_path / "intro.txt"
    intro.write_text("Hi\n", encoding="utf-8")
    out = fake_io("")
    assert menu.main([str(intro)]) == 0
    assert "Goodbye" not in out.getvalue()