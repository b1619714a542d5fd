import io
import random
import string

import pytest

from doggie_daycare.word_search import DOG_WORDS, WordSearch, ask_return_to_menu, run
from doggie_daycare.terminal import Console


def make_console(text):
    out = io.StringIO()
    return Console(stdin=io.StringIO(text), stdout=out, sleep=lambda s: None), out


def spelled(puzzle):
    letters = []
    for i in range(len(puzzle.target_word)):
        if puzzle.horizontal:
            r, c = puzzle.start_row, puzzle.start_col + i
        else:
            r, c = puzzle.start_row + i, puzzle.start_col
        assert (r, c) in puzzle.highlight
        letters.append(puzzle.grid[r][c])
    return "".join(letters)


@pytest.mark.parametrize(
    "difficulty, size, words",
    [
        ("easy", 8, DOG_WORDS[:3]),
        ("medium", 12, DOG_WORDS[3:6]),
        ("hard", 16, DOG_WORDS[6:]),
    ],
)
@pytest.mark.parametrize("seed", range(5))
def test_puzzle_shape_and_word(difficulty, size, words, seed):
    puzzle = WordSearch(difficulty, random.Random(seed))
    assert puzzle.size == size
    assert puzzle.target_word in words
    assert len(puzzle.grid) == size
    assert all(len(row) == size for row in puzzle.grid)
    assert all(cell in string.ascii_uppercase for row in puzzle.grid for cell in row)
    assert spelled(puzzle) == puzzle.target_word
    assert len(puzzle.highlight) == len(puzzle.target_word)


def test_unknown_difficulty_is_hard():
    puzzle = WordSearch("whatever", random.Random(1))
    assert puzzle.size == 16
    assert puzzle.target_word in DOG_WORDS[6:]


def test_render_without_answer():
    puzzle = WordSearch("easy", random.Random(3))
    text = puzzle.render()
    assert f"Find the word: {puzzle.target_word}" in text
    assert "Difficulty: easy" in text
    assert "\033[1;31m" not in text
    assert "The word starts" not in text
    grid_lines = [line for line in text.splitlines() if line.startswith(" ")]
    assert len(grid_lines) == 8
    assert grid_lines[0] == "".join(f" {c} " for c in puzzle.grid[0])


def test_render_with_answer():
    puzzle = WordSearch("medium", random.Random(4))
    text = puzzle.render(show_answer=True)
    assert text.count("\033[1;31m") == len(puzzle.target_word)
    direction = "horizontally" if puzzle.horizontal else "vertically"
    assert (
        f"The word starts at row {puzzle.start_row + 1}, column {puzzle.start_col + 1}"
        f" and goes {direction}." in text
    )


@pytest.mark.parametrize("answer, expected", [("yes", True), ("Y", True), ("YES", True), ("no", False), ("x", False)])
def test_ask_return_to_menu(answer, expected):
    console, out = make_console(answer + "\n")
    assert ask_return_to_menu(console) is expected
    assert "(yes/no)" in out.getvalue()


def test_run_easy_then_leave():
    console, out = make_console("\n1\n3\nyes\n")
    run(console, random.Random(0))
    text = out.getvalue()
    assert "DOG ATE MY HOMEWORK" in text
    assert "Difficulty: easy" in text


def test_run_show_answer():
    console, out = make_console("\n2\n1\n\n3\ny\n")
    run(console, random.Random(0))
    text = out.getvalue()
    assert "The word starts at row" in text
    assert "Difficulty: medium" in text


def test_run_invalid_inputs():
    console, out = make_console("\n0\nabc\n1\n7\nzz\n3\nyes\n")
    run(console, random.Random(0))
    text = out.getvalue()
    assert text.count("Invalid input. Try again.") == 3
    assert "Invalid choice. Try again." in text


def test_run_stays_after_no():
    console, out = make_console("\n1\n3\nno\n3\n3\nyes\n")
    run(console, random.Random(0))
    text = out.getvalue()
    assert "Difficulty: easy" in text
    assert "Difficulty: hard" in text


def test_run_ends_on_exhausted_input():
    console, _ = make_console("\n1\n")
    with pytest.raises(EOFError):
        run(console, random.Random(0))