import io

import pytest

from doggie_daycare.terminal import Console
from doggie_daycare.tic_tac_bone import (
    BONE,
    EMPTY,
    SKULL,
    Board,
    parse_move,
    run,
)

LINES = (
    [[(r, c) for c in range(3)] for r in range(3)]
    + [[(r, c) for r in range(3)] for c in range(3)]
    + [[(i, i) for i in range(3)], [(i, 2 - i) for i in range(3)]]
)


def make_console(text=""):
    out = io.StringIO()
    return Console(stdin=io.StringIO(text), stdout=out, sleep=lambda s: None), out


def test_new_board_is_empty():
    board = Board()
    assert not board.is_full()
    assert not board.has_won(BONE)
    assert not board.has_won(SKULL)
    assert all(cell == EMPTY for row in board.cells for cell in row)


@pytest.mark.parametrize("line", LINES)
def test_every_line_wins(line):
    board = Board()
    for row, col in line:
        board.place(row, col, SKULL)
    assert board.has_won(SKULL)
    assert not board.has_won(BONE)


def test_two_in_a_row_does_not_win():
    board = Board()
    board.place(0, 0, BONE)
    board.place(0, 1, BONE)
    assert not board.has_won(BONE)


def test_place_on_taken_square_rejected():
    board = Board()
    board.place(1, 1, BONE)
    with pytest.raises(ValueError, match="Spot taken!"):
        board.place(1, 1, SKULL)
    assert board.cells[1][1] == BONE


def test_place_out_of_range_rejected():
    with pytest.raises(ValueError):
        Board().place(3, 0, BONE)


def test_ai_takes_first_empty_square():
    board = Board()
    board.place(0, 0, BONE)
    assert board.ai_move() == (0, 1)
    assert board.cells[0][1] == SKULL


def test_ai_move_on_full_board():
    board = Board()
    for r in range(3):
        for c in range(3):
            board.place(r, c, BONE)
    assert board.is_full()
    assert board.ai_move() is None


def test_parse_move_round_trips():
    for r, letter in enumerate("ABC"):
        for c in range(3):
            assert parse_move(f"{letter}{c + 1}") == (r, c)
            assert parse_move(f"{letter.lower()}{c + 1}") == (r, c)


@pytest.mark.parametrize("text", ["11", "A", "A12", "quit"])
def test_parse_move_bad_format(text):
    with pytest.raises(ValueError, match="Invalid move"):
        parse_move(text)


@pytest.mark.parametrize("text", ["D1", "A4", "A0", "Z9"])
def test_parse_move_out_of_range(text):
    with pytest.raises(ValueError, match="Invalid position"):
        parse_move(text)


def test_render_shows_marks_and_rows():
    board = Board()
    board.place(2, 2, BONE)
    board.place(0, 0, SKULL)
    text = board.render()
    assert "1   2   3" in text
    assert f"A |{SKULL}|{EMPTY}|{EMPTY}|" in text
    assert f"C |{EMPTY}|{EMPTY}|{BONE}|" in text


def test_run_player_wins():
    console, out = make_console("\nA1 B1 C1\nn\n")
    run(console)
    text = out.getvalue()
    assert "🎉 YOU WON!" in text
    assert "Thanks for playing!" in text


def test_run_skulls_win():
    console, out = make_console("\nB1 C2 C3\nn\n")
    run(console)
    text = out.getvalue()
    assert "💀 SKULLS WON!" in text
    assert "YOU WON" not in text


def test_run_quit_skips_farewell():
    console, out = make_console("\nquit\n")
    run(console)
    assert "Thanks for playing!" not in out.getvalue()


def test_run_rejects_bad_moves_and_replays():
    console, out = make_console("\nZ9 A1 A1 B1 C1\ny\n\nquit\n")
    run(console)
    text = out.getvalue()
    assert "Invalid position! Use A1-C3" in text
    assert "Spot taken!" in text
    assert text.count("YOU WON") == 1
    assert "Thanks for playing!" not in text