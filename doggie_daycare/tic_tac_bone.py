"""Tic-Tac-Bone: noughts and crosses with bones against a simple skull player."""

from __future__ import annotations

import string
from typing import Iterator, List, Optional, Sequence, Tuple

from .terminal import Console

BONE = "🦴"
SKULL = "💀"
EMPTY = "  "
SIZE = 3
ROW_LETTERS = "ABC"


class Board:
    """A 3x3 board with rows A-C and columns 1-3."""

    def __init__(self) -> None:
        self.cells: List[List[str]] = [[EMPTY] * SIZE for _ in range(SIZE)]

    def place(self, row: int, col: int, mark: str) -> None:
        """Put a mark on an empty square."""
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise ValueError("Invalid position! Use A1-C3")
        if self.cells[row][col] != EMPTY:
            raise ValueError("Spot taken!")
        self.cells[row][col] = mark

    def _lines(self) -> Iterator[Sequence[str]]:
        for i in range(SIZE):
            yield self.cells[i]
            yield [self.cells[r][i] for r in range(SIZE)]
        yield [self.cells[i][i] for i in range(SIZE)]
        yield [self.cells[i][SIZE - 1 - i] for i in range(SIZE)]

    def has_won(self, mark: str) -> bool:
        """True if the mark fills a row, column or diagonal."""
        return any(all(cell == mark for cell in line) for line in self._lines())

    def is_full(self) -> bool:
        """True when no square is empty."""
        return all(cell != EMPTY for row in self.cells for cell in row)

    def ai_move(self) -> Optional[Tuple[int, int]]:
        """Place a skull on the first empty square and return where it went."""
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                if cell == EMPTY:
                    row[c] = SKULL
                    return r, c
        return None

    def render(self) -> str:
        """Draw the board with its row letters and column numbers."""
        separator = "  +---+---+---+\n"
        out = ["\n    1   2   3\n", separator]
        for letter, row in zip(ROW_LETTERS, self.cells):
            out.append(f"{letter} |" + "".join(f"{cell}|" for cell in row) + "\n")
            out.append(separator)
        return "".join(out)


def parse_move(text: str) -> Tuple[int, int]:
    """Turn a move such as 'B2' into zero-based (row, column)."""
    if len(text) != 2 or text[0] not in string.ascii_letters or text[1] not in string.digits:
        raise ValueError("Invalid move! Use format like A1")
    row = ord(text[0].upper()) - ord("A")
    col = ord(text[1]) - ord("1")
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise ValueError("Invalid position! Use A1-C3")
    return row, col


def _show_instructions(console: Console) -> None:
    console.write("\n🐕 BONE vs SKULL TIC-TAC-TOE 🐕\n")
    console.write("HOW TO PLAY:\n")
    console.write("1. Enter moves like A1, B2, C3\n")
    console.write("2. Get 3 in a row to win\n")
    console.write("3. Type 'quit' to exit\n")
    console.write("\nPress Enter to continue...")
    console.read_line()


def _play_game(console: Console) -> bool:
    """Play one game; False if the player typed quit."""
    board = Board()
    _show_instructions(console)
    console.write("🐕 BONE vs SKULL TIC-TAC-TOE 🐕\n")
    while True:
        console.write(board.render())
        console.write(f"\nYour move ({BONE}): ")
        text = console.read_token()
        if text == "quit":
            return False
        try:
            row, col = parse_move(text)
            board.place(row, col, BONE)
        except ValueError as err:
            console.write(f"{err}\n")
            continue

        if board.has_won(BONE):
            message = "🎉 YOU WON!"
        elif board.is_full():
            message = "😐 TIE!"
        else:
            board.ai_move()
            if board.has_won(SKULL):
                message = "💀 SKULLS WON!"
            elif board.is_full():
                message = "😐 TIE!"
            else:
                continue
        console.write(board.render())
        console.write(message + "\n")
        return True


def run(console: Optional[Console] = None) -> None:
    """Play games until the player declines a rematch or quits."""
    console = console if console is not None else Console()
    while True:
        if not _play_game(console):
            return
        console.write("Play again? (y/n): ")
        if console.read_token()[0] not in "yY":
            break
    console.write("Thanks for playing!\n")