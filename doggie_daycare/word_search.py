"""Word Search: find the dog word hidden in a grid of letters."""

from __future__ import annotations

import random
import string
from typing import List, Optional, Set, Tuple

from .terminal import Console

DOG_WORDS = ("BARK", "SIT", "STAY", "PAW", "FETCH", "ROLL", "BONE", "LEASH", "TREAT", "WOOF")
PLACEMENT_ATTEMPTS = 100
HIGHLIGHT = "\033[1;31m"
RESET = "\033[0m"
DIFFICULTIES = {1: "easy", 2: "medium", 3: "hard"}


class WordSearch:
    """A square grid of letters with one target word hidden across or down."""

    def __init__(self, difficulty: str, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.difficulty = difficulty
        if difficulty == "easy":
            self.size = 8
            self.target_word = DOG_WORDS[self.rng.randrange(3)]
        elif difficulty == "medium":
            self.size = 12
            self.target_word = DOG_WORDS[3 + self.rng.randrange(3)]
        else:
            self.size = 16
            self.target_word = DOG_WORDS[6 + self.rng.randrange(4)]

        self.grid: List[List[str]] = [[" "] * self.size for _ in range(self.size)]
        self.highlight: Set[Tuple[int, int]] = set()
        self.start_row = 0
        self.start_col = 0
        self.horizontal = True

        for _ in range(PLACEMENT_ATTEMPTS):
            if self._place_word(self.target_word):
                break
        self._fill_random_letters()

    def _place_word(self, word: str) -> bool:
        horizontal = self.rng.randrange(2) == 0
        span = self.size - len(word) + 1
        if horizontal:
            row = self.rng.randrange(self.size)
            col = self.rng.randrange(span)
            cells = [(row, col + i) for i in range(len(word))]
        else:
            row = self.rng.randrange(span)
            col = self.rng.randrange(self.size)
            cells = [(row + i, col) for i in range(len(word))]
        if any(self.grid[r][c] not in (" ", letter) for (r, c), letter in zip(cells, word)):
            return False
        for (r, c), letter in zip(cells, word):
            self.grid[r][c] = letter
            self.highlight.add((r, c))
        self.start_row, self.start_col, self.horizontal = row, col, horizontal
        return True

    def _fill_random_letters(self) -> None:
        for row in self.grid:
            for c, cell in enumerate(row):
                if cell == " ":
                    row[c] = string.ascii_uppercase[self.rng.randrange(26)]

    def render(self, show_answer: bool = False) -> str:
        """Draw the grid; with show_answer the word is coloured and its place told."""
        out = [f"\nDifficulty: {self.difficulty}\n", f"Find the word: {self.target_word}\n\n"]
        for r, row in enumerate(self.grid):
            for c, letter in enumerate(row):
                if show_answer and (r, c) in self.highlight:
                    out.append(f"{HIGHLIGHT}{letter:>2}{RESET} ")
                else:
                    out.append(f"{letter:>2} ")
            out.append("\n")
        out.append("\n")
        if show_answer:
            direction = "horizontally" if self.horizontal else "vertically"
            out.append(
                f"The word starts at row {self.start_row + 1}, column {self.start_col + 1}"
                f" and goes {direction}.\n"
            )
        return "".join(out)


def _show_instructions(console: Console) -> None:
    console.clear()
    console.write(
        "+--------------------------------------------------+\n"
        "|              🐾 DOG ATE MY HOMEWORK 🐾            |\n"
        "+--------------------------------------------------+\n"
        "|                                                  |\n"
        "|  Uh oh! Your dog ate your homework again!        |\n"
        "|  But wait... Can you find the missing word?      |\n"
        "|                                                  |\n"
        "|  Use your eyes and spot the hidden doggy term!   |\n"
        "|                                                  |\n"
        "|              Press ENTER to continue             |\n"
        "+--------------------------------------------------+\n"
    )
    console.read_line()


def ask_return_to_menu(console: Console) -> bool:
    """Ask whether to leave for the main menu; True on yes."""
    console.write("\nWould you like to go back to the main menu? (yes/no): ")
    return console.read_token().lower() in ("yes", "y")


def _read_int(console: Console) -> Optional[int]:
    try:
        return int(console.read_token())
    except ValueError:
        return None


def _play_difficulty(difficulty: str, console: Console, rng: random.Random) -> None:
    while True:
        puzzle = WordSearch(difficulty, rng)
        console.clear()
        console.write(puzzle.render())
        console.write("Options:\n")
        console.write("1. Show answer\n")
        console.write("2. Try another puzzle\n")
        console.write("3. Choose different difficulty\n")
        console.write("Enter your choice (1-3): ")
        option = _read_int(console)
        if option is None:
            console.write("Invalid input. Try again.\n")
        elif option == 1:
            console.clear()
            console.write(puzzle.render(show_answer=True))
            console.write("Press enter to continue...")
            console.read_line()
        elif option == 2:
            continue
        elif option == 3:
            return
        else:
            console.write("Invalid choice. Try again.\n")


def run(console: Optional[Console] = None, rng: Optional[random.Random] = None) -> None:
    """Offer puzzles by difficulty until the player goes back to the menu."""
    console = console if console is not None else Console()
    rng = rng if rng is not None else random.Random()
    _show_instructions(console)
    while True:
        console.clear()
        console.write("WORD SEARCH: DOG ATE MY HOMEWORK - FIND THE MISSING WORD\n")
        console.write("=======================================================\n")
        console.write("Choose difficulty level:\n")
        console.write("1. Easy (8x8 grid)\n")
        console.write("2. Medium (12x12 grid)\n")
        console.write("3. Hard (16x16 grid)\n")
        console.write("Enter your choice (1-3): ")
        choice = _read_int(console)
        if choice not in DIFFICULTIES:
            console.write("Invalid input. Try again.\n")
            continue
        _play_difficulty(DIFFICULTIES[choice], console, rng)
        if ask_return_to_menu(console):
            return