"""Memory Bone Match: memorise where the bones are hidden, then dig them up."""

from __future__ import annotations

import enum
import random
import string
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .terminal import Console

GRID_SIZE = 8
COLUMNS = "ABCDEFGH"
BONE = "🦴"
UNKNOWN = "❓"
DECORATIONS = ("🌼", "🐝", "🦋", "🍄", "🌻", "🐞", "🌷", "🪴")
MEMORISE_SECONDS = 5
HINT_SECONDS = 3


@dataclass(frozen=True)
class Level:
    """A difficulty level: how many bones to find and how many hints are given."""

    name: str
    bones: int
    hints: int


LEVELS = (
    Level("Easy", 3, 1),
    Level("Medium", 5, 2),
    Level("Difficult", 7, 3),
    Level("Master", 10, 3),
    Level("Impossible", 15, 2),
)


class Outcome(enum.Enum):
    """What digging at a spot turned up."""

    BONE = "bone"
    DECORATION = "decoration"
    ALREADY_REVEALED = "already revealed"


class BoneBoard:
    """An 8x8 field with hidden bones and what the player has uncovered so far."""

    def __init__(self, bones: int, rng: Optional[random.Random] = None) -> None:
        if not 0 <= bones <= GRID_SIZE * GRID_SIZE:
            raise ValueError(f"cannot hide {bones} bones on an {GRID_SIZE}x{GRID_SIZE} grid")
        rng = rng if rng is not None else random.Random()
        self.bones = bones
        self.found = 0
        layout: List[List[Optional[str]]] = [[None] * GRID_SIZE for _ in range(GRID_SIZE)]
        placed = 0
        while placed < bones:
            x, y = rng.randrange(GRID_SIZE), rng.randrange(GRID_SIZE)
            if layout[x][y] is None:
                layout[x][y] = BONE
                placed += 1
        self.visible: List[List[str]] = [
            [cell if cell is not None else rng.choice(DECORATIONS) for cell in row]
            for row in layout
        ]
        self.hidden: List[List[str]] = [[UNKNOWN] * GRID_SIZE for _ in range(GRID_SIZE)]

    def reveal(self, row: int, col: int) -> Outcome:
        """Uncover one spot (zero-based) and report what was there."""
        if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
            raise ValueError("Invalid coordinates! Use A1-H8")
        if self.hidden[row][col] != UNKNOWN:
            return Outcome.ALREADY_REVEALED
        cell = self.visible[row][col]
        self.hidden[row][col] = cell
        if cell == BONE:
            self.found += 1
            return Outcome.BONE
        return Outcome.DECORATION

    def is_complete(self) -> bool:
        """True once every bone has been found."""
        return self.found >= self.bones


def parse_coordinate(text: str) -> Tuple[int, int]:
    """Turn a spot such as 'B3' into zero-based (row, column)."""
    if len(text) != 2 or text[0] not in string.ascii_letters or text[1] not in string.digits:
        raise ValueError("Invalid input! Use format like A1")
    col = COLUMNS.find(text[0].upper())
    row = int(text[1])
    if col < 0 or not 1 <= row <= GRID_SIZE:
        raise ValueError("Invalid coordinates! Use A1-H8")
    return row - 1, col


def render_grid(grid: Sequence[Sequence[str]]) -> str:
    """Draw a grid with lettered columns and numbered rows."""
    header = "   " + "".join(f" {letter}  " for letter in COLUMNS) + "\n"
    rows = "".join(
        f"{number} " + "".join(f" {cell} " for cell in row) + "\n"
        for number, row in enumerate(grid, 1)
    )
    return header + rows


def _show_instructions(console: Console) -> None:
    console.clear()
    console.write("🐕 BONE FINDER GAME - INSTRUCTIONS 🦴\n\n")
    console.write("1. You'll see a grid with hidden bones (🦴) and decorations\n")
    console.write("2. Memorize bone locations within 5 seconds\n")
    console.write("3. Enter coordinates (like A1, B2) to find bones\n")
    console.write("   - or type 'quit' to exit to main menu\n")
    console.write("4. Use 'hint' to reveal the board temporarily (limited uses)\n")
    console.write("5. Find all bones to complete the level\n\n")
    console.write("LEVELS:\n")
    for level in LEVELS:
        console.write(f"- {level.name}: {level.bones} bones, {level.hints} hints\n")
    console.write("\nPress Enter to begin...")
    console.read_line()


def play_level(level: Level, console: Console, rng: Optional[random.Random] = None) -> bool:
    """Play one level; True when all bones are found, False when the player quits."""
    board = BoneBoard(level.bones, rng)
    hints_left = level.hints

    console.clear()
    console.write(f"🐕 LEVEL: {level.name} 🦴\n")
    console.write(f"Find {level.bones} bones | {level.hints} hints available\n\n")
    console.write(f"Memorize the bone locations ({MEMORISE_SECONDS} seconds):\n")
    console.write(render_grid(board.visible))
    console.pause(MEMORISE_SECONDS)
    console.clear()

    while not board.is_complete():
        console.write(f"🐕 LEVEL: {level.name} 🦴\n")
        console.write(render_grid(board.hidden))
        console.write(f"\n🦴 Bones: {board.found}/{level.bones}")
        console.write(f" | 💡 Hints: {hints_left}/{level.hints}\n")
        console.write("Enter (A1-H8), 'hint', or 'quit': ")

        command = console.read_token().lower()

        if command == "quit":
            console.write("Returning to main menu...\n")
            console.pause(1)
            return False

        if command == "hint":
            if hints_left > 0:
                hints_left -= 1
                console.write(f"💡 Showing board for {HINT_SECONDS} seconds...\n")
                console.write(render_grid(board.visible))
                console.pause(HINT_SECONDS)
            else:
                console.write("🚫 NO MORE HINTS AVAILABLE!\n")
                console.pause(1)
            console.clear()
            continue

        try:
            row, col = parse_coordinate(command)
        except ValueError as err:
            console.write(f"❌ {err}\n")
            console.pause(1)
            console.clear()
            continue

        outcome = board.reveal(row, col)
        if outcome is Outcome.ALREADY_REVEALED:
            console.write("⏳ Already checked this spot!\n")
        elif outcome is Outcome.BONE:
            console.write(f"🎉 BONE FOUND! ({board.found}/{level.bones})\n")
        else:
            console.write(f"Found {board.visible[row][col]} (not a bone)\n")
        console.pause(1)
        console.clear()

    console.write(f"🎊 LEVEL {level.name} COMPLETED! 🐶\n")
    console.write("Final board:\n")
    console.write(render_grid(board.visible))
    console.write("\nPress Enter to continue...")
    console.read_line()
    return True


def run(console: Optional[Console] = None, rng: Optional[random.Random] = None) -> bool:
    """Play every level in turn; True if the player beats them all."""
    console = console if console is not None else Console()
    rng = rng if rng is not None else random.Random()
    _show_instructions(console)

    for number, level in enumerate(LEVELS, 1):
        console.clear()
        console.write(f"🚀 STARTING LEVEL {number}: {level.name}\n")
        console.write(f"Find {level.bones} bones | {level.hints} hints available\n")
        console.write("Press Enter to begin...")
        console.read_line()
        if not play_level(level, console, rng):
            console.write("Exiting to main menu...\n")
            return False

    console.write("\n🎉 CONGRATULATIONS! YOU BEAT ALL LEVELS! 🏆\n")
    console.write("🐶 Your dog is proud of you! 🦴\n")
    console.write("Press Enter to return to main menu...\n")
    console.read_line()
    return True