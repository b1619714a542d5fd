"""Main menu of the day-care: show the intro and start the chosen game."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from . import (
    bone_finder,
    dog_jump,
    food_catcher,
    obstacle_course,
    simon_barks,
    tic_tac_bone,
    word_search,
)
from .terminal import Console

BOX_WIDTH = 60
CYAN = "\033[36m"
RESET = "\033[0m"
INTRO_FILE = "doggie_daycare_intro.txt"
EXIT_CHOICE = 8

DEFAULT_INTRO = (
    "🐶  Welcome to Doggie Day Care!  🐶",
    "",
    "You work at a dog daycare center!",
    "Play games with the pups to keep them happy and healthy.",
    "",
    "Choose a game to start:",
)

GAME_NAMES = (
    "Memory Bone Match 🦴",
    "Tic-Tac-Bone 🐾",
    "Hungry Pup Feeder 🍖",
    "Dog Jump Challenge 🐕",
    "Obstacle Course 🚧",
    "Simon Barks 🎵",
    "Word Search 🏁",
)


def visible_length(text: str) -> int:
    """Count the characters of a line that show on screen, skipping colour codes.

    Once a colour code has been seen, characters up to and including the next
    'm' are not counted either.
    """
    count = 0
    in_escape = False
    i = 0
    n = len(text)
    while i < n:
        if text[i] == "\033" and i + 1 < n and text[i + 1] == "[":
            in_escape = True
            i += 2
            while i < n and text[i] != "m":
                i += 1
            i += 1
            continue
        if not in_escape:
            count += 1
        elif text[i] == "m":
            in_escape = False
        i += 1
    return count


def bordered_box(lines: Sequence[str]) -> str:
    """Centre each line inside a cyan box sixty columns wide."""
    inner = BOX_WIDTH - 2
    out = [f"{CYAN}╭{'-' * inner}╮{RESET}\n"]
    for line in lines:
        padding = max(0, inner - visible_length(line))
        left = padding // 2
        right = padding - left
        out.append(f"{CYAN}│{RESET}{' ' * left}{line}{' ' * right}{CYAN}│{RESET}\n")
    out.append(f"{CYAN}╰{'-' * inner}╯{RESET}\n")
    return "".join(out)


def read_intro(path: str | Path) -> List[str]:
    """Read the intro lines from a file, or fall back to the built-in intro."""
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read().splitlines()
    except OSError:
        sys.stderr.write(f"\033[31mError: Could not open intro file: {path}\033[0m\n")
        return list(DEFAULT_INTRO)


def _games(rng: random.Random) -> List[Callable[[Console], object]]:
    return [
        lambda console: bone_finder.run(console, rng),
        lambda console: tic_tac_bone.run(console),
        lambda console: food_catcher.run(console, rng),
        lambda console: dog_jump.run(console, rng),
        lambda console: obstacle_course.run(console, rng),
        lambda console: simon_barks.run(console, rng),
        lambda console: word_search.run(console, rng),
    ]


def _read_choice(console: Console) -> Optional[int]:
    try:
        return int(console.read_token())
    except ValueError:
        return None


def _menu_loop(intro: Sequence[str], console: Console, rng: random.Random) -> None:
    games = _games(rng)
    while True:
        console.clear()
        console.write(bordered_box(intro))
        for number, name in enumerate(GAME_NAMES, 1):
            console.write(f"  \033[35m{number}.\033[0m {name}\n")
        console.write(f"\n  \033[35m{EXIT_CHOICE}.\033[0m Exit Game\n\n")
        console.write(f"  \033[1mEnter your choice (1-{EXIT_CHOICE}): \033[0m")

        choice = _read_choice(console)
        if choice == EXIT_CHOICE:
            console.clear()
            console.write("\n  \033[32mGoodbye! Woof woof! 🐾\033[0m\n")
            console.pause(1.5)
            return
        if choice is not None and 1 <= choice <= len(GAME_NAMES):
            console.clear()
            console.write(f"\n  \033[33mStarting {GAME_NAMES[choice - 1]}...\033[0m\n")
            console.pause(1)
            games[choice - 1](console)
        else:
            console.write("  \033[31mInvalid choice! Please try again.\033[0m\n")
            console.pause(1)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the day-care menu until the player exits."""
    parser = argparse.ArgumentParser(description="Doggie Day Care terminal games.")
    parser.add_argument(
        "intro",
        nargs="?",
        default=INTRO_FILE,
        help="file holding the intro text shown above the menu",
    )
    args = parser.parse_args(argv)
    intro = read_intro(args.intro)
    console = Console()
    try:
        _menu_loop(intro, console, random.Random())
    except (EOFError, KeyboardInterrupt):
        console.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())