"""Hungry Pup Feeder: steer the dog to catch good food and dodge junk and bombs."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from typing import List, Optional

from .terminal import Console

WIDTH = 60
HEIGHT = 18
BORDER_PADDING = 1
WIN_GOOD_FOOD_COUNT = 15
LOSE_BAD_FOOD_COUNT = 3
INSTRUCTION_DELAY = 0.8
SPAWN_EVERY = 5
FALL_DELAY = 2

NOTHING = " "
GOOD_FOOD = "🍗"
BAD_FOOD = "🗑️"
BOMB = "💣"

COLOR_RESET = "\033[0m"
COLOR_DOG = "\033[38;5;208m"
COLOR_GOOD = "\033[92m"
COLOR_BAD = "\033[91m"
COLOR_BOMB = "\033[95m"
COLOR_TEXT = "\033[96m"
COLOR_BORDER = "\033[38;5;118m"

_FOOD_COLORS = {GOOD_FOOD: COLOR_GOOD, BAD_FOOD: COLOR_BAD, BOMB: COLOR_BOMB}


class Difficulty(enum.IntEnum):
    """The three levels, played in this order."""

    EASY = 1
    MEDIUM = 2
    HARD = 3


@dataclass
class FoodItem:
    """One cell of the sky: what is falling there and how long it waits."""

    type: str = NOTHING
    delay: int = 0

    @property
    def is_empty(self) -> bool:
        return self.type == NOTHING


def game_speed(difficulty: Difficulty) -> float:
    """Seconds between frames for a difficulty."""
    if difficulty == Difficulty.EASY:
        return 0.15
    if difficulty == Difficulty.MEDIUM:
        return 0.10
    return 0.06


class FoodCatcher:
    """State of one level: the falling food, the dog and the score."""

    def __init__(self, difficulty: Difficulty, rng: Optional[random.Random] = None) -> None:
        self.difficulty = Difficulty(difficulty)
        self.rng = rng if rng is not None else random.Random()
        self.dog_pos = WIDTH // 2
        self.good_eaten = 0
        self.bad_eaten = 0
        self.frame = 0
        self.dog_bounce = False
        self.caught_bomb = False
        self.food: List[List[FoodItem]] = [
            [FoodItem() for _ in range(WIDTH)] for _ in range(HEIGHT)
        ]

    def move_dog(self, key: str) -> None:
        """Step left on 'a' or right on 'd', staying inside the border."""
        if key == "a" and self.dog_pos > BORDER_PADDING:
            self.dog_pos -= 1
        elif key == "d" and self.dog_pos < WIDTH - BORDER_PADDING - 1:
            self.dog_pos += 1
        self.dog_bounce = not self.dog_bounce

    def update_food(self) -> None:
        """Let food fall, drop what the dog missed, and spawn new food."""
        for i in range(HEIGHT - 2, -1, -1):
            row, below = self.food[i], self.food[i + 1]
            for j, item in enumerate(row):
                if item.is_empty:
                    continue
                if item.delay <= 0 and below[j].is_empty:
                    below[j] = item
                    row[j] = FoodItem()
                else:
                    item.delay -= 1

        bottom = self.food[HEIGHT - 1]
        for j, item in enumerate(bottom):
            if not item.is_empty and abs(j - self.dog_pos) > 1:
                bottom[j] = FoodItem()

        if self.frame % SPAWN_EVERY == 0:
            col = self.rng.randrange(WIDTH)
            roll = self.rng.randrange(10)
            kind = GOOD_FOOD
            if roll < 2:
                kind = BAD_FOOD
            elif self.difficulty == Difficulty.HARD and roll == 9:
                kind = BOMB
            self.food[0][col] = FoodItem(kind, FALL_DELAY)

    def check_catch(self) -> None:
        """Eat whatever lies on the bottom row within one cell of the dog."""
        bottom = self.food[HEIGHT - 1]
        for pos in range(self.dog_pos - 1, self.dog_pos + 2):
            if not 0 <= pos < WIDTH:
                continue
            kind = bottom[pos].type
            if kind == GOOD_FOOD:
                self.good_eaten += 1
            elif kind == BAD_FOOD:
                self.bad_eaten += 1
            elif kind == BOMB:
                self.caught_bomb = True
            else:
                continue
            bottom[pos] = FoodItem()

    def step(self, key: Optional[str] = None) -> None:
        """Advance one frame, handling an optional key press."""
        if key is not None:
            key = key.lower()
            if key in ("a", "d"):
                self.move_dog(key)
        self.update_food()
        self.check_catch()
        self.frame += 1

    def is_lost(self) -> bool:
        """True after a bomb or too much junk food."""
        return self.caught_bomb or self.bad_eaten >= LOSE_BAD_FOOD_COUNT

    def is_won(self) -> bool:
        """True once enough good food is eaten without losing."""
        return not self.is_lost() and self.good_eaten >= WIN_GOOD_FOOD_COUNT

    def render(self) -> str:
        """Draw the border, the food, the dog and the counters."""
        out = [
            COLOR_BORDER,
            "╔" + "═" * WIDTH + "╗\n",
            ("║" + " " * WIDTH + "║\n") * HEIGHT,
            "╚" + "═" * WIDTH + "╝" + COLOR_RESET + "\n",
        ]
        for i, row in enumerate(self.food):
            for j, item in enumerate(row):
                if not item.is_empty:
                    color = _FOOD_COLORS.get(item.type, "")
                    out.append(f"\033[{i + 1};{j + 1}H{color}{item.type}{COLOR_RESET}")
        dog = "🐶" if self.dog_bounce else "🐕"
        out.append(f"\033[{HEIGHT};{self.dog_pos + 1}H{COLOR_DOG}{dog}{COLOR_RESET}")
        out.append(
            f"\033[{HEIGHT + 3};0H{COLOR_TEXT}"
            f"Good Food ({GOOD_FOOD}): {self.good_eaten}\n"
            f"Bad Food ({BAD_FOOD}): {self.bad_eaten}{COLOR_RESET}"
        )
        return "".join(out)


def _show_instructions(difficulty: Difficulty, console: Console) -> None:
    console.clear()
    console.write(COLOR_TEXT)
    if difficulty == Difficulty.EASY:
        header = "🐶 WELCOME TO DOG FOOD CATCHER 🐶"
    elif difficulty == Difficulty.MEDIUM:
        header = "🟡 LEVEL 2: MEDIUM MODE 🟡"
    else:
        header = "🔴 LEVEL 3: HARD MODE 🔴"
    lines = [
        "Instructions:",
        "- Use 'a' to move left, 'd' to move right.",
        "- Catch 🍗 (good food), avoid 🗑️ (junk food).",
        "- Eat 15 good food to win.",
        "- Avoid eating 3 bad food, or you lose.",
        "- Avoid bombs (💣) or game over!" if difficulty == Difficulty.HARD else "",
        "Game starting in:",
    ]
    console.write(f"\033[2;0H{header}\n")
    for offset, line in enumerate(lines):
        console.write(f"\033[{4 + offset};0H{line}")
        console.pause(INSTRUCTION_DELAY)
    for count in (3, 2, 1):
        console.write(f"\033[11;0H{count}")
        console.pause(1)
    console.write("\033[13;0HGO!")
    console.pause(1)
    console.clear()


def _win_animation(console: Console) -> None:
    for _ in range(10):
        console.clear()
        console.write(f"{COLOR_TEXT}🎉 LEVEL COMPLETE! 🎉{COLOR_RESET}\n")
        console.pause(0.2)


def _lose_animation(game: FoodCatcher, console: Console) -> bool:
    if game.caught_bomb:
        message = "💣 You caught a bomb! GAME OVER 💣"
    else:
        message = "💀 TOO MUCH JUNK FOOD! 💀"
    console.clear()
    console.write(
        f"{COLOR_TEXT}{message}\nPress any key to retry Level "
        f"{int(game.difficulty)}...{COLOR_RESET}"
    )
    console.read_key()
    return False


def play_level(
    difficulty: Difficulty, console: Console, rng: Optional[random.Random] = None
) -> bool:
    """Play one level; True on a win, False on a loss."""
    _show_instructions(difficulty, console)
    game = FoodCatcher(difficulty, rng)
    with console.raw_mode():
        while not (game.is_won() or game.is_lost()):
            key = console.read_key() if console.key_pressed() else None
            game.step(key)
            console.clear()
            console.write(game.render())
            console.pause(game_speed(difficulty))
    if game.is_lost():
        return _lose_animation(game, console)
    _win_animation(console)
    return True


def run(console: Optional[Console] = None, rng: Optional[random.Random] = None) -> None:
    """Play every level, retrying each until it is won."""
    console = console if console is not None else Console()
    rng = rng if rng is not None else random.Random()
    for difficulty in Difficulty:
        while not play_level(difficulty, console, rng):
            pass
    console.clear()
    console.write(
        f"{COLOR_TEXT}🏆 YOU COMPLETED ALL LEVELS! 🏆\n"
        f"Press any key to continue...{COLOR_RESET}"
    )
    console.read_key()