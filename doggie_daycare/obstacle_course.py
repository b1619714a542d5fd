"""Obstacle Course: walk the dog to its toy without bumping into anything."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .terminal import Console

DOG = "🐶"
TOY = "🧸"
OBSTACLE = "🚧"
MOVING_OBSTACLE = "🚗"
EMPTY = "⬜"
WALL = "⬛"

FRAME_SECONDS = 0.15
MOVE_EVERY = 10

_DIRECTIONS = {
    "w": (-1, 0),
    "s": (1, 0),
    "a": (0, -1),
    "d": (0, 1),
}


@dataclass(frozen=True)
class Settings:
    """Grid size and obstacle counts for one difficulty."""

    rows: int
    cols: int
    static_obstacles: int
    moving_obstacles: int


_DIFFICULTIES = {
    1: Settings(8, 12, 10, 0),
    2: Settings(12, 18, 20, 2),
    3: Settings(16, 24, 30, 4),
}


def settings_for(choice: int) -> Settings:
    """Settings for menu choice 1 (easy), 2 (medium) or 3 (hard)."""
    try:
        return _DIFFICULTIES[choice]
    except KeyError:
        raise ValueError(f"no difficulty {choice!r}") from None


Position = Tuple[int, int]


class ObstacleCourse:
    """A grid holding the dog, its toy and the obstacles."""

    def __init__(self, settings: Settings, rng: Optional[random.Random] = None) -> None:
        needed = 2 + settings.static_obstacles + settings.moving_obstacles
        if settings.rows < 1 or settings.cols < 1 or needed > settings.rows * settings.cols:
            raise ValueError("the grid is too small for the dog, the toy and the obstacles")
        self.settings = settings
        self.rng = rng if rng is not None else random.Random()
        self.won = False
        self.hit_obstacle = False
        self.grid: List[List[str]] = [[EMPTY] * settings.cols for _ in range(settings.rows)]

        self.dog: Position = self._random_cell(any_cell=True)
        self._set(self.dog, DOG)
        self.toy: Position = self._random_cell()
        self._set(self.toy, TOY)
        for _ in range(settings.static_obstacles):
            self._set(self._random_cell(), OBSTACLE)
        self.moving: List[Position] = []
        for _ in range(settings.moving_obstacles):
            cell = self._random_cell()
            self._set(cell, MOVING_OBSTACLE)
            self.moving.append(cell)

    def _random_cell(self, any_cell: bool = False) -> Position:
        while True:
            cell = (
                self.rng.randrange(self.settings.rows),
                self.rng.randrange(self.settings.cols),
            )
            if any_cell or self._at(cell) == EMPTY:
                return cell

    def _at(self, cell: Position) -> str:
        return self.grid[cell[0]][cell[1]]

    def _set(self, cell: Position, symbol: str) -> None:
        self.grid[cell[0]][cell[1]] = symbol

    def move_dog(self, key: str) -> bool:
        """Move one step for w/a/s/d; True when the dog reaches the toy."""
        dx, dy = _DIRECTIONS.get(key.lower(), (0, 0))
        new = (self.dog[0] + dx, self.dog[1] + dy)
        if not (0 <= new[0] < self.settings.rows and 0 <= new[1] < self.settings.cols):
            return False
        if self._at(new) in (OBSTACLE, MOVING_OBSTACLE):
            self.hit_obstacle = True
            return False
        self._set(self.dog, EMPTY)
        self.dog = new
        self._set(new, DOG)
        self.won = new == self.toy
        return self.won

    def move_obstacles(self) -> None:
        """Shift every moving obstacle one random step, if the way is free."""
        rows, cols = self.settings.rows, self.settings.cols
        moved: List[Position] = []
        for x, y in self.moving:
            self._set((x, y), EMPTY)
            direction = self.rng.randrange(4)
            nx, ny = x, y
            if direction == 0 and x > 0:
                nx -= 1
            if direction == 1 and x < rows - 1:
                nx += 1
            if direction == 2 and y > 0:
                ny -= 1
            if direction == 3 and y < cols - 1:
                ny += 1
            target = self._at((nx, ny))
            if target == DOG:
                self.hit_obstacle = True
                self._set((nx, ny), MOVING_OBSTACLE)
                moved.append((nx, ny))
            elif target == EMPTY:
                self._set((nx, ny), MOVING_OBSTACLE)
                moved.append((nx, ny))
            else:
                self._set((x, y), MOVING_OBSTACLE)
                moved.append((x, y))
        self.moving = moved

    def render(self) -> str:
        """Draw the grid inside a wall."""
        wall = WALL * (self.settings.cols + 2) + "\n"
        body = "".join(WALL + "".join(row) + WALL + "\n" for row in self.grid)
        return wall + body + wall


def _show_instructions(console: Console) -> None:
    console.clear()
    console.write(
        "+----------------------------------------------+\n"
        "|         🐶 Welcome to Dog's Quest!           |\n"
        "+----------------------------------------------+\n"
        "| OBJECTIVE:                                   |\n"
        "| 🧸 Reach the toy without touching obstacles! |\n"
        "|                                              |\n"
        "| CONTROLS:                                    |\n"
        "|   W = Up   S = Down   A = Left   D = Right   |\n"
        "|                                              |\n"
        "| OBSTACLES:                                   |\n"
        "|   🚧 Static obstacles (don't move)            |\n"
        "|   🚗 Moving obstacles (move around!)          |\n"
        "|                                              |\n"
        "| DIFFICULTIES:                                |\n"
        "|  Easy: Static obstacles only                 |\n"
        "|  Medium: 2 moving obstacles                  |\n"
        "|  Hard: 4 moving obstacles                    |\n"
        "|                                              |\n"
        "| Press ENTER to start...                      |\n"
        "+----------------------------------------------+\n"
    )
    console.read_line()


def _choose_settings(console: Console) -> Settings:
    console.write("\nChoose difficulty: 1/2/3\n")
    console.write("1. Easy\n2. Medium\n3. Hard\n> ")
    try:
        return settings_for(int(console.read_token()))
    except ValueError:
        console.write("Invalid choice. Defaulting to Easy.\n")
        return settings_for(1)


def _play_once(course: ObstacleCourse, console: Console) -> bool:
    tick = 0
    with console.raw_mode():
        while not course.won and not course.hit_obstacle:
            console.clear()
            console.write(course.render())
            if console.key_pressed():
                course.move_dog(console.read_key())
            console.pause(FRAME_SECONDS)
            if tick % MOVE_EVERY == 0 and course.settings.moving_obstacles > 0:
                course.move_obstacles()
            tick += 1
    console.clear()
    console.write(course.render())
    return course.won


def play_game(
    settings: Settings, console: Console, rng: Optional[random.Random] = None
) -> bool:
    """Play until the player asks to return to the menu; True if the last game was won."""
    rng = rng if rng is not None else random.Random()
    while True:
        won = _play_once(ObstacleCourse(settings, rng), console)
        if won:
            console.write("\n🎉 You found the toy! You win! 🧸🐾\n")
        else:
            console.write("\n💥 You hit an obstacle! Game Over!\n")
        console.write("Return to main menu? (Y/N): ")
        if console.read_token()[0] in "Yy":
            return won


def run(console: Optional[Console] = None, rng: Optional[random.Random] = None) -> bool:
    """Show the instructions, pick a difficulty and play."""
    console = console if console is not None else Console()
    _show_instructions(console)
    settings = _choose_settings(console)
    return play_game(settings, console, rng)