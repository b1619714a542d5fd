"""Dog Jump Challenge: jump over bushes, birds and bombs as they scroll past."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from typing import List, Optional

from .terminal import Console

WIDTH = 60
HEIGHT = 20
DOG_X = 5
JUMP_HEIGHT = 4
GROUND_OFFSET = 3
MAX_ENERGY = 5
MAX_HEALTH = 3
ENERGY_REGEN_FRAMES = 10
FRAME_SECONDS = 0.05

DOG_EMOJI = "🐕"
BUSH_EMOJI = "🌿"
BIRD_EMOJI = "🦅"
BOMB_EMOJI = "💣"

JUMP_KEYS = (" ", "j", "J")


class GameLevel(enum.IntEnum):
    """The three levels, played in this order."""

    EASY = 0
    MEDIUM = 1
    HARD = 2

    @property
    def label(self) -> str:
        return ("Easy", "Medium", "Hard")[self]


@dataclass
class Obstacle:
    """Something scrolling towards the dog."""

    x: int
    y: int
    emoji: str
    scored: bool = False
    active: bool = True


class StepResult(enum.Enum):
    """How a frame ended."""

    RUNNING = "running"
    WON = "won"
    LOST = "lost"
    BOMB = "bomb"


class DogJump:
    """State of one level: the dog, its stats and the obstacles."""

    def __init__(self, level: GameLevel, rng: Optional[random.Random] = None) -> None:
        self.level = GameLevel(level)
        self.rng = rng if rng is not None else random.Random()
        self.ground_y = HEIGHT - GROUND_OFFSET
        self.dog_y = self.ground_y
        self.jump_counter = 0
        self.score = 0
        self.health = MAX_HEALTH
        self.energy = MAX_ENERGY
        self.target = 10 + 5 * self.level
        self.speed = 2 if self.level == GameLevel.HARD else 1
        self.frame_count = 0
        self._energy_frames = 0
        self.obstacles: List[Obstacle] = [Obstacle(WIDTH, self.ground_y, BUSH_EMOJI)]
        if self.level >= GameLevel.MEDIUM:
            self.obstacles.append(Obstacle(WIDTH + 20, self.ground_y - 2, BIRD_EMOJI))
        if self.level == GameLevel.HARD:
            self.obstacles.append(Obstacle(WIDTH + 40, self.ground_y - 1, BOMB_EMOJI))

    def jump(self) -> bool:
        """Start a jump if on the ground with energy left; tell whether it began."""
        if self.jump_counter == 0 and self.energy > 0:
            self.jump_counter = JUMP_HEIGHT * 2
            self.energy -= 1
            return True
        return False

    def _spawn(self) -> None:
        kinds = {GameLevel.EASY: 1, GameLevel.MEDIUM: 2, GameLevel.HARD: 3}[self.level]
        kind = self.rng.randrange(kinds)
        y, emoji = self.ground_y, BUSH_EMOJI
        if kind == 1 and self.level >= GameLevel.MEDIUM:
            y, emoji = self.ground_y - 2, BIRD_EMOJI
        elif kind == 2 and self.level == GameLevel.HARD:
            y, emoji = self.ground_y - 1, BOMB_EMOJI
        self.obstacles.append(Obstacle(WIDTH + self.rng.randrange(10), y, emoji))

    def step(self, key: Optional[str] = None) -> StepResult:
        """Advance one frame, handling an optional key press."""
        self.frame_count += 1
        if key in JUMP_KEYS:
            self.jump()

        if self.jump_counter > 0:
            if self.jump_counter > JUMP_HEIGHT:
                self.dog_y = self.ground_y - (2 * JUMP_HEIGHT - self.jump_counter + 1)
            else:
                self.dog_y = self.ground_y - self.jump_counter
            self.jump_counter -= 1
        else:
            self.dog_y = self.ground_y

        if self.frame_count % (30 - 5 * self.level) == 0:
            self._spawn()

        for obstacle in self.obstacles:
            if not obstacle.active:
                continue
            obstacle.x -= self.speed
            colliding = abs(obstacle.x - DOG_X) <= 1 and self.dog_y == obstacle.y
            above = self.dog_y < obstacle.y and DOG_X - 2 <= obstacle.x <= DOG_X + 2
            if above and not obstacle.scored:
                self.score += 1
                obstacle.scored = True
            elif colliding and not obstacle.scored:
                if obstacle.emoji == BOMB_EMOJI:
                    return StepResult.BOMB
                self.health -= 1
                obstacle.scored = True
                obstacle.active = False
            if obstacle.x < -5:
                obstacle.active = False

        self.obstacles = [o for o in self.obstacles if o.active]

        if self.health <= 0:
            return StepResult.LOST
        if self.score >= self.target:
            return StepResult.WON

        self._energy_frames += 1
        if self._energy_frames >= ENERGY_REGEN_FRAMES and self.energy < MAX_ENERGY:
            self.energy += 1
            self._energy_frames = 0
        return StepResult.RUNNING

    def render(self) -> str:
        """Draw the frame, the dog, the obstacles, the ground and the status lines."""
        out = ["\033[0;0H", "▔" * WIDTH, "\n"]
        out.append(("┃" + " " * (WIDTH - 2) + "┃\n") * (HEIGHT - 1))
        out.append("▁" * WIDTH)
        out.append(f"\033[{self.dog_y};{DOG_X}H{DOG_EMOJI}")
        for obstacle in self.obstacles:
            if 0 <= obstacle.x < WIDTH and obstacle.active:
                out.append(f"\033[{obstacle.y};{obstacle.x}H{obstacle.emoji}")
        out.append(f"\033[{self.ground_y + 1};0H" + "▔" * WIDTH)
        out.append("\033[0;0H")
        out.append(f"Health: {self.health} Energy: {self.energy}\n")
        out.append(f"Score: {self.score}/{self.target} Level: {self.level.label}\n")
        out.append("Jump using SPACE or J. Avoid all obstacles.")
        return "".join(out)


def _show_instructions(level: GameLevel, console: Console) -> None:
    console.clear()
    if level == GameLevel.EASY:
        title = "🐾 LEVEL 1: EASY - JUMP OVER 🌿"
    elif level == GameLevel.MEDIUM:
        title = "🟡 LEVEL 2: MEDIUM - AVOID 🌿 & 🦅"
    else:
        title = "🔴 LEVEL 3: HARD - AVOID 🌿, 🦅 & 💣"
    lines = [
        "INSTRUCTIONS:",
        "You are a dog 🐕. Use SPACE or J to jump.",
        "Avoid 🌿 (bushes) on the ground.",
    ]
    if level >= GameLevel.MEDIUM:
        lines.append("Avoid 🦅 (birds) in the air.")
    if level == GameLevel.HARD:
        lines.append("Avoid 💣 (bombs) - instant loss.")
    lines.append("You gain +1 point for jumping OVER any obstacle.")
    lines.append("Game starts in:")

    console.write(f"\033[2;0H{title}\n")
    for offset, line in enumerate(lines):
        console.write(f"\033[{4 + offset};0H{line}")
        console.pause(0.5)
    for count in (3, 2, 1):
        console.write(f"\033[13;0H{count}")
        console.pause(1)
    console.write("\033[14;0HGO")
    console.pause(1)
    console.clear()


def _win_animation(level: GameLevel, console: Console) -> None:
    message = f"🎉 YOU WON LEVEL {level + 1}! 🎉"
    for _ in range(4):
        console.clear()
        console.write(message + "\n")
        console.pause(0.3)
    console.pause(1)


def _lose_animation(level: GameLevel, console: Console) -> bool:
    if level == GameLevel.HARD:
        message = "💣 You hit a bomb! GAME OVER!"
    else:
        message = f"💀 You lost Level {level + 1}"
    console.clear()
    console.write(message + "\n")
    console.write(f"Press any key to retry Level {level + 1}")
    console.read_key()
    return False


def play_level(
    level: GameLevel, console: Console, rng: Optional[random.Random] = None
) -> bool:
    """Play one level; True on a win, False on a loss."""
    level = GameLevel(level)
    game = DogJump(level, rng)
    with console.raw_mode():
        _show_instructions(level, console)
        while True:
            key = console.read_key() if console.key_pressed() else None
            result = game.step(key)
            if result is not StepResult.RUNNING:
                break
            console.clear()
            console.write(game.render())
            console.pause(FRAME_SECONDS)
    if result is StepResult.BOMB:
        return False
    if result is StepResult.LOST:
        return _lose_animation(level, console)
    _win_animation(level, console)
    return True


def run(console: Optional[Console] = None, rng: Optional[random.Random] = None) -> None:
    """Play every level, retrying each until it is won."""
    console = console if console is not None else Console()
    rng = rng if rng is not None else random.Random()
    for level in GameLevel:
        while not play_level(level, console, rng):
            pass
    console.clear()
    console.write("🏆 CONGRATS! YOU BEAT ALL LEVELS! 🏆\n")
    console.write("Press any key to finish.\n")
    console.read_key()