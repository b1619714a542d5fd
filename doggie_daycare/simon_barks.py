"""Simon Barks: memorise a sequence of dog commands and enter it back."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from .terminal import Console

COMMANDS = ("🐶 Sit", "🦴 Roll", "🐾 Stay", "🎾 Fetch", "🛏️ Sleep", "🚶 Walk")
ROUNDS = (("Easy", 4), ("Medium", 6), ("Hard", 8))
MEMORISE_SECONDS = 5


def generate_sequence(length: int, rng: Optional[random.Random] = None) -> List[int]:
    """Pick a random sequence of command indexes."""
    rng = rng if rng is not None else random.Random()
    return [rng.randrange(len(COMMANDS)) for _ in range(length)]


def _mismatch_reason(entry: str, sequence: Sequence[int]) -> Optional[str]:
    if len(entry) != len(sequence):
        return "Wrong number of commands."
    for position, (char, expected) in enumerate(zip(entry, sequence), 1):
        if ord(char) - ord("1") != expected:
            return f"Incorrect sequence at position {position}."
    return None


def check_sequence(entry: str, sequence: Sequence[int]) -> bool:
    """True if the typed digits (1-based) match the sequence exactly."""
    return _mismatch_reason(entry, sequence) is None


def render_menu() -> str:
    """List the commands with the numbers used to enter them."""
    return "\n📋 Command List:\n" + "".join(
        f" {number}) {command}\n" for number, command in enumerate(COMMANDS, 1)
    )


def play_round(length: int, console: Console, rng: Optional[random.Random] = None) -> bool:
    """Show a sequence, hide it, and ask for it back; True on a correct answer."""
    sequence = generate_sequence(length, rng)
    console.write("\n🧠 Memorize This Command Sequence:\n")
    console.write("".join(f"{COMMANDS[index]}  " for index in sequence) + "\n")
    console.pause(MEMORISE_SECONDS)
    console.clear()
    console.write(render_menu())
    console.write("📥 Enter the sequence using numbers (e.g., 1231): ")
    entry = console.read_token()

    reason = _mismatch_reason(entry, sequence)
    if reason is not None:
        console.write(f"❌ {reason}\n")
        console.write("💥 Oops! Better luck next time!\n")
        return False
    console.write("✅ Well done! You got the sequence right! 🎉\n")
    return True


def _show_instructions(console: Console) -> None:
    console.write("🐕‍🦺 Welcome to the Simon Stays Memory Game 🧠\n")
    console.write("------------------------------------------\n")
    console.write("👉 You will be shown a sequence of dog commands (emojis included).\n")
    console.write("👉 Memorize the command order. It will disappear in a few seconds.\n")
    console.write("👉 You'll then select the correct sequence using numbers from the list below.\n")
    console.write("👉 Each level changes how many commands you need to remember:\n")
    console.write("   🟢 Easy: 4 Commands\n")
    console.write("   🟡 Medium: 6 Commands\n")
    console.write("   🔴 Difficult: 8 Commands\n")
    console.write("\nPress ENTER to continue...\n")
    console.read_line()


def run(console: Optional[Console] = None, rng: Optional[random.Random] = None) -> None:
    """Play the easy, medium and hard rounds in turn."""
    console = console if console is not None else Console()
    rng = rng if rng is not None else random.Random()
    console.clear()
    _show_instructions(console)
    for name, length in ROUNDS:
        console.write(f"\nStarting {name} Level ({length} commands)...\n")
        play_round(length, console, rng)
    console.write("\n🎉 All levels completed! Returning to the Main Menu...\n")
    console.pause(2)
    console.clear()