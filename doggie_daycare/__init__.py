"""Dog-themed terminal mini-games gathered behind a single menu."""

__version__ = "1.0.0"