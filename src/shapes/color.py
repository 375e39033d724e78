"""ANSI foreground colours reported by hits."""

from __future__ import annotations

from enum import Enum


class Color(Enum):
    """SGR foreground codes understood by ANSI terminals."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    RESET = 0

    @property
    def escape(self) -> str:
        return f"\033[{self.value}m"

    def __str__(self) -> str:
        return self.escape
