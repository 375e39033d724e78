"""Small helper for controlling ANSI terminal output."""

from __future__ import annotations

import os
import shutil
import sys
from typing import Optional, TextIO, Tuple

CLEAR_SCREEN = "\033[2J"
CURSOR_HOME = "\033[H"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
RESET_STYLE = "\033[0m"


class TerminalController:
    """Context manager that prepares the terminal for smooth animations."""

    def __init__(self, *, clear: bool = True, stream: Optional[TextIO] = None) -> None:
        self._clear = clear
        self._stream = stream
        self._cursor_hidden = False

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def __enter__(self) -> "TerminalController":
        if self._clear:
            self.stream.write(CLEAR_SCREEN)
        self.stream.write(CURSOR_HOME)
        self.stream.write(HIDE_CURSOR)
        self.stream.flush()
        self._cursor_hidden = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()

    def restore(self) -> None:
        if self._cursor_hidden:
            self.stream.write(RESET_STYLE)
            self.stream.write(SHOW_CURSOR)
            self.stream.flush()
            self._cursor_hidden = False

    def draw(self, frame: str) -> None:
        self.stream.write(CURSOR_HOME)
        self.stream.write(frame)
        self.stream.flush()

    def get_size(self) -> os.terminal_size:
        return shutil.get_terminal_size(fallback=(80, 40))

    def size_tuple(self) -> Tuple[int, int]:
        size = self.get_size()
        return size.columns, size.lines
