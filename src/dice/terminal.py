"""Small helper for controlling ANSI terminal output."""

from __future__ import annotations

import os
import shutil
import sys
from typing import Optional, TextIO, Tuple

CLEAR_SCREEN = "\033[2J"
CURSOR_HOME = "\033[H"


class TerminalController:
    """Context manager that owns the output stream for the animation."""

    def __init__(self, stream: Optional[TextIO] = None, *, fallback: Tuple[int, int] = (80, 30)) -> None:
        self._stream = stream
        self._fallback = fallback

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def __enter__(self) -> "TerminalController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stream.flush()

    def draw(self, frame: str) -> None:
        stream = self.stream
        stream.write(CLEAR_SCREEN)
        stream.write(CURSOR_HOME)
        stream.write(frame)
        stream.flush()

    def get_size(self) -> os.terminal_size:
        return shutil.get_terminal_size(fallback=self._fallback)

    def size_tuple(self) -> Tuple[int, int]:
        size = self.get_size()
        return size.columns, size.lines
