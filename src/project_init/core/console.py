"""Coloured status lines for the terminal."""

from __future__ import annotations

import os
import sys
from typing import TextIO

RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
NC = "\033[0m"


def _colour_supported(stream: TextIO) -> bool:
    if os.getenv("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class Console:
    def __init__(self, stream: TextIO | None = None, color: bool | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.color = _colour_supported(self.stream) if color is None else color

    def _mark(self, symbol: str, colour: str) -> str:
        if not self.color:
            return symbol
        return f"{colour}{symbol}{NC}"

    def success(self, message: str) -> None:
        self.line(f"{self._mark('✓', GREEN)} {message}")

    def error(self, message: str) -> None:
        self.line(f"{self._mark('✗', RED)} {message}")

    def info(self, message: str) -> None:
        self.line(f"{self._mark('ℹ', YELLOW)} {message}")

    def line(self, message: str = "") -> None:
        print(message, file=self.stream)
        self.stream.flush()
