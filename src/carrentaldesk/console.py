"""Line-oriented text interface."""

from __future__ import annotations

import sys
from typing import TextIO


class Console:
    """Reads operator lines and writes output on a pair of text streams."""

    def __init__(self, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def write(self, text: str = "") -> None:
        print(text, file=self._stdout)

    def write_lines(self, lines: list[str]) -> None:
        for line in lines:
            self.write(line)

    def prompt(self, message: str) -> str:
        """Show ``message`` and return the next input line.

        Raises ``EOFError`` when the input stream is exhausted, like ``input()``.
        """
        self._stdout.write(message)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            self._stdout.write("\n")
            raise EOFError("Input stream closed.")
        return line.rstrip("\r\n")
