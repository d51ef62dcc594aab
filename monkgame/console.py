"""Text console used by the game for all player interaction."""

from __future__ import annotations

import sys
from typing import TextIO


class Console:
    """Writes game text and reads whole-number answers from the player."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write text exactly as given."""
        self.stdout.write(text)

    def read_int(self, prompt: str) -> int:
        """Show a prompt and read one integer.

        Raises EOFError when input is exhausted and ValueError when the
        line is not a whole number.
        """
        if prompt:
            self.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("no more input")
        return int(line.strip())