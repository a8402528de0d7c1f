"""Line-oriented terminal input and output for the clinic menus."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

CLEAR_SCREEN = "\033[H\033[2J"
INVALID_OPTION = (
    "\n\n~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n"
    "⚠️ Opción inválida - Intente nuevamente ⚠️\n"
    "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~\n\n"
)


class Console:
    """Reads answers from one text stream and writes messages to another."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def say(self, text: str) -> None:
        """Write text exactly as given."""
        self.stdout.write(text)
        self.stdout.flush()

    def ask(self, prompt: str) -> str:
        """Show a prompt and return the next input line without its line ending.

        Raises EOFError when input is exhausted.
        """
        self.say(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def ask_int(self, prompt: str) -> int:
        """Ask until the answer is an integer and return it."""
        while True:
            answer = self.ask(prompt).strip()
            try:
                return int(answer)
            except ValueError:
                self.say(INVALID_OPTION)

    def clear(self) -> None:
        """Clear the terminal screen."""
        self.say(CLEAR_SCREEN)