"""
Terminal Dialog

Blocking dialog implementation for playing in a terminal.
"""

import sys
from typing import Callable, Optional, TextIO

from .base import Dialog

_YES_ANSWERS = {"y", "yes", "ok"}


class TerminalDialog(Dialog):
    """
    Reads answers with `input_func` and writes messages to `output`.

    End of input (Ctrl-D) on a line request is a cancellation.
    """

    def __init__(self, input_func: Callable[[str], str] = input, output: Optional[TextIO] = None):
        self.input_func = input_func
        self.output = output or sys.stdout

    def _write(self, message: str) -> None:
        self.output.write(f"\n{message}\n")
        self.output.flush()

    def _read(self, prompt: str) -> Optional[str]:
        try:
            return self.input_func(prompt)
        except EOFError:
            return None

    def ask_yes_no(self, message: str) -> bool:
        self._write(message)
        answer = self._read("[y/n] > ")
        return answer is not None and answer.strip().lower() in _YES_ANSWERS

    def ask_line(self, message: str, default: str = "") -> Optional[str]:
        self._write(message)
        answer = self._read(f"[{default}] > " if default else "> ")
        if answer is None:
            return None
        answer = answer.strip()
        return answer or default

    def tell_user(self, message: str) -> None:
        self._write(message)
