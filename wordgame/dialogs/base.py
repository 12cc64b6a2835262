"""
Dialog Interface

The only way the game talks to a human: yes/no questions, free-text
lines and plain messages.
"""

from abc import ABC, abstractmethod
from typing import Optional


class Dialog(ABC):
    """
    Collaborator interface consumed by the game services.

    Every call may suspend until the human answers; there is no timeout.
    """

    @abstractmethod
    def ask_yes_no(self, message: str) -> bool:
        """Ask a yes/no question. Dismissing the question counts as no."""

    @abstractmethod
    def ask_line(self, message: str, default: str = "") -> Optional[str]:
        """Ask for a line of text. Returns None when the player cancels."""

    @abstractmethod
    def tell_user(self, message: str) -> None:
        """Show a message and wait until it is acknowledged."""
