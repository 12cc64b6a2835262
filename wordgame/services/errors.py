"""
Game Errors

Exceptions raised by the game services.
"""


class GameError(Exception):
    """Base class for all game errors."""


class GuessValidationError(GameError):
    """A guess the player can correct by typing another one."""

    def __init__(self, guess: str, message: str):
        super().__init__(message)
        self.guess = guess


class InvalidLengthError(GuessValidationError):
    def __init__(self, guess: str, required_length: int):
        super().__init__(guess, f"Guess must be exactly {required_length} characters")
        self.actual_length = len(guess)
        self.required_length = required_length


class UnknownWordError(GuessValidationError):
    def __init__(self, guess: str):
        super().__init__(guess, f"Word '{guess}' not in dictionary")


class RoundOverError(GameError):
    """Raised when a finished round is asked to accept another move."""


class EmptyDictionaryError(GameError):
    """The configured dictionary has no words to play with."""
