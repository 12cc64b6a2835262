"""
Utilities Package

Contains the structured game logger and the message templates.
"""

from . import messages
from .game_logger import game_logger

__all__ = ['game_logger', 'messages']
