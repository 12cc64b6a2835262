"""
Services Package

Contains all business logic and service classes.
"""

from .errors import (
    EmptyDictionaryError, GameError, GuessValidationError, InvalidLengthError, RoundOverError,
    UnknownWordError
)
from .game_service import GameService, PlayerRound, RoundSession, normalize_guess
from .grader import grade
from .menu_service import GameRouter, MultiplayerSetup
from .scoring import compute_game_stats, count_verdicts, points_for, round_total, score_round
from .series_service import CumulativeScoreboard, SeriesAggregator, SoloSession
from .word_selector import WordSelector, pick_word, safe_word_length

__all__ = [
    'EmptyDictionaryError', 'GameError', 'GuessValidationError', 'InvalidLengthError',
    'RoundOverError', 'UnknownWordError',
    'GameService', 'PlayerRound', 'RoundSession', 'normalize_guess',
    'grade',
    'GameRouter', 'MultiplayerSetup',
    'compute_game_stats', 'count_verdicts', 'points_for', 'round_total', 'score_round',
    'CumulativeScoreboard', 'SeriesAggregator', 'SoloSession',
    'WordSelector', 'pick_word', 'safe_word_length'
]
