"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    DictionaryEntry, GameStats, GuessRecord, PlayerStats, PointValues, RoundScore,
    RoundState, RoundStatus, ScoringConfig, StandingRow, TurnReport, Verdict, VerdictCounts
)
from .series import SeriesRow, SeriesSummary, SeriesTotals, SingleGameLeader, SoloSessionSummary

__all__ = [
    'DictionaryEntry', 'GameStats', 'GuessRecord', 'PlayerStats', 'PointValues', 'RoundScore',
    'RoundState', 'RoundStatus', 'ScoringConfig', 'StandingRow', 'TurnReport', 'Verdict',
    'VerdictCounts',
    'SeriesRow', 'SeriesSummary', 'SeriesTotals', 'SingleGameLeader', 'SoloSessionSummary'
]
