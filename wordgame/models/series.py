"""
Series Data Models

Contains the running totals kept across the games of a multiplayer series,
across all series of a process, and across a solo session.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class SeriesTotals:
    """
    Running totals for one player name.

    The same shape serves a single series and the cumulative
    all-series board.
    """
    total_across_games: int = 0
    per_game_totals: List[int] = field(default_factory=list)
    best_single_guess: Optional[int] = None  # None until the player has guessed at least once
    worst_single_guess: Optional[int] = None
    bonus_across_games: int = 0
    penalty_across_games: int = 0

    @property
    def games_played(self) -> int:
        return len(self.per_game_totals)

    @property
    def average_per_game(self) -> float:
        return self.total_across_games / max(1, self.games_played)

    def absorb(self, other: "SeriesTotals") -> None:
        """Merge another player's totals into this one (series -> cumulative)."""
        self.total_across_games += other.total_across_games
        self.per_game_totals.extend(other.per_game_totals)
        self.bonus_across_games += other.bonus_across_games
        self.penalty_across_games += other.penalty_across_games
        self.track_single_guesses(
            [p for p in (other.best_single_guess, other.worst_single_guess) if p is not None]
        )

    def track_single_guesses(self, points: List[int]) -> None:
        if not points:
            return
        best, worst = max(points), min(points)
        if self.best_single_guess is None or best > self.best_single_guess:
            self.best_single_guess = best
        if self.worst_single_guess is None or worst < self.worst_single_guess:
            self.worst_single_guess = worst


@dataclass(frozen=True)
class SeriesRow:
    name: str
    total: int
    average: float
    best: int
    worst: int
    bonus: int
    penalty: int


@dataclass(frozen=True)
class SingleGameLeader:
    name: str
    points: int
    game_at: int  # 1-based game index within the board's history


@dataclass(frozen=True)
class SeriesSummary:
    """End-of-series (or cumulative) leaderboard with highlights."""
    rows: List[SeriesRow]
    standings: List[SeriesRow]
    leader_single_game: Optional[SingleGameLeader]
    leader_average: Optional[SeriesRow]
    leader_best: Optional[SeriesRow]
    leader_worst: Optional[SeriesRow]


@dataclass(frozen=True)
class SoloSessionSummary:
    rounds: int
    total: int
    average: float
    best: int
    best_at: int
    worst: int
    worst_at: int
