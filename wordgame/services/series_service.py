"""
Series Service

Folds finished rounds into running totals: per multiplayer series, across
every series of the process lifetime, and across a solo session.
"""

from typing import Dict, List, Optional

from ..models.game import RoundScore
from ..models.series import (
    SeriesRow, SeriesSummary, SeriesTotals, SingleGameLeader, SoloSessionSummary
)


def summarize_totals(totals: Dict[str, SeriesTotals]) -> SeriesSummary:
    """
    Builds a leaderboard from per-player totals.

    Standings are sorted by total, highest first; equal totals keep the
    order in which players first appeared. Leader ties go to the player
    encountered first.
    """
    rows = [
        SeriesRow(
            name=name,
            total=info.total_across_games,
            average=info.average_per_game,
            best=info.best_single_guess if info.best_single_guess is not None else 0,
            worst=info.worst_single_guess if info.worst_single_guess is not None else 0,
            bonus=info.bonus_across_games,
            penalty=info.penalty_across_games
        )
        for name, info in totals.items()
    ]

    leader_single_game: Optional[SingleGameLeader] = None
    for name, info in totals.items():
        if not info.per_game_totals:
            continue
        points = max(info.per_game_totals)
        if leader_single_game is None or points > leader_single_game.points:
            leader_single_game = SingleGameLeader(
                name=name, points=points, game_at=info.per_game_totals.index(points) + 1
            )

    return SeriesSummary(
        rows=rows,
        standings=sorted(rows, key=lambda row: row.total, reverse=True),
        leader_single_game=leader_single_game,
        leader_average=max(rows, key=lambda row: row.average) if rows else None,
        leader_best=max(rows, key=lambda row: row.best) if rows else None,
        leader_worst=min(rows, key=lambda row: row.worst) if rows else None
    )


class SeriesAggregator:
    """Running totals for the games of one multiplayer series."""

    def __init__(self):
        self.totals: Dict[str, SeriesTotals] = {}

    def record_round(self, name: str, score: RoundScore) -> SeriesTotals:
        """
        Folds one finished round into the player's series totals.

        Args:
            name: Player display name
            score: Final score of the player's round

        Returns:
            SeriesTotals: The player's updated totals
        """
        totals = self.totals.setdefault(name, SeriesTotals())
        totals.total_across_games += score.total
        totals.per_game_totals.append(score.total)
        totals.track_single_guesses(list(score.per_guess_points))
        totals.bonus_across_games += score.bonus
        totals.penalty_across_games += score.penalty
        return totals

    def summary(self) -> SeriesSummary:
        return summarize_totals(self.totals)


class CumulativeScoreboard:
    """
    All-series totals for the lifetime of a game router.

    Never reset; only shown once a series has completed before the
    current one started.
    """

    def __init__(self):
        self.totals: Dict[str, SeriesTotals] = {}
        self.series_completed = 0

    @property
    def has_history(self) -> bool:
        return self.series_completed > 0

    def prior(self, name: str) -> SeriesTotals:
        """Totals from completed series, empty for a new name."""
        return self.totals.get(name) or SeriesTotals()

    def merge(self, series: SeriesAggregator) -> None:
        for name, info in series.totals.items():
            self.totals.setdefault(name, SeriesTotals()).absorb(info)
        self.series_completed += 1

    def summary(self) -> SeriesSummary:
        return summarize_totals(self.totals)


class SoloSession:
    """Flat list of finished solo rounds."""

    def __init__(self):
        self.scores: List[RoundScore] = []

    def record(self, score: RoundScore) -> None:
        self.scores.append(score)

    @property
    def rounds(self) -> int:
        return len(self.scores)

    @property
    def total(self) -> int:
        return sum(score.total for score in self.scores)

    def summary(self) -> Optional[SoloSessionSummary]:
        """Session rollup, only available once 2 or more rounds were played."""
        if len(self.scores) < 2:
            return None

        totals = [score.total for score in self.scores]
        best, worst = max(totals), min(totals)
        return SoloSessionSummary(
            rounds=len(totals),
            total=sum(totals),
            average=sum(totals) / len(totals),
            best=best,
            best_at=totals.index(best) + 1,
            worst=worst,
            worst_at=totals.index(worst) + 1
        )
