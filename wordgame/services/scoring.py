"""
Score Calculator

Turns verdict rows into points and computes round totals, bonuses,
penalties and per-game standings. Every function here is pure: all inputs
are passed explicitly, nothing is read from shared state.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from ..models.game import (
    GameStats, GuessRecord, PlayerStats, PointValues, RoundScore, RoundState,
    RoundStatus, ScoringConfig, StandingRow, Verdict, VerdictCounts
)


def count_verdicts(verdicts: Iterable[Verdict]) -> VerdictCounts:
    correct = almost = incorrect = 0
    for verdict in verdicts:
        if verdict is Verdict.CORRECT:
            correct += 1
        elif verdict is Verdict.ALMOST:
            almost += 1
        else:
            incorrect += 1
    return VerdictCounts(correct=correct, almost=almost, incorrect=incorrect)


def points_for(verdicts: Iterable[Verdict], points: PointValues) -> int:
    """Points for a single guess. May be negative."""
    counts = count_verdicts(verdicts)
    return (counts.correct * points.correct
            + counts.almost * points.almost
            + counts.incorrect * points.incorrect)


def unused_attempts_value(remaining: int, config: ScoringConfig) -> int:
    """Value of `remaining` unused attempts: the bonus formula, also the quit penalty."""
    return remaining * config.unused_attempt_value


def round_total(attempts: Sequence[GuessRecord],
                remaining_attempts: int,
                finished: bool,
                config: ScoringConfig,
                was_quit: bool = False,
                remaining_at_quit: int = 0) -> RoundScore:
    """
    Scores a round from its attempt log.

    Bonus and penalty are only locked in once the round is finished, so a
    mid-round query never previews them.

    Args:
        attempts: Guesses in submission order
        remaining_attempts: Attempts left (0 after a quit)
        finished: Whether the round reached a terminal status
        config: Scoring rules
        was_quit: Whether the round ended by a confirmed quit
        remaining_at_quit: Attempts left at the moment of quitting

    Returns:
        RoundScore with per-guess points, bonus, penalty and total
    """
    per_guess = tuple(points_for(record.verdicts, config.points) for record in attempts)
    guess_points = sum(per_guess)
    bonus = unused_attempts_value(remaining_attempts, config) if finished else 0
    penalty = unused_attempts_value(remaining_at_quit, config) if finished and was_quit else 0
    return RoundScore(
        per_guess_points=per_guess,
        guess_points=guess_points,
        bonus=bonus,
        penalty=penalty,
        total=guess_points + bonus - penalty
    )


def score_round(state: RoundState, config: ScoringConfig, include_bonus: bool = True) -> RoundScore:
    """Scores a RoundState; bonus and penalty only apply once it is terminal."""
    return round_total(
        state.attempts,
        state.remaining_attempts,
        include_bonus and state.is_over,
        config,
        was_quit=state.status is RoundStatus.QUIT,
        remaining_at_quit=state.remaining_at_quit
    )


def _best_and_worst(per_guess: Sequence[int]) -> Tuple[int, int, int, int]:
    if not per_guess:
        return 0, 0, 0, 0
    best_at = max(range(len(per_guess)), key=lambda i: per_guess[i])
    worst_at = min(range(len(per_guess)), key=lambda i: per_guess[i])
    return per_guess[best_at], best_at + 1, per_guess[worst_at], worst_at + 1


def player_stats(name: str, state: RoundState, config: ScoringConfig,
                 include_bonus: bool = True) -> PlayerStats:
    score = score_round(state, config, include_bonus)
    per_guess = score.per_guess_points
    best, best_at, worst, worst_at = _best_and_worst(per_guess)
    return PlayerStats(
        name=name,
        total=score.total,
        average=sum(per_guess) / max(1, len(per_guess)),
        best=best,
        best_at=best_at,
        worst=worst,
        worst_at=worst_at,
        bonus=score.bonus,
        penalty=score.penalty
    )


def _first_leader(rows: List[PlayerStats], key, lowest: bool = False) -> Optional[PlayerStats]:
    # max()/min() return the first extreme element, so ties go to input order
    if not rows:
        return None
    return min(rows, key=key) if lowest else max(rows, key=key)


def compute_game_stats(players: Sequence[Tuple[str, RoundState]],
                       config: ScoringConfig,
                       include_bonus: bool = True) -> GameStats:
    """
    Builds standings and leader highlights for one game.

    With include_bonus the view is "finished only": bonus and penalty show
    for players whose round is terminal and stay hidden for players still
    guessing. Without it every total is guess points only.

    Args:
        players: (display name, round state) pairs in turn order
        config: Scoring rules
        include_bonus: Whether terminal players' bonus/penalty count

    Returns:
        GameStats with standings sorted by total (stable) and four leaders
    """
    rows = [player_stats(name, state, config, include_bonus) for name, state in players]
    standings = [
        StandingRow(name=row.name, total=row.total, bonus=row.bonus, penalty=row.penalty)
        for row in sorted(rows, key=lambda row: row.total, reverse=True)
    ]
    return GameStats(
        rows=rows,
        standings=standings,
        leader_total=_first_leader(rows, lambda row: row.total),
        leader_average=_first_leader(rows, lambda row: row.average),
        leader_best=_first_leader(rows, lambda row: row.best),
        leader_worst=_first_leader(rows, lambda row: row.worst, lowest=True)
    )
