"""
Game Data Models

Contains all round-level data structures and enums.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Tuple


class Verdict(Enum):
    """Per-letter grading outcome of a guess against a target word."""
    CORRECT = "CORRECT"
    ALMOST = "ALMOST"
    INCORRECT = "INCORRECT"


class RoundStatus(Enum):
    """Round lifecycle. Every status other than PLAYING is terminal."""
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"

    @property
    def is_terminal(self) -> bool:
        return self is not RoundStatus.PLAYING


@dataclass(frozen=True)
class DictionaryEntry:
    """A playable word and its definition."""
    word: str
    definition: str = ""


@dataclass(frozen=True)
class PointValues:
    """Points awarded per verdict. `incorrect` is usually negative."""
    correct: int = 2
    almost: int = 1
    incorrect: int = -1

    def value_of(self, verdict: Verdict) -> int:
        if verdict is Verdict.CORRECT:
            return self.correct
        if verdict is Verdict.ALMOST:
            return self.almost
        return self.incorrect


@dataclass(frozen=True)
class ScoringConfig:
    """
    Rules for one round or series.

    Only ever replaced between rounds, never while a round is being played.
    """
    word_length: int = 5
    max_guesses: int = 6
    points: PointValues = field(default_factory=PointValues)

    def with_word_length(self, word_length: int) -> "ScoringConfig":
        return replace(self, word_length=word_length)

    @property
    def unused_attempt_value(self) -> int:
        """Worth of one unused attempt: a fully correct word."""
        return self.word_length * self.points.correct


@dataclass(frozen=True)
class GuessRecord:
    """One submitted guess and its verdict row."""
    word: str
    verdicts: Tuple[Verdict, ...]

    @property
    def solved(self) -> bool:
        return all(verdict is Verdict.CORRECT for verdict in self.verdicts)


@dataclass
class RoundState:
    """
    One player's attempt sequence against one secret word.

    Mutated only by the round session that owns it.
    """
    target: DictionaryEntry
    remaining_attempts: int
    attempts: List[GuessRecord] = field(default_factory=list)
    status: RoundStatus = RoundStatus.PLAYING
    remaining_at_quit: int = 0

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal

    @property
    def attempts_used(self) -> int:
        return len(self.attempts)


@dataclass(frozen=True)
class VerdictCounts:
    correct: int = 0
    almost: int = 0
    incorrect: int = 0

    @property
    def total(self) -> int:
        return self.correct + self.almost + self.incorrect


@dataclass(frozen=True)
class RoundScore:
    """Point breakdown of a round. Always derived from a RoundState, never stored as truth."""
    per_guess_points: Tuple[int, ...]
    guess_points: int
    bonus: int
    penalty: int
    total: int


@dataclass(frozen=True)
class PlayerStats:
    """Per-player analytics for one game."""
    name: str
    total: int
    average: float
    best: int
    best_at: int  # 1-based attempt number, 0 when no attempts
    worst: int
    worst_at: int
    bonus: int = 0
    penalty: int = 0


@dataclass(frozen=True)
class StandingRow:
    name: str
    total: int
    bonus: int = 0
    penalty: int = 0


@dataclass(frozen=True)
class GameStats:
    """Standings and leader highlights for one game (or one guess cycle of it)."""
    rows: List[PlayerStats]
    standings: List[StandingRow]
    leader_total: Optional[PlayerStats]
    leader_average: Optional[PlayerStats]
    leader_best: Optional[PlayerStats]
    leader_worst: Optional[PlayerStats]


@dataclass(frozen=True)
class TurnReport:
    """What a multiplayer player is told after each accepted guess."""
    player: str
    game_index: int
    attempt_number: int
    max_guesses: int
    guess: GuessRecord
    counts: VerdictCounts
    points: int
    running_points: int
    bonus_this_turn: int
    locked_bonus: int
    running_all_games: Optional[int] = None
    bonus_all_games: int = 0

