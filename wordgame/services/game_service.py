"""
Game Service

Contains the round state machine and the solo and multiplayer game flows.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from ..dialogs.base import Dialog
from ..models.game import (
    DictionaryEntry, GuessRecord, RoundScore, RoundState, RoundStatus, ScoringConfig, TurnReport
)
from ..utils import messages
from ..utils.game_logger import game_logger
from .errors import InvalidLengthError, RoundOverError, UnknownWordError
from .grader import grade
from .scoring import count_verdicts, points_for, score_round, compute_game_stats
from .series_service import CumulativeScoreboard, SeriesAggregator, SoloSession
from .word_selector import WordSelector

_NOT_WORD_CHARS = re.compile(r"[^a-z0-9]")


def normalize_guess(raw: str) -> str:
    """Lowercase and drop everything outside a-z and 0-9."""
    return _NOT_WORD_CHARS.sub("", raw.lower())


class RoundSession:
    """
    State machine for one player's round against one secret word.

    Transitions: PLAYING -> WON | LOST | QUIT. A terminal round rejects
    every further move without changing.
    """

    def __init__(self, target: DictionaryEntry, config: ScoringConfig,
                 is_known_word: Callable[[str], bool]):
        if config.max_guesses <= 0:
            raise ValueError(f"Max guesses must be positive, got {config.max_guesses}")
        if len(target.word) != config.word_length:
            raise ValueError(
                f"Target length {len(target.word)} does not match word length {config.word_length}"
            )
        self.config = config
        self.state = RoundState(target=target, remaining_attempts=config.max_guesses)
        self._is_known_word = is_known_word

    @property
    def status(self) -> RoundStatus:
        return self.state.status

    @property
    def is_over(self) -> bool:
        return self.state.is_over

    def validate_guess(self, raw: str) -> str:
        """
        Normalizes a raw guess and checks it can be played.

        Returns:
            str: The normalized guess

        Raises:
            InvalidLengthError: If the normalized guess has the wrong length
            UnknownWordError: If the word is not in the dictionary
        """
        guess = normalize_guess(raw)
        if len(guess) != self.config.word_length:
            raise InvalidLengthError(guess, self.config.word_length)
        if not self._is_known_word(guess):
            raise UnknownWordError(guess)
        return guess

    def submit_guess(self, raw: str) -> GuessRecord:
        """
        Grades a guess, records it and advances the round status.

        Raises:
            RoundOverError: If the round is already finished
            GuessValidationError: If the guess cannot be played
        """
        if self.is_over:
            raise RoundOverError(f"Round is already {self.status.value}")

        guess = self.validate_guess(raw)
        record = GuessRecord(word=guess, verdicts=tuple(grade(guess, self.state.target.word)))
        self.state.attempts.append(record)
        self.state.remaining_attempts -= 1

        if record.solved:
            self.state.status = RoundStatus.WON
        elif self.state.remaining_attempts <= 0:
            self.state.status = RoundStatus.LOST
        return record

    def quit(self) -> None:
        """Ends the round by a confirmed quit, freezing the remaining attempts for the penalty."""
        if self.is_over:
            raise RoundOverError(f"Round is already {self.status.value}")
        self.state.status = RoundStatus.QUIT
        self.state.remaining_at_quit = self.state.remaining_attempts
        self.state.remaining_attempts = 0

    def score(self, include_bonus: bool = True) -> RoundScore:
        return score_round(self.state, self.config, include_bonus)

    def board(self) -> str:
        return messages.board(self.state.attempts, self.config)


@dataclass
class PlayerRound:
    """A multiplayer participant's round within one game."""
    name: str
    session: RoundSession
    skip_notice_shown: bool = False

    @property
    def state(self) -> RoundState:
        return self.session.state


class GameService:
    """
    Runs rounds through a dialog.

    This class handles:
    - Resolving the playable word length and picking target words
    - The guess prompt / retry / quit-confirmation loop
    - Solo rounds and multiplayer round-robin games and series
    """

    def __init__(self, dialog: Dialog, selector: WordSelector, session_id: Optional[str] = None):
        self.dialog = dialog
        self.selector = selector
        self.session_id = session_id

    def prepare_config(self, config: ScoringConfig) -> ScoringConfig:
        """Clamps the word length to one the dictionary can serve."""
        return config.with_word_length(self.selector.resolve_length(config.word_length))

    def new_round(self, config: ScoringConfig) -> RoundSession:
        target = self.selector.next_word(config.word_length)
        return RoundSession(target, config, self.selector.contains)

    def take_turn(self, session: RoundSession, player: Optional[str] = None) -> Optional[GuessRecord]:
        """
        Obtains one accepted guess from the player, or a confirmed quit.

        Invalid guesses are re-prompted with the same board. A cancelled
        prompt asks for confirmation; reconsidering starts the turn over.

        Returns:
            GuessRecord, or None if the player quit
        """
        board_text = session.board()
        prompt = messages.prompt_guess(player, board_text)

        while True:
            line = self.dialog.ask_line(prompt)

            if line is None:
                if self.dialog.ask_yes_no(messages.END_GAME):
                    prompt = messages.prompt_guess(player, board_text)
                    continue
                session.quit()
                game_logger.log_player_action(
                    player, 'quit_round', self.session_id,
                    remaining_at_quit=session.state.remaining_at_quit
                )
                return None

            try:
                record = session.submit_guess(line)
            except InvalidLengthError as e:
                prompt = messages.invalid_length(e.actual_length, e.required_length, board_text)
            except UnknownWordError as e:
                prompt = messages.unknown_word(e.guess, board_text)
            else:
                game_logger.log_player_action(
                    player, 'submit_guess', self.session_id,
                    guess=record.word, remaining=session.state.remaining_attempts,
                    status=session.status.value
                )
                return record

            game_logger.log_player_action(player, 'guess_rejected', self.session_id, attempted_guess=line)

    def _log_round_end(self, player: Optional[str], session: RoundSession, score: RoundScore) -> None:
        game_logger.log_game_event(
            self.session_id, f"round_{session.status.value}", player,
            target_word=session.state.target.word,
            attempts_used=session.state.attempts_used,
            total=score.total, bonus=score.bonus, penalty=score.penalty
        )

    # ------------------------------------------------------------------ solo

    def play_solo_round(self, config: ScoringConfig, solo_session: SoloSession,
                        player: Optional[str] = None) -> RoundSession:
        """
        Plays one solo round to its end and records it in the session.

        Args:
            config: Requested rules (the word length may be clamped)
            solo_session: Session the final score is added to
            player: Optional display name

        Returns:
            RoundSession: The finished round
        """
        config = self.prepare_config(config)
        self.dialog.tell_user(messages.rules_info(config))

        session = self.new_round(config)
        game_logger.log_game_event(self.session_id, 'round_started', player,
                                   word_length=config.word_length, max_guesses=config.max_guesses)

        while not session.is_over:
            self.take_turn(session, player)

        score = session.score()
        solo_session.record(score)
        self._log_round_end(player, session, score)

        parts = [
            messages.outcome(session.status, session.state.attempts_used),
            messages.reveal_word(session.state.target),
            messages.round_summary(score),
        ]
        if solo_session.rounds > 1:
            parts.append(messages.solo_running_total(solo_session.total))
        self.dialog.tell_user("\n\n".join(parts))
        return session

    # ----------------------------------------------------------- multiplayer

    def _turn_report(self, player: PlayerRound, record: GuessRecord, game_index: int,
                     scoreboard: CumulativeScoreboard, had_history: bool) -> TurnReport:
        session = player.session
        with_bonus = session.score()
        no_bonus = session.score(include_bonus=False)
        won = session.status is RoundStatus.WON
        prior = scoreboard.prior(player.name)

        return TurnReport(
            player=player.name,
            game_index=game_index,
            attempt_number=max(1, session.state.attempts_used),
            max_guesses=session.config.max_guesses,
            guess=record,
            counts=count_verdicts(record.verdicts),
            points=points_for(record.verdicts, session.config.points),
            running_points=no_bonus.total,
            bonus_this_turn=with_bonus.bonus if won else 0,
            locked_bonus=with_bonus.bonus,
            running_all_games=(prior.total_across_games + (with_bonus.total if won else no_bonus.total)
                               if had_history else None),
            bonus_all_games=prior.bonus_across_games + with_bonus.bonus if had_history else 0
        )

    def _skip_notice(self, player: PlayerRound, scoreboard: CumulativeScoreboard, had_history: bool) -> str:
        score = player.session.score()
        running_all = None
        adjustment = 0
        if had_history:
            prior = scoreboard.prior(player.name)
            running_all = prior.total_across_games + score.total
            if player.session.status is RoundStatus.WON:
                adjustment = prior.bonus_across_games + score.bonus
            elif player.session.status is RoundStatus.QUIT:
                adjustment = prior.penalty_across_games + score.penalty
        return messages.skip_notice(player.name, player.session.status, score, running_all, adjustment)

    def play_multiplayer_game(self, names: Sequence[str], config: ScoringConfig, game_index: int,
                              scoreboard: CumulativeScoreboard, had_history: bool) -> List[PlayerRound]:
        """
        Plays one game: every player gets a secret word and turns go
        round-robin, one attempt each, until every round is finished.

        Args:
            names: Player display names in turn order
            config: Rules with an already clamped word length
            game_index: 1-based game number within the series
            scoreboard: Cumulative totals of earlier series
            had_history: Whether an earlier series had completed

        Returns:
            List[PlayerRound]: The finished rounds in turn order
        """
        players = [PlayerRound(name=name, session=self.new_round(config)) for name in names]
        game_logger.log_game_event(self.session_id, 'game_started', None,
                                   game_index=game_index, players=list(names))

        cycle = 0
        while any(not player.session.is_over for player in players):
            cycle += 1
            for player in players:
                if player.session.is_over:
                    if not player.skip_notice_shown:
                        self.dialog.tell_user(self._skip_notice(player, scoreboard, had_history))
                        player.skip_notice_shown = True
                    continue

                record = self.take_turn(player.session, player.name)
                if record is not None:
                    report = self._turn_report(player, record, game_index, scoreboard, had_history)
                    self.dialog.tell_user(messages.turn_explain(report))

            stats = compute_game_stats([(p.name, p.state) for p in players], config)
            self.dialog.tell_user(messages.standings_snapshot(game_index, cycle, stats.standings))

        for player in players:
            self._log_round_end(player.name, player.session, player.session.score())

        self.dialog.tell_user(messages.answers_reveal(
            game_index, [(player.name, player.state.target) for player in players]
        ))
        return players

    def play_multiplayer_series(self, names: Sequence[str], config: ScoringConfig, rounds: int,
                                scoreboard: CumulativeScoreboard) -> SeriesAggregator:
        """
        Plays `rounds` games with the same players and rules, then shows the
        series leaderboard and, when earlier series exist, the cumulative one.

        Returns:
            SeriesAggregator: Totals of this series (already merged into the scoreboard)
        """
        had_history = scoreboard.has_history
        config = self.prepare_config(config)
        self.dialog.tell_user(messages.rules_info(config))

        series = SeriesAggregator()
        for game_index in range(1, rounds + 1):
            players = self.play_multiplayer_game(names, config, game_index, scoreboard, had_history)
            for player in players:
                series.record_round(player.name, player.session.score())

        summary = series.summary()
        self.dialog.tell_user(messages.series_board(messages.series_title(rounds), summary))
        game_logger.log_game_event(
            self.session_id, 'series_finished', None, games=rounds,
            standings=[(row.name, row.total) for row in summary.standings]
        )

        scoreboard.merge(series)
        if had_history:
            self.dialog.tell_user(messages.series_board(messages.cumulative_title(), scoreboard.summary()))
        return series
