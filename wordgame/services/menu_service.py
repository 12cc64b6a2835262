"""
Menu Service

Routes a player through intro, mode and rules selection, play, and the
post-game menu until they leave.
"""

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..config.game_settings import (
    CLASSIC_DEFAULTS, MIN_PLAYERS, classic_config, default_player_names, parse_custom_config,
    parse_player_names, parse_player_setup, starting_config, starting_rounds
)
from ..dialogs.base import Dialog
from ..models.game import DictionaryEntry, ScoringConfig
from ..utils import messages
from ..utils.game_logger import game_logger
from .game_service import GameService
from .series_service import CumulativeScoreboard, SoloSession
from .word_selector import WordSelector

SOLO = "solo"
MULTI = "multi"


@dataclass(frozen=True)
class MultiplayerSetup:
    """Everything needed to replay a multiplayer series without asking again."""
    player_names: List[str]
    config: ScoringConfig
    rounds: int

    @property
    def player_count(self) -> int:
        return len(self.player_names)


def choose_mode(line: str) -> Optional[str]:
    """Maps menu text to a mode; None means quit. Unrecognized text picks solo."""
    cleaned = line.lower().strip()
    if "so" in cleaned:
        return SOLO
    if "mu" in cleaned:
        return MULTI
    if "q" in cleaned:
        return None
    return SOLO


class GameRouter:
    """
    One player's (or one table's) lifetime of play behind a dialog.

    Owns the state that outlives a single game: the word history, the solo
    session and the cumulative multiplayer scoreboard.
    """

    def __init__(self, dialog: Dialog, dictionary: Sequence[DictionaryEntry],
                 rng: Optional[random.Random] = None, session_id: Optional[str] = None,
                 config: Optional[ScoringConfig] = None):
        self.dialog = dialog
        self.session_id = session_id
        self.selector = WordSelector(dictionary, rng)
        self.games = GameService(dialog, self.selector, session_id)
        self.config = config or starting_config()
        self.solo_session = SoloSession()
        self.scoreboard = CumulativeScoreboard()
        self.player_name: Optional[str] = None
        self.last_mode: Optional[str] = None
        self.last_rounds: int = starting_rounds()
        self.last_setup: Optional[MultiplayerSetup] = None

    def run(self) -> None:
        """Intro -> menus -> outro, until the player declines a change of heart."""
        game_logger.log_game_event(self.session_id, 'router_started')
        while True:
            if self.dialog.ask_yes_no(messages.WELCOME):
                self._menus()
            else:
                self.dialog.tell_user(messages.START_OVER)

            if not self.dialog.ask_yes_no(messages.END_GAME):
                self.dialog.tell_user(messages.FAREWELL)
                game_logger.log_game_event(self.session_id, 'router_finished',
                                           solo_rounds=self.solo_session.rounds,
                                           series_completed=self.scoreboard.series_completed)
                return

    def _menus(self) -> None:
        phase = "main"
        while phase is not None:
            phase = self.main_menu() if phase == "main" else self.post_menu()
        self._show_solo_summary()

    def _show_solo_summary(self) -> None:
        if self.last_mode != SOLO:
            return
        summary = self.solo_session.summary()
        if summary:
            self.dialog.tell_user(messages.solo_session_summary(summary))

    # ----------------------------------------------------------------- menus

    def main_menu(self) -> Optional[str]:
        """
        Mode and rules selection followed by play.

        Returns:
            The next phase ("main" or "post"), or None to leave the menus
        """
        mode_line = self.dialog.ask_line(messages.menu_text("mode"))
        if mode_line is None:
            return None
        mode = choose_mode(mode_line)
        if mode is None:
            return None

        rules_line = self.dialog.ask_line(messages.menu_text("rules", mode))
        if rules_line is None:
            return "main"
        custom = "cu" in rules_line.lower()

        if mode == SOLO:
            name_line = self.dialog.ask_line(messages.SOLO_NAME_PROMPT)
            self.player_name = name_line.strip() if name_line and name_line.strip() else None
            self.last_mode = SOLO

            if custom:
                custom_line = self.dialog.ask_line(
                    messages.custom_config_prompt(self.config, self.last_rounds or 1)
                )
                if custom_line is None:
                    return "main"
                self.config, self.last_rounds = parse_custom_config(custom_line, self.config, self.last_rounds)
            else:
                self.config = classic_config(self.config.points)
                self.last_rounds = CLASSIC_DEFAULTS["game_rounds"]
            self.play_solo_series()
        else:
            self.last_mode = MULTI
            if not custom:
                self.config = classic_config(self.config.points)
                self.last_rounds = CLASSIC_DEFAULTS["game_rounds"]
            setup = self.ask_multiplayer_setup(ask_rules=custom)
            if setup is not None:
                self.play_multiplayer_series(setup)

        return "post"

    def post_menu(self) -> Optional[str]:
        """Replay / custom / mode / quit. Unrecognized text replays."""
        line = self.dialog.ask_line(messages.menu_text("post"))
        if line is None:
            return None
        cleaned = line.lower().strip()

        if "re" in cleaned:
            self.replay()
        elif "cu" in cleaned:
            if self.last_mode == SOLO:
                custom_line = self.dialog.ask_line(
                    messages.custom_config_prompt(self.config, self.last_rounds or 1)
                )
                if custom_line is None:
                    return "post"
                self.config, self.last_rounds = parse_custom_config(custom_line, self.config, self.last_rounds)
                self.play_solo_series()
            else:
                setup = self.ask_multiplayer_setup(ask_rules=True)
                if setup is not None:
                    self.play_multiplayer_series(setup)
        elif "mo" in cleaned:
            return "main"
        elif "q" in cleaned:
            return None
        else:
            self.replay()
        return "post"

    def replay(self) -> None:
        if self.last_mode == SOLO:
            self.play_solo_series()
            return
        setup = self.last_setup or self.ask_multiplayer_setup(ask_rules=True)
        if setup is not None:
            self.play_multiplayer_series(setup)

    # ------------------------------------------------------------------ play

    def ask_multiplayer_setup(self, ask_rules: bool) -> Optional[MultiplayerSetup]:
        """
        Asks for player count, optional names and (optionally) custom rules.

        Returns:
            MultiplayerSetup, or None if cancelled or too few players
        """
        setup_line = self.dialog.ask_line(messages.PLAYER_SETUP_PROMPT)
        if setup_line is None:
            return None

        count, wants_names = parse_player_setup(setup_line)
        if count is None or count < MIN_PLAYERS:
            self.dialog.tell_user(messages.NEED_MORE_PLAYERS)
            return None

        names = default_player_names(count)
        if wants_names:
            names_line = self.dialog.ask_line(messages.player_names_prompt(count))
            if names_line is not None:
                names = parse_player_names(names_line, count)

        if ask_rules:
            custom_line = self.dialog.ask_line(
                messages.custom_config_prompt(self.config, self.last_rounds or 1, keep_classic_hint=True)
            )
            if custom_line and custom_line.strip():
                self.config, self.last_rounds = parse_custom_config(custom_line, self.config, self.last_rounds)
            else:
                self.config = classic_config(self.config.points)
                self.last_rounds = self.last_rounds or CLASSIC_DEFAULTS["game_rounds"]

        return MultiplayerSetup(player_names=names, config=self.config, rounds=self.last_rounds or 1)

    def play_solo_series(self) -> None:
        for _ in range(self.last_rounds or 1):
            session = self.games.play_solo_round(self.config, self.solo_session, self.player_name)
            self.config = session.config

    def play_multiplayer_series(self, setup: MultiplayerSetup) -> None:
        self.last_mode = MULTI
        self.last_setup = setup
        self.config = setup.config
        self.last_rounds = setup.rounds
        self.games.play_multiplayer_series(setup.player_names, setup.config, setup.rounds, self.scoreboard)
