import pytest

from wordgame.services.menu_service import MULTI, SOLO, GameRouter, MultiplayerSetup, choose_mode
from wordgame.utils import messages


@pytest.mark.parametrize("line, mode", [
    ("solo", SOLO),
    ("  Solo please", SOLO),
    ("MULTIPLAYER", MULTI),
    ("mu", MULTI),
    ("quit", None),
    ("whatever", SOLO),
    ("", SOLO),
])
def test_choose_mode(line, mode):
    assert choose_mode(line) == mode


def _router(dialog, dictionary, rng):
    return GameRouter(dialog, dictionary, rng=rng, session_id="test")


def test_declining_twice_says_goodbye(scripted_dialog, dictionary, rng):
    dialog = scripted_dialog(False, False)
    _router(dialog, dictionary, rng).run()
    assert dialog.told == [messages.START_OVER, messages.FAREWELL]
    assert dialog.asked == [messages.WELCOME, messages.END_GAME]


def test_change_of_heart_restarts_intro(scripted_dialog, dictionary, rng):
    dialog = scripted_dialog(False, True, False, False)
    _router(dialog, dictionary, rng).run()
    assert dialog.asked.count(messages.WELCOME) == 2
    assert dialog.told[-1] == messages.FAREWELL


def test_classic_solo_game(scripted_dialog, dictionary, rng):
    dialog = scripted_dialog(True, "solo", "classic", "", "apple", "quit", False)
    router = _router(dialog, dictionary, rng)

    router.run()

    assert router.solo_session.rounds == 1
    assert router.solo_session.total == 60
    assert router.player_name is None
    assert router.last_mode == SOLO
    assert dialog.told_containing("SESSION SUMMARY") == []
    assert dialog.told[-1] == messages.FAREWELL


def test_solo_replay_shows_session_summary(scripted_dialog, dictionary, rng):
    dialog = scripted_dialog(True, "solo", "classic", "Kim", "apple", "replay", "alert", "quit", False)
    router = _router(dialog, dictionary, rng)

    router.run()

    assert router.player_name == "Kim"
    assert router.solo_session.rounds == 2
    assert dialog.told_containing("All games (solo):   120 points")
    summary = dialog.told_containing("SESSION SUMMARY")
    assert len(summary) == 1
    assert "2 rounds" in summary[0]


def test_unrecognized_post_menu_text_replays(scripted_dialog, dictionary, rng):
    dialog = scripted_dialog(True, "solo", "classic", "", "apple", "huh?", "alert", "q", False)
    router = _router(dialog, dictionary, rng)
    router.run()
    assert router.solo_session.rounds == 2


def test_custom_solo_rules(scripted_dialog, dictionary, rng):
    dialog = scripted_dialog(True, "solo", "custom", "", "3, 4, 1", "cat", "quit", False)
    router = _router(dialog, dictionary, rng)

    router.run()

    assert (router.config.word_length, router.config.max_guesses) == (3, 4)
    assert router.last_rounds == 1
    assert dialog.told_containing("secret 3-letter word in 4 tries")


def test_custom_solo_rounds_play_in_a_row(scripted_dialog, dictionary, rng):
    dialog = scripted_dialog(True, "so", "cu", "", "5 6 2", "apple", "alert", "quit", False)
    router = _router(dialog, dictionary, rng)
    router.run()
    assert router.solo_session.rounds == 2
    assert dialog.told_containing("SESSION SUMMARY")


def test_multiplayer_needs_two_players(scripted_dialog, dictionary, rng):
    dialog = scripted_dialog(True, "multi", "classic", "1", "quit", False)
    router = _router(dialog, dictionary, rng)
    router.run()
    assert messages.NEED_MORE_PLAYERS in dialog.told
    assert router.scoreboard.series_completed == 0


def test_multiplayer_series_with_names(scripted_dialog, dictionary, rng):
    dialog = scripted_dialog(True, "multi", "classic", "2 yes", "Ann, Bob", "apple", "alert", "quit", False)
    router = _router(dialog, dictionary, rng)

    router.run()

    assert router.last_setup == MultiplayerSetup(["Ann", "Bob"], router.config, 1)
    assert router.scoreboard.series_completed == 1
    board = dialog.told_containing("SERIES COMPLETE")
    assert len(board) == 1
    assert "Ann  --  60 points" in board[0]


def test_multiplayer_replay_reuses_setup_and_shows_cumulative_board(scripted_dialog, dictionary, rng):
    dialog = scripted_dialog(
        True, "mu", "classic", "2", "apple", "alert",
        "replay", "crane", "sheep",
        "quit", False
    )
    router = _router(dialog, dictionary, rng)

    router.run()

    assert router.scoreboard.series_completed == 2
    assert router.last_setup.player_names == ["Player 1", "Player 2"]
    assert len(dialog.told_containing("ALL GAMES")) == 1


def test_mode_returns_to_main_menu(scripted_dialog, dictionary, rng):
    dialog = scripted_dialog(True, "solo", "classic", "", "apple", "mode", "quit", False)
    router = _router(dialog, dictionary, rng)
    router.run()
    assert dialog.asked.count(messages.menu_text("mode")) == 2
    assert dialog.told[-1] == messages.FAREWELL


def test_cancelled_mode_menu_leaves_menus(scripted_dialog, dictionary, rng):
    dialog = scripted_dialog(True, None, False)
    router = _router(dialog, dictionary, rng)
    router.run()
    assert router.last_mode is None
    assert dialog.told == [messages.FAREWELL]
