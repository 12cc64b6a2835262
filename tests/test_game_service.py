import pytest

from wordgame.models.game import DictionaryEntry, RoundStatus, ScoringConfig, Verdict
from wordgame.services.errors import InvalidLengthError, RoundOverError, UnknownWordError
from wordgame.services.game_service import GameService, RoundSession, normalize_guess
from wordgame.services.series_service import CumulativeScoreboard, SoloSession
from wordgame.utils import messages

KNOWN = {"apple", "alert", "crane", "sheep", "llama"}


def _session(target="apple", config=None):
    return RoundSession(DictionaryEntry(target), config or ScoringConfig(), lambda word: word in KNOWN)


def test_normalize_guess():
    assert normalize_guess("  A-p p!LE ") == "apple"
    assert normalize_guess("R2D2") == "r2d2"


def test_target_must_match_word_length():
    with pytest.raises(ValueError):
        _session("cat")


def test_invalid_length_guess():
    session = _session()
    with pytest.raises(InvalidLengthError) as error:
        session.submit_guess("app")
    assert (error.value.actual_length, error.value.required_length) == (3, 5)
    assert session.state.attempts == []
    assert session.state.remaining_attempts == 6


def test_unknown_word_guess():
    session = _session()
    with pytest.raises(UnknownWordError):
        session.submit_guess("zzzzz")
    assert session.status is RoundStatus.PLAYING


def test_solving_wins_the_round():
    session = _session()
    session.submit_guess("crane")
    record = session.submit_guess("APPLE")
    assert record.solved
    assert session.status is RoundStatus.WON
    assert session.state.remaining_attempts == 4
    assert session.state.attempts_used == 2


def test_running_out_of_guesses_loses():
    session = _session(config=ScoringConfig(max_guesses=2))
    session.submit_guess("crane")
    record = session.submit_guess("sheep")
    assert record.verdicts[0] is Verdict.INCORRECT
    assert session.status is RoundStatus.LOST
    assert session.state.remaining_attempts == 0


def test_quit_freezes_remaining_attempts():
    session = _session()
    session.submit_guess("crane")
    session.quit()
    assert session.status is RoundStatus.QUIT
    assert session.state.remaining_at_quit == 5
    assert session.state.remaining_attempts == 0
    assert session.score().penalty == 50


def test_terminal_round_rejects_moves():
    session = _session()
    session.submit_guess("apple")
    with pytest.raises(RoundOverError):
        session.submit_guess("crane")
    with pytest.raises(RoundOverError):
        session.quit()
    assert session.state.attempts_used == 1
    assert session.status is RoundStatus.WON


def test_take_turn_reprompts_invalid_guesses(scripted_dialog, selector):
    dialog = scripted_dialog("abc", "zzzzz", "crane")
    games = GameService(dialog, selector)
    session = games.new_round(ScoringConfig())

    record = games.take_turn(session, "Ann")

    assert record.word == "crane"
    assert dialog.asked[0].startswith("Ann, enter your guess")
    assert "has 3 characters" in dialog.asked[1]
    assert '"zzzzz" is not in the dictionary' in dialog.asked[2]
    assert session.state.attempts_used == 1


def test_take_turn_cancel_then_reconsider(scripted_dialog, selector):
    dialog = scripted_dialog(None, True, "crane")
    games = GameService(dialog, selector)
    session = games.new_round(ScoringConfig())

    record = games.take_turn(session)

    assert record.word == "crane"
    assert dialog.asked[1] == messages.END_GAME
    assert session.status is RoundStatus.PLAYING


def test_take_turn_cancel_confirmed_quits(scripted_dialog, selector):
    dialog = scripted_dialog(None, False)
    games = GameService(dialog, selector)
    session = games.new_round(ScoringConfig())

    assert games.take_turn(session) is None
    assert session.status is RoundStatus.QUIT
    assert session.state.remaining_at_quit == 6


def test_solo_round_win(scripted_dialog, selector):
    dialog = scripted_dialog("crane", "apple")
    solo = SoloSession()

    session = GameService(dialog, selector).play_solo_round(ScoringConfig(), solo, "Kim")

    assert session.status is RoundStatus.WON
    assert session.state.target.word == "apple"
    # crane scores 0, apple 10, plus 4 unused attempts x 5 x 2
    assert session.score().total == 50
    assert solo.total == 50
    assert dialog.told[0] == messages.rules_info(session.config)
    final = dialog.told[-1]
    assert "You solved it in 2 attempts!" in final
    assert "APPLE" in final
    assert "Bonus Points:   40" in final
    assert "All games (solo)" not in final


def test_solo_round_clamps_word_length(scripted_dialog, selector):
    dialog = scripted_dialog("cat")
    session = GameService(dialog, selector).play_solo_round(ScoringConfig(word_length=4), SoloSession())
    assert session.config.word_length == 3
    assert session.state.target.word == "cat"
    assert session.status is RoundStatus.WON


def test_solo_running_total_after_second_round(scripted_dialog, selector):
    dialog = scripted_dialog("apple", "crane", "sheep")
    games = GameService(dialog, selector)
    solo = SoloSession()

    games.play_solo_round(ScoringConfig(), solo)
    second = games.play_solo_round(ScoringConfig(max_guesses=2), solo)

    assert second.state.target.word == "alert"
    assert second.status is RoundStatus.LOST
    assert "Out of guesses" in dialog.told[-1]
    assert f"All games (solo):   {solo.total} points" in dialog.told[-1]


def test_multiplayer_game_round_robin(scripted_dialog, selector):
    # Ann's word is apple, Bob's is alert
    dialog = scripted_dialog("apple", "crane", "alert")
    games = GameService(dialog, selector)

    players = games.play_multiplayer_game(["Ann", "Bob"], ScoringConfig(), 1, CumulativeScoreboard(), False)

    assert [p.state.target.word for p in players] == ["apple", "alert"]
    assert [p.session.status for p in players] == [RoundStatus.WON, RoundStatus.WON]
    assert players[1].state.attempts_used == 2
    assert len(dialog.told_containing("Ann solved theirs!")) == 1
    assert dialog.told_containing("Bob solved theirs!") == []
    assert len(dialog.told_containing("STANDINGS  --  Game 1")) == 2
    assert dialog.told_containing("Ann  --  Game 1, attempt 1 of 6")
    assert dialog.told_containing("Bob  --  Game 1, attempt 2 of 6")
    reveal = dialog.told[-1]
    assert reveal.startswith("ANSWERS  --  Game 1")
    assert "APPLE" in reveal and "ALERT" in reveal


def test_multiplayer_quit_shows_penalty_notice(scripted_dialog, selector):
    dialog = scripted_dialog(None, False, "crane", "alert")
    games = GameService(dialog, selector)

    players = games.play_multiplayer_game(["Ann", "Bob"], ScoringConfig(), 1, CumulativeScoreboard(), False)

    assert players[0].session.status is RoundStatus.QUIT
    notice = dialog.told_containing("Ann quit this game")
    assert len(notice) == 1
    assert "- 60 penalty" in notice[0]


def test_multiplayer_series_shows_cumulative_board_after_first_series(scripted_dialog, selector):
    dialog = scripted_dialog("apple", "alert", "crane", "sheep")
    games = GameService(dialog, selector)
    scoreboard = CumulativeScoreboard()

    first = games.play_multiplayer_series(["Ann", "Bob"], ScoringConfig(), 1, scoreboard)
    assert dialog.told_containing("SERIES COMPLETE")
    assert dialog.told_containing("ALL GAMES") == []
    assert first.totals["Ann"].total_across_games == 60

    games.play_multiplayer_series(["Ann", "Bob"], ScoringConfig(), 1, scoreboard)
    cumulative = dialog.told_containing("ALL GAMES")
    assert len(cumulative) == 1
    assert "Ann  --  120 points" in cumulative[0]
    assert scoreboard.series_completed == 2
    assert dialog.told_containing("All games:   120 points")


@pytest.mark.parametrize("max_guesses", [0, -2])
def test_round_needs_at_least_one_guess(max_guesses):
    with pytest.raises(ValueError):
        _session(config=ScoringConfig(max_guesses=max_guesses))


def test_exhausted_attempts_always_end_the_round():
    session = _session()
    session.state.remaining_attempts = 0
    session.submit_guess("crane")
    assert session.status is RoundStatus.LOST
    with pytest.raises(RoundOverError):
        session.submit_guess("crane")
