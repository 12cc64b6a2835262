from wordgame.models.game import RoundScore
from wordgame.services.series_service import CumulativeScoreboard, SeriesAggregator, SoloSession


def _score(per_guess, bonus=0, penalty=0):
    guess_points = sum(per_guess)
    return RoundScore(
        per_guess_points=tuple(per_guess),
        guess_points=guess_points,
        bonus=bonus,
        penalty=penalty,
        total=guess_points + bonus - penalty
    )


def test_series_aggregates_rounds_per_player():
    series = SeriesAggregator()
    series.record_round("Ann", _score([2, 10], bonus=40))
    series.record_round("Bob", _score([-5, 3]))
    series.record_round("Ann", _score([-5], penalty=50))

    ann = series.totals["Ann"]
    assert ann.total_across_games == 52 - 55
    assert ann.per_game_totals == [52, -55]
    assert (ann.best_single_guess, ann.worst_single_guess) == (10, -5)
    assert (ann.bonus_across_games, ann.penalty_across_games) == (40, 50)
    assert ann.average_per_game == -1.5


def test_series_summary_standings_and_leaders():
    series = SeriesAggregator()
    series.record_round("Ann", _score([4]))
    series.record_round("Bob", _score([9]))
    series.record_round("Cid", _score([9]))

    summary = series.summary()
    assert [row.name for row in summary.standings] == ["Bob", "Cid", "Ann"]
    # ties go to the player encountered first
    assert summary.leader_single_game.name == "Bob"
    assert summary.leader_single_game.game_at == 1
    assert summary.leader_best.name == "Bob"
    assert summary.leader_worst.name == "Ann"


def test_single_game_leader_reports_game_index():
    series = SeriesAggregator()
    series.record_round("Ann", _score([1]))
    series.record_round("Ann", _score([8]))
    series.record_round("Bob", _score([5]))

    leader = series.summary().leader_single_game
    assert (leader.name, leader.points, leader.game_at) == ("Ann", 8, 2)


def test_empty_series_summary():
    summary = SeriesAggregator().summary()
    assert summary.standings == []
    assert summary.leader_single_game is None
    assert summary.leader_average is None


def test_cumulative_scoreboard_merges_series():
    board = CumulativeScoreboard()
    assert not board.has_history
    assert board.prior("Ann").total_across_games == 0

    first = SeriesAggregator()
    first.record_round("Ann", _score([10], bonus=40))
    board.merge(first)

    second = SeriesAggregator()
    second.record_round("Ann", _score([-5]))
    second.record_round("Bob", _score([3]))
    board.merge(second)

    assert board.has_history
    assert board.series_completed == 2
    assert board.prior("Ann").total_across_games == 45
    assert board.prior("Ann").per_game_totals == [50, -5]
    assert board.prior("Ann").bonus_across_games == 40
    assert [row.name for row in board.summary().standings] == ["Ann", "Bob"]


def test_merge_leaves_series_totals_untouched():
    board = CumulativeScoreboard()
    series = SeriesAggregator()
    series.record_round("Ann", _score([2]))
    board.merge(series)
    board.merge(series)
    assert series.totals["Ann"].per_game_totals == [2]
    assert board.prior("Ann").per_game_totals == [2, 2]


def test_solo_session_summary_needs_two_rounds():
    session = SoloSession()
    session.record(_score([10], bonus=50))
    assert session.summary() is None
    assert session.total == 60

    session.record(_score([-5, -5]))
    session.record(_score([4], bonus=20))
    summary = session.summary()
    assert summary.rounds == 3
    assert summary.total == 60 - 10 + 24
    assert (summary.best, summary.best_at) == (60, 1)
    assert (summary.worst, summary.worst_at) == (-10, 2)
    assert summary.average == 74 / 3
