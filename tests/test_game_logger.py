import json

from wordgame.utils.game_logger import GameLogger


def _entries(logger):
    with open(logger._log_file(), encoding='utf-8') as f:
        return [json.loads(line.split(' | ', 2)[-1]) for line in f if line.strip()]


def test_entries_are_structured_json(tmp_path):
    logger = GameLogger(str(tmp_path), name='wordgame-test-entries')

    logger.log_player_action('Ann', 'submit_guess', 'sid-1', guess='crane | 2')
    logger.log_game_event('sid-1', 'round_won', 'Ann', total=60)
    logger.log_error(ValueError('boom'), 'run_game', 'sid-1')

    entries = _entries(logger)
    assert [entry['event_type'] for entry in entries] == ['PLAYER_ACTION', 'GAME_EVENT', 'ERROR']
    assert entries[0]['player'] == 'Ann'
    assert entries[0]['details'] == {'session_id': 'sid-1', 'guess': 'crane | 2'}
    assert entries[1]['action'] == 'round_won'
    assert entries[2]['details']['error_type'] == 'ValueError'


def test_log_stats_counts_by_type(tmp_path):
    logger = GameLogger(str(tmp_path), name='wordgame-test-stats')
    logger.log_player_action(None, 'quit_round')
    logger.log_player_action('Bob', 'submit_guess')
    logger.log_game_event(None, 'series_finished')

    stats = logger.get_log_stats()
    assert stats['total_entries'] == 3
    assert stats['player_actions'] == 2
    assert stats['game_events'] == 1
    assert stats['errors'] == 0


def test_log_stats_without_file(tmp_path):
    logger = GameLogger(str(tmp_path), name='wordgame-test-empty')
    logger._log_file().unlink()
    assert 'error' in logger.get_log_stats()
