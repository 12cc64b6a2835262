"""
Game Logger Module for the Word Puzzle Game

Structured JSON logging for player actions, game events, HTTP responses
and errors. One line per entry, `asctime | levelname | {json}`.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from ..config.app_config import Config

# event_type -> counter name reported by get_log_stats
_STAT_COUNTERS = {
    'PLAYER_ACTION': 'player_actions',
    'GAME_EVENT': 'game_events',
    'SERVER_RESPONSE_SUCCESS': 'server_responses',
    'SERVER_RESPONSE_ERROR': 'server_responses',
    'ERROR': 'errors',
}


class GameLogger:
    """
    Writes every game-relevant event as a JSON document.

    Entries go to a dated file in `log_dir`; warnings and errors are also
    echoed to the console.
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO", name: str = "wordgame"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = getattr(logging, str(level).upper(), logging.INFO)
        self.logger = self._configure(logging.getLogger(name))

    def _configure(self, logger: logging.Logger) -> logging.Logger:
        logger.setLevel(self.level)
        # re-creating the logger (tests, reloads) must not stack handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        to_file = logging.FileHandler(self._log_file(), encoding='utf-8')
        to_file.setLevel(self.level)
        to_file.setFormatter(logging.Formatter('%(asctime)s | %(levelname)s | %(message)s',
                                              datefmt='%Y-%m-%d %H:%M:%S'))

        to_console = logging.StreamHandler()
        to_console.setLevel(logging.WARNING)
        to_console.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(to_file)
        logger.addHandler(to_console)
        return logger

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _write(self, level: int, event_type: str, action: str,
               player: Optional[str], details: Dict[str, Any]) -> None:
        entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'player': player,
            'details': details,
        }
        self.logger.log(level, json.dumps(entry, ensure_ascii=False, default=str))

    def log_player_action(self,
                          player: Optional[str],
                          action: str,
                          session_id: Optional[str] = None,
                          **kwargs):
        """
        Record something a player did.

        Args:
            player: Display name, None for an anonymous solo player
            action: 'submit_guess', 'guess_rejected', 'quit_round', ...
            session_id: Dialog session the player belongs to
            **kwargs: Extra fields stored under `details`
        """
        self._write(logging.INFO, 'PLAYER_ACTION', action, player, {'session_id': session_id, **kwargs})

    def log_game_event(self,
                       session_id: Optional[str],
                       event: str,
                       player: Optional[str] = None,
                       **kwargs):
        """
        Record a game lifecycle event.

        Args:
            session_id: Dialog session the game runs in
            event: 'round_started', 'round_won', 'series_finished', ...
            player: Player the event belongs to, if any
            **kwargs: Extra fields stored under `details`
        """
        self._write(logging.INFO, 'GAME_EVENT', event, player, {'session_id': session_id, **kwargs})

    def log_server_response(self, request, action: str, success: bool,
                            response_data: Dict[str, Any], **kwargs):
        """Record an HTTP response; failures are logged at ERROR level."""
        details = {
            'endpoint': request.endpoint,
            'method': request.method,
            'path': request.path,
            'remote_addr': request.remote_addr or 'unknown',
            'success': success,
            'response_size': len(str(response_data)),
        }
        details.update(kwargs)
        if success:
            self._write(logging.INFO, 'SERVER_RESPONSE_SUCCESS', action, None, details)
        else:
            self._write(logging.ERROR, 'SERVER_RESPONSE_ERROR', action, None, details)

    def log_error(self,
                  error: Exception,
                  action: str,
                  session_id: Optional[str] = None,
                  player: Optional[str] = None):
        """Record an unexpected exception and what was being done when it happened."""
        self._write(logging.ERROR, 'ERROR', action, player, {
            'session_id': session_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
        })

    def get_log_stats(self) -> Dict[str, Any]:
        """Counts today's entries per event type, for the health endpoint."""
        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats: Dict[str, Any] = {
            'log_file': str(log_file),
            'file_size_mb': round(log_file.stat().st_size / (1024 * 1024), 2),
            'total_entries': 0,
        }
        for counter in _STAT_COUNTERS.values():
            stats[counter] = 0

        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    payload = line.split(' | ', 2)[-1].strip()
                    if not payload:
                        continue
                    stats['total_entries'] += 1
                    try:
                        event_type = json.loads(payload).get('event_type')
                    except ValueError:
                        continue
                    counter = _STAT_COUNTERS.get(event_type)
                    if counter:
                        stats[counter] += 1
        except OSError as e:
            return {'error': f'Failed to get stats: {e}'}
        return stats


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
