"""
Game Controller

Handles the read-only HTTP endpoints next to the Socket.IO game surface.
"""

from flask import Blueprint, current_app, jsonify, request

from ..config.game_settings import CLASSIC_DEFAULTS, DEFAULT_POINTS, get_dictionary_statistics
from ..services.session_service import get_session_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


@game_bp.route('/rules', methods=['GET'])
def get_rules():
    """Classic rules and point values."""
    response_data = {
        'success': True,
        'classic': dict(CLASSIC_DEFAULTS),
        'points': {
            'correct': DEFAULT_POINTS.correct,
            'almost': DEFAULT_POINTS.almost,
            'incorrect': DEFAULT_POINTS.incorrect
        },
        'bonus': 'remaining attempts * word length * correct points',
        'quit_penalty': 'remaining attempts at quit * word length * correct points'
    }
    game_logger.log_server_response(request, 'get_rules', True, response_data)
    return jsonify(response_data)


@game_bp.route('/dictionary/stats', methods=['GET'])
def dictionary_stats():
    """Word counts per length of the active dictionary."""
    try:
        stats = get_dictionary_statistics(current_app.dictionary)
        if 'error' in stats:
            error_response = {'success': False, 'error': stats['error']}
            game_logger.log_server_response(request, 'dictionary_stats', False, error_response)
            return jsonify(error_response), 500

        response_data = {'success': True, 'stats': stats}
        game_logger.log_server_response(request, 'dictionary_stats', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(e, 'dictionary_stats')
        error_response = {'success': False, 'error': str(e)}
        game_logger.log_server_response(request, 'dictionary_stats', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        session_service = get_session_service()

        response_data = {
            'status': 'healthy',
            'active_sessions': session_service.get_active_sessions_count() if session_service else 0,
            'dictionary_size': len(current_app.dictionary),
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
