"""
WebSocket Event Handlers

Bridges the game's dialogs to a Socket.IO client: the game runs in a
background task and every dialog request waits for the client's answer.
"""

from typing import Sequence

from flask import request
from flask_socketio import emit

from ..dialogs.socket_dialog import SocketDialog
from ..models.game import DictionaryEntry
from ..services.menu_service import GameRouter
from ..services.session_service import SessionService, get_session_service
from ..utils.game_logger import game_logger


def run_game(socketio, session_service: SessionService, sid: str, dialog: SocketDialog,
             dictionary: Sequence[DictionaryEntry]) -> None:
    """Background worker: plays one router lifetime for a client."""
    router = GameRouter(dialog, dictionary, session_id=sid)
    try:
        router.run()
    except Exception as e:
        game_logger.log_error(e, 'run_game', sid)
        socketio.emit('error', {'error': str(e)}, to=sid)
    else:
        socketio.emit('game_finished', {'session_id': sid}, to=sid)
    finally:
        session_service.end_session(sid)


def register_websocket_handlers(socketio, dictionary: Sequence[DictionaryEntry]):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect(*args):
        game_logger.log_game_event(request.sid, 'client_connected')

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Closing the dialog unwinds a running game to its exit."""
        session_service = get_session_service()
        if session_service and session_service.end_session(request.sid):
            game_logger.log_game_event(request.sid, 'client_disconnected')

    @socketio.on('start_game')
    def handle_start_game(data=None):
        """Start a game for this client."""
        session_service = get_session_service()
        if not session_service:
            emit('error', {'error': 'Session service unavailable'})
            return

        sid = request.sid
        dialog = session_service.start_session(
            sid, lambda event, payload: socketio.emit(event, payload, to=sid)
        )
        if dialog is None:
            emit('error', {'error': 'A game is already running for this connection'})
            return

        game_logger.log_game_event(sid, 'game_requested')
        socketio.start_background_task(run_game, socketio, session_service, sid, dialog, dictionary)
        emit('game_started', {'session_id': sid})

    @socketio.on('dialog_response')
    def handle_dialog_response(data):
        """Deliver the client's answer to the waiting dialog."""
        session_service = get_session_service()
        dialog = session_service.get_session(request.sid) if session_service else None
        if dialog is None:
            emit('error', {'error': 'No game running for this connection'})
            return

        if not isinstance(data, dict) or 'dialog_id' not in data:
            emit('error', {'error': 'dialog_id is required'})
            return

        if not dialog.resolve(data['dialog_id'], data.get('value')):
            emit('error', {'error': 'No dialog is waiting for this response'})
