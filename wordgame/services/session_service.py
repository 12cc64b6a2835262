"""
Session Service

Tracks the dialog session of every connected Socket.IO client.
"""

import threading
from typing import Any, Callable, Dict, Optional

from ..dialogs.socket_dialog import SocketDialog


class SessionService:
    """
    In-memory registry of socket id -> SocketDialog.

    A client runs at most one game at a time.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self.sessions: Dict[str, SocketDialog] = {}

    def start_session(self, sid: str, emit: Callable[[str, Dict[str, Any]], None]) -> Optional[SocketDialog]:
        """
        Create the dialog for a client's new game.

        Returns:
            SocketDialog, or None if the client already has a game running
        """
        with self._lock:
            if sid in self.sessions:
                return None
            dialog = SocketDialog(emit, session_id=sid)
            self.sessions[sid] = dialog
            return dialog

    def get_session(self, sid: str) -> Optional[SocketDialog]:
        with self._lock:
            return self.sessions.get(sid)

    def end_session(self, sid: str) -> bool:
        """Close and forget a client's dialog (game finished or client gone)."""
        with self._lock:
            dialog = self.sessions.pop(sid, None)
        if dialog is None:
            return False
        dialog.close()
        return True

    def get_active_sessions_count(self) -> int:
        with self._lock:
            return len(self.sessions)


# Global service instance
_session_service = None


def get_session_service() -> Optional[SessionService]:
    """Get the global session service instance."""
    return _session_service


def initialize_session_service() -> SessionService:
    """Initialize the global session service instance."""
    global _session_service
    _session_service = SessionService()
    return _session_service
