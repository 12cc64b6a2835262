"""
Socket Dialog

Suspending dialog implementation for an interactive Socket.IO client.

Each request is emitted as a `dialog` event and the calling game worker
waits until the client answers with a matching `dialog_response`.
"""

import queue
import threading
import uuid
from typing import Any, Callable, Dict, Optional

from .base import Dialog


class SocketDialog(Dialog):
    """
    Dialog bridged over a Socket.IO connection.

    Args:
        emit: Callable sending (event, payload) to this dialog's client
        session_id: Identifier used in logs, random when omitted
    """

    def __init__(self, emit: Callable[[str, Dict[str, Any]], None], session_id: Optional[str] = None):
        self._emit = emit
        self.session_id = session_id or str(uuid.uuid4())
        self._lock = threading.Lock()
        self._pending: Dict[str, queue.Queue] = {}
        self.closed = False

    def _request(self, kind: str, message: str, default: str = "") -> Any:
        dialog_id = str(uuid.uuid4())
        answers: queue.Queue = queue.Queue(maxsize=1)

        with self._lock:
            if self.closed:
                return None
            self._pending[dialog_id] = answers

        try:
            self._emit('dialog', {
                'dialog_id': dialog_id,
                'kind': kind,
                'message': message,
                'default': default
            })
            return answers.get()
        finally:
            with self._lock:
                self._pending.pop(dialog_id, None)

    def resolve(self, dialog_id: str, value: Any) -> bool:
        """
        Deliver the client's answer to the waiting request.

        Returns:
            bool: False if no request with this id is waiting
        """
        with self._lock:
            answers = self._pending.get(dialog_id)
        if answers is None:
            return False
        try:
            answers.put_nowait(value)
        except queue.Full:
            return False
        return True

    def close(self) -> None:
        """Cancel every waiting request and refuse new ones."""
        with self._lock:
            self.closed = True
            waiting = list(self._pending.values())
        for answers in waiting:
            try:
                answers.put_nowait(None)
            except queue.Full:
                pass

    @property
    def pending_count(self) -> int:
        with self._lock:
            return len(self._pending)

    def ask_yes_no(self, message: str) -> bool:
        return self._request('confirm', message) is True

    def ask_line(self, message: str, default: str = "") -> Optional[str]:
        answer = self._request('prompt', message, default)
        if answer is None:
            return None
        return str(answer).strip()

    def tell_user(self, message: str) -> None:
        self._request('alert', message)
