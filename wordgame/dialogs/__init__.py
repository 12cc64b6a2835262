"""
Dialogs Package

Contains the dialog interface and its terminal and Socket.IO implementations.
"""

from .base import Dialog
from .socket_dialog import SocketDialog
from .terminal import TerminalDialog

__all__ = ['Dialog', 'SocketDialog', 'TerminalDialog']
