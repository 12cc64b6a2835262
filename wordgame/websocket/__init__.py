"""
WebSocket Package

Socket.IO event handlers for the dialog transport.
"""
