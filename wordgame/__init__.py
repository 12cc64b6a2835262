"""
Word Puzzle Game Application Package

Turn-based word-guessing game (solo and multiplayer) played through
dialogs, with a terminal front end and a Socket.IO dialog transport.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance and its SocketIO instance
    """
    from .config.game_settings import DICTIONARY, load_dictionary

    app = Flask(__name__)
    app.config.from_object(config_class)

    # Dictionary used by every game this app starts
    dictionary_path = getattr(config_class, 'DICTIONARY_PATH', None)
    app.dictionary = load_dictionary(dictionary_path) if dictionary_path else DICTIONARY

    # Initialize extensions (threading mode: game workers block on dialog answers)
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", async_mode="threading",
                        logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp

    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio, app.dictionary)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
