"""
Word Puzzle Game - Main Entry Point

Plays in the terminal by default; `--web` serves the Socket.IO dialog
transport and the HTTP endpoints instead.
"""

import argparse

from wordgame import create_app
from wordgame.config import Config
from wordgame.config.game_settings import DICTIONARY
from wordgame.dialogs import TerminalDialog
from wordgame.services.menu_service import GameRouter
from wordgame.services.session_service import initialize_session_service
from wordgame.utils.game_logger import game_logger


def run_terminal():
    """Play one router lifetime on stdin/stdout."""
    game_logger.logger.info("Word game starting in terminal mode")
    GameRouter(TerminalDialog(), DICTIONARY, session_id="terminal").run()


def run_server():
    """Initialize services and start the Flask-SocketIO server."""
    print("Initializing services...")

    session_service = initialize_session_service()
    if session_service:
        print("✓ Session service initialized successfully")
    else:
        print("✗ Failed to initialize session service")

    print("Creating Flask application...")
    app, socketio = create_app(Config)
    print("✓ Flask application created successfully")

    game_logger.logger.info("Word game server starting")

    print(f"\nStarting Word Game Server on {Config.HOST}:{Config.PORT}")
    print(f"Debug mode: {Config.DEBUG}")
    print("=" * 50)

    socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG,
                 allow_unsafe_werkzeug=True)


def main():
    parser = argparse.ArgumentParser(description="Turn-based word guessing game")
    parser.add_argument("--web", action="store_true",
                        help="serve the game over Socket.IO instead of the terminal")
    args = parser.parse_args()

    try:
        if args.web:
            run_server()
        else:
            run_terminal()
    except KeyboardInterrupt:
        print("\nShutting down...")
        game_logger.logger.info("Word game shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error: {e}")
        game_logger.logger.error(f"Error running word game: {e}")
        raise


if __name__ == '__main__':
    main()
