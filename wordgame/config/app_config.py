"""
Application Configuration

Environment-driven settings for the game server and the game defaults.
An optional `config.env` next to this module is loaded first; real
environment variables win over it.
"""

import os
from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, default))


def _env_flag(name: str, default: str = 'False') -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes')


class Config:
    """Settings shared by every environment."""

    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = _env_flag('DEBUG')

    # Socket.IO / HTTP server (web mode only)
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = _env_int('PORT', 5000)

    # JSON word list; the bundled dictionary.json when unset
    DICTIONARY_PATH = os.getenv('DICTIONARY_PATH')

    # Rules in effect before the player picks classic or custom
    WORD_LENGTH = _env_int('WORD_LENGTH', 5)
    MAX_GUESSES = _env_int('MAX_GUESSES', 6)
    GAME_ROUNDS = _env_int('GAME_ROUNDS', 1)

    # Points per letter verdict
    POINTS_CORRECT = _env_int('POINTS_CORRECT', 2)
    POINTS_ALMOST = _env_int('POINTS_ALMOST', 1)
    POINTS_INCORRECT = _env_int('POINTS_INCORRECT', -1)

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    DEBUG = True


# Environment name -> configuration class
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
