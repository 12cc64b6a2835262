"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, dictionary and settings parsers (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    CLASSIC_DEFAULTS, DEFAULT_POINTS, DICTIONARY, MIN_PLAYERS, classic_config,
    get_dictionary_statistics, load_dictionary, parse_custom_config, parse_player_names,
    parse_player_setup, starting_config, starting_rounds, validate_dictionary_integrity
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'CLASSIC_DEFAULTS', 'DEFAULT_POINTS', 'DICTIONARY', 'MIN_PLAYERS', 'classic_config',
    'get_dictionary_statistics', 'load_dictionary', 'parse_custom_config', 'parse_player_names',
    'parse_player_setup', 'starting_config', 'starting_rounds', 'validate_dictionary_integrity'
]
