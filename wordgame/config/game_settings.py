"""
Game Configuration Constants Module

This module defines the game rules, the bundled dictionary and the parsers
for player-typed settings. All game parameters are centralized here to
enable easy modification.
"""

import json
import os
import re
from typing import Dict, Final, List, Optional, Tuple

from ..models.game import DictionaryEntry, PointValues, ScoringConfig
from .app_config import Config

# Classic rules (5 letters, 6 guesses, 1 game)
CLASSIC_DEFAULTS: Final[Dict[str, int]] = {
    "word_length": 5,
    "max_guesses": 6,
    "game_rounds": 1,
}

DEFAULT_POINTS: Final[PointValues] = PointValues(
    correct=Config.POINTS_CORRECT,
    almost=Config.POINTS_ALMOST,
    incorrect=Config.POINTS_INCORRECT,
)

MIN_PLAYERS: Final[int] = 2
"""A multiplayer series needs at least this many players."""

_DEFAULT_DICTIONARY_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'dictionary.json')
_YES_NAMES = re.compile(r"\b(yes|y|name|names)\b")


def load_dictionary(path: Optional[str] = None) -> List[DictionaryEntry]:
    """
    Load the dictionary from a JSON file.

    The file must hold an array of {"word": ..., "definition": ...} objects.

    Args:
        path: JSON file path, the bundled dictionary.json when omitted

    Returns:
        List[DictionaryEntry]: Entries with lowercase words

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed or entries are invalid
    """
    json_file_path = path or _DEFAULT_DICTIONARY_PATH

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            raw_entries = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Dictionary file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}")

    if not isinstance(raw_entries, list):
        raise ValueError("JSON file must contain an array of entries")

    entries = []
    for index, raw in enumerate(raw_entries):
        if not isinstance(raw, dict) or 'word' not in raw:
            raise ValueError(f"Entry at index {index} has no 'word'")
        entries.append(DictionaryEntry(
            word=str(raw['word']).strip().lower(),
            definition=str(raw.get('definition', '')).strip()
        ))

    validate_dictionary_integrity(entries)
    return entries


def validate_dictionary_integrity(entries: List[DictionaryEntry]) -> bool:
    """
    Validates the integrity and consistency of a dictionary.

    This function performs validation to ensure:
    1. The dictionary is not empty
    2. Character validation: only lowercase letters and digits
    3. Uniqueness validation: no duplicate words

    Returns:
        bool: True if the dictionary passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not entries:
        raise ValueError("Dictionary cannot be empty")

    for index, entry in enumerate(entries):
        if not entry.word or not re.fullmatch(r"[a-z0-9]+", entry.word):
            raise ValueError(f"Word at index {index} '{entry.word}' must be lowercase letters or digits")

    words = [entry.word for entry in entries]
    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in dictionary: {duplicates}")

    return True


def get_dictionary_statistics(entries: List[DictionaryEntry]) -> dict:
    """
    Analyzes a dictionary and returns information useful for picking rules.

    Returns:
        dict: total_words, words_per_length and available_lengths
    """
    if not entries:
        return {"error": "Dictionary is empty"}

    words_per_length: Dict[int, int] = {}
    for entry in entries:
        words_per_length[len(entry.word)] = words_per_length.get(len(entry.word), 0) + 1

    return {
        "total_words": len(entries),
        "words_per_length": dict(sorted(words_per_length.items())),
        "available_lengths": sorted(words_per_length),
    }


def classic_config(points: PointValues = DEFAULT_POINTS) -> ScoringConfig:
    return ScoringConfig(
        word_length=CLASSIC_DEFAULTS["word_length"],
        max_guesses=CLASSIC_DEFAULTS["max_guesses"],
        points=points
    )


def starting_config() -> ScoringConfig:
    """Rules in effect before the player picks a mode."""
    return ScoringConfig(
        word_length=_positive_or(Config.WORD_LENGTH, CLASSIC_DEFAULTS["word_length"]),
        max_guesses=_positive_or(Config.MAX_GUESSES, CLASSIC_DEFAULTS["max_guesses"]),
        points=DEFAULT_POINTS
    )


def starting_rounds() -> int:
    return _positive_or(Config.GAME_ROUNDS, CLASSIC_DEFAULTS["game_rounds"])


def _numbers_in(line: str) -> List[int]:
    # every run of non-digits is a separator, so "5, 6 | 2" -> [5, 6, 2]
    return [int(part) for part in re.split(r"\D+", line) if part]


def _positive_or(value: Optional[int], fallback: int) -> int:
    return value if value is not None and value > 0 else fallback


def parse_custom_config(line: Optional[str],
                        current: ScoringConfig,
                        last_rounds: Optional[int] = None) -> Tuple[ScoringConfig, int]:
    """
    Parses a "length, guesses, rounds" line typed by the player.

    Never raises: missing, malformed or non-positive numbers keep the
    current value (rounds fall back to the last series length, then 1).

    Returns:
        Tuple of (new scoring config, number of games to play)
    """
    fallback_rounds = last_rounds or 1
    if not line:
        return current, fallback_rounds

    numbers = _numbers_in(line)[:3]
    numbers += [None] * (3 - len(numbers))
    length, guesses, rounds = numbers

    new_config = ScoringConfig(
        word_length=_positive_or(length, current.word_length),
        max_guesses=_positive_or(guesses, current.max_guesses),
        points=current.points
    )
    return new_config, _positive_or(rounds, fallback_rounds)


def parse_player_setup(line: Optional[str]) -> Tuple[Optional[int], bool]:
    """
    Parses a player setup line such as "3 yes".

    Returns:
        Tuple of (player count or None, whether custom names were requested)
    """
    cleaned = (line or "").strip().lower()
    numbers = _numbers_in(cleaned)
    count = numbers[0] if numbers else None
    return count, bool(_YES_NAMES.search(cleaned))


def parse_player_names(line: Optional[str], count: int) -> List[str]:
    """Splits names on commas/whitespace, pads with "Player N" and drops extras."""
    names = [name.strip() for name in re.split(r"[,\s]+", line or "") if name.strip()]
    while len(names) < count:
        names.append(f"Player {len(names) + 1}")
    return names[:count]


def default_player_names(count: int) -> List[str]:
    return [f"Player {index + 1}" for index in range(count)]


# Bundled (or configured) dictionary, loaded and validated on import
DICTIONARY: Final[List[DictionaryEntry]] = load_dictionary(Config.DICTIONARY_PATH)


if __name__ == "__main__":

    try:
        validate_dictionary_integrity(DICTIONARY)
        print(" Dictionary validation passed")

        stats = get_dictionary_statistics(DICTIONARY)
        print(f" Dictionary statistics: {stats}")

        print(" All configuration validation checks passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
