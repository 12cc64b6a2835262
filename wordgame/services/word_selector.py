"""
Word Selector

Picks target words of a configured length, avoiding words already played
when possible.
"""

import random
from typing import Iterable, List, Optional, Sequence

from ..models.game import DictionaryEntry
from .errors import EmptyDictionaryError


def safe_word_length(requested_length: int, dictionary: Sequence[DictionaryEntry]) -> int:
    """
    Resolves a requested word length into one the dictionary can serve.

    The requested length is kept when any word has it; otherwise the
    nearest available length wins, ties going to the shorter length.

    Raises:
        EmptyDictionaryError: If the dictionary has no entries
    """
    if not dictionary:
        raise EmptyDictionaryError("Cannot pick a word from an empty dictionary")

    lengths = {len(entry.word) for entry in dictionary}
    if requested_length in lengths:
        return requested_length
    return min(lengths, key=lambda length: (abs(length - requested_length), length))


def pick_word(dictionary: Sequence[DictionaryEntry],
              exclude_words: Optional[Iterable[str]],
              requested_length: int,
              rng: Optional[random.Random] = None) -> DictionaryEntry:
    """
    Chooses a random entry of the (clamped) requested length.

    The returned word's length is the effective word length for the round.

    Args:
        dictionary: Playable entries
        exclude_words: Words to avoid (repeats allowed once every word of
            the length has been used)
        requested_length: Desired word length
        rng: Random source, module-level random when omitted

    Returns:
        DictionaryEntry chosen uniformly from the candidate pool
    """
    length = safe_word_length(requested_length, dictionary)
    excluded = set(exclude_words or ())

    same_length = [entry for entry in dictionary if len(entry.word) == length]
    candidates = [entry for entry in same_length if entry.word not in excluded]
    if not candidates:
        candidates = same_length

    return (rng or random).choice(candidates)


class WordSelector:
    """
    Word source shared by every round of one game router.

    Keeps the append-only history of words already handed out so repeats
    are avoided across games and players.
    """

    def __init__(self, dictionary: Sequence[DictionaryEntry], rng: Optional[random.Random] = None):
        self.dictionary: List[DictionaryEntry] = list(dictionary)
        self.words = {entry.word for entry in self.dictionary}
        self.history: List[str] = []
        self.rng = rng or random.Random()

    def resolve_length(self, requested_length: int) -> int:
        return safe_word_length(requested_length, self.dictionary)

    def next_word(self, length: int) -> DictionaryEntry:
        """Picks a fresh word of `length` and records it in the history."""
        entry = pick_word(self.dictionary, self.history, length, self.rng)
        if entry.word not in self.history:
            self.history.append(entry.word)
        return entry

    def contains(self, word: str) -> bool:
        return word in self.words
