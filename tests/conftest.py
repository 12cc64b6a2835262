import os
import random
import tempfile

# Keep test runs from writing logs into the working tree
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordgame-logs-'))

import pytest

from wordgame.dialogs.base import Dialog
from wordgame.models.game import DictionaryEntry, ScoringConfig
from wordgame.services.word_selector import WordSelector


class ScriptedDialog(Dialog):
    """
    Answers dialog requests from a list, in order.

    Booleans answer yes/no questions, strings (or None for a cancel)
    answer line prompts. Once the script runs out every question is
    answered with no / cancel, which unwinds any game to its exit.
    """

    def __init__(self, answers=None):
        self.answers = list(answers or [])
        self.asked = []
        self.told = []

    def _next(self):
        return self.answers.pop(0) if self.answers else None

    def ask_yes_no(self, message):
        self.asked.append(message)
        return self._next() is True

    def ask_line(self, message, default=""):
        self.asked.append(message)
        return self._next()

    def tell_user(self, message):
        self.told.append(message)

    def told_containing(self, text):
        return [message for message in self.told if text in message]


class FirstChoiceRandom(random.Random):
    """Always picks the first candidate, making target words predictable."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def dictionary():
    words = [
        ("apple", "A round fruit."),
        ("alert", "Quick to notice danger."),
        ("crane", "A tall wading bird."),
        ("sheep", "A woolly farm animal."),
        ("llama", "A South American pack animal."),
        ("cat", "A small domesticated feline."),
        ("dog", "A domesticated canine."),
        ("planet", "A body orbiting a star."),
    ]
    return [DictionaryEntry(word, definition) for word, definition in words]


@pytest.fixture
def rng():
    return FirstChoiceRandom(7)


@pytest.fixture
def selector(dictionary, rng):
    return WordSelector(dictionary, rng)


@pytest.fixture
def config():
    return ScoringConfig()


@pytest.fixture
def scripted_dialog():
    def build(*answers):
        return ScriptedDialog(answers)
    return build
