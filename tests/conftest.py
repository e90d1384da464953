import random

import pytest
from fastapi.testclient import TestClient

from wordscramble.game_logic import WordGameEngine
from wordscramble.dictionary import DictionaryService
from wordscramble.main import app, games


class FakeChecker:
    """Deterministic dictionary: recognizes exactly the words it was given."""

    def __init__(self, *words):
        self.words = set(words)
        self.calls = []

    def is_recognized_word(self, word):
        self.calls.append(word)
        return word in self.words


@pytest.fixture()
def checker():
    return FakeChecker('silk', 'worm', 'milk', 'slow', 'owl', 'silkworm')


@pytest.fixture()
def engine():
    eng = WordGameEngine(rng=random.Random(7))
    eng.start_round(['silkworm'])
    return eng


@pytest.fixture()
def dictionary():
    return DictionaryService({'silk', 'worm', 'Milk'})


@pytest.fixture()
def client(monkeypatch):
    games.games.clear()
    monkeypatch.setattr(games, 'word_list', ['silkworm'])
    monkeypatch.setattr(games, 'checker', DictionaryService({'silk', 'worm', 'milk', 'smirk'}))
    with TestClient(app) as test_client:
        yield test_client
    games.games.clear()
