import pytest

from wordle_game import Wordle

WORDS = ["crane", "trace", "grace", "brace", "space", "place"]


@pytest.fixture
def words():
    return list(WORDS)


@pytest.fixture
def wordle(words):
    return Wordle(words, words)
