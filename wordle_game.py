#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Wordle game simulation
Enforces the rules of the original game: six guesses, green/yellow/grey
feedback with correct handling of repeated letters.
"""

import logging
import random
from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

logger = logging.getLogger("WordleSolver.game")

WORD_LENGTH = 5
GUESS_LIMIT = 6
GREEN, YELLOW, GREY = "green", "yellow", "grey"
COLORS = (GREEN, YELLOW, GREY)

# Human input encoding, e.g. "crane ryrgr"
COLOR_CODES = {"g": GREEN, "y": YELLOW, "r": GREY}
CODE_FOR_COLOR = {color: code for code, color in COLOR_CODES.items()}

# One (letter, color) pair per position
Feedback = Tuple[Tuple[str, str], ...]


class GameOverError(RuntimeError):
    """Raised when guessing in a game that has already ended"""


@dataclass(frozen=True)
class GuessOutcome:
    """Result of a single guess, as returned by any game adapter"""
    result: Feedback
    guesses_used: int
    won: bool
    ended: bool


def compute_feedback(secret: str, guess: str) -> Feedback:
    """
    Feedback of `guess` against `secret`.
    Greens are matched first so that a repeated letter is only marked yellow
    while unmatched copies remain in the secret.
    """
    colors = [GREY] * WORD_LENGTH
    remaining = Counter()

    # Phase 1: Greens (exact match)
    for i in range(WORD_LENGTH):
        if guess[i] == secret[i]:
            colors[i] = GREEN
        else:
            remaining[secret[i]] += 1

    # Phase 2: Yellows (present elsewhere)
    for i in range(WORD_LENGTH):
        if colors[i] == GREY and remaining[guess[i]] > 0:
            colors[i] = YELLOW
            remaining[guess[i]] -= 1

    return tuple(zip(guess, colors))


def check_word_list(words, name: str, optional: bool = False) -> None:
    if words is None and optional:
        return
    if not isinstance(words, (list, tuple)):
        raise TypeError(f"Parameter '{name}' must be a list of words" + (" or omitted" if optional else ""))
    if not words:
        raise ValueError(f"Parameter '{name}' cannot be empty")


class Wordle:
    """
    Word lists shared by every game it creates.
    If `allowed_guesses` is omitted, any word of length 5 can be guessed.
    """

    def __init__(self, possible_solutions: Sequence[str],
                 allowed_guesses: Optional[Sequence[str]] = None):
        check_word_list(possible_solutions, "possible_solutions")
        check_word_list(allowed_guesses, "allowed_guesses", optional=True)

        self.possible_solutions = [w.lower() for w in possible_solutions]
        self.allowed_guesses = [w.lower() for w in allowed_guesses] if allowed_guesses is not None else None
        self._allowed_set = set(self.possible_solutions)
        if self.allowed_guesses is not None:
            self._allowed_set.update(self.allowed_guesses)

    def is_allowed(self, word: str) -> bool:
        return self.allowed_guesses is None or word in self._allowed_set

    def create_game(self, secret: Optional[str] = None,
                    rng: Optional[random.Random] = None) -> "WordleGame":
        """New game; a random solution is drawn unless a known `secret` is given"""
        if secret is not None:
            if not isinstance(secret, str) or len(secret) != WORD_LENGTH:
                raise ValueError(f"Parameter 'secret' must be a string of length {WORD_LENGTH} or omitted")
            secret = secret.lower()

        if secret is None or secret not in self._allowed_set:
            secret = (rng or random).choice(self.possible_solutions)

        return WordleGame(self, secret)


class WordleGame:
    """A single game with a fixed secret word"""

    def __init__(self, wordle: Wordle, secret: str):
        self._wordle = wordle
        self._secret = secret
        self.guess_count = 0
        self.ended = False
        self.won = False
        self.status: Optional[GuessOutcome] = None
        self.history: List[str] = []

    def guess(self, word: str) -> GuessOutcome:
        """Make a guess attempt (at most 6 per game)"""
        if self.ended:
            raise GameOverError("Game has already ended")
        if not isinstance(word, str) or len(word) != WORD_LENGTH:
            raise ValueError(f"Parameter 'word' must be a string of length {WORD_LENGTH}")

        word = word.lower()
        if not self._wordle.is_allowed(word):
            raise ValueError(f"Guess word '{word}' is not in allowed guesses")

        self.guess_count += 1
        self.history.append(word)

        result = compute_feedback(self._secret, word)
        self.won = word == self._secret
        self.ended = self.won or self.guess_count == GUESS_LIMIT

        logger.debug(f"Guess {self.guess_count}: {word.upper()} -> "
                     f"{''.join(CODE_FOR_COLOR[color] for _, color in result)}")

        self.status = GuessOutcome(result, self.guess_count, self.won, self.ended)
        return self.status

    def reveal_word(self) -> str:
        """End the game and return the secret word"""
        self.ended = True
        return self._secret
