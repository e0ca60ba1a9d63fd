#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Wordle Solver - expected value edition
Tracks letter constraints from feedback, narrows the candidate words and
ranks the next guesses by the expected fraction of candidates they keep.
"""

import os
import json
import time
import logging
import configparser
from collections import Counter
from copy import deepcopy
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Dict, Tuple, Set, Optional, NamedTuple, Sequence

from wordle_game import (
    WORD_LENGTH, GUESS_LIMIT, GREEN, YELLOW, GREY, COLORS, COLOR_CODES,
    Feedback, GuessOutcome, Wordle, check_word_list,
)

ALPHABET = "abcdefghijklmnopqrstuvwxyz"

# =========================
# 0. Configuration & Logging
# =========================

@dataclass
class SolverConfig:
    """Centralized solver configuration"""

    data_dir: str = "data"
    log_dir: str = "logs"
    starting_word: str = ""
    suggestions: int = 10

    @property
    def answers_file(self) -> str:
        return os.path.join(self.data_dir, "answers.txt")

    @property
    def guesses_file(self) -> str:
        return os.path.join(self.data_dir, "allowed_guesses.txt")


def load_config(path: str = "config.ini") -> SolverConfig:
    """Read the [solver] section of an INI file over the defaults"""
    cfg = SolverConfig()
    parser = configparser.ConfigParser()

    if not parser.read(path, encoding="utf-8"):
        logger.debug(f"No config file at {path}, using defaults")
        return cfg

    if parser.has_section("solver"):
        section = parser["solver"]
        cfg.data_dir = section.get("data_dir", cfg.data_dir)
        cfg.log_dir = section.get("log_dir", cfg.log_dir)
        cfg.starting_word = section.get("starting_word", cfg.starting_word).strip().lower()
        cfg.suggestions = section.getint("suggestions", cfg.suggestions)

    logger.info(f"Configuration loaded from {path}")
    return cfg

# Global config instance
config = SolverConfig()


class SolverLogger:
    """Log manager with different levels"""

    FORMAT = '%(asctime)s | %(levelname)-8s | %(funcName)-20s | %(message)s'
    DATEFMT = '%Y-%m-%d %H:%M:%S'

    def __init__(self, name: str = "WordleSolver"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)
        self.formatter = logging.Formatter(self.FORMAT, datefmt=self.DATEFMT)

        # Console handler (INFO and above)
        if not self.logger.handlers:
            ch = logging.StreamHandler()
            ch.setLevel(logging.INFO)
            ch.setFormatter(self.formatter)
            self.logger.addHandler(ch)

    def enable_file_logging(self, log_dir: str) -> str:
        """Add a DEBUG file handler writing to logs/solver_<timestamp>.log"""
        for handler in self.logger.handlers:
            if isinstance(handler, logging.FileHandler):
                return handler.baseFilename

        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        path = os.path.join(log_dir, f"solver_{timestamp}.log")

        fh = logging.FileHandler(path, encoding='utf-8')
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(self.formatter)
        self.logger.addHandler(fh)
        return path

    def debug(self, msg: str, **kwargs): self.logger.debug(msg, stacklevel=2, **kwargs)
    def info(self, msg: str, **kwargs): self.logger.info(msg, stacklevel=2, **kwargs)
    def warning(self, msg: str, **kwargs): self.logger.warning(msg, stacklevel=2, **kwargs)
    def error(self, msg: str, **kwargs): self.logger.error(msg, stacklevel=2, **kwargs)

# Global instance
logger = SolverLogger()

# =========================
# 1. Statistics
# =========================

class SolverStats:
    """Results of automated games, for benchmark reports"""

    def __init__(self):
        self.games: List[Dict] = []
        self.solve_times: List[float] = []
        self.guess_counts: List[int] = []
        self.wins: int = 0
        self.total_solves: int = 0

    def log_solve(self, word: str, result: "SolveResult"):
        self.games.append({
            'word': word,
            'guesses': result.guesses,
            'guess_count': result.guess_count,
            'win': result.won,
            'time': result.elapsed,
        })
        self.solve_times.append(result.elapsed)
        self.guess_counts.append(result.guess_count)
        self.wins += int(result.won)
        self.total_solves += 1

    def distribution(self) -> List[int]:
        """Number of games finished after 1..GUESS_LIMIT guesses"""
        counts = [0] * GUESS_LIMIT
        for n in self.guess_counts:
            counts[min(n, GUESS_LIMIT) - 1] += 1
        return counts

    def to_dict(self) -> Dict:
        n = self.total_solves
        return {
            'total_solves': n,
            'wins': self.wins,
            'losses': n - self.wins,
            'total_time': sum(self.solve_times),
            'average_time': sum(self.solve_times) / n if n else 0.0,
            'average_guesses': sum(self.guess_counts) / n if n else 0.0,
            'guess_distribution': self.distribution(),
        }

    def get_summary(self) -> str:
        if not self.total_solves:
            return "No statistics available."

        totals = self.to_dict()
        lines = [
            "\n" + "="*60,
            "📊 SOLVER STATISTICS",
            "="*60,
            f"Total games             : {totals['total_solves']}",
            f"Win rate                : {totals['wins'] / totals['total_solves'] * 100:.1f}%",
            f"Average guesses         : {totals['average_guesses']:.3f}",
            f"Average time            : {totals['average_time']:.3f}s",
            f"Time min/max            : {min(self.solve_times):.3f}s / {max(self.solve_times):.3f}s",
            "",
            "Guess distribution:",
        ]
        for i, count in enumerate(totals['guess_distribution'], 1):
            pct = count / totals['total_solves'] * 100
            lines.append(f"  • {i} guess{'es' if i > 1 else '  '}: {count:>6} ({pct:5.1f}%)")

        lines.append("="*60)
        return "\n".join(lines)

# =========================
# 2. Load Wordlists
# =========================

def load_wordlists(answers_file: Optional[str] = None,
                   guesses_file: Optional[str] = None) -> Tuple[List[str], List[str]]:
    """Load newline-delimited word lists"""
    answers_file = answers_file or config.answers_file
    guesses_file = guesses_file or config.guesses_file
    logger.info("Loading wordlists...")
    start = time.time()

    try:
        with open(answers_file, "r", encoding="utf-8") as f:
            answers = [l.strip().lower() for l in f if l.strip()]

        with open(guesses_file, "r", encoding="utf-8") as f:
            guesses = [l.strip().lower() for l in f if l.strip()]
    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        raise

    logger.info(f"✓ {len(answers)} answers and {len(guesses)} guesses loaded in {time.time()-start:.3f}s")
    return answers, guesses


def merge_wordlists(guesses: Sequence[str], answers: Sequence[str]) -> List[str]:
    """Allowed guesses followed by any answers missing from them"""
    known = set(guesses)
    return list(guesses) + [w for w in answers if w not in known]

# =========================
# 3. Letter Constraints
# =========================

@dataclass
class LetterCount:
    """What is known about how often a letter occurs in the secret"""
    green: int = 0
    yellow: int = 0
    total: int = 0
    fixed: bool = False


@dataclass
class LetterConstraints:
    """
    Everything learned from the feedback received so far.

    green  -- letter known at each position (never cleared once set)
    yellow -- positions where a letter is present in the word but not placed
    count  -- occurrence bounds per letter; `total` is exact once `fixed`
    """
    green: List[Optional[str]] = field(default_factory=lambda: [None] * WORD_LENGTH)
    yellow: Dict[str, Set[int]] = field(default_factory=lambda: {c: set() for c in ALPHABET})
    count: Dict[str, LetterCount] = field(default_factory=lambda: {c: LetterCount() for c in ALPHABET})

    def update(self, outcome: Feedback) -> None:
        """Merge one guess's feedback into the constraints"""
        found = Counter()     # occurrences proven by this guess
        repeated = Counter()  # yellow reports and greens on already placed positions
        placed = Counter()    # newly placed greens

        for i, (letter, color) in enumerate(outcome):
            letter = letter.lower()
            known = self.count[letter]

            if color == GREEN and self.green[i] is None:
                self.green[i] = letter
                placed[letter] += 1
                found[letter] += 1
            elif color in (GREEN, YELLOW):
                if color == YELLOW:
                    self.yellow[letter].add(i)
                # only reports beyond the already placed copies prove a new one
                repeated[letter] += 1
                if repeated[letter] > known.green:
                    found[letter] += 1
            elif color == GREY:
                # the guess showed more copies than the secret holds
                known.fixed = True

        for letter in set(found) | set(placed):
            known = self.count[letter]
            known.total = max(known.total, found[letter] + known.green)
            known.green += placed[letter]
            known.yellow = known.total - known.green

    def copy(self) -> "LetterConstraints":
        return deepcopy(self)

# =========================
# 4. Letter Occurrence
# =========================

@dataclass
class LetterOccurrence:
    """Share of candidate words containing a letter, overall and per position"""
    total: float = 0.0
    at_position: List[float] = field(default_factory=lambda: [0.0] * WORD_LENGTH)


def compute_letter_occurrence(candidates: Sequence[str]) -> Dict[str, LetterOccurrence]:
    """Calculate letter frequencies across all positions and individually"""
    contains = Counter()
    position_freq = [Counter() for _ in range(WORD_LENGTH)]

    for word in candidates:
        contains.update(set(word))
        for i, c in enumerate(word):
            position_freq[i][c] += 1

    n = len(candidates) or 1
    return {
        letter: LetterOccurrence(
            total=contains[letter] / n,
            at_position=[position_freq[i][letter] / n for i in range(WORD_LENGTH)],
        )
        for letter in ALPHABET
    }

# =========================
# 5. Candidate Filtering
# =========================

def is_consistent(word: str, constraints: LetterConstraints) -> bool:
    """Check a word against greens, yellow exclusions and letter counts"""
    counts = Counter()
    for i, letter in enumerate(word):
        placed = constraints.green[i]
        if placed is not None and placed != letter:
            return False
        if i in constraints.yellow[letter]:
            return False
        counts[letter] += 1

    for letter, known in constraints.count.items():
        n = counts[letter]
        # fewer copies than proven, or any mismatch once the count is exact
        if known.total != n and (known.fixed or known.total > n):
            return False

    return True


def filter_candidates(candidates: Sequence[str], constraints: LetterConstraints) -> List[str]:
    """Words still consistent with the constraints, in their original order"""
    return [w for w in candidates if is_consistent(w, constraints)]

# =========================
# 6. Scoring
# =========================

class ScoredGuess(NamedTuple):
    word: str
    value: float


# No candidate is consistent with the feedback
EMPTY_GUESS = ScoredGuess("", 0.0)


class WordScorer:
    """
    Expected value scoring.

    Each unresolved (letter, position) of a guess multiplies the score by
    p_pos² + (p_total - p_pos)² + (1 - p_total)², the approximate chance of
    that letter coming back green, yellow or grey, squared. The product is the
    expected fraction of candidates kept after the guess: lower is better.
    """

    def __init__(self, allowed_guesses: Sequence[str]):
        self.allowed_guesses = list(allowed_guesses)
        logger.debug(f"WordScorer initialized with {len(self.allowed_guesses)} guesses")

    @staticmethod
    def score(word: str, occurrence: Dict[str, LetterOccurrence],
              constraints: LetterConstraints) -> float:
        used = Counter()
        settled = [False] * WORD_LENGTH

        # letters already certain at their position add nothing
        for i, letter in enumerate(word):
            if constraints.green[i] == letter or i in constraints.yellow[letter]:
                used[letter] += 1
                settled[i] = True

        value = 1.0
        for i, letter in enumerate(word):
            if settled[i]:
                continue

            known = constraints.count[letter]
            if (known.fixed and used[letter] >= known.total) or used[letter] >= max(known.total, 1):
                continue
            used[letter] += 1

            p_total = occurrence[letter].total
            p_pos = occurrence[letter].at_position[i]
            value *= p_pos ** 2 + (p_total - p_pos) ** 2 + (1 - p_total) ** 2

        return value

    @staticmethod
    def _settled(candidates: Sequence[str]) -> Optional[ScoredGuess]:
        if not candidates:
            return EMPTY_GUESS
        if len(candidates) == 1:
            return ScoredGuess(candidates[0], 0.0)
        return None

    def best_guess(self, candidates: Sequence[str], constraints: LetterConstraints) -> ScoredGuess:
        """Lowest scoring guess; ties go to the earliest allowed word"""
        settled = self._settled(candidates)
        if settled is not None:
            return settled

        occurrence = compute_letter_occurrence(candidates)
        best = ScoredGuess("", float("inf"))
        for word in self.allowed_guesses:
            value = self.score(word, occurrence, constraints)
            if value < best.value:
                best = ScoredGuess(word, value)

        return best

    def rank_guesses(self, candidates: Sequence[str], constraints: LetterConstraints) -> List[ScoredGuess]:
        """Every allowed guess, sorted ascending by score"""
        settled = self._settled(candidates)
        if settled is not None:
            return [settled]

        occurrence = compute_letter_occurrence(candidates)
        ranked = [ScoredGuess(w, self.score(w, occurrence, constraints)) for w in self.allowed_guesses]
        ranked.sort(key=lambda g: g.value)
        return ranked

# =========================
# 7. Solver Session
# =========================

class NoCandidatesError(RuntimeError):
    """No solution word is consistent with the feedback received"""


class SessionState(Enum):
    FRESH = "fresh"
    CONSTRAINED = "constrained"
    RESOLVED = "resolved"


@dataclass
class SolveResult:
    guesses: List[str]
    guess_count: int
    won: bool
    elapsed: float


def validate_outcome(outcome) -> Feedback:
    """Check the shape of one feedback and return it normalized"""
    if not isinstance(outcome, (list, tuple)) or len(outcome) != WORD_LENGTH:
        raise ValueError(f"Feedback must be a sequence of length {WORD_LENGTH}")

    normalized = []
    for pair in outcome:
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise ValueError("Each feedback value must be a (letter, color) pair")

        letter, color = pair
        if not isinstance(letter, str) or len(letter) != 1 or letter.lower() not in ALPHABET:
            raise ValueError(f"Letter in feedback must be in alphabet, got {letter!r}")
        if color not in COLORS:
            raise ValueError(f"Color in feedback must be one of {', '.join(COLORS)}, got {color!r}")

        normalized.append((letter.lower(), color))

    return tuple(normalized)


def _check_words(words: Sequence[str], name: str) -> List[str]:
    normalized = []
    for w in words:
        if not isinstance(w, str) or len(w) != WORD_LENGTH or any(c not in ALPHABET for c in w.lower()):
            raise ValueError(f"Parameter '{name}' contains an invalid word: {w!r}")
        normalized.append(w.lower())
    return normalized


def _check_starting_word(starting_word) -> str:
    if not isinstance(starting_word, str) or (starting_word and len(starting_word) != WORD_LENGTH):
        raise ValueError(f"Parameter 'starting_word' must be a string of length {WORD_LENGTH} or omitted")
    return starting_word.lower()


class SolverSession:
    """
    Live solving state for one game.

    Feedback only enters through `apply_outcome`, which clears the cached
    results; candidates are re-filtered lazily on the next read.
    """

    def __init__(self, allowed_guesses: Sequence[str],
                 possible_solutions: Optional[Sequence[str]] = None):
        check_word_list(allowed_guesses, "allowed_guesses")
        check_word_list(possible_solutions, "possible_solutions", optional=True)

        self.allowed_guesses = _check_words(allowed_guesses, "allowed_guesses")
        if possible_solutions is None:
            self._candidates = list(self.allowed_guesses)
        else:
            self._candidates = _check_words(possible_solutions, "possible_solutions")

        self.constraints = LetterConstraints()
        self.scorer = WordScorer(self.allowed_guesses)
        self.history: List[Feedback] = []
        self._stale = False
        self._best: Optional[ScoredGuess] = None
        self._ranked: Optional[List[ScoredGuess]] = None

    # ---- feedback ----

    def apply_outcome(self, *outcomes) -> "SolverSession":
        """Apply one or more feedbacks; all are validated before any is applied"""
        try:
            validated = [validate_outcome(o) for o in outcomes]
        except ValueError as e:
            logger.warning(f"Rejected feedback: {e}")
            raise

        for outcome in validated:
            self.constraints.update(outcome)
            self.history.append(outcome)

        self._best = None
        self._ranked = None
        self._stale = True
        logger.debug(f"{len(validated)} feedback(s) applied, {len(self.history)} in total")
        return self

    def _refresh(self) -> None:
        if not self._stale:
            return
        before = len(self._candidates)
        self._candidates = filter_candidates(self._candidates, self.constraints)
        self._stale = False
        logger.debug(f"Candidates filtered: {before} -> {len(self._candidates)}")

    @property
    def candidates(self) -> List[str]:
        self._refresh()
        return list(self._candidates)

    @property
    def state(self) -> SessionState:
        if not self.history:
            return SessionState.FRESH
        self._refresh()
        return SessionState.RESOLVED if len(self._candidates) <= 1 else SessionState.CONSTRAINED

    # ---- suggestions ----

    def best_word(self) -> ScoredGuess:
        """Best next guess; EMPTY_GUESS when no candidate remains"""
        if self._best is None:
            if self._ranked is not None:
                self._best = self._ranked[0]
            else:
                self._refresh()
                self._best = self.scorer.best_guess(self._candidates, self.constraints)
        return self._best

    def best_words_ranked(self) -> List[ScoredGuess]:
        """Allowed guesses ranked from most to least informative"""
        if self._ranked is None:
            self._refresh()
            self._ranked = self.scorer.rank_guesses(self._candidates, self.constraints)
        return list(self._ranked)

    # ---- automated play ----

    def _next_guess(self) -> str:
        best = self.best_word()
        if not best.word:
            raise NoCandidatesError("No solution word is consistent with the feedback received")
        return best.word

    def _solve_steps(self, starting_word: str):
        """Yields guesses, receives their outcomes; returns the final outcome"""
        guess = starting_word or self._next_guess()
        while True:
            outcome = yield guess
            self.apply_outcome(outcome.result)
            if outcome.ended:
                return outcome
            logger.debug(f"{guess.upper()}: {len(self.candidates)} candidates remain")
            guess = self._next_guess()

    def _finish(self, outcome: GuessOutcome, guesses: List[str], start: float) -> SolveResult:
        result = SolveResult(guesses, outcome.guesses_used, outcome.won, time.time() - start)
        logger.info(f"{'✓ Solved' if result.won else '❌ Not solved'} in {result.guess_count} guesses: "
                    f"{', '.join(w.upper() for w in guesses)}")
        return result

    def auto_solve(self, game, starting_word: str = "") -> SolveResult:
        """Play `game` until it ends; `game.guess` returns a GuessOutcome"""
        steps = self._solve_steps(_check_starting_word(starting_word))
        start = time.time()
        guesses = []
        guess = next(steps)

        while True:
            guesses.append(guess)
            outcome = game.guess(guess)
            try:
                guess = steps.send(outcome)
            except StopIteration as done:
                return self._finish(done.value, guesses, start)

    async def auto_solve_async(self, game, starting_word: str = "") -> SolveResult:
        """Same as `auto_solve` for a game whose `guess` is a coroutine"""
        steps = self._solve_steps(_check_starting_word(starting_word))
        start = time.time()
        guesses = []
        guess = next(steps)

        while True:
            guesses.append(guess)
            outcome = await game.guess(guess)
            try:
                guess = steps.send(outcome)
            except StopIteration as done:
                return self._finish(done.value, guesses, start)


def solve(game, allowed_guesses: Sequence[str],
          possible_solutions: Optional[Sequence[str]] = None,
          starting_word: str = "") -> SolveResult:
    """Play a game from scratch with a fresh session"""
    return SolverSession(allowed_guesses, possible_solutions).auto_solve(game, starting_word)


async def solve_async(game, allowed_guesses: Sequence[str],
                      possible_solutions: Optional[Sequence[str]] = None,
                      starting_word: str = "") -> SolveResult:
    return await SolverSession(allowed_guesses, possible_solutions).auto_solve_async(game, starting_word)

# =========================
# 8. Benchmark
# =========================

def run_benchmark(allowed_guesses: Sequence[str], possible_solutions: Sequence[str],
                  starting_word: str = "", report_path: Optional[str] = None) -> SolverStats:
    """Solve every possible solution once and collect statistics"""
    logger.info(f"Benchmark on {len(possible_solutions)} words "
                f"(starting word: {starting_word.upper() or 'best'})")
    wordle = Wordle(possible_solutions, allowed_guesses)
    bench_stats = SolverStats()

    for i, secret in enumerate(possible_solutions, 1):
        game = wordle.create_game(secret)
        result = solve(game, allowed_guesses, possible_solutions, starting_word)
        bench_stats.log_solve(secret, result)

        if i % 100 == 0:
            logger.debug(f"Progress: {i}/{len(possible_solutions)}")

    if report_path:
        report = {
            'starting_word': starting_word,
            'allowed_guesses': len(allowed_guesses),
            'possible_solutions': len(possible_solutions),
            'totals': bench_stats.to_dict(),
            'games': bench_stats.games,
        }
        directory = os.path.dirname(report_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(report_path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2)
        logger.info(f"✓ Report written to {report_path}")

    return bench_stats

# =========================
# 9. Interactive Mode
# =========================

def parse_feedback(text: str) -> Feedback:
    """Parse 'crane ryrgr': five letters then five codes (g=green, y=yellow, r=grey)"""
    compact = "".join(text.split()).lower()
    if len(compact) != WORD_LENGTH * 2:
        raise ValueError(f"Expected {WORD_LENGTH} letters and {WORD_LENGTH} color codes, e.g. 'crane ryrgr'")

    word, codes = compact[:WORD_LENGTH], compact[WORD_LENGTH:]
    if any(c not in ALPHABET for c in word):
        raise ValueError(f"Invalid word: {word!r}")

    try:
        colors = [COLOR_CODES[c] for c in codes]
    except KeyError as e:
        raise ValueError(f"Unknown color code {e.args[0]!r} (use g, y or r)") from e

    return tuple(zip(word, colors))


class InteractiveSolver:
    """Terminal assistant: enter the feedback of each guess, get suggestions"""

    def __init__(self, session: SolverSession, suggestions: int = 10,
                 input_fn=input, output_fn=print):
        self.session = session
        self.suggestions = max(1, suggestions)
        self.input_fn = input_fn
        self.output_fn = output_fn
        logger.info("Interactive mode activated")

    def show_suggestions(self):
        ranked = self.session.best_words_ranked()[:self.suggestions]
        best = ranked[0]

        if not best.word:
            self.output_fn("❌ No candidate word matches this feedback")
            return
        if len(ranked) == 1 and best.value == 0:
            self.output_fn(f"✓ Solution: {best.word.upper()}")
            return

        candidates = set(self.session.candidates)
        self.output_fn(f"\n🎯 {len(candidates)} candidates remain. Suggested next guesses:")
        for i, (word, value) in enumerate(ranked, 1):
            mark = "✓" if word in candidates else " "
            self.output_fn(f"  {i:>2}. {word.upper():<8} {mark}  (expected: {value:.4f})")

    def run(self):
        self.output_fn("\n" + "="*60)
        self.output_fn("Enter feedback as 'crane ryrgr' (g=green, y=yellow, r=grey)")
        self.output_fn("Empty line to quit")
        self.output_fn("="*60)

        while True:
            text = self.input_fn("Feedback: ").strip()
            if not text:
                break

            try:
                outcome = parse_feedback(text)
            except ValueError as e:
                self.output_fn(f"❌ {e}")
                continue

            self.session.apply_outcome(outcome)
            self.show_suggestions()

        self.output_fn("Session complete!")

# =========================
# 10. Main Entry Point
# =========================

def main(argv=None):
    """Main function with argument handling"""
    import argparse

    parser = argparse.ArgumentParser(
        description="Wordle Solver - expected value edition",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Usage examples:
  wordle-solver --play                      # Enter feedback, get suggestions
  wordle-solver --opening                   # Suggest opening words
  wordle-solver --benchmark --report r.json # Solve every answer
        """
    )

    parser.add_argument('--play', '-p', action='store_true',
                        help='Interactive assistant')
    parser.add_argument('--opening', '-o', action='store_true',
                        help='Show best opening words')
    parser.add_argument('--benchmark', '-b', action='store_true',
                        help='Solve every possible answer and show statistics')
    parser.add_argument('--report', help='Write the benchmark report (JSON) to this file')
    parser.add_argument('--starting-word', help='Forced first guess for the benchmark')
    parser.add_argument('--answers', help='Possible solutions word list')
    parser.add_argument('--guesses', help='Allowed guesses word list')
    parser.add_argument('--config', default='config.ini', help='INI configuration file')
    parser.add_argument('--suggestions', '-n', type=int, help='Number of suggested words')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        default='INFO', help='Logging level')

    args = parser.parse_args(argv)

    # Adjust log level
    logger.logger.setLevel(getattr(logging, args.log_level))

    cfg = load_config(args.config)
    if args.suggestions is not None and args.suggestions < 1:
        parser.error("--suggestions must be at least 1")
    suggestions = max(1, args.suggestions or cfg.suggestions)

    if not (args.play or args.opening or args.benchmark):
        parser.print_help()
        return

    logger.enable_file_logging(cfg.log_dir)

    answers, guesses = load_wordlists(args.answers or cfg.answers_file,
                                      args.guesses or cfg.guesses_file)
    allowed = merge_wordlists(guesses, answers)

    if args.play:
        InteractiveSolver(SolverSession(allowed, answers), suggestions).run()
        return

    if args.opening:
        print("\n🎯 BEST OPENING WORDS")
        print("="*50)
        ranked = SolverSession(allowed, answers).best_words_ranked()[:suggestions]
        print(f"\n{'Rank':<6}{'Word':<12}{'Expected':<10}")
        print("-"*28)
        for i, (word, value) in enumerate(ranked, 1):
            print(f"{i:<6}{word.upper():<12}{value:.4f}")
        return

    bench_stats = run_benchmark(allowed, answers,
                                _check_starting_word(args.starting_word or cfg.starting_word),
                                args.report)
    print(bench_stats.get_summary())


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\n⚠️  User interruption")
        logger.info("Program interrupted by user")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        print(f"\n❌ Error: {e}")
