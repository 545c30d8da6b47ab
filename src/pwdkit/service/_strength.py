import logging
import string
from dataclasses import dataclass
from enum import StrEnum
from itertools import pairwise
from typing import Any

from more_itertools import quantify, run_length, windowed

from ..charset import CharacterClass

__all__ = (
    "StrengthLevel",
    "ScoreFactors",
    "score_factors",
    "get_password_strength",
    "level_for_score",
    "get_password_strength_level",
)

logger = logging.getLogger(__name__)

COMMON_PASSWORDS = (
    "password",
    "123456",
    "12345678",
    "qwerty",
    "abc123",
    "password1",
    "admin",
    "letmein",
    "welcome",
    "monkey",
)
KEYBOARD_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm", "1234567890")
KEYBOARD_WINDOW = 4

CLASS_WEIGHT = 8.0
FULL_DIVERSITY_LENGTH = 8
REPETITION_WEIGHT = 20.0
REPEATED_RUN_PENALTY = 5.0
SEQUENCE_RUN_WEIGHT = 2.0
SEQUENCE_CAP = 15.0
KEYBOARD_WINDOW_PENALTY = 5.0
KEYBOARD_CAP = 15.0
WEAK_LITERAL_PENALTY = 15.0
WEAK_LITERAL_CEILING = 45
MAX_SCORE = 100

WEAK_THRESHOLD = 30
STRONG_THRESHOLD = 70

_KEYBOARD_RUNS = frozenset(
    seq[i : i + KEYBOARD_WINDOW]
    for row in KEYBOARD_ROWS
    for seq in (row, row[::-1])
    for i in range(len(seq) - KEYBOARD_WINDOW + 1)
)


class StrengthLevel(StrEnum):
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"


@dataclass(slots=True, frozen=True)
class ScoreFactors:
    """
    The contributions a password's score is made of. Penalties are stored as
    positive numbers and subtracted from the sum of the bonuses.
    """

    length: float = 0.0
    diversity: float = 0.0
    repetition: float = 0.0
    sequential: float = 0.0
    keyboard: float = 0.0
    weak_literal: float = 0.0
    ceiling: int = MAX_SCORE

    @property
    def total(self) -> int:
        raw = (
            self.length
            + self.diversity
            - self.repetition
            - self.sequential
            - self.keyboard
            - self.weak_literal
        )
        return int(min(max(raw, 0.0), float(self.ceiling)))


def _char_class(char: str) -> CharacterClass:
    if char in string.ascii_uppercase:
        return CharacterClass.UPPERCASE
    if char in string.ascii_lowercase:
        return CharacterClass.LOWERCASE
    if char in string.digits:
        return CharacterClass.DIGIT
    return CharacterClass.SPECIAL


def _length_points(length: int) -> float:
    if length <= 3:
        return 4.0 * length
    if length <= 7:
        return 12.0 + 4.0 * (length - 3)
    if length <= 11:
        return 28.0 + 3.0 * (length - 7)
    return 40.0 + 2.0 * (length - 11)


def _sequence_step(prev: str, cur: str) -> int | None:
    if prev in string.ascii_letters and cur in string.ascii_letters:
        return ord(cur.lower()) - ord(prev.lower())
    if prev in string.digits and cur in string.digits:
        return ord(cur) - ord(prev)
    return None


def _sequence_runs(password: str) -> list[int]:
    """
    Returns the lengths of the ascending or descending runs (``abc``, ``321``,
    ``XyZ``) at least three characters long.
    """
    runs: list[int] = []
    length, step = 1, 0

    for prev, cur in pairwise(password):
        delta = _sequence_step(prev, cur)
        if delta in (-1, 1) and (length == 1 or delta == step):
            length, step = length + 1, delta
            continue

        if length >= 3:
            runs.append(length)
        length, step = (2, delta) if delta in (-1, 1) else (1, 0)

    if length >= 3:
        runs.append(length)
    return runs


def _keyboard_windows(password: str) -> int:
    if len(password) < KEYBOARD_WINDOW:
        return 0
    return quantify(
        "".join(window) in _KEYBOARD_RUNS
        for window in windowed(password.lower(), KEYBOARD_WINDOW)
    )


def score_factors(password: Any) -> ScoreFactors:
    if not isinstance(password, str) or not password:
        return ScoreFactors()

    length = len(password)
    classes = {_char_class(char) for char in password}

    repetition = REPETITION_WEIGHT * (1 - len(set(password)) / length)
    if max(count for _, count in run_length.encode(password)) >= 3:
        repetition += REPEATED_RUN_PENALTY

    lowered = password.lower()
    is_common = any(common in lowered for common in COMMON_PASSWORDS)

    return ScoreFactors(
        length=_length_points(length),
        diversity=(
            CLASS_WEIGHT * len(classes) * min(1.0, length / FULL_DIVERSITY_LENGTH)
        ),
        repetition=repetition,
        sequential=min(
            SEQUENCE_CAP, SEQUENCE_RUN_WEIGHT * sum(_sequence_runs(password))
        ),
        keyboard=min(
            KEYBOARD_CAP, KEYBOARD_WINDOW_PENALTY * _keyboard_windows(password)
        ),
        weak_literal=WEAK_LITERAL_PENALTY if is_common else 0.0,
        ceiling=WEAK_LITERAL_CEILING if is_common else MAX_SCORE,
    )


def get_password_strength(password: Any) -> int:
    """
    Scores a password from 0 (weakest) to 100 (strongest).

    Length and the number of character classes raise the score; repeated
    characters, alphabetical or numerical sequences, keyboard rows and well-known
    passwords lower it. Anything that is not a non-empty string scores 0.
    """
    factors = score_factors(password)
    logger.debug("scored a password at %d: %r", factors.total, factors)
    return factors.total


def level_for_score(score: int) -> StrengthLevel:
    if score < WEAK_THRESHOLD:
        return StrengthLevel.WEAK
    if score < STRONG_THRESHOLD:
        return StrengthLevel.MEDIUM
    return StrengthLevel.STRONG


def get_password_strength_level(password: Any) -> StrengthLevel:
    return level_for_score(get_password_strength(password))
