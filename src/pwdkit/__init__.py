__all__ = (
    "dto",
    "exc",
    "CharacterClass",
    "GenerationRequest",
    "PasswordGenerator",
    "RandomSource",
    "ScoreFactors",
    "StrengthLevel",
    "ValidationResult",
    "ValidationRuleSet",
    "generate_password",
    "get_password_strength",
    "get_password_strength_level",
    "score_factors",
    "validate_password_against_rules",
)
__version__ = "0.1.0"

from . import dto, exc
from .charset import CharacterClass
from .dto import GenerationRequest, ValidationResult, ValidationRuleSet
from .service import (
    PasswordGenerator,
    ScoreFactors,
    StrengthLevel,
    get_password_strength,
    get_password_strength_level,
    score_factors,
    validate_password_against_rules,
)
from .util.random import RandomSource


def generate_password(
    length: int = dto.DEFAULT_LENGTH,
    *,
    uppercase_count: int | None = None,
    lowercase_count: int | None = None,
    numbers_count: int | None = None,
    special_characters_count: int | None = None,
    rng: RandomSource | None = None,
) -> str:
    """
    Generates a random password without confusing characters (i, l, 1, L, o, 0, O).

    Each ``*_count`` sets the minimum number of characters of its class. A class
    whose count is left as ``None`` never appears in the password, unless all of
    them are ``None``, in which case every class appears at least once.

    Example::

        generate_password(16, uppercase_count=2, numbers_count=3)
        # 16 characters drawn from uppercase letters and digits only, with at
        # least 2 of the former and 3 of the latter

    Raises:
        InvalidLengthError: If ``length`` is less than one.
        OverconstrainedRequestError: If the counts add up to more than ``length``.
    """
    return PasswordGenerator(rng).generate(
        GenerationRequest(
            length=length,
            uppercase_count=uppercase_count,
            lowercase_count=lowercase_count,
            numbers_count=numbers_count,
            special_characters_count=special_characters_count,
        )
    )
