from ._generator import PasswordGenerator
from ._strength import (
    ScoreFactors,
    StrengthLevel,
    get_password_strength,
    get_password_strength_level,
    level_for_score,
    score_factors,
)
from ._validator import validate_password_against_rules

__all__ = (
    "PasswordGenerator",
    "ScoreFactors",
    "StrengthLevel",
    "get_password_strength",
    "get_password_strength_level",
    "level_for_score",
    "score_factors",
    "validate_password_against_rules",
)
