from .generation import DEFAULT_LENGTH, GenerationRequest
from .validation import (
    CustomRule,
    CustomRuleResult,
    ValidationResult,
    ValidationRuleSet,
)

__all__ = (
    "DEFAULT_LENGTH",
    "GenerationRequest",
    "CustomRule",
    "CustomRuleResult",
    "ValidationResult",
    "ValidationRuleSet",
)
