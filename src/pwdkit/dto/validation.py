from collections.abc import Mapping
from typing import Any, Callable, Optional

from pydantic import Field
from typing_extensions import Self

from .abstract import AbstractDTO, Count


class CustomRuleResult(AbstractDTO):
    """
    The outcome of a custom rule. Rules may return an instance or a mapping with
    either ``is_valid`` or ``isValid`` as the key.
    """

    is_valid: bool
    error: str = ""


CustomRule = Callable[[str], CustomRuleResult | Mapping[str, Any]]


class ValidationRuleSet(AbstractDTO):
    """
    A declarative set of password rules. Every field is optional and a missing
    field is simply not checked.
    """

    min_length: Count = None
    max_length: Count = None
    uppercase_count: Count = None
    lowercase_count: Count = None
    numbers_count: Count = None
    special_characters_count: Count = None
    custom_rules: Optional[CustomRule] = Field(default=None, exclude=True)


class ValidationResult(AbstractDTO):
    is_valid: bool
    errors: list[str]

    @classmethod
    def from_errors(cls, errors: list[str]) -> Self:
        return cls(is_valid=not errors, errors=errors)
