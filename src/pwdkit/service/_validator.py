import logging
import string
from collections.abc import Mapping
from typing import Any

from more_itertools import quantify

from .. import dto

__all__ = ("validate_password_against_rules",)

logger = logging.getLogger(__name__)

# shown to users in messages only; any non-alphanumeric character is counted
SPECIAL_CHARACTERS_HINT = "(!@#$%^&*)"

_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)


def _is_special(char: str) -> bool:
    return char not in _ALPHANUMERIC


def _must_contain(count: int, singular: str, plural: str) -> str:
    if count > 1:
        return f"Must contain at least {count} {plural}"
    return f"Must contain {singular}"


def validate_password_against_rules(
    password: str,
    rules: dto.ValidationRuleSet | Mapping[str, Any] | None = None,
) -> dto.ValidationResult:
    """
    Checks ``password`` against every rule of ``rules`` and reports all the
    violations, in the order the rules are declared on
    :class:`~pwdkit.dto.ValidationRuleSet`.

    Special characters are counted as anything other than an ASCII letter or digit,
    which is broader than the alphabet used by the generator.

    Raises:
        pydantic.ValidationError: If ``rules`` is a mapping that does not describe
            a valid rule set.
    """
    if rules is None:
        rules = dto.ValidationRuleSet()
    elif not isinstance(rules, dto.ValidationRuleSet):
        rules = dto.ValidationRuleSet.model_validate(rules)

    errors: list[str] = []

    if rules.min_length is not None and len(password) < rules.min_length:
        errors.append(f"Must be at least {rules.min_length} characters long")
    if rules.max_length is not None and len(password) > rules.max_length:
        errors.append(f"Must be at most {rules.max_length} characters long")

    for required, counter, singular, plural in (
        (
            rules.uppercase_count,
            string.ascii_uppercase.__contains__,
            "an uppercase letter",
            "uppercase letters",
        ),
        (
            rules.lowercase_count,
            string.ascii_lowercase.__contains__,
            "a lowercase letter",
            "lowercase letters",
        ),
        (
            rules.numbers_count,
            string.digits.__contains__,
            "a number",
            "numbers",
        ),
        (
            rules.special_characters_count,
            _is_special,
            f"a special character {SPECIAL_CHARACTERS_HINT}",
            f"special characters {SPECIAL_CHARACTERS_HINT}",
        ),
    ):
        if required is None:
            continue
        if quantify(password, counter) < required:
            errors.append(_must_contain(required, singular, plural))

    if rules.custom_rules is not None:
        outcome = dto.CustomRuleResult.model_validate(rules.custom_rules(password))
        if not outcome.is_valid:
            errors.append(outcome.error)

    logger.debug("validated a password, %d rule(s) violated", len(errors))
    return dto.ValidationResult.from_errors(errors)
