from enum import StrEnum
from types import MappingProxyType

__all__ = ("CharacterClass", "ALPHABETS", "alphabet", "class_of")


class CharacterClass(StrEnum):
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGIT = "digit"
    SPECIAL = "special"


# confusing glyphs (i, l, 1, L, o, 0, O) are left out on purpose
ALPHABETS = MappingProxyType(
    {
        CharacterClass.UPPERCASE: "ABCDEFGHJKMNPQRSTUVWXYZ",
        CharacterClass.LOWERCASE: "abcdefghjkmnpqrstuvwxyz",
        CharacterClass.DIGIT: "23456789",
        CharacterClass.SPECIAL: "!@#$%^&*",
    }
)


def alphabet(cls: CharacterClass) -> str:
    return ALPHABETS[cls]


def class_of(char: str) -> CharacterClass | None:
    """
    Returns the class whose alphabet contains ``char``, or ``None`` when the
    character is not part of any generator alphabet (ambiguous glyphs included).
    """
    for cls, chars in ALPHABETS.items():
        if char in chars:
            return cls
    return None
