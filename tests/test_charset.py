import pytest

from pwdkit.charset import ALPHABETS, CharacterClass, alphabet, class_of

AMBIGUOUS = set("il1Lo0O")


def test_alphabets_exclude_ambiguous_glyphs():
    for chars in ALPHABETS.values():
        assert chars
        assert not AMBIGUOUS & set(chars)


def test_alphabets_are_disjoint():
    seen: set[str] = set()
    for chars in ALPHABETS.values():
        assert not seen & set(chars)
        seen |= set(chars)


def test_special_alphabet():
    assert alphabet(CharacterClass.SPECIAL) == "!@#$%^&*"


@pytest.mark.parametrize(
    "char, expected",
    [
        ("A", CharacterClass.UPPERCASE),
        ("z", CharacterClass.LOWERCASE),
        ("7", CharacterClass.DIGIT),
        ("&", CharacterClass.SPECIAL),
        ("O", None),
        ("l", None),
        ("0", None),
        ("(", None),
    ],
)
def test_class_of(char, expected):
    assert class_of(char) is expected
