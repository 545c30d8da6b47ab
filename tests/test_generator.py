import random
import re

import pydantic
import pytest

from pwdkit import GenerationRequest, PasswordGenerator, generate_password
from pwdkit.charset import CharacterClass, alphabet, class_of
from pwdkit.exc import (
    GenerationError,
    InvalidLengthError,
    OverconstrainedRequestError,
)


def count_class(password: str, cls: CharacterClass) -> int:
    return sum(1 for char in password if class_of(char) is cls)


class TestGenerationRequest:
    def test_all_counts_absent_requires_every_class_once(self):
        assert GenerationRequest().minimums() == dict.fromkeys(CharacterClass, 1)

    def test_absent_classes_are_inactive(self):
        request = GenerationRequest(length=10, uppercase_count=2, numbers_count=0)
        assert request.minimums() == {
            CharacterClass.UPPERCASE: 2,
            CharacterClass.DIGIT: 0,
        }

    def test_accepts_camel_case_keys(self):
        request = GenerationRequest.model_validate(
            {"length": 8, "uppercaseCount": 2, "specialCharactersCount": 1}
        )
        assert request.minimums() == {
            CharacterClass.UPPERCASE: 2,
            CharacterClass.SPECIAL: 1,
        }

    def test_rejects_negative_counts(self):
        with pytest.raises(pydantic.ValidationError):
            GenerationRequest(length=8, lowercase_count=-1)


class TestGeneratePassword:
    def test_defaults(self, rng):
        password = generate_password(rng=rng)

        assert len(password) == 12
        for cls in CharacterClass:
            assert count_class(password, cls) >= 1

    @pytest.mark.parametrize("length", [1, 4, 16, 64])
    def test_length(self, rng, length):
        assert len(generate_password(length, rng=rng)) == length

    @pytest.mark.parametrize(
        "kwargs, cls",
        [
            ({"uppercase_count": 10}, CharacterClass.UPPERCASE),
            ({"lowercase_count": 10}, CharacterClass.LOWERCASE),
            ({"numbers_count": 10}, CharacterClass.DIGIT),
            ({"special_characters_count": 10}, CharacterClass.SPECIAL),
        ],
    )
    def test_single_class(self, rng, kwargs, cls):
        password = generate_password(10, rng=rng, **kwargs)
        assert count_class(password, cls) == 10

    def test_minimums_are_met(self, rng):
        password = generate_password(
            16,
            uppercase_count=3,
            lowercase_count=4,
            numbers_count=2,
            special_characters_count=1,
            rng=rng,
        )

        assert len(password) == 16
        assert count_class(password, CharacterClass.UPPERCASE) >= 3
        assert count_class(password, CharacterClass.LOWERCASE) >= 4
        assert count_class(password, CharacterClass.DIGIT) >= 2
        assert count_class(password, CharacterClass.SPECIAL) >= 1

    def test_partial_counts_exclude_other_classes(self, rng):
        password = generate_password(12, uppercase_count=2, numbers_count=3, rng=rng)

        assert count_class(password, CharacterClass.UPPERCASE) >= 2
        assert count_class(password, CharacterClass.DIGIT) >= 3
        assert (
            count_class(password, CharacterClass.UPPERCASE)
            + count_class(password, CharacterClass.DIGIT)
            == 12
        )

    def test_zero_count_keeps_class_eligible(self, rng):
        password = generate_password(
            200, uppercase_count=0, lowercase_count=1, rng=rng
        )

        assert count_class(password, CharacterClass.UPPERCASE) > 0
        assert count_class(password, CharacterClass.LOWERCASE) >= 1
        assert count_class(password, CharacterClass.DIGIT) == 0
        assert count_class(password, CharacterClass.SPECIAL) == 0

    def test_all_counts_zero(self, rng):
        password = generate_password(
            10,
            uppercase_count=0,
            lowercase_count=0,
            numbers_count=0,
            special_characters_count=0,
            rng=rng,
        )

        assert len(password) == 10
        assert all(class_of(char) is not None for char in password)

    def test_exact_counts(self, rng):
        password = generate_password(
            5, uppercase_count=2, lowercase_count=2, numbers_count=1, rng=rng
        )

        assert count_class(password, CharacterClass.UPPERCASE) == 2
        assert count_class(password, CharacterClass.LOWERCASE) == 2
        assert count_class(password, CharacterClass.DIGIT) == 1

    def test_excludes_ambiguous_glyphs(self, rng):
        password = generate_password(500, rng=rng)
        assert not re.search(r"[il1Lo0O]", password)

    def test_filler_is_uniform_over_pool(self, rng):
        password = generate_password(
            10_000, uppercase_count=0, numbers_count=0, rng=rng
        )
        upper = len(alphabet(CharacterClass.UPPERCASE))
        digits = len(alphabet(CharacterClass.DIGIT))

        ratio = count_class(password, CharacterClass.UPPERCASE) / len(password)
        assert ratio == pytest.approx(upper / (upper + digits), abs=0.03)

    def test_shuffles_required_characters(self, rng):
        first_chars = {
            generate_password(
                10,
                uppercase_count=3,
                lowercase_count=3,
                numbers_count=2,
                special_characters_count=2,
                rng=rng,
            )[0]
            for _ in range(20)
        }
        assert len({class_of(char) for char in first_chars}) > 1

    def test_same_seed_same_password(self):
        request = GenerationRequest(length=24)
        assert PasswordGenerator(random.Random(7)).generate(
            request
        ) == PasswordGenerator(random.Random(7)).generate(request)

    def test_default_source_varies(self):
        assert len({generate_password(20) for _ in range(5)}) > 1


class TestGenerationErrors:
    @pytest.mark.parametrize("length", [0, -1])
    def test_invalid_length(self, length):
        with pytest.raises(InvalidLengthError) as ex:
            generate_password(length)

        assert str(ex.value) == "Password length must be at least 1"
        assert ex.value.ctx == {"length": length}

    @pytest.mark.parametrize(
        "kwargs, message",
        [
            (
                {"length": 8, "uppercase_count": 5, "lowercase_count": 5},
                "Sum of required character counts (10) exceeds password length (8)",
            ),
            (
                {
                    "length": 10,
                    "uppercase_count": 3,
                    "lowercase_count": 4,
                    "numbers_count": 2,
                    "special_characters_count": 2,
                },
                "Sum of required character counts (11) exceeds password length (10)",
            ),
        ],
    )
    def test_overconstrained(self, kwargs, message):
        with pytest.raises(OverconstrainedRequestError) as ex:
            generate_password(**kwargs)

        assert str(ex.value) == message
        assert isinstance(ex.value, GenerationError)
