from pwdkit import dto
from pwdkit._conf import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PWDKIT_GENERATOR__LENGTH", raising=False)
    settings = Settings()

    assert settings.generator.length == dto.DEFAULT_LENGTH
    assert settings.generator.secure_random is False
    assert settings.rules == dto.ValidationRuleSet()


def test_environment_overrides_file_values(monkeypatch):
    monkeypatch.setenv("PWDKIT_GENERATOR__LENGTH", "30")
    settings = Settings(generator={"length": 16, "secureRandom": True})

    assert settings.generator.length == 30
    assert settings.generator.secure_random is True


def test_rules_accept_camel_case():
    settings = Settings(rules={"minLength": 10, "special_characters_count": 1})

    assert settings.rules.min_length == 10
    assert settings.rules.special_characters_count == 1
