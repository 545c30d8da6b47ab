from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from . import dto

_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class GeneratorSettings(BaseModel):
    model_config = _config

    length: int = dto.DEFAULT_LENGTH
    secure_random: bool = False


class Settings(BaseSettings):
    """
    Application settings, read from the environment (``PWDKIT_`` prefix, ``__`` as
    the nested delimiter, e.g. ``PWDKIT_GENERATOR__SECURE_RANDOM=true``) and from
    the YAML configuration file, in that order of precedence.
    """

    model_config = SettingsConfigDict(
        env_prefix="PWDKIT_",
        env_nested_delimiter="__",
        extra="forbid",
        validate_default=False,
    )

    generator: GeneratorSettings = Field(default_factory=GeneratorSettings)
    rules: dto.ValidationRuleSet = Field(default_factory=dto.ValidationRuleSet)

    @classmethod
    def settings_customise_sources(
        cls,
        _: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, file_secret_settings, init_settings
