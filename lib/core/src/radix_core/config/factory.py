# region Docstring
"""
radix_core.config.factory
Settings base class with YAML, .env and environment variable sources.
Configuration Priority (highest to lowest):
    1. Environment variables
    2. .env file values
    3. config.{APP_ENV}.yaml
    4. config.yaml
    5. Init kwargs and field defaults
Functions:
    - get_settings(settings_cls): cached factory so each settings class reads its
      sources once per process.
"""
# endregion
# region Imports
from functools import lru_cache
from typing import Type, TypeVar

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from .base import APP_ENV, APP_ROOT

# endregion
# region FactoryBaseSettings Class
T = TypeVar("T", bound=BaseSettings)

CONFIG_FILES = [APP_ROOT / "config.yaml", APP_ROOT / f"config.{APP_ENV}.yaml"]


class FactoryBaseSettings(BaseSettings):
    """
    BaseSettings reading env vars, .env and the radix YAML config files.
    """

    model_config = SettingsConfigDict(
        env_file=APP_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        yaml_settings = YamlConfigSettingsSource(
            settings_cls,
            yaml_file=CONFIG_FILES,
            yaml_file_encoding="utf-8",
        )
        return (
            env_settings,
            dotenv_settings,
            yaml_settings,
            init_settings,
        )


# endregion
# region get_settings Factory Function


@lru_cache
def get_settings(settings_cls: Type[T]) -> T:
    """
    Factory function to load any settings class.
    Results are cached so we don't re-read files every time.
    """
    return settings_cls()


# endregion
