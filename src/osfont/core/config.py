"""Configuration management for the OS font resolution system."""

import logging
from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import (
    ConfigFileNotFoundError,
    ConfigLoadError,
    ConfigurationError,
    EmptyConfigFileError,
    InvalidYamlError,
)

CATALOG_BACKENDS = ("system", "static", "any")


class OSFontConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="OSFONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Font resolution configuration."""

    log_level: str = Field("INFO", description="Application log level")

    # Font catalog
    catalog_backend: str = Field("system", description="Font catalog (system, static, any)")
    available_fonts: list[str] = Field(
        default_factory=list, description="Font names known to the static catalog"
    )
    extra_font_dirs: list[Path] = Field(
        default_factory=list, description="Additional directories scanned for fonts"
    )
    use_fontconfig: bool = Field(True, description="Query fontconfig when available")
    fc_list_timeout: float = Field(10.0, gt=0.0, description="fc-list timeout in seconds")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("catalog_backend")
    @classmethod
    def validate_catalog_backend(cls, v):
        backend = v.lower()
        if backend not in CATALOG_BACKENDS:
            raise ValueError(f"catalog_backend must be one of {', '.join(CATALOG_BACKENDS)}")
        return backend

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "OSFontConfig":
        """Load configuration from YAML file."""
        return load_config_from_yaml(config_path, cls)

    @classmethod
    def from_env_and_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str = ".env"
    ) -> "OSFontConfig":
        """Load configuration from environment variables and optionally override with YAML."""
        if yaml_path and Path(yaml_path).exists():
            return cls.from_yaml(yaml_path)
        # Load from environment variables/.env file
        return cls(_env_file=env_file if Path(env_file).exists() else None)


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigFileNotFoundError(str(config_path))

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            raise EmptyConfigFileError(str(config_path))

        # Create a temporary config class that doesn't load from .env
        class TempConfig(config_class):
            model_config = SettingsConfigDict(
                env_file=None,  # Don't load .env for YAML-based configs
                case_sensitive=False,
                extra="ignore",
            )

        return TempConfig(**config_data)

    except yaml.YAMLError as e:
        raise InvalidYamlError(str(config_path), str(e))
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigLoadError(str(e))
