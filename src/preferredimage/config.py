"""Configuration management for preferredimage."""

import os
import re
from pathlib import Path
from typing import Any, List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from preferredimage.models.image import DEFAULT_IMAGE_TYPES, ImageType
from preferredimage.utils.language import normalize_tag


class ProvidersConfig(BaseModel):
    """Upstream image source aggregation configuration."""

    provider_name: str = Field(
        default="Preferred Image Provider",
        description="Name of this provider, excluded from aggregation",
    )
    source_timeout_seconds: Optional[float] = Field(
        default=30.0, description="Per-source timeout (None disables)"
    )

    @field_validator("source_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: Optional[float]) -> Optional[float]:
        """Validate timeout is positive when set."""
        if v is not None and v <= 0:
            raise ValueError("Source timeout must be positive")
        return v


class APIConfig(BaseModel):
    """API server configuration."""

    host: str = Field(default="0.0.0.0", description="API host")
    port: int = Field(default=9494, description="API port")
    workers: int = Field(default=1, description="Number of workers")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    format: str = Field(default="json", description="Log format (json or text)")
    level: str = Field(default="info", description="Log level")
    output: Optional[str] = Field(
        default=None, description="Log file path (console only when unset)"
    )

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate log format."""
        if v not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        if v.lower() not in ("debug", "info", "warning", "error", "critical"):
            raise ValueError("Invalid log level")
        return v.lower()


class Config(BaseModel):
    """Main configuration model."""

    metadata_language: str = Field(
        default="en", description="Default preferred metadata language"
    )
    image_types: List[ImageType] = Field(
        default_factory=lambda: list(DEFAULT_IMAGE_TYPES),
        description="Image types to select, in output order",
    )
    providers: ProvidersConfig = Field(
        default_factory=ProvidersConfig, description="Image source configuration"
    )
    api: APIConfig = Field(default_factory=APIConfig, description="API configuration")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")

    @field_validator("metadata_language")
    @classmethod
    def validate_metadata_language(cls, v: str) -> str:
        """Normalize the default metadata language, falling back to English."""
        return normalize_tag(v) or "en"

    @field_validator("image_types")
    @classmethod
    def validate_image_types(cls, v: List[ImageType]) -> List[ImageType]:
        """Reject duplicate image types."""
        if len(set(v)) != len(v):
            raise ValueError("Image types must not repeat")
        return v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, encoding="utf-8") as f:
            raw_config = yaml.safe_load(f)

        if raw_config is None:
            raw_config = {}

        # Substitute environment variables
        raw_config = cls._substitute_env_vars(raw_config)

        return cls(**raw_config)

    @staticmethod
    def _substitute_env_vars(obj: Any) -> Any:
        """Recursively substitute environment variables in configuration.

        Replaces ${VAR_NAME} with os.environ['VAR_NAME'].

        Args:
            obj: Configuration object (dict, list, str, etc.)

        Returns:
            Object with environment variables substituted
        """
        if isinstance(obj, dict):
            return {key: Config._substitute_env_vars(value) for key, value in obj.items()}
        elif isinstance(obj, list):
            return [Config._substitute_env_vars(item) for item in obj]
        elif isinstance(obj, str):
            pattern = r"\$\{([^}]+)\}"

            def replace_var(match):
                var_name = match.group(1)
                value = os.environ.get(var_name)
                if value is None:
                    raise ValueError(
                        f"Environment variable '{var_name}' not found "
                        f"(referenced in configuration)"
                    )
                return value

            return re.sub(pattern, replace_var, obj)
        else:
            return obj

    @classmethod
    def from_defaults(cls) -> "Config":
        """Create configuration with default values."""
        return cls()


def load_config(path: Optional[str | Path] = None) -> Config:
    """Load configuration from file or use defaults.

    Args:
        path: Optional path to configuration file. If None, uses defaults.

    Returns:
        Config instance
    """
    if path is None:
        return Config.from_defaults()

    return Config.from_yaml(path)
