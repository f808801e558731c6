"""Configuration for the YouTrack crash reporter.

Two layers:
- `YouTrackConfig` is the validated per-call configuration handed to the service.
- `ReporterSettings` loads values from environment variables and a local `.env` file.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class YouTrackConfig(BaseModel):
    """Connection settings for one YouTrack project."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="ignore")

    base_url: str = Field(min_length=1, description="YouTrack base URL")
    project_id: str = Field(min_length=1, description="Short name of the target project")
    username: str = Field(min_length=1)
    password: str = Field(min_length=1, repr=False)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def coerce(cls, config: YouTrackConfig | Mapping[str, Any]) -> YouTrackConfig:
        """Return `config` as a validated model.

        Raises:
            pydantic.ValidationError: If a required field is missing or empty.
            TypeError: If `config` is neither a mapping nor a model.
        """

        if isinstance(config, cls):
            return config
        if not isinstance(config, Mapping):
            raise TypeError(f"config must be a mapping, got {type(config).__name__}")
        return cls.model_validate(dict(config))


class ReporterSettings(BaseSettings):
    """Settings for the command line reporter.

    Environment variables:
    - YOUTRACK_BASE_URL
    - YOUTRACK_PROJECT_ID
    - YOUTRACK_USERNAME
    - YOUTRACK_PASSWORD
    - YOUTRACK_SUMMARY_PREFIX (optional)
    - YOUTRACK_TIMEOUT        (optional)
    - LOG_LEVEL               (optional)

    Notes:
        Credentials default to empty so that `verify` can report a settings
        problem instead of failing at load time. Tests can override the env
        file via `ReporterSettings(_env_file=path_to_env)`.
    """

    base_url: str = Field(default="", validation_alias="YOUTRACK_BASE_URL")
    project_id: str = Field(default="", validation_alias="YOUTRACK_PROJECT_ID")
    username: str = Field(default="", validation_alias="YOUTRACK_USERNAME")
    password: str = Field(default="", validation_alias="YOUTRACK_PASSWORD", repr=False)

    summary_prefix: str = Field(
        default="Crashlytics",
        validation_alias="YOUTRACK_SUMMARY_PREFIX",
        description="Product tag prepended to issue summaries, e.g. '[Crashlytics] '",
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        validation_alias="YOUTRACK_TIMEOUT",
        description="Per-request timeout in seconds",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    def youtrack_config(self) -> dict[str, str]:
        """Return the configuration mapping consumed by `YouTrackService`."""

        return {
            "base_url": self.base_url,
            "project_id": self.project_id,
            "username": self.username,
            "password": self.password,
        }
