from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Literal

import yaml
from pydantic import Field, ValidationError
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from querydeps.constants import DEFAULT_SUMMARY_TITLE, DEFAULT_VLT_BINARY
from querydeps.exceptions import ConfigError
from querydeps.logging import get_logger

__all__ = [
    "QueryDepsConfig",
    "load_config",
    "get_project_config_path",
    "get_user_config_path",
]

logger = get_logger(__name__)

PROJECT_CONFIG_NAME = "query-deps.yaml"


class YamlConfigSource(PydanticBaseSettingsSource):
    """Settings source that loads from a YAML file."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file: Path | None = None,
    ):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._config_data: dict[str, Any] = {}
        if yaml_file and yaml_file.exists():
            try:
                with open(yaml_file) as f:
                    loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {yaml_file}: {e}") from e

            if loaded is None:
                logger.warning("config_file_empty", path=str(yaml_file))
            elif not isinstance(loaded, dict):
                raise ConfigError(
                    f"Config file {yaml_file} must contain a mapping",
                    value=loaded,
                )
            else:
                self._config_data = loaded

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        if field_name in self._config_data:
            return self._config_data[field_name], field_name, False
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._config_data


class QueryDepsConfig(BaseSettings):
    """Settings for running queries, independent of the action inputs.

    Attributes:
        vlt_binary: vlt executable name or path.
        timeout_seconds: Maximum time per vlt invocation.
        max_retries: Retries for transient vlt failures.
        retry_delay: Initial delay between retries, in seconds.
        summary_title: Heading of the step summary.
        include_outputs: Include the output of passed queries in the summary.
        verbosity: Default log level when no -v/-q flag is given.
    """

    model_config = SettingsConfigDict(
        env_prefix="QUERYDEPS_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    vlt_binary: str = DEFAULT_VLT_BINARY
    timeout_seconds: float = Field(default=300.0, gt=0)
    max_retries: int = Field(default=0, ge=0, le=5)
    retry_delay: float = Field(default=1.0, ge=0)
    summary_title: str = DEFAULT_SUMMARY_TITLE
    include_outputs: bool = True
    verbosity: Literal["error", "warning", "info", "debug"] = "info"

    # Set by load_config() before instantiation; read by the YAML source
    _project_config_path: ClassVar[Path | None] = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Order settings sources, highest priority first.

        1. Init arguments
        2. Environment variables (QUERYDEPS_*)
        3. Project YAML config (./query-deps.yaml or --config)
        4. User YAML config (~/.config/query-deps/config.yaml)
        """
        project_path = cls._project_config_path or get_project_config_path()
        return (
            init_settings,
            env_settings,
            YamlConfigSource(settings_cls, project_path),
            YamlConfigSource(settings_cls, get_user_config_path()),
        )


def get_project_config_path() -> Path:
    return Path.cwd() / PROJECT_CONFIG_NAME


def get_user_config_path() -> Path:
    """Get the path to the user configuration file.

    Returns:
        Path to ~/.config/query-deps/config.yaml
    """
    return Path.home() / ".config" / "query-deps" / "config.yaml"


def load_config(config_path: Path | None = None) -> QueryDepsConfig:
    """Load configuration: defaults, user YAML, project YAML, then environment.

    Args:
        config_path: Project config file. Defaults to ./query-deps.yaml.

    Returns:
        The merged configuration.

    Raises:
        ConfigError: If a config file is malformed or a value is invalid.
    """
    if config_path is None:
        config_path = get_project_config_path()
    elif not config_path.exists():
        raise ConfigError(
            f"Config file not found: {config_path}",
            field="config",
            value=str(config_path),
        )

    if not config_path.exists():
        logger.debug("no_project_config", path=str(config_path))

    QueryDepsConfig._project_config_path = config_path
    try:
        return QueryDepsConfig()
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        raise ConfigError(
            message=f"Invalid configuration: {first_error['msg']}",
            field=field,
            value=first_error.get("input"),
        ) from e
    finally:
        QueryDepsConfig._project_config_path = None
