"""Configuration system for backup-selector.

This module implements the application configuration schema using Pydantic
for validation, with support for environment variable resolution and
fail-fast validation with actionable error messages.
"""

import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Final

import yaml
from pydantic import BaseModel, Field, ValidationError

from backup_selector.core.options import SelectionDefaults
from backup_selector.exceptions import ConfigurationError, EnvironmentVariableError

# Matches ${VARIABLE_NAME} where VARIABLE_NAME can contain letters, digits, and underscores
ENV_VAR_PATTERN: Final[re.Pattern[str]] = re.compile(r"\$\{([A-Za-z0-9_]+)\}")


class ApplicationConfig(BaseModel):
    """Configuration for application-level settings."""

    log_level: Annotated[
        str,
        Field(
            description="Logging level",
            pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        ),
    ] = "WARNING"


class AppConfig(BaseModel):
    """Top-level configuration file schema.

    ``selection`` is optional, and so is its root: a configuration file can
    hold default filters and limits, or only application settings, while the
    scan root comes from the command line.
    """

    selection: Annotated[
        SelectionDefaults | None,
        Field(description="Default selection options"),
    ] = None
    application: Annotated[
        ApplicationConfig,
        Field(description="Application-level configuration"),
    ] = ApplicationConfig()


def resolve_env_var(value: str) -> str:
    """Resolve ${VARIABLE_NAME} references in a string value.

    Args:
        value: String potentially containing environment variable references

    Returns:
        String with environment variables resolved

    Raises:
        EnvironmentVariableError: If a referenced environment variable is missing

    Examples:
        >>> os.environ["BACKUP_ROOT"] = "/srv/data"
        >>> resolve_env_var("${BACKUP_ROOT}/photos")
        '/srv/data/photos'
    """

    def replace_match(match: re.Match[str]) -> str:
        var_name = match.group(1)
        env_value = os.environ.get(var_name)

        if env_value is None:
            msg = f"Required environment variable '{var_name}' is not set."
            raise EnvironmentVariableError(msg, {"env_var": var_name})

        return env_value

    return ENV_VAR_PATTERN.sub(replace_match, value)


def resolve_env_vars(data: object) -> object:
    """Recursively resolve environment variables in YAML data.

    Strings are resolved, mappings and lists are traversed, and all other
    values are preserved as-is.

    Args:
        data: Unvalidated YAML data

    Returns:
        New data structure with environment variables resolved

    Raises:
        EnvironmentVariableError: If a referenced environment variable is missing
    """
    if isinstance(data, str):
        return resolve_env_var(data)
    if isinstance(data, Mapping):
        # YAML data is untyped at load time; validated by Pydantic after resolution
        return {key: resolve_env_vars(value) for key, value in data.items()}  # pyright: ignore[reportUnknownVariableType]  # YAML boundary
    if isinstance(data, list):
        return [resolve_env_vars(item) for item in data]  # pyright: ignore[reportUnknownVariableType]  # YAML boundary
    return data


def load_config(config_path: Path) -> AppConfig:
    """Load and validate application configuration from a YAML file.

    Args:
        config_path: Path to configuration YAML file

    Returns:
        Validated AppConfig instance

    Raises:
        ConfigurationError: If configuration file cannot be loaded or is invalid

    Examples:
        >>> config = load_config(Path("backup-selector.yaml"))
        >>> config.selection.root
        PosixPath('/srv/data')
    """
    if not config_path.exists():
        msg = f"Configuration file not found: {config_path}"
        raise ConfigurationError(msg, {"config_path": str(config_path)})

    try:
        with config_path.open("r") as f:
            raw_data: object = yaml.safe_load(f)  # pyright: ignore[reportAny]  # YAML boundary
    except yaml.YAMLError as e:
        msg = (
            f"Failed to parse YAML configuration file: {config_path}\n"
            f"YAML parsing error: {e}\n"
            f"Please check the file for syntax errors."
        )
        raise ConfigurationError(msg, {"config_path": str(config_path)}) from e
    except OSError as e:
        msg = f"Failed to read configuration file: {config_path}\nError: {e}\nPlease check file permissions."
        raise ConfigurationError(msg, {"config_path": str(config_path)}) from e

    # An empty file is a valid, all-defaults configuration
    if raw_data is None:
        raw_data = {}

    if not isinstance(raw_data, dict):
        msg = (
            f"Invalid configuration file format: {config_path}\n"
            f"Expected YAML dictionary at root level, got: {type(raw_data).__name__}"
        )
        raise ConfigurationError(msg, {"config_path": str(config_path)})

    try:
        resolved_data = resolve_env_vars(raw_data)
    except EnvironmentVariableError as e:
        msg = f"Environment variable resolution failed in: {config_path}\n{e}"
        raise ConfigurationError(msg, {"config_path": str(config_path), **e.context}) from e

    try:
        config = AppConfig.model_validate(resolved_data)
    except ValidationError as e:
        # Format validation errors with field-level diagnostics
        error_lines = ["Configuration validation failed:", ""]
        for error in e.errors():
            field_path = " -> ".join(str(loc) for loc in error["loc"])
            error_lines.append(f"  Field: {field_path}")
            error_lines.append(f"  Error: {error['msg']}")
            error_lines.append("")

        error_lines.append(f"Configuration file: {config_path}")
        raise ConfigurationError("\n".join(error_lines), {"config_path": str(config_path)}) from e

    return config
