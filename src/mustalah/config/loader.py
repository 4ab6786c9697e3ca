"""Configuration loader for Mustalah.

Settings come from three layers, lowest precedence first:

1. Built-in defaults (``mustalah.config.defaults``)
2. A YAML file: an explicit path, or ``mustalah.yml|mustalah.yaml`` in the
   working directory
3. ``MUSTALAH_*`` environment variables
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from mustalah.config.defaults import CONFIG_FILENAMES, ENV_PREFIX
from mustalah.config.validator import flatten_pydantic_errors
from mustalah.lib.errors import ConfigError
from mustalah.lib.logging_config import get_logger
from mustalah.models.config import GlossaryConfig

logger = get_logger(__name__)

# Environment variable to (section, field) mapping; section None is top level
ENV_VAR_MAP: dict[str, tuple[str | None, str]] = {
    f"{ENV_PREFIX}DATA_DIR": (None, "data_dir"),
    f"{ENV_PREFIX}VERBOSE": (None, "verbose"),
    f"{ENV_PREFIX}GITHUB_OWNER": ("github", "owner"),
    f"{ENV_PREFIX}GITHUB_REPO": ("github", "repo"),
    f"{ENV_PREFIX}GITHUB_BRANCH": ("github", "branch"),
    f"{ENV_PREFIX}GITHUB_TIMEOUT": ("github", "timeout"),
}


def _parse_env_value(field_name: str, value: str) -> Any:
    """Parse environment variable value to the field's type.

    Raises:
        ValueError: If value cannot be parsed
    """
    if field_name == "timeout":
        return float(value)
    if field_name == "verbose":
        return value.lower() in ("true", "1", "yes", "on")
    return value


def _env_overrides(env_vars: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for env_name, (section, field_name) in ENV_VAR_MAP.items():
        if env_name not in env_vars:
            continue
        try:
            value = _parse_env_value(field_name, env_vars[env_name])
        except ValueError:
            logger.warning(f"Ignoring invalid value for {env_name}")
            continue
        target = overrides.setdefault(section, {}) if section else overrides
        target[field_name] = value
    return overrides


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> None:
    """Deep merge override dict into base dict (in-place)."""
    for key, override_value in override.items():
        if (
            key in base
            and isinstance(base[key], dict)
            and isinstance(override_value, dict)
        ):
            _deep_merge(base[key], override_value)
        else:
            base[key] = override_value


def _find_config_file(search_dir: Path) -> Path | None:
    for name in CONFIG_FILENAMES:
        candidate = search_dir / name
        if candidate.is_file():
            return candidate
    return None


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(
            "config_file", f"Cannot read configuration file {path}: {e}"
        ) from e
    except yaml.YAMLError as e:
        raise ConfigError(
            "yaml_parse", f"Failed to parse YAML file {path}: {e}"
        ) from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigError(
            "config_file", f"Configuration file {path} must contain a mapping"
        )
    return content


def load_config(
    config_file: str | None = None,
    env_vars: Mapping[str, str] | None = None,
    search_dir: str | None = None,
) -> GlossaryConfig:
    """Load and validate the Mustalah configuration.

    Args:
        config_file: Explicit YAML path; must exist when given
        env_vars: Environment mapping (defaults to ``os.environ``)
        search_dir: Directory searched for a project config file when no
            explicit path is given (defaults to the working directory)

    Returns:
        Validated GlossaryConfig

    Raises:
        ConfigError: If the file cannot be read or parsed, or values are invalid
    """
    raw: dict[str, Any] = {}

    if config_file is not None:
        path: Path | None = Path(config_file)
        if not path.is_file():
            raise ConfigError(
                "config_file", f"Configuration file not found at {config_file}"
            )
    else:
        path = _find_config_file(Path(search_dir) if search_dir else Path.cwd())

    if path is not None:
        logger.debug(f"Loading configuration from {path}")
        raw = _read_yaml(path)

    _deep_merge(raw, _env_overrides(os.environ if env_vars is None else env_vars))

    try:
        return GlossaryConfig(**raw)
    except PydanticValidationError as e:
        error_text = "\n".join(flatten_pydantic_errors(e))
        raise ConfigError(
            "config_validation", f"Invalid configuration:\n{error_text}"
        ) from e
