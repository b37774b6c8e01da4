"""Configuration loading for the buildver CLI."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..convention import Convention
from ..exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "buildver.toml"
PYPROJECT_FILENAME = "pyproject.toml"


class BuildverConfig(BaseModel):
    """Settings read from ``buildver.toml`` or ``[tool.buildver]``.

    Attributes:
        convention: Default convention for parsing.
        format_convention: Default convention for formatting.
        strict: Whether parsing requires the whole input to be a version.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    convention: Convention = Convention.GUESS
    format_convention: Convention = Convention.DOT
    strict: bool = True

    @field_validator("convention", "format_convention", mode="before")
    @classmethod
    def _coerce_convention(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Convention.coerce(value)
        return value


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def _extract_section(path: Path, data: dict[str, Any]) -> dict[str, Any] | None:
    if path.name == PYPROJECT_FILENAME:
        section = data.get("tool", {}).get("buildver")
    else:
        section = data.get("buildver")
    if section is not None and not isinstance(section, dict):
        raise ConfigError(f"buildver section in {path} must be a table")
    return section


def find_config_file(start: Path | None = None) -> Path | None:
    """Find the config file in a directory.

    ``buildver.toml`` takes precedence over ``pyproject.toml``.

    Args:
        start: Directory to look in. Defaults to the working directory.

    Returns:
        The path of the config file, or None if there is none.
    """
    directory = start or Path.cwd()
    for name in (CONFIG_FILENAME, PYPROJECT_FILENAME):
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def load_config(config_path: Path | None = None) -> BuildverConfig:
    """Load the buildver configuration.

    Args:
        config_path: Explicit config file. If None, the working directory is
            searched with find_config_file.

    Returns:
        The loaded configuration, or defaults if no config file or section
        exists.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    if config_path is not None and not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    path = config_path or find_config_file()
    if path is None:
        logger.debug("No config file found, using defaults")
        return BuildverConfig()

    section = _extract_section(path, _read_toml(path))
    if section is None:
        logger.debug("No buildver section in %s, using defaults", path)
        return BuildverConfig()

    try:
        config = BuildverConfig.model_validate(section)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigError(f"Invalid configuration in {path}: {errors}") from e

    logger.debug("Loaded configuration from %s", path)
    return config
