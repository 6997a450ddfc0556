"""Project configuration read from ``[tool.trellis]`` in pyproject.toml."""

from __future__ import annotations

import logging
import shlex
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from trellis.testing.discovery import DEFAULT_EXCLUDE_DIRS


logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when ``[tool.trellis]`` holds invalid settings."""

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Invalid [tool.trellis] configuration in {path}:\n{cause}")


class TrellisConfig(BaseModel):
    """Runner settings.

    Attributes
    ----------
    test_paths
        Roots searched for test files when none are given on the command line.
    verbosity
        Baseline output level; ``-v``/``-q`` adjust it.
    addopts
        Extra command line arguments prepended to the real ones.
    log_level
        Level of the ``trellis`` logger.
    exclude_dirs
        Directory names never searched for test files.
    """

    model_config = ConfigDict(extra="forbid")

    test_paths: list[str] = Field(default_factory=lambda: ["."])
    verbosity: int = 0
    addopts: list[str] = Field(default_factory=list)
    log_level: str = "WARNING"
    exclude_dirs: list[str] = Field(default_factory=lambda: sorted(DEFAULT_EXCLUDE_DIRS))

    @field_validator("addopts", mode="before")
    @classmethod
    def _split_addopts(cls, value: Any) -> Any:
        if isinstance(value, str):
            return shlex.split(value)
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.upper()
            if value not in LOG_LEVELS:
                msg = f"log_level must be one of {', '.join(LOG_LEVELS)}"
                raise ValueError(msg)
        return value


DEFAULT_CONFIG = TrellisConfig()


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest pyproject.toml at or above ``start`` (default: cwd)."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> TrellisConfig:
    """Load ``[tool.trellis]`` from the nearest pyproject.toml, or defaults."""
    pyproject = find_pyproject(start)
    if pyproject is None:
        return DEFAULT_CONFIG.model_copy(deep=True)

    with pyproject.open("rb") as fh:
        data = tomllib.load(fh)

    section = data.get("tool", {}).get("trellis", {})
    try:
        config = TrellisConfig.model_validate(section)
    except ValidationError as exc:
        raise ConfigError(pyproject, exc) from exc
    logger.debug("Loaded configuration from %s", pyproject)
    return config


__all__ = ["DEFAULT_CONFIG", "ConfigError", "TrellisConfig", "find_pyproject", "load_config"]
