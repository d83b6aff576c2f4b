"""Centralized configuration for git-profiles.

All environment variables and paths are defined here. Use get_config() to access
configuration values - it loads dotenv once and caches the result.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_PROFILES_FILENAME = ".git_profiles.yaml"
DOTENV_FILENAME = ".git_profiles.env"


def _get_env(name: str, default: str) -> str:
    """Read an environment variable, treating blank values as unset.

    Args:
        name: Environment variable name.
        default: Value returned when unset or blank.

    Returns:
        Stripped value or default.
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _default_profiles_file() -> Path:
    return Path.home() / DEFAULT_PROFILES_FILENAME


@dataclass(frozen=True)
class Config:
    """Immutable configuration container."""

    # Store
    profiles_file: Path

    # External tool
    git_executable: str


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Load and return configuration. Cached after first call.

    Values come from the environment, optionally seeded by ~/.git_profiles.env.
    """
    # Single load_dotenv call for entire application
    load_dotenv(Path.home() / DOTENV_FILENAME)

    profiles_file_env = _get_env("GIT_PROFILES_FILE", "")
    if profiles_file_env:
        profiles_file = Path(profiles_file_env).expanduser()
    else:
        profiles_file = _default_profiles_file()

    return Config(
        profiles_file=profiles_file,
        git_executable=_get_env("GIT_PROFILES_GIT", "git"),
    )
