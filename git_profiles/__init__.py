"""Manage multiple git identities and switch the global one."""

from git_profiles.applier import GitIdentityApplier
from git_profiles.codec import parse_profiles, serialize_profiles
from git_profiles.config import Config, get_config
from git_profiles.errors import (
    AlreadyExistsError,
    ExternalToolUnavailableError,
    InvalidInputError,
    InvalidSelectionError,
    NoProfilesError,
    NotFoundError,
    ProfileError,
    StoreUnreadableError,
)
from git_profiles.models import Profile, Result
from git_profiles.store import ProfileStore
from git_profiles.switcher import add_interactively, select_and_apply

__all__ = [
    "AlreadyExistsError",
    "Config",
    "ExternalToolUnavailableError",
    "GitIdentityApplier",
    "InvalidInputError",
    "InvalidSelectionError",
    "NoProfilesError",
    "NotFoundError",
    "Profile",
    "ProfileError",
    "ProfileStore",
    "Result",
    "StoreUnreadableError",
    "add_interactively",
    "get_config",
    "parse_profiles",
    "select_and_apply",
    "serialize_profiles",
]
