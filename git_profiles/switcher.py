"""Interactive profile selection and creation."""

import re
from typing import Callable

from git_profiles.applier import GitIdentityApplier, OutputFunc
from git_profiles.errors import (
    ExternalToolUnavailableError,
    InvalidSelectionError,
    NoProfilesError,
    StoreUnreadableError,
)
from git_profiles.models import Result
from git_profiles.store import ProfileStore

ReadLineFunc = Callable[[str], str]

ADD_NEW_OPTION = 0

# ASCII digits only, no underscores
_SELECTION_PATTERN = re.compile(r"[+-]?[0-9]+")


def _read(read_line: ReadLineFunc, prompt: str) -> str | None:
    """Read one line, returning None at end of input."""
    try:
        return read_line(prompt)
    except EOFError:
        return None


def _parse_selection(raw: str | None) -> int | None:
    if raw is None:
        return None
    stripped = raw.strip()
    if not _SELECTION_PATTERN.fullmatch(stripped):
        return None
    return int(stripped)


def add_interactively(
    store: ProfileStore,
    read_line: ReadLineFunc = input,
) -> Result:
    """Prompt for a profile key, name and email, then add it to the store."""
    key = _read(read_line, "Enter profile name: ")
    name = _read(read_line, "Enter name: ")
    email = _read(read_line, "Enter email: ")
    return store.add(key or "", name or "", email or "")


def select_and_apply(
    store: ProfileStore,
    applier: GitIdentityApplier,
    read_line: ReadLineFunc = input,
    write: OutputFunc = print,
) -> Result:
    """List profiles, read a numbered choice and apply it.

    A missing profiles file is generated instead and the run ends there.
    Choosing 0 starts the interactive add flow.

    Args:
        store: Profile store to read from.
        applier: Applies the chosen profile to git.
        read_line: Reads one line of input given a prompt.
        write: Receives each line of the listing.

    Returns:
        Result of the switch, the generate step, or the add flow.
    """
    if not store.exists():
        write("Profiles file not found. Generating a new one.")
        return store.initialize_default()

    try:
        profiles = store.load()
    except StoreUnreadableError as e:
        return Result.failure(e)
    if not profiles:
        return Result.failure(NoProfilesError("No profiles found in the profiles file."))

    keys = list(profiles)
    write("Available profiles:")
    write(f"{ADD_NEW_OPTION}. Add a new profile")
    for index, key in enumerate(keys, start=1):
        write(f"{index}. {key}")

    selection = _parse_selection(_read(read_line, "Select a profile by number: "))
    if selection == ADD_NEW_OPTION:
        return add_interactively(store, read_line)
    if selection is None or not 1 <= selection <= len(keys):
        return Result.failure(InvalidSelectionError("Invalid selection."))

    key = keys[selection - 1]
    try:
        applier.apply(profiles[key])
    except ExternalToolUnavailableError as e:
        return Result.failure(e, key=key)
    return Result.success(f"Switched to profile: {key}", key=key)
