"""File-based profile store.

Every operation re-reads the file, mutates the mapping in memory and rewrites
the whole file. There is no locking: concurrent writers race and the last one
wins. A file that exists but cannot be read is never rewritten.
"""

from pathlib import Path

from git_profiles.codec import parse_profiles, serialize_profiles
from git_profiles.errors import (
    AlreadyExistsError,
    InvalidInputError,
    NotFoundError,
    StoreUnreadableError,
)
from git_profiles.models import Profile, Result
from git_profiles.utils import atomic_write_text, has_line_break, is_blank

DEFAULT_PROFILE_KEY = "personal"
DEFAULT_PROFILE = Profile(name="Your Name", email="your.email@example.com")

_REQUIRED_FIELDS_MESSAGE = "Invalid input. All fields are required."
_LINE_BREAK_MESSAGE = "Invalid input. Values must not contain line breaks."


def _validate_fields(*values: str) -> InvalidInputError | None:
    """Return the input error for blank or multi-line values, if any."""
    if any(is_blank(value) for value in values):
        return InvalidInputError(_REQUIRED_FIELDS_MESSAGE)
    if any(has_line_break(value) for value in values):
        return InvalidInputError(_LINE_BREAK_MESSAGE)
    return None


class ProfileStore:
    """Persists git profiles to a text file.

    Provides atomic whole-file writes using temp file + rename pattern.
    """

    def __init__(self, file_path: Path):
        """Initialize the profile store.

        Args:
            file_path: Path to the profiles file.
        """
        self.file_path = file_path

    def exists(self) -> bool:
        return self.file_path.exists()

    def _read_text(self) -> str | None:
        """Read raw file contents.

        Returns:
            File contents, or None if the file does not exist.

        Raises:
            StoreUnreadableError: If the file exists but cannot be read or decoded.
        """
        if not self.file_path.exists():
            return None
        try:
            return self.file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise StoreUnreadableError(f"Profiles file {self.file_path} has encoding issues: {e}") from e
        except OSError as e:
            raise StoreUnreadableError(f"Cannot read profiles file {self.file_path}: {e}") from e

    def _save(self, profiles: dict[str, Profile]) -> None:
        """Save profiles atomically."""
        atomic_write_text(serialize_profiles(profiles), self.file_path)

    def load(self) -> dict[str, Profile]:
        """Load profiles from file.

        Returns:
            Mapping of profile key to Profile, empty if the file is missing.
            The file is never created by loading.

        Raises:
            StoreUnreadableError: If the file exists but cannot be read or decoded.
        """
        text = self._read_text()
        if text is None:
            return {}
        return parse_profiles(text)

    def add(self, key: str, name: str, email: str) -> Result:
        """Add a profile, overwriting any existing profile with the same key.

        Args:
            key: Profile key.
            name: Value for git user.name.
            email: Value for git user.email.

        Returns:
            Success result, InvalidInputError if any field is blank or spans
            lines, or StoreUnreadableError (file untouched).
        """
        error = _validate_fields(key, name, email)
        if error is not None:
            return Result.failure(error)

        key = key.strip()
        try:
            profiles = self.load()
        except StoreUnreadableError as e:
            return Result.failure(e, key=key)

        profiles[key] = Profile(name=name.strip(), email=email.strip())
        self._save(profiles)
        return Result.success(f"Profile '{key}' added successfully.", key=key)

    def update(self, key: str, new_name: str, new_email: str) -> Result:
        """Replace the name and email of an existing profile.

        Returns:
            Success result, NotFoundError if the key is absent (file untouched),
            InvalidInputError for blank or multi-line values, or
            StoreUnreadableError (file untouched).
        """
        error = _validate_fields(new_name, new_email)
        if error is not None:
            return Result.failure(error, key=key)

        try:
            profiles = self.load()
        except StoreUnreadableError as e:
            return Result.failure(e, key=key)
        if key not in profiles:
            return Result.failure(NotFoundError(f"Profile '{key}' not found."), key=key)

        profiles[key] = Profile(name=new_name.strip(), email=new_email.strip())
        self._save(profiles)
        return Result.success(f"Profile '{key}' updated successfully.", key=key)

    def delete(self, key: str) -> Result:
        """Remove a profile.

        Returns:
            Success result, NotFoundError if the key is absent, or
            StoreUnreadableError. The file is untouched on failure.
        """
        try:
            profiles = self.load()
        except StoreUnreadableError as e:
            return Result.failure(e, key=key)
        if profiles.pop(key, None) is None:
            return Result.failure(NotFoundError(f"Profile '{key}' not found."), key=key)

        self._save(profiles)
        return Result.success(f"Profile '{key}' deleted successfully.", key=key)

    def view(self) -> Result:
        """Return the raw file contents, verbatim, in Result.content."""
        try:
            text = self._read_text()
        except StoreUnreadableError as e:
            return Result.failure(e)
        if text is None:
            return Result.failure(NotFoundError(f"Profiles file not found at {self.file_path}"))
        return Result.success(text, content=text)

    def initialize_default(self) -> Result:
        """Create the profiles file with a single placeholder profile.

        Never overwrites an existing file.
        """
        if self.exists():
            return Result.failure(AlreadyExistsError(f"Profiles file already exists at {self.file_path}"))

        self._save({DEFAULT_PROFILE_KEY: DEFAULT_PROFILE})
        return Result.success(
            f"Generated new profiles file at {self.file_path}, make sure to edit it",
            key=DEFAULT_PROFILE_KEY,
        )
