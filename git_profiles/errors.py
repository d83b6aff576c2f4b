"""Error kinds for profile store and switch operations.

Store operations do not raise these. They return them inside a Result so the
command layer decides how to render them.
"""


class ProfileError(Exception):
    """Base class for all git-profiles errors."""


class InvalidInputError(ProfileError):
    """A required field (profile key, name or email) is empty or blank."""


class NotFoundError(ProfileError):
    """The profile key or the profiles file does not exist."""


class AlreadyExistsError(ProfileError):
    """The profiles file already exists and must not be overwritten."""


class NoProfilesError(ProfileError):
    """The profiles file exists but holds no complete profile."""


class InvalidSelectionError(ProfileError):
    """The interactive selection was not a listed number."""


class ExternalToolUnavailableError(ProfileError):
    """The git executable could not be started."""


class StoreUnreadableError(ProfileError):
    """The profiles file exists but cannot be read or decoded."""
