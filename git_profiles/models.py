"""Profile and operation result models."""

from dataclasses import dataclass

from git_profiles.errors import ProfileError


@dataclass(frozen=True)
class Profile:
    """A git identity: display name and email."""

    name: str
    email: str


@dataclass(frozen=True)
class Result:
    """Outcome of a store or switch operation.

    Attributes:
        message: Human-readable summary, ready to print.
        key: Profile key the operation touched, if any.
        content: Raw file contents for view operations.
        error: The error kind when the operation failed, None on success.
    """

    message: str
    key: str | None = None
    content: str | None = None
    error: ProfileError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, message: str, key: str | None = None, content: str | None = None) -> "Result":
        return cls(message=message, key=key, content=content)

    @classmethod
    def failure(cls, error: ProfileError, key: str | None = None) -> "Result":
        """Build a failed result whose message is the error text."""
        return cls(message=str(error), key=key, error=error)
