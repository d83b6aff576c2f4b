"""Applies a profile as the global git identity."""

import subprocess
from typing import Callable

from git_profiles.errors import ExternalToolUnavailableError
from git_profiles.models import Profile

OutputFunc = Callable[[str], None]


class GitIdentityApplier:
    """Runs ``git config --global`` for a profile's name and email.

    The external process output (stdout and stderr merged) is forwarded line
    by line to ``output``. Calls block until git exits; there is no timeout.
    """

    def __init__(self, executable: str = "git", output: OutputFunc = print):
        self.executable = executable
        self.output = output

    def set_config(self, key: str, value: str) -> int:
        """Set one global git config value.

        Args:
            key: Config key, e.g. ``user.name``.
            value: Value to set.

        Returns:
            Exit status of the git process.

        Raises:
            ExternalToolUnavailableError: If the git executable cannot be started.
        """
        cmd = [self.executable, "config", "--global", key, value]
        try:
            proc = subprocess.Popen(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except OSError as e:
            raise ExternalToolUnavailableError(f"Cannot run '{self.executable}': {e}") from e

        with proc:
            for line in proc.stdout:
                self.output(line.rstrip("\n"))
            return proc.wait()

    def apply(self, profile: Profile) -> None:
        """Set user.name and user.email from a profile.

        Non-zero exit statuses are reported as warnings, not raised.
        """
        for key, value in (("user.name", profile.name), ("user.email", profile.email)):
            returncode = self.set_config(key, value)
            if returncode != 0:
                self.output(f"Warning: git config {key} exited with status {returncode}")
