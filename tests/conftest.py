"""Shared test fixtures and configuration."""

import tempfile
from dataclasses import dataclass
from pathlib import Path

import pytest

from git_profiles.store import ProfileStore


@dataclass(frozen=True)
class TestConfig:
    """Test configuration matching the real Config interface."""

    profiles_file: Path = Path("/tmp/test_git_profiles/.git_profiles.yaml")
    git_executable: str = "git"


class OutputRecorder:
    """Collects lines passed to an output callable."""

    def __init__(self):
        self.lines: list[str] = []

    def __call__(self, line: str) -> None:
        self.lines.append(line)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class ScriptedInput:
    """Replays canned answers to input() prompts, then raises EOFError."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_config(temp_dir: Path) -> TestConfig:
    """Create a test configuration with a temporary profiles file."""
    return TestConfig(profiles_file=temp_dir / ".git_profiles.yaml")


@pytest.fixture
def profiles_file(test_config: TestConfig) -> Path:
    """Path of the (not yet created) profiles file."""
    return test_config.profiles_file


@pytest.fixture
def store(profiles_file: Path) -> ProfileStore:
    """Profile store backed by the temporary profiles file."""
    return ProfileStore(profiles_file)


@pytest.fixture
def populated_profiles(profiles_file: Path) -> Path:
    """Create a profiles file with two profiles."""
    profiles_file.write_text(
        "work:\n"
        "  name: Work Person\n"
        "  email: work@example.com\n"
        "\n"
        "home:\n"
        "  name: Home Person\n"
        "  email: home@example.com"
    )
    return profiles_file


@pytest.fixture
def output() -> OutputRecorder:
    """Recorder for output lines."""
    return OutputRecorder()


@pytest.fixture
def scripted_input():
    """Factory for ScriptedInput objects."""
    return ScriptedInput
