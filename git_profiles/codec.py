"""Text format for the profiles file.

The file is a sequence of blocks. Each block starts with an unindented key
line (trailing colon optional) followed by indented ``name:`` and ``email:``
lines::

    work:
      name: Jane Doe
      email: jane@work.example

    personal:
      name: Jane Doe
      email: jane@example.com

Blank lines only separate blocks. Unknown indented lines are ignored, and a
block missing either field is dropped.
"""

from git_profiles.models import Profile

KEY_DELIMITER = ":"
FIELD_INDENT = "  "
NAME_FIELD = "name"
EMAIL_FIELD = "email"


def _field_value(stripped: str, field_name: str) -> str | None:
    """Return the value of ``field_name: value`` or None if the line is another field."""
    prefix = field_name + KEY_DELIMITER
    if not stripped.startswith(prefix):
        return None
    return stripped.split(KEY_DELIMITER, 1)[1].strip()


def parse_profiles(text: str) -> dict[str, Profile]:
    """Parse profiles file contents into a key -> Profile mapping.

    Never raises for malformed input; the worst case is an empty mapping.
    Keys keep first-seen order, and a repeated key keeps its last complete block.

    Args:
        text: Raw file contents.

    Returns:
        Mapping of profile key to Profile.
    """
    profiles: dict[str, Profile] = {}
    key: str | None = None
    name: str | None = None
    email: str | None = None

    def flush() -> None:
        if key is not None and name is not None and email is not None:
            profiles[key] = Profile(name=name, email=email)

    for line in text.splitlines():
        if not line.strip():
            continue

        if line[0].isspace():
            stripped = line.strip()
            value = _field_value(stripped, NAME_FIELD)
            if value is not None:
                name = value
                continue
            value = _field_value(stripped, EMAIL_FIELD)
            if value is not None:
                email = value
            continue

        flush()
        key = line.strip().removesuffix(KEY_DELIMITER)
        name = None
        email = None

    flush()
    return profiles


def format_profile(key: str, profile: Profile) -> str:
    """Format a single block in the canonical ``key:`` header form."""
    return (
        f"{key}{KEY_DELIMITER}\n"
        f"{FIELD_INDENT}{NAME_FIELD}{KEY_DELIMITER} {profile.name}\n"
        f"{FIELD_INDENT}{EMAIL_FIELD}{KEY_DELIMITER} {profile.email}"
    )


def serialize_profiles(profiles: dict[str, Profile]) -> str:
    """Serialize a mapping into profiles file text.

    Blocks appear in mapping order, separated by one blank line, with no
    trailing newline. An empty mapping gives an empty string.
    """
    return "\n\n".join(format_profile(key, profile) for key, profile in profiles.items())
