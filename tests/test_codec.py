"""Tests for git_profiles/codec.py"""

from git_profiles.codec import format_profile, parse_profiles, serialize_profiles
from git_profiles.models import Profile


class TestParseProfiles:
    """Tests for parse_profiles function."""

    def test_empty_text_returns_empty_mapping(self):
        """Empty input should give an empty mapping."""
        assert parse_profiles("") == {}

    def test_parses_colon_header(self):
        """Should strip the trailing colon from the key line."""
        text = "work:\n  name: W\n  email: w@x.com"
        assert parse_profiles(text) == {"work": Profile(name="W", email="w@x.com")}

    def test_parses_header_without_colon(self):
        """Should accept a key line without a trailing colon."""
        text = "personal\n  name: Your Name\n  email: your.email@example.com\n"
        assert parse_profiles(text) == {
            "personal": Profile(name="Your Name", email="your.email@example.com")
        }

    def test_parses_multiple_blocks_in_order(self):
        """Should keep first-seen order of keys."""
        text = "b:\n  name: B\n  email: b@x.com\n\na:\n  name: A\n  email: a@x.com\n"
        profiles = parse_profiles(text)
        assert list(profiles) == ["b", "a"]

    def test_blocks_without_blank_separator(self):
        """A new unindented line should start a new block even without a blank line."""
        text = "a\n  name: A\n  email: a@x.com\nb\n  name: B\n  email: b@x.com"
        assert set(parse_profiles(text)) == {"a", "b"}

    def test_drops_block_missing_email(self):
        """A block without an email should contribute no entry."""
        text = "broken:\n  name: Only Name\n\nok:\n  name: OK\n  email: ok@x.com"
        assert parse_profiles(text) == {"ok": Profile(name="OK", email="ok@x.com")}

    def test_drops_block_missing_name(self):
        """A block without a name should contribute no entry."""
        text = "broken:\n  email: e@x.com"
        assert parse_profiles(text) == {}

    def test_drops_trailing_partial_block(self):
        """The end-of-input flush should also discard partial blocks."""
        text = "ok:\n  name: OK\n  email: ok@x.com\n\nlast:\n  name: L"
        assert list(parse_profiles(text)) == ["ok"]

    def test_ignores_unknown_indented_lines(self):
        """Unknown fields should be ignored and the block still parsed."""
        text = "work:\n  signingkey: ABC123\n  name: W\n  editor: vim\n  email: w@x.com"
        assert parse_profiles(text) == {"work": Profile(name="W", email="w@x.com")}

    def test_value_keeps_text_after_first_colon(self):
        """Only the first colon separates field name and value."""
        text = "odd:\n  name: A: B\n  email: mailto:a@x.com"
        profile = parse_profiles(text)["odd"]
        assert profile.name == "A: B"
        assert profile.email == "mailto:a@x.com"

    def test_trims_values(self):
        """Field values should be trimmed."""
        text = "work:\n    name:    Spaced Out   \n\temail:\tw@x.com  "
        assert parse_profiles(text)["work"] == Profile(name="Spaced Out", email="w@x.com")

    def test_tab_indented_fields(self):
        """Any leading whitespace marks a field line."""
        text = "work:\n\tname: W\n\temail: w@x.com"
        assert "work" in parse_profiles(text)

    def test_later_field_overrides_earlier(self):
        """A repeated field inside one block keeps the last value."""
        text = "work:\n  name: First\n  name: Second\n  email: w@x.com"
        assert parse_profiles(text)["work"].name == "Second"

    def test_duplicate_key_last_block_wins(self):
        """A repeated key keeps the last complete block."""
        text = "k:\n  name: One\n  email: 1@x.com\n\nk:\n  name: Two\n  email: 2@x.com"
        assert parse_profiles(text) == {"k": Profile(name="Two", email="2@x.com")}

    def test_fields_before_any_header_ignored(self):
        """Indented lines before the first key belong to no block."""
        text = "  name: Orphan\n  email: orphan@x.com\nwork:\n  name: W\n  email: w@x.com"
        assert parse_profiles(text) == {"work": Profile(name="W", email="w@x.com")}

    def test_handles_crlf_line_endings(self):
        """Windows line endings should parse the same."""
        text = "work:\r\n  name: W\r\n  email: w@x.com\r\n"
        assert parse_profiles(text) == {"work": Profile(name="W", email="w@x.com")}

    def test_garbage_returns_empty(self):
        """Malformed input should not raise."""
        assert parse_profiles("::::\n\n\n  ???\nplain text") == {}


class TestSerializeProfiles:
    """Tests for serialize_profiles function."""

    def test_empty_mapping_is_empty_string(self):
        """No profiles should serialize to an empty string."""
        assert serialize_profiles({}) == ""

    def test_single_block_format(self):
        """Should emit key line with colon and two indented fields."""
        text = serialize_profiles({"work": Profile(name="W", email="w@x.com")})
        assert text == "work:\n  name: W\n  email: w@x.com"

    def test_blocks_separated_by_blank_line(self):
        """Blocks should be separated by exactly one blank line, no trailing newline."""
        text = serialize_profiles({
            "a": Profile(name="A", email="a@x.com"),
            "b": Profile(name="B", email="b@x.com"),
        })
        assert text == "a:\n  name: A\n  email: a@x.com\n\nb:\n  name: B\n  email: b@x.com"
        assert not text.endswith("\n")

    def test_format_profile_matches_serialize(self):
        """format_profile should produce a single serialized block."""
        profile = Profile(name="N", email="n@x.com")
        assert format_profile("k", profile) == serialize_profiles({"k": profile})


class TestRoundTrip:
    """Parse(Serialize(m)) == m."""

    def test_round_trip_preserves_mapping(self):
        """Serialized profiles should parse back to the same mapping."""
        profiles = {
            "work": Profile(name="Jane Doe", email="jane@work.example"),
            "open source": Profile(name="jdoe", email="jdoe@users.noreply.github.com"),
            "Work": Profile(name="Case Sensitive", email="cs@x.com"),
        }
        assert parse_profiles(serialize_profiles(profiles)) == profiles

    def test_round_trip_preserves_order(self):
        """Keys should come back in serialization order."""
        profiles = {k: Profile(name=k.upper(), email=f"{k}@x.com") for k in ["z", "a", "m"]}
        assert list(parse_profiles(serialize_profiles(profiles))) == ["z", "a", "m"]
