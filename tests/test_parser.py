"""
Tests for the environment file parser.
"""

from env_to_json.parser import EnvVariable, parse_env, parse_lines, strip_comment, unescape, unquote


class TestParseEnv:
    """Tests for parse_env."""

    def test_parse_basic_values(self):
        """Test parsing unquoted assignments with surrounding whitespace."""
        env = parse_env("DB_HOST=localhost\n  DB_PORT = 5432  \n")

        assert env == {"DB_HOST": "localhost", "DB_PORT": "5432"}

    def test_parse_with_quoted_values(self):
        """Test that one layer of quotes is removed."""
        content = """QUOTED_DOUBLE="value in quotes"
QUOTED_SINGLE='single quoted'
UNQUOTED=no_quotes
NESTED="'inner'"
"""
        env = parse_env(content)

        assert env["QUOTED_DOUBLE"] == "value in quotes"
        assert env["QUOTED_SINGLE"] == "single quoted"
        assert env["UNQUOTED"] == "no_quotes"
        assert env["NESTED"] == "'inner'"

    def test_mismatched_quotes_are_kept(self):
        """Test that quotes are only stripped when they match."""
        env = parse_env("""MIXED="value'""")

        assert env["MIXED"] == "\"value'"

    def test_escaped_newline(self):
        """Test that \\n in a value becomes a line feed."""
        env = parse_env('K="a\\nb"')

        assert env["K"] == "a\nb"

    def test_escape_sequences(self):
        """Test the remaining escape sequences."""
        env = parse_env(r'K=tab\there\rreturn \"dq\" \'sq\' back\\slash')

        assert env["K"] == "tab\there\rreturn \"dq\" 'sq' back\\slash"

    def test_escape_order(self):
        """Test that newline resolution runs before backslash resolution."""
        env = parse_env(r"K=a\\nb")

        assert env["K"] == "a\\\nb"

    def test_empty_value(self):
        """Test that an empty value is kept as an empty string."""
        env = parse_env("EMPTY_VALUE=\n")

        assert env == {"EMPTY_VALUE": ""}

    def test_comments_and_blank_lines(self):
        """Test that comments and blank lines produce no entries."""
        content = """# Comment line

# Another comment

KEY=value # trailing comment

   # Indented comment
"""
        env = parse_env(content)

        assert env == {"KEY": "value"}

    def test_lines_without_equals_are_skipped(self):
        """Test that invalid lines (no equals sign) are skipped."""
        content = """VALID_KEY=value
INVALID_LINE_NO_EQUALS
ANOTHER_VALID=value2
"""
        env = parse_env(content)

        assert list(env) == ["VALID_KEY", "ANOTHER_VALID"]

    def test_empty_key_is_skipped(self):
        """Test that a line with nothing before '=' is skipped."""
        env = parse_env("=value\nKEY=1")

        assert env == {"KEY": "1"}

    def test_split_on_first_equals(self):
        """Test that only the first '=' separates key and value."""
        env = parse_env("URL=postgres://u:p@h/db?a=b")

        assert env["URL"] == "postgres://u:p@h/db?a=b"

    def test_hash_inside_quotes_starts_comment(self):
        """Test the documented comment-before-quote behavior."""
        env = parse_env('API_URL="http://x.com#fragment"')

        assert env["API_URL"] == '"http://x.com'

    def test_escaped_hash_is_kept(self):
        """Test that a backslash-escaped '#' is not a comment."""
        env = parse_env(r"COLOR=\#fff")

        assert env["COLOR"] == r"\#fff"

    def test_duplicate_keys_last_wins(self):
        """Test that later assignments overwrite earlier ones."""
        env = parse_env("A=1\nB=2\nA=3")

        assert env == {"A": "3", "B": "2"}
        assert list(env) == ["A", "B"]

    def test_keys_are_case_sensitive(self):
        """Test that keys differing in case are distinct."""
        env = parse_env("key=lower\nKEY=upper")

        assert env == {"key": "lower", "KEY": "upper"}

    def test_crlf_line_endings(self):
        """Test that Windows line endings are trimmed."""
        env = parse_env("A=1\r\nB=2\r\n")

        assert env == {"A": "1", "B": "2"}

    def test_non_identifier_keys_accepted(self):
        """Test that keys are not validated as identifiers."""
        env = parse_env("my key.with-dots=1")

        assert env == {"my key.with-dots": "1"}

    def test_empty_content(self):
        """Test that empty text gives an empty mapping."""
        assert parse_env("") == {}


class TestParseLines:
    """Tests for parse_lines."""

    def test_line_numbers(self):
        """Test that line numbers refer to physical lines."""
        lines = ["# header", "", "DATABASE_HOST=localhost", "PORT=1"]

        variables = parse_lines(lines)

        assert len(variables) == 2
        assert variables[0] == EnvVariable(
            key="DATABASE_HOST",
            value="localhost",
            line_number=3,
            raw_value="DATABASE_HOST=localhost",
        )
        assert variables[1].line_number == 4

    def test_duplicates_are_kept(self):
        """Test that parse_lines does not collapse duplicate keys."""
        variables = parse_lines(["A=1", "A=2"])

        assert [v.value for v in variables] == ["1", "2"]


class TestHelpers:
    """Tests for the parser helper functions."""

    def test_strip_comment(self):
        assert strip_comment("A=1 # note") == "A=1 "
        assert strip_comment("A=1") == "A=1"

    def test_unquote_single_char(self):
        """Test that a lone quote character collapses to empty."""
        assert unquote('"') == ""

    def test_unquote_unquoted_value(self):
        assert unquote("plain") == "plain"

    def test_unescape_leaves_unknown_sequences(self):
        assert unescape(r"\x") == r"\x"
