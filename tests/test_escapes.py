"""Tests for the escape table."""

import hashlib
import itertools
import random

import pytest

from commentmark.escapes import ESCAPABLE_CHARACTERS, ESCAPE_TABLE, EscapeTable


class TestEscapeTable:
    """Tests for the character/placeholder mapping."""

    def test_placeholder_is_md5_of_key(self):
        """Should map every key to the hex MD5 digest of the key."""
        assert ESCAPE_TABLE["*"] == hashlib.md5(b"*").hexdigest()
        assert ESCAPE_TABLE.escape("&lt;") == hashlib.md5(b"&lt;").hexdigest()

    def test_covers_every_protected_key(self):
        """Should hold each punctuation character plus the &lt; entity."""
        assert len(ESCAPE_TABLE) == len(ESCAPABLE_CHARACTERS) + 1
        for char in ESCAPABLE_CHARACTERS:
            assert char in ESCAPE_TABLE
        assert "&lt;" in ESCAPE_TABLE
        assert "a" not in ESCAPE_TABLE

    def test_placeholders_are_plain_hex(self):
        """Should only produce characters no Markdown pass treats as special."""
        for key in ESCAPE_TABLE:
            placeholder = ESCAPE_TABLE[key]
            assert len(placeholder) == 32
            assert set(placeholder) <= set("0123456789abcdef")

    def test_table_is_read_only(self):
        """Should not allow the shared mapping to be changed."""
        with pytest.raises(TypeError):
            ESCAPE_TABLE._table["*"] = "x"

    def test_escape_chars_only_touches_requested(self):
        """Should replace only the characters asked for."""
        result = ESCAPE_TABLE.escape_chars("a*b_c~", "*_")
        assert "~" in result
        assert "*" not in result and "_" not in result
        assert ESCAPE_TABLE.unescape(result) == "a*b_c~"

    def test_escape_all_prefers_entity(self):
        """Should treat &lt; as one key rather than leaving it as text."""
        escaped = ESCAPE_TABLE.escape_all("&lt;")
        assert escaped == ESCAPE_TABLE["&lt;"]

    def test_separate_tables_agree(self):
        """Should build identical placeholders for every instance."""
        assert EscapeTable()["_"] == ESCAPE_TABLE["_"]


class TestEscapeIdempotence:
    """Unescaping undoes escaping for strings of protected characters."""

    @pytest.mark.parametrize("char", list(ESCAPABLE_CHARACTERS))
    def test_single_character(self, char):
        """Should restore each protected character on its own."""
        assert ESCAPE_TABLE.unescape(ESCAPE_TABLE.escape_all(char)) == char

    def test_all_pairs(self):
        """Should restore every two-character combination."""
        for pair in itertools.product(ESCAPABLE_CHARACTERS, repeat=2):
            text = "".join(pair)
            assert ESCAPE_TABLE.unescape(ESCAPE_TABLE.escape_all(text)) == text

    def test_random_strings(self):
        """Should restore long random strings of protected characters."""
        rng = random.Random(1234)
        for _ in range(200):
            text = "".join(rng.choice(ESCAPABLE_CHARACTERS) for _ in range(rng.randint(0, 40)))
            assert ESCAPE_TABLE.unescape(ESCAPE_TABLE.escape_all(text)) == text

    def test_empty_string(self):
        """Should leave an empty string empty."""
        assert ESCAPE_TABLE.unescape(ESCAPE_TABLE.escape_all("")) == ""
