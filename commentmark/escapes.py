# commentmark/escapes.py
"""
Placeholder table protecting literal Markdown punctuation.

Characters that must survive the span passes untouched (backslash escapes,
the contents of code spans, underscores inside URLs) are swapped for the MD5
hex digest of the character and swapped back as the very last step of a
render. Digests are plain ``[0-9a-f]`` runs, so no pass treats them as markup
and they cannot be confused with the private-use code-block markers.
"""

import hashlib
import re
from types import MappingProxyType
from typing import Mapping

ESCAPABLE_CHARACTERS = "\\`*_{}[]()>#+-.!~"
ESCAPABLE_ENTITIES = ("&lt;",)


def _placeholder(key: str) -> str:
    return hashlib.md5(key.encode("utf-8")).hexdigest()


class EscapeTable:
    """Immutable two-way mapping between protected keys and placeholders."""

    def __init__(self, characters: str = ESCAPABLE_CHARACTERS, entities=ESCAPABLE_ENTITIES):
        table = {key: _placeholder(key) for key in (*characters, *entities)}
        self._table: Mapping[str, str] = MappingProxyType(table)
        self._reverse: Mapping[str, str] = MappingProxyType(
            {placeholder: key for key, placeholder in table.items()}
        )

        # Longest keys first so "&lt;" wins over any single character.
        keys = sorted(table, key=len, reverse=True)
        self._key_pattern = re.compile("|".join(re.escape(key) for key in keys))
        self._placeholder_pattern = re.compile(
            "|".join(re.escape(value) for value in self._reverse)
        )

    def __getitem__(self, key: str) -> str:
        return self._table[key]

    def __contains__(self, key) -> bool:
        return key in self._table

    def __iter__(self):
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def escape(self, key: str) -> str:
        """Placeholder for a single protected character or entity."""
        return self._table[key]

    def escape_chars(self, text: str, chars: str) -> str:
        """Replace every occurrence of each character in ``chars``."""
        for char in chars:
            if char in text:
                text = text.replace(char, self._table[char])
        return text

    def escape_all(self, text: str) -> str:
        """Replace every protected key in ``text`` with its placeholder."""
        return self._key_pattern.sub(lambda m: self._table[m.group(0)], text)

    def unescape(self, text: str) -> str:
        """Restore every placeholder in ``text`` to the original key."""
        return self._placeholder_pattern.sub(lambda m: self._reverse[m.group(0)], text)


ESCAPE_TABLE = EscapeTable()
