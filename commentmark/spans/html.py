# commentmark/spans/html.py
"""Helpers for working around the HTML already present in span text."""

import re
from typing import Callable, List, Pattern, Tuple

_HTML_TOKEN = re.compile(r"<!--.*?-->|<\?.*?\?>|<[a-zA-Z/!$][^<>]*>", re.S)

# Elements whose contents no later pass may rewrite
_PROTECTED_ELEMENT = re.compile(r"<(a|code)\b[^>]*>.*?</\1>", re.S | re.I)


def tokenize_html(text: str) -> List[Tuple[str, str]]:
    """
    Split ``text`` into ``("tag", ...)`` and ``("text", ...)`` tokens.

    Comments and processing instructions count as tags.
    """
    tokens = []
    position = 0
    for match in _HTML_TOKEN.finditer(text):
        if match.start() > position:
            tokens.append(("text", text[position : match.start()]))
        tokens.append(("tag", match.group(0)))
        position = match.end()
    if position < len(text):
        tokens.append(("text", text[position:]))
    return tokens


def protected_ranges(text: str) -> List[Tuple[int, int]]:
    """Spans of ``<a>...</a>`` and ``<code>...</code>`` elements in ``text``."""
    return [match.span() for match in _PROTECTED_ELEMENT.finditer(text)]


def is_protected(ranges: List[Tuple[int, int]], position: int) -> bool:
    return any(start <= position < end for start, end in ranges)


def sub_outside_elements(pattern: Pattern, repl: Callable, text: str) -> str:
    """
    Like ``pattern.sub(repl, text)`` but leaves matches that start inside an
    existing anchor or code element untouched.
    """
    ranges = protected_ranges(text)
    if not ranges:
        return pattern.sub(repl, text)

    def guarded(match):
        if is_protected(ranges, match.start()):
            return match.group(0)
        return repl(match)

    return pattern.sub(guarded, text)
