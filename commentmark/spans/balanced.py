# commentmark/spans/balanced.py
"""
Depth-counting scanners for nested brackets and parentheses.

Link text may contain balanced ``[...]`` pairs and URLs may contain balanced
``(...)`` pairs. Both scanners stop with ``NestingDepthExceeded`` once the
nesting passes ``max_depth``, which callers treat as "not a link".
"""

from typing import Optional

from ..exceptions import NestingDepthExceeded


def find_closing_bracket(text: str, start: int, max_depth: int) -> Optional[int]:
    """
    Index of the ``]`` that balances the ``[`` at ``text[start]``.

    Returns None when the brackets never balance.
    """
    depth = 0
    for index in range(start, len(text)):
        char = text[index]
        if char == "[":
            depth += 1
            if depth > max_depth:
                raise NestingDepthExceeded(max_depth)
        elif char == "]":
            depth -= 1
            if depth == 0:
                return index
    return None


def scan_nested_parens(text: str, start: int, max_depth: int) -> int:
    """
    End index of a URL starting at ``text[start]``.

    The URL runs until whitespace or an unbalanced ``)``. A nested group that
    is never closed, or that contains whitespace, is not part of the URL, so
    the URL then ends where that group opened.
    """
    depth = 0
    group_start = start
    index = start
    while index < len(text):
        char = text[index]
        if char == "(":
            if depth == 0:
                group_start = index
            depth += 1
            if depth > max_depth:
                raise NestingDepthExceeded(max_depth)
        elif char == ")":
            if depth == 0:
                return index
            depth -= 1
        elif char.isspace():
            return group_start if depth else index
        index += 1
    return group_start if depth else index
