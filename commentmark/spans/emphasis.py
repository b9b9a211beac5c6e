# commentmark/spans/emphasis.py
"""
``<strong>`` and ``<em>`` from ``**``/``__`` and ``*``/``_``.

Underscore emphasis follows the GitHub rule for "multiple underscores in
words": ``some_variable_name`` is left exactly as written instead of getting
an emphasised middle. The patterns run in a fixed order: start of text first,
then after a non-word character, then a second pass that catches closing
delimiters directly followed by more text (``__a__b``).
"""

import re

_WHITESPACE = re.compile(r"\s")

# Start of text
_STRONG_UNDERSCORE_AT_START = re.compile(r"(^__(?=\S)(.+?[*_]*)(?<=\S)__(?!\S))", re.S)
_STRONG_STAR_AT_START = re.compile(r"^\*\*(?=\S)(.+?[*_]*)(?<=\S)\*\*", re.S)
_EM_UNDERSCORE_AT_START = re.compile(r"(^_(?=\S)(.+?)(?<=\S)_(?!\S))", re.S)
_EM_STAR_AT_START = re.compile(r"^\*(?=\S)(.+?)(?<=\S)\*", re.S)

# After a non-word character; <strong> must go first
_STRONG_UNDERSCORE = re.compile(r"((?<=\W)__(?=\S)(.+?[*_]*)(?<=\S)__(?!\S))", re.S)
_STRONG_STAR = re.compile(r"(?<=\W)\*\*(?=\S)(.+?[*_]*)(?<=\S)\*\*", re.S)
_EM_UNDERSCORE = re.compile(r"((?<=\W)_(?=\S)(.+?)(?<=\S)_(?!\S))", re.S)
_EM_STAR = re.compile(r"(?<=\W)\*(?=\S)(.+?)(?<=\S)\*", re.S)

# Second pass, closing delimiter followed by non-space
_STRONG_UNDERSCORE_TRAILING = re.compile(r"((?<=\W)__(?=\S)(.+?[*_]*)(?<=\S)__(\S*))", re.S)
_EM_UNDERSCORE_TRAILING = re.compile(r"((?<=\W)_(?=\S)(.+?)(?<=\S)_(\S*))", re.S)


def has_multiple_underscores(string: str) -> bool:
    """
    True for strings shaped like ``multiple_underscores_in_a_word``.

    That is: no whitespace at all, and at least one underscore.
    """
    if not string:
        return False
    if _WHITESPACE.search(string):
        return False
    return "_" in string


def _wrap_unless_identifier(tag):
    def replace(match):
        if has_multiple_underscores(match.group(2)):
            return match.group(1)
        return f"<{tag}>{match.group(2)}</{tag}>"

    return replace


def _wrap_trailing_unless_identifier(tag):
    # The trailing run, not the content, decides here.
    def replace(match):
        if has_multiple_underscores(match.group(3)):
            return match.group(1)
        return f"<{tag}>{match.group(2)}</{tag}>{match.group(3)}"

    return replace


def do_italics_and_bold(text: str, context) -> str:
    text = _STRONG_UNDERSCORE_AT_START.sub(_wrap_unless_identifier("strong"), text)
    text = _STRONG_STAR_AT_START.sub(r"<strong>\1</strong>", text)
    text = _EM_UNDERSCORE_AT_START.sub(_wrap_unless_identifier("em"), text)
    text = _EM_STAR_AT_START.sub(r"<em>\1</em>", text)

    text = _STRONG_UNDERSCORE.sub(_wrap_unless_identifier("strong"), text)
    text = _STRONG_STAR.sub(r"<strong>\1</strong>", text)
    text = _EM_UNDERSCORE.sub(_wrap_unless_identifier("em"), text)
    text = _EM_STAR.sub(r"<em>\1</em>", text)

    # And now, a second pass to catch nested strong and emphasis special cases
    text = _STRONG_UNDERSCORE_TRAILING.sub(_wrap_trailing_unless_identifier("strong"), text)
    text = _STRONG_STAR.sub(r"<strong>\1</strong>", text)
    text = _EM_UNDERSCORE_TRAILING.sub(_wrap_trailing_unless_identifier("em"), text)
    return _EM_STAR.sub(r"<em>\1</em>", text)
