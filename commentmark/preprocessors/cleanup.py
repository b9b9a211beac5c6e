# commentmark/preprocessors/cleanup.py
"""Normalise line endings and whitespace before any Markdown is parsed."""

import logging
import re

from ..context import FENCED_BLOCK, INDENTED_BLOCK

logger = logging.getLogger(__name__)

_WHITESPACE_ONLY_LINE = re.compile(r"^[ \t]+$", re.M)
_MARKER_CHARACTERS = re.compile("[%s%s]" % (FENCED_BLOCK, INDENTED_BLOCK))


def normalize_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def strip_marker_characters(text: str) -> str:
    """Drop code block marker characters typed by the user."""
    text, count = _MARKER_CHARACTERS.subn("", text)
    if count:
        logger.debug(f"Removed {count} code block marker characters from input")
    return text


def clean_up_document(text: str, context) -> str:
    """
    Prepare raw input for the block grammar.

    - Converts DOS and Mac line endings to ``\\n``
    - Removes marker characters, unless code blocks were already extracted
      from this text
    - Appends two newlines so every block is newline-terminated
    - Expands tabs to the configured tab width
    - Blanks lines that contain only spaces and tabs
    """
    text = normalize_line_endings(text) + "\n\n"
    if not context.code_blocks.pending():
        text = strip_marker_characters(text)
    text = text.expandtabs(context.tab_width)
    return _WHITESPACE_ONLY_LINE.sub("", text)
