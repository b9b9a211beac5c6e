# commentmark/blocks/lists.py
"""
List output clean-up.

Comment text is displayed with preserved line breaks, so every newline the
list renderer leaves between list tags would show up as extra space.
"""

import re

# Only newlines in front of list tags; paragraph breaks inside loose items stay
_NEWLINE_BEFORE_LIST_TAG = re.compile(r"\n(?=</?(?:ul|ol|li)>)")


def trim_list_newlines(text: str, context) -> str:
    """
    Remove the newline before every ``<ul>``, ``<ol>`` and ``<li>`` tag.

    This also takes out the newline between a list item's text and a nested
    list, so it doesn't turn into a ``<br>``.
    """
    return _NEWLINE_BEFORE_LIST_TAG.sub("", text)
