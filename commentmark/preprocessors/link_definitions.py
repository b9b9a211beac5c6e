# commentmark/preprocessors/link_definitions.py
"""
Preprocessor that strips ``[id]: url "title"`` lines into the link table.

By the time this runs the linkifier may already have turned the url into
``<a href="url">url</a>``, and the source is HTML-escaped, so quotes arrive
as ``&quot;`` and angle brackets as ``&lt;``/``&gt;``. All of those forms are
accepted alongside the plain ones.
"""

import logging
import re
from functools import lru_cache

from ..spans.escaping import encode_amps_and_angles

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _link_definition_pattern(less_than_tab: int):
    return re.compile(
        r'''
        ^[ ]{0,%d}\[(?P<id>.+)\]:           # id
          [ \t]*
          \n?                               # maybe *one* newline
          [ \t]*
        (?:&lt;|<)?
        (?:
            <a\s+href="(?P<href>[^"]+?)">(?P=href)</a>
          |
            (?P<url>[^\s<>]+?)
        )
        (?:&gt;|>)?
          [ \t]*
          \n?                               # maybe one newline
          [ \t]*
        (?:
            (?<=\s)                         # lookbehind for whitespace
            (?:
                (?P<quote>&quot;|")(?P<quoted>.+?)(?P=quote)
              | '(?P<single>.+?)'
              | \((?P<paren>.+?)\)
            )
            [ \t]*
        )?                                  # title is optional
        (?:\n+|\Z)
        '''
        % less_than_tab,
        re.M | re.X,
    )


def strip_link_definitions(text: str, context) -> str:
    """
    Remove link definitions from ``text`` and store them on the context.

    Ids are case-insensitive; a later definition of the same id replaces
    the earlier one.
    """
    pattern = _link_definition_pattern(context.tab_width - 1)
    table = context.link_definitions

    def store(match):
        url = match.group("href") or match.group("url")
        title = match.group("quoted") or match.group("single") or match.group("paren")
        if title is not None:
            title = title.replace('"', "&quot;")
        table.define(match.group("id"), encode_amps_and_angles(url), title)
        return ""

    text = pattern.sub(store, text)
    if len(table):
        logger.debug(f"{len(table)} link definitions collected")
    return text
