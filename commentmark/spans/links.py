# commentmark/spans/links.py
"""
Turn Markdown link syntax into anchors.

Rules run in this order, and none of them rewrites text inside an anchor or
code element that already exists:

1. Anchors left by the linkifier whose text equals their href are unwrapped
   to the bare URL, so they are treated like any other URL below
2. Reference links          [text][id]  /  [text][]
3. Inline links             [text](url "optional title")
4. Shortcut references      [text]
5. Bare URLs                http://example.com
"""

import logging
import re
from functools import lru_cache
from typing import Optional, Tuple

from ..exceptions import NestingDepthExceeded
from .balanced import find_closing_bracket, scan_nested_parens
from .html import is_protected, protected_ranges, sub_outside_elements

logger = logging.getLogger(__name__)

_FOREIGN_ANCHOR = re.compile(r'<a\s+href="(?!mailto:)([^"]+?)">([^<]+)</a>')

# One optional space, one optional newline, then [id]
_REFERENCE_ID = re.compile(r"[ ]?(?:\n[ ]*)?\[(.*?)\]", re.S)

# A linkified URL inside the parens of an inline link
_LINKIFIED_URL = re.compile(r'<a\s+href="[^"]*">(?P<text>.*?)</a>', re.S)

_INLINE_TAIL = re.compile(
    r"""
    [ \t]*
    (?:
        (?P<quote>&quot;|["'])(?P<quoted>.*?)(?P=quote)[ \t]*   # quoted title
      |
        \((?P<paren>[^()]*)\)[ \t]*                             # title in parens
    )?
    \)
    """,
    re.S | re.X,
)

_SHORTCUT = re.compile(r"\[([^\[\]]+)\]")

# Not after a quote or bracket (already inside markup) nor after ";" (the
# tail of an entity such as "&lt;")
_BARE_URL = re.compile(r"""(?<![;^"'<>])((?:https?|ftp):[^'">\s]+\w)""")

_EMBEDDED_NEWLINE = re.compile(r"[ ]*\n")


@lru_cache(maxsize=None)
def _safe_url_pattern(protocols: Tuple[str, ...]):
    schemes = "|".join(re.escape(protocol) for protocol in protocols)
    return re.compile(r"(?:%s):[^:\s<>\"][^\s<>\"]+[\w/)]" % schemes, re.I)


def is_safe_url(url: str, context) -> bool:
    """True when ``url`` carries one of the configured safe schemes."""
    pattern = _safe_url_pattern(context.config["safe_protocols"])
    if pattern.fullmatch(url) is None:
        return False
    # A trailing ")" has to close a "(" inside the URL
    return not url.endswith(")") or url.count("(") >= url.count(")")


def _normalize_link_id(link_id: str) -> str:
    return _EMBEDDED_NEWLINE.sub(" ", link_id.lower())


def generate_anchor(
    whole_match: str,
    link_text: str,
    context,
    link_id: Optional[str] = None,
    url: Optional[str] = None,
    title: Optional[str] = None,
) -> str:
    """
    Build the ``<a>`` element for a resolved link.

    When ``url`` is not given it is looked up by ``link_id`` in the context's
    link definitions; if there is no such definition the original text is
    returned unchanged.
    """
    table = context.escape_table

    if url is None:
        definition = context.link_definitions.lookup(link_id) if link_id is not None else None
        if definition is None:
            logger.debug(f"Unresolved link reference '{link_id}'")
            return whole_match
        url = definition.url
        if title is None:
            title = definition.title

    # Encode these to avoid conflicting with italics/bold
    url = table.escape_chars(url, "*_")
    if url.startswith("<") and url.endswith(">"):
        url = url[1:-1]

    result = f'<a href="{url}"'
    if title is not None:
        title = table.escape_chars(title.replace('"', "&quot;"), "*_")
        result += f' title="{title}"'
    return f"{result}>{link_text}</a>"


def unwrap_foreign_anchors(text: str, context) -> str:
    """
    Revert linkifier anchors whose text and href are the same URL.

    Only those can be told apart from links written by the user; ``mailto:``
    anchors are left alone.
    """
    table = context.escape_table

    def unwrap(match):
        href, link_text = match.groups()
        if table.unescape(href) != table.unescape(link_text):
            return match.group(0)
        return link_text

    return _FOREIGN_ANCHOR.sub(unwrap, text)


def _substitute_bracketed(text: str, context, matcher) -> str:
    """
    Apply ``matcher`` at every ``[`` from left to right.

    ``matcher(text, start)`` returns ``(end, replacement)`` or None. As with a
    global regex substitution, scanning resumes after a match even when the
    replacement is the original text.
    """
    ranges = protected_ranges(text)
    pieces = []
    last = 0
    start = text.find("[")
    while start != -1:
        found = None
        if not is_protected(ranges, start):
            try:
                found = matcher(text, start)
            except NestingDepthExceeded as e:
                logger.debug(f"Treating link at offset {start} as text: {e}")
        if found is None:
            start = text.find("[", start + 1)
            continue
        end, replacement = found
        pieces.append(text[last:start])
        pieces.append(replacement)
        last = end
        start = text.find("[", end)
    pieces.append(text[last:])
    return "".join(pieces)


def resolve_reference_links(text: str, context) -> str:
    max_depth = context.config["max_nesting_depth"]

    def match_reference(text, start):
        close = find_closing_bracket(text, start, max_depth)
        if close is None:
            return None
        reference = _REFERENCE_ID.match(text, close + 1)
        if reference is None:
            return None

        link_text = text[start + 1 : close]
        # for shortcut links like [this][]
        link_id = _normalize_link_id(reference.group(1) or link_text)
        whole_match = text[start : reference.end()]
        anchor = generate_anchor(whole_match, link_text, context, link_id=link_id)
        return reference.end(), anchor

    return _substitute_bracketed(text, context, match_reference)


def resolve_inline_links(text: str, context) -> str:
    max_depth = context.config["max_nesting_depth"]

    def match_inline(text, start):
        close = find_closing_bracket(text, start, max_depth)
        if close is None or not text.startswith("(", close + 1):
            return None

        position = close + 2
        while position < len(text) and text[position] in " \t":
            position += 1

        linkified = _LINKIFIED_URL.match(text, position)
        if linkified is not None:
            url = linkified.group("text")
            position = linkified.end()
        else:
            end = scan_nested_parens(text, position, max_depth)
            url = text[position:end]
            position = end

        tail = _INLINE_TAIL.match(text, position)
        if tail is None:
            return None

        title = tail.group("quoted")
        if title is None:
            title = tail.group("paren")
        if not is_safe_url(url, context):
            url = f"http://{url}"

        whole_match = text[start : tail.end()]
        anchor = generate_anchor(
            whole_match, text[start + 1 : close], context, url=url, title=title
        )
        return tail.end(), anchor

    return _substitute_bracketed(text, context, match_inline)


def resolve_shortcut_links(text: str, context) -> str:
    """``[text]`` on its own, looked up as if it were ``[text][]``."""

    def replace(match):
        link_text = match.group(1)
        return generate_anchor(
            match.group(0), link_text, context, link_id=_normalize_link_id(link_text)
        )

    return sub_outside_elements(_SHORTCUT, replace, text)


def resolve_bare_urls(text: str, context) -> str:
    table = context.escape_table

    def replace(match):
        url = match.group(1)
        # The visible URL must not be read as emphasis either
        return generate_anchor(url, table.escape_chars(url, "*_"), context, url=url)

    return sub_outside_elements(_BARE_URL, replace, text)


def resolve_links(text: str, context) -> str:
    """Run every link rule over ``text`` in order."""
    text = unwrap_foreign_anchors(text, context)
    text = resolve_reference_links(text, context)
    text = resolve_inline_links(text, context)
    # Shortcuts go last in case of [text][1] or [text](/foo)
    text = resolve_shortcut_links(text, context)
    return resolve_bare_urls(text, context)
