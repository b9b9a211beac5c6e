# commentmark/spans/escaping.py
"""
Character escaping for span-level text.

- Inside HTML tags, characters that would trigger emphasis are swapped for
  escape-table placeholders
- Outside tags, backslash escapes (``\\*``, ``\\_``, ``\\~`` ...) become
  placeholders
- Bare ``&`` and ``<`` are encoded as entities
- Code contents are decoded from the upstream HTML quoting and re-encoded
"""

import re

from .html import tokenize_html

_BACKSLASH_ESCAPE = re.compile(r"\\([\\`*_{}\[\]()>#+\-.!~])")
_BARE_AMPERSAND = re.compile(r"&(?!#?[xX]?(?:[0-9a-fA-F]+|\w+);)")
_BARE_LESS_THAN = re.compile(r"<(?![a-z/?\$!])", re.I)
_LINKIFIED_ADDRESS = re.compile(r'<a\s+href="(?:mailto:)?(.+?)">\1</a>', re.I)

# Reverse of the upstream HTML quoting. "&amp;" must come last: "&amp;gt;" is a
# literal "&gt;" typed by the user and must not end up as ">".
_QUOTED_ENTITIES = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#64;", "@"),
    ("&#39;", "'"),
    ("&#x27;", "'"),
    ("&amp;", "&"),
)


def encode_backslash_escapes(text: str, context) -> str:
    table = context.escape_table
    return _BACKSLASH_ESCAPE.sub(lambda m: table.escape(m.group(1)), text)


def escape_special_chars_within_tag_attributes(text: str, context) -> str:
    """Protect ``\\``, ``*`` and ``_`` inside tags, e.g. in linkified hrefs."""
    table = context.escape_table
    return "".join(
        table.escape_chars(value, "\\*_") if kind == "tag" else value
        for kind, value in tokenize_html(text)
    )


def escape_special_chars(text: str, context) -> str:
    table = context.escape_table
    result = []
    for kind, value in tokenize_html(text):
        if kind == "tag":
            # Within tags, encode * and _ so they don't conflict
            # with their use in Markdown for italics and strong.
            result.append(table.escape_chars(value, "*_"))
        else:
            result.append(encode_backslash_escapes(value, context))
    return "".join(result)


def encode_amps_and_angles(text: str, context=None) -> str:
    """Encode ``&`` not starting an entity and ``<`` not starting a tag."""
    text = _BARE_AMPERSAND.sub("&amp;", text)
    return _BARE_LESS_THAN.sub("&lt;", text)


def encode_code(text: str, context) -> str:
    """
    Encode the body of a code span or code block.

    The upstream quoting is undone first so an HTML-escaped ``&lt;`` is shown
    as ``<`` and not as ``&lt;``, linkified URLs are unwrapped, and the
    result is re-encoded. Markdown punctuation, ``~`` and ``&lt;`` are then
    swapped for placeholders so no later pass can see them.
    """
    for entity, char in _QUOTED_ENTITIES:
        text = text.replace(entity, char)
    text = _LINKIFIED_ADDRESS.sub(r"\1", text)

    text = text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")

    table = context.escape_table
    text = table.escape_chars(text, "*_{}[]\\~")
    return text.replace("&lt;", table.escape("&lt;"))
