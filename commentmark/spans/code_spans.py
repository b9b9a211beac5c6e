# commentmark/spans/code_spans.py

import re

from .escaping import encode_code

# Single-line only, so a span can never reach into a fenced block.
_CODE_SPAN = re.compile(
    r"""
    (?<!\\)     # character before opening ` can't be a backslash
    (`+)        # $1 = opening run of `
    (.+?)       # $2 = the code span
    (?<!`)
    \1          # matching closer
    (?!`)
    """,
    re.X,
)


def do_code_spans(text: str, context) -> str:
    """Turn backtick-quoted text into ``<code>`` elements."""

    def replace(match):
        code = match.group(2).strip(" \t")
        return f"<code>{encode_code(code, context)}</code>"

    return _CODE_SPAN.sub(replace, text)
