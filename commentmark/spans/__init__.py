# commentmark/spans/__init__.py
"""
The span gamut: every transformation that happens inside block-level
elements such as paragraphs, headers and list items.

Each step relies on what the steps before it guarantee:

- code spans are encoded (and their punctuation hidden) before any
  escaping runs, so nothing inside them is ever treated as Markdown
- ``*`` and ``_`` inside tags are hidden before anchors are built, so
  linkified URLs keep their underscores
- anchors exist before strikethrough and autolinks run, so those passes can
  skip them
- entities are encoded before emphasis, and line breaks come last
"""

from .autolinks import do_autolinks
from .code_spans import do_code_spans
from .emphasis import do_italics_and_bold
from .escaping import (
    encode_amps_and_angles,
    escape_special_chars,
    escape_special_chars_within_tag_attributes,
)
from .line_breaks import do_line_breaks
from .links import resolve_links
from .strikethrough import do_strikethroughs

SPAN_PROCESSORS = [
    do_code_spans,
    escape_special_chars_within_tag_attributes,
    escape_special_chars,
    resolve_links,
    do_strikethroughs,
    do_autolinks,
    encode_amps_and_angles,
    do_italics_and_bold,
    do_line_breaks,
    # Order matters - they run sequentially
]


def run_span_gamut(text, context):
    """Apply all span processors in order"""
    for processor in SPAN_PROCESSORS:
        text = processor(text, context)
    return text
