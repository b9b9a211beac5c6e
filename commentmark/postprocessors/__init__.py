# commentmark/postprocessors/__init__.py

from .code_blocks import check_code_blocks_consumed
from .html_blocks import restore_html_blocks
from .unescape import unescape_special_chars

POSTPROCESSORS = [
    restore_html_blocks,  # Keys that did not make up a whole paragraph
    check_code_blocks_consumed,  # Logs leftovers, output unchanged
    unescape_special_chars,  # Must stay last
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
