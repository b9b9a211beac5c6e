# commentmark/preprocessors/__init__.py

from .cleanup import clean_up_document
from .code_blocks import extract_code_blocks
from .link_definitions import strip_link_definitions

PREPROCESSORS = [
    clean_up_document,  # Line endings, tabs, blank lines
    strip_link_definitions,  # Must run before block parsing
    extract_code_blocks,  # Code must be opaque before any Markdown is read
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
