# commentmark/postprocessors/code_blocks.py

import logging

logger = logging.getLogger(__name__)


def check_code_blocks_consumed(html, context):
    """Warn about code blocks that were extracted but never put back."""
    store = context.code_blocks
    for marker, kind in store.KINDS.items():
        leftover = store.pending(marker)
        if leftover:
            logger.warning(f"{leftover} {kind} code blocks were never inserted")
    return html
