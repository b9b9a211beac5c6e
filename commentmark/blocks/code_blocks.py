# commentmark/blocks/code_blocks.py
"""
Put extracted code blocks back as ``<pre><code>`` elements.

Every marker line left by the extractor is replaced, in document order, by
the next queued body of the same kind. Bodies are code-encoded here, after
all Markdown processing of the surrounding text, and the finished element is
stashed on the context right away so block quotes and paragraph forming
never read its lines as Markdown.
"""

import logging
import re

from ..context import FENCED_BLOCK, INDENTED_BLOCK
from ..exceptions import CodeBlockStoreUnderrun
from ..spans.escaping import encode_code

logger = logging.getLogger(__name__)

_CODE_BLOCK_MARKER = re.compile(r"^(%s|%s)" % (FENCED_BLOCK, INDENTED_BLOCK), re.M)


def reinsert_code_blocks(text: str, context, render_blocks=None) -> str:
    """
    Replace marker lines with the stored code block bodies.

    Raises:
        CodeBlockStoreUnderrun: a marker was found with nothing left to
            consume. Markers only come from the extractor, so this means the
            text and the store have gone out of step.
    """

    def reinsert(match):
        try:
            body = context.code_blocks.pop(match.group(1))
        except CodeBlockStoreUnderrun as e:
            logger.error(f"Code block marker without a stored body: {e}")
            raise

        body = encode_code(body, context)
        body = body.expandtabs(context.tab_width).rstrip("\n")
        key = context.stash_html(f"<pre><code>{body}</code></pre>")
        return f"\n\n{key}\n\n"

    return _CODE_BLOCK_MARKER.sub(reinsert, text)
