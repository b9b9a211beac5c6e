# commentmark/preprocessors/code_blocks.py
"""
Preprocessor that pulls code blocks out of the text before anything else runs.

Converts:
    ```                     →  U+F111 marker line, body queued as "fenced"
    some *code*
    ```

    (blank line)
        indented code       →  U+F222 marker line, body queued as "indented"

Nothing inside a code block may be read as emphasis, links or quotes, so the
bodies wait in ``context.code_blocks`` until the block transformer swaps the
markers back for ``<pre><code>`` elements.
"""

import logging
import re
from functools import lru_cache

from ..context import FENCED_BLOCK, INDENTED_BLOCK, ExtractedText

logger = logging.getLogger(__name__)

_FENCED_CODE_BLOCK = re.compile(
    r"""
    ^ `{3,} [\w+\#.-]* [\s\t]* \n   # opening fence, optional info word
    (                               # $1 = the code block body
      (?: .* \n+ )+?
    )
    `{3,} [\s\t]* $                 # first closing fence wins
    """,
    re.M | re.X,
)


@lru_cache(maxsize=None)
def _indented_code_block(tab_width: int):
    return re.compile(
        r"""
        (?:\n\n|\A)
        (                           # $1 = the code block, one or more lines
          (?:
            (?:[ ]{%d}|\t)          # lines must start with a tab or a tab-width of spaces
            .*\n+
          )+
        )
        ((?=^[ ]{0,%d}\S)|\Z)       # lookahead for non-space at line-start, or end of doc
        """
        % (tab_width, tab_width),
        re.M | re.X,
    )


def extract_code_blocks(text: str, context) -> ExtractedText:
    """
    Replace fenced and indented code blocks with single-line markers.

    Args:
        text: Markdown text
        context: RenderContext whose ``code_blocks`` store receives the bodies

    Returns:
        Text with one marker line per extracted block
    """
    store = context.code_blocks
    before = store.pending()

    def stash_fenced(match):
        store.push(FENCED_BLOCK, match.group(1))
        return f"{FENCED_BLOCK}\n"

    def stash_indented(match):
        store.push(INDENTED_BLOCK, match.group(1))
        return f"\n{INDENTED_BLOCK}\n"

    text = _FENCED_CODE_BLOCK.sub(stash_fenced, text)
    text = _indented_code_block(context.tab_width).sub(stash_indented, text)

    extracted = store.pending() - before
    if extracted:
        logger.debug(f"Extracted {extracted} code blocks")
    return ExtractedText(text)
