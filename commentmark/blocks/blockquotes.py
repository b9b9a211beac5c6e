# commentmark/blocks/blockquotes.py
"""
Block quotes.

The input has already been HTML-escaped, so quote markers only arrive as
``&gt;``. The quoted text is rendered recursively through the whole block
pipeline:

    &gt; Some *quoted*        <blockquote class="markdown">
    &gt; text            →      <p>Some <em>quoted</em>
                                text</p>
                              </blockquote>
"""

import logging
import re

from ..preprocessors.code_blocks import extract_code_blocks

logger = logging.getLogger(__name__)

_BLOCK_QUOTE = re.compile(
    r"""
    (                           # wrap whole match in $1
      (?:
        ^[ \t]*&gt;[ \t]?       # escaped ">" at the start of a line
          .+\n                  # rest of the first line
        (?:.+\n)*               # subsequent consecutive lines
        \n*                     # blanks
      )+
    )
    """,
    re.M | re.X,
)
_QUOTE_MARKER = re.compile(r"^[ \t]*&gt;[ \t]?", re.M)
_WHITESPACE_LINE = re.compile(r"^[ \t]+$", re.M)
_LINE_START = re.compile(r"^", re.M)
_PRE_BLOCK = re.compile(r"(\s*<pre>.+?</pre>)", re.S)
_INDENT = re.compile(r"^  ", re.M)


def do_block_quotes(text: str, context, render_blocks) -> str:
    """
    Render every block quote in ``text``.

    Args:
        text: Text with code block markers already replaced
        context: RenderContext of the enclosing document
        render_blocks: Block pipeline used for the quoted text
    """

    def render_quote(match):
        quote = _QUOTE_MARKER.sub("", match.group(1))
        quote = _WHITESPACE_LINE.sub("", quote)

        # Code inside the quote is only recognizable once the markers are gone
        nested = context.nested()
        quote = extract_code_blocks(quote, nested)
        quote = render_blocks(quote, nested, wrap_in_p_tags=True)

        leftover = nested.code_blocks.pending()
        if leftover:
            logger.warning(f"{leftover} code blocks in block quote were never inserted")

        quote = _LINE_START.sub("  ", quote)
        # These leading spaces screw with <pre> content, so we need to fix that
        quote = _PRE_BLOCK.sub(lambda m: _INDENT.sub("", m.group(1)), quote)

        return f'<blockquote class="markdown">\n{quote}\n</blockquote>\n\n'

    return _BLOCK_QUOTE.sub(render_quote, text)
