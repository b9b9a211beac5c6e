# commentmark/renderer.py

import logging

from .blocks import build_block_grammar
from .context import RenderContext
from .linkify import linkify_urls
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors
from .preprocessors.cleanup import normalize_line_endings, strip_marker_characters
from .preprocessors.code_blocks import extract_code_blocks

logger = logging.getLogger(__name__)


class Renderer:
    """
    Markdown to HTML with pre/post processing around the block grammar.

    Args:
        block_grammar: Object with a ``render_blocks(text, context,
            wrap_in_p_tags)`` method; defaults to the markdown2 grammar
            wired up with the code block, block quote and list steps
    """

    def __init__(self, block_grammar=None):
        self.block_grammar = block_grammar or build_block_grammar()

    def render(self, text, context=None):
        if context is None:
            context = RenderContext()

        # Pre-processing: Before markdown conversion
        text = apply_preprocessors(text, context)

        html = self.block_grammar.render_blocks(
            text, context, wrap_in_p_tags=context.config["wrap_in_p_tags"]
        )

        # Post-processing: After markdown conversion
        html = apply_postprocessors(html, context)

        return html + "\n"


_renderer = Renderer()


def render_markdown(text, context=None):
    """
    Main rendering function with pre/post processing pipeline

    Args:
        text: HTML-escaped Markdown text
        context: Optional RenderContext, e.g. one that already holds
            extracted code blocks or a non-default configuration
    """
    return _renderer.render(text, context)


render = render_markdown


def markdown(text, enabled=True, linkify=linkify_urls, linkify_context=None, config=None):
    """
    Render a comment.

    Args:
        text: HTML-escaped comment text
        enabled: Whether the author has Markdown turned on; if not, the text
            is only linkified
        linkify: ``callable(text, context)`` that turns bare references into
            anchors
        linkify_context: Passed through to ``linkify``
        config: Render settings as returned by ``get_render_config()``

    Returns:
        HTML string
    """
    if not enabled:
        return linkify(text, linkify_context)

    context = RenderContext(config=config)

    # Code blocks come out before linkifying so URLs in code stay as typed.
    # The extra newline terminates a code block on the last line.
    text = strip_marker_characters(normalize_line_endings(text)) + "\n"
    text = extract_code_blocks(text, context)
    text = linkify(text, linkify_context)

    logger.debug(f"Rendering {len(text)} characters of Markdown")
    return render(text, context)
