# commentmark/blocks/__init__.py

from ..spans import run_span_gamut
from .blockquotes import do_block_quotes
from .code_blocks import reinsert_code_blocks
from .grammar import BlockGrammar, CommentMarkdown
from .lists import trim_list_newlines


def build_block_grammar(grammar_class=BlockGrammar, span_gamut=run_span_gamut):
    """markdown2 block grammar wired up with the code block, block quote and list steps."""
    return grammar_class(
        span_gamut=span_gamut,
        # markdown2 runs lists, then code blocks, then block quotes
        code_blocks=reinsert_code_blocks,
        block_quotes=do_block_quotes,
        list_postprocessor=trim_list_newlines,
    )
