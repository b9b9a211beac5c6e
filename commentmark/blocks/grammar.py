# commentmark/blocks/grammar.py
"""
Block grammar on top of markdown2.

markdown2 does headers, horizontal rules, lists, block HTML hashing and
paragraphs. Its span gamut, code block and block quote stages are swapped
for the commentmark ones, and list output is tidied after every list pass:

    _run_span_gamut   ->  span_gamut(text, context)
    _do_code_blocks   ->  code_blocks(text, context, render_blocks)
    _do_block_quotes  ->  block_quotes(text, context, render_blocks)
    _do_lists         ->  markdown2 lists, then list_postprocessor(text, context)
"""

import re
from typing import Callable, Optional

import markdown2

_PARAGRAPH_BREAK = re.compile(r"\n{2,}")


class CommentMarkdown(markdown2.Markdown):
    """
    markdown2 bound to a single render.

    markdown2 keeps per-document state (list level, hashed HTML), so an
    instance must not be shared between renders. Block quotes recurse
    through ``render_blocks`` on the same instance with a nested context.
    """

    def __init__(self, grammar: "BlockGrammar", context):
        super().__init__(tab_width=context.tab_width)
        self.reset()
        self.empty_element_suffix = context.config["empty_element_suffix"]
        self.grammar = grammar
        self.context = context
        self.html_blocks = context.html_blocks
        self.wrap_in_p_tags = True

    def render_blocks(self, text: str, context, wrap_in_p_tags: bool = True) -> str:
        """Render block-level Markdown in ``text`` against ``context``."""
        outer = self.context, self.wrap_in_p_tags
        self.context, self.wrap_in_p_tags = context, wrap_in_p_tags
        self.html_blocks = context.html_blocks
        try:
            return self._run_block_gamut(text)
        finally:
            self.context, self.wrap_in_p_tags = outer
            self.html_blocks = self.context.html_blocks

    def _run_span_gamut(self, text):
        return self.grammar.span_gamut(text, self.context)

    def _do_code_blocks(self, text):
        if self.grammar.code_blocks is None:
            return text
        return self.grammar.code_blocks(text, self.context, self.render_blocks)

    def _do_block_quotes(self, text):
        if self.grammar.block_quotes is None:
            return text
        return self.grammar.block_quotes(text, self.context, self.render_blocks)

    def _do_lists(self, text):
        text = super()._do_lists(text)
        if self.grammar.list_postprocessor is not None:
            text = self.grammar.list_postprocessor(text, self.context)
        return text

    def _process_list_items(self, list_str):
        # Loose list items always get paragraphs
        wrap, self.wrap_in_p_tags = self.wrap_in_p_tags, True
        try:
            return super()._process_list_items(list_str)
        finally:
            self.wrap_in_p_tags = wrap

    def _form_paragraphs(self, text):
        text = text.strip("\n")
        if not text:
            return ""
        if self.wrap_in_p_tags:
            return super()._form_paragraphs(text)

        chunks = []
        for chunk in _PARAGRAPH_BREAK.split(text):
            if chunk in self.html_blocks:
                chunks.append(self.html_blocks[chunk])
            else:
                chunks.append(self._run_span_gamut(chunk))
        return "\n\n".join(chunks)


class BlockGrammar:
    """
    Block-level rendering with the comment dialect's stages plugged in.

    Args:
        span_gamut: ``callable(text, context)`` applied to leaf text
        code_blocks: ``callable(text, context, render_blocks)`` run where
            markdown2 would look for indented code
        block_quotes: ``callable(text, context, render_blocks)`` run in place
            of markdown2's block quotes
        list_postprocessor: ``callable(text, context)`` applied to the text
            right after lists have been rendered
    """

    markdown_class = CommentMarkdown

    def __init__(
        self,
        span_gamut: Callable,
        code_blocks: Optional[Callable] = None,
        block_quotes: Optional[Callable] = None,
        list_postprocessor: Optional[Callable] = None,
    ):
        self.span_gamut = span_gamut
        self.code_blocks = code_blocks
        self.block_quotes = block_quotes
        self.list_postprocessor = list_postprocessor

    def render_blocks(self, text: str, context, wrap_in_p_tags: bool = True) -> str:
        md = self.markdown_class(self, context)
        return md.render_blocks(text, context, wrap_in_p_tags=wrap_in_p_tags)
