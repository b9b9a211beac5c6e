"""Tests for the block grammar and the block-level transforms."""

import markdown2

from commentmark.blocks import build_block_grammar
from commentmark.blocks.blockquotes import do_block_quotes
from commentmark.blocks.code_blocks import reinsert_code_blocks
from commentmark.blocks.grammar import BlockGrammar, CommentMarkdown
from commentmark.blocks.lists import trim_list_newlines
from commentmark.config import get_render_config
from commentmark.context import RenderContext
from commentmark.renderer import render


def identity(text, context):
    return text


class TestBlockGrammar:
    """Tests for the markdown2 grammar with a no-op span gamut."""

    def setup_method(self):
        self.grammar = BlockGrammar(span_gamut=identity)

    def test_atx_header(self, context, soup):
        """Should turn a hash line into a header."""
        doc = soup(self.grammar.render_blocks("# Hi\n\n", context))
        assert doc.h1.get_text() == "Hi"
        assert doc.p is None

    def test_atx_header_with_closing_hashes(self, context, soup):
        doc = soup(self.grammar.render_blocks("### Three ###\n\n", context))
        assert doc.h3.get_text() == "Three"

    def test_setext_headers(self, context, soup):
        assert soup(self.grammar.render_blocks("Title\n=====\n\n", context)).h1.get_text() == "Title"
        assert soup(self.grammar.render_blocks("Sub\n---\n\n", context)).h2.get_text() == "Sub"

    def test_horizontal_rule(self, context, soup):
        """Should emit a rule between paragraphs without wrapping it in <p>."""
        html = self.grammar.render_blocks("a\n\n* * *\n\nb\n\n", context)

        assert "<hr>" in html
        assert "<p><hr" not in html
        assert [p.get_text() for p in soup(html).find_all("p")] == ["a", "b"]

    def test_rule_uses_configured_suffix(self):
        context = RenderContext(config=get_render_config(empty_element_suffix=" />"))
        assert "<hr />" in self.grammar.render_blocks("a\n\n- - -\n\nb\n\n", context)

    def test_paragraphs(self, context):
        """Should wrap each chunk between blank lines in <p>."""
        html = self.grammar.render_blocks("one\n\ntwo\n\n", context)
        assert html == "<p>one</p>\n\n<p>two</p>"

    def test_paragraphs_without_wrapping(self, context):
        """Should leave paragraphs bare when wrapping is off."""
        html = self.grammar.render_blocks("one\n\ntwo\n\n", context, wrap_in_p_tags=False)
        assert html == "one\n\ntwo"

    def test_empty_input(self, context):
        """Should render nothing at all rather than an empty paragraph."""
        assert self.grammar.render_blocks("\n\n", context) == ""

    def test_stages_get_render_blocks(self, context):
        """Should hand code and quote stages the recursion hook, code first."""
        calls = []

        def code_blocks(text, context, render_blocks):
            calls.append(("code", render_blocks))
            return text.replace("x", "y")

        def block_quotes(text, context, render_blocks):
            calls.append(("quote", render_blocks))
            return text.replace("y", "z")

        grammar = BlockGrammar(
            span_gamut=identity, code_blocks=code_blocks, block_quotes=block_quotes
        )

        assert grammar.render_blocks("x\n\n", context) == "<p>z</p>"
        assert [name for name, _ in calls] == ["code", "quote"]
        for _, render_blocks in calls:
            assert isinstance(render_blocks.__self__, CommentMarkdown)
            assert render_blocks.__name__ == "render_blocks"

    def test_span_gamut_runs_on_leaf_text(self, context, soup):
        grammar = BlockGrammar(span_gamut=lambda text, context: text.upper())
        doc = soup(grammar.render_blocks("# head\n\nbody\n\n", context))

        assert doc.h1.get_text() == "HEAD"
        assert doc.p.get_text() == "BODY"

    def test_hashed_blocks_land_in_context(self, context):
        """Should stash generated block HTML on the context."""
        self.grammar.render_blocks("* a\n* b\n\n", context)
        assert any(html.startswith("<ul>") for html in context.html_blocks.values())

    def test_list_postprocessor_sees_every_list(self, context):
        """Should run the list clean-up for nested lists too."""
        seen = []

        def record(text, context):
            seen.append(text)
            return text

        grammar = BlockGrammar(span_gamut=identity, list_postprocessor=record)
        grammar.render_blocks("* a\n  * b\n* c\n\n", context)

        assert any(text.startswith("a\n<ul>") for text in seen)
        assert "<ul>" in seen[-1]

    def test_build_block_grammar(self):
        grammar = build_block_grammar()
        assert grammar.code_blocks is reinsert_code_blocks
        assert grammar.block_quotes is do_block_quotes
        assert grammar.list_postprocessor is trim_list_newlines


class TestCommentMarkdown:
    """Tests for the markdown2 subclass behind the grammar."""

    def test_is_a_markdown2_subclass(self, context):
        """Should carry the render settings into markdown2."""
        md = CommentMarkdown(BlockGrammar(span_gamut=identity), context)

        assert isinstance(md, markdown2.Markdown)
        assert md.html_blocks is context.html_blocks
        assert md.tab_width == context.tab_width
        assert md.empty_element_suffix == ">"

    def test_nested_render_restores_outer_context(self, context):
        """Should switch to the nested context only while it renders."""
        md = CommentMarkdown(BlockGrammar(span_gamut=identity), context)
        nested = context.nested()

        md.render_blocks("inner\n\n", nested)

        assert md.context is context
        assert md.wrap_in_p_tags is True

    def test_loose_items_wrapped_when_paragraphs_are_off(self, context):
        """Should wrap loose items even when paragraphs are off."""
        md = CommentMarkdown(build_block_grammar(span_gamut=identity), context)
        html = md.render_blocks("* a\n\n* b\n\n", context, wrap_in_p_tags=False)
        assert html.startswith("<ul><li><p>a</p></li>")


class TestLists:
    """Tests for list rendering and clean-up."""

    def test_unordered(self):
        assert render("* a\n* b") == "<ul><li>a</li><li>b</li></ul>\n"

    def test_ordered(self):
        assert render("1. one\n2. two") == "<ol><li>one</li><li>two</li></ol>\n"

    def test_nested(self, soup):
        """Should nest an indented list inside the previous item."""
        html = render("* a\n  * b\n* c")
        assert html == "<ul><li>a<ul><li>b</li></ul></li><li>c</li></ul>\n"

        outer = soup(html).find("ul")
        items = outer.find_all("li", recursive=False)
        assert len(items) == 2
        assert items[0].find("ul").get_text() == "b"

    def test_loose_items_get_paragraphs(self):
        """Should wrap items separated by blank lines in <p>."""
        assert render("* a\n\n* b") == "<ul><li><p>a</p></li><li><p>b</p></li></ul>\n"

    def test_list_needs_blank_line_before(self):
        """Should not start a list right after a paragraph line."""
        assert render("para\n* not a list") == "<p>para<br>\n* not a list</p>\n"

    def test_paragraph_after_list(self):
        html = render("* a\n* b\n\nafter")
        assert html == "<ul><li>a</li><li>b</li></ul>\n\n<p>after</p>\n"

    def test_items_carry_spans(self):
        assert render("* *em*\n* `code`") == (
            "<ul><li><em>em</em></li><li><code>code</code></li></ul>\n"
        )

    def test_trim_list_newlines(self, context):
        """Should remove newlines in front of list tags."""
        assert trim_list_newlines("<ul>\n<li>a</li>\n</ul>\n", context) == "<ul><li>a</li></ul>\n"

    def test_trim_leaves_paragraph_breaks(self, context):
        """Should keep blank lines between paragraphs in an item."""
        text = "<li><p>a</p>\n\n<p>b</p></li>"
        assert trim_list_newlines(text, context) == text


class TestBlockQuotes:
    """Tests for escaped block quotes."""

    def test_escaped_marker(self):
        """Should quote and re-indent escaped quote lines."""
        html = render("&gt; quoted\n&gt; text")
        assert html == (
            '<blockquote class="markdown">\n'
            "  <p>quoted<br>\n"
            "  text</p>\n"
            "</blockquote>\n"
        )

    def test_unescaped_marker_is_not_a_quote(self):
        """Should only quote on the escaped marker, as input arrives escaped."""
        html = render("> plain")
        assert "<blockquote" not in html
        assert html.startswith("<p>")

    def test_nested_quotes(self, soup):
        """Should nest a quote for each marker."""
        outer = soup(render("&gt;&gt; text")).find("blockquote")
        inner = outer.find("blockquote")

        assert outer["class"] == ["markdown"]
        assert inner["class"] == ["markdown"]
        assert inner.p.get_text() == "text"

    def test_pre_inside_quote_is_not_reindented(self, soup):
        """Should keep code inside a quote unindented."""
        html = render("&gt; ```\n&gt; a\n&gt;   b\n&gt; ```")

        assert "<pre><code>a\n  b</code></pre>" in html
        assert soup(html).select_one("blockquote.markdown pre code").get_text() == "a\n  b"

    def test_pre_in_nested_quote(self):
        html = render("&gt; outer\n&gt;\n&gt; &gt; ```\n&gt; &gt; x\n&gt; &gt;   y\n&gt; &gt; ```")
        assert "<pre><code>x\n  y</code></pre>" in html

    def test_paragraph_after_quote(self, soup):
        doc = soup(render("&gt; q\n\nafter"))
        assert doc.blockquote.p.get_text() == "q"
        assert doc.find_all("p", recursive=False)[-1].get_text() == "after"

    def test_quote_with_list(self, soup):
        quote = soup(render("&gt; * a\n&gt; * b")).find("blockquote")
        assert [li.get_text() for li in quote.find_all("li")] == ["a", "b"]


class TestCodeBlocksInDocuments:
    """Tests for code blocks in whole documents."""

    def test_fenced_blocks_in_order(self, soup):
        """Should put code blocks back in document order."""
        html = render("```\none `x`\n```\n\ntext\n\n```\na *b*\n```\n\n```\n[c](d)\n```")
        codes = [code.get_text() for code in soup(html).find_all("code")]

        assert codes == ["one `x`", "a *b*", "[c](d)"]
        assert "<p>text</p>" in html

    def test_indented_block(self):
        html = render("para\n\n  code line\n  more\n\nafter")
        assert "<pre><code>  code line\n  more</code></pre>" in html
        assert html.endswith("<p>after</p>\n")

    def test_code_is_not_markdown(self):
        """Should leave headers, lists and quotes in code alone."""
        html = render("```\n# not a header\n* not a list\n&gt; not a quote\n```")
        assert html == "<pre><code># not a header\n* not a list\n&gt; not a quote</code></pre>\n"

    def test_unterminated_fence_is_text(self):
        """Should treat an unclosed fence as text."""
        html = render("```\nnot closed")
        assert "<pre>" not in html
        assert "not closed" in html
