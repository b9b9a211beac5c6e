# commentmark/exceptions.py
"""
Exceptions raised by the rendering pipeline.

Malformed Markdown never raises: unresolved links, unterminated fences and the
like degrade to literal text. The exceptions below mark implementation defects
(a code-block marker without a stored body) or are used internally by the
balanced bracket/paren scanners to bail out of runaway nesting.
"""


class MarkdownError(Exception):
    """Base class for all commentmark errors."""


class CodeBlockStoreUnderrun(MarkdownError):
    """A code-block marker was found but its queue of bodies is empty."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"No stored {kind} code block left for marker")


class NestingDepthExceeded(MarkdownError):
    """Bracket or parenthesis nesting went deeper than the configured limit."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Nesting deeper than {limit} levels")
