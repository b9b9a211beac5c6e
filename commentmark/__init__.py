# commentmark/__init__.py
"""Markdown rendering for HTML-escaped comment text."""

from .config import get_render_config
from .context import RenderContext
from .exceptions import CodeBlockStoreUnderrun, MarkdownError, NestingDepthExceeded
from .linkify import linkify_urls
from .renderer import Renderer, markdown, render, render_markdown

__version__ = "0.1.0"

__all__ = [
    "CodeBlockStoreUnderrun",
    "MarkdownError",
    "NestingDepthExceeded",
    "RenderContext",
    "Renderer",
    "get_render_config",
    "linkify_urls",
    "markdown",
    "render",
    "render_markdown",
]
