# commentmark/context.py
"""
Per-render state shared by the processors.

A ``RenderContext`` is created for every call to ``render`` and thrown away
afterwards; nothing in here is shared between renders except the read-only
escape table.
"""

import hashlib
import logging
from collections import deque
from typing import Dict, NamedTuple, NewType, Optional

from .config import get_render_config
from .escapes import ESCAPE_TABLE, EscapeTable
from .exceptions import CodeBlockStoreUnderrun

logger = logging.getLogger(__name__)

# Use private code points
FENCED_BLOCK = "\uf111"
INDENTED_BLOCK = "\uf222"

# Text whose fenced and indented code blocks have been swapped for markers.
# Only this may be handed to the block grammar.
ExtractedText = NewType("ExtractedText", str)


class CodeBlockStore:
    """
    FIFO queues of raw code block bodies, one per marker kind.

    The extractor pushes bodies in document order and the block transformer
    pops them in the same order as it meets the markers.
    """

    KINDS = {FENCED_BLOCK: "fenced", INDENTED_BLOCK: "indented"}

    def __init__(self):
        self._queues = {marker: deque() for marker in self.KINDS}

    def push(self, marker: str, body: str) -> str:
        """Store ``body`` and return the marker that stands in for it."""
        self._queues[marker].append(body)
        return marker

    def pop(self, marker: str) -> str:
        queue = self._queues[marker]
        if not queue:
            raise CodeBlockStoreUnderrun(self.KINDS[marker])
        return queue.popleft()

    def pending(self, marker: Optional[str] = None) -> int:
        """Number of bodies not yet consumed, for one kind or all of them."""
        if marker is not None:
            return len(self._queues[marker])
        return sum(len(queue) for queue in self._queues.values())

    @property
    def fenced(self):
        return list(self._queues[FENCED_BLOCK])

    @property
    def indented(self):
        return list(self._queues[INDENTED_BLOCK])


class LinkDefinition(NamedTuple):
    url: str
    title: Optional[str] = None


class LinkDefinitionTable:
    """Link ids (case-insensitive) mapped to their url and optional title."""

    def __init__(self):
        self._definitions: Dict[str, LinkDefinition] = {}

    def define(self, link_id: str, url: str, title: Optional[str] = None) -> None:
        key = link_id.lower()
        if key in self._definitions:
            logger.debug(f"Link definition '{key}' redefined")
        self._definitions[key] = LinkDefinition(url, title)

    def lookup(self, link_id: str) -> Optional[LinkDefinition]:
        return self._definitions.get(link_id.lower())

    def __contains__(self, link_id) -> bool:
        return link_id.lower() in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self):
        return iter(self._definitions.items())


class RenderContext:
    """Everything one render needs besides the text itself."""

    def __init__(
        self,
        config: Optional[dict] = None,
        link_definitions: Optional[LinkDefinitionTable] = None,
        escape_table: EscapeTable = ESCAPE_TABLE,
    ):
        self.config = config if config is not None else get_render_config()
        self.escape_table = escape_table
        self.code_blocks = CodeBlockStore()
        self.link_definitions = (
            link_definitions if link_definitions is not None else LinkDefinitionTable()
        )
        # Finished block-level HTML, keyed by the hash left in its place
        self.html_blocks: Dict[str, str] = {}

    @property
    def tab_width(self) -> int:
        return self.config["tab_width"]

    def stash_html(self, html: str) -> str:
        """Keep finished block HTML aside and return the key standing in for it."""
        key = hashlib.md5(html.encode("utf-8")).hexdigest()
        self.html_blocks[key] = html
        return key

    def nested(self) -> "RenderContext":
        """
        Context for rendering the inside of a block quote.

        The nested context gets its own code block store, so code written
        inside the quote is consumed there, but shares link definitions,
        the block stash and configuration with its parent.
        """
        child = RenderContext(
            config=self.config,
            link_definitions=self.link_definitions,
            escape_table=self.escape_table,
        )
        child.html_blocks = self.html_blocks
        return child
