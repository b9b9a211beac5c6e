# commentmark/linkify.py
"""
Default linkifier for HTML-escaped comment text.

Wraps bare web addresses and e-mail addresses in anchors whose text is the
address itself:

    see http://example.com/a?b=1&amp;c=2
      →  see <a href="http://example.com/a?b=1&amp;c=2">http://example.com/a?b=1&amp;c=2</a>

    mail someone@example.com
      →  mail <a href="mailto:someone@example.com">someone@example.com</a>

The renderer recognizes these anchors and turns them back into plain URLs
where Markdown link syntax needs them, so any linkifier producing the same
shape can be passed to ``markdown()`` instead.
"""

import re

# The text is already escaped: "&amp;" may appear inside a URL, any other
# entity (&lt; &gt; &quot; &#x27;) ends it.
_LINKABLE = re.compile(
    r"""
    (?P<url>
        (?<![\w/:.@])
        (?:https?|ftp)://
        (?:[^\s<>"'&]|&amp;)*
        [\w/]
    )
    |
    (?P<email>
        (?<![\w.+-])
        [\w.+-]+@[\w-]+(?:\.[\w-]+)+
    )
    """,
    re.I | re.X,
)


def linkify_urls(text, context=None):
    """Wrap every bare URL and e-mail address in ``text`` in an anchor."""

    def wrap(match):
        if match.group("url"):
            url = match.group("url")
            return f'<a href="{url}">{url}</a>'
        email = match.group("email")
        return f'<a href="mailto:{email}">{email}</a>'

    return _LINKABLE.sub(wrap, text)
