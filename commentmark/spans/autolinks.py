# commentmark/spans/autolinks.py
"""
Angle-bracket autolinks: ``<http://example.com>`` or, since the source is
HTML-escaped, ``&lt;http://example.com&gt;``.

E-mail addresses are left to the linkifier, which has already wrapped them
by the time this runs.
"""

import re

from .html import sub_outside_elements

_AUTOLINK = re.compile(r"""(?:<|&lt;)((?:https?|ftp):[^'">\s]+?)(?:>|&gt;)""", re.I)


def do_autolinks(text: str, context) -> str:
    table = context.escape_table

    def replace(match):
        url = table.escape_chars(match.group(1), "*_")
        return f'<a href="{url}">{url}</a>'

    return sub_outside_elements(_AUTOLINK, replace, text)
