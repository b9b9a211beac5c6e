# commentmark/postprocessors/unescape.py


def unescape_special_chars(html, context):
    """Swap escape-table placeholders back for the characters they protect."""
    return context.escape_table.unescape(html)
