# commentmark/postprocessors/html_blocks.py
"""
Restore block-level HTML that is still hidden behind its hash key.

Paragraph forming only restores keys that make up a whole paragraph; a key
that ended up next to other text (a code block inside a tight list item, or
a block stashed inside another stashed block) is put back here.
"""


def restore_html_blocks(html, context):
    blocks = context.html_blocks

    # A restored block may itself contain keys
    for _ in range(len(blocks)):
        found = [key for key in blocks if key in html]
        if not found:
            break
        for key in found:
            html = html.replace(key, blocks[key])
    return html
