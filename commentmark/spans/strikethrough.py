# commentmark/spans/strikethrough.py

import re

# Anywhere except straight after another "~": start of a line, after a
# word character, after "_" or after punctuation all count.
_STRIKETHROUGH = re.compile(r"(?<!~)~~(?=\S)([^~]+?)(?<=\S)~~(?!~)")


def do_strikethroughs(text: str, context) -> str:
    """``~~text~~`` becomes ``<del>text</del>``."""
    return _STRIKETHROUGH.sub(r"<del>\1</del>", text)
