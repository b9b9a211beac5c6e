# commentmark/spans/line_breaks.py


def do_line_breaks(text: str, context) -> str:
    """Every newline left in a paragraph is a hard line break."""
    suffix = context.config["empty_element_suffix"]
    return text.replace("\n", f"<br{suffix}\n")
