# commentmark/config.py

# Schemes accepted as-is in inline links; anything else gets "http://" prepended.
SAFE_PROTOCOLS = (
    "afs",
    "cid",
    "ftp",
    "gopher",
    "http",
    "https",
    "irc",
    "ircs",
    "mid",
    "news",
    "nntp",
    "prospero",
    "telnet",
    "view-source",
    "wais",
)

DEFAULTS = {
    # Comments are narrow; two spaces already count as a code indent.
    "tab_width": 2,
    # HTML, not XHTML: <br> rather than <br />
    "empty_element_suffix": ">",
    "wrap_in_p_tags": True,
    # Deepest [..[..]..] or (..(..)..) nesting the link scanners will follow
    "max_nesting_depth": 6,
    "safe_protocols": SAFE_PROTOCOLS,
}


def get_render_config(**overrides):
    """
    Configuration for a single render.

    Returns a fresh dict of the defaults above with ``overrides`` applied, so
    callers can tweak one render without affecting any other.

    Raises:
        ValueError: if an override names an unknown setting or a tab width
            smaller than one.
    """
    unknown = set(overrides) - set(DEFAULTS)
    if unknown:
        raise ValueError(f"Unknown render settings: {', '.join(sorted(unknown))}")

    config = dict(DEFAULTS)
    config.update(overrides)

    if config["tab_width"] < 1:
        raise ValueError("tab_width must be at least 1")
    config["safe_protocols"] = tuple(config["safe_protocols"])
    return config
