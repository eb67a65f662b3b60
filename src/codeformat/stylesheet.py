"""Default stylesheet for formatter output.

Consumers normally ship their own CSS for the public span classes; this
one reproduces the classic color scheme and is what
``HighlightConfig.embed_stylesheet`` inlines.
"""

from __future__ import annotations

from codeformat.config import get_highlight_config

# (selector suffix after ".{css_class}", declarations)
_RULES: tuple[tuple[str, str], ...] = (
    (
        ", .{css} pre",
        'font-size: small; color: black; font-family: consolas, "Courier New", '
        "courier, monospace; background-color: #ffffff;",
    ),
    (" pre", "margin: 0em;"),
    (" .rem", "color: #008000;"),
    (" .kwrd", "color: #0000ff;"),
    (" .str", "color: #006080;"),
    (" .preproc", "color: #cc6633;"),
    (" .asp", "background-color: #ffff00;"),
    (" .html", "color: #800000;"),
    (" .attr", "color: #ff0000;"),
    (" .alt", "background-color: #f4f4f4; width: 100%; margin: 0em;"),
    (" .lnum", "color: #606060;"),
    ("-title", "font-weight: bold; margin: 0.5em 0 0.25em 0;"),
)


def get_stylesheet(css_class: str | None = None) -> str:
    """Get CSS for every class the formatters emit, scoped to the container.

    Args:
        css_class: Container class (defaults to the active config's)

    Returns:
        Stylesheet text, one rule per line
    """
    if css_class is None:
        css_class = get_highlight_config().css_class

    lines = []
    for suffix, declarations in _RULES:
        selector = f".{css_class}" + suffix.format(css=css_class)
        lines.append(f"{selector} {{ {declarations} }}\n")
    return "".join(lines)


__all__ = ["get_stylesheet"]
