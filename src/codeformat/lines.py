"""Line numbering and zebra-striping.

A pure post-processing pass over already-rendered HTML: the text is split
on newlines and each physical line becomes its own ``<pre>`` element,
optionally prefixed with a right-aligned line number and alternately
classed ``alt``. Tokens are never re-scanned.

Spans left open at a line end (a multi-line string literal, say) are
closed there and reopened on the next line, so every ``<pre>`` holds
balanced markup.
"""

from __future__ import annotations

import re

from codeformat.stringbuilder import StringBuilder

_SPAN_TAG = re.compile(r'<span class="[^"]*">|</span>')


def _open_spans_after(line: str, carried: list[str]) -> list[str]:
    """Return the span open tags still unclosed at the end of ``line``."""
    stack = list(carried)
    for tag in _SPAN_TAG.findall(line):
        if tag == "</span>":
            if stack:
                stack.pop()
        else:
            stack.append(tag)
    return stack


def split_lines(html: str) -> list[str]:
    """Split on newlines; a trailing newline does not start an extra line."""
    if not html:
        return []
    lines = html.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def decorate_lines(
    html: str,
    *,
    line_numbers: bool,
    alternate: bool,
    css_class: str,
) -> str:
    """Wrap each line of rendered HTML for numbered/striped display.

    Args:
        html: Rendered body (newline-separated)
        line_numbers: Prefix each line with its 1-based number
        alternate: Class odd lines ``alt`` for zebra-striping
        css_class: Container class

    Returns:
        ``<div class="{css_class}">`` holding one ``<pre>`` per line
    """
    sb = StringBuilder()
    sb.append_line(f'<div class="{css_class}">')

    carried: list[str] = []
    for number, line in enumerate(split_lines(html), start=1):
        if alternate and number % 2 == 1:
            sb.append('<pre class="alt">')
        else:
            sb.append("<pre>")
        if line_numbers:
            sb.append_span("lnum", f"{number:4d}:  ")

        reopened = "".join(carried)
        still_open = _open_spans_after(line, carried)
        body = reopened + line + "</span>" * len(still_open)
        carried = still_open

        # An empty <pre> collapses; keep the line's height
        sb.append(body if line else "&nbsp;")
        sb.append_line("</pre>")

    sb.append("</div>")
    return sb.build()


__all__ = ["decorate_lines", "split_lines"]
