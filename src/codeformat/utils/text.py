"""Text processing utilities for codeformat.

Example:
    >>> from codeformat.utils.text import decode_editor_markup
    >>> decode_editor_markup("if (a &lt; b)<br />{<br />}")
    'if (a < b)\\n{\\n}'
"""

from __future__ import annotations

import html as html_module
import re

_LINE_BREAK_TAG = re.compile(r"<br\s*/?>", re.IGNORECASE)
_ANY_TAG = re.compile(r"<[^>]*>")
_NEWLINE = re.compile(r"\r\n?")


def escape_html(text: str) -> str:
    """Escape &, < and > for use as HTML element content.

    Quotes are left alone; output never lands inside an attribute value.
    """
    return html_module.escape(text, quote=False)


def normalize_newlines(text: str) -> str:
    """Convert \\r\\n and bare \\r line endings to \\n."""
    if "\r" not in text:
        return text
    return _NEWLINE.sub("\n", text)


def decode_editor_markup(text: str) -> str:
    """Recover raw source from the HTML a rich-text editor produced.

    Editors store code bodies HTML-encoded, with line breaks as ``<br />``
    and sometimes wrapped in paragraph tags. Line-break tags become
    newlines, every other tag is dropped, then entities are decoded.

    Args:
        text: Code body as found between block markers

    Returns:
        The plain source text
    """
    if not text:
        return ""
    text = _LINE_BREAK_TAG.sub("\n", text)
    text = _ANY_TAG.sub("", text)
    return html_module.unescape(text)
