"""Utility modules for codeformat.

Provides:
- text: escape_html, normalize_newlines, decode_editor_markup
- logger: get_logger for logging
"""

from codeformat.utils.logger import get_logger
from codeformat.utils.text import decode_editor_markup, escape_html, normalize_newlines

__all__ = [
    "decode_editor_markup",
    "escape_html",
    "get_logger",
    "normalize_newlines",
]
