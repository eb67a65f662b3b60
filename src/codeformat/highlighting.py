"""Highlighter protocol adapter for Markdown renderers.

Markdown renderers that accept an injectable syntax highlighter (a
``highlight(code, language, *, hl_lines, show_linenos)`` /
``supports_language(language)`` pair) can use codeformat through
CodeFormatHighlighter.

Usage:
    from codeformat.highlighting import CodeFormatHighlighter

    highlighter = CodeFormatHighlighter()
    html = highlighter.highlight("var x = 1;", "js", show_linenos=True)
"""

from __future__ import annotations

import dataclasses
import html
from typing import Protocol

from codeformat.config import HighlightConfig, get_highlight_config
from codeformat.factory import create_formatter
from codeformat.languages import resolve_language
from codeformat.utils.text import escape_html


class Highlighter(Protocol):
    """Protocol for syntax highlighters.

    Highlighters take code and language and return HTML markup
    with syntax highlighting applied.

    Thread Safety:
        Implementations must be thread-safe. The highlight() method
        may be called concurrently from multiple render threads.
    """

    def highlight(
        self,
        code: str,
        language: str,
        *,
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        """Highlight code with syntax colors.

        Contract:
            - MUST return valid HTML (never raise for bad input)
            - MUST escape HTML entities in code
            - MUST use CSS classes (not inline styles)
            - SHOULD fall back to plain text for unknown languages
        """
        ...

    def supports_language(self, language: str) -> bool:
        """Check if highlighter supports the given language.

        Contract:
            - MUST NOT raise exceptions
            - SHOULD handle common aliases (js -> javascript)
        """
        ...


class CodeFormatHighlighter:
    """codeformat-based highlighter implementing the Highlighter protocol.

    ``hl_lines`` is accepted for protocol compatibility and ignored: line
    emphasis is not part of the output contract. Output is always escaped,
    whatever the configuration says, as the protocol requires.
    """

    __slots__ = ("_config",)

    def __init__(self, config: HighlightConfig | None = None) -> None:
        self._config = config

    def highlight(
        self,
        code: str,
        language: str,
        *,
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        """Highlight code, or fall back to an escaped ``<pre><code>`` block."""
        resolved = resolve_language(language)
        if not resolved.is_supported:
            lang_class = f' class="language-{html.escape(language)}"' if language else ""
            return f"<pre><code{lang_class}>{escape_html(code)}</code></pre>"
        config = self._config if self._config is not None else get_highlight_config()
        if not config.escape_html:
            config = dataclasses.replace(config, escape_html=True)
        formatter = create_formatter(resolved, line_numbers=show_linenos, config=config)
        return formatter.format_code(code)

    def supports_language(self, language: str) -> bool:
        """Check if the language (or an alias) has a formatter."""
        return resolve_language(language).is_supported


__all__ = ["CodeFormatHighlighter", "Highlighter"]
