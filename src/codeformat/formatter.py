"""Formatter engine: scan text against a master pattern, emit classified HTML.

SourceFormatter holds the scan loop and rendering shared by every
formatter; CodeFormatter is the four-way formatter for code languages.
The markup formatter (codeformat.markup) extends the same engine.

Output contract:
    - Comments: one ``rem`` span per physical line, joined by ``\\n``
    - String literals ``str``, preprocessor words ``preproc``, keywords ``kwrd``
    - Text between matches passes through (HTML-escaped when
      ``HighlightConfig.escape_html`` is on)

Thread Safety:
    Formatters hold a shared immutable CompiledPattern plus two presentation
    flags. format_code()/format_sub_code() keep all state on the stack, so
    one instance can serve concurrent callers.

Example:
    >>> from codeformat.formatter import CodeFormatter
    >>> from codeformat.languages import Language
    >>> CodeFormatter.for_language(Language.CSHARP).format_sub_code("if (x)")
    '<span class="kwrd">if</span> (x)'
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from codeformat.cache import get_pattern
from codeformat.config import HighlightConfig, get_highlight_config
from codeformat.errors import NestingDepthError, PatternInvariantError
from codeformat.languages import Language, LanguageDescriptor
from codeformat.lines import decorate_lines
from codeformat.pattern import CompiledPattern, build_master_pattern
from codeformat.stringbuilder import StringBuilder
from codeformat.stylesheet import get_stylesheet
from codeformat.tokens import Token, TokenType
from codeformat.utils.text import escape_html, normalize_newlines


def _verbatim(text: str) -> str:
    return text


class SourceFormatter:
    """Scan loop and HTML rendering over a CompiledPattern.

    Subclasses customize _classify() to turn one match into tokens and
    _render_token() for token types needing more than a span.

    Attributes:
        line_numbers: Prefix each output line with its number (outermost call only)
        alternate: Zebra-stripe output lines (outermost call only)
    """

    __slots__ = ("line_numbers", "alternate", "_pattern", "_config")

    def __init__(
        self,
        pattern: CompiledPattern,
        *,
        line_numbers: bool = False,
        alternate: bool = False,
        config: HighlightConfig | None = None,
    ) -> None:
        """Initialize formatter.

        Args:
            pattern: Master pattern to scan with
            line_numbers: Number output lines in format_code()
            alternate: Stripe output lines in format_code()
            config: Explicit configuration (defaults to the active context's)
        """
        self._pattern = pattern
        self.line_numbers = line_numbers
        self.alternate = alternate
        self._config = config

    @property
    def pattern(self) -> CompiledPattern:
        return self._pattern

    @property
    def config(self) -> HighlightConfig:
        """Explicit config if one was given, otherwise the context's."""
        return self._config if self._config is not None else get_highlight_config()

    # =========================================================================
    # Public API
    # =========================================================================

    def tokenize(self, text: str) -> Iterator[Token]:
        """Classify ``text`` into a lazy, gapless, left-to-right token stream.

        Offsets refer to ``text`` exactly as given (no newline or tab
        normalization). Embedded regions come out as single
        EMBEDDED_SCRIPT / EMBEDDED_CODE tokens.

        Raises:
            PatternInvariantError: A match resolved to zero or several
                alternatives.
        """
        return self._scan(text)

    def format_code(self, text: str) -> str:
        """Format a standalone block of source as HTML.

        Line endings are normalized to ``\\n`` and tabs optionally expanded
        before scanning. When ``line_numbers`` or ``alternate`` is set the
        rendered body is decorated line by line; otherwise it is wrapped in
        ``<pre class="{css_class}">``.
        """
        config = self.config
        body = self._render(self._prepare(text, config), 0, config)

        sb = StringBuilder()
        if config.embed_stylesheet:
            sb.append_line('<style type="text/css">')
            sb.append(get_stylesheet(config.css_class))
            sb.append_line("</style>")
        if self.line_numbers or self.alternate:
            sb.append(
                decorate_lines(
                    body,
                    line_numbers=self.line_numbers,
                    alternate=self.alternate,
                    css_class=config.css_class,
                )
            )
        else:
            sb.append(f'<pre class="{config.css_class}">')
            sb.append(body)
            sb.append("</pre>")
        return sb.build()

    def format_sub_code(self, text: str, *, depth: int = 1) -> str:
        """Format an embedded fragment for a parent formatter.

        Same tokenization as format_code(), but never decorated or wrapped:
        line numbering belongs to the outermost request only.

        Args:
            text: Embedded region text
            depth: Nesting level of this call (the outermost formatter is 0)

        Raises:
            NestingDepthError: ``depth`` exceeds ``max_nesting_depth``.
        """
        config = self.config
        if depth > config.max_nesting_depth:
            raise NestingDepthError(depth, config.max_nesting_depth)
        return self._render(self._prepare(text, config), depth, config)

    # =========================================================================
    # Scanning
    # =========================================================================

    def _prepare(self, text: str, config: HighlightConfig) -> str:
        text = normalize_newlines(text)
        if config.tab_width > 0:
            text = text.replace("\t", " " * config.tab_width)
        return text

    def _scan(self, text: str) -> Iterator[Token]:
        regex = self._pattern.regex
        length = len(text)
        plain_start = 0
        search_at = 0

        while search_at <= length:
            # search() with a start offset keeps lookbehinds seeing earlier text
            match = regex.search(text, search_at)
            if match is None:
                break
            start, end = match.span()
            if start == end:
                search_at = start + 1
                continue
            if start > plain_start:
                yield Token(TokenType.PLAIN_TEXT, text[plain_start:start], plain_start)
            yield from self._classify(match)
            plain_start = search_at = end

        if plain_start < length:
            yield Token(TokenType.PLAIN_TEXT, text[plain_start:], plain_start)

    def _alternative(self, match: re.Match[str]) -> tuple[str, TokenType]:
        """Return the (group name, token type) of the one alternative that matched."""
        groups = match.groupdict()
        hits = [
            (name, token_type)
            for name, token_type in self._pattern.alternatives
            if groups.get(name) is not None
        ]
        if len(hits) != 1:
            raise PatternInvariantError(
                f"Match {match.group()!r} satisfied {len(hits)} alternatives",
                offset=match.start(),
            )
        return hits[0]

    def _classify(self, match: re.Match[str]) -> Iterator[Token]:
        _, token_type = self._alternative(match)
        yield Token(token_type, match.group(), match.start())

    # =========================================================================
    # Rendering
    # =========================================================================

    def _render(self, text: str, depth: int, config: HighlightConfig) -> str:
        sb = StringBuilder()
        for token in self._scan(text):
            self._render_token(token, sb, depth, config)
        return sb.build()

    def _render_token(
        self, token: Token, sb: StringBuilder, depth: int, config: HighlightConfig
    ) -> None:
        escape = escape_html if config.escape_html else _verbatim
        if token.type is TokenType.COMMENT:
            sb.append_line_spans("rem", escape(token.value))
            return
        css_class = token.css_class
        if css_class is None:
            sb.append(escape(token.value))
        else:
            sb.append_span(css_class, escape(token.value))


class CodeFormatter(SourceFormatter):
    """Formatter for four-way code languages (C#, VB, JavaScript, MSH, T-SQL)."""

    __slots__ = ()

    @classmethod
    def for_language(
        cls,
        language: Language,
        *,
        line_numbers: bool = False,
        alternate: bool = False,
        config: HighlightConfig | None = None,
    ) -> CodeFormatter:
        """Create a formatter over the cached pattern of a built-in language.

        Raises:
            KeyError: ``language`` is a markup language or UNSUPPORTED.
        """
        return cls(
            get_pattern(language),
            line_numbers=line_numbers,
            alternate=alternate,
            config=config,
        )

    @classmethod
    def from_descriptor(
        cls,
        descriptor: LanguageDescriptor,
        *,
        line_numbers: bool = False,
        alternate: bool = False,
        config: HighlightConfig | None = None,
    ) -> CodeFormatter:
        """Create a formatter for a custom descriptor (compiled, not cached)."""
        return cls(
            build_master_pattern(descriptor),
            line_numbers=line_numbers,
            alternate=alternate,
            config=config,
        )


__all__ = ["CodeFormatter", "SourceFormatter"]
