"""
codeformat: regex-driven syntax highlighting to HTML

Turns source code, or rich text containing ``[code]`` regions, into HTML
fragments whose spans carry the classes ``str``, ``kwrd``, ``preproc``,
``rem``, ``attr`` and ``html``. Each language is scanned in a single pass
with one composite pattern; markup additionally delegates ``<script>``
and ``<% %>`` bodies to nested formatters.

Quick Start:
    >>> from codeformat import format_code
    >>> format_code("return null; // done", "c#")
    '<pre class="csharpcode"><span class="kwrd">return</span> <span class="kwrd">null</span>; <span class="rem">// done</span></pre>'

    >>> from codeformat import format_text
    >>> html = format_text('<p>See:</p>[code lang="html"]&lt;b&gt;hi&lt;/b&gt;[/code]')

Configuration:
    >>> from codeformat import HighlightConfig, highlight_config_context
    >>> with highlight_config_context(HighlightConfig(css_class="code")):
    ...     html = format_code("x", "js")

Languages:
    c# (cs, csharp), vb (vbnet), js (javascript), html (htm, aspx), xml,
    msh (powershell, ps1), tsql (sql)
"""

from codeformat.blocks import format_text, format_text_simple, highlight, parse_marker_attributes
from codeformat.cache import DictPatternCache, PatternCache, get_pattern, get_pattern_cache
from codeformat.config import (
    HighlightConfig,
    UnsupportedPolicy,
    get_highlight_config,
    highlight_config_context,
    reset_highlight_config,
    set_highlight_config,
)
from codeformat.errors import (
    CodeFormatError,
    LanguageDefinitionError,
    NestingDepthError,
    PatternInvariantError,
    UnsupportedLanguageError,
)
from codeformat.factory import create_formatter
from codeformat.formatter import CodeFormatter, SourceFormatter
from codeformat.highlighting import CodeFormatHighlighter, Highlighter
from codeformat.languages import Language, LanguageDescriptor, resolve_language
from codeformat.markup import MarkupFormatter
from codeformat.options import HighlightOptions
from codeformat.pattern import CompiledPattern, build_master_pattern
from codeformat.stylesheet import get_stylesheet
from codeformat.tokens import SPAN_CLASSES, Token, TokenType

__version__ = "0.1.0"


def format_code(
    code: str,
    language: str,
    *,
    line_numbers: bool = False,
    alternate: bool = False,
    config: HighlightConfig | None = None,
) -> str:
    """Format a block of source code as HTML.

    Args:
        code: Raw source text
        language: Language tag or alias (e.g. "c#", "javascript")
        line_numbers: Prefix each line with its number
        alternate: Zebra-stripe lines
        config: Explicit configuration (defaults to the active context's)

    Returns:
        HTML fragment

    Raises:
        UnsupportedLanguageError: ``language`` resolves to no formatter.

    Example:
        >>> format_code("SELECT @@ROWCOUNT", "sql")
        '<pre class="csharpcode"><span class="kwrd">SELECT</span> <span class="preproc">@@ROWCOUNT</span></pre>'
    """
    resolved = resolve_language(language)
    if not resolved.is_supported:
        raise UnsupportedLanguageError(language)
    formatter = create_formatter(
        resolved, line_numbers=line_numbers, alternate=alternate, config=config
    )
    return formatter.format_code(code)


__all__ = [
    # Main API
    "format_code",
    "format_text",
    "format_text_simple",
    "highlight",
    "create_formatter",
    "get_stylesheet",
    "parse_marker_attributes",
    "resolve_language",
    # Formatters
    "CodeFormatter",
    "MarkupFormatter",
    "SourceFormatter",
    "CodeFormatHighlighter",
    "Highlighter",
    # Data
    "CompiledPattern",
    "HighlightOptions",
    "Language",
    "LanguageDescriptor",
    "SPAN_CLASSES",
    "Token",
    "TokenType",
    "build_master_pattern",
    # Pattern cache
    "DictPatternCache",
    "PatternCache",
    "get_pattern",
    "get_pattern_cache",
    # Configuration
    "HighlightConfig",
    "UnsupportedPolicy",
    "get_highlight_config",
    "highlight_config_context",
    "reset_highlight_config",
    "set_highlight_config",
    # Errors
    "CodeFormatError",
    "LanguageDefinitionError",
    "NestingDepthError",
    "PatternInvariantError",
    "UnsupportedLanguageError",
]
