"""Block extraction driver: highlight ``[code]`` regions inside rich text.

Rich text (typically HTML from an editor) may contain any number of
delimited regions::

    [code lang="c#" linenumbers="on" altlinenumbers="on" title="Example"]
    ...body...
    [/code]

Each region's marker attributes become HighlightOptions, the markers are
stripped and the body is replaced in place by the formatter's output.
Malformed or unterminated markers are left untouched; nothing here raises
for bad input.

Unsupported languages follow ``HighlightConfig.unsupported_policy``. The
default, EMPTY, replaces the region with nothing.

Example:
    >>> from codeformat.blocks import format_text
    >>> format_text('[code lang="js"]var x;[/code]')
    '<pre class="csharpcode"><span class="kwrd">var</span> x;</pre>'
"""

from __future__ import annotations

import html
import re

from codeformat.config import HighlightConfig, UnsupportedPolicy, get_highlight_config
from codeformat.factory import create_formatter
from codeformat.languages import Language
from codeformat.options import HighlightOptions
from codeformat.stringbuilder import StringBuilder
from codeformat.utils.logger import get_logger
from codeformat.utils.text import decode_editor_markup, escape_html

logger = get_logger(__name__)

_CODE_BLOCK = re.compile(
    r"(?P<begin>\[code(?P<attributes>\s[^\]]*)?\])(?P<code>.*?)(?P<end>\[/code\])",
    re.IGNORECASE | re.DOTALL,
)
_SIMPLE_CODE_BLOCK = re.compile(r"\[code\](?P<inner>.*?)\[/code\]", re.IGNORECASE | re.DOTALL)
_MARKER_ATTRIBUTE = re.compile(
    r"""(?P<key>\w+)\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<bare>[^\s"']+))"""
)

# Language of [code] regions without attributes
SIMPLE_LANGUAGE = "c#"


def parse_marker_attributes(text: str | None) -> dict[str, str]:
    """Parse ``key="value"`` pairs from a begin marker.

    Keys are lowercased. Values may be double-quoted, single-quoted or bare;
    entity-encoded quotes (``&quot;``) as written by editors are accepted.
    Later duplicates win.

    Example:
        >>> parse_marker_attributes(' lang=&quot;c#&quot; LineNumbers=on')
        {'lang': 'c#', 'linenumbers': 'on'}
    """
    if not text:
        return {}
    attributes: dict[str, str] = {}
    for match in _MARKER_ATTRIBUTE.finditer(html.unescape(text)):
        value = match.group("dq")
        if value is None:
            value = match.group("sq")
        if value is None:
            value = match.group("bare")
        attributes[match.group("key").lower()] = value
    return attributes


def _unsupported(options: HighlightOptions, config: HighlightConfig, original: str) -> str:
    logger.debug(
        "No formatter for language %r (policy: %s)",
        options.language,
        config.unsupported_policy.value,
    )
    match config.unsupported_policy:
        case UnsupportedPolicy.EMPTY:
            return ""
        case UnsupportedPolicy.PASSTHROUGH:
            return original
        case UnsupportedPolicy.PLAIN:
            sb = StringBuilder()
            _append_title(sb, options, config)
            body = escape_html(options.code) if config.escape_html else options.code
            sb.append(f'<pre class="{config.css_class}">').append(body).append("</pre>")
            return sb.build()


def _append_title(sb: StringBuilder, options: HighlightOptions, config: HighlightConfig) -> None:
    if options.title:
        sb.append(f'<div class="{config.css_class}-title">')
        sb.append(escape_html(options.title))
        sb.append("</div>")


def _highlight(options: HighlightOptions, config: HighlightConfig, original: str) -> str:
    language = options.resolved_language
    if language is Language.UNSUPPORTED:
        return _unsupported(options, config, original)

    formatter = create_formatter(
        language,
        line_numbers=options.display_line_numbers,
        alternate=options.alternate_line_numbers,
        config=config,
    )
    sb = StringBuilder()
    _append_title(sb, options, config)
    sb.append(formatter.format_code(options.code))
    return sb.build()


def highlight(options: HighlightOptions, *, config: HighlightConfig | None = None) -> str:
    """Highlight one request.

    Args:
        options: Language, code and presentation flags
        config: Explicit configuration (defaults to the active context's)

    Returns:
        Title (if any) followed by the formatted block. For an unsupported
        language, whatever the unsupported policy dictates; PASSTHROUGH
        returns ``options.code`` unchanged.
    """
    if config is None:
        config = get_highlight_config()
    return _highlight(options, config, options.code)


def format_text(text: str, *, config: HighlightConfig | None = None) -> str:
    """Highlight every ``[code ...]...[/code]`` region in rich text.

    Args:
        text: Rich text, possibly containing code regions
        config: Explicit configuration (defaults to the active context's)

    Returns:
        ``text`` with each well-formed region replaced by its highlighted
        HTML. Empty input yields ``""``. A bare ``[code]`` marker is C#, as
        in format_text_simple(); a marker with attributes but no ``lang``
        follows the unsupported-language policy.
    """
    if not text:
        return ""
    if "[/code]" not in text.lower():
        return text
    if config is None:
        config = get_highlight_config()

    def replace(match: re.Match[str]) -> str:
        body = match.group("code")
        if config.decode_markup:
            body = decode_editor_markup(body)
        if match.group("attributes") is None:
            options = HighlightOptions(language=SIMPLE_LANGUAGE, code=body)
        else:
            attributes = parse_marker_attributes(match.group("attributes"))
            options = HighlightOptions.from_marker_attributes(attributes, body)
        return _highlight(options, config, match.group())

    return _CODE_BLOCK.sub(replace, text)


def format_text_simple(text: str, *, config: HighlightConfig | None = None) -> str:
    """Highlight attribute-less ``[code]...[/code]`` regions as C#.

    No attribute parsing: every region is C#, without line numbers or
    title. For callers that already guarantee the language.
    """
    if not text:
        return ""
    if "[/code]" not in text.lower():
        return text
    if config is None:
        config = get_highlight_config()

    def replace(match: re.Match[str]) -> str:
        body = match.group("inner")
        if config.decode_markup:
            body = decode_editor_markup(body)
        options = HighlightOptions(language=SIMPLE_LANGUAGE, code=body)
        return _highlight(options, config, match.group())

    return _SIMPLE_CODE_BLOCK.sub(replace, text)


__all__ = [
    "SIMPLE_LANGUAGE",
    "format_text",
    "format_text_simple",
    "highlight",
    "parse_marker_attributes",
]
