"""Markup tokenizer: HTML/XML/ASPX with embedded script and directive code.

Markup cannot use the flat four-way scheme: tag syntax and attribute syntax
are two nested grammars, and a document may embed two other languages. The
master pattern therefore has eight alternatives, in priority order:

    1. script      ``<script ...>`` opening tag plus its body; the tag is
                   re-tokenized as markup, the body goes to the script
                   formatter (JavaScript)
    2. comment     ``<!-- ... -->``, one ``rem`` span per line
    3. directive_tag   ``<%@ ... %>``, ``<%``, ``%>`` (class ``asp``)
    4. directive_code  body between ``<%`` and ``%>``, delegated to the
                   directive formatter (C#)
    5. delimiter   ``<``, ``</``, ``<!``, ``<?``, ``/>``, ``>`` (class ``kwrd``)
    6. tagname     name right after an opening delimiter, when no attribute
                   region follows it (class ``html``)
    7. attributes  tag name plus everything between it and the closing
                   delimiter; the name is emitted as in 6, the region is
                   re-tokenized by a second pattern: quoted values ``kwrd``,
                   names ``attr``
    8. entity      ``&name;`` / ``&#123;`` (class ``attr``)

Anything else (text between tags) passes through. Nesting is bounded in
practice to depth 2 (markup -> script/directive body); the configured
``max_nesting_depth`` guards the rest.

Python's ``re`` only supports fixed-width lookbehind, so an attribute region
cannot look back past a variable-width tag name. Alternative 7 therefore
starts at the name and carries it along, and alternative 6 refuses names
that have a region after them. Attribute matching is only ever attempted
directly after a tag opener.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from codeformat.config import HighlightConfig
from codeformat.errors import NestingDepthError
from codeformat.formatter import CodeFormatter, SourceFormatter
from codeformat.languages import Language
from codeformat.pattern import CompiledPattern, build_alternation
from codeformat.stringbuilder import StringBuilder
from codeformat.tokens import Token, TokenType
from codeformat.utils.logger import get_logger
from codeformat.utils.text import escape_html

logger = get_logger(__name__)

MARKUP_ALTERNATIVES: tuple[tuple[str, TokenType], ...] = (
    ("script", TokenType.EMBEDDED_SCRIPT),
    ("comment", TokenType.COMMENT),
    ("directive_tag", TokenType.DIRECTIVE_TAG),
    ("directive_code", TokenType.EMBEDDED_CODE),
    ("delimiter", TokenType.TAG_DELIMITER),
    ("tagname", TokenType.TAG_NAME),
    ("attributes", TokenType.ATTRIBUTE_REGION),
    ("entity", TokenType.ENTITY),
)


def _after_tag_opener() -> str:
    """Lookbehind for every opener form ``</?!?\\??``, one fixed width each."""
    openers = [
        "<" + slash + bang + question
        for slash in ("", "/")
        for bang in ("", "!")
        for question in ("", "?")
    ]
    return "(?:" + "|".join(f"(?<={re.escape(o)})" for o in openers) + ")"


# Between a tag name and its closing delimiter; never ends on the "%" of "%>"
_ATTRIBUTE_REGION = r"\s[^<>]*?(?=(?<!%)/?>)"
_TAG_NAME = r"[\w.:-]+(?![\w.:-])"
_DELIMITER = r"</?!?\??(?!%)|(?<!%)/?>"

_FRAGMENTS: dict[str, str] = {
    # Body may be empty but never runs past its own closing tag
    "script": (
        r"(?P<script_open><script(?:\s[^>]*)?>)"
        r"(?P<script_body>(?:(?!</script>).)*)(?=</script>)"
    ),
    "comment": r"<!--.*?-->",
    "directive_tag": r"<%@.*?%>|<%|%>",
    "directive_code": r"(?<=<%).+?(?=%>)",
    # Adjacent delimiters merge, but never into the "<" of a script element
    "delimiter": f"(?:{_DELIMITER})(?:(?!<script[\\s>])(?:{_DELIMITER}))*",
    "tagname": _after_tag_opener() + _TAG_NAME + f"(?!{_ATTRIBUTE_REGION})" + r"(?=[^<]*>)",
    "attributes": (
        _after_tag_opener()
        + f"(?P<attribute_tag>{_TAG_NAME})(?P<attribute_region>{_ATTRIBUTE_REGION})"
    ),
    "entity": r"&#?\w+;",
}

_ATTRIBUTE_PATTERN = re.compile(
    r"""(?P<value>=?"[^"]*"|=?'[^']*')|(?P<name>[\w:.-]+)""",
    re.DOTALL,
)


def build_markup_pattern() -> CompiledPattern:
    """Compile the eight-way markup master pattern (case-insensitive, DOTALL)."""
    source = build_alternation((name, _FRAGMENTS[name]) for name, _ in MARKUP_ALTERNATIVES)
    return CompiledPattern(
        regex=re.compile(source, re.IGNORECASE | re.DOTALL),
        alternatives=MARKUP_ALTERNATIVES,
    )


MARKUP_PATTERN = build_markup_pattern()


def tokenize_attributes(region: str, offset: int = 0) -> Iterator[Token]:
    """Split an attribute region into names, quoted values and plain gaps.

    Args:
        region: Text between a tag name and its closing delimiter
        offset: Offset of ``region`` in the enclosing text

    Yields:
        ATTRIBUTE_NAME, ATTRIBUTE_VALUE and PLAIN_TEXT tokens covering
        ``region`` exactly
    """
    pos = 0
    for match in _ATTRIBUTE_PATTERN.finditer(region):
        start, end = match.span()
        if start > pos:
            yield Token(TokenType.PLAIN_TEXT, region[pos:start], offset + pos)
        token_type = (
            TokenType.ATTRIBUTE_VALUE if match.lastgroup == "value" else TokenType.ATTRIBUTE_NAME
        )
        yield Token(token_type, match.group(), offset + start)
        pos = end
    if pos < len(region):
        yield Token(TokenType.PLAIN_TEXT, region[pos:], offset + pos)


class MarkupFormatter(SourceFormatter):
    """Formatter for markup languages (HTML, XML, ASPX-style templates).

    Script bodies and directive bodies are delegated to nested formatters
    through format_sub_code(), so they are never line-decorated on their
    own. A delegate that fails (nesting too deep) degrades to escaped
    plain text; the outer pass always continues, since the region's bounds
    come from the outer match.
    """

    __slots__ = ("_script_formatter", "_directive_formatter")

    def __init__(
        self,
        *,
        line_numbers: bool = False,
        alternate: bool = False,
        config: HighlightConfig | None = None,
        script_language: Language = Language.JAVASCRIPT,
        directive_language: Language = Language.CSHARP,
    ) -> None:
        """Initialize markup formatter.

        Args:
            line_numbers: Number output lines in format_code()
            alternate: Stripe output lines in format_code()
            config: Explicit configuration (defaults to the active context's)
            script_language: Language of ``<script>`` bodies
            directive_language: Language of ``<% %>`` bodies
        """
        super().__init__(
            MARKUP_PATTERN, line_numbers=line_numbers, alternate=alternate, config=config
        )
        self._script_formatter = CodeFormatter.for_language(script_language, config=config)
        self._directive_formatter = CodeFormatter.for_language(directive_language, config=config)

    # =========================================================================
    # Scanning
    # =========================================================================

    def _classify(self, match: re.Match[str]) -> Iterator[Token]:
        name, token_type = self._alternative(match)
        if name == "script":
            # Opening tag is ordinary markup; only the body is delegated
            base = match.start()
            for token in self._scan(match.group("script_open")):
                yield Token(token.type, token.value, token.offset + base)
            if match.group("script_body"):
                yield Token(token_type, match.group("script_body"), match.start("script_body"))
        elif name == "attributes":
            yield Token(TokenType.TAG_NAME, match.group("attribute_tag"), match.start())
            yield Token(
                token_type, match.group("attribute_region"), match.start("attribute_region")
            )
        else:
            yield Token(token_type, match.group(), match.start())

    # =========================================================================
    # Rendering
    # =========================================================================

    def _render_token(
        self, token: Token, sb: StringBuilder, depth: int, config: HighlightConfig
    ) -> None:
        if token.type is TokenType.EMBEDDED_SCRIPT:
            self._delegate(self._script_formatter, token.value, sb, depth, config)
        elif token.type is TokenType.EMBEDDED_CODE:
            self._delegate(self._directive_formatter, token.value, sb, depth, config)
        elif token.type is TokenType.ATTRIBUTE_REGION:
            for attribute in tokenize_attributes(token.value, token.offset):
                super()._render_token(attribute, sb, depth, config)
        else:
            super()._render_token(token, sb, depth, config)

    def _delegate(
        self,
        formatter: SourceFormatter,
        text: str,
        sb: StringBuilder,
        depth: int,
        config: HighlightConfig,
    ) -> None:
        try:
            sb.append(formatter.format_sub_code(text, depth=depth + 1))
        except NestingDepthError:
            logger.debug("Embedded region left unhighlighted at depth %d", depth + 1, exc_info=True)
            sb.append(escape_html(text) if config.escape_html else text)


__all__ = [
    "MARKUP_ALTERNATIVES",
    "MARKUP_PATTERN",
    "MarkupFormatter",
    "build_markup_pattern",
    "tokenize_attributes",
]
