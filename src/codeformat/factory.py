"""Formatter factory: exhaustive dispatch from Language to formatter.

Example:
    >>> from codeformat.factory import create_formatter
    >>> from codeformat.languages import Language
    >>> formatter = create_formatter(Language.JAVASCRIPT, line_numbers=True)
"""

from __future__ import annotations

from typing import assert_never

from codeformat.config import HighlightConfig
from codeformat.errors import UnsupportedLanguageError
from codeformat.formatter import CodeFormatter, SourceFormatter
from codeformat.languages import Language
from codeformat.markup import MarkupFormatter


def create_formatter(
    language: Language,
    *,
    line_numbers: bool = False,
    alternate: bool = False,
    config: HighlightConfig | None = None,
) -> SourceFormatter:
    """Create a formatter for a language.

    Code languages share their cached master pattern; construction only
    binds the presentation flags, so creating one per request is cheap.

    Args:
        language: Target language
        line_numbers: Number output lines
        alternate: Zebra-stripe output lines
        config: Explicit configuration (defaults to the active context's)

    Returns:
        A formatter ready for format_code()

    Raises:
        UnsupportedLanguageError: ``language`` is Language.UNSUPPORTED.
    """
    match language:
        case Language.HTML | Language.XML:
            return MarkupFormatter(line_numbers=line_numbers, alternate=alternate, config=config)
        case (
            Language.CSHARP
            | Language.VISUAL_BASIC
            | Language.JAVASCRIPT
            | Language.MSH
            | Language.TSQL
        ):
            return CodeFormatter.for_language(
                language, line_numbers=line_numbers, alternate=alternate, config=config
            )
        case Language.UNSUPPORTED:
            raise UnsupportedLanguageError(language.value)
        case _:
            assert_never(language)


__all__ = ["create_formatter"]
