"""Supported languages and their descriptors.

Language is a closed enum over every tag the factory can format, plus an
explicit UNSUPPORTED member for everything else. Callers must handle
UNSUPPORTED themselves: there is no silent "no formatter" result.

Example:
    >>> from codeformat.languages import Language, resolve_language
    >>> resolve_language("C#")
    <Language.CSHARP: 'c#'>
    >>> resolve_language("cobol")
    <Language.UNSUPPORTED: ''>
"""

from __future__ import annotations

from enum import Enum

from codeformat.languages.builtins import CSHARP, JAVASCRIPT, MSH, TSQL, VISUAL_BASIC
from codeformat.languages.descriptor import LanguageDescriptor


class Language(Enum):
    """Language tags accepted by the factory. Values are canonical tags."""

    CSHARP = "c#"
    VISUAL_BASIC = "vb"
    JAVASCRIPT = "js"
    HTML = "html"
    XML = "xml"
    MSH = "msh"
    TSQL = "tsql"
    UNSUPPORTED = ""

    @property
    def is_markup(self) -> bool:
        """True for languages formatted by the markup tokenizer."""
        return self in _MARKUP

    @property
    def is_supported(self) -> bool:
        return self is not Language.UNSUPPORTED


_MARKUP = frozenset({Language.HTML, Language.XML})

_ALIASES: dict[str, Language] = {
    "cs": Language.CSHARP,
    "csharp": Language.CSHARP,
    "vbnet": Language.VISUAL_BASIC,
    "javascript": Language.JAVASCRIPT,
    "htm": Language.HTML,
    "aspx": Language.HTML,
    "powershell": Language.MSH,
    "ps1": Language.MSH,
    "sql": Language.TSQL,
}

DESCRIPTORS: dict[Language, LanguageDescriptor] = {
    Language.CSHARP: CSHARP,
    Language.VISUAL_BASIC: VISUAL_BASIC,
    Language.JAVASCRIPT: JAVASCRIPT,
    Language.MSH: MSH,
    Language.TSQL: TSQL,
}


def resolve_language(tag: str | None) -> Language:
    """Map a language tag (or alias) to a Language.

    Matching ignores case and surrounding whitespace. Anything unknown,
    including an empty or missing tag, resolves to Language.UNSUPPORTED.
    """
    if not tag:
        return Language.UNSUPPORTED
    key = tag.strip().lower()
    if not key:
        return Language.UNSUPPORTED
    try:
        return Language(key)
    except ValueError:
        return _ALIASES.get(key, Language.UNSUPPORTED)


def get_descriptor(language: Language) -> LanguageDescriptor:
    """Get the descriptor of a code language.

    Raises:
        KeyError: For markup languages and UNSUPPORTED, which have none.
    """
    return DESCRIPTORS[language]


__all__ = [
    "DESCRIPTORS",
    "Language",
    "LanguageDescriptor",
    "get_descriptor",
    "resolve_language",
]
