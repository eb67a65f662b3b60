"""Language descriptors: the static data that parametrizes a code formatter.

A descriptor names a language's keywords and preprocessor words plus the
pattern fragments matching its string literals and comments. It carries no
behaviour; pattern.build_master_pattern() turns it into a CompiledPattern.

Word forms:
    Words are inserted into the master pattern as-is, so they are limited to
    forms that are valid pattern text and unambiguous under the keyword
    boundary assertions:

    - ``word`` plain identifier keywords
    - ``-word`` shell operators (``-eq``)
    - ``#word`` preprocessor directives
    - ``@@word`` SQL server globals
    - ``#\\s*word`` compound directives allowing inner whitespace
    - ``@\\w*`` decorator-style sigils

Thread Safety:
    Descriptors are frozen and hold frozensets. Safe to share.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from codeformat.errors import LanguageDefinitionError

_WORD_FORM = re.compile(r"\w+|-\w+|#\w+|@@\w+|#(?:\\(?:s|w)(?:\*|\+)?\w+)+|@\\w\*+")


def _split_words(words: str | frozenset[str] | set[str] | tuple[str, ...]) -> frozenset[str]:
    if isinstance(words, str):
        return frozenset(words.split())
    return frozenset(words)


def _check_fragment(language: str, label: str, fragment: str) -> None:
    if not fragment:
        raise LanguageDefinitionError(language, f"{label} pattern is empty")
    try:
        compiled = re.compile(fragment)
    except re.error as e:
        raise LanguageDefinitionError(language, f"{label} pattern does not compile: {e}") from e
    if compiled.groupindex:
        names = ", ".join(sorted(compiled.groupindex))
        raise LanguageDefinitionError(
            language, f"{label} pattern defines named groups ({names})"
        )
    if compiled.match(""):
        raise LanguageDefinitionError(language, f"{label} pattern matches the empty string")


@dataclass(frozen=True, slots=True)
class LanguageDescriptor:
    """Immutable per-language configuration.

    Attributes:
        name: Human-readable language name (used in error messages)
        keywords: Words classified as keywords
        string_pattern: Pattern fragment matching string/character literals
        comment_pattern: Pattern fragment matching comments
        preprocessors: Words classified as preprocessor directives (may be empty)
        case_sensitive: False compiles the master pattern with case folding

    Word lists may be given as a space-separated string or any set-like
    collection; they are stored as frozensets.

    Raises:
        LanguageDefinitionError: A word is not one of the supported forms,
            or a fragment is empty, does not compile, defines named groups
            or matches the empty string.
    """

    name: str
    keywords: frozenset[str]
    string_pattern: str
    comment_pattern: str
    preprocessors: frozenset[str] = field(default_factory=frozenset)
    case_sensitive: bool = True

    def __post_init__(self) -> None:
        # Frozen: normalize through object.__setattr__
        object.__setattr__(self, "keywords", _split_words(self.keywords))
        object.__setattr__(self, "preprocessors", _split_words(self.preprocessors))

        if not self.keywords:
            raise LanguageDefinitionError(self.name, "keyword list is empty")
        for word in self.keywords | self.preprocessors:
            if not _WORD_FORM.fullmatch(word):
                raise LanguageDefinitionError(self.name, f"unsupported word form {word!r}")

        _check_fragment(self.name, "string", self.string_pattern)
        _check_fragment(self.name, "comment", self.comment_pattern)

    @property
    def has_preprocessors(self) -> bool:
        """True if any preprocessor words are defined."""
        return bool(self.preprocessors)
