"""Master pattern construction.

A code language is scanned with one composite pattern of exactly four
capturing alternatives, in fixed priority order:

    (?P<comment>...)|(?P<string>...)|(?P<preproc>...)|(?P<keyword>...)

The order is the only disambiguation mechanism. At a given offset the
regex engine tries alternatives left to right, so a comment wins over
string-like text inside it, a string wins over keywords inside it, and so
on. There is no separate lexer state.

Keywords are wrapped in word-boundary assertions that also accept
punctuation-led words (``#if``, ``-eq``, ``@@ROWCOUNT``), which plain
``\\b`` would not. Preprocessor words are whitespace-delimited instead.

Thread Safety:
    CompiledPattern is frozen and compiled regexes are safe to share.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from codeformat.languages.descriptor import LanguageDescriptor
from codeformat.tokens import TokenType
from codeformat.utils.logger import get_logger

logger = get_logger(__name__)

# Preceded by start-of-text or a non-word char, followed by a non-word char or end
KEYWORD_BOUNDARY = (r"(?<!\w)", r"(?!\w)")
# Preceded and followed by whitespace or the ends of the text
PREPROCESSOR_BOUNDARY = (r"(?<!\S)", r"(?!\S)")

# Never matches; keeps the preprocessor group in place when there are no words
NEVER_MATCH = r"(?!)"

CODE_ALTERNATIVES: tuple[tuple[str, TokenType], ...] = (
    ("comment", TokenType.COMMENT),
    ("string", TokenType.STRING),
    ("preproc", TokenType.PREPROCESSOR),
    ("keyword", TokenType.KEYWORD),
)


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """A master pattern plus the classification of each alternative.

    Attributes:
        regex: The compiled composite pattern
        alternatives: (group name, token type) pairs in priority order

    Invariant:
        Any match of ``regex`` has exactly one alternative group set.
    """

    regex: re.Pattern[str]
    alternatives: tuple[tuple[str, TokenType], ...]

    @property
    def group_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.alternatives)


def build_word_pattern(words: Iterable[str], boundary: tuple[str, str]) -> str:
    """Join words into one alternation, each wrapped in boundary assertions.

    Words are sorted longest first (then alphabetically) so the output is
    deterministic for a given set.

    Args:
        words: Keyword or preprocessor words, already validated
        boundary: (before, after) zero-width assertions

    Returns:
        Pattern text, or "" when there are no words
    """
    before, after = boundary
    ordered = sorted(set(words), key=lambda w: (-len(w), w))
    return "|".join(f"{before}{word}{after}" for word in ordered)


def build_keyword_pattern(words: Iterable[str]) -> str:
    """Keyword alternation with word-boundary semantics."""
    return build_word_pattern(words, KEYWORD_BOUNDARY)


def build_preprocessor_pattern(words: Iterable[str]) -> str:
    """Preprocessor alternation with whitespace boundaries.

    An empty word list yields NEVER_MATCH rather than an empty alternative,
    which would match everywhere.
    """
    return build_word_pattern(words, PREPROCESSOR_BOUNDARY) or NEVER_MATCH


def build_alternation(parts: Iterable[tuple[str, str]]) -> str:
    """Concatenate (group name, fragment) pairs into named alternatives."""
    return "|".join(f"(?P<{name}>{fragment})" for name, fragment in parts)


def build_master_pattern(descriptor: LanguageDescriptor) -> CompiledPattern:
    """Compile a descriptor into its four-way master pattern.

    Compiled with DOTALL; case-insensitive descriptors add IGNORECASE.
    """
    fragments = {
        "comment": descriptor.comment_pattern,
        "string": descriptor.string_pattern,
        "preproc": build_preprocessor_pattern(descriptor.preprocessors),
        "keyword": build_keyword_pattern(descriptor.keywords),
    }
    source = build_alternation((name, fragments[name]) for name, _ in CODE_ALTERNATIVES)

    flags = re.DOTALL
    if not descriptor.case_sensitive:
        flags |= re.IGNORECASE

    logger.debug("Compiling master pattern for %s (%d chars)", descriptor.name, len(source))
    return CompiledPattern(regex=re.compile(source, flags), alternatives=CODE_ALTERNATIVES)


__all__ = [
    "CODE_ALTERNATIVES",
    "KEYWORD_BOUNDARY",
    "NEVER_MATCH",
    "PREPROCESSOR_BOUNDARY",
    "CompiledPattern",
    "build_alternation",
    "build_keyword_pattern",
    "build_master_pattern",
    "build_preprocessor_pattern",
    "build_word_pattern",
]
