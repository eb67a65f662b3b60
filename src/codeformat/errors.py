"""Exception classes for codeformat.

Provides standardized exceptions for error handling throughout codeformat.
Driver-level problems (malformed block markers, unknown languages) never
raise; these exceptions signal defects or explicit API misuse.
"""

from __future__ import annotations


class CodeFormatError(Exception):
    """Base exception for all codeformat errors.

    Subclass this for specific error categories.
    """

    pass


class LanguageDefinitionError(CodeFormatError):
    """A language descriptor cannot produce a well-formed pattern.

    Raised at construction time, never while formatting.
    """

    def __init__(self, language: str, message: str) -> None:
        """Initialize descriptor error.

        Args:
            language: Name of the offending descriptor
            message: Description of the defect
        """
        self.language = language
        super().__init__(f"Language '{language}': {message}")


class PatternInvariantError(CodeFormatError):
    """A master-pattern match did not resolve to exactly one alternative.

    Indicates a builder or pattern defect, not a data problem. Never caught
    by the formatters.
    """

    def __init__(self, message: str, offset: int | None = None) -> None:
        """Initialize invariant error.

        Args:
            message: Error description
            offset: Offset of the offending match in the scanned text
        """
        self.offset = offset
        location = f" at offset {offset}" if offset is not None else ""
        super().__init__(f"{message}{location}")


class NestingDepthError(CodeFormatError):
    """Embedded sub-formatting went deeper than the configured maximum."""

    def __init__(self, depth: int, limit: int) -> None:
        self.depth = depth
        self.limit = limit
        super().__init__(f"Nesting depth {depth} exceeds limit {limit}")


class UnsupportedLanguageError(CodeFormatError):
    """No formatter exists for the requested language tag."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Unsupported language: {tag!r}")
