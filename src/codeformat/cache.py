"""Per-language cache of compiled master patterns.

Pattern compilation is the most expensive step relative to scanning, so
each language's pattern is built once and shared by every formatter
instance for the lifetime of the process.

Thread Safety:
    DictPatternCache guards compilation with a lock. Cached patterns are
    immutable, so concurrent readers need no synchronization.

Example:
    >>> from codeformat.cache import get_pattern
    >>> from codeformat.languages import Language
    >>> get_pattern(Language.CSHARP) is get_pattern(Language.CSHARP)
    True
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Protocol

from codeformat.languages import Language, get_descriptor
from codeformat.pattern import CompiledPattern, build_master_pattern


class PatternCache(Protocol):
    """Protocol for compiled-pattern caches keyed by language."""

    def get_or_build(
        self, language: Language, build: Callable[[], CompiledPattern]
    ) -> CompiledPattern:
        """Return the cached pattern, building and storing it on a miss."""
        ...

    def clear(self) -> None:
        """Drop all cached patterns."""
        ...


class DictPatternCache:
    """In-memory pattern cache using a dict and a lock."""

    __slots__ = ("_data", "_lock")

    def __init__(self) -> None:
        self._data: dict[Language, CompiledPattern] = {}
        self._lock = threading.Lock()

    def get_or_build(
        self, language: Language, build: Callable[[], CompiledPattern]
    ) -> CompiledPattern:
        """Return the cached pattern, building and storing it on a miss."""
        pattern = self._data.get(language)
        if pattern is not None:
            return pattern
        with self._lock:
            pattern = self._data.get(language)
            if pattern is None:
                pattern = build()
                self._data[language] = pattern
            return pattern

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __contains__(self, language: object) -> bool:
        return language in self._data

    def __len__(self) -> int:
        return len(self._data)


_default_cache = DictPatternCache()


def get_pattern_cache() -> DictPatternCache:
    """Get the process-wide pattern cache."""
    return _default_cache


def get_pattern(language: Language) -> CompiledPattern:
    """Get the master pattern of a code language, compiling it on first use.

    Raises:
        KeyError: The language has no descriptor (markup or UNSUPPORTED).
    """
    descriptor = get_descriptor(language)
    return _default_cache.get_or_build(language, lambda: build_master_pattern(descriptor))


__all__ = [
    "DictPatternCache",
    "PatternCache",
    "get_pattern",
    "get_pattern_cache",
]
