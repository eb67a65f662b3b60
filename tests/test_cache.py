"""Compiled pattern cache."""

import pytest

from codeformat import DictPatternCache, Language, get_pattern, get_pattern_cache
from codeformat.cache import PatternCache
from codeformat.languages import get_descriptor
from codeformat.pattern import CompiledPattern, build_master_pattern


class TestDictPatternCache:
    def test_builds_once(self) -> None:
        cache = DictPatternCache()
        calls: list[int] = []

        def build() -> CompiledPattern:
            calls.append(1)
            return build_master_pattern(get_descriptor(Language.CSHARP))

        first = cache.get_or_build(Language.CSHARP, build)
        second = cache.get_or_build(Language.CSHARP, build)
        assert first is second
        assert len(calls) == 1
        assert Language.CSHARP in cache
        assert len(cache) == 1

    def test_clear(self) -> None:
        cache = DictPatternCache()
        descriptor = get_descriptor(Language.TSQL)
        cache.get_or_build(Language.TSQL, lambda: build_master_pattern(descriptor))
        cache.clear()
        assert len(cache) == 0
        assert Language.TSQL not in cache

    def test_satisfies_protocol(self) -> None:
        cache: PatternCache = DictPatternCache()
        cache.clear()


class TestGetPattern:
    def test_shared_instance(self) -> None:
        assert get_pattern(Language.VISUAL_BASIC) is get_pattern(Language.VISUAL_BASIC)
        assert Language.VISUAL_BASIC in get_pattern_cache()

    def test_rebuilt_after_clear(self) -> None:
        before = get_pattern(Language.MSH)
        get_pattern_cache().clear()
        after = get_pattern(Language.MSH)
        assert after is not before
        assert after.regex.pattern == before.regex.pattern

    @pytest.mark.parametrize("language", [Language.HTML, Language.UNSUPPORTED])
    def test_no_descriptor(self, language: Language) -> None:
        with pytest.raises(KeyError):
            get_pattern(language)
