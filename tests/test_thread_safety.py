"""Thread safety of shared formatters, the pattern cache and config.

Formatters keep per-call state on the stack and share immutable compiled
patterns, so one instance may serve many threads. These tests use real
threads to catch interference.
"""

from concurrent.futures import ThreadPoolExecutor

from codeformat import (
    DictPatternCache,
    HighlightConfig,
    Language,
    create_formatter,
    format_text,
    highlight_config_context,
)
from codeformat.languages import get_descriptor
from codeformat.pattern import build_master_pattern

SAMPLES = {
    Language.CSHARP: "public class Foo { int x; } // done",
    Language.VISUAL_BASIC: "Dim x As Integer ' note",
    Language.JAVASCRIPT: 'var s = "x"; /* c */',
    Language.HTML: '<a href="x">y</a><script>var z;</script>',
    Language.XML: '<?xml version="1.0"?><root/>',
    Language.MSH: "if ($a -eq 1) { return }",
    Language.TSQL: "SELECT * FROM t WHERE a = 'b'",
}


class TestSharedFormatters:
    def test_concurrent_format_code(self) -> None:
        formatters = {language: create_formatter(language) for language in SAMPLES}
        expected = {
            language: formatters[language].format_code(code) for language, code in SAMPLES.items()
        }

        def work(index: int) -> tuple[Language, str]:
            language = list(SAMPLES)[index % len(SAMPLES)]
            return language, formatters[language].format_code(SAMPLES[language])

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(work, range(200)))

        for language, html in results:
            assert html == expected[language]


class TestCacheUnderContention:
    def test_single_build_per_language(self) -> None:
        cache = DictPatternCache()
        descriptor = get_descriptor(Language.CSHARP)

        def work(_: int) -> int:
            return id(cache.get_or_build(Language.CSHARP, lambda: build_master_pattern(descriptor)))

        with ThreadPoolExecutor(max_workers=8) as executor:
            ids = set(executor.map(work, range(100)))

        assert len(ids) == 1


class TestConfigIsolation:
    def test_per_thread_css_class(self) -> None:
        def work(index: int) -> str:
            with highlight_config_context(HighlightConfig(css_class=f"c{index}")):
                return format_text('[code lang="js"]var x;[/code]')

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(work, range(50)))

        for index, html in enumerate(results):
            assert html.startswith(f'<pre class="c{index}">')
