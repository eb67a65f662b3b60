"""Line numbering and striping of rendered HTML."""

from codeformat.lines import decorate_lines, split_lines
from codeformat.stringbuilder import StringBuilder


class TestSplitLines:
    def test_empty(self) -> None:
        assert split_lines("") == []

    def test_trailing_newline_adds_no_line(self) -> None:
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_inner_empty_lines_kept(self) -> None:
        assert split_lines("a\n\nb") == ["a", "", "b"]

    def test_single_newline(self) -> None:
        assert split_lines("\n") == [""]


class TestDecorateLines:
    def test_line_numbers_only(self) -> None:
        assert decorate_lines("a\nb", line_numbers=True, alternate=False, css_class="c") == (
            '<div class="c">\n'
            '<pre><span class="lnum">   1:  </span>a</pre>\n'
            '<pre><span class="lnum">   2:  </span>b</pre>\n'
            "</div>"
        )

    def test_alternate_only(self) -> None:
        assert decorate_lines("a\nb\nc", line_numbers=False, alternate=True, css_class="c") == (
            '<div class="c">\n'
            '<pre class="alt">a</pre>\n'
            "<pre>b</pre>\n"
            '<pre class="alt">c</pre>\n'
            "</div>"
        )

    def test_empty_line_placeholder(self) -> None:
        html = decorate_lines("a\n\nb", line_numbers=False, alternate=False, css_class="c")
        assert "<pre>&nbsp;</pre>" in html

    def test_number_width(self) -> None:
        html = decorate_lines("x\n" * 12, line_numbers=True, alternate=False, css_class="c")
        assert '<span class="lnum">  12:  </span>x' in html
        assert html.count("<pre>") == 12

    def test_open_span_reopened_on_next_line(self) -> None:
        html = '<span class="str">a\nb</span>'
        assert decorate_lines(html, line_numbers=False, alternate=True, css_class="c") == (
            '<div class="c">\n'
            '<pre class="alt"><span class="str">a</span></pre>\n'
            '<pre><span class="str">b</span></pre>\n'
            "</div>"
        )

    def test_balanced_lines_untouched(self) -> None:
        html = '<span class="rem">// a</span>\n<span class="kwrd">int</span> x;'
        decorated = decorate_lines(html, line_numbers=False, alternate=False, css_class="c")
        assert '<pre><span class="rem">// a</span></pre>' in decorated
        assert '<pre><span class="kwrd">int</span> x;</pre>' in decorated

    def test_empty_body(self) -> None:
        assert decorate_lines("", line_numbers=True, alternate=True, css_class="c") == (
            '<div class="c">\n</div>'
        )


class TestStringBuilder:
    def test_append_skips_empty(self) -> None:
        sb = StringBuilder()
        sb.append("").append("a").append("")
        assert sb.build() == "a"

    def test_chaining(self) -> None:
        assert StringBuilder().append("a").append_line("b").append("c").build() == "ab\nc"

    def test_empty_span_kept(self) -> None:
        assert StringBuilder().append_span("rem", "").build() == '<span class="rem"></span>'

    def test_line_spans(self) -> None:
        assert StringBuilder().append_line_spans("rem", "a\nb").build() == (
            '<span class="rem">a</span>\n<span class="rem">b</span>'
        )

    def test_clear(self) -> None:
        sb = StringBuilder().append("x")
        sb.clear()
        assert sb.build() == ""
