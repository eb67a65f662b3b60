"""Tests for codeformat utility modules."""


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        from codeformat.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "codeformat.mymodule"

    def test_logger_with_codeformat_prefix(self) -> None:
        from codeformat.utils.logger import get_logger

        logger = get_logger("codeformat.blocks")
        assert logger.name == "codeformat.blocks"

    def test_logger_name_starting_with_codeformat_not_submodule(self) -> None:
        from codeformat.utils.logger import get_logger

        logger = get_logger("codeformat_other")
        assert logger.name == "codeformat.codeformat_other"

    def test_logger_exact_codeformat_name(self) -> None:
        from codeformat.utils.logger import get_logger

        logger = get_logger("codeformat")
        assert logger.name == "codeformat"


class TestEscapeHtml:
    """Tests for escape_html function."""

    def test_basic_escape(self) -> None:
        from codeformat.utils.text import escape_html

        assert escape_html("<script>") == "&lt;script&gt;"

    def test_quotes_untouched(self) -> None:
        from codeformat.utils.text import escape_html

        assert escape_html("a=\"b\" 'c'") == "a=\"b\" 'c'"

    def test_escape_ampersand(self) -> None:
        from codeformat.utils.text import escape_html

        assert escape_html("a & b") == "a &amp; b"
        assert escape_html("&amp;") == "&amp;amp;"

    def test_escape_empty(self) -> None:
        from codeformat.utils.text import escape_html

        assert escape_html("") == ""


class TestNormalizeNewlines:
    def test_crlf_and_cr(self) -> None:
        from codeformat.utils.text import normalize_newlines

        assert normalize_newlines("a\r\nb\rc\n") == "a\nb\nc\n"

    def test_no_carriage_return_same_object(self) -> None:
        from codeformat.utils.text import normalize_newlines

        text = "a\nb"
        assert normalize_newlines(text) is text


class TestDecodeEditorMarkup:
    def test_line_breaks(self) -> None:
        from codeformat.utils.text import decode_editor_markup

        assert decode_editor_markup("a<br>b<BR/>c<br />d") == "a\nb\nc\nd"

    def test_tags_dropped_entities_decoded(self) -> None:
        from codeformat.utils.text import decode_editor_markup

        assert decode_editor_markup("<p>if (a &lt; b &amp;&amp; c)</p>") == "if (a < b && c)"

    def test_double_encoded_decoded_once(self) -> None:
        from codeformat.utils.text import decode_editor_markup

        assert decode_editor_markup("&amp;lt;") == "&lt;"

    def test_empty(self) -> None:
        from codeformat.utils.text import decode_editor_markup

        assert decode_editor_markup("") == ""
