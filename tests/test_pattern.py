"""Master pattern construction."""

import re

from codeformat.languages import LanguageDescriptor
from codeformat.pattern import (
    CODE_ALTERNATIVES,
    NEVER_MATCH,
    build_alternation,
    build_keyword_pattern,
    build_master_pattern,
    build_preprocessor_pattern,
    build_word_pattern,
)
from codeformat.tokens import TokenType


def toy(**overrides: object) -> LanguageDescriptor:
    fields: dict[str, object] = {
        "name": "Toy",
        "keywords": "if in int",
        "string_pattern": r'"[^"]*"',
        "comment_pattern": r"//[^\n]*",
    }
    fields.update(overrides)
    return LanguageDescriptor(**fields)  # type: ignore[arg-type]


class TestWordPatterns:
    def test_longest_first_then_alphabetical(self) -> None:
        assert build_word_pattern({"in", "int", "if"}, ("<", ">")) == "<int>|<if>|<in>"

    def test_deterministic(self) -> None:
        words = ["b", "a", "ccc", "dd"]
        assert build_keyword_pattern(words) == build_keyword_pattern(reversed(words))

    def test_empty_word_list(self) -> None:
        assert build_keyword_pattern([]) == ""
        assert build_preprocessor_pattern([]) == NEVER_MATCH

    def test_never_match_matches_nothing(self) -> None:
        assert re.search(NEVER_MATCH, "anything at all") is None

    def test_keyword_boundaries(self) -> None:
        regex = re.compile(build_keyword_pattern(["if"]))
        assert regex.search("if") is not None
        assert regex.search("(if)") is not None
        assert regex.search("iff") is None
        assert regex.search("elif") is None
        assert regex.search("_if") is None

    def test_keyword_boundary_accepts_punctuation_led_words(self) -> None:
        regex = re.compile(build_keyword_pattern(["-eq"]))
        assert regex.search("$a -eq $b").group() == "-eq"
        assert regex.search("$a -equal $b") is None

    def test_preprocessor_needs_whitespace(self) -> None:
        regex = re.compile(build_preprocessor_pattern(["#if"]))
        assert regex.search("#if DEBUG").group() == "#if"
        assert regex.search("  #if") is not None
        assert regex.search("x#if") is None
        assert regex.search("#if(") is None

    def test_alternation(self) -> None:
        assert build_alternation([("a", "x"), ("b", "y|z")]) == "(?P<a>x)|(?P<b>y|z)"


class TestBuildMasterPattern:
    def test_four_alternatives_in_order(self) -> None:
        pattern = build_master_pattern(toy())
        assert pattern.group_names == ("comment", "string", "preproc", "keyword")
        assert pattern.alternatives == CODE_ALTERNATIVES
        assert list(pattern.regex.groupindex) == ["comment", "string", "preproc", "keyword"]

    def test_alternative_types(self) -> None:
        assert dict(CODE_ALTERNATIVES) == {
            "comment": TokenType.COMMENT,
            "string": TokenType.STRING,
            "preproc": TokenType.PREPROCESSOR,
            "keyword": TokenType.KEYWORD,
        }

    def test_preprocessor_group_kept_when_empty(self) -> None:
        pattern = build_master_pattern(toy())
        assert "preproc" in pattern.regex.groupindex
        assert NEVER_MATCH in pattern.regex.pattern

    def test_comment_beats_string(self) -> None:
        match = build_master_pattern(toy()).regex.search('// "quoted"')
        assert match.lastgroup == "comment"

    def test_string_beats_keyword(self) -> None:
        match = build_master_pattern(toy()).regex.search('"if"')
        assert match.lastgroup == "string"

    def test_case_sensitive(self) -> None:
        regex = build_master_pattern(toy()).regex
        assert regex.search("IF") is None
        assert not regex.flags & re.IGNORECASE

    def test_case_insensitive(self) -> None:
        regex = build_master_pattern(toy(case_sensitive=False)).regex
        assert regex.search("IF").group() == "IF"

    def test_dotall(self) -> None:
        descriptor = toy(comment_pattern=r"/\*.*?\*/")
        match = build_master_pattern(descriptor).regex.search("/* a\nb */")
        assert match.group() == "/* a\nb */"
