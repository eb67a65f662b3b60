"""Language enum, alias resolution and the built-in descriptors."""

import pytest

from codeformat.languages import DESCRIPTORS, Language, get_descriptor, resolve_language
from codeformat.pattern import build_master_pattern


class TestResolveLanguage:
    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("c#", Language.CSHARP),
            ("C#", Language.CSHARP),
            ("cs", Language.CSHARP),
            ("CSharp", Language.CSHARP),
            ("vb", Language.VISUAL_BASIC),
            ("vbnet", Language.VISUAL_BASIC),
            ("js", Language.JAVASCRIPT),
            ("javascript", Language.JAVASCRIPT),
            ("html", Language.HTML),
            ("htm", Language.HTML),
            ("aspx", Language.HTML),
            ("xml", Language.XML),
            ("msh", Language.MSH),
            ("PowerShell", Language.MSH),
            ("ps1", Language.MSH),
            ("tsql", Language.TSQL),
            ("sql", Language.TSQL),
            ("  js  ", Language.JAVASCRIPT),
        ],
    )
    def test_known_tags(self, tag: str, expected: Language) -> None:
        assert resolve_language(tag) is expected

    @pytest.mark.parametrize("tag", ["", "   ", None, "cobol", "c", "c##"])
    def test_unknown_tags(self, tag: str | None) -> None:
        assert resolve_language(tag) is Language.UNSUPPORTED


class TestLanguageEnum:
    def test_markup_members(self) -> None:
        markup = {language for language in Language if language.is_markup}
        assert markup == {Language.HTML, Language.XML}

    def test_only_unsupported_is_unsupported(self) -> None:
        unsupported = [language for language in Language if not language.is_supported]
        assert unsupported == [Language.UNSUPPORTED]

    def test_every_code_language_has_descriptor(self) -> None:
        for language in Language:
            has_descriptor = language in DESCRIPTORS
            assert has_descriptor == (language.is_supported and not language.is_markup)

    @pytest.mark.parametrize("language", [Language.HTML, Language.XML, Language.UNSUPPORTED])
    def test_get_descriptor_rejects_non_code(self, language: Language) -> None:
        with pytest.raises(KeyError):
            get_descriptor(language)


class TestBuiltinDescriptors:
    @pytest.mark.parametrize("language", list(DESCRIPTORS))
    def test_compiles(self, language: Language) -> None:
        pattern = build_master_pattern(get_descriptor(language))
        assert pattern.group_names == ("comment", "string", "preproc", "keyword")

    def test_case_sensitivity(self) -> None:
        assert DESCRIPTORS[Language.CSHARP].case_sensitive
        assert DESCRIPTORS[Language.JAVASCRIPT].case_sensitive
        assert not DESCRIPTORS[Language.VISUAL_BASIC].case_sensitive
        assert not DESCRIPTORS[Language.MSH].case_sensitive
        assert not DESCRIPTORS[Language.TSQL].case_sensitive

    def test_javascript_has_no_preprocessors(self) -> None:
        assert not DESCRIPTORS[Language.JAVASCRIPT].has_preprocessors

    def test_csharp_region_directives(self) -> None:
        assert {"#region", "#endregion"} <= DESCRIPTORS[Language.CSHARP].preprocessors
