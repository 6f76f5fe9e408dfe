import pytest

from jsoneditor_options.languages import (
    BUILTIN_LANGUAGES,
    available_languages,
    base_language,
    normalize_language,
    resolve_language,
    translation_table,
)


class TestNormalizeLanguage:
    def test_case_is_normalized(self):
        assert normalize_language("pt-br") == "pt-BR"
        assert normalize_language("JA") == "ja"
        assert normalize_language("fr-FR") == "fr-FR"

    def test_invalid_tags(self):
        for tag in ("", "   ", "not a language"):
            with pytest.raises(ValueError):
                normalize_language(tag)

    def test_base_language(self):
        assert base_language("pt-BR") == "pt"
        assert base_language("zh-CN") == "zh"


class TestResolveLanguage:
    def test_unset_uses_fallback(self):
        assert resolve_language({}) == "en"
        assert resolve_language({}, fallback="ja") == "ja"

    def test_builtin_language(self):
        assert resolve_language({"language": "pt-br"}) == "pt-BR"
        assert resolve_language({"language": "tr"}) == "tr"

    def test_base_language_match(self):
        assert resolve_language({"language": "fr-CA"}) == "fr-FR"

    def test_custom_language(self):
        options = {"language": "de", "languages": {"de": {"sort": "Sortieren"}}}
        assert resolve_language(options) == "de"
        assert "de" in available_languages(options)

    def test_unknown_language_falls_back(self, caplog):
        with caplog.at_level("WARNING"):
            assert resolve_language({"language": "ko"}) == "en"
        assert "ko" in caplog.text

    def test_invalid_tag_falls_back(self):
        assert resolve_language({"language": "not a language"}) == "en"


class TestTranslationTable:
    def test_returns_copy(self):
        table = {"sort": "Ordenar"}
        options = {"languages": {"pt-br": table}}

        result = translation_table(options, "pt-BR")
        assert result == table
        result["sort"] = "changed"
        assert table["sort"] == "Ordenar"

    def test_missing_language(self):
        assert translation_table({}, "ja") == {}

    def test_builtin_list(self):
        assert BUILTIN_LANGUAGES == ("en", "pt-BR", "zh-CN", "tr", "ja", "fr-FR")
