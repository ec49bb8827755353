"""Unit tests for translation file discovery."""

from installer.services.installer import TranslationFinder


class TestFindTranslations:
    def test_missing_directory_offers_english_only(self, tmp_path):
        finder = TranslationFinder(str(tmp_path / "missing"))

        assert finder.find_translations() == {"en": ""}

    def test_english_first_then_files(self, finder, translations_dir):
        translations = finder.find_translations()

        assert list(translations)[0] == "en"
        assert set(translations) == {"en", "de", "pt-br", "qq"}
        assert translations["de"] == str(translations_dir / "drupal-8.0.0.de.po")

    def test_ignores_files_not_matching_pattern(self, translations_dir):
        (translations_dir / "drupal-beta.fr.po").write_text("", encoding="utf-8")
        (translations_dir / "other-8.0.it.po").write_text("", encoding="utf-8")
        (translations_dir / "drupal-8.0.nl.pot").write_text("", encoding="utf-8")

        translations = TranslationFinder(str(translations_dir)).find_translations()

        assert "fr" not in translations
        assert "it" not in translations
        assert "nl" not in translations

    def test_ignores_overlong_langcodes(self, translations_dir):
        (translations_dir / "drupal-8.0.abcdefghijklm.po").write_text("", encoding="utf-8")

        translations = TranslationFinder(str(translations_dir)).find_translations()

        assert "abcdefghijklm" not in translations

    def test_project_prefix_is_configurable(self, translations_dir):
        (translations_dir / "myproject-2.1.it.po").write_text("", encoding="utf-8")

        translations = TranslationFinder(str(translations_dir), project="myproject").find_translations()

        assert set(translations) == {"en", "it"}


class TestFindTranslationFiles:
    def test_filter_by_langcode(self, finder):
        files = finder.find_translation_files("DE")

        assert list(files) == ["de"]

    def test_english_is_not_a_file(self, finder):
        assert "en" not in finder.find_translation_files()
