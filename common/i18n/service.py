"""
Generic internationalization (i18n) service.

Provides translation lookup for interface strings with support for:
- Multiple languages with fallback to the source string
- Placeholder interpolation (@name, %name, !name)
- Per-language overrides loaded from JSON files

Interface strings are written in English in the code and used as the
lookup key. Translations are loaded at startup from JSON files.

Example:
    # Directory structure:
    # locales/
    #   de.json   {"Choose language": "Sprache auswählen"}
    #   sv.json   {"Choose language": "Välj språk"}

    from common.i18n import TranslationService

    i18n = TranslationService(locales_dir="./locales")

    # Simple translation
    title = i18n.t("Choose language", language="sv")

    # With interpolation
    note = i18n.t("Select %name.", language="de", **{"%name": "English"})
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Any

from common.utils.markup import format_markup

logger = logging.getLogger(__name__)


class TranslationService:
    """
    Source-string keyed translation service.

    Loads translations from JSON files at startup and falls back to
    the source string when a language or string is missing.
    """

    def __init__(
        self,
        locales_dir: str,
        source_language: str = "en",
        supported_languages: Optional[List[str]] = None,
    ):
        """
        Initialize translation service.

        Args:
            locales_dir: Path to the locales directory
            source_language: Language the source strings are written in
            supported_languages: List of language codes to load.
                If None, auto-detects from the JSON files present.
        """
        self.locales_dir = Path(locales_dir)
        self.source_language = source_language
        self._configured_languages = supported_languages
        self.translations: Dict[str, Dict[str, str]] = {}

        self._load_translations()

    def _detect_languages(self) -> List[str]:
        """Detect available languages from the locale files."""
        if not self.locales_dir.exists():
            logger.debug(f"Locales directory not found: {self.locales_dir}")
            return []

        return sorted(
            path.stem
            for path in self.locales_dir.glob("*.json")
            if not path.name.startswith(".")
        )

    def _load_translations(self) -> None:
        """Load all translation files."""
        languages = self._configured_languages or self._detect_languages()

        for lang in languages:
            file_path = self.locales_dir / f"{lang}.json"
            if not file_path.exists():
                continue

            try:
                with open(file_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except json.JSONDecodeError as e:
                logger.warning(f"Failed to parse {file_path}: {e}")
                continue
            except IOError as e:
                logger.warning(f"Failed to read {file_path}: {e}")
                continue

            if not isinstance(data, dict):
                logger.warning(f"Ignoring {file_path}: expected a JSON object")
                continue

            self.translations[lang] = {
                str(source): str(translated) for source, translated in data.items()
            }

        logger.info(f"Loaded interface translations for {len(self.translations)} languages")

    def t(
        self,
        source: str,
        language: Optional[str] = None,
        **args: Any,
    ) -> str:
        """
        Translate an interface string.

        Args:
            source: English source string
            language: Target language code (source string returned if unknown)
            **args: Placeholder values keyed with their sigil, e.g. "@name"

        Returns:
            Translated string; with placeholder args, a Markup with the
            values inserted so templates do not escape it again
        """
        text = source
        if language and language != self.source_language:
            text = self.translations.get(language, {}).get(source, source)

        if args:
            return format_markup(text, args)
        return text

    def has(self, source: str, language: str) -> bool:
        """Check if a string has a translation for the language."""
        return source in self.translations.get(language, {})

    def get_languages(self) -> List[str]:
        """Get list of languages with loaded translations."""
        return list(self.translations.keys())

    def reload(self) -> None:
        """Reload all translations from disk."""
        self.translations.clear()
        self._load_translations()
