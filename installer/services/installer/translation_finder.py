"""
Translation file discovery.

Scans the translations directory for language packs named
<project>-<version>.<langcode>.po, e.g. drupal-8.0.0.de.po.
"""

import logging
import re
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)

# Langcodes are stored in a 12 character column downstream.
MAX_LANGCODE_LENGTH = 12


class TranslationFinder:
    """
    Finds translation files available to the installer.
    English needs no translation file and is always reported.
    """

    def __init__(self, translations_path: str, project: str = "drupal"):
        """
        Initialize TranslationFinder.

        Args:
            translations_path: Directory holding .po files
            project: Project name prefix of the translation files
        """
        self._translations_path = Path(translations_path)
        self._pattern = re.compile(
            rf"^{re.escape(project)}-\d[^/]*\.(?P<langcode>[^.]+)\.po$"
        )

    def find_translation_files(self, langcode: Optional[str] = None) -> Dict[str, str]:
        """
        Find translation files in the translations directory.

        Args:
            langcode: Only return the file for this language

        Returns:
            Dict mapping langcode to file path, in file name order
        """
        files: Dict[str, str] = {}

        if not self._translations_path.is_dir():
            logger.debug(f"Translations directory not found: {self._translations_path}")
            return files

        for path in sorted(self._translations_path.iterdir()):
            if not path.is_file():
                continue
            match = self._pattern.match(path.name)
            if not match:
                continue

            file_langcode = match.group("langcode").lower()
            if langcode and file_langcode != langcode.lower():
                continue
            if len(file_langcode) > MAX_LANGCODE_LENGTH:
                logger.debug(f"Skipping {path.name}: langcode too long")
                continue

            files[file_langcode] = str(path)

        return files

    def find_translations(self) -> Dict[str, str]:
        """
        Get all languages the installer can offer from local files.

        Returns:
            Dict mapping langcode to file path; "en" first with an empty path
        """
        translations = {"en": ""}
        translations.update(self.find_translation_files())

        logger.debug(f"Found {len(translations) - 1} translation files")
        return translations
