"""
Installer application settings.

Extends the base settings with installer-specific configuration.
"""

from pathlib import Path

from common.config import BaseAppSettings

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseAppSettings):
    """Installer-specific settings."""

    # ==========================================================================
    # Language Selection
    # ==========================================================================
    # Selected when the browser language matches nothing available
    INSTALLER_DEFAULT_LANGCODE: str = "en"

    # Interactive installs show the language form; non-interactive installs
    # pick English when no translations are present
    INSTALLER_INTERACTIVE: bool = True

    # ==========================================================================
    # Translation Files
    # ==========================================================================
    # Directory scanned for <project>-<version>.<langcode>.po files
    TRANSLATIONS_PATH: str = "sites/default/files/translations"
    TRANSLATION_FILE_PROJECT: str = "drupal"

    # Where translations are downloaded from when none are present locally
    TRANSLATION_SERVER_URL: str = "http://localize.drupal.org"
    TRANSLATION_SERVER_NAME: str = "Drupal Translation website"

    # ==========================================================================
    # Rendering
    # ==========================================================================
    TEMPLATES_PATH: str = str(PACKAGE_DIR / "templates")
    LOCALES_PATH: str = str(PACKAGE_DIR / "locales")

    # Prefix for theme assets such as sort arrows (trailing slash expected)
    ASSET_BASE_URL: str = "/"

    # Absolute base url for installer redirects (empty = site relative)
    BASE_URL: str = ""


# Global settings instance
settings = Settings()
