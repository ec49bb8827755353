"""Installer services."""

from installer.services.installer.install_state import InstallState
from installer.services.installer.redirect import install_full_redirect_url
from installer.services.installer.standard_languages import (
    STANDARD_LANGUAGES,
    get_standard_language_list,
)
from installer.services.installer.translation_finder import TranslationFinder

__all__ = [
    "InstallState",
    "install_full_redirect_url",
    "STANDARD_LANGUAGES",
    "get_standard_language_list",
    "TranslationFinder",
]
