"""
FastAPI dependencies for the installer application.

Provides dependency injection for all services.
"""

import logging
from typing import Optional

from fastapi import Request

from common.i18n import TranslationService
from installer.config import Settings
from installer.forms import SelectLanguageForm
from installer.middleware.i18n import I18nMiddleware
from installer.services.installer import TranslationFinder
from installer.services.theme import TableSort, TemplateRenderer

logger = logging.getLogger(__name__)


_settings: Optional[Settings] = None
_translation_service: Optional[TranslationService] = None
_translation_finder: Optional[TranslationFinder] = None
_renderer: Optional[TemplateRenderer] = None
_table_sort: Optional[TableSort] = None
_i18n_middleware: Optional[I18nMiddleware] = None


def init_all_services(settings: Settings) -> None:
    """
    Initialize all services.

    Called once at application startup.

    Args:
        settings: Application settings
    """
    global _settings, _translation_service, _translation_finder
    global _renderer, _table_sort, _i18n_middleware

    _settings = settings

    _translation_service = TranslationService(
        locales_dir=settings.LOCALES_PATH,
        source_language="en",
        supported_languages=settings.get_supported_languages() or None,
    )

    _translation_finder = TranslationFinder(
        translations_path=settings.TRANSLATIONS_PATH,
        project=settings.TRANSLATION_FILE_PROJECT,
    )

    _renderer = TemplateRenderer(
        templates_path=settings.TEMPLATES_PATH,
        translation_service=_translation_service,
    )

    _table_sort = TableSort(
        renderer=_renderer,
        asset_base_url=settings.ASSET_BASE_URL,
    )

    _i18n_middleware = I18nMiddleware(
        translation_service=_translation_service,
        default_language=settings.DEFAULT_LANGUAGE,
    )

    logger.info("Installer services initialized")


def get_settings() -> Settings:
    """Get settings the services were initialized with."""
    if _settings is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _settings


def get_translation_service() -> TranslationService:
    """Get translation service instance."""
    if _translation_service is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _translation_service


def get_translation_finder() -> TranslationFinder:
    """Get translation finder instance."""
    if _translation_finder is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _translation_finder


def get_renderer() -> TemplateRenderer:
    """Get template renderer instance."""
    if _renderer is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _renderer


def get_table_sort() -> TableSort:
    """Get table sort instance."""
    if _table_sort is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _table_sort


def get_i18n_middleware() -> I18nMiddleware:
    """Get i18n middleware instance."""
    if _i18n_middleware is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _i18n_middleware


def get_request_language(request: Request) -> str:
    """Get the interface language detected for this request."""
    return getattr(request.state, "language", None) or get_settings().DEFAULT_LANGUAGE


def get_select_language_form(request: Request) -> SelectLanguageForm:
    """Build the language form for the current request."""
    settings = get_settings()
    return SelectLanguageForm(
        accept_language=request.headers.get("Accept-Language"),
        translate=getattr(request.state, "t", None),
        default_langcode=settings.INSTALLER_DEFAULT_LANGCODE,
        translation_server_url=settings.TRANSLATION_SERVER_URL,
        translation_server_name=settings.TRANSLATION_SERVER_NAME,
        base_url=settings.BASE_URL,
    )
