"""
i18n middleware for request-scoped language detection and translation.

Attaches language and translation helper to requests.
"""

import logging
from typing import Callable, List

from fastapi import Request

from common.i18n import TranslationService, get_best_matching_langcode

logger = logging.getLogger(__name__)


class I18nMiddleware:
    """
    FastAPI middleware for request-scoped i18n.
    Attaches request.state.language and request.state.t to all requests.
    """

    def __init__(
        self,
        translation_service: TranslationService,
        default_language: str = "en",
    ):
        """
        Initialize I18nMiddleware.

        Args:
            translation_service: Interface translation lookup
            default_language: Used when nothing else matches
        """
        self._translation_service = translation_service
        self._default_language = default_language

    async def __call__(self, request: Request, call_next: Callable):
        """
        Middleware function that attaches language to request.

        Attaches:
            - request.state.language: detected language code
            - request.state.t: translation function
        """
        language = self.get_language_from_request(request)
        request.state.language = language

        def translate(source: str, **args) -> str:
            return self._translation_service.t(source, language, **args)

        request.state.t = translate

        response = await call_next(request)
        return response

    def get_interface_languages(self) -> List[str]:
        """Languages the interface can be shown in."""
        languages = [self._default_language]
        for lang in self._translation_service.get_languages():
            if lang not in languages:
                languages.append(lang)
        return languages

    def get_language_from_request(self, request: Request) -> str:
        """
        Detect the interface language for a request.

        Args:
            request: HTTP request object

        Returns:
            Language code (e.g., 'en', 'sv')

        Priority:
            1. langcode query parameter chosen earlier in the installer
            2. Accept-Language header (best match)
            3. Default language
        """
        available = self.get_interface_languages()

        langcode = request.query_params.get("langcode")
        if langcode and langcode in available:
            return langcode

        browser_langcode = get_best_matching_langcode(
            request.headers.get("Accept-Language"), available
        )
        if browser_langcode:
            return browser_langcode

        return self._default_language
