"""
Common library for reusable infrastructure components.

This package provides generic modules that can be used
across multiple projects:

- i18n: Interface translations and Accept-Language negotiation
- utils: Standard responses, exceptions, markup formatting
- config: Base settings class
"""

from common.i18n import TranslationService, get_best_matching_langcode
from common.utils import (
    success_response,
    APIException,
    BadRequestException,
    ValidationException,
    format_markup,
)
from common.config import BaseAppSettings

__all__ = [
    # i18n
    "TranslationService",
    "get_best_matching_langcode",
    # Utils
    "success_response",
    "APIException",
    "BadRequestException",
    "ValidationException",
    "format_markup",
    # Config
    "BaseAppSettings",
]
