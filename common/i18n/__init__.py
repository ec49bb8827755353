"""
Internationalization module - interface translations and language negotiation.
"""

from common.i18n.service import TranslationService
from common.i18n.negotiation import get_best_matching_langcode, parse_accept_language

__all__ = [
    "TranslationService",
    "get_best_matching_langcode",
    "parse_accept_language",
]
