"""
Utilities module - Common helpers for API responses, exceptions, and markup.
"""

from common.utils.responses import success_response
from common.utils.exceptions import (
    APIException,
    BadRequestException,
    ValidationException,
)
from common.utils.markup import format_markup

__all__ = [
    "success_response",
    "APIException",
    "BadRequestException",
    "ValidationException",
    "format_markup",
]
