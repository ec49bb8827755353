"""
Installer middleware.
"""

from installer.middleware.i18n import I18nMiddleware

__all__ = ["I18nMiddleware"]
