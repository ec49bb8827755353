"""
Installer Routers.

All routers are imported here for easy access.
"""

from installer.routers.installer import router as installer_router
from installer.routers.install_api import router as install_api_router
from installer.routers.theme import router as theme_router

__all__ = [
    "installer_router",
    "install_api_router",
    "theme_router",
]
