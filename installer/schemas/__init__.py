"""
Installer Schemas.

Pydantic models for request/response validation.
"""

from installer.schemas.installer import *
