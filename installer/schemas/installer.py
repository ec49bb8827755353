"""
Pydantic models for installer request/response validation.

Defines schemas for language selection operations.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class LanguageOption(BaseModel):
    """Selectable installer language."""
    code: str = Field(..., description="Language code")
    name: str = Field(..., description="Display name in the language itself")


class LanguagesListResponse(BaseModel):
    """Response for listing installer languages."""
    languages: List[LanguageOption]
    defaultLangcode: str


class SelectLanguageRequest(BaseModel):
    """Request for a non-interactive language selection."""
    langcode: Optional[str] = Field(default=None, max_length=12)


class InstallStateResponse(BaseModel):
    """Installer state after a task ran."""
    parameters: Dict[str, str]
    translations: List[str]
    interactive: bool
    completedTasks: List[str]
    nextUrl: str
