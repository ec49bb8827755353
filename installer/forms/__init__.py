"""Installer forms."""

from installer.forms.base import FormBase, FormState, element_children
from installer.forms.select_language import SelectLanguageForm

__all__ = [
    "FormBase",
    "FormState",
    "element_children",
    "SelectLanguageForm",
]
