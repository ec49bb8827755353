"""
Select-language installer task.

Decides whether the installer already knows its language, needs to
ask for it, or can pick one on its own.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from common.utils import BadRequestException
from installer.forms import FormState, SelectLanguageForm
from installer.services.installer import (
    STANDARD_LANGUAGES,
    InstallState,
    TranslationFinder,
)

logger = logging.getLogger(__name__)

TASK_NAME = "select_language"


class LanguageRequiredException(BadRequestException):
    """400 - A non-interactive install has no language to continue with."""

    def __init__(
        self,
        message: str = "You must select a language to continue the installation.",
        code: str = "LANGUAGE_REQUIRED",
        details: Optional[Any] = None,
    ):
        super().__init__(message, code, details)


def _merge_translations(install_state: InstallState, finder: TranslationFinder) -> Dict[str, str]:
    files = finder.find_translations()
    for langcode, path in files.items():
        install_state.translations.setdefault(langcode, path)
    return files


def is_valid_langcode(langcode: Optional[str], files: Dict[str, str]) -> bool:
    """
    Check whether a langcode can be installed.

    English needs nothing; other languages need a local translation file
    or must be known to the translation server.
    """
    if not langcode:
        return False
    return langcode == "en" or langcode in files or langcode in STANDARD_LANGUAGES


def run_select_language_task(
    install_state: InstallState,
    finder: TranslationFinder,
    form: SelectLanguageForm,
) -> Optional[Dict[str, Any]]:
    """
    Run the language selection step.

    Args:
        install_state: Current installer state (updated in place)
        finder: Translation file discovery
        form: Language form used when a person must choose

    Returns:
        The form render array when the installer must ask, else None

    Raises:
        LanguageRequiredException: Non-interactive run with several
            languages available and none chosen
    """
    files = _merge_translations(install_state, finder)

    langcode = install_state.langcode
    if langcode:
        if is_valid_langcode(langcode, files):
            install_state.completed_tasks.append(TASK_NAME)
            return None
        logger.info(f"Ignoring unknown installer langcode: {langcode}")
        install_state.parameters.pop("langcode", None)

    if install_state.interactive:
        form_state = FormState(build_info={"args": [install_state]})
        return form.get_form(form_state)

    # Without anyone to ask, English is the only safe pick.
    if len(files) == 1:
        install_state.parameters["langcode"] = next(iter(files))
        install_state.completed_tasks.append(TASK_NAME)
        return None

    raise LanguageRequiredException(
        form.t("You must select a language to continue the installation."),
        details={"available": sorted(files)},
    )


def submit_select_language(
    install_state: InstallState,
    finder: TranslationFinder,
    form: SelectLanguageForm,
    values: Dict[str, Any],
) -> Tuple[Dict[str, Any], FormState]:
    """
    Process a submitted language form.

    Args:
        install_state: Current installer state; receives the chosen langcode
        finder: Translation file discovery
        form: The language form
        values: Submitted form fields

    Returns:
        (built form, form state); form_state.submitted tells whether the
        submission was accepted
    """
    _merge_translations(install_state, finder)

    form_state = FormState(values=dict(values), build_info={"args": [install_state]})
    built = form.process_form(form_state)

    if form_state.submitted:
        install_state.completed_tasks.append(TASK_NAME)

    return built, form_state
