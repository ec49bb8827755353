"""
FastAPI router for scripted (non-interactive) installs.

Provides JSON endpoints for language listing and selection.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from common.utils import ValidationException
from installer.config import Settings
from installer.dependencies import (
    get_select_language_form,
    get_settings,
    get_translation_finder,
)
from installer.forms import SelectLanguageForm
from installer.forms.base import ILLEGAL_CHOICE_MESSAGE
from installer.pipelines import is_valid_langcode, run_select_language_task
from installer.schemas import (
    InstallStateResponse,
    LanguageOption,
    LanguagesListResponse,
    SelectLanguageRequest,
)
from installer.services.installer import (
    InstallState,
    TranslationFinder,
    install_full_redirect_url,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/install", tags=["Installer API"])


@router.get("/languages", response_model=LanguagesListResponse)
async def get_languages(
    finder: Annotated[TranslationFinder, Depends(get_translation_finder)],
    form: Annotated[SelectLanguageForm, Depends(get_select_language_form)],
):
    """
    Get the languages the installer offers.

    Returns the options of the language form, sorted by display name,
    and the langcode preselected for this client.
    """
    install_state = InstallState(translations=finder.find_translations())
    options = form.get_language_options(install_state)

    return LanguagesListResponse(
        languages=[LanguageOption(code=code, name=name) for code, name in options.items()],
        defaultLangcode=form.get_default_langcode(form.get_browser_langcodes(install_state)),
    )


@router.post("/select-language", response_model=InstallStateResponse)
async def select_language(
    body: SelectLanguageRequest,
    settings: Annotated[Settings, Depends(get_settings)],
    finder: Annotated[TranslationFinder, Depends(get_translation_finder)],
    form: Annotated[SelectLanguageForm, Depends(get_select_language_form)],
):
    """
    Select the installer language without a person answering the form.

    Without a langcode, English is picked when it is the only language
    available; otherwise the request is rejected.
    """
    parameters = {}
    if body.langcode:
        if not is_valid_langcode(body.langcode, finder.find_translations()):
            raise ValidationException(
                form.t(ILLEGAL_CHOICE_MESSAGE),
                code="ILLEGAL_CHOICE",
                details={"langcode": body.langcode},
            )
        parameters["langcode"] = body.langcode

    install_state = InstallState.from_parameters(parameters, interactive=False)
    run_select_language_task(install_state, finder, form)

    logger.info(f"Non-interactive language selection: {install_state.langcode}")

    return InstallStateResponse(
        **install_state.to_dict(),
        nextUrl=install_full_redirect_url(install_state.parameters, settings.BASE_URL),
    )
