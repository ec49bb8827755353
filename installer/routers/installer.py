"""
FastAPI router for the interactive installer pages.

Serves the language selection form and the installer entry point.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from common.utils import success_response
from installer.config import Settings
from installer.dependencies import (
    get_renderer,
    get_request_language,
    get_select_language_form,
    get_settings,
    get_translation_finder,
)
from installer.forms import SelectLanguageForm
from installer.pipelines import run_select_language_task, submit_select_language
from installer.services.installer import (
    InstallState,
    TranslationFinder,
    install_full_redirect_url,
)
from installer.services.theme import TemplateRenderer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/install", tags=["Installer"])


def _render_form_page(
    renderer: TemplateRenderer,
    form: dict,
    action: str,
    language: str,
    form_state=None,
    status_code: int = 200,
) -> HTMLResponse:
    messages = list(form_state.errors.values()) if form_state else []
    content = renderer.render_form(form, form_state, action=action, language=language)
    page = renderer.render_page(form.get("#title", ""), content, language=language, messages=messages)
    return HTMLResponse(content=str(page), status_code=status_code)


@router.get("")
async def install(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    finder: Annotated[TranslationFinder, Depends(get_translation_finder)],
    renderer: Annotated[TemplateRenderer, Depends(get_renderer)],
    form: Annotated[SelectLanguageForm, Depends(get_select_language_form)],
    language: Annotated[str, Depends(get_request_language)],
):
    """
    Installer entry point.

    Shows the language form until a valid langcode is carried in the
    query; afterwards returns the installer state.
    """
    install_state = InstallState.from_parameters(
        dict(request.query_params),
        interactive=settings.INSTALLER_INTERACTIVE,
    )
    built = run_select_language_task(install_state, finder, form)

    if built is not None:
        return _render_form_page(renderer, built, "/install/language", language)

    return success_response({
        **install_state.to_dict(),
        "nextUrl": install_full_redirect_url(install_state.parameters, settings.BASE_URL),
    })


@router.get("/language", response_class=HTMLResponse)
async def select_language_page(
    finder: Annotated[TranslationFinder, Depends(get_translation_finder)],
    renderer: Annotated[TemplateRenderer, Depends(get_renderer)],
    form: Annotated[SelectLanguageForm, Depends(get_select_language_form)],
    language: Annotated[str, Depends(get_request_language)],
):
    """
    Show the language selection form.

    The option matching the browser's Accept-Language is preselected.
    """
    install_state = InstallState(interactive=True)
    built = run_select_language_task(install_state, finder, form)
    return _render_form_page(renderer, built, "/install/language", language)


@router.post("/language")
async def submit_language(
    settings: Annotated[Settings, Depends(get_settings)],
    finder: Annotated[TranslationFinder, Depends(get_translation_finder)],
    renderer: Annotated[TemplateRenderer, Depends(get_renderer)],
    form: Annotated[SelectLanguageForm, Depends(get_select_language_form)],
    language: Annotated[str, Depends(get_request_language)],
    form_id: str = Form(default=""),
    langcode: Optional[str] = Form(default=None),
    op: Optional[str] = Form(default=None),
):
    """
    Handle the language form submission.

    Redirects to the next installer step with the chosen langcode, or
    shows the form again with an error.
    """
    install_state = InstallState(interactive=True)
    values = {"form_id": form_id, "langcode": langcode, "op": op}

    built, form_state = submit_select_language(install_state, finder, form, values)

    if not form_state.submitted:
        return _render_form_page(
            renderer, built, "/install/language", language,
            form_state=form_state, status_code=422,
        )

    next_url = install_full_redirect_url(install_state.parameters, settings.BASE_URL)
    return RedirectResponse(url=next_url, status_code=303)
