"""
Template rendering for installer pages and theme fragments.

Wraps a Jinja2 environment with a translation-aware "t" filter and
turns form render arrays into template-friendly element dicts.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, pass_context, select_autoescape
from markupsafe import Markup

from common.i18n import TranslationService
from installer.forms.base import FormState, element_children

logger = logging.getLogger(__name__)


class TemplateRenderer:
    """
    Renders Jinja2 templates from the installer templates directory.

    Templates translate interface strings with the "t" filter, which
    reads the target language from the "language" context variable.
    """

    def __init__(self, templates_path: str, translation_service: TranslationService):
        """
        Initialize TemplateRenderer.

        Args:
            templates_path: Directory containing *.html.j2 templates
            translation_service: Used by the "t" filter
        """
        self._translation_service = translation_service
        self._env = Environment(
            loader=FileSystemLoader(templates_path),
            autoescape=select_autoescape(["html", "html.j2", "xml"]),
            keep_trailing_newline=True,
        )

        @pass_context
        def translate_filter(context, source: str, **args: Any) -> str:
            return translation_service.t(source, context.get("language"), **args)

        self._env.filters["t"] = translate_filter

    @property
    def environment(self) -> Environment:
        return self._env

    def translate(self, source: str, language: Optional[str] = None, **args: Any) -> str:
        """Translate an interface string outside of a template."""
        return self._translation_service.t(source, language, **args)

    def render(self, template_name: str, **context: Any) -> Markup:
        """
        Render a template to markup.

        Args:
            template_name: Template file name relative to the templates path
            **context: Template variables

        Returns:
            Rendered markup
        """
        template = self._env.get_template(template_name)
        return Markup(template.render(**context))

    def render_form(
        self,
        form: Dict[str, Any],
        form_state: Optional[FormState] = None,
        action: str = "",
        language: Optional[str] = None,
    ) -> Markup:
        """
        Render a form render array.

        Submitted values in form_state take precedence over defaults so an
        invalid submission is shown back as entered.
        """
        form_state = form_state or FormState()
        elements = self._prepare_children(form, form_state)
        return self.render(
            "form.html.j2",
            form_id=form.get("#form_id", ""),
            action=action,
            elements=elements,
            language=language,
        )

    def render_page(
        self,
        title: str,
        content: Markup,
        language: Optional[str] = None,
        messages: Optional[List[str]] = None,
    ) -> Markup:
        """Render a full installer page around content."""
        return self.render(
            "page.html.j2",
            title=title,
            content=content,
            language=language or "en",
            messages=messages or [],
        )

    def _prepare_children(self, element: Dict[str, Any], form_state: FormState) -> List[Dict[str, Any]]:
        return [
            self._prepare_element(name, child, form_state)
            for name, child in element_children(element)
        ]

    def _prepare_element(self, name: str, element: Dict[str, Any], form_state: FormState) -> Dict[str, Any]:
        element_type = element.get("#type", "markup")
        prepared: Dict[str, Any] = {
            "type": element_type,
            "name": name,
            "id": "edit-" + name.replace("_", "-"),
            "title": element.get("#title"),
            "title_display": element.get("#title_display", "before"),
            "markup": Markup(element.get("#markup", "")),
            "error": form_state.errors.get(name),
            "states": json.dumps(element["#states"]) if element.get("#states") else None,
            "children": self._prepare_children(element, form_state),
        }

        if element_type == "select":
            prepared["options"] = list(element.get("#options", {}).items())
            prepared["value"] = str(form_state.get_value(name, element.get("#default_value", "")))
        elif element_type == "submit":
            prepared["value"] = element.get("#value", "")
            prepared["button_type"] = element.get("#button_type", "")
        else:
            prepared["value"] = element.get("#value", "")

        return prepared
