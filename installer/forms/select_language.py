"""
Installer language selection form.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from common.i18n import get_best_matching_langcode
from common.utils import format_markup
from installer.forms.base import FormBase, FormState
from installer.services.installer import (
    InstallState,
    get_standard_language_list,
    install_full_redirect_url,
)

logger = logging.getLogger(__name__)

HELP_MARKUP = (
    '<p>Translations will be downloaded from the <a href="!server_url">@server_name</a>.\n'
    '      If you do not want this, select <a href="!english">English</a>.</p>'
)


class SelectLanguageForm(FormBase):
    """
    Provides the language selection form.

    Options combine the standard language list with languages found in
    the translations directory. The browser's Accept-Language header
    decides the preselected option.
    """

    def __init__(
        self,
        accept_language: Optional[str] = None,
        translate: Optional[Callable[..., str]] = None,
        default_langcode: str = "en",
        translation_server_url: str = "http://localize.drupal.org",
        translation_server_name: str = "Drupal Translation website",
        base_url: str = "",
    ):
        """
        Initialize SelectLanguageForm.

        Args:
            accept_language: Accept-Language header of the current request
            translate: Translation function for interface strings
            default_langcode: Preselected when the browser matches nothing
            translation_server_url: Where translations are downloaded from
            translation_server_name: Link text for the translation server
            base_url: Site base url for the English shortcut link
        """
        super().__init__(translate)
        self._accept_language = accept_language
        self._default_langcode = default_langcode
        self._translation_server_url = translation_server_url
        self._translation_server_name = translation_server_name
        self._base_url = base_url

    def get_form_id(self) -> str:
        return "install_select_language_form"

    @staticmethod
    def _translation_files(install_state: Optional[InstallState]) -> Dict[str, str]:
        # English is always present, so a single entry means no files.
        translations = install_state.translations if install_state else {}
        return translations if len(translations) > 1 else {}

    def get_language_options(self, install_state: Optional[InstallState]) -> Dict[str, str]:
        """
        Build the langcode -> display name options, sorted by display name.

        Translation files only count when more than English is present.
        """
        files = self._translation_files(install_state)
        standard_languages = get_standard_language_list()

        select_options = {
            langcode: names[1] for langcode, names in standard_languages.items()
        }
        for langcode in files:
            if langcode in standard_languages:
                select_options[langcode] = standard_languages[langcode][1]
            else:
                select_options[langcode] = langcode

        return dict(sorted(select_options.items(), key=lambda item: item[1]))

    def get_browser_langcodes(self, install_state: Optional[InstallState]) -> List[str]:
        """Langcodes in browser matching order: the standard list, then discovered files."""
        standard_languages = get_standard_language_list()
        files = self._translation_files(install_state)
        return list(standard_languages) + [langcode for langcode in files if langcode not in standard_languages]

    def get_default_langcode(self, langcodes) -> str:
        """Pick the browser's preferred language, or the fixed default."""
        browser_langcode = get_best_matching_langcode(self._accept_language, langcodes)
        return browser_langcode or self._default_langcode

    def build_form(
        self,
        form: Dict[str, Any],
        form_state: FormState,
        install_state: Optional[InstallState] = None,
        *args: Any,
    ) -> Dict[str, Any]:
        select_options = self.get_language_options(install_state)

        form["#title"] = self.t("Choose language")

        form["langcode"] = {
            "#type": "select",
            "#title": self.t("Choose language"),
            "#title_display": "invisible",
            "#options": select_options,
            "#default_value": self.get_default_langcode(self.get_browser_langcodes(install_state)),
        }

        english_url = install_full_redirect_url({"langcode": "en"}, self._base_url)
        form["help"] = {
            "#type": "item",
            "#markup": format_markup(HELP_MARKUP, {
                "!server_url": self._translation_server_url,
                "@server_name": self._translation_server_name,
                "!english": english_url,
            }),
            "#states": {
                "invisible": {
                    'select[name="langcode"]': {"value": "en"},
                },
            },
        }

        form["actions"] = {"#type": "actions"}
        form["actions"]["submit"] = {
            "#type": "submit",
            "#value": self.t("Save and continue"),
            "#button_type": "primary",
        }
        return form

    def submit_form(self, form: Dict[str, Any], form_state: FormState) -> None:
        langcode = form_state.get_value("langcode")

        build_info = form_state.get_build_info()
        build_info["args"][0].parameters["langcode"] = langcode
        form_state.set_build_info(build_info)

        logger.info(f"Installer language selected: {langcode}")
