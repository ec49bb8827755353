"""Unit tests for the select-language installer task."""

import pytest

from installer.forms import SelectLanguageForm
from installer.pipelines import (
    SELECT_LANGUAGE_TASK,
    LanguageRequiredException,
    run_select_language_task,
    submit_select_language,
)
from installer.services.installer import InstallState, TranslationFinder


@pytest.fixture
def form():
    return SelectLanguageForm(accept_language="de")


class TestRunSelectLanguageTask:
    @pytest.mark.parametrize("langcode", ["en", "sv", "qq"])
    def test_valid_langcode_completes_task(self, finder, form, langcode):
        install_state = InstallState.from_parameters({"langcode": langcode})

        result = run_select_language_task(install_state, finder, form)

        assert result is None
        assert install_state.parameters["langcode"] == langcode
        assert install_state.completed_tasks == [SELECT_LANGUAGE_TASK]

    def test_translations_are_merged_into_state(self, finder, form):
        install_state = InstallState.from_parameters({"langcode": "en"})

        run_select_language_task(install_state, finder, form)

        assert set(install_state.translations) == {"en", "de", "pt-br", "qq"}

    def test_interactive_without_langcode_returns_form(self, finder, form):
        install_state = InstallState()

        result = run_select_language_task(install_state, finder, form)

        assert result["langcode"]["#default_value"] == "de"
        assert "qq" in result["langcode"]["#options"]
        assert install_state.completed_tasks == []

    def test_unknown_langcode_shows_form(self, finder, form):
        install_state = InstallState.from_parameters({"langcode": "bogus-lang"})

        result = run_select_language_task(install_state, finder, form)

        assert result is not None
        assert "langcode" not in install_state.parameters

    def test_non_interactive_picks_english_when_alone(self, empty_translations_dir, form):
        install_state = InstallState(interactive=False)

        result = run_select_language_task(install_state, TranslationFinder(str(empty_translations_dir)), form)

        assert result is None
        assert install_state.parameters["langcode"] == "en"
        assert install_state.completed_tasks == [SELECT_LANGUAGE_TASK]

    def test_non_interactive_with_choices_requires_language(self, finder, form):
        install_state = InstallState(interactive=False)

        with pytest.raises(LanguageRequiredException) as exc_info:
            run_select_language_task(install_state, finder, form)

        assert exc_info.value.status_code == 400
        assert exc_info.value.detail["code"] == "LANGUAGE_REQUIRED"
        assert exc_info.value.detail["details"]["available"] == ["de", "en", "pt-br", "qq"]


class TestSubmitSelectLanguage:
    def test_accepted_submission(self, finder, form):
        install_state = InstallState()

        _, form_state = submit_select_language(
            install_state, finder, form,
            {"form_id": "install_select_language_form", "langcode": "sv", "op": "Save and continue"},
        )

        assert form_state.submitted is True
        assert install_state.parameters == {"langcode": "sv"}
        assert install_state.completed_tasks == [SELECT_LANGUAGE_TASK]

    def test_rejected_submission_returns_form(self, finder, form):
        install_state = InstallState()

        built, form_state = submit_select_language(
            install_state, finder, form,
            {"form_id": "install_select_language_form", "langcode": "nope"},
        )

        assert form_state.submitted is False
        assert "langcode" in built
        assert install_state.parameters == {}
        assert install_state.completed_tasks == []
