"""
Minimal form plumbing for installer screens.

A form class describes its elements as a render array: an ordered dict
whose "#"-prefixed keys are properties and whose other keys are child
elements. FormBase drives the build -> validate -> submit cycle.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from common.utils import BadRequestException

logger = logging.getLogger(__name__)

ILLEGAL_CHOICE_MESSAGE = "An illegal choice has been detected. Please contact the site administrator."


@dataclass
class FormState:
    """
    State of a form during one request.

    build_info["args"] holds the extra arguments passed to build_form;
    submit handlers may change them to carry data to the next step.
    """
    values: Dict[str, Any] = field(default_factory=dict)
    build_info: Dict[str, Any] = field(default_factory=lambda: {"args": []})
    errors: Dict[str, str] = field(default_factory=dict)
    submitted: bool = False

    def get_value(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def set_value(self, key: str, value: Any) -> None:
        self.values[key] = value

    def get_build_info(self) -> Dict[str, Any]:
        return self.build_info

    def set_build_info(self, build_info: Dict[str, Any]) -> None:
        self.build_info = build_info

    def set_error_by_name(self, name: str, message: str) -> None:
        # First error per element wins.
        self.errors.setdefault(name, message)

    def has_any_errors(self) -> bool:
        return bool(self.errors)


def element_children(element: Dict[str, Any]) -> Iterator[Tuple[str, Dict[str, Any]]]:
    """Iterate over the child elements of a render array, in order."""
    for key, value in element.items():
        if not key.startswith("#") and isinstance(value, dict):
            yield key, value


class FormBase(ABC):
    """
    Base class for installer forms.

    Subclasses provide the form id, the render array and the submit
    handler. Select elements are checked against their options before
    submit handlers run.
    """

    def __init__(self, translate: Optional[Callable[..., str]] = None):
        """
        Initialize form.

        Args:
            translate: Translation function t(source, **args); identity if None
        """
        self._translate = translate

    def t(self, source: str, **args: Any) -> str:
        """Translate an interface string."""
        if self._translate is None:
            return source
        return self._translate(source, **args)

    @abstractmethod
    def get_form_id(self) -> str:
        """Unique form id, sent back with every submission."""
        pass

    @abstractmethod
    def build_form(self, form: Dict[str, Any], form_state: FormState, *args: Any) -> Dict[str, Any]:
        """Return the render array for this form."""
        pass

    def validate_form(self, form: Dict[str, Any], form_state: FormState) -> None:
        """
        Validate submitted values.

        The default implementation rejects select values that are not
        among the element's options.
        """
        for name, element in element_children(form):
            if element.get("#type") != "select":
                continue
            value = form_state.get_value(name)
            if value is None or str(value) not in element.get("#options", {}):
                form_state.set_error_by_name(name, self.t(ILLEGAL_CHOICE_MESSAGE))

    @abstractmethod
    def submit_form(self, form: Dict[str, Any], form_state: FormState) -> None:
        """Act on validated values."""
        pass

    def get_form(self, form_state: FormState) -> Dict[str, Any]:
        """
        Build the complete form, including the form id element.

        Args:
            form_state: State whose build_info["args"] are passed to build_form

        Returns:
            Render array
        """
        form = self.build_form({}, form_state, *form_state.build_info.get("args", []))
        form["#form_id"] = self.get_form_id()
        form["form_id"] = {"#type": "hidden", "#value": self.get_form_id()}
        return form

    def process_form(self, form_state: FormState) -> Dict[str, Any]:
        """
        Build, validate and (when valid) submit the form.

        Args:
            form_state: State holding the submitted values

        Returns:
            The built form, for re-display when validation failed

        Raises:
            BadRequestException: If the submission belongs to another form
        """
        form = self.get_form(form_state)

        submitted_form_id = form_state.get_value("form_id")
        if submitted_form_id != self.get_form_id():
            raise BadRequestException(
                "Submitted data does not belong to this form",
                code="FORM_ID_MISMATCH",
                details={"formId": submitted_form_id},
            )

        self.validate_form(form, form_state)
        if form_state.has_any_errors():
            logger.info(f"Form {self.get_form_id()} failed validation: {list(form_state.errors)}")
            return form

        self.submit_form(form, form_state)
        form_state.submitted = True
        return form
