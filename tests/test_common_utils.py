"""Unit tests for the shared response envelope and API exceptions."""

import common.utils
from common.utils import BadRequestException, ValidationException, success_response


class TestSuccessResponse:
    def test_data_and_message(self):
        assert success_response({"langcode": "sv"}, message="Saved") == {
            "success": True,
            "data": {"langcode": "sv"},
            "message": "Saved",
        }

    def test_empty_envelope(self):
        assert success_response() == {"success": True}


class TestExceptions:
    def test_bad_request_detail(self):
        exc = BadRequestException("Wrong form", code="FORM_ID_MISMATCH")

        assert exc.status_code == 400
        assert exc.detail == {"message": "Wrong form", "code": "FORM_ID_MISMATCH"}

    def test_validation_errors_are_merged_into_details(self):
        exc = ValidationException("Invalid", errors=["langcode"], details={"langcode": "bogus"})

        assert exc.status_code == 422
        assert exc.detail["details"] == {"errors": ["langcode"], "langcode": "bogus"}

    def test_exports(self):
        assert set(common.utils.__all__) == {
            "success_response",
            "APIException",
            "BadRequestException",
            "ValidationException",
            "format_markup",
        }
