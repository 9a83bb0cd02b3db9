"""
Tests for API error translation.

Tests cover:
- _get_http_status: HTTP status extraction from various exception types
- _convert_to_drive_error: Converting exceptions to CommunicationError
- translate_errors decorator
"""

from unittest.mock import Mock

import pytest
from google.auth.exceptions import RefreshError

from api_errors import _get_http_status, _convert_to_drive_error, translate_errors
from models import CommunicationError, ErrorKind, NotFound, ValidationError
from tests.mock_utils import make_http_error


class TestGetHttpStatus:

    def test_googleapiclient_http_error(self) -> None:
        assert _get_http_status(make_http_error(404)) == 404

    def test_googleapiclient_style_exception(self) -> None:
        exc = Exception("API Error")
        exc.resp = Mock()
        exc.resp.status = 403
        assert _get_http_status(exc) == 403

    def test_string_status(self) -> None:
        exc = Exception("API Error")
        exc.resp = Mock()
        exc.resp.status = "502"
        assert _get_http_status(exc) == 502

    def test_requests_style_exception(self) -> None:
        exc = Exception("Request failed")
        exc.status_code = 500
        assert _get_http_status(exc) == 500

    def test_no_status_returns_none(self) -> None:
        assert _get_http_status(Exception("Generic error")) is None


class TestConvertToDriveError:

    def test_drive_errors_pass_through(self) -> None:
        original = NotFound("folder 'x' not found")
        assert _convert_to_drive_error(original, "list files") is original

    @pytest.mark.parametrize("status,phrase", [
        (401, "authentication failed"),
        (403, "permission denied"),
        (404, "not found"),
        (429, "rate limited"),
        (503, "service error"),
    ])
    def test_http_status_messages(self, status: int, phrase: str) -> None:
        error = _convert_to_drive_error(make_http_error(status), "create file")

        assert isinstance(error, CommunicationError)
        assert error.kind is ErrorKind.COMMUNICATION_ERROR
        assert error.message.startswith("unable to create file: ")
        assert phrase in error.message
        assert error.details == {"http_status": status}

    def test_without_status_uses_exception_text(self) -> None:
        error = _convert_to_drive_error(ConnectionError("connection refused"), "list files")

        assert error.message == "unable to list files: connection refused"
        assert error.details == {}


class TestTranslateErrors:

    def test_success_passes_through(self) -> None:
        @translate_errors("do thing")
        def ok() -> str:
            return "fine"

        assert ok() == "fine"

    def test_refresh_error_is_communication_error(self) -> None:
        @translate_errors("list files")
        def fails() -> None:
            raise RefreshError("invalid_grant")

        with pytest.raises(CommunicationError) as exc_info:
            fails()
        assert isinstance(exc_info.value.__cause__, RefreshError)

    def test_drive_errors_untouched(self) -> None:
        @translate_errors("list files")
        def fails() -> None:
            raise ValidationError("bad")

        with pytest.raises(ValidationError):
            fails()

    def test_programming_errors_propagate(self) -> None:
        @translate_errors("list files")
        def fails() -> None:
            raise KeyError("id")

        with pytest.raises(KeyError):
            fails()

    def test_preserves_name(self) -> None:
        @translate_errors("x")
        def my_function() -> None:
            pass

        assert my_function.__name__ == "my_function"
