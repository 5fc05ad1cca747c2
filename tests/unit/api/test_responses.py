"""Unit tests for Result-to-HTTP adapters."""

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from promptlab.api.responses import register_exception_handlers, status_code_for, unwrap_or_raise
from promptlab.domain.models import ApiError, ErrorCode
from promptlab.shared.result import failure, success


class TestStatusCodeFor:
    """Tests for error code to status mapping."""

    @pytest.mark.parametrize(
        ("code", "status"),
        [
            (ErrorCode.VALIDATION_ERROR, 422),
            (ErrorCode.NOT_FOUND, 404),
            (ErrorCode.UNAUTHORIZED, 401),
            (ErrorCode.CONFLICT, 409),
            (ErrorCode.INTERNAL_ERROR, 500),
        ],
    )
    def test_known_codes(self, code: ErrorCode, status: int) -> None:
        """Test each known code maps to its status."""
        assert status_code_for(ApiError(code=code.value, message="x")) == status

    def test_unknown_code(self) -> None:
        """Test unknown codes fall back to 400."""
        assert status_code_for(ApiError(code="TEAPOT", message="x")) == 400


class TestUnwrapOrRaise:
    """Tests for unwrap_or_raise."""

    def test_success_returns_data(self) -> None:
        """Test success value is returned unchanged."""
        assert unwrap_or_raise(success({"id": 1})) == {"id": 1}

    def test_failure_raises_http_exception(self) -> None:
        """Test failure becomes HTTPException with serialized error."""
        error = ApiError(code="NOT_FOUND", message="Portfolio not found").add_detail("id", "p-1")

        with pytest.raises(HTTPException) as exc_info:
            unwrap_or_raise(failure(error))

        assert exc_info.value.status_code == 404
        assert exc_info.value.detail["code"] == "NOT_FOUND"
        assert exc_info.value.detail["details"] == {"id": "p-1"}
        assert isinstance(exc_info.value.detail["timestamp"], str)


class TestUnwrapErrorHandler:
    """Tests for the UnwrapError exception handler."""

    def test_escaped_unwrap_error_becomes_500(self) -> None:
        """Test get_or_throw on a failure inside a route yields a 500 body."""
        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/boom")
        async def boom():
            return failure("ledger unavailable").get_or_throw()

        client = TestClient(app, raise_server_exceptions=False)
        response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {
            "code": "INTERNAL_ERROR",
            "message": "Result is failure: ledger unavailable",
        }
