"""Adapters between Result values and HTTP responses.

Routes return domain data by unwrapping a Result here; a Failure becomes an
HTTPException whose status code is derived from the ApiError code.
"""

import logging
from typing import TypeVar

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from promptlab.domain.models import ApiError, ErrorCode
from promptlab.shared.result import Failure, Result, Success, UnwrapError

logger = logging.getLogger(__name__)

T = TypeVar("T")

ERROR_STATUS_CODES: dict[str, int] = {
    ErrorCode.VALIDATION_ERROR.value: 422,
    ErrorCode.NOT_FOUND.value: 404,
    ErrorCode.UNAUTHORIZED.value: 401,
    ErrorCode.CONFLICT.value: 409,
    ErrorCode.INTERNAL_ERROR.value: 500,
}
DEFAULT_ERROR_STATUS = 400


def status_code_for(error: ApiError) -> int:
    """Map an ApiError code to an HTTP status code (400 for unknown codes)."""
    return ERROR_STATUS_CODES.get(error.code, DEFAULT_ERROR_STATUS)


def unwrap_or_raise(result: Result[T, ApiError]) -> T:
    """Return the success value or raise HTTPException for a failure.

    Args:
        result: Result produced by a domain operation

    Returns:
        The success value

    Raises:
        HTTPException: With the mapped status code and the serialized ApiError
    """
    match result:
        case Success(data):
            return data
        case Failure(error):
            status_code = status_code_for(error)
            logger.warning(f"Request failed with {status_code}: {error}")
            raise HTTPException(status_code=status_code, detail=error.model_dump(mode="json"))
    raise TypeError(f"Expected Success or Failure, got {type(result).__name__}")


async def _handle_unwrap_error(request: Request, exc: UnwrapError) -> JSONResponse:
    logger.error(f"Unhandled failure result on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"code": ErrorCode.INTERNAL_ERROR.value, "message": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers that turn escaped UnwrapError into a 500 response."""
    app.add_exception_handler(UnwrapError, _handle_unwrap_error)  # type: ignore[arg-type]
