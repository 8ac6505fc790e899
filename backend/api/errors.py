"""Translate request validation failures into itemized 400 responses.

FastAPI reports body validation problems as 422 with pydantic's error list.
Clients of this API expect 400 with a flat ``message`` list, one
human-readable string per violated constraint.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

_NUMBER_ERRORS = {"missing", "float_type", "float_parsing", "finite_number"}


def format_validation_error(error: dict) -> str:
    """Render one pydantic error dict as a message naming the offending field."""
    loc = [str(part) for part in error.get("loc", ()) if part != "body"]
    field = ".".join(loc)
    err_type = error.get("type", "")
    ctx = error.get("ctx") or {}

    if err_type == "less_than_equal":
        return f"{field} must not be greater than {_format_bound(ctx.get('le'))}"
    if err_type == "greater_than_equal":
        return f"{field} must not be less than {_format_bound(ctx.get('ge'))}"
    if err_type in _NUMBER_ERRORS and field:
        return f"{field} must be a number conforming to the specified constraints"
    if err_type == "extra_forbidden":
        return f"property {field} should not exist"

    msg = error.get("msg", "Invalid value")
    if err_type == "json_invalid":
        return msg
    return f"{field} {msg}" if field else msg


def _format_bound(bound) -> str:
    # float fields report their bounds as 100.0 / 0.0
    if isinstance(bound, float) and bound.is_integer():
        return str(int(bound))
    return str(bound)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = [format_validation_error(e) for e in exc.errors()]
    logger.info("Rejected %s %s: %s", request.method, request.url.path, messages)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "statusCode": status.HTTP_400_BAD_REQUEST,
            "error": "Bad Request",
            "message": messages,
        },
    )
