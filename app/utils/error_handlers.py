"""Map validation errors to HTTP 400 problem details.

Both pipeline validation failures and request body parsing errors produce the
same body shape::

    {"type": ..., "title": ..., "status": 400, "errors": {field: [messages]}}
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.services.validation import ValidationException

logger = logging.getLogger(__name__)

PROBLEM_TYPE = "https://tools.ietf.org/html/rfc7231#section-6.5.1"
PROBLEM_TITLE = "One or more validation errors occurred."


class ProblemResponse(JSONResponse):
    media_type = "application/problem+json"


def register_error_handlers(app: FastAPI) -> None:
    """Register validation error handlers on the FastAPI app."""

    @app.exception_handler(ValidationException)
    async def validation_exception_handler(
        request: Request, exc: ValidationException,
    ):
        return _problem(exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(f"Invalid request body on {request.url.path}: {exc.errors()}")
        return _problem(_group_request_errors(exc))


def _problem(errors: dict[str, list[str]]) -> ProblemResponse:
    return ProblemResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "type": PROBLEM_TYPE,
            "title": PROBLEM_TITLE,
            "status": status.HTTP_400_BAD_REQUEST,
            "errors": errors,
        },
    )


def _group_request_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = {}
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"])
        grouped.setdefault(field, []).append(error["msg"])
    return grouped
