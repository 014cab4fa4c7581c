import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class RosterError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class Unauthorized(RosterError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized: missing or invalid token"


class ValidationError(RosterError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request payload"


class InvalidWeek(ValidationError):
    message = "Invalid week number"


class NotFound(RosterError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class SubmissionFetchError(RosterError):
    status_code = status.HTTP_502_BAD_GATEWAY
    message = "Could not fetch submissions"


UpstreamFetchError = SubmissionFetchError


class PersistenceError(RosterError):
    message = "Could not write roster to storage"


def _error_body(message: str) -> dict:
    return {"status": "error", "message": message}


async def roster_error_handler(request: Request, exc: RosterError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("rejected payload for %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Malformed request payload"),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RosterError, roster_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
