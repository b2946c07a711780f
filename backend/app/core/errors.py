import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ApiError(HTTPException):
    """
    Base of the error taxonomy. Rendered as {body_key: message}.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"
    body_key = "message"

    def __init__(self, message: str | None = None, *, body_key: str | None = None, headers: dict | None = None):
        super().__init__(status_code=self.status_code, detail=message or self.default_message, headers=headers)
        if body_key:
            self.body_key = body_key


class BadRequest(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"


class Unauthenticated(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"

    def __init__(self, message: str | None = None, *, body_key: str | None = None):
        super().__init__(message, body_key=body_key, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Conflict(ApiError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class InternalFailure(ApiError):
    pass


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={exc.body_key: exc.detail},
        headers=exc.headers,
    )


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"Store failure on {request.method} {request.url.path}", exc_info=exc)
    return await api_error_handler(request, InternalFailure())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
