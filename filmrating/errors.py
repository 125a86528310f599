import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiException(Exception):
    """Base for errors that map to a client-facing status code."""

    status_code = 500

    def __init__(self, *messages: str):
        super().__init__("; ".join(messages))
        self.errors = list(messages)


class ValidationException(ApiException):
    status_code = 400


class NotFoundException(ApiException):
    status_code = 404

    def __init__(self, message: str):
        super().__init__(message)


def error_response(status_code: int, errors) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"errors": list(errors)})


async def api_exception_handler(request: Request, exc: ApiException):
    return error_response(exc.status_code, exc.errors)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        # drop the "query"/"path"/"body" prefix
        loc = ".".join(str(part) for part in err["loc"][1:]) or str(err["loc"][0])
        errors.append(f"{loc} {err['msg']}")
    return error_response(400, errors or ["Invalid request"])


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, [str(exc.detail)])


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(500, ["Internal server error"])


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiException, api_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
