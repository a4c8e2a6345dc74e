"""Translation of domain errors into HTTP responses.

``STATUS_BY_KIND`` is the only place where an error kind is tied to a
status code.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from src.selectshop.api.http.schemas import ErrorResponse
from src.selectshop.core.exceptions import ErrorKind, SelectShopError

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORAGE_FAILURE: 500,
}


def error_response(message: str, status_code: int, headers: dict[str, str] | None = None) -> JSONResponse:
    body = ErrorResponse(message=message, status_code=status_code)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True),
        headers=headers,
    )


async def handle_domain_error(request: Request, exc: SelectShopError) -> JSONResponse:
    status_code = STATUS_BY_KIND[exc.kind]
    if status_code >= 500:
        logger.bind(error_kind=str(exc.kind)).opt(exception=exc).error("request.domain_error")
        return error_response("Internal Server Error", status_code)

    logger.bind(error_kind=str(exc.kind), status_code=status_code).info(
        "request.rejected: {}", exc.message
    )
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return error_response(exc.message, status_code, headers)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = f"{location}: {first.get('msg', 'invalid request')}" if location else "Invalid request"
    logger.bind(status_code=400).info("request.validation_error: {}", message)
    return error_response(message, 400)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(str(exc.detail), exc.status_code, getattr(exc, "headers", None))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SelectShopError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
