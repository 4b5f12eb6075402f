import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from places_api.core.exceptions import PlacesError
from places_api.core.logger import logs


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def describe_validation_error(errors: list) -> str:
    """Turn the first pydantic error into a short client-facing message."""
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if field:
        return f"{field}: {first.get('msg', 'invalid value')}"
    return first.get("msg", "Invalid request")


def setup_error_handlers(app):
    """
    Register the handlers that keep every error body in the
    {"error": message} shape.
    """

    @app.exception_handler(PlacesError)
    async def places_exception_handler(request: Request, exc: PlacesError):
        if exc.status_code >= 500:
            logs.log(logging.ERROR, f"{request.method} {request.url.path} failed: {exc.message}")
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return error_response(400, describe_validation_error(exc.errors()))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logs.logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {type(exc).__name__}: {exc}",
            exc_info=True,
        )
        return error_response(500, "Internal server error")
