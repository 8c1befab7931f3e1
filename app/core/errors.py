from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.logging_config import get_logger

logger = get_logger()


class AppError(Exception):
    """Base error rendered as a `{success: false, message, error?}` envelope."""

    status_code = 500

    def __init__(self, message: str, error: str | None = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def to_dict(self) -> dict:
        body = {"success": False, "message": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body


class ValidationError(AppError):
    """Missing or invalid input, or an invalid foreign reference."""

    status_code = 400


class ConflictError(ValidationError):
    """A unique field is already taken."""


class UnauthorizedError(AppError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized: Admin authentication required"):
        super().__init__(message)


class NotFoundError(AppError):
    status_code = 404


class MediaHostError(AppError):
    status_code = 500

    def __init__(self, message: str, error: str | None = None):
        super().__init__(message, error=error)


# =====================================================================
#                           HANDLERS
# =====================================================================
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.message}: {exc.error}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(p) for p in first.get("loc", ())[1:])
    message = f"{field}: {first.get('msg')}" if field else "Invalid request"
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": message},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.opt(exception=exc).error(f"UNHANDLED: {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Server error", "error": str(exc)},
    )


def register_exception_handlers(app):
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
