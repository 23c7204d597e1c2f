from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
from preppulse.schemas.response import ErrorResponse
import logging
import uuid

logger = logging.getLogger(__name__)

def _get_error_code(status_code: int) -> str:
    code_map = {
        400: "BAD_REQUEST",
        401: "UNAUTHORIZED",
        403: "FORBIDDEN",
        404: "NOT_FOUND",
        405: "METHOD_NOT_ALLOWED",
        409: "CONFLICT",
        500: "INTERNAL_SERVER_ERROR",
    }
    return code_map.get(status_code, f"HTTP_{status_code}")

def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or str(uuid.uuid4())

def _split_detail(detail):
    """HTTPException details are either a message or a dict carrying `message` plus extra context."""
    if isinstance(detail, dict):
        extra = {k: v for k, v in detail.items() if k != "message"}
        return str(detail.get("message", "")), extra or None
    return (detail if isinstance(detail, str) else str(detail)), None

def _error_json(status_code: int, request: Request, request_id: str, code: str, message: str, details=None, headers=None):
    body = ErrorResponse.build(
        code=code,
        message=message,
        path=str(request.url),
        request_id=request_id,
        details=details,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    request_id = _request_id(request)
    errors = jsonable_encoder(exc.errors())
    logger.warning(f"[{request_id}] Validation error: {errors}", extra={"request_id": request_id})
    return _error_json(
        400, request, request_id,
        code="VALIDATION_ERROR",
        message="Request validation failed",
        details={"validation_errors": errors},
    )

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    request_id = _request_id(request)
    message, details = _split_detail(exc.detail)
    log_level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
    logger.log(log_level, f"[{request_id}] HTTP {exc.status_code}: {message}", extra={"request_id": request_id})
    return _error_json(
        exc.status_code, request, request_id,
        code=_get_error_code(exc.status_code),
        message=message,
        details=details,
        headers=getattr(exc, "headers", None),
    )

async def global_exception_handler(request: Request, exc: Exception):
    request_id = _request_id(request)
    logger.error(f"[{request_id}] Unhandled exception: {exc}", exc_info=True, extra={"request_id": request_id})
    return _error_json(
        500, request, request_id,
        code="INTERNAL_SERVER_ERROR",
        message="An unexpected error occurred",
        details={"error_type": type(exc).__name__},
    )
