import logging
import time
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tags every request with an id (reusing the caller's X-Request-ID if sent) and logs its outcome."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        started = time.perf_counter()
        context = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "client": request.client.host if request.client else None,
        }

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"[{request_id}] {request.method} {request.url.path} failed after {_elapsed_ms(started)}ms: {exc}",
                extra={**context, "duration_ms": _elapsed_ms(started)},
            )
            raise

        duration_ms = _elapsed_ms(started)
        logger.log(
            logging.WARNING if response.status_code >= 400 else logging.INFO,
            f"[{request_id}] {request.method} {request.url.path} -> {response.status_code} in {duration_ms}ms",
            extra={**context, "status_code": response.status_code, "duration_ms": duration_ms},
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
