"""
Custom middleware for the API.
"""

import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from src.config import (
    CORRELATION_ID_HEADER,
    USER_ID_HEADER,
    SESSION_ID_HEADER,
    SLOW_REQUEST_SECONDS,
)
from src.logging_config import get_logger
from src.utils.context import (
    set_correlation_id,
    set_user_id,
    set_session_id,
    clear_all_context,
)

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs every request with its status code and duration, and adds timing
    headers to the response. Requests slower than SLOW_REQUEST_SECONDS are
    logged as warnings.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        duration_seconds = time.perf_counter() - start_time
        duration_ms = duration_seconds * 1000
        is_slow = duration_seconds > SLOW_REQUEST_SECONDS

        log = logger.warning if is_slow else logger.info
        log(
            "request_completed",
            method=request.method,
            path=request.url.path,
            query=str(request.query_params) if request.query_params else None,
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
            client_ip=request.client.host if request.client else "unknown",
            is_slow_request=is_slow,
            is_error=response.status_code >= 400,
        )

        response.headers["X-Process-Time-Ms"] = f"{duration_ms:.0f}"

        return response


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Sets the request context for the lifetime of a request.

    The correlation id is taken from the incoming header (or generated),
    user and session ids are copied from their headers, and the correlation
    id is echoed back on the response. Context is cleared afterwards.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            correlation_id = request.headers.get(CORRELATION_ID_HEADER) or str(uuid.uuid4())
            set_correlation_id(correlation_id)
            request.state.correlation_id = correlation_id

            user_id = request.headers.get(USER_ID_HEADER)
            if user_id:
                set_user_id(user_id)

            session_id = request.headers.get(SESSION_ID_HEADER)
            if session_id:
                set_session_id(session_id)

            response = await call_next(request)
            response.headers[CORRELATION_ID_HEADER] = correlation_id

            return response

        finally:
            clear_all_context()
