"""Request Logging - one structured log line per request.

Invariants:
    - Method, path, status and duration logged for every request
    - Authorization header values are masked before headers are logged (DEBUG only)
"""

import logging
import time

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)

MASKED_HEADERS = frozenset({"authorization", "cookie"})


def mask_headers(headers) -> dict[str, str]:
    return {
        key: "*" if key.lower() in MASKED_HEADERS else value
        for key, value in headers.items()
    }


def register_request_logging(app: FastAPI) -> None:

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"New request headers: {mask_headers(request.headers)}")
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.info(
            f"{request.method} {request.url.path} {response.status_code}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response
