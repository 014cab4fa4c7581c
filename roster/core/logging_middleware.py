import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("roster.access")


class LoggingMiddleware(BaseHTTPMiddleware):
    """One access line per request: client, method, path, status and duration."""

    async def dispatch(self, request: Request, call_next):
        start = time.monotonic()
        client = request.client.host if request.client else "-"

        try:
            response = await call_next(request)
        except Exception:
            logger.exception("%s %s %s -> unhandled error", client, request.method, request.url.path)
            raise

        duration = time.monotonic() - start
        logger.info(
            "%s %s %s -> %s (%.2fs)",
            client,
            request.method,
            request.url.path,
            response.status_code,
            duration,
        )

        return response
