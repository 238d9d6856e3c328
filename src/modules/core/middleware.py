import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger(__name__)


class CorrelationIdMiddleware:
    """Tag every request, and every log line it produces, with a request ID.

    The ID comes from the ``X-Request-ID`` header or is a fresh UUID4.  It is
    bound into structlog's contextvars for the duration of the request and
    echoed back on the response header.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            correlation_id=cid,
            method=request.method,
            path=request.path,
        )

        started = time.monotonic()
        logger.info("request_started")

        try:
            response = self.get_response(request)
            logger.info(
                "request_finished",
                status_code=response.status_code,
                duration_ms=round((time.monotonic() - started) * 1000, 2),
            )
        finally:
            structlog.contextvars.clear_contextvars()

        response[REQUEST_ID_HEADER] = cid
        return response
