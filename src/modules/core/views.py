import time
from typing import Any, Dict

import structlog
from django.db import DatabaseError, connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_GET

logger = structlog.get_logger(__name__)


def _probe_database(alias: str = "default") -> Dict[str, Any]:
    """Round-trip ``SELECT 1`` and report the latency, or ``down``."""
    started = time.monotonic()
    try:
        connection = connections[alias]
        connection.ensure_connection()
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except DatabaseError:
        logger.error("health.database_down", alias=alias, exc_info=True)
        return {"status": "down"}
    return {
        "status": "up",
        "response_time_ms": round((time.monotonic() - started) * 1000, 2),
    }


@require_GET
def health_check(request: HttpRequest) -> JsonResponse:
    """GET /health

    The service is only useful with its database, so the database probe
    decides between 200 and 503.
    """
    services = {"database": _probe_database()}
    healthy = all(probe["status"] == "up" for probe in services.values())

    logger.info("health.checked", healthy=healthy)
    return JsonResponse(
        {
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=200 if healthy else 503,
    )
