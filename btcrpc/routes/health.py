# btcrpc/routes/health.py

"""Health Check Endpoint

Reports whether the service is up and whether the configured daemon
version has a method table.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from btcrpc.core.exceptions import BtcRpcError
from btcrpc.services import resolver

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(request: Request) -> Dict[str, Any]:
    """
    Health check endpoint

    Args:
        request: Incoming request; the app's settings live on its state

    Returns:
        Health status information
    """
    settings = request.app.state.settings
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": settings.APP_NAME,
        "version": settings.VERSION,
        "checks": {
            "api": "ok"
        }
    }

    try:
        table = resolver.method_table(settings.DAEMON_VERSION)
        health_status["checks"]["schemas"] = f"ok - v{table.version}, {len(table)} methods"
    except BtcRpcError as e:
        logger.error(f"Method table for v{settings.DAEMON_VERSION} unavailable: {e}")
        health_status["checks"]["schemas"] = f"error - {e.message}"

    if not (settings.RPC_COOKIE_FILE or settings.RPC_USER):
        health_status["checks"]["credentials"] = "warning - no RPC credentials configured"
    else:
        health_status["checks"]["credentials"] = "ok"

    if any("error" in str(v) for v in health_status["checks"].values()):
        health_status["status"] = "unhealthy"
        status_code = 503
    elif any("warning" in str(v) for v in health_status["checks"].values()):
        health_status["status"] = "degraded"
        status_code = 200
    else:
        status_code = 200

    return JSONResponse(content=health_status, status_code=status_code)


@router.get("/live")
async def liveness_check() -> Dict[str, Any]:
    """Liveness check endpoint (Kubernetes-style)"""
    return JSONResponse(
        content={
            "alive": True,
            "timestamp": datetime.now(timezone.utc).isoformat()
        },
        status_code=200
    )
