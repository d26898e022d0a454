"""
/**
 * @file pollyglot/controllers/health_controller.py
 * @description Health check controller.
 */
"""

from fastapi import APIRouter, Request


router = APIRouter()


@router.get("/health")
def health(request: Request):
    service = request.app.state.proxy_service

    # Only booleans about the key, never the key itself.
    api_key_status = {
        "configured": service.key_configured,
        "format_ok": service.key_format_ok,
    }
    is_healthy = all(api_key_status.values())

    return {
        "status": "ok" if is_healthy else "degraded",
        "checks": {
            "api_key": api_key_status,
            "upstream": service.upstream_name,
        },
    }
