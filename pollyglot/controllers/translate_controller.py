"""
/**
 * @file pollyglot/controllers/translate_controller.py
 * @description Translation proxy controller: POST /api/translate relays to the upstream API.
 */
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.responses import JSONResponse

from pollyglot.models.translate_request_model import TranslateRequest, TranslateResponse
from pollyglot.models.translation_errors import (
    ConfigurationError,
    EmptyResultError,
    ErrorKind,
    TransportError,
    UpstreamError,
)
from pollyglot.services.proxy_service import ProxyService


logger = logging.getLogger(__name__)

router = APIRouter()


def get_proxy_service(request: Request) -> ProxyService:
    return request.app.state.proxy_service


def _relay_status(status) -> int:
    return status if isinstance(status, int) and 400 <= status <= 599 else 502


@router.post("/api/translate", response_model=TranslateResponse)
def translate(req: TranslateRequest, service: ProxyService = Depends(get_proxy_service)):
    try:
        translated = service.translate(req.text, req.target_language)
    except ConfigurationError as e:
        logger.error("Proxy misconfigured: %s", e.message)
        raise HTTPException(status_code=500, detail={"error": e.message, "kind": e.kind.value})
    except UpstreamError as e:
        raise HTTPException(
            status_code=_relay_status(e.status),
            detail={"error": f"{service.upstream_label} API error", "details": e.message, "kind": e.kind.value},
        )
    except EmptyResultError as e:
        raise HTTPException(
            status_code=500,
            detail={"error": "No translation received from upstream", "details": e.message, "kind": e.kind.value},
        )
    except TransportError as e:
        raise HTTPException(status_code=502, detail={"error": "Server error", "details": e.message, "kind": e.kind.value})
    return TranslateResponse(translatedText=translated)


@router.options("/api/translate")
def translate_preflight():
    return Response(status_code=200)


@router.api_route("/api/translate", methods=["GET", "PUT", "PATCH", "DELETE"])
def translate_method_not_allowed():
    return JSONResponse(
        status_code=405,
        content={"error": "Method not allowed", "kind": ErrorKind.VALIDATION.value},
        headers={"Allow": "POST, OPTIONS"},
    )
