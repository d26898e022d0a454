"""
/**
 * @file pollyglot/main.py
 * @description FastAPI application entry (wires routers, middleware and the config watcher).
 */
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from pollyglot.config import CONFIG_LOCAL_PATH, CONFIG_PATH, Settings, load_settings, reload_settings
from pollyglot.controllers import health_router, translate_router
from pollyglot.services.proxy_service import ProxyService


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class ConfigEventHandler(FileSystemEventHandler):
    """Handler for config file changes"""

    def on_modified(self, event):
        if event.is_directory:
            return
        if event.src_path in (CONFIG_PATH, CONFIG_LOCAL_PATH):
            reload_settings()


def start_config_watcher() -> Optional[Observer]:
    try:
        observer = Observer()
        config_dir = os.path.dirname(CONFIG_PATH)
        observer.schedule(ConfigEventHandler(), config_dir, recursive=False)
        observer.start()
    except OSError as e:
        logger.warning("Failed to start config watcher: %s", e)
        return None
    logger.info("Config watcher started on %s", config_dir)
    return observer


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


async def handle_validation_error(request: Request, exc: RequestValidationError):
    if any(err.get("type") == "json_invalid" for err in exc.errors()):
        return JSONResponse(status_code=400, content={"error": "Invalid JSON", "kind": "validation"})
    return JSONResponse(
        status_code=400,
        content={
            "error": "Text and target language are required",
            "details": _describe_validation_errors(exc),
            "kind": "validation",
        },
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    content = exc.detail if isinstance(exc.detail, dict) else {"error": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


def create_app(
    settings: Optional[Settings] = None,
    proxy_service: Optional[ProxyService] = None,
    watch_config: bool = True,
) -> FastAPI:
    """
    Build the proxy application.

    The API key is resolved from the environment here, once, and kept by the ProxyService.
    Without explicit ``settings`` the adapters follow the live config, which the watchdog
    observer reloads on file changes.
    """
    if proxy_service is None:
        if settings is None:
            proxy_service = ProxyService.from_settings(load_settings(), pin_settings=False)
        else:
            proxy_service = ProxyService.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        observer = start_config_watcher() if watch_config else None
        yield
        if observer:
            observer.stop()
            observer.join()

    app = FastAPI(title="PollyGlot translation proxy", lifespan=lifespan)
    app.state.proxy_service = proxy_service

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = JSONResponse(status_code=500, content={"error": "Translation failed"})
        response.headers.update(CORS_HEADERS)
        return response

    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)

    app.include_router(health_router)
    app.include_router(translate_router)
    return app


app = create_app()


def main() -> None:
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "5000")))


if __name__ == "__main__":
    main()
