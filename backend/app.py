"""FastAPI application entry point for the fishcache proxy."""

import logging
import sys

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, settings
from errors import StoreUnavailable, register_error_handlers
from services.fishwatch import FishWatchClient
from services.store import FishStore

# Structured logging: JSON for production, human-readable for local
if settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def create_app(cfg: Settings = settings) -> FastAPI:
    app = FastAPI(title="FishCache API", version="1.0.0")

    # Shared clients; connected on startup, closed on shutdown
    app.state.store = FishStore(cfg.redis_url)
    app.state.origin = FishWatchClient(cfg.fishwatch_base_url, timeout=cfg.origin_timeout_seconds)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        if cfg.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.fish import router as fish_router
    from routes.health import router as health_router

    app.include_router(health_router)
    app.include_router(fish_router)

    @app.on_event("startup")
    async def _startup() -> None:
        problems = cfg.validate()
        if problems:
            logger.warning("Configuration problems: %s", "; ".join(problems))

        try:
            await app.state.store.connect()
        except StoreUnavailable:
            if cfg.store_required:
                logger.error("Redis is required (STORE_REQUIRED=true); refusing to start")
                raise
            logger.warning("Continuing without redis; every lookup will go to FishWatch")

    @app.on_event("shutdown")
    async def _shutdown() -> None:
        await app.state.store.close()
        await app.state.origin.aclose()

    return app


app = create_app()


def serve() -> None:
    """Run the API with uvicorn on HOST:PORT."""
    logger.info("App listening on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    serve()
