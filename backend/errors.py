"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)

DATA_UNAVAILABLE = "Data unavailable"


class FishCacheError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class StoreUnavailable(FishCacheError):
    def __init__(self, reason: str):
        super().__init__(f"Store unavailable: {reason}", status_code=503)


class OriginUnavailable(FishCacheError):
    def __init__(self, species: str, reason: str):
        super().__init__(f"Origin fetch failed for {species}: {reason}", status_code=404)
        self.species = species


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(OriginUnavailable)
    async def handle_origin_unavailable(_request: Request, exc: OriginUnavailable):
        return PlainTextResponse(DATA_UNAVAILABLE, status_code=exc.status_code)

    @app.exception_handler(FishCacheError)
    async def handle_fishcache_error(_request: Request, exc: FishCacheError):
        if exc.status_code >= 500:
            logger.error("%s", exc)
        return JSONResponse({"error": str(exc)}, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=500,
        )
