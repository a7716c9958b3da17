"""FastAPI dependencies for the shared clients built at startup."""

from fastapi import Request

from config import Settings, settings
from services.fishwatch import FishWatchClient
from services.store import FishStore


def get_settings() -> Settings:
    return settings


def get_store(request: Request) -> FishStore:
    return request.app.state.store


def get_origin(request: Request) -> FishWatchClient:
    return request.app.state.origin
