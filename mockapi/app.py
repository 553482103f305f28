from __future__ import annotations

import logging
from typing import Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mockapi.core.config import Settings, get_settings
from mockapi.repositories.json_storage import JsonCollectionStore, StorageError
from mockapi.resources import RESOURCES
from mockapi.routers.collections import build_router
from mockapi.services.collection_service import CollectionService

logger = logging.getLogger(__name__)


def _build_services(settings: Settings) -> Dict[str, CollectionService]:
    services = {}
    for resource in RESOURCES:
        store = JsonCollectionStore(resource.data_file(settings), strict=settings.strict_storage)
        services[resource.name] = CollectionService(resource.name, store)
    return services


async def _storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    return JSONResponse({"message": "Storage failure"}, status_code=500)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory for uvicorn (uvicorn --factory mockapi.app:create_app)."""
    settings = settings or get_settings()
    app = FastAPI(title="Mock Cars & Bookings API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StorageError, _storage_error_handler)

    app.state.settings = settings
    app.state.collections = _build_services(settings)
    for resource in RESOURCES:
        app.include_router(build_router(resource))
        logger.debug("%s served from %s", resource.prefix, resource.data_file(settings))

    @app.get("/")
    def index():
        return {"status": "ok", "collections": [r.name for r in RESOURCES]}

    return app


app = create_app()
