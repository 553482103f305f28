from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from mockapi.resources import CollectionResource
from mockapi.services.collection_service import CollectionService, RecordNotFoundError
from mockapi.services.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, parse_int_param


def _get_service(request: Request, name: str) -> CollectionService:
    services = getattr(getattr(request.app, "state", None), "collections", None) or {}
    svc = services.get(name)
    if not svc:
        raise RuntimeError(f"CollectionService '{name}' not configured")
    return svc


def build_router(resource: CollectionResource) -> APIRouter:
    """APIRouter exposing list/get/create/update/delete for one collection."""
    router = APIRouter(prefix=resource.prefix, tags=[resource.name])

    def _not_found() -> JSONResponse:
        return JSONResponse({"message": resource.not_found_message()}, status_code=404)

    @router.get("")
    def list_records(request: Request, page: Optional[str] = None, limit: Optional[str] = None):
        svc = _get_service(request, resource.name)
        result = svc.list(
            parse_int_param(page, DEFAULT_PAGE),
            parse_int_param(limit, DEFAULT_LIMIT),
        )
        return result.to_dict()

    @router.get("/{record_id}")
    def get_record(record_id: str, request: Request):
        svc = _get_service(request, resource.name)
        try:
            return svc.get(record_id)
        except RecordNotFoundError:
            return _not_found()

    @router.post("", status_code=201)
    def create_record(request: Request, payload: Optional[Dict[str, Any]] = Body(None)):
        svc = _get_service(request, resource.name)
        record = svc.create(payload or {})
        return {"message": resource.created_message(), resource.created_key: record}

    @router.put("/{record_id}")
    def update_record(record_id: str, request: Request, payload: Optional[Dict[str, Any]] = Body(None)):
        svc = _get_service(request, resource.name)
        try:
            record = svc.update(record_id, payload or {})
        except RecordNotFoundError:
            return _not_found()
        return {"message": resource.updated_message(record_id), resource.updated_key: record}

    @router.delete("/{record_id}")
    def delete_record(record_id: str, request: Request):
        svc = _get_service(request, resource.name)
        try:
            svc.delete(record_id)
        except RecordNotFoundError:
            return _not_found()
        return {"message": resource.deleted_message(record_id)}

    return router
