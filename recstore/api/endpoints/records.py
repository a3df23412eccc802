"""FastAPI endpoints exposing a RecordStore as JSON."""

import logging

from fastapi import APIRouter, FastAPI, HTTPException, Response, status
from pydantic import BaseModel

from recstore.config import StoreConfig, get_store_config
from recstore.store import InvalidLabelError, ListFilter, Record, RecordCounts, RecordStore

logger = logging.getLogger(__name__)


class CreateRecordRequest(BaseModel):
    """Request model for adding a record."""

    label: str
    id: int | None = None


class CreateRecordResponse(BaseModel):
    """Response model for an added record."""

    id: int


class StoreMetaResponse(BaseModel):
    """Response model for store metadata."""

    name: str


def create_records_router(
    store: RecordStore, default_filter: ListFilter = ListFilter.INCOMPLETE
) -> APIRouter:
    """Create the records API router bound to ``store``."""
    router = APIRouter(prefix="/api/records", tags=["Records"])

    @router.get("", response_model=list[Record])
    def list_records(filter: ListFilter | None = None):
        """List records; incomplete ones only unless ``filter=all``."""
        return store.list(filter or default_filter)

    @router.get("/counts", response_model=RecordCounts)
    def count_records():
        return store.count()

    @router.get("/meta", response_model=StoreMetaResponse)
    def store_meta():
        return StoreMetaResponse(name=store.name)

    @router.get("/{record_id}", response_model=Record)
    def get_record(record_id: int):
        record = store.get_by_id(record_id)
        if record is None:
            raise HTTPException(status_code=404, detail="Record not found")
        return record

    @router.post(
        "", response_model=CreateRecordResponse, status_code=status.HTTP_201_CREATED
    )
    def add_record(request: CreateRecordRequest):
        try:
            record_id = store.add(request.label, request.id)
        except InvalidLabelError as e:
            raise HTTPException(status_code=422, detail=str(e))
        logger.info("Added record %s to %s", record_id, store.name)
        return CreateRecordResponse(id=record_id)

    @router.post("/{record_id}/complete", status_code=status.HTTP_204_NO_CONTENT)
    def complete_record(record_id: int):
        store.complete(record_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    # Registered before "/{record_id}" so "completed" is not parsed as an id.
    @router.delete("/completed", status_code=status.HTTP_204_NO_CONTENT)
    def purge_completed():
        store.remove_completed()
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
    def remove_record(record_id: int):
        store.remove_by_id(record_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


def create_app(
    store: RecordStore | None = None, config: StoreConfig | None = None
) -> FastAPI:
    """Build a standalone app serving one store."""
    config = config or get_store_config()
    store = store or RecordStore.from_config(config=config)
    app = FastAPI(title="recstore")
    app.state.store = store
    app.include_router(create_records_router(store, ListFilter(config.default_filter)))
    return app
