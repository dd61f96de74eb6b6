# farmlog/api/chickens.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Response

from farmlog.api.deps import delete_or_404, fetch_or_404, get_store, update_or_404
from farmlog.models.entities import ChickenBatch
from farmlog.schemas import ChickenBatchCreate, ChickenBatchOut, ChickenBatchUpdate
from farmlog.services.filters import BatchFilter
from farmlog.services.store import RecordStore

router = APIRouter(prefix="/api/chickens", tags=["chickens"])


@router.get("", response_model=List[ChickenBatchOut])
def list_batches(
    status: Optional[str] = None,
    breed: Optional[str] = None,
    store: RecordStore = Depends(get_store),
):
    return store.list(BatchFilter(status=status, breed=breed))


@router.get("/{record_id}", response_model=ChickenBatchOut)
def get_batch(record_id: str, store: RecordStore = Depends(get_store)):
    return fetch_or_404(store, ChickenBatch, record_id)


@router.post("", response_model=ChickenBatchOut, status_code=201)
def create_batch(payload: ChickenBatchCreate, store: RecordStore = Depends(get_store)):
    return store.create(ChickenBatch, payload.model_dump())


@router.put("/{record_id}", response_model=ChickenBatchOut)
def update_batch(record_id: str, payload: ChickenBatchUpdate, store: RecordStore = Depends(get_store)):
    return update_or_404(store, ChickenBatch, record_id, payload)


@router.delete("/{record_id}", status_code=204)
def delete_batch(record_id: str, store: RecordStore = Depends(get_store)):
    delete_or_404(store, ChickenBatch, record_id)
    return Response(status_code=204)
