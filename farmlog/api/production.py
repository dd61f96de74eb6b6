# farmlog/api/production.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from farmlog.api.deps import date_range, delete_or_404, fetch_or_404, get_store, update_or_404
from farmlog.config import settings
from farmlog.models.entities import ProductionRecord
from farmlog.schemas import (
    ProductionRecordCreate,
    ProductionRecordOut,
    ProductionRecordUpdate,
    ProductionSummaryOut,
)
from farmlog.services.filters import ProductionFilter
from farmlog.services.store import RecordStore

router = APIRouter(prefix="/api/production", tags=["production"])


@router.get("", response_model=List[ProductionRecordOut])
def list_production(
    batchId: Optional[str] = None,
    startDate: Optional[str] = None,
    endDate: Optional[str] = None,
    store: RecordStore = Depends(get_store),
):
    start, end = date_range(startDate, endDate)
    return store.list(ProductionFilter(batch_id=batchId, start_date=start, end_date=end))


@router.get("/summary", response_model=ProductionSummaryOut)
def production_summary(
    days: int = Query(settings.DEFAULT_SUMMARY_DAYS, ge=0, le=settings.MAX_SUMMARY_DAYS),
    store: RecordStore = Depends(get_store),
):
    return store.production_summary(days=days)


@router.get("/{record_id}", response_model=ProductionRecordOut)
def get_production(record_id: str, store: RecordStore = Depends(get_store)):
    return fetch_or_404(store, ProductionRecord, record_id)


@router.post("", response_model=ProductionRecordOut, status_code=status.HTTP_201_CREATED)
def create_production(payload: ProductionRecordCreate, store: RecordStore = Depends(get_store)):
    return store.create(ProductionRecord, payload.model_dump())


@router.patch("/{record_id}", response_model=ProductionRecordOut)
def update_production(record_id: str, payload: ProductionRecordUpdate, store: RecordStore = Depends(get_store)):
    return update_or_404(store, ProductionRecord, record_id, payload)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_production(record_id: str, store: RecordStore = Depends(get_store)):
    delete_or_404(store, ProductionRecord, record_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
