# farmlog/api/health.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from farmlog.api.deps import date_range, delete_or_404, fetch_or_404, get_store, update_or_404
from farmlog.models.entities import HealthRecord
from farmlog.schemas import HealthRecordCreate, HealthRecordOut, HealthRecordUpdate, HealthSummaryOut
from farmlog.services.filters import HealthFilter
from farmlog.services.store import RecordStore

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", response_model=List[HealthRecordOut])
def list_health(
    batchId: Optional[str] = None,
    startDate: Optional[str] = None,
    endDate: Optional[str] = None,
    store: RecordStore = Depends(get_store),
):
    start, end = date_range(startDate, endDate)
    return store.list(HealthFilter(batch_id=batchId, start_date=start, end_date=end))


@router.get("/summary", response_model=HealthSummaryOut)
def health_summary(store: RecordStore = Depends(get_store)):
    return store.health_summary()


@router.get("/{record_id}", response_model=HealthRecordOut)
def get_health(record_id: str, store: RecordStore = Depends(get_store)):
    return fetch_or_404(store, HealthRecord, record_id)


@router.post("", response_model=HealthRecordOut, status_code=status.HTTP_201_CREATED)
def create_health(payload: HealthRecordCreate, store: RecordStore = Depends(get_store)):
    return store.create(HealthRecord, payload.model_dump())


@router.put("/{record_id}", response_model=HealthRecordOut)
def update_health(record_id: str, payload: HealthRecordUpdate, store: RecordStore = Depends(get_store)):
    return update_or_404(store, HealthRecord, record_id, payload)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_health(record_id: str, store: RecordStore = Depends(get_store)):
    delete_or_404(store, HealthRecord, record_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
