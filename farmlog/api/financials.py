# farmlog/api/financials.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from farmlog.api.deps import (
    date_range,
    delete_or_404,
    fetch_or_404,
    get_store,
    require_user,
    update_or_404,
)
from farmlog.models.entities import FinancialEntry
from farmlog.schemas import (
    FinancialEntryCreate,
    FinancialEntryOut,
    FinancialEntryUpdate,
    FinancialSummaryOut,
)
from farmlog.services.filters import FinancialFilter
from farmlog.services.store import RecordStore

router = APIRouter(prefix="/api/financials", tags=["financials"])


@router.get("", response_model=List[FinancialEntryOut], dependencies=[Depends(require_user)])
def list_financials(
    type: Optional[str] = None,
    category: Optional[str] = None,
    startDate: Optional[str] = None,
    endDate: Optional[str] = None,
    store: RecordStore = Depends(get_store),
):
    start, end = date_range(startDate, endDate)
    return store.list(FinancialFilter(type=type, category=category, start_date=start, end_date=end))


@router.get("/summary", response_model=FinancialSummaryOut)
def financial_summary(store: RecordStore = Depends(get_store)):
    return store.financial_summary()


@router.get("/{record_id}", response_model=FinancialEntryOut)
def get_financial(record_id: str, store: RecordStore = Depends(get_store)):
    return fetch_or_404(store, FinancialEntry, record_id)


@router.post("", response_model=FinancialEntryOut, status_code=status.HTTP_201_CREATED)
def create_financial(payload: FinancialEntryCreate, store: RecordStore = Depends(get_store)):
    return store.create(FinancialEntry, payload.model_dump())


@router.patch("/{record_id}", response_model=FinancialEntryOut)
def update_financial(record_id: str, payload: FinancialEntryUpdate, store: RecordStore = Depends(get_store)):
    return update_or_404(store, FinancialEntry, record_id, payload)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_financial(record_id: str, store: RecordStore = Depends(get_store)):
    delete_or_404(store, FinancialEntry, record_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
