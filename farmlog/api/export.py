# farmlog/api/export.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from farmlog.api.deps import get_store, require_user
from farmlog.errors import RecordNotFound
from farmlog.schemas import (
    ChickenBatchOut,
    FinancialEntryOut,
    HealthRecordOut,
    InventoryItemOut,
    MaintenanceTaskOut,
    ProductionRecordOut,
    ResearchNoteOut,
)
from farmlog.services.export import records_to_csv
from farmlog.services.filters import (
    BatchFilter,
    FinancialFilter,
    HealthFilter,
    InventoryFilter,
    NoteFilter,
    ProductionFilter,
    TaskFilter,
)
from farmlog.services.store import RecordStore

router = APIRouter(prefix="/api/export", tags=["export"])

# collection name -> (filter type, row schema, login required)
COLLECTIONS = {
    "financials": (FinancialFilter, FinancialEntryOut, True),
    "production": (ProductionFilter, ProductionRecordOut, False),
    "chickens": (BatchFilter, ChickenBatchOut, False),
    "health": (HealthFilter, HealthRecordOut, False),
    "tasks": (TaskFilter, MaintenanceTaskOut, False),
    "notes": (NoteFilter, ResearchNoteOut, False),
    "inventory": (InventoryFilter, InventoryItemOut, False),
}


@router.get("/{collection}.csv")
def export_csv(collection: str, request: Request, store: RecordStore = Depends(get_store)):
    entry = COLLECTIONS.get(collection)
    if entry is None:
        raise RecordNotFound("Collection")
    filter_cls, schema, needs_login = entry
    if needs_login:
        require_user(request, store)
    body = records_to_csv(schema, store.list(filter_cls()))
    return Response(
        content=body,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{collection}.csv"'},
    )
