# farmlog/api/inventory.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from farmlog.api.deps import delete_or_404, fetch_or_404, get_store, parse_id, update_or_404
from farmlog.errors import RecordNotFound
from farmlog.models.entities import InventoryItem
from farmlog.schemas import (
    InventoryAdjustment,
    InventoryItemCreate,
    InventoryItemOut,
    InventoryItemUpdate,
)
from farmlog.services.filters import InventoryFilter, parse_bool
from farmlog.services.store import RecordStore

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


@router.get("", response_model=List[InventoryItemOut])
def list_inventory(
    category: Optional[str] = None,
    belowReorderLevel: Optional[str] = None,
    store: RecordStore = Depends(get_store),
):
    below = parse_bool(belowReorderLevel, "belowReorderLevel") or False
    return store.list(InventoryFilter(category=category, below_reorder_level=below))


@router.get("/reorder", response_model=List[InventoryItemOut])
def reorder_list(store: RecordStore = Depends(get_store)):
    return store.reorder_items()


@router.get("/{record_id}", response_model=InventoryItemOut)
def get_item(record_id: str, store: RecordStore = Depends(get_store)):
    return fetch_or_404(store, InventoryItem, record_id)


@router.post("", response_model=InventoryItemOut, status_code=status.HTTP_201_CREATED)
def create_item(payload: InventoryItemCreate, store: RecordStore = Depends(get_store)):
    return store.create(InventoryItem, payload.model_dump())


@router.put("/{record_id}", response_model=InventoryItemOut)
def update_item(record_id: str, payload: InventoryItemUpdate, store: RecordStore = Depends(get_store)):
    return update_or_404(store, InventoryItem, record_id, payload)


@router.post("/{record_id}/adjust", response_model=InventoryItemOut)
def adjust_item(record_id: str, payload: InventoryAdjustment, store: RecordStore = Depends(get_store)):
    item = store.adjust_inventory(parse_id(record_id), payload.adjustment)
    if item is None:
        raise RecordNotFound(InventoryItem.label)
    return item


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_item(record_id: str, store: RecordStore = Depends(get_store)):
    delete_or_404(store, InventoryItem, record_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
