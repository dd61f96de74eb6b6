# farmlog/api/tasks.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from farmlog.api.deps import delete_or_404, fetch_or_404, get_store, parse_id, update_or_404
from farmlog.errors import RecordNotFound
from farmlog.models.entities import MaintenanceTask
from farmlog.schemas import MaintenanceTaskCreate, MaintenanceTaskOut, MaintenanceTaskUpdate
from farmlog.services.filters import TaskFilter, parse_bool
from farmlog.services.store import RecordStore

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=List[MaintenanceTaskOut])
def list_tasks(
    completed: Optional[str] = None,
    category: Optional[str] = None,
    priority: Optional[str] = None,
    store: RecordStore = Depends(get_store),
):
    flt = TaskFilter(
        completed=parse_bool(completed, "completed"),
        category=category,
        priority=priority,
    )
    return store.list(flt)


@router.get("/{record_id}", response_model=MaintenanceTaskOut)
def get_task(record_id: str, store: RecordStore = Depends(get_store)):
    return fetch_or_404(store, MaintenanceTask, record_id)


@router.post("", response_model=MaintenanceTaskOut, status_code=status.HTTP_201_CREATED)
def create_task(payload: MaintenanceTaskCreate, store: RecordStore = Depends(get_store)):
    return store.create(MaintenanceTask, payload.model_dump())


@router.put("/{record_id}", response_model=MaintenanceTaskOut)
def update_task(record_id: str, payload: MaintenanceTaskUpdate, store: RecordStore = Depends(get_store)):
    return update_or_404(store, MaintenanceTask, record_id, payload)


@router.post("/{record_id}/toggle", response_model=MaintenanceTaskOut)
def toggle_task(record_id: str, store: RecordStore = Depends(get_store)):
    task = store.toggle_task(parse_id(record_id))
    if task is None:
        raise RecordNotFound(MaintenanceTask.label)
    return task


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(record_id: str, store: RecordStore = Depends(get_store)):
    delete_or_404(store, MaintenanceTask, record_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
