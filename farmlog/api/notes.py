# farmlog/api/notes.py
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from farmlog.api.deps import date_range, delete_or_404, fetch_or_404, get_store, update_or_404
from farmlog.models.entities import ResearchNote
from farmlog.schemas import ResearchNoteCreate, ResearchNoteOut, ResearchNoteUpdate
from farmlog.services.filters import NoteFilter, parse_tags
from farmlog.services.store import RecordStore

router = APIRouter(prefix="/api/notes", tags=["notes"])


@router.get("", response_model=List[ResearchNoteOut])
def list_notes(
    category: Optional[str] = None,
    tags: Optional[str] = None,
    startDate: Optional[str] = None,
    endDate: Optional[str] = None,
    store: RecordStore = Depends(get_store),
):
    start, end = date_range(startDate, endDate)
    return store.list(NoteFilter(category=category, tags=parse_tags(tags), start_date=start, end_date=end))


@router.get("/{record_id}", response_model=ResearchNoteOut)
def get_note(record_id: str, store: RecordStore = Depends(get_store)):
    return fetch_or_404(store, ResearchNote, record_id)


@router.post("", response_model=ResearchNoteOut, status_code=status.HTTP_201_CREATED)
def create_note(payload: ResearchNoteCreate, store: RecordStore = Depends(get_store)):
    return store.create(ResearchNote, payload.model_dump())


@router.put("/{record_id}", response_model=ResearchNoteOut)
def update_note(record_id: str, payload: ResearchNoteUpdate, store: RecordStore = Depends(get_store)):
    return update_or_404(store, ResearchNote, record_id, payload)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_note(record_id: str, store: RecordStore = Depends(get_store)):
    delete_or_404(store, ResearchNote, record_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
