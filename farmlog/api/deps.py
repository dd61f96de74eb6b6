# farmlog/api/deps.py
from __future__ import annotations

from typing import Optional

from fastapi import Depends, Request

from farmlog.errors import InvalidIdentifier, NotAuthenticated, RecordNotFound
from farmlog.models.user import User
from farmlog.schemas import PartialUpdate
from farmlog.services.auth import get_current_user
from farmlog.services.filters import parse_datetime
from farmlog.services.store import RecordStore


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def require_user(request: Request, store: RecordStore = Depends(get_store)) -> User:
    user = get_current_user(request, store)
    if user is None:
        raise NotAuthenticated()
    return user


MAX_ID = 2**63 - 1  # largest SQL BIGINT


def parse_id(raw: str) -> int:
    # ids arrive as path strings; "12abc", "-3" or out-of-range numbers never reach the store
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidIdentifier()
    value = int(raw)
    if value > MAX_ID:
        raise InvalidIdentifier()
    return value


def date_range(start_date: Optional[str], end_date: Optional[str]):
    return parse_datetime(start_date), parse_datetime(end_date, end_of_day=True)


# ---------- CRUD helpers shared by the entity routers ----------

def fetch_or_404(store: RecordStore, model: type, raw_id: str):
    record = store.get(model, parse_id(raw_id))
    if record is None:
        raise RecordNotFound(model.label)
    return record


def update_or_404(store: RecordStore, model: type, raw_id: str, payload: PartialUpdate):
    record_id = parse_id(raw_id)
    record = store.update(model, record_id, payload.changes())
    if record is None:
        raise RecordNotFound(model.label)
    return record


def delete_or_404(store: RecordStore, model: type, raw_id: str) -> None:
    if not store.delete(model, parse_id(raw_id)):
        raise RecordNotFound(model.label)
