# farmlog/services/filters.py
"""
One filter type per record collection.

Each filter knows its model, its SQL conditions (equality and inclusive date
ranges, combined with AND), its default ordering and an optional in-memory
post filter for predicates that cannot be expressed as plain equality
(tag intersection, below reorder level).
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import ClassVar, List, Optional, Sequence

from sqlalchemy import case

from farmlog.errors import ValidationFailed
from farmlog.models.entities import (
    ChickenBatch,
    FinancialEntry,
    HealthRecord,
    InventoryItem,
    MaintenanceTask,
    ProductionRecord,
    ResearchNote,
)

_DATE_FORMATS = ("%Y-%m-%d", "%d.%m.%Y", "%Y-%m-%d %H:%M", "%d.%m.%Y %H:%M")


# ---------- Query parameter parsing ----------

def parse_datetime(value: Optional[str], *, end_of_day: bool = False) -> Optional[datetime]:
    """
    Parses a date or datetime query value. A bare date used as the upper
    bound of a range covers the whole day.
    """
    if value is None or value.strip() == "":
        return None
    raw = value.strip()
    parsed: Optional[datetime] = None
    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        for fmt in _DATE_FORMATS:
            try:
                parsed = datetime.strptime(raw, fmt)
                break
            except ValueError:
                continue
    if parsed is None:
        raise ValidationFailed(f"Invalid date: {value!r}")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    if end_of_day and _is_bare_date(raw):
        parsed = datetime.combine(parsed.date(), time.max)
    return parsed


def _is_bare_date(raw: str) -> bool:
    try:
        date.fromisoformat(raw)
        return True
    except ValueError:
        return len(raw) == 10 and raw.count(".") == 2


def parse_bool(value: Optional[str], name: str) -> Optional[bool]:
    if value is None or value == "":
        return None
    lowered = value.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValidationFailed(f"Invalid value for {name}: expected 'true' or 'false'")


def parse_tags(value: Optional[str]) -> Optional[List[str]]:
    if value is None:
        return None
    tags = [t.strip() for t in value.split(",") if t.strip()]
    return tags or None


# ---------- Filters ----------

class RecordFilter:
    model: ClassVar[type]

    def conditions(self) -> list:
        return []

    def order_by(self) -> list:
        return [self.model.id.asc()]

    def post_filter(self, rows: Sequence) -> list:
        return list(rows)


def _date_range(column, start: Optional[datetime], end: Optional[datetime]) -> list:
    out = []
    if start is not None:
        out.append(column >= start)
    if end is not None:
        out.append(column <= end)
    return out


@dataclass
class FinancialFilter(RecordFilter):
    model: ClassVar[type] = FinancialEntry

    type: Optional[str] = None
    category: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    def conditions(self) -> list:
        out = []
        if self.type:
            out.append(FinancialEntry.type == self.type)
        if self.category:
            out.append(FinancialEntry.category == self.category)
        return out + _date_range(FinancialEntry.date, self.start_date, self.end_date)

    def order_by(self) -> list:
        return [FinancialEntry.date.desc(), FinancialEntry.id.desc()]


@dataclass
class ProductionFilter(RecordFilter):
    model: ClassVar[type] = ProductionRecord

    batch_id: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    def conditions(self) -> list:
        out = []
        if self.batch_id:
            out.append(ProductionRecord.batch_id == self.batch_id)
        return out + _date_range(ProductionRecord.date, self.start_date, self.end_date)

    def order_by(self) -> list:
        return [ProductionRecord.date.desc(), ProductionRecord.id.desc()]


@dataclass
class BatchFilter(RecordFilter):
    model: ClassVar[type] = ChickenBatch

    status: Optional[str] = None
    breed: Optional[str] = None

    def conditions(self) -> list:
        out = []
        if self.status:
            out.append(ChickenBatch.status == self.status)
        if self.breed:
            out.append(ChickenBatch.breed == self.breed)
        return out

    def order_by(self) -> list:
        return [ChickenBatch.acquisition_date.desc(), ChickenBatch.id.desc()]


@dataclass
class HealthFilter(RecordFilter):
    model: ClassVar[type] = HealthRecord

    batch_id: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    def conditions(self) -> list:
        out = []
        if self.batch_id:
            out.append(HealthRecord.batch_id == self.batch_id)
        return out + _date_range(HealthRecord.date, self.start_date, self.end_date)

    def order_by(self) -> list:
        return [HealthRecord.date.desc(), HealthRecord.id.desc()]


_PRIORITY_RANK = case(
    {"high": 0, "medium": 1, "low": 2},
    value=MaintenanceTask.priority,
    else_=1,
)


@dataclass
class TaskFilter(RecordFilter):
    model: ClassVar[type] = MaintenanceTask

    completed: Optional[bool] = None
    category: Optional[str] = None
    priority: Optional[str] = None

    def conditions(self) -> list:
        out = []
        if self.completed is not None:
            out.append(MaintenanceTask.completed == self.completed)
        if self.category:
            out.append(MaintenanceTask.category == self.category)
        if self.priority:
            out.append(MaintenanceTask.priority == self.priority)
        return out

    def order_by(self) -> list:
        # Due soonest first, undated tasks after all dated ones, then by priority
        return [
            MaintenanceTask.due_date.is_(None).asc(),
            MaintenanceTask.due_date.asc(),
            _PRIORITY_RANK.asc(),
            MaintenanceTask.id.asc(),
        ]


@dataclass
class NoteFilter(RecordFilter):
    model: ClassVar[type] = ResearchNote

    category: Optional[str] = None
    tags: Optional[List[str]] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    def conditions(self) -> list:
        out = []
        if self.category:
            out.append(ResearchNote.category == self.category)
        return out + _date_range(ResearchNote.date, self.start_date, self.end_date)

    def order_by(self) -> list:
        return [ResearchNote.date.desc(), ResearchNote.id.desc()]

    def post_filter(self, rows: Sequence) -> list:
        if not self.tags:
            return list(rows)
        wanted = set(self.tags)
        return [n for n in rows if n.tags and wanted.intersection(n.tags)]


@dataclass
class InventoryFilter(RecordFilter):
    model: ClassVar[type] = InventoryItem

    category: Optional[str] = None
    below_reorder_level: bool = False

    def conditions(self) -> list:
        out = []
        if self.category:
            out.append(InventoryItem.category == self.category)
        return out

    def order_by(self) -> list:
        return [InventoryItem.name.asc(), InventoryItem.id.asc()]

    def post_filter(self, rows: Sequence) -> list:
        if not self.below_reorder_level:
            return list(rows)
        return [item for item in rows if item.needs_reorder()]
