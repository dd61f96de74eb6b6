# farmlog/services/store.py
"""
Record store on top of SQLAlchemy.

The store owns an engine and a session factory; one session per call, closed
before the call returns. Records are returned detached with their loaded
state (``expire_on_commit=False``), ready for serialization.
"""
from __future__ import annotations

import logging
import math
from contextlib import contextmanager
from datetime import datetime, timedelta
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from farmlog.errors import ConstraintViolation, InsufficientQuantity, ValidationFailed
from farmlog.models.base import Base, build_engine, make_session_factory
from farmlog.models.entities import ChickenBatch, HealthRecord, InventoryItem, MaintenanceTask
from farmlog.models.user import User
from farmlog.services import summaries
from farmlog.services.filters import (
    BatchFilter,
    FinancialFilter,
    InventoryFilter,
    ProductionFilter,
    RecordFilter,
)

logger = logging.getLogger(__name__)

_UNIQUE_MESSAGES = {
    ChickenBatch: "Batch ID already exists",
    User: "Username already exists",
}


class RecordStore:
    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = make_session_factory(engine)

    @classmethod
    def from_url(cls, url: str) -> "RecordStore":
        return cls(build_engine(url))

    def create_schema(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.session_factory()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    # ---------- Generic CRUD ----------

    def create(self, model: type, data: Dict[str, Any]):
        if hasattr(model, "last_updated"):
            data = {**data, "last_updated": datetime.now()}
        with self.session() as db:
            record = model(**data)
            db.add(record)
            self._flush(db, model)
            db.refresh(record)
            logger.debug("created %s #%s", model.__tablename__, record.id)
            return record

    def list(self, flt: RecordFilter) -> list:
        stmt = select(flt.model)
        conditions = flt.conditions()
        if conditions:
            stmt = stmt.where(*conditions)
        stmt = stmt.order_by(*flt.order_by())
        with self.session() as db:
            rows = db.scalars(stmt).all()
        return flt.post_filter(rows)

    def get(self, model: type, record_id: int):
        with self.session() as db:
            return db.get(model, record_id)

    def update(self, model: type, record_id: int, changes: Dict[str, Any]):
        with self.session() as db:
            record = db.get(model, record_id)
            if record is None:
                return None
            if hasattr(model, "last_updated"):
                changes = {**changes, "last_updated": datetime.now()}
            for field, value in changes.items():
                setattr(record, field, value)
            self._flush(db, model)
            logger.debug("updated %s #%s: %s", model.__tablename__, record_id, sorted(changes))
            return record

    def delete(self, model: type, record_id: int) -> bool:
        with self.session() as db:
            record = db.get(model, record_id)
            if record is None:
                return False
            db.delete(record)
            logger.debug("deleted %s #%s", model.__tablename__, record_id)
            return True

    def count(self, model: type) -> int:
        with self.session() as db:
            return db.scalar(select(func.count()).select_from(model)) or 0

    def _flush(self, db: Session, model: type) -> None:
        try:
            db.flush()
        except IntegrityError as exc:
            message = _UNIQUE_MESSAGES.get(model, f"{model.label} violates a database constraint")
            logger.warning("constraint violation on %s: %s", model.__tablename__, exc.orig)
            raise ConstraintViolation(message) from exc

    # ---------- Mutation helpers ----------

    def toggle_task(self, task_id: int) -> Optional[MaintenanceTask]:
        """Flips ``completed`` with a single UPDATE; None if the task does not exist."""
        stmt = (
            update(MaintenanceTask)
            .where(MaintenanceTask.id == task_id)
            .values(completed=~MaintenanceTask.completed)
            .execution_options(synchronize_session=False)
        )
        with self.session() as db:
            if db.execute(stmt).rowcount == 0:
                return None
            return db.get(MaintenanceTask, task_id)

    def adjust_inventory(self, item_id: int, adjustment: float) -> Optional[InventoryItem]:
        """
        Adds ``adjustment`` (may be negative) to the item's quantity.

        The floor check and the write are one conditional UPDATE, so two
        concurrent adjustments cannot drive the quantity below zero.
        Raises InsufficientQuantity and leaves the row untouched if they would.
        """
        if not math.isfinite(adjustment):
            raise ValidationFailed("Adjustment must be a finite number")
        stmt = (
            update(InventoryItem)
            .where(InventoryItem.id == item_id)
            .where(InventoryItem.quantity + adjustment >= 0)
            .values(quantity=InventoryItem.quantity + adjustment, last_updated=datetime.now())
            .execution_options(synchronize_session=False)
        )
        with self.session() as db:
            if db.execute(stmt).rowcount == 0:
                item = db.get(InventoryItem, item_id)
                if item is None:
                    return None
                logger.warning(
                    "rejected adjustment %s on inventory item #%s (quantity %s)",
                    adjustment, item_id, item.quantity,
                )
                raise InsufficientQuantity()
            return db.get(InventoryItem, item_id)

    # ---------- Summaries ----------

    def financial_summary(self) -> dict:
        return summaries.financial_summary(self.list(FinancialFilter()))

    def production_summary(self, days: int = 30, now: Optional[datetime] = None) -> dict:
        since = (now or datetime.now()) - timedelta(days=days)
        return summaries.production_summary(self.list(ProductionFilter(start_date=since)))

    def health_summary(self) -> dict:
        # symptom ties go to the first recorded, so scan in insertion order
        with self.session() as db:
            records = db.scalars(select(HealthRecord).order_by(HealthRecord.id.asc())).all()
        return summaries.health_summary(records, self.list(BatchFilter()))

    def reorder_items(self) -> List[InventoryItem]:
        return summaries.reorder_view(self.list(InventoryFilter()))

    # ---------- Users ----------

    def get_user(self, user_id: int) -> Optional[User]:
        return self.get(User, user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self.session() as db:
            return db.scalars(select(User).where(User.username == username)).first()

    def create_user(self, username: str, password_hash: str) -> User:
        return self.create(User, {"username": username, "password": password_hash})
