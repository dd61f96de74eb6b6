from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    Column, Integer, Float, String, Text, DateTime, Boolean, JSON, UniqueConstraint
)

from .base import Base


# ---------- Finances ----------

class FinancialEntry(Base):
    __tablename__ = "financial_entries"
    label = "Financial entry"

    id = Column(Integer, primary_key=True)
    date = Column(DateTime, nullable=False, default=datetime.now, index=True)
    amount = Column(Float, nullable=False)           # always positive, meaning comes from type
    type = Column(String(20), nullable=False)        # income|expense|investment|capital
    category = Column(String(100), nullable=False)
    description = Column(Text)
    tags = Column(JSON)


# ---------- Flock & production ----------

class ProductionRecord(Base):
    __tablename__ = "production_records"
    label = "Production record"

    id = Column(Integer, primary_key=True)
    date = Column(DateTime, nullable=False, default=datetime.now, index=True)
    egg_count = Column(Integer, nullable=False)
    grade_a = Column(Integer)
    grade_b = Column(Integer)
    broken = Column(Integer)
    notes = Column(Text)
    batch_id = Column(String(50))                    # ChickenBatch.batch_id, not enforced


class ChickenBatch(Base):
    __tablename__ = "chicken_batches"
    __table_args__ = (UniqueConstraint("batch_id", name="uq_chicken_batches_batch_id"),)
    label = "Chicken batch"

    id = Column(Integer, primary_key=True)
    batch_id = Column(String(50), nullable=False)
    breed = Column(String(100), nullable=False)
    quantity = Column(Integer, nullable=False)       # head count at acquisition
    acquisition_date = Column(DateTime, nullable=False)
    status = Column(String(20), nullable=False)      # active|sold|deceased
    notes = Column(Text)


class HealthRecord(Base):
    __tablename__ = "health_records"
    label = "Health record"

    id = Column(Integer, primary_key=True)
    date = Column(DateTime, nullable=False, default=datetime.now, index=True)
    batch_id = Column(String(50), nullable=False)    # ChickenBatch.batch_id, not enforced
    mortality_count = Column(Integer, default=0)
    symptoms = Column(JSON)
    diagnosis = Column(Text)
    treatment = Column(Text)
    notes = Column(Text)


# ---------- Farm operations ----------

class MaintenanceTask(Base):
    __tablename__ = "maintenance_tasks"
    label = "Task"

    id = Column(Integer, primary_key=True)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    due_date = Column(DateTime)
    completed = Column(Boolean, nullable=False, default=False)
    category = Column(String(100), nullable=False)   # cleaning|repair|routine|...
    priority = Column(String(10), nullable=False, default="medium")


class ResearchNote(Base):
    __tablename__ = "research_notes"
    label = "Research note"

    id = Column(Integer, primary_key=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    date = Column(DateTime, nullable=False, default=datetime.now, index=True)
    tags = Column(JSON)
    category = Column(String(100), nullable=False)


class InventoryItem(Base):
    __tablename__ = "inventory_items"
    label = "Inventory item"

    id = Column(Integer, primary_key=True)
    name = Column(String(200), nullable=False)
    category = Column(String(100), nullable=False)   # feed|medicine|equipment|...
    quantity = Column(Float, nullable=False)         # never below 0
    unit = Column(String(30), nullable=False)        # kg|liters|pieces|...
    reorder_level = Column(Float)
    last_updated = Column(DateTime, nullable=False, default=datetime.now)
    notes = Column(Text)

    def needs_reorder(self) -> bool:
        return self.reorder_level is not None and self.quantity <= self.reorder_level
