# farmlog/services/demo_data.py
"""Sample farm records for demos and for the in-memory fallback database."""
from __future__ import annotations

import logging
from datetime import datetime

from farmlog.models.entities import (
    ChickenBatch,
    FinancialEntry,
    HealthRecord,
    InventoryItem,
    MaintenanceTask,
    ProductionRecord,
    ResearchNote,
)
from farmlog.services.store import RecordStore

logger = logging.getLogger(__name__)

FINANCIAL_ENTRIES = [
    {"date": datetime(2023, 5, 1), "amount": 100000, "type": "capital",
     "category": "initial_investment", "description": "Initial farm capital"},
    {"date": datetime(2023, 5, 5), "amount": 24500, "type": "investment",
     "category": "equipment", "description": "Coop construction and equipment"},
    {"date": datetime(2023, 5, 10), "amount": 5000, "type": "expense",
     "category": "feed", "description": "Initial feed stock"},
    {"date": datetime(2023, 5, 15), "amount": 2800, "type": "expense",
     "category": "labor", "description": "Farm hand salary"},
    {"date": datetime(2023, 5, 20), "amount": 1200, "type": "expense",
     "category": "utilities", "description": "Electricity and water"},
    {"date": datetime(2023, 5, 25), "amount": 8500, "type": "income",
     "category": "egg_sales", "description": "Egg sales for the week"},
]

CHICKEN_BATCHES = [
    {"batch_id": "B001", "breed": "Rhode Island Red", "quantity": 200,
     "acquisition_date": datetime(2023, 5, 2), "status": "active", "notes": "Healthy batch of layers"},
    {"batch_id": "B002", "breed": "Leghorn", "quantity": 150,
     "acquisition_date": datetime(2023, 5, 10), "status": "active", "notes": "White egg layers"},
]

PRODUCTION_RECORDS = [
    {"date": datetime(2023, 5, 15), "egg_count": 280, "grade_a": 240, "grade_b": 30, "broken": 10, "batch_id": "B001"},
    {"date": datetime(2023, 5, 16), "egg_count": 285, "grade_a": 245, "grade_b": 32, "broken": 8, "batch_id": "B001"},
    {"date": datetime(2023, 5, 17), "egg_count": 290, "grade_a": 250, "grade_b": 28, "broken": 12, "batch_id": "B001"},
    {"date": datetime(2023, 5, 18), "egg_count": 278, "grade_a": 235, "grade_b": 33, "broken": 10, "batch_id": "B001"},
    {"date": datetime(2023, 5, 19), "egg_count": 292, "grade_a": 255, "grade_b": 27, "broken": 10, "batch_id": "B001"},
]

HEALTH_RECORDS = [
    {"date": datetime(2023, 5, 12), "batch_id": "B001", "mortality_count": 2,
     "symptoms": ["lethargy", "reduced_appetite"], "diagnosis": "Mild respiratory infection",
     "treatment": "Administered antibiotics in water"},
    {"date": datetime(2023, 5, 16), "batch_id": "B002", "mortality_count": 1,
     "symptoms": ["weight_loss"], "diagnosis": "Unknown cause",
     "treatment": "Increased vitamin supplements"},
]

MAINTENANCE_TASKS = [
    {"title": "Coop cleaning - Building A", "description": "Deep clean coop building A",
     "due_date": datetime(2023, 5, 19, 14, 0), "category": "cleaning", "priority": "medium"},
    {"title": "Vaccine administration", "description": "Scheduled vaccines for batch B001",
     "due_date": datetime(2023, 5, 20, 9, 0), "category": "health", "priority": "high"},
    {"title": "Feed inventory check", "description": "Verify feed stock levels and place orders if needed",
     "due_date": datetime(2023, 5, 22, 11, 0), "category": "inventory", "priority": "medium"},
    {"title": "Monthly financial review", "description": "Review month-end financials and prepare reports",
     "due_date": datetime(2023, 5, 31, 13, 0), "category": "finance", "priority": "medium"},
]

RESEARCH_NOTES = [
    {"title": "Feed Optimization Study",
     "content": "Initial findings show 12% improvement in egg production when supplementing "
                "with calcium at 4.2% concentration ratio compared to the control group.",
     "date": datetime(2023, 5, 15), "tags": ["feed", "calcium", "production"], "category": "feed"},
    {"title": "Lighting Schedule Experiment",
     "content": "Extended lighting hours (16L:8D) showed a 7% increase in laying frequency but "
                "noted potential stress indicators. Monitoring continues for long-term effects.",
     "date": datetime(2023, 5, 12), "tags": ["lighting", "production", "stress"], "category": "environment"},
    {"title": "Breed Comparison Analysis",
     "content": "Rhode Island Reds showing 14% higher feed conversion efficiency than Leghorns, "
                "but Leghorns producing eggs with 6% higher shell strength on average.",
     "date": datetime(2023, 5, 8), "tags": ["breeds", "comparison", "efficiency"], "category": "genetics"},
]

INVENTORY_ITEMS = [
    {"name": "Layer Feed", "category": "feed", "quantity": 1200, "unit": "kg", "reorder_level": 500},
    {"name": "Calcium Supplement", "category": "feed_supplement", "quantity": 50, "unit": "kg", "reorder_level": 20},
    {"name": "Egg Cartons", "category": "packaging", "quantity": 2000, "unit": "pieces", "reorder_level": 500},
    {"name": "Multivitamins", "category": "medicine", "quantity": 5, "unit": "liters", "reorder_level": 2},
]

DEMO_RECORDS = [
    (FinancialEntry, FINANCIAL_ENTRIES),
    (ChickenBatch, CHICKEN_BATCHES),
    (ProductionRecord, PRODUCTION_RECORDS),
    (HealthRecord, HEALTH_RECORDS),
    (MaintenanceTask, MAINTENANCE_TASKS),
    (ResearchNote, RESEARCH_NOTES),
    (InventoryItem, INVENTORY_ITEMS),
]


def is_empty(store: RecordStore) -> bool:
    return all(store.count(model) == 0 for model, _ in DEMO_RECORDS)


def seed_demo_data(store: RecordStore) -> bool:
    """Loads the sample records unless the farm already has data. Returns True if seeded."""
    if not is_empty(store):
        return False
    for model, rows in DEMO_RECORDS:
        for row in rows:
            store.create(model, row)
    logger.info("loaded demo data (%d records)", sum(len(rows) for _, rows in DEMO_RECORDS))
    return True
