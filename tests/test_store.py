"""Tests for the record store and its mutation helpers."""
from datetime import datetime

import pytest

from farmlog.errors import ConstraintViolation, InsufficientQuantity, ValidationFailed
from farmlog.models.entities import ChickenBatch, InventoryItem, MaintenanceTask, ResearchNote
from farmlog.services.demo_data import DEMO_RECORDS, seed_demo_data
from farmlog.services.filters import InventoryFilter


def _item(store, quantity, reorder_level=None):
    return store.create(InventoryItem, {
        "name": "Layer Feed", "category": "feed", "quantity": quantity,
        "unit": "kg", "reorder_level": reorder_level,
    })


class TestCrud:
    """Tests for create / get / update / delete."""

    def test_round_trip(self, store):
        data = {
            "title": "Lighting", "content": "16L:8D", "date": datetime(2023, 5, 12, 9, 30),
            "tags": ["lighting", "stress"], "category": "environment",
        }
        created = store.create(ResearchNote, data)
        fetched = store.get(ResearchNote, created.id)

        assert fetched.id == created.id
        for field, value in data.items():
            assert getattr(fetched, field) == value

    def test_defaults_are_filled(self, store):
        task = store.create(MaintenanceTask, {"title": "Clean", "category": "cleaning"})
        assert task.completed is False
        assert task.priority == "medium"

    def test_inventory_gets_last_updated(self, store):
        item = _item(store, 5)
        assert isinstance(item.last_updated, datetime)

    def test_partial_update_keeps_other_fields(self, store):
        note = store.create(ResearchNote, {"title": "t", "content": "c", "date": datetime(2023, 1, 1), "category": "x"})
        updated = store.update(ResearchNote, note.id, {"title": "new"})

        assert updated.title == "new"
        assert updated.content == "c"

    def test_update_missing_returns_none(self, store):
        assert store.update(ResearchNote, 42, {"title": "x"}) is None

    def test_delete(self, store):
        note = store.create(ResearchNote, {"title": "t", "content": "c", "date": datetime(2023, 1, 1), "category": "x"})

        assert store.delete(ResearchNote, note.id) is True
        assert store.get(ResearchNote, note.id) is None
        assert store.delete(ResearchNote, note.id) is False

    def test_duplicate_batch_id_is_rejected(self, store):
        batch = {"batch_id": "B001", "breed": "Leghorn", "quantity": 10,
                 "acquisition_date": datetime(2023, 5, 1), "status": "active"}
        store.create(ChickenBatch, batch)

        with pytest.raises(ConstraintViolation) as exc:
            store.create(ChickenBatch, batch)
        assert exc.value.message == "Batch ID already exists"
        assert store.count(ChickenBatch) == 1


class TestToggleTask:
    def test_toggle_is_self_inverse(self, store):
        task = store.create(MaintenanceTask, {"title": "Vaccines", "category": "health", "priority": "high"})

        once = store.toggle_task(task.id)
        twice = store.toggle_task(task.id)

        assert once.completed is True
        assert twice.completed is False
        assert twice.title == "Vaccines"
        assert twice.priority == "high"

    def test_toggle_missing(self, store):
        assert store.toggle_task(999) is None


class TestAdjustInventory:
    """Tests for the quantity floor."""

    def test_overdraw_fails_and_leaves_quantity(self, store):
        item = _item(store, 10)

        with pytest.raises(InsufficientQuantity):
            store.adjust_inventory(item.id, -15)
        assert store.get(InventoryItem, item.id).quantity == 10

    def test_adjust_to_exactly_zero(self, store):
        item = _item(store, 10)
        assert store.adjust_inventory(item.id, -10).quantity == 0

    def test_empty_item_cannot_go_negative(self, store):
        item = _item(store, 0)
        with pytest.raises(InsufficientQuantity):
            store.adjust_inventory(item.id, -1)

    def test_positive_adjustment_refreshes_last_updated(self, store):
        item = _item(store, 1.5)
        adjusted = store.adjust_inventory(item.id, 2.25)

        assert adjusted.quantity == 3.75
        assert adjusted.last_updated >= item.last_updated

    def test_non_finite_adjustment(self, store):
        item = _item(store, 10)

        with pytest.raises(ValidationFailed):
            store.adjust_inventory(item.id, float("inf"))
        assert store.get(InventoryItem, item.id).quantity == 10

    def test_adjust_missing(self, store):
        assert store.adjust_inventory(999, 5) is None

    def test_reorder_items(self, store):
        _item(store, 400, reorder_level=500)
        _item(store, 600, reorder_level=500)

        assert [i.quantity for i in store.reorder_items()] == [400]
        assert len(store.list(InventoryFilter())) == 2


class TestDemoData:
    def test_seeds_only_an_empty_store(self, store):
        assert seed_demo_data(store) is True
        assert seed_demo_data(store) is False

        for model, rows in DEMO_RECORDS:
            assert store.count(model) == len(rows)
