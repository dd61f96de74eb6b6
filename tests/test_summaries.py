"""Tests for the aggregate summaries."""
from datetime import datetime
from types import SimpleNamespace

from farmlog.models.entities import ChickenBatch, HealthRecord, ProductionRecord
from farmlog.services import summaries


def _production(day, eggs, a=None, b=None, broken=None, hour=8):
    return SimpleNamespace(date=datetime(2023, 5, day, hour), egg_count=eggs, grade_a=a, grade_b=b, broken=broken)


class TestRounding:
    """Tests for half-up rounding of percentages and averages."""

    def test_half_rounds_up(self):
        assert summaries.round_half_up(0.5) == 1
        assert summaries.round_half_up(2.5) == 3
        assert summaries.round_half_up(2.49) == 2

    def test_percent_of_zero_total(self):
        assert summaries._percent(5, 0) == 0


class TestFinancialSummary:
    """Tests for totals per entry type."""

    def test_demo_figures_reconcile(self, demo_store):
        summary = demo_store.financial_summary()

        assert summary["totalCapital"] == 100000
        assert summary["totalInvestments"] == 24500
        assert summary["totalIncome"] == 8500
        # 5000 + 2800 + 1200
        assert summary["totalExpenses"] == 9000
        assert summary["expensesByCategory"] == {"feed": 5000, "labor": 2800, "utilities": 1200}

    def test_empty(self):
        assert summaries.financial_summary([]) == {
            "totalCapital": 0,
            "totalInvestments": 0,
            "totalIncome": 0,
            "totalExpenses": 0,
            "expensesByCategory": {},
        }


class TestProductionSummary:
    """Tests for the rolling production window."""

    def test_empty_window_is_all_zero(self, store):
        summary = store.production_summary(days=30)
        assert summary == {
            "totalEggs": 0,
            "gradeAPercentage": 0,
            "gradeBPercentage": 0,
            "brokenPercentage": 0,
            "dailyAverage": 0,
        }

    def test_zero_eggs_does_not_divide_by_zero(self):
        summary = summaries.production_summary([_production(1, 0, 0, 0, 0)])
        assert summary["gradeAPercentage"] == 0
        assert summary["dailyAverage"] == 0

    def test_demo_window(self, demo_store):
        summary = demo_store.production_summary(days=30, now=datetime(2023, 5, 20))

        # 280 + 285 + 290 + 278 + 292
        assert summary["totalEggs"] == 1425
        assert summary["gradeAPercentage"] == 86
        assert summary["gradeBPercentage"] == 11
        assert summary["brokenPercentage"] == 4
        assert summary["dailyAverage"] == 285

    def test_window_excludes_old_records(self, store):
        store.create(ProductionRecord, {"date": datetime(2023, 1, 1), "egg_count": 999})
        store.create(ProductionRecord, {"date": datetime(2023, 5, 19), "egg_count": 100})

        summary = store.production_summary(days=7, now=datetime(2023, 5, 20))
        assert summary["totalEggs"] == 100

    def test_daily_average_uses_distinct_days(self):
        records = [_production(1, 100, hour=6), _production(1, 101, hour=18), _production(2, 100)]
        # 301 eggs over 2 days
        assert summaries.production_summary(records)["dailyAverage"] == 151

    def test_percentages_stay_within_100_for_consistent_input(self):
        records = [_production(1, 100, 90, 7, 3), _production(2, 50, 45, 3, 2)]
        summary = summaries.production_summary(records)
        total = summary["gradeAPercentage"] + summary["gradeBPercentage"] + summary["brokenPercentage"]
        assert total <= 101  # each share is rounded on its own


class TestHealthSummary:
    """Tests for mortality and symptom aggregation."""

    def test_no_batches_is_fully_healthy(self, store):
        store.create(HealthRecord, {"date": datetime(2023, 5, 1), "batch_id": "B9", "mortality_count": 40})

        summary = store.health_summary()
        assert summary["totalMortality"] == 40
        assert summary["healthyPercentage"] == 100

    def test_demo_figures(self, demo_store):
        summary = demo_store.health_summary()

        assert summary["totalMortality"] == 3
        # (350 - 3) / 350 = 99.14%
        assert summary["healthyPercentage"] == 99
        assert summary["commonSymptoms"] == ["lethargy", "reduced_appetite", "weight_loss"]

    def test_batches_of_any_status_count(self, store):
        store.create(ChickenBatch, {"batch_id": "B1", "breed": "Leghorn", "quantity": 50,
                                    "acquisition_date": datetime(2023, 1, 1), "status": "sold"})
        store.create(ChickenBatch, {"batch_id": "B2", "breed": "Leghorn", "quantity": 50,
                                    "acquisition_date": datetime(2023, 1, 1), "status": "active"})
        store.create(HealthRecord, {"date": datetime(2023, 5, 1), "batch_id": "B1", "mortality_count": 5})

        assert store.health_summary()["healthyPercentage"] == 95

    def test_symptom_ties_follow_recording_order_not_date(self, store):
        store.create(HealthRecord, {"date": datetime(2023, 5, 1), "batch_id": "B1", "symptoms": ["limp"]})
        store.create(HealthRecord, {"date": datetime(2023, 5, 20), "batch_id": "B1", "symptoms": ["cough"]})

        assert store.health_summary()["commonSymptoms"] == ["limp", "cough"]

    def test_missing_mortality_counts_as_zero(self):
        records = [SimpleNamespace(mortality_count=None, symptoms=None)]
        assert summaries.health_summary(records, [])["totalMortality"] == 0

    def test_top_five_symptoms_ties_keep_first_seen_order(self):
        records = [
            SimpleNamespace(mortality_count=0, symptoms=["a", "b"]),
            SimpleNamespace(mortality_count=0, symptoms=["b", "c", "d"]),
            SimpleNamespace(mortality_count=0, symptoms=["e", "f", "g"]),
        ]
        common = summaries.health_summary(records, [])["commonSymptoms"]
        assert common == ["b", "a", "c", "d", "e"]


class TestReorderView:
    def test_only_items_at_or_below_level(self):
        items = [
            SimpleNamespace(name="x", needs_reorder=lambda: True),
            SimpleNamespace(name="y", needs_reorder=lambda: False),
        ]
        assert [i.name for i in summaries.reorder_view(items)] == ["x"]
