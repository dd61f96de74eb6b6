"""Read-only aggregates computed on demand from materialized record lists."""
from __future__ import annotations

import math
from collections import Counter
from typing import Dict, Iterable, List, Sequence

from farmlog.models.entities import (
    ChickenBatch,
    FinancialEntry,
    HealthRecord,
    InventoryItem,
    ProductionRecord,
)

TOP_SYMPTOMS = 5


def round_half_up(value: float) -> int:
    """Rounds .5 towards positive infinity (builtin round() rounds to even)."""
    return int(math.floor(value + 0.5))


def _percent(part: float, total: float) -> int:
    if total <= 0:
        return 0
    return round_half_up(part / total * 100)


def financial_summary(entries: Iterable[FinancialEntry]) -> dict:
    totals = {"capital": 0.0, "investment": 0.0, "income": 0.0, "expense": 0.0}
    by_category: Dict[str, float] = {}
    for e in entries:
        amount = float(e.amount or 0)
        if e.type in totals:
            totals[e.type] += amount
        if e.type == "expense":
            by_category[e.category] = by_category.get(e.category, 0.0) + amount
    return {
        "totalCapital": totals["capital"],
        "totalInvestments": totals["investment"],
        "totalIncome": totals["income"],
        "totalExpenses": totals["expense"],
        "expensesByCategory": by_category,
    }


def production_summary(records: Sequence[ProductionRecord]) -> dict:
    """
    Summary over an already windowed set of production records.
    Grades are not required to add up to eggCount; inconsistent input can
    yield percentages above 100.
    """
    if not records:
        return {
            "totalEggs": 0,
            "gradeAPercentage": 0,
            "gradeBPercentage": 0,
            "brokenPercentage": 0,
            "dailyAverage": 0,
        }

    total_eggs = sum(r.egg_count or 0 for r in records)
    grade_a = sum(r.grade_a or 0 for r in records)
    grade_b = sum(r.grade_b or 0 for r in records)
    broken = sum(r.broken or 0 for r in records)
    # distinct calendar days, not record count
    days = len({r.date.date() for r in records})

    return {
        "totalEggs": total_eggs,
        "gradeAPercentage": _percent(grade_a, total_eggs),
        "gradeBPercentage": _percent(grade_b, total_eggs),
        "brokenPercentage": _percent(broken, total_eggs),
        "dailyAverage": round_half_up(total_eggs / days),
    }


def health_summary(records: Sequence[HealthRecord], batches: Sequence[ChickenBatch]) -> dict:
    total_mortality = sum(r.mortality_count or 0 for r in records)
    total_birds = sum(b.quantity or 0 for b in batches)
    if total_birds > 0:
        healthy = round_half_up((total_birds - total_mortality) / total_birds * 100)
    else:
        # no batches on record: nothing to be unhealthy
        healthy = 100

    symptoms: Counter = Counter()
    for r in records:
        for s in r.symptoms or []:
            symptoms[s] += 1
    common: List[str] = [s for s, _ in symptoms.most_common(TOP_SYMPTOMS)]

    return {
        "totalMortality": total_mortality,
        "healthyPercentage": healthy,
        "commonSymptoms": common,
    }


def reorder_view(items: Iterable[InventoryItem]) -> List[InventoryItem]:
    return [item for item in items if item.needs_reorder()]
