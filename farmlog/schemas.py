# farmlog/schemas.py
"""
Request and response shapes for the JSON API.

JSON uses camelCase (``eggCount``, ``reorderLevel``); attributes stay
snake_case so validated payloads map 1:1 onto the SQLAlchemy columns.
Every entity has a Create schema (required fields, defaults filled), an
Update schema (every field optional, for PATCH/PUT) and an Out schema.
"""
from __future__ import annotations

from datetime import datetime
from typing import Annotated, ClassVar, Dict, List, Literal, Optional, Tuple, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    model_validator,
)
from pydantic.alias_generators import to_camel


def _naive_local(value: datetime) -> datetime:
    # Stored timestamps are naive local time; calendar-day grouping relies on it
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


LocalDateTime = Annotated[datetime, AfterValidator(_naive_local)]

FinancialType = Literal["income", "expense", "investment", "capital"]
BatchStatus = Literal["active", "sold", "deceased"]
Priority = Literal["low", "medium", "high"]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        allow_inf_nan=False,
    )


class PartialUpdate(CamelModel):
    """Base for update payloads: absent fields stay untouched."""

    # Columns that may be omitted but never set to null
    NOT_NULL: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_nulls(self):
        nulls = [f for f in self.NOT_NULL if f in self.model_fields_set and getattr(self, f) is None]
        if nulls:
            raise ValueError("may not be null: " + ", ".join(to_camel(f) for f in nulls))
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


# ---------- Financial entries ----------

class FinancialEntryCreate(CamelModel):
    date: LocalDateTime = Field(default_factory=datetime.now)
    amount: float = Field(gt=0)
    type: FinancialType
    category: str = Field(min_length=1)
    description: Optional[str] = None
    tags: Optional[List[str]] = None


class FinancialEntryUpdate(PartialUpdate):
    NOT_NULL = ("date", "amount", "type", "category")

    date: Optional[LocalDateTime] = None
    amount: Optional[float] = Field(None, gt=0)
    type: Optional[FinancialType] = None
    category: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    tags: Optional[List[str]] = None


class FinancialEntryOut(CamelModel):
    id: int
    date: datetime
    amount: float
    type: str
    category: str
    description: Optional[str] = None
    tags: Optional[List[str]] = None


class FinancialSummaryOut(BaseModel):
    totalCapital: float
    totalInvestments: float
    totalIncome: float
    totalExpenses: float
    expensesByCategory: Dict[str, float]


# ---------- Production ----------

class ProductionRecordCreate(CamelModel):
    date: LocalDateTime = Field(default_factory=datetime.now)
    egg_count: int = Field(ge=0)
    grade_a: Optional[int] = Field(None, ge=0)
    grade_b: Optional[int] = Field(None, ge=0)
    broken: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None
    batch_id: Optional[str] = None


class ProductionRecordUpdate(PartialUpdate):
    NOT_NULL = ("date", "egg_count")

    date: Optional[LocalDateTime] = None
    egg_count: Optional[int] = Field(None, ge=0)
    grade_a: Optional[int] = Field(None, ge=0)
    grade_b: Optional[int] = Field(None, ge=0)
    broken: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None
    batch_id: Optional[str] = None


class ProductionRecordOut(CamelModel):
    id: int
    date: datetime
    egg_count: int
    grade_a: Optional[int] = None
    grade_b: Optional[int] = None
    broken: Optional[int] = None
    notes: Optional[str] = None
    batch_id: Optional[str] = None


class ProductionSummaryOut(BaseModel):
    totalEggs: int
    gradeAPercentage: int
    gradeBPercentage: int
    brokenPercentage: int
    dailyAverage: int


# ---------- Chicken batches ----------

class ChickenBatchCreate(CamelModel):
    batch_id: str = Field(min_length=1)
    breed: str = Field(min_length=1)
    quantity: int = Field(ge=0)
    acquisition_date: LocalDateTime
    status: BatchStatus
    notes: Optional[str] = None


class ChickenBatchUpdate(PartialUpdate):
    NOT_NULL = ("batch_id", "breed", "quantity", "acquisition_date", "status")

    batch_id: Optional[str] = Field(None, min_length=1)
    breed: Optional[str] = Field(None, min_length=1)
    quantity: Optional[int] = Field(None, ge=0)
    acquisition_date: Optional[LocalDateTime] = None
    status: Optional[BatchStatus] = None
    notes: Optional[str] = None


class ChickenBatchOut(CamelModel):
    id: int
    batch_id: str
    breed: str
    quantity: int
    acquisition_date: datetime
    status: str
    notes: Optional[str] = None


# ---------- Health records ----------

class HealthRecordCreate(CamelModel):
    date: LocalDateTime = Field(default_factory=datetime.now)
    batch_id: str = Field(min_length=1)
    mortality_count: Optional[int] = Field(0, ge=0)
    symptoms: Optional[List[str]] = None
    diagnosis: Optional[str] = None
    treatment: Optional[str] = None
    notes: Optional[str] = None


class HealthRecordUpdate(PartialUpdate):
    NOT_NULL = ("date", "batch_id")

    date: Optional[LocalDateTime] = None
    batch_id: Optional[str] = Field(None, min_length=1)
    mortality_count: Optional[int] = Field(None, ge=0)
    symptoms: Optional[List[str]] = None
    diagnosis: Optional[str] = None
    treatment: Optional[str] = None
    notes: Optional[str] = None


class HealthRecordOut(CamelModel):
    id: int
    date: datetime
    batch_id: str
    mortality_count: Optional[int] = None
    symptoms: Optional[List[str]] = None
    diagnosis: Optional[str] = None
    treatment: Optional[str] = None
    notes: Optional[str] = None


class HealthSummaryOut(BaseModel):
    totalMortality: int
    healthyPercentage: int
    commonSymptoms: List[str]


# ---------- Maintenance tasks ----------

class MaintenanceTaskCreate(CamelModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    due_date: Optional[LocalDateTime] = None
    completed: bool = False
    category: str = Field(min_length=1)
    priority: Priority = "medium"


class MaintenanceTaskUpdate(PartialUpdate):
    NOT_NULL = ("title", "completed", "category", "priority")

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    due_date: Optional[LocalDateTime] = None
    completed: Optional[bool] = None
    category: Optional[str] = Field(None, min_length=1)
    priority: Optional[Priority] = None


class MaintenanceTaskOut(CamelModel):
    id: int
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    completed: bool
    category: str
    priority: str


# ---------- Research notes ----------

class ResearchNoteCreate(CamelModel):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    date: LocalDateTime = Field(default_factory=datetime.now)
    tags: Optional[List[str]] = None
    category: str = Field(min_length=1)


class ResearchNoteUpdate(PartialUpdate):
    NOT_NULL = ("title", "content", "date", "category")

    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)
    date: Optional[LocalDateTime] = None
    tags: Optional[List[str]] = None
    category: Optional[str] = Field(None, min_length=1)


class ResearchNoteOut(CamelModel):
    id: int
    title: str
    content: str
    date: datetime
    tags: Optional[List[str]] = None
    category: str


# ---------- Inventory ----------

class InventoryItemCreate(CamelModel):
    # lastUpdated is always set by the store
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    quantity: float = Field(ge=0)
    unit: str = Field(min_length=1)
    reorder_level: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None


class InventoryItemUpdate(PartialUpdate):
    NOT_NULL = ("name", "category", "quantity", "unit")

    name: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = Field(None, min_length=1)
    reorder_level: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None


class InventoryItemOut(CamelModel):
    id: int
    name: str
    category: str
    quantity: float
    unit: str
    reorder_level: Optional[float] = None
    last_updated: datetime
    notes: Optional[str] = None


class InventoryAdjustment(BaseModel):
    # finite JSON numbers only; "5", true or Infinity are rejected
    model_config = ConfigDict(allow_inf_nan=False)

    adjustment: Union[StrictInt, StrictFloat]


# ---------- Auth ----------

class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserOut(CamelModel):
    id: int
    username: str
