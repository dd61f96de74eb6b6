# farmlog/services/export.py
from __future__ import annotations

import csv
import io
from datetime import datetime
from typing import Iterable, Type

from pydantic import BaseModel


def _cell(value) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.isoformat(sep=" ", timespec="minutes")
    if isinstance(value, (list, tuple)):
        return ";".join(str(v) for v in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def records_to_csv(schema: Type[BaseModel], records: Iterable) -> str:
    """Renders records as CSV, one column per field of ``schema`` (camelCase headers)."""
    fields = list(schema.model_fields.items())
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow([info.alias or name for name, info in fields])
    for record in records:
        row = schema.model_validate(record)
        writer.writerow([_cell(getattr(row, name)) for name, _ in fields])
    return buf.getvalue()
