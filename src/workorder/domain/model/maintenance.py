"""MaintenanceRecord entity.

A vehicle accumulates maintenance records over time; the work order
summary only ever looks at the most recent one.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from workorder.domain.model.value_objects import LaborHours, Money


@dataclass(frozen=True)
class MaintenanceRecord:
    id: int
    vehicle_id: int
    labor_hours: LaborHours
    labor_rate: Money  # per hour
    created_at: datetime


def latest_record(records: Iterable[MaintenanceRecord]) -> MaintenanceRecord | None:
    """Return the record with the greatest ``created_at``, or None.

    Records sharing that timestamp are resolved in favour of the highest
    id.  Comparing naive with timezone-aware timestamps raises TypeError.
    """
    records = list(records)
    if not records:
        return None
    return max(records, key=lambda r: (r.created_at, r.id))
