"""Work order summary results.

A summary is one of two variants:

- ``NoPartsSummary`` when the latest maintenance record has no parts
  attached.  No costs are computed for it.
- ``FullSummary`` carrying the full cost breakdown.

Both are immutable and assembled in one step once every input is known.
Callers dispatch on the concrete type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from workorder.domain.exceptions import ValidationError
from workorder.domain.model.part import LinkedPart
from workorder.domain.model.value_objects import LaborHours, Money


@dataclass(frozen=True)
class NoPartsSummary:
    """The latest maintenance record for ``plate_number`` used no parts."""

    plate_number: str


@dataclass(frozen=True)
class FullSummary:
    """Cost breakdown for one maintenance record.

    Use ``FullSummary.create()`` so the derived totals are always
    consistent with the inputs.
    """

    plate_number: str
    part_ids: tuple[int, ...]
    total_parts_cost: Money
    labor_hours: LaborHours
    labor_rate: Money
    total_labor_cost: Money
    overall_total_cost: Money

    @staticmethod
    def create(
        plate_number: str,
        parts: Iterable[LinkedPart],
        labor_hours: LaborHours,
        labor_rate: Money,
    ) -> FullSummary:
        """Aggregate the linked parts and labor into a summary.

        Each linked part counts once at its unit price; link quantities
        are not consulted.
        """
        parts = list(parts)
        if not parts:
            raise ValidationError(
                "A full summary needs at least one part; use NoPartsSummary"
            )

        costs = [part.unit_price for part in parts]
        total_parts_cost = sum(costs, Money.zero())
        total_labor_cost = labor_rate * labor_hours

        return FullSummary(
            plate_number=plate_number,
            part_ids=tuple(part.part_id for part in parts),
            total_parts_cost=total_parts_cost,
            labor_hours=labor_hours,
            labor_rate=labor_rate,
            total_labor_cost=total_labor_cost,
            overall_total_cost=total_parts_cost + total_labor_cost,
        )


WorkOrderResult = Union[NoPartsSummary, FullSummary]
