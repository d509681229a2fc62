"""Plain-text rendering of work order summaries."""

from __future__ import annotations

from workorder.domain.model.work_order import (
    FullSummary,
    NoPartsSummary,
    WorkOrderResult,
)

TITLE = "Work Order Summary"
SEPARATOR = "-" * 25
NO_PARTS_MESSAGE = "No parts used for this maintenance record."

_LABEL_WIDTH = 20


def _line(label: str, value: object) -> str:
    return f"{label:<{_LABEL_WIDTH}}: {value}"


def render_report(result: WorkOrderResult) -> list[str]:
    """Return the report lines for either summary variant."""
    if isinstance(result, NoPartsSummary):
        return [NO_PARTS_MESSAGE]

    if isinstance(result, FullSummary):
        return [
            TITLE,
            SEPARATOR,
            _line("Vehicle Plate", result.plate_number),
            _line("Parts Used (IDs)", ", ".join(str(i) for i in result.part_ids)),
            _line("Total Parts Cost", result.total_parts_cost),
            _line("Labor Hours", result.labor_hours),
            _line("Labor Rate", result.labor_rate),
            _line("Total Labor Cost", result.total_labor_cost),
            _line("Overall Total Cost", result.overall_total_cost),
        ]

    raise TypeError(f"Unsupported work order result: {type(result).__name__}")
