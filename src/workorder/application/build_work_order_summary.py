"""Application service: Work Order Summary use case (query).

Resolves a plate number to its vehicle, the vehicle to its latest
maintenance record, and the record to its linked parts, then aggregates
them into a summary.  The three reads run in that order because each
needs the id resolved by the previous one.  Nothing is written.
"""

from __future__ import annotations

import logging

from workorder.domain.exceptions import NotFoundError
from workorder.domain.model.work_order import (
    FullSummary,
    NoPartsSummary,
    WorkOrderResult,
)
from workorder.domain.repository.maintenance_repository import (
    MaintenanceRepository,
)

logger = logging.getLogger(__name__)


class WorkOrderSummaryBuilder:

    def __init__(self, maintenance_repo: MaintenanceRepository) -> None:
        self._maintenance_repo = maintenance_repo

    def build(self, plate_number: str) -> WorkOrderResult:
        """Summarize the latest maintenance record for a vehicle.

        Raises NotFoundError if no vehicle has this plate (a blank plate
        never matches) or the vehicle has never been serviced.  A record
        without parts is not an error: it yields a NoPartsSummary.
        """
        plate_number = (plate_number or "").strip()
        if not plate_number:
            raise NotFoundError("No vehicle with a blank plate number")

        vehicle = self._maintenance_repo.get_vehicle_by_plate(plate_number)
        if vehicle is None:
            raise NotFoundError(f"No vehicle with plate '{plate_number}'")

        record = self._maintenance_repo.get_latest_maintenance(vehicle.id)
        if record is None:
            raise NotFoundError(
                f"No maintenance record for vehicle '{plate_number}'"
            )
        logger.debug(
            "Latest maintenance for %s is #%s (%s)",
            plate_number, record.id, record.created_at.isoformat(),
        )

        parts = self._maintenance_repo.list_parts_for_maintenance(record.id)
        if not parts:
            logger.debug("Maintenance #%s has no parts", record.id)
            return NoPartsSummary(plate_number=plate_number)

        logger.debug("Maintenance #%s has %d part(s)", record.id, len(parts))
        return FullSummary.create(
            plate_number=plate_number,
            parts=parts,
            labor_hours=record.labor_hours,
            labor_rate=record.labor_rate,
        )
