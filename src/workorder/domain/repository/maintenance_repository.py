"""Abstract read-only repository over vehicles, maintenance and parts.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQLite, JSON) live in the
infrastructure layer and raise DataAccessError when the store fails.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from workorder.domain.model.maintenance import MaintenanceRecord
from workorder.domain.model.part import LinkedPart
from workorder.domain.model.vehicle import Vehicle


class MaintenanceRepository(ABC):

    @abstractmethod
    def get_vehicle_by_plate(self, plate_number: str) -> Vehicle | None:
        """Return the vehicle with this exact plate number, or None."""

    @abstractmethod
    def get_latest_maintenance(self, vehicle_id: int) -> MaintenanceRecord | None:
        """Return the vehicle's most recent maintenance record, or None.

        Most recent means the greatest ``created_at``; records sharing
        that timestamp are resolved in favour of the highest id.
        """

    @abstractmethod
    def list_parts_for_maintenance(self, maintenance_id: int) -> list[LinkedPart]:
        """Return every part linked to the record, ordered by part id."""
