"""In-memory fake repository for testing.

Implements the same abstract interface as the SQLite and JSON
repositories but keeps everything in lists. No file I/O, no side effects.
"""

from __future__ import annotations

from workorder.domain.model.maintenance import MaintenanceRecord, latest_record
from workorder.domain.model.part import LinkedPart, MaintenancePartLink, Part
from workorder.domain.model.vehicle import Vehicle
from workorder.domain.repository.maintenance_repository import (
    MaintenanceRepository,
)


class FakeMaintenanceRepository(MaintenanceRepository):

    def __init__(
        self,
        vehicles: list[Vehicle] | None = None,
        records: list[MaintenanceRecord] | None = None,
        parts: list[Part] | None = None,
        links: list[MaintenancePartLink] | None = None,
    ) -> None:
        self.vehicles = list(vehicles or [])
        self.records = list(records or [])
        self.parts = {p.id: p for p in parts or []}
        self.links = list(links or [])
        self.calls: list[str] = []

    def get_vehicle_by_plate(self, plate_number: str) -> Vehicle | None:
        self.calls.append("vehicle")
        for v in self.vehicles:
            if v.plate_number == plate_number:
                return v
        return None

    def get_latest_maintenance(self, vehicle_id: int) -> MaintenanceRecord | None:
        self.calls.append("maintenance")
        return latest_record(r for r in self.records if r.vehicle_id == vehicle_id)

    def list_parts_for_maintenance(self, maintenance_id: int) -> list[LinkedPart]:
        self.calls.append("parts")
        return [
            LinkedPart(part_id=link.part_id, unit_price=self.parts[link.part_id].unit_price)
            for link in self.links
            if link.maintenance_id == maintenance_id
        ]
