"""JSON-file-backed implementation of MaintenanceRepository.

The document mirrors the relational layout::

    {
      "vehicles": [{"id": 1, "plate_number": "RAD-123Z"}],
      "maintenance": [{"id": 2, "vehicle_id": 1, "labor_hours": "3.5",
                       "labor_rate": "45", "created_at": "2024-06-15T14:30:00"}],
      "parts": [{"id": 1, "name": "Engine Oil", "unit_price": "250"}],
      "maintenance_parts": [{"maintenance_id": 2, "part_id": 1, "quantity": 1}]
    }

The file is loaded once per query and never written.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path

from workorder.domain.exceptions import DataAccessError, ValidationError
from workorder.domain.model.maintenance import MaintenanceRecord, latest_record
from workorder.domain.model.part import LinkedPart
from workorder.domain.model.value_objects import LaborHours, Money
from workorder.domain.model.vehicle import Vehicle
from workorder.domain.repository.maintenance_repository import (
    MaintenanceRepository,
)

logger = logging.getLogger(__name__)


class JsonMaintenanceRepository(MaintenanceRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- MaintenanceRepository interface --------------------------------------

    def get_vehicle_by_plate(self, plate_number: str) -> Vehicle | None:
        for raw in self._table(self._load_raw(), "vehicles"):
            if raw.get("plate_number") == plate_number:
                return self._convert(self._to_vehicle, raw)
        return None

    def get_latest_maintenance(self, vehicle_id: int) -> MaintenanceRecord | None:
        records = [
            self._convert(self._to_maintenance, raw)
            for raw in self._table(self._load_raw(), "maintenance")
            if raw.get("vehicle_id") == vehicle_id
        ]
        try:
            return latest_record(records)
        except TypeError as exc:
            raise DataAccessError(
                f"Cannot order maintenance timestamps for vehicle {vehicle_id}: {exc}"
            ) from exc

    def list_parts_for_maintenance(self, maintenance_id: int) -> list[LinkedPart]:
        document = self._load_raw()
        parts = self._table(document, "parts")
        links = self._table(document, "maintenance_parts")
        try:
            prices = {raw.get("id"): raw.get("unit_price") for raw in parts}
            part_ids = sorted(
                {
                    raw.get("part_id")
                    for raw in links
                    if raw.get("maintenance_id") == maintenance_id
                }
            )
        except TypeError as exc:
            raise DataAccessError(
                f"Malformed part links in {self._file_path}: {exc}"
            ) from exc
        # Inner join: links to unknown parts are dropped.
        return [
            self._convert(
                self._to_linked_part, {"part_id": pid, "unit_price": prices[pid]}
            )
            for pid in part_ids
            if pid in prices
        ]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_vehicle(raw: dict) -> Vehicle:
        return Vehicle(id=raw["id"], plate_number=raw["plate_number"])

    @staticmethod
    def _to_maintenance(raw: dict) -> MaintenanceRecord:
        return MaintenanceRecord(
            id=raw["id"],
            vehicle_id=raw["vehicle_id"],
            labor_hours=LaborHours(Decimal(str(raw["labor_hours"]))),
            labor_rate=Money(Decimal(str(raw["labor_rate"]))),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    @staticmethod
    def _to_linked_part(raw: dict) -> LinkedPart:
        return LinkedPart(
            part_id=raw["part_id"],
            unit_price=Money(Decimal(str(raw["unit_price"]))),
        )

    @staticmethod
    def _convert(mapper, raw: dict):
        try:
            return mapper(raw)
        except (
            KeyError, TypeError, ValueError, InvalidOperation, ValidationError,
        ) as exc:
            raise DataAccessError(f"Malformed record {raw!r}: {exc}") from exc

    # --- File helpers ---------------------------------------------------------

    def _table(self, document: dict, name: str) -> list[dict]:
        rows = document.get(name, [])
        if not isinstance(rows, list) or not all(isinstance(r, dict) for r in rows):
            raise DataAccessError(
                f"'{name}' in {self._file_path} must be a list of objects"
            )
        return rows

    def _load_raw(self) -> dict:
        logger.debug("Reading %s", self._file_path)
        try:
            document = json.loads(self._file_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise DataAccessError(f"Cannot read {self._file_path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise DataAccessError(f"Invalid JSON in {self._file_path}: {exc}") from exc
        if not isinstance(document, dict):
            raise DataAccessError(f"{self._file_path} must contain a JSON object")
        return document
