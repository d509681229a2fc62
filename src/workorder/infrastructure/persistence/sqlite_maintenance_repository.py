"""SQLite-backed implementation of MaintenanceRepository."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing
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
from workorder.infrastructure.persistence.schema import (
    create_schema,
    seed_sample_data,
)

logger = logging.getLogger(__name__)

_ROW_ERRORS = (
    KeyError, IndexError, TypeError, ValueError, InvalidOperation, ValidationError,
)


class SqliteMaintenanceRepository(MaintenanceRepository):

    def __init__(self, db_path: Path) -> None:
        self._db_path = db_path

    # --- MaintenanceRepository interface --------------------------------------

    def get_vehicle_by_plate(self, plate_number: str) -> Vehicle | None:
        rows = self._query(
            "SELECT id, plate_number FROM vehicles WHERE plate_number = ?",
            (plate_number,),
        )
        return self._map(self._to_vehicle, rows[0]) if rows else None

    def get_latest_maintenance(self, vehicle_id: int) -> MaintenanceRecord | None:
        # Ordered on parsed datetimes; TEXT order breaks on mixed ISO-8601 forms.
        rows = self._query(
            "SELECT id, vehicle_id, labor_hours, labor_rate, created_at "
            "FROM maintenance WHERE vehicle_id = ?",
            (vehicle_id,),
        )
        records = [self._map(self._to_maintenance, row) for row in rows]
        try:
            return latest_record(records)
        except TypeError as exc:
            raise DataAccessError(
                f"Cannot order maintenance timestamps for vehicle {vehicle_id}: {exc}"
            ) from exc

    def list_parts_for_maintenance(self, maintenance_id: int) -> list[LinkedPart]:
        rows = self._query(
            "SELECT mp.part_id, p.unit_price "
            "FROM maintenance_parts mp "
            "JOIN parts p ON p.id = mp.part_id "
            "WHERE mp.maintenance_id = ? "
            "ORDER BY mp.part_id",
            (maintenance_id,),
        )
        return [self._map(self._to_linked_part, row) for row in rows]

    # --- Setup ----------------------------------------------------------------

    def initialize(self, seed: bool = False) -> None:
        """Create the schema, optionally loading the sample data set."""
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            with closing(self._connect()) as conn, conn:
                create_schema(conn)
                if seed:
                    seed_sample_data(conn)
        except (sqlite3.Error, OSError) as exc:
            raise DataAccessError(
                f"Could not initialize database {self._db_path}: {exc}"
            ) from exc
        logger.info("Database ready at %s", self._db_path)

    # --- Row mapping ----------------------------------------------------------

    @staticmethod
    def _to_vehicle(row: sqlite3.Row) -> Vehicle:
        return Vehicle(id=row["id"], plate_number=row["plate_number"])

    @staticmethod
    def _to_maintenance(row: sqlite3.Row) -> MaintenanceRecord:
        return MaintenanceRecord(
            id=row["id"],
            vehicle_id=row["vehicle_id"],
            labor_hours=LaborHours(Decimal(str(row["labor_hours"]))),
            labor_rate=Money(Decimal(str(row["labor_rate"]))),
            created_at=datetime.fromisoformat(row["created_at"]),
        )

    @staticmethod
    def _to_linked_part(row: sqlite3.Row) -> LinkedPart:
        return LinkedPart(
            part_id=row["part_id"],
            unit_price=Money(Decimal(str(row["unit_price"]))),
        )

    @staticmethod
    def _map(mapper, row: sqlite3.Row):
        try:
            return mapper(row)
        except _ROW_ERRORS as exc:
            raise DataAccessError(f"Malformed row {dict(row)!r}: {exc}") from exc

    # --- Connection helpers ---------------------------------------------------

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def _query(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        if not self._db_path.exists():
            raise DataAccessError(f"Database not found: {self._db_path}")
        logger.debug("Query %s %r", sql, params)
        try:
            with closing(self._connect()) as conn:
                return conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise DataAccessError(f"Query failed on {self._db_path}: {exc}") from exc
