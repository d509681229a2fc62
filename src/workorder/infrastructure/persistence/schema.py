"""SQLite schema and the sample data set.

Amounts and hours are stored as TEXT so they come back as exact Decimals.
Timestamps are ISO-8601 strings, which sort chronologically.
"""

from __future__ import annotations

import logging
import sqlite3

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS vehicles (
    id            INTEGER PRIMARY KEY,
    plate_number  TEXT NOT NULL UNIQUE
);

CREATE TABLE IF NOT EXISTS maintenance (
    id           INTEGER PRIMARY KEY,
    vehicle_id   INTEGER NOT NULL REFERENCES vehicles(id),
    labor_hours  TEXT NOT NULL DEFAULT '0',
    labor_rate   TEXT NOT NULL DEFAULT '0',
    created_at   TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS parts (
    id          INTEGER PRIMARY KEY,
    name        TEXT NOT NULL,
    unit_price  TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS maintenance_parts (
    maintenance_id  INTEGER NOT NULL REFERENCES maintenance(id),
    part_id         INTEGER NOT NULL REFERENCES parts(id),
    quantity        INTEGER NOT NULL DEFAULT 1,
    PRIMARY KEY (maintenance_id, part_id)
);

CREATE INDEX IF NOT EXISTS idx_maintenance_vehicle
    ON maintenance(vehicle_id, created_at);
"""

SAMPLE_VEHICLES = [
    (1, "RAD-123Z"),
]

SAMPLE_PARTS = [
    (1, "Engine Oil", "250"),
    (2, "Spark Plug", "120"),
    (3, "Brake Pads", "300"),
    (4, "Air Filter", "300"),
]

SAMPLE_MAINTENANCE = [
    (1, 1, "2", "40", "2024-01-10T09:00:00"),
    (2, 1, "3.5", "45", "2024-06-15T14:30:00"),
]

SAMPLE_MAINTENANCE_PARTS = [
    (1, 2, 4),
    (2, 1, 1),
    (2, 3, 1),
    (2, 4, 1),
]


def create_schema(conn: sqlite3.Connection) -> None:
    """Create all tables if they do not exist yet."""
    conn.executescript(SCHEMA)
    logger.info("Schema ensured")


def seed_sample_data(conn: sqlite3.Connection) -> None:
    """Load the sample data set.  Rows that already exist are left alone."""
    conn.executemany(
        "INSERT OR IGNORE INTO vehicles (id, plate_number) VALUES (?, ?)",
        SAMPLE_VEHICLES,
    )
    conn.executemany(
        "INSERT OR IGNORE INTO parts (id, name, unit_price) VALUES (?, ?, ?)",
        SAMPLE_PARTS,
    )
    conn.executemany(
        "INSERT OR IGNORE INTO maintenance "
        "(id, vehicle_id, labor_hours, labor_rate, created_at) "
        "VALUES (?, ?, ?, ?, ?)",
        SAMPLE_MAINTENANCE,
    )
    conn.executemany(
        "INSERT OR IGNORE INTO maintenance_parts "
        "(maintenance_id, part_id, quantity) VALUES (?, ?, ?)",
        SAMPLE_MAINTENANCE_PARTS,
    )
    logger.info(
        "Sample data loaded (%d vehicle(s), %d part(s), %d maintenance record(s))",
        len(SAMPLE_VEHICLES), len(SAMPLE_PARTS), len(SAMPLE_MAINTENANCE),
    )
