"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from workorder.application.build_work_order_summary import WorkOrderSummaryBuilder
from workorder.domain.repository.maintenance_repository import (
    MaintenanceRepository,
)
from workorder.infrastructure.persistence.json_maintenance_repository import (
    JsonMaintenanceRepository,
)
from workorder.infrastructure.persistence.sqlite_maintenance_repository import (
    SqliteMaintenanceRepository,
)

DB_PATH_ENV = "WORKORDER_DB"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
_DEFAULT_DB_PATH = _DATA_DIR / "workorders.db"


def database_path(override: str | Path | None = None) -> Path:
    """Explicit override, then $WORKORDER_DB, then the bundled data dir."""
    if override:
        return Path(override)
    from_env = os.environ.get(DB_PATH_ENV)
    if from_env:
        return Path(from_env)
    return _DEFAULT_DB_PATH


def maintenance_repository(
    path: str | Path | None = None,
) -> MaintenanceRepository:
    db_path = database_path(path)
    if db_path.suffix.lower() == ".json":
        return JsonMaintenanceRepository(db_path)
    return SqliteMaintenanceRepository(db_path)


def sqlite_repository(path: str | Path | None = None) -> SqliteMaintenanceRepository:
    return SqliteMaintenanceRepository(database_path(path))


def work_order_summary_builder(
    path: str | Path | None = None,
) -> WorkOrderSummaryBuilder:
    return WorkOrderSummaryBuilder(maintenance_repository(path))
