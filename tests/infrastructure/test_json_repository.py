"""Tests for the read-only JSON repository."""

import json

import pytest

from workorder.application.build_work_order_summary import WorkOrderSummaryBuilder
from workorder.domain.exceptions import DataAccessError
from workorder.domain.model.value_objects import Money
from workorder.domain.model.work_order import FullSummary, NoPartsSummary
from workorder.infrastructure.persistence.json_maintenance_repository import (
    JsonMaintenanceRepository,
)

SAMPLE = {
    "vehicles": [{"id": 1, "plate_number": "RAD-123Z"}],
    "maintenance": [
        {"id": 1, "vehicle_id": 1, "labor_hours": "2", "labor_rate": "40",
         "created_at": "2024-01-10T09:00:00"},
        {"id": 2, "vehicle_id": 1, "labor_hours": "3.5", "labor_rate": "45",
         "created_at": "2024-06-15T14:30:00"},
    ],
    "parts": [
        {"id": 1, "name": "Engine Oil", "unit_price": "250"},
        {"id": 2, "name": "Spark Plug", "unit_price": "120"},
        {"id": 3, "name": "Brake Pads", "unit_price": "300"},
        {"id": 4, "name": "Air Filter", "unit_price": "300"},
    ],
    "maintenance_parts": [
        {"maintenance_id": 1, "part_id": 2, "quantity": 4},
        {"maintenance_id": 2, "part_id": 4, "quantity": 1},
        {"maintenance_id": 2, "part_id": 1, "quantity": 2},
        {"maintenance_id": 2, "part_id": 3, "quantity": 1},
    ],
}


def _write(tmp_path, document) -> JsonMaintenanceRepository:
    path = tmp_path / "workorders.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return JsonMaintenanceRepository(path)


class TestJsonRepository:

    def test_sample_summary(self, tmp_path):
        repo = _write(tmp_path, SAMPLE)
        result = WorkOrderSummaryBuilder(repo).build("RAD-123Z")
        assert isinstance(result, FullSummary)
        assert result.part_ids == (1, 3, 4)
        assert result.overall_total_cost == Money.of("1007.5")

    def test_latest_tie_prefers_highest_id(self, tmp_path):
        document = json.loads(json.dumps(SAMPLE))
        document["maintenance"].append(
            {"id": 3, "vehicle_id": 1, "labor_hours": "1", "labor_rate": "1",
             "created_at": "2024-06-15T14:30:00"}
        )
        repo = _write(tmp_path, document)
        assert repo.get_latest_maintenance(1).id == 3

    def test_record_without_parts(self, tmp_path):
        document = json.loads(json.dumps(SAMPLE))
        document["maintenance_parts"] = []
        repo = _write(tmp_path, document)
        assert WorkOrderSummaryBuilder(repo).build("RAD-123Z") == NoPartsSummary(
            "RAD-123Z"
        )

    def test_unknown_plate_returns_none(self, tmp_path):
        assert _write(tmp_path, SAMPLE).get_vehicle_by_plate("NOPE") is None

    def test_missing_file(self, tmp_path):
        repo = JsonMaintenanceRepository(tmp_path / "missing.json")
        with pytest.raises(DataAccessError, match="Cannot read"):
            repo.get_vehicle_by_plate("RAD-123Z")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DataAccessError, match="Invalid JSON"):
            JsonMaintenanceRepository(path).get_vehicle_by_plate("RAD-123Z")

    def test_malformed_record(self, tmp_path):
        document = json.loads(json.dumps(SAMPLE))
        del document["maintenance"][1]["labor_rate"]
        repo = _write(tmp_path, document)
        with pytest.raises(DataAccessError, match="Malformed record"):
            repo.get_latest_maintenance(1)

    def test_mixed_naive_and_aware_timestamps(self, tmp_path):
        document = json.loads(json.dumps(SAMPLE))
        document["maintenance"][1]["created_at"] = "2024-06-15T14:30:00+00:00"
        repo = _write(tmp_path, document)
        with pytest.raises(DataAccessError, match="Cannot order maintenance"):
            repo.get_latest_maintenance(1)

    def test_unhashable_part_id(self, tmp_path):
        document = json.loads(json.dumps(SAMPLE))
        document["parts"][0]["id"] = [1]
        repo = _write(tmp_path, document)
        with pytest.raises(DataAccessError, match="Malformed part links"):
            repo.list_parts_for_maintenance(2)

    def test_parts_query_reads_file_once(self, tmp_path, monkeypatch):
        repo = _write(tmp_path, SAMPLE)
        reads = []
        original = JsonMaintenanceRepository._load_raw

        def counting_load(self):
            reads.append(1)
            return original(self)

        monkeypatch.setattr(JsonMaintenanceRepository, "_load_raw", counting_load)
        repo.list_parts_for_maintenance(2)
        assert len(reads) == 1
