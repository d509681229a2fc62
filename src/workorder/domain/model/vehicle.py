"""Vehicle entity — the lookup key for a work order is its plate number."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vehicle:
    id: int
    plate_number: str
