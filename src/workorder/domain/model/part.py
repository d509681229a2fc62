"""Part catalog entries and their link to maintenance records."""

from __future__ import annotations

from dataclasses import dataclass

from workorder.domain.model.value_objects import Money


@dataclass(frozen=True)
class Part:
    """A part in the catalog, priced per unit."""

    id: int
    name: str
    unit_price: Money


@dataclass(frozen=True)
class MaintenancePartLink:
    """Attaches a part to a maintenance record.

    ``quantity`` is stored but does not take part in costing: each linked
    part contributes its unit price exactly once.
    """

    maintenance_id: int
    part_id: int
    quantity: int = 1


@dataclass(frozen=True)
class LinkedPart:
    """A part attached to a maintenance record, joined to its unit price."""

    part_id: int
    unit_price: Money
