"""Maintenance request model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from propdash.models.base import UNSET, Patch
from propdash.models.enums import (
    MaintenanceCategory,
    MaintenancePriority,
    MaintenanceStatus,
)


@dataclass(frozen=True)
class MaintenanceRequest:
    """Work order raised against a property."""

    property_id: str
    title: str
    description: str
    priority: MaintenancePriority
    status: MaintenanceStatus
    category: MaintenanceCategory
    tenant_id: str | None = None
    estimated_cost: Decimal | None = None
    actual_cost: Decimal | None = None
    completed_at: datetime | None = None
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class MaintenanceRequestPatch(Patch):
    """Partial update for a maintenance request."""

    property_id: str = UNSET
    title: str = UNSET
    description: str = UNSET
    priority: MaintenancePriority = UNSET
    status: MaintenanceStatus = UNSET
    category: MaintenanceCategory = UNSET
    tenant_id: str | None = UNSET
    estimated_cost: Decimal | None = UNSET
    actual_cost: Decimal | None = UNSET
    completed_at: datetime | None = UNSET
