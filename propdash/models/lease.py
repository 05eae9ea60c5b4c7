"""Lease agreement model."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from propdash.models.base import UNSET, Patch
from propdash.models.enums import LeaseStatus


@dataclass(frozen=True)
class Lease:
    """Agreement between one tenant and one property.

    ``property_id`` and ``tenant_id`` are plain references; the lease
    does not own either record.
    """

    property_id: str
    tenant_id: str
    start_date: date
    end_date: date
    monthly_rent: Decimal
    security_deposit: Decimal
    status: LeaseStatus
    terms: str | None = None
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class LeasePatch(Patch):
    """Partial update for a lease."""

    property_id: str = UNSET
    tenant_id: str = UNSET
    start_date: date = UNSET
    end_date: date = UNSET
    monthly_rent: Decimal = UNSET
    security_deposit: Decimal = UNSET
    status: LeaseStatus = UNSET
    terms: str | None = UNSET
