"""Rent payment model."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from propdash.models.base import UNSET, Patch
from propdash.models.enums import PaymentMethod, PaymentStatus


@dataclass(frozen=True)
class Payment:
    """A rent payment due under a lease."""

    lease_id: str
    tenant_id: str
    amount: Decimal
    due_date: date
    status: PaymentStatus
    paid_date: date | None = None
    payment_method: PaymentMethod | None = None
    notes: str | None = None
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class PaymentPatch(Patch):
    """Partial update for a payment."""

    lease_id: str = UNSET
    tenant_id: str = UNSET
    amount: Decimal = UNSET
    due_date: date = UNSET
    status: PaymentStatus = UNSET
    paid_date: date | None = UNSET
    payment_method: PaymentMethod | None = UNSET
    notes: str | None = UNSET
