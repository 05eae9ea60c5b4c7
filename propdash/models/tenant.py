"""Tenant model."""

from dataclasses import dataclass
from datetime import datetime

from propdash.models.base import UNSET, EmergencyContact, Patch
from propdash.models.enums import TenantStatus


@dataclass(frozen=True)
class Tenant:
    """A person renting (or applying to rent) one of the properties."""

    first_name: str
    last_name: str
    email: str
    phone: str
    emergency_contact: EmergencyContact
    status: TenantStatus
    id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class TenantPatch(Patch):
    """Partial update for a tenant.

    ``emergency_contact`` is replaced as a whole, never merged.
    """

    first_name: str = UNSET
    last_name: str = UNSET
    email: str = UNSET
    phone: str = UNSET
    emergency_contact: EmergencyContact = UNSET
    status: TenantStatus = UNSET
