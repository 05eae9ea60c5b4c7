"""Data provider contract.

Every storage backend implements :class:`DataProvider`. Consumers only
depend on this interface, so the in-memory reference provider and any
persistent backend are interchangeable.

Shared semantics for all entity kinds:

- ``get_<kind>(id)`` returns ``None`` for an unknown id.
- ``create_<kind>(record)`` assigns ``id``, ``created_at`` and
  ``updated_at``; any values the caller put there are ignored.
- ``update_<kind>(id, patch)`` raises ``EntityNotFoundError`` for an
  unknown id, otherwise shallow-merges the patch and refreshes
  ``updated_at``. ``patch`` may be a patch dataclass or a mapping of
  field names.
- ``delete_<kind>(id)`` returns ``False`` for an unknown id and ``True``
  once the record is removed. Deletes never cascade.
- Relationship reads (``get_<kind>s_by_<owner>``) return an empty list
  when nothing matches.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

from propdash.models import (
    DashboardStats,
    Lease,
    LeasePatch,
    MaintenanceRequest,
    MaintenanceRequestPatch,
    PaginatedResult,
    Payment,
    PaymentPatch,
    Property,
    PropertyPatch,
    QueryOptions,
    Tenant,
    TenantPatch,
)

PatchLike = Mapping[str, Any]


class DataProvider(ABC):
    """Storage-agnostic data access for the dashboard."""

    # Properties
    @abstractmethod
    async def get_properties(self, options: QueryOptions | None = None) -> PaginatedResult[Property]:
        ...

    @abstractmethod
    async def get_property(self, property_id: str) -> Property | None:
        ...

    @abstractmethod
    async def create_property(self, record: Property) -> Property:
        ...

    @abstractmethod
    async def update_property(self, property_id: str, patch: PropertyPatch | PatchLike) -> Property:
        ...

    @abstractmethod
    async def delete_property(self, property_id: str) -> bool:
        ...

    # Tenants
    @abstractmethod
    async def get_tenants(self, options: QueryOptions | None = None) -> PaginatedResult[Tenant]:
        ...

    @abstractmethod
    async def get_tenant(self, tenant_id: str) -> Tenant | None:
        ...

    @abstractmethod
    async def create_tenant(self, record: Tenant) -> Tenant:
        ...

    @abstractmethod
    async def update_tenant(self, tenant_id: str, patch: TenantPatch | PatchLike) -> Tenant:
        ...

    @abstractmethod
    async def delete_tenant(self, tenant_id: str) -> bool:
        ...

    # Leases
    @abstractmethod
    async def get_leases(self, options: QueryOptions | None = None) -> PaginatedResult[Lease]:
        ...

    @abstractmethod
    async def get_lease(self, lease_id: str) -> Lease | None:
        ...

    @abstractmethod
    async def get_leases_by_property(self, property_id: str) -> list[Lease]:
        ...

    @abstractmethod
    async def get_leases_by_tenant(self, tenant_id: str) -> list[Lease]:
        ...

    @abstractmethod
    async def create_lease(self, record: Lease) -> Lease:
        ...

    @abstractmethod
    async def update_lease(self, lease_id: str, patch: LeasePatch | PatchLike) -> Lease:
        ...

    @abstractmethod
    async def delete_lease(self, lease_id: str) -> bool:
        ...

    # Payments
    @abstractmethod
    async def get_payments(self, options: QueryOptions | None = None) -> PaginatedResult[Payment]:
        ...

    @abstractmethod
    async def get_payment(self, payment_id: str) -> Payment | None:
        ...

    @abstractmethod
    async def get_payments_by_lease(self, lease_id: str) -> list[Payment]:
        ...

    @abstractmethod
    async def get_payments_by_tenant(self, tenant_id: str) -> list[Payment]:
        ...

    @abstractmethod
    async def create_payment(self, record: Payment) -> Payment:
        ...

    @abstractmethod
    async def update_payment(self, payment_id: str, patch: PaymentPatch | PatchLike) -> Payment:
        ...

    @abstractmethod
    async def delete_payment(self, payment_id: str) -> bool:
        ...

    # Maintenance requests
    @abstractmethod
    async def get_maintenance_requests(
        self, options: QueryOptions | None = None
    ) -> PaginatedResult[MaintenanceRequest]:
        ...

    @abstractmethod
    async def get_maintenance_request(self, request_id: str) -> MaintenanceRequest | None:
        ...

    @abstractmethod
    async def get_maintenance_requests_by_property(self, property_id: str) -> list[MaintenanceRequest]:
        ...

    @abstractmethod
    async def create_maintenance_request(self, record: MaintenanceRequest) -> MaintenanceRequest:
        ...

    @abstractmethod
    async def update_maintenance_request(
        self, request_id: str, patch: MaintenanceRequestPatch | PatchLike
    ) -> MaintenanceRequest:
        ...

    @abstractmethod
    async def delete_maintenance_request(self, request_id: str) -> bool:
        ...

    # Dashboard
    @abstractmethod
    async def get_dashboard_stats(self) -> DashboardStats:
        """Compute aggregate counters over the current state."""
