"""In-memory reference implementation of the data provider contract."""

from __future__ import annotations

import asyncio
import threading
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Generic, Iterable, TypeVar

from propdash.config import ProviderConfig
from propdash.exceptions import EntityNotFoundError
from propdash.logging import get_logger
from propdash.models import (
    DashboardStats,
    Lease,
    LeasePatch,
    MaintenanceRequest,
    MaintenanceRequestPatch,
    PaginatedResult,
    Patch,
    Payment,
    PaymentPatch,
    Property,
    PropertyPatch,
    QueryOptions,
    Tenant,
    TenantPatch,
)
from propdash.providers.base import DataProvider, PatchLike
from propdash.providers.fixtures import FixtureSet, load_fixtures
from propdash.providers.query import apply_query
from propdash.providers.stats import compute_dashboard_stats

logger = get_logger(__name__)

R = TypeVar("R")


def new_id() -> str:
    """Return a fresh, collision-resistant record id."""
    return uuid.uuid4().hex


class RecordCollection(Generic[R]):
    """Ordered records of one entity kind, guarded by a lock.

    The lock covers every scan-then-write so that two mutations on the
    same id cannot interleave, even across threads. It is never held
    while awaiting.

    Parameters
    ----------
    kind : str
        Entity kind name used in errors and log messages.
    record_type : type
        Dataclass stored in this collection.
    patch_type : type[Patch]
        Patch dataclass accepted by :meth:`update`.
    records : Iterable | None
        Initial records, kept in the given order.
    """

    def __init__(
        self,
        kind: str,
        record_type: type[R],
        patch_type: type[Patch],
        records: Iterable[R] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.kind = kind
        self.record_type = record_type
        self.patch_type = patch_type
        self._records: list[R] = list(records or [])
        self._lock = threading.Lock()
        self._clock = clock

    def __len__(self) -> int:
        return len(self._records)

    def snapshot(self) -> list[R]:
        """Return a copy of the records in stored order."""
        with self._lock:
            return list(self._records)

    def query(self, options: QueryOptions | None) -> PaginatedResult[R]:
        return apply_query(self.snapshot(), self.record_type, options)

    def get(self, record_id: str) -> R | None:
        with self._lock:
            index = self._index_of(record_id)
            return None if index is None else self._records[index]

    def where(self, field_name: str, value: Any) -> list[R]:
        """Return every record whose ``field_name`` equals ``value``."""
        with self._lock:
            return [r for r in self._records if getattr(r, field_name) == value]

    def add(self, record: R) -> R:
        if not isinstance(record, self.record_type):
            raise TypeError(
                f"Expected {self.record_type.__name__}, got {type(record).__name__}"
            )
        now = self._clock()
        created = replace(record, id=new_id(), created_at=now, updated_at=now)
        with self._lock:
            self._records.append(created)
        logger.debug("Created %s %s", self.kind, created.id)
        return created

    def update(self, record_id: str, patch: Patch | PatchLike) -> R:
        changes = self._coerce_patch(patch).changes()
        with self._lock:
            index = self._index_of(record_id)
            if index is None:
                logger.warning(
                    "Update failed: %s %s not found",
                    self.kind,
                    record_id,
                    extra={"entity_kind": self.kind, "entity_id": record_id},
                )
                raise EntityNotFoundError(self.kind, record_id)
            current = self._records[index]
            updated_at = self._clock()
            if current.updated_at is not None and updated_at < current.updated_at:
                updated_at = current.updated_at
            updated = replace(current, **changes, updated_at=updated_at)
            self._records[index] = updated
        logger.debug("Updated %s %s fields=%s", self.kind, record_id, sorted(changes))
        return updated

    def remove(self, record_id: str) -> bool:
        with self._lock:
            index = self._index_of(record_id)
            if index is None:
                return False
            del self._records[index]
        logger.debug("Deleted %s %s", self.kind, record_id)
        return True

    def _index_of(self, record_id: str) -> int | None:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    def _coerce_patch(self, patch: Patch | PatchLike) -> Patch:
        if isinstance(patch, self.patch_type):
            return patch
        if isinstance(patch, Patch):
            raise TypeError(
                f"Expected {self.patch_type.__name__}, got {type(patch).__name__}"
            )
        # Unknown or managed field names raise TypeError here
        return self.patch_type(**dict(patch))


class InMemoryDataProvider(DataProvider):
    """Volatile, single-process data provider.

    Seeded with the demonstration dataset from
    :func:`propdash.providers.fixtures.load_fixtures` unless
    ``seed_fixtures`` is false. State lives only as long as the instance.

    Parameters
    ----------
    config : ProviderConfig | None
        Provider configuration. ``latency_ms`` is awaited before every
        operation to mimic a storage round-trip.
    seed_fixtures : bool | None
        Overrides ``config.seed_fixtures`` when given.
    """

    def __init__(
        self,
        config: ProviderConfig | None = None,
        *,
        seed_fixtures: bool | None = None,
    ) -> None:
        self.config = config or ProviderConfig()
        if seed_fixtures is None:
            seed_fixtures = self.config.seed_fixtures

        fixtures = load_fixtures() if seed_fixtures else FixtureSet()
        self.properties = RecordCollection(
            "Property", Property, PropertyPatch, fixtures.properties
        )
        self.tenants = RecordCollection(
            "Tenant", Tenant, TenantPatch, fixtures.tenants
        )
        self.leases = RecordCollection(
            "Lease", Lease, LeasePatch, fixtures.leases
        )
        self.payments = RecordCollection(
            "Payment", Payment, PaymentPatch, fixtures.payments
        )
        self.maintenance_requests = RecordCollection(
            "MaintenanceRequest",
            MaintenanceRequest,
            MaintenanceRequestPatch,
            fixtures.maintenance_requests,
        )

        if seed_fixtures:
            logger.info("Seeded in-memory provider: %s", fixtures.summary())

    async def _simulate_latency(self) -> None:
        await asyncio.sleep(self.config.latency_seconds)

    # Properties
    async def get_properties(self, options: QueryOptions | None = None) -> PaginatedResult[Property]:
        await self._simulate_latency()
        return self.properties.query(options)

    async def get_property(self, property_id: str) -> Property | None:
        await self._simulate_latency()
        return self.properties.get(property_id)

    async def create_property(self, record: Property) -> Property:
        await self._simulate_latency()
        return self.properties.add(record)

    async def update_property(self, property_id: str, patch: PropertyPatch | PatchLike) -> Property:
        await self._simulate_latency()
        return self.properties.update(property_id, patch)

    async def delete_property(self, property_id: str) -> bool:
        await self._simulate_latency()
        return self.properties.remove(property_id)

    # Tenants
    async def get_tenants(self, options: QueryOptions | None = None) -> PaginatedResult[Tenant]:
        await self._simulate_latency()
        return self.tenants.query(options)

    async def get_tenant(self, tenant_id: str) -> Tenant | None:
        await self._simulate_latency()
        return self.tenants.get(tenant_id)

    async def create_tenant(self, record: Tenant) -> Tenant:
        await self._simulate_latency()
        return self.tenants.add(record)

    async def update_tenant(self, tenant_id: str, patch: TenantPatch | PatchLike) -> Tenant:
        await self._simulate_latency()
        return self.tenants.update(tenant_id, patch)

    async def delete_tenant(self, tenant_id: str) -> bool:
        await self._simulate_latency()
        return self.tenants.remove(tenant_id)

    # Leases
    async def get_leases(self, options: QueryOptions | None = None) -> PaginatedResult[Lease]:
        await self._simulate_latency()
        return self.leases.query(options)

    async def get_lease(self, lease_id: str) -> Lease | None:
        await self._simulate_latency()
        return self.leases.get(lease_id)

    async def get_leases_by_property(self, property_id: str) -> list[Lease]:
        await self._simulate_latency()
        return self.leases.where("property_id", property_id)

    async def get_leases_by_tenant(self, tenant_id: str) -> list[Lease]:
        await self._simulate_latency()
        return self.leases.where("tenant_id", tenant_id)

    async def create_lease(self, record: Lease) -> Lease:
        await self._simulate_latency()
        return self.leases.add(record)

    async def update_lease(self, lease_id: str, patch: LeasePatch | PatchLike) -> Lease:
        await self._simulate_latency()
        return self.leases.update(lease_id, patch)

    async def delete_lease(self, lease_id: str) -> bool:
        await self._simulate_latency()
        return self.leases.remove(lease_id)

    # Payments
    async def get_payments(self, options: QueryOptions | None = None) -> PaginatedResult[Payment]:
        await self._simulate_latency()
        return self.payments.query(options)

    async def get_payment(self, payment_id: str) -> Payment | None:
        await self._simulate_latency()
        return self.payments.get(payment_id)

    async def get_payments_by_lease(self, lease_id: str) -> list[Payment]:
        await self._simulate_latency()
        return self.payments.where("lease_id", lease_id)

    async def get_payments_by_tenant(self, tenant_id: str) -> list[Payment]:
        await self._simulate_latency()
        return self.payments.where("tenant_id", tenant_id)

    async def create_payment(self, record: Payment) -> Payment:
        await self._simulate_latency()
        return self.payments.add(record)

    async def update_payment(self, payment_id: str, patch: PaymentPatch | PatchLike) -> Payment:
        await self._simulate_latency()
        return self.payments.update(payment_id, patch)

    async def delete_payment(self, payment_id: str) -> bool:
        await self._simulate_latency()
        return self.payments.remove(payment_id)

    # Maintenance requests
    async def get_maintenance_requests(
        self, options: QueryOptions | None = None
    ) -> PaginatedResult[MaintenanceRequest]:
        await self._simulate_latency()
        return self.maintenance_requests.query(options)

    async def get_maintenance_request(self, request_id: str) -> MaintenanceRequest | None:
        await self._simulate_latency()
        return self.maintenance_requests.get(request_id)

    async def get_maintenance_requests_by_property(self, property_id: str) -> list[MaintenanceRequest]:
        await self._simulate_latency()
        return self.maintenance_requests.where("property_id", property_id)

    async def create_maintenance_request(self, record: MaintenanceRequest) -> MaintenanceRequest:
        await self._simulate_latency()
        return self.maintenance_requests.add(record)

    async def update_maintenance_request(
        self, request_id: str, patch: MaintenanceRequestPatch | PatchLike
    ) -> MaintenanceRequest:
        await self._simulate_latency()
        return self.maintenance_requests.update(request_id, patch)

    async def delete_maintenance_request(self, request_id: str) -> bool:
        await self._simulate_latency()
        return self.maintenance_requests.remove(request_id)

    # Dashboard
    async def get_dashboard_stats(self) -> DashboardStats:
        await self._simulate_latency()
        return compute_dashboard_stats(
            self.properties.snapshot(),
            self.tenants.snapshot(),
            self.leases.snapshot(),
            self.payments.snapshot(),
            self.maintenance_requests.snapshot(),
        )

    def summary(self) -> dict[str, int]:
        """Return record counts per entity kind."""
        return {
            "properties": len(self.properties),
            "tenants": len(self.tenants),
            "leases": len(self.leases),
            "payments": len(self.payments),
            "maintenance_requests": len(self.maintenance_requests),
        }
