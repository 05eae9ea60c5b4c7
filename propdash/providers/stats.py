"""Dashboard aggregation."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from propdash.models import (
    DashboardStats,
    Lease,
    LeaseStatus,
    MaintenanceRequest,
    MaintenanceStatus,
    Payment,
    PaymentStatus,
    Property,
    PropertyStatus,
    Tenant,
    TenantStatus,
)

OPEN_MAINTENANCE_STATUSES = (MaintenanceStatus.OPEN, MaintenanceStatus.IN_PROGRESS)


def compute_dashboard_stats(
    properties: Iterable[Property],
    tenants: Iterable[Tenant],
    leases: Iterable[Lease],
    payments: Iterable[Payment],
    maintenance_requests: Iterable[MaintenanceRequest],
) -> DashboardStats:
    """Compute dashboard counters from the current collections.

    Revenue is the sum of ``monthly_rent`` over leases whose status is
    exactly ``active``; property rents and occupancy do not contribute.
    Payments in ``late`` status fall in neither the pending nor the
    overdue bucket.
    """
    properties = list(properties)
    tenants = list(tenants)
    payments = list(payments)

    return DashboardStats(
        total_properties=len(properties),
        occupied_properties=sum(1 for p in properties if p.status == PropertyStatus.OCCUPIED),
        vacant_properties=sum(1 for p in properties if p.status == PropertyStatus.VACANT),
        total_tenants=len(tenants),
        active_tenants=sum(1 for t in tenants if t.status == TenantStatus.ACTIVE),
        total_monthly_revenue=sum(
            (lease.monthly_rent for lease in leases if lease.status == LeaseStatus.ACTIVE),
            Decimal("0"),
        ),
        pending_payments=sum(1 for p in payments if p.status == PaymentStatus.PENDING),
        overdue_payments=sum(1 for p in payments if p.status == PaymentStatus.OVERDUE),
        open_maintenance_requests=sum(
            1 for m in maintenance_requests if m.status in OPEN_MAINTENANCE_STATUSES
        ),
    )
