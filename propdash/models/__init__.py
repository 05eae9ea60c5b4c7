"""Domain models for the property management dashboard."""

from propdash.models.base import UNSET, EmergencyContact, Patch
from propdash.models.enums import (
    LeaseStatus,
    MaintenanceCategory,
    MaintenancePriority,
    MaintenanceStatus,
    PaymentMethod,
    PaymentStatus,
    PropertyStatus,
    PropertyType,
    SortOrder,
    TenantStatus,
)
from propdash.models.lease import Lease, LeasePatch
from propdash.models.maintenance import MaintenanceRequest, MaintenanceRequestPatch
from propdash.models.payment import Payment, PaymentPatch
from propdash.models.property import Property, PropertyPatch
from propdash.models.query import PaginatedResult, QueryOptions
from propdash.models.stats import DashboardStats
from propdash.models.tenant import Tenant, TenantPatch

__all__ = [
    "UNSET",
    "DashboardStats",
    "EmergencyContact",
    "Lease",
    "LeasePatch",
    "LeaseStatus",
    "MaintenanceCategory",
    "MaintenancePriority",
    "MaintenanceRequest",
    "MaintenanceRequestPatch",
    "MaintenanceStatus",
    "PaginatedResult",
    "Patch",
    "Payment",
    "PaymentMethod",
    "PaymentPatch",
    "PaymentStatus",
    "Property",
    "PropertyPatch",
    "PropertyStatus",
    "PropertyType",
    "QueryOptions",
    "SortOrder",
    "Tenant",
    "TenantPatch",
    "TenantStatus",
]
