"""Demonstration dataset the in-memory provider is seeded with.

Four properties, three tenants, three active leases, six payments and
three maintenance requests. Every lease, payment and maintenance request
points at records that exist in the set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from propdash.models import (
    EmergencyContact,
    Lease,
    LeaseStatus,
    MaintenanceCategory,
    MaintenancePriority,
    MaintenanceRequest,
    MaintenanceStatus,
    Payment,
    PaymentMethod,
    PaymentStatus,
    Property,
    PropertyStatus,
    PropertyType,
    Tenant,
    TenantStatus,
)


@dataclass
class FixtureSet:
    """Records for each entity kind, in stored order."""

    properties: list[Property] = field(default_factory=list)
    tenants: list[Tenant] = field(default_factory=list)
    leases: list[Lease] = field(default_factory=list)
    payments: list[Payment] = field(default_factory=list)
    maintenance_requests: list[MaintenanceRequest] = field(default_factory=list)

    def summary(self) -> dict[str, int]:
        """Return record counts per entity kind."""
        return {
            "properties": len(self.properties),
            "tenants": len(self.tenants),
            "leases": len(self.leases),
            "payments": len(self.payments),
            "maintenance_requests": len(self.maintenance_requests),
        }


def _property(
    pid: str,
    address: str,
    city: str,
    zip_code: str,
    property_type: PropertyType,
    bedrooms: int,
    bathrooms: float,
    square_feet: int,
    rent: str,
    status: PropertyStatus,
    description: str,
    created: datetime,
) -> Property:
    return Property(
        address=address,
        city=city,
        state="CA",
        zip_code=zip_code,
        property_type=property_type,
        bedrooms=bedrooms,
        bathrooms=bathrooms,
        square_feet=square_feet,
        monthly_rent=Decimal(rent),
        status=status,
        description=description,
        id=pid,
        created_at=created,
        updated_at=created,
    )


def _tenant(
    tid: str,
    first_name: str,
    last_name: str,
    email: str,
    phone: str,
    contact: EmergencyContact,
    created: datetime,
) -> Tenant:
    return Tenant(
        first_name=first_name,
        last_name=last_name,
        email=email,
        phone=phone,
        emergency_contact=contact,
        status=TenantStatus.ACTIVE,
        id=tid,
        created_at=created,
        updated_at=created,
    )


def _lease(
    lid: str,
    property_id: str,
    tenant_id: str,
    start: date,
    end: date,
    rent: str,
    terms: str,
    created: datetime,
) -> Lease:
    return Lease(
        property_id=property_id,
        tenant_id=tenant_id,
        start_date=start,
        end_date=end,
        monthly_rent=Decimal(rent),
        security_deposit=Decimal(rent),
        status=LeaseStatus.ACTIVE,
        terms=terms,
        id=lid,
        created_at=created,
        updated_at=created,
    )


def _payment(
    pid: str,
    lease_id: str,
    tenant_id: str,
    amount: str,
    due: date,
    status: PaymentStatus,
    created: datetime,
    updated: datetime | None = None,
    paid: date | None = None,
    method: PaymentMethod | None = None,
) -> Payment:
    return Payment(
        lease_id=lease_id,
        tenant_id=tenant_id,
        amount=Decimal(amount),
        due_date=due,
        status=status,
        paid_date=paid,
        payment_method=method,
        id=pid,
        created_at=created,
        updated_at=updated or created,
    )


def load_fixtures() -> FixtureSet:
    """Build a fresh copy of the demonstration dataset.

    Returns
    -------
    FixtureSet
        New record lists; callers may mutate the lists freely.
    """
    properties = [
        _property(
            "1", "123 Oak Street", "San Francisco", "94102", PropertyType.APARTMENT,
            2, 2, 1200, "3500", PropertyStatus.OCCUPIED,
            "Modern apartment in downtown SF", datetime(2024, 1, 15),
        ),
        _property(
            "2", "456 Maple Avenue", "San Francisco", "94110", PropertyType.HOUSE,
            3, 2.5, 1800, "4500", PropertyStatus.OCCUPIED,
            "Beautiful family home with backyard", datetime(2024, 2, 1),
        ),
        _property(
            "3", "789 Pine Court", "Oakland", "94612", PropertyType.CONDO,
            1, 1, 800, "2200", PropertyStatus.VACANT,
            "Cozy condo near transit", datetime(2024, 3, 10),
        ),
        _property(
            "4", "321 Elm Boulevard", "Berkeley", "94704", PropertyType.TOWNHOUSE,
            3, 2, 1500, "3800", PropertyStatus.OCCUPIED,
            "Spacious townhouse near UC Berkeley", datetime(2024, 2, 20),
        ),
    ]

    tenants = [
        _tenant(
            "1", "John", "Doe", "john.doe@email.com", "555-0101",
            EmergencyContact(name="Jane Doe", phone="555-0102", relationship="Spouse"),
            datetime(2024, 1, 20),
        ),
        _tenant(
            "2", "Alice", "Johnson", "alice.j@email.com", "555-0201",
            EmergencyContact(name="Bob Johnson", phone="555-0202", relationship="Father"),
            datetime(2024, 2, 5),
        ),
        _tenant(
            "3", "Michael", "Smith", "michael.smith@email.com", "555-0301",
            EmergencyContact(name="Sarah Smith", phone="555-0302", relationship="Sister"),
            datetime(2024, 2, 25),
        ),
    ]

    leases = [
        _lease(
            "1", "1", "1", date(2024, 2, 1), date(2025, 1, 31), "3500",
            "12-month lease, utilities not included", datetime(2024, 1, 20),
        ),
        _lease(
            "2", "2", "2", date(2024, 3, 1), date(2025, 2, 28), "4500",
            "12-month lease, tenant responsible for utilities", datetime(2024, 2, 5),
        ),
        _lease(
            "3", "4", "3", date(2024, 3, 15), date(2025, 3, 14), "3800",
            "12-month lease", datetime(2024, 2, 25),
        ),
    ]

    payments = [
        _payment(
            "1", "1", "1", "3500", date(2024, 11, 1), PaymentStatus.PAID,
            datetime(2024, 10, 1), updated=datetime(2024, 10, 28),
            paid=date(2024, 10, 28), method=PaymentMethod.BANK_TRANSFER,
        ),
        _payment(
            "2", "1", "1", "3500", date(2024, 12, 1), PaymentStatus.PENDING,
            datetime(2024, 11, 1),
        ),
        _payment(
            "3", "2", "2", "4500", date(2024, 11, 1), PaymentStatus.PAID,
            datetime(2024, 10, 1), updated=datetime(2024, 11, 1),
            paid=date(2024, 11, 1), method=PaymentMethod.CHECK,
        ),
        _payment(
            "4", "2", "2", "4500", date(2024, 12, 1), PaymentStatus.PENDING,
            datetime(2024, 11, 1),
        ),
        _payment(
            "5", "3", "3", "3800", date(2024, 10, 15), PaymentStatus.OVERDUE,
            datetime(2024, 9, 15),
        ),
        _payment(
            "6", "3", "3", "3800", date(2024, 11, 15), PaymentStatus.PENDING,
            datetime(2024, 10, 15),
        ),
    ]

    maintenance_requests = [
        MaintenanceRequest(
            property_id="1",
            tenant_id="1",
            title="Leaking faucet in kitchen",
            description="The kitchen faucet has been dripping constantly",
            priority=MaintenancePriority.MEDIUM,
            status=MaintenanceStatus.IN_PROGRESS,
            category=MaintenanceCategory.PLUMBING,
            estimated_cost=Decimal("150"),
            id="1",
            created_at=datetime(2024, 10, 15),
            updated_at=datetime(2024, 10, 16),
        ),
        MaintenanceRequest(
            property_id="2",
            tenant_id="2",
            title="HVAC not heating properly",
            description="Heater is not reaching set temperature",
            priority=MaintenancePriority.HIGH,
            status=MaintenanceStatus.OPEN,
            category=MaintenanceCategory.HVAC,
            estimated_cost=Decimal("350"),
            id="2",
            created_at=datetime(2024, 11, 5),
            updated_at=datetime(2024, 11, 5),
        ),
        MaintenanceRequest(
            property_id="4",
            tenant_id="3",
            title="Broken dishwasher",
            description="Dishwasher stopped working mid-cycle",
            priority=MaintenancePriority.LOW,
            status=MaintenanceStatus.OPEN,
            category=MaintenanceCategory.APPLIANCE,
            id="3",
            created_at=datetime(2024, 11, 8),
            updated_at=datetime(2024, 11, 8),
        ),
    ]

    return FixtureSet(
        properties=properties,
        tenants=tenants,
        leases=leases,
        payments=payments,
        maintenance_requests=maintenance_requests,
    )
