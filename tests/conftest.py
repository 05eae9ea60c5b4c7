"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from propdash.config import ProviderConfig
from propdash.models import (
    EmergencyContact,
    Lease,
    LeaseStatus,
    MaintenanceCategory,
    MaintenancePriority,
    MaintenanceRequest,
    MaintenanceStatus,
    Payment,
    PaymentStatus,
    Property,
    PropertyStatus,
    PropertyType,
    Tenant,
    TenantStatus,
)
from propdash.providers import InMemoryDataProvider


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def provider() -> InMemoryDataProvider:
    """Provider seeded with the demonstration fixtures."""
    return InMemoryDataProvider()


@pytest.fixture
def empty_provider() -> InMemoryDataProvider:
    """Provider with no records."""
    return InMemoryDataProvider(ProviderConfig(seed_fixtures=False))


@pytest.fixture
def sample_property() -> Property:
    """Property without id or timestamps."""
    return Property(
        address="10 Market Street",
        city="San Francisco",
        state="CA",
        zip_code="94103",
        property_type=PropertyType.APARTMENT,
        bedrooms=2,
        bathrooms=1.5,
        square_feet=950,
        monthly_rent=Decimal("3500"),
        status=PropertyStatus.OCCUPIED,
        description="Corner unit",
    )


@pytest.fixture
def sample_tenant() -> Tenant:
    """Tenant without id or timestamps."""
    return Tenant(
        first_name="Dana",
        last_name="Lee",
        email="dana.lee@email.com",
        phone="555-0401",
        emergency_contact=EmergencyContact(name="Sam Lee", phone="555-0402", relationship="Sibling"),
        status=TenantStatus.ACTIVE,
    )


@pytest.fixture
def sample_lease() -> Lease:
    """Active lease between placeholder property and tenant ids."""
    return Lease(
        property_id="prop-test-001",
        tenant_id="tenant-test-001",
        start_date=date(2025, 1, 1),
        end_date=date(2025, 12, 31),
        monthly_rent=Decimal("3500"),
        security_deposit=Decimal("3500"),
        status=LeaseStatus.ACTIVE,
    )


@pytest.fixture
def sample_payment() -> Payment:
    """Pending payment on a placeholder lease."""
    return Payment(
        lease_id="lease-test-001",
        tenant_id="tenant-test-001",
        amount=Decimal("3500"),
        due_date=date(2025, 2, 1),
        status=PaymentStatus.PENDING,
    )


@pytest.fixture
def sample_request() -> MaintenanceRequest:
    """Open maintenance request on a placeholder property."""
    return MaintenanceRequest(
        property_id="prop-test-001",
        title="Garbage disposal jammed",
        description="Disposal hums but does not spin",
        priority=MaintenancePriority.MEDIUM,
        status=MaintenanceStatus.OPEN,
        category=MaintenanceCategory.APPLIANCE,
    )
