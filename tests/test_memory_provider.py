"""Tests for InMemoryDataProvider."""

import asyncio
from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal

import pytest

from propdash.config import ProviderConfig
from propdash.exceptions import EntityNotFoundError, InvalidQueryError
from propdash.models import (
    EmergencyContact,
    Lease,
    LeasePatch,
    MaintenanceRequest,
    MaintenanceRequestPatch,
    MaintenanceStatus,
    Payment,
    PaymentMethod,
    PaymentPatch,
    PaymentStatus,
    Property,
    PropertyPatch,
    PropertyStatus,
    QueryOptions,
    SortOrder,
    Tenant,
    TenantPatch,
    TenantStatus,
)
from propdash.providers import DataProvider, InMemoryDataProvider
from propdash.providers.memory import RecordCollection, new_id


class TestSeeding:
    """Tests for fixture seeding."""

    def test_is_data_provider(self, provider: InMemoryDataProvider) -> None:
        assert isinstance(provider, DataProvider)

    def test_fixture_counts(self, provider: InMemoryDataProvider) -> None:
        assert provider.summary() == {
            "properties": 4,
            "tenants": 3,
            "leases": 3,
            "payments": 6,
            "maintenance_requests": 3,
        }

    def test_empty_provider(self, empty_provider: InMemoryDataProvider) -> None:
        assert sum(empty_provider.summary().values()) == 0

    def test_seed_override(self) -> None:
        provider = InMemoryDataProvider(ProviderConfig(seed_fixtures=True), seed_fixtures=False)
        assert provider.summary()["properties"] == 0

    def test_instances_do_not_share_state(self) -> None:
        a = InMemoryDataProvider()
        b = InMemoryDataProvider()
        a.properties.remove("1")

        assert len(a.properties) == 3
        assert len(b.properties) == 4

    def test_fixture_references_resolve(self, provider: InMemoryDataProvider) -> None:
        property_ids = {p.id for p in provider.properties.snapshot()}
        tenant_ids = {t.id for t in provider.tenants.snapshot()}
        lease_ids = {lease.id for lease in provider.leases.snapshot()}

        for lease in provider.leases.snapshot():
            assert lease.property_id in property_ids
            assert lease.tenant_id in tenant_ids
        for payment in provider.payments.snapshot():
            assert payment.lease_id in lease_ids
            assert payment.tenant_id in tenant_ids
        for request in provider.maintenance_requests.snapshot():
            assert request.property_id in property_ids


class TestReads:
    """Tests for list and single-record reads."""

    @pytest.mark.asyncio
    async def test_get_properties_default_page(self, provider: InMemoryDataProvider) -> None:
        result = await provider.get_properties()

        assert [p.id for p in result.data] == ["1", "2", "3", "4"]
        assert result.total == 4
        assert result.total_pages == 1

    @pytest.mark.asyncio
    async def test_get_payments_paged(self, provider: InMemoryDataProvider) -> None:
        result = await provider.get_payments(QueryOptions(page=2, limit=4))

        assert [p.id for p in result.data] == ["5", "6"]
        assert result.total == 6
        assert result.total_pages == 2

    @pytest.mark.asyncio
    async def test_get_properties_sorted_by_rent(self, provider: InMemoryDataProvider) -> None:
        options = QueryOptions(sort_by="monthly_rent", sort_order=SortOrder.DESC)
        result = await provider.get_properties(options)

        assert [p.monthly_rent for p in result.data] == [
            Decimal("4500"),
            Decimal("3800"),
            Decimal("3500"),
            Decimal("2200"),
        ]

    @pytest.mark.asyncio
    async def test_get_maintenance_filtered(self, provider: InMemoryDataProvider) -> None:
        options = QueryOptions(filters={"status": MaintenanceStatus.OPEN})
        result = await provider.get_maintenance_requests(options)

        assert {m.id for m in result.data} == {"2", "3"}

    @pytest.mark.asyncio
    async def test_get_tenants_invalid_limit(self, provider: InMemoryDataProvider) -> None:
        with pytest.raises(InvalidQueryError):
            await provider.get_tenants(QueryOptions(limit=0))

    @pytest.mark.asyncio
    async def test_unknown_filter_behind_unmatched_filter(
        self, provider: InMemoryDataProvider
    ) -> None:
        options = QueryOptions(filters={"status": "nope", "bogus": 1})
        with pytest.raises(InvalidQueryError, match="bogus"):
            await provider.get_properties(options)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "options",
        [
            QueryOptions(filters={"bogus": 1}),
            QueryOptions(sort_by="bogus"),
            QueryOptions(sort_by="monthly_rent", sort_order="sideways"),
        ],
    )
    async def test_bad_query_on_empty_provider(
        self, empty_provider: InMemoryDataProvider, options: QueryOptions
    ) -> None:
        """Validation does not depend on which records are stored."""
        with pytest.raises(InvalidQueryError):
            await empty_provider.get_properties(options)

    @pytest.mark.asyncio
    async def test_invalid_sort_order(self, provider: InMemoryDataProvider) -> None:
        options = QueryOptions(sort_by="email", sort_order="sideways")
        with pytest.raises(InvalidQueryError, match="sideways"):
            await provider.get_tenants(options)

    @pytest.mark.asyncio
    async def test_sort_by_unorderable_field(self, provider: InMemoryDataProvider) -> None:
        with pytest.raises(InvalidQueryError, match="emergency_contact"):
            await provider.get_tenants(QueryOptions(sort_by="emergency_contact"))

    @pytest.mark.asyncio
    async def test_get_one(self, provider: InMemoryDataProvider) -> None:
        tenant = await provider.get_tenant("2")

        assert tenant is not None
        assert tenant.full_name == "Alice Johnson"
        assert tenant.emergency_contact.relationship == "Father"

    @pytest.mark.asyncio
    async def test_get_one_unknown_is_none(self, provider: InMemoryDataProvider) -> None:
        assert await provider.get_property("missing") is None
        assert await provider.get_tenant("missing") is None
        assert await provider.get_lease("missing") is None
        assert await provider.get_payment("missing") is None
        assert await provider.get_maintenance_request("missing") is None

    @pytest.mark.asyncio
    async def test_concurrent_reads(self, provider: InMemoryDataProvider) -> None:
        properties, tenants, leases = await asyncio.gather(
            provider.get_properties(),
            provider.get_tenants(),
            provider.get_leases(),
        )

        assert (properties.total, tenants.total, leases.total) == (4, 3, 3)


class TestRelationshipQueries:
    """Tests for by-owner reads."""

    @pytest.mark.asyncio
    async def test_leases_by_property(self, provider: InMemoryDataProvider) -> None:
        leases = await provider.get_leases_by_property("4")
        assert [lease.id for lease in leases] == ["3"]

    @pytest.mark.asyncio
    async def test_leases_by_tenant(self, provider: InMemoryDataProvider) -> None:
        leases = await provider.get_leases_by_tenant("2")
        assert [lease.id for lease in leases] == ["2"]

    @pytest.mark.asyncio
    async def test_payments_by_lease(self, provider: InMemoryDataProvider) -> None:
        payments = await provider.get_payments_by_lease("1")
        assert {p.id for p in payments} == {"1", "2"}

    @pytest.mark.asyncio
    async def test_payments_by_tenant(self, provider: InMemoryDataProvider) -> None:
        payments = await provider.get_payments_by_tenant("3")
        assert {p.id for p in payments} == {"5", "6"}

    @pytest.mark.asyncio
    async def test_maintenance_by_property(self, provider: InMemoryDataProvider) -> None:
        requests = await provider.get_maintenance_requests_by_property("2")
        assert [m.title for m in requests] == ["HVAC not heating properly"]

    @pytest.mark.asyncio
    async def test_no_matches_is_empty_list(self, provider: InMemoryDataProvider) -> None:
        assert await provider.get_leases_by_property("3") == []
        assert await provider.get_leases_by_tenant("nobody") == []
        assert await provider.get_payments_by_lease("nope") == []
        assert await provider.get_payments_by_tenant("nobody") == []
        assert await provider.get_maintenance_requests_by_property("3") == []


class TestCreate:
    """Tests for create operations."""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_timestamps(
        self, provider: InMemoryDataProvider, sample_property: Property
    ) -> None:
        created = await provider.create_property(sample_property)

        assert created.id
        assert created.created_at is not None
        assert created.created_at == created.updated_at
        assert created.address == sample_property.address

    @pytest.mark.asyncio
    async def test_create_ignores_caller_managed_fields(
        self, provider: InMemoryDataProvider, sample_tenant: Tenant
    ) -> None:
        forged = replace(sample_tenant, id="1", created_at=datetime(2000, 1, 1))
        created = await provider.create_tenant(forged)

        assert created.id != "1"
        assert created.created_at != datetime(2000, 1, 1)
        assert len(provider.tenants) == 4

    @pytest.mark.asyncio
    async def test_create_appends(self, provider: InMemoryDataProvider, sample_lease: Lease) -> None:
        created = await provider.create_lease(sample_lease)
        result = await provider.get_leases()

        assert result.data[-1] == created
        assert result.total == 4

    @pytest.mark.asyncio
    async def test_round_trip(
        self,
        empty_provider: InMemoryDataProvider,
        sample_property: Property,
        sample_tenant: Tenant,
        sample_lease: Lease,
        sample_payment: Payment,
        sample_request: MaintenanceRequest,
    ) -> None:
        """Reading a created record returns an equal record."""
        p = empty_provider
        prop = await p.create_property(sample_property)
        tenant = await p.create_tenant(sample_tenant)
        lease = await p.create_lease(sample_lease)
        payment = await p.create_payment(sample_payment)
        request = await p.create_maintenance_request(sample_request)

        assert await p.get_property(prop.id) == prop
        assert await p.get_tenant(tenant.id) == tenant
        assert await p.get_lease(lease.id) == lease
        assert await p.get_payment(payment.id) == payment
        assert await p.get_maintenance_request(request.id) == request

    @pytest.mark.asyncio
    async def test_ids_are_unique(
        self, empty_provider: InMemoryDataProvider, sample_payment: Payment
    ) -> None:
        created = [await empty_provider.create_payment(sample_payment) for _ in range(50)]
        assert len({p.id for p in created}) == 50

    @pytest.mark.asyncio
    async def test_create_wrong_type(
        self, provider: InMemoryDataProvider, sample_tenant: Tenant
    ) -> None:
        with pytest.raises(TypeError, match="Expected Property"):
            await provider.create_property(sample_tenant)

    def test_new_id_format(self) -> None:
        assert len(new_id()) == 32
        assert new_id() != new_id()


class TestUpdate:
    """Tests for update operations."""

    @pytest.mark.asyncio
    async def test_update_changes_only_patched_fields(self, provider: InMemoryDataProvider) -> None:
        before = await provider.get_property("3")
        after = await provider.update_property("3", PropertyPatch(status=PropertyStatus.OCCUPIED))

        assert after.status == PropertyStatus.OCCUPIED
        assert replace(after, status=before.status, updated_at=before.updated_at) == before
        assert after.created_at == before.created_at
        assert after.updated_at >= before.updated_at

    @pytest.mark.asyncio
    async def test_update_is_visible_to_reads(self, provider: InMemoryDataProvider) -> None:
        updated = await provider.update_lease("1", LeasePatch(monthly_rent=Decimal("3600")))

        assert await provider.get_lease("1") == updated

    @pytest.mark.asyncio
    async def test_update_does_not_mutate_previous_version(
        self, provider: InMemoryDataProvider
    ) -> None:
        before = await provider.get_payment("2")
        await provider.update_payment("2", PaymentPatch(status=PaymentStatus.PAID))

        assert before.status == PaymentStatus.PENDING

    @pytest.mark.asyncio
    async def test_update_with_mapping(self, provider: InMemoryDataProvider) -> None:
        updated = await provider.update_payment(
            "2",
            {
                "status": PaymentStatus.PAID,
                "paid_date": date(2024, 11, 30),
                "payment_method": PaymentMethod.CASH,
            },
        )

        assert updated.status == PaymentStatus.PAID
        assert updated.paid_date == date(2024, 11, 30)
        assert updated.amount == Decimal("3500")

    @pytest.mark.asyncio
    async def test_update_clears_optional_field(self, provider: InMemoryDataProvider) -> None:
        updated = await provider.update_payment("1", PaymentPatch(paid_date=None))
        assert updated.paid_date is None

    @pytest.mark.asyncio
    async def test_update_replaces_nested_contact(self, provider: InMemoryDataProvider) -> None:
        contact = EmergencyContact(name="Pat Doe", phone="555-0999", relationship="Brother")
        updated = await provider.update_tenant("1", TenantPatch(emergency_contact=contact))

        assert updated.emergency_contact == contact

    @pytest.mark.asyncio
    async def test_update_with_mapping_rejects_unknown_field(
        self, provider: InMemoryDataProvider
    ) -> None:
        with pytest.raises(TypeError):
            await provider.update_tenant("1", {"nickname": "JD"})

    @pytest.mark.asyncio
    async def test_update_with_mapping_rejects_managed_field(
        self, provider: InMemoryDataProvider
    ) -> None:
        with pytest.raises(TypeError):
            await provider.update_property("1", {"created_at": datetime(2020, 1, 1)})

    @pytest.mark.asyncio
    async def test_update_with_wrong_patch_type(self, provider: InMemoryDataProvider) -> None:
        with pytest.raises(TypeError, match="Expected LeasePatch"):
            await provider.update_lease("1", TenantPatch(status=TenantStatus.INACTIVE))

    @pytest.mark.asyncio
    async def test_update_unknown_id(self, provider: InMemoryDataProvider) -> None:
        with pytest.raises(EntityNotFoundError) as exc_info:
            await provider.update_maintenance_request(
                "missing", MaintenanceRequestPatch(status=MaintenanceStatus.COMPLETED)
            )

        assert exc_info.value.entity_kind == "MaintenanceRequest"
        assert exc_info.value.entity_id == "missing"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method",
        [
            "update_property",
            "update_tenant",
            "update_lease",
            "update_payment",
            "update_maintenance_request",
        ],
    )
    async def test_update_unknown_id_every_kind(
        self, provider: InMemoryDataProvider, method: str
    ) -> None:
        with pytest.raises(EntityNotFoundError):
            await getattr(provider, method)("missing", {})

    @pytest.mark.asyncio
    async def test_update_unknown_id_logs_warning(
        self, provider: InMemoryDataProvider, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level("WARNING", logger="propdash.providers.memory"):
            with pytest.raises(EntityNotFoundError):
                await provider.update_tenant("missing", {})

        assert "Tenant missing not found" in caplog.text
        record = caplog.records[-1]
        assert record.entity_kind == "Tenant"
        assert record.entity_id == "missing"

    def test_updated_at_never_goes_backwards(self, sample_tenant: Tenant) -> None:
        future = datetime(2999, 1, 1)
        stored = replace(sample_tenant, id="t1", created_at=future, updated_at=future)
        collection = RecordCollection("Tenant", Tenant, TenantPatch, [stored])

        updated = collection.update("t1", TenantPatch(status=TenantStatus.INACTIVE))

        assert updated.updated_at == future


class TestDelete:
    """Tests for delete operations."""

    @pytest.mark.asyncio
    async def test_delete_then_get(self, provider: InMemoryDataProvider) -> None:
        assert await provider.delete_maintenance_request("1") is True
        assert await provider.get_maintenance_request("1") is None

    @pytest.mark.asyncio
    async def test_delete_twice(self, provider: InMemoryDataProvider) -> None:
        assert await provider.delete_payment("5") is True
        assert await provider.delete_payment("5") is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method",
        [
            "delete_property",
            "delete_tenant",
            "delete_lease",
            "delete_payment",
            "delete_maintenance_request",
        ],
    )
    async def test_delete_unknown_returns_false(
        self, provider: InMemoryDataProvider, method: str
    ) -> None:
        assert await getattr(provider, method)("missing") is False

    @pytest.mark.asyncio
    async def test_create_then_delete_tenant(
        self, provider: InMemoryDataProvider, sample_tenant: Tenant
    ) -> None:
        created = await provider.create_tenant(sample_tenant)
        assert (await provider.get_tenants()).total == 4

        assert await provider.delete_tenant(created.id) is True
        assert await provider.get_tenant(created.id) is None
        result = await provider.get_tenants()
        assert result.total == 3
        assert created.id not in {t.id for t in result.data}

    @pytest.mark.asyncio
    async def test_delete_does_not_cascade(self, provider: InMemoryDataProvider) -> None:
        """Dependent records keep their now-dangling references."""
        assert await provider.delete_property("1") is True

        leases = await provider.get_leases_by_property("1")
        assert [lease.id for lease in leases] == ["1"]
        assert len(await provider.get_maintenance_requests_by_property("1")) == 1

    @pytest.mark.asyncio
    async def test_delete_keeps_order_of_rest(self, provider: InMemoryDataProvider) -> None:
        await provider.delete_property("2")
        result = await provider.get_properties()

        assert [p.id for p in result.data] == ["1", "3", "4"]


class TestLatency:
    """Tests for simulated latency."""

    @pytest.mark.asyncio
    async def test_latency_is_awaited(self) -> None:
        provider = InMemoryDataProvider(ProviderConfig(latency_ms=20))
        loop = asyncio.get_running_loop()

        started = loop.time()
        await provider.get_property("1")

        assert loop.time() - started >= 0.015
