"""Portfolio scenario: populate a provider with a synthetic landlord portfolio."""

from __future__ import annotations

import random
from datetime import date

from propdash.config import GeneratorConfig
from propdash.generators import (
    LeaseGenerator,
    MaintenanceRequestGenerator,
    PropertyGenerator,
    TenantGenerator,
)
from propdash.logging import get_logger
from propdash.models import PropertyStatus, TenantStatus
from propdash.providers.base import DataProvider

logger = get_logger(__name__)


class PortfolioScenario:
    """Generate a referentially consistent rental portfolio.

    This scenario creates:
    - Properties, a configurable share of them occupied
    - One active tenant and one active lease per occupied property
    - A monthly payment schedule per lease (paid, late, overdue, pending)
    - Pending applicants for some vacant properties
    - Maintenance requests spread across the portfolio

    All records go through the provider contract, so ids and timestamps
    are assigned by the provider.
    """

    # Share of non-occupied units under maintenance rather than vacant
    MAINTENANCE_SHARE = 0.15
    APPLICANT_RATE = 0.25

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        today: date | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.today = today or date.today()

        seed = self.config.seed
        locale = self.config.locale
        if seed is not None:
            random.seed(seed)

        self._property_gen = PropertyGenerator(seed=seed, locale=locale)
        self._tenant_gen = TenantGenerator(seed=seed, locale=locale)
        self._lease_gen = LeaseGenerator(seed=seed, locale=locale)
        self._maintenance_gen = MaintenanceRequestGenerator(seed=seed, locale=locale)

    async def populate(self, provider: DataProvider) -> dict[str, int]:
        """Create the portfolio through ``provider``.

        Returns
        -------
        dict[str, int]
            Number of records created per entity kind.
        """
        num_properties = self.config.num_properties
        num_occupied = round(num_properties * self.config.occupancy_rate)
        counts = {
            "properties": 0,
            "tenants": 0,
            "leases": 0,
            "payments": 0,
            "maintenance_requests": 0,
        }

        logger.info(
            "Starting portfolio scenario: %d properties, %d occupied",
            num_properties,
            num_occupied,
        )

        for index in range(num_properties):
            occupied = index < num_occupied
            status = PropertyStatus.OCCUPIED if occupied else self._unoccupied_status()
            prop = await provider.create_property(self._property_gen.generate(status=status))
            counts["properties"] += 1

            tenant_id = None
            if occupied:
                tenant = await provider.create_tenant(self._tenant_gen.generate())
                counts["tenants"] += 1
                tenant_id = tenant.id

                lease = await provider.create_lease(
                    self._lease_gen.generate(
                        prop.id, tenant.id, prop.monthly_rent, today=self.today
                    )
                )
                counts["leases"] += 1

                for payment in self._lease_gen.payment_schedule(
                    lease, self.config.payments_per_lease, today=self.today
                ):
                    await provider.create_payment(payment)
                    counts["payments"] += 1
            elif random.random() < self.APPLICANT_RATE:
                await provider.create_tenant(self._tenant_gen.generate(status=TenantStatus.PENDING))
                counts["tenants"] += 1

            for _ in range(self._maintenance_count()):
                await provider.create_maintenance_request(
                    self._maintenance_gen.generate(prop.id, tenant_id)
                )
                counts["maintenance_requests"] += 1

        logger.info("Portfolio scenario complete: %s", counts)
        return counts

    def _unoccupied_status(self) -> PropertyStatus:
        if random.random() < self.MAINTENANCE_SHARE:
            return PropertyStatus.MAINTENANCE
        return PropertyStatus.VACANT

    def _maintenance_count(self) -> int:
        rate = max(0.0, self.config.maintenance_per_property)
        whole = int(rate)
        return whole + (1 if random.random() < rate - whole else 0)
