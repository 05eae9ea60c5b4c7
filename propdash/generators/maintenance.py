"""Maintenance request generator."""

from __future__ import annotations

import random
from decimal import Decimal

from propdash.generators.base import BaseGenerator
from propdash.models import (
    MaintenanceCategory,
    MaintenancePriority,
    MaintenanceRequest,
    MaintenanceStatus,
)


class MaintenanceRequestGenerator(BaseGenerator):
    """Generate synthetic maintenance requests."""

    # Title and estimated cost range per category
    ISSUES = {
        MaintenanceCategory.PLUMBING: [
            ("Leaking faucet in kitchen", (80, 250)),
            ("Clogged bathroom drain", (100, 300)),
            ("Water heater not working", (400, 1500)),
        ],
        MaintenanceCategory.ELECTRICAL: [
            ("Outlet not working in bedroom", (90, 200)),
            ("Breaker keeps tripping", (150, 600)),
        ],
        MaintenanceCategory.HVAC: [
            ("HVAC not heating properly", (200, 900)),
            ("AC blowing warm air", (200, 1200)),
        ],
        MaintenanceCategory.APPLIANCE: [
            ("Broken dishwasher", (150, 700)),
            ("Refrigerator not cooling", (200, 900)),
            ("Dryer not heating", (120, 450)),
        ],
        MaintenanceCategory.STRUCTURAL: [
            ("Crack in living room ceiling", (500, 3000)),
            ("Front door does not latch", (100, 400)),
        ],
        MaintenanceCategory.OTHER: [
            ("Pest control needed", (120, 400)),
            ("Replace smoke detector batteries", (20, 60)),
        ],
    }

    PRIORITIES = list(MaintenancePriority)
    PRIORITY_WEIGHTS = [0.30, 0.40, 0.22, 0.08]

    STATUSES = list(MaintenanceStatus)
    STATUS_WEIGHTS = [0.35, 0.25, 0.35, 0.05]

    def generate(self, property_id: str, tenant_id: str | None = None) -> MaintenanceRequest:
        """Generate a maintenance request for a property.

        Completed requests carry an actual cost and a completion time.
        """
        category = random.choice(list(self.ISSUES))
        title, (low, high) = random.choice(self.ISSUES[category])
        status = random.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0]
        estimate = Decimal(random.randint(low, high))

        actual_cost = None
        completed_at = None
        if status == MaintenanceStatus.COMPLETED:
            actual_cost = (estimate * Decimal(str(round(random.uniform(0.8, 1.3), 2)))).quantize(
                Decimal("0.01")
            )
            completed_at = self.fake.date_time_between(start_date="-90d", end_date="now")

        return MaintenanceRequest(
            property_id=property_id,
            tenant_id=tenant_id,
            title=title,
            description=self.fake.sentence(nb_words=12),
            priority=random.choices(self.PRIORITIES, weights=self.PRIORITY_WEIGHTS, k=1)[0],
            status=status,
            category=category,
            estimated_cost=estimate,
            actual_cost=actual_cost,
            completed_at=completed_at,
        )
