"""Aggregate dashboard statistics."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class DashboardStats:
    """Portfolio-wide counters shown on the dashboard landing page."""

    total_properties: int
    occupied_properties: int
    vacant_properties: int
    total_tenants: int
    active_tenants: int
    total_monthly_revenue: Decimal
    pending_payments: int
    overdue_payments: int
    open_maintenance_requests: int

    @property
    def occupancy_rate(self) -> float:
        """Occupied share of all properties, as a percentage."""
        if self.total_properties == 0:
            return 0.0
        return self.occupied_properties / self.total_properties * 100
