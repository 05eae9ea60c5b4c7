"""Synthetic record generators for demo portfolios."""

from propdash.generators.lease import LeaseGenerator
from propdash.generators.maintenance import MaintenanceRequestGenerator
from propdash.generators.property import PropertyGenerator
from propdash.generators.tenant import TenantGenerator

__all__ = [
    "LeaseGenerator",
    "MaintenanceRequestGenerator",
    "PropertyGenerator",
    "TenantGenerator",
]
