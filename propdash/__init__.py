"""Data-access layer for a single-tenant property management dashboard."""

from propdash.providers import DataProvider, InMemoryDataProvider, ProviderContext

__all__ = ["DataProvider", "InMemoryDataProvider", "ProviderContext"]

__version__ = "0.1.0"
