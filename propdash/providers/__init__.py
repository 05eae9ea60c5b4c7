"""Data providers: the access contract and its implementations."""

from propdash.providers.base import DataProvider
from propdash.providers.context import ProviderContext
from propdash.providers.memory import InMemoryDataProvider

__all__ = ["DataProvider", "InMemoryDataProvider", "ProviderContext"]
