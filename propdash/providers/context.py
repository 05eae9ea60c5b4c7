"""Provider access point.

A :class:`ProviderContext` is built once at startup and handed to every
consumer. It lazily constructs one provider of the configured variant and
returns that same instance until the variant is switched or reset, so all
consumers share one mutable state.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

from propdash.config import ProviderConfig
from propdash.exceptions import ConfigurationError
from propdash.logging import get_logger
from propdash.providers.base import DataProvider
from propdash.providers.memory import InMemoryDataProvider

logger = get_logger(__name__)

ProviderFactory = Callable[[ProviderConfig], DataProvider]

DEFAULT_PROVIDER_TYPE = "memory"


class ProviderContext:
    """Holds the single shared provider instance for a process.

    Parameters
    ----------
    config : ProviderConfig | None
        Provider configuration; ``provider_type`` selects the variant.

    Raises
    ------
    ConfigurationError
        If ``config.provider_type`` is not a registered variant.
    """

    def __init__(self, config: ProviderConfig | None = None) -> None:
        self.config = replace(config) if config else ProviderConfig()
        self._factories: dict[str, ProviderFactory] = {
            DEFAULT_PROVIDER_TYPE: InMemoryDataProvider,
        }
        self._instance: DataProvider | None = None
        self._check_type(self.config.provider_type)

    @property
    def provider_type(self) -> str:
        return self.config.provider_type

    @property
    def available_types(self) -> list[str]:
        return sorted(self._factories)

    def register(self, name: str, factory: ProviderFactory) -> None:
        """Make a provider variant selectable by name."""
        self._factories[name] = factory

    def get(self) -> DataProvider:
        """Return the shared provider, constructing it on first use."""
        if self._instance is None:
            self._instance = self._factories[self.config.provider_type](self.config)
            logger.info("Created %s data provider", self.config.provider_type)
        return self._instance

    def set_type(self, name: str) -> None:
        """Switch variants; the next :meth:`get` builds a new instance."""
        self._check_type(name)
        self._instance = None
        self.config.provider_type = name

    def reset(self) -> None:
        """Drop the cached provider and revert to the default variant."""
        self._instance = None
        self.config.provider_type = DEFAULT_PROVIDER_TYPE

    def _check_type(self, name: str) -> None:
        if name not in self._factories:
            raise ConfigurationError(
                f"Unknown provider type {name!r}; expected one of {self.available_types}"
            )
