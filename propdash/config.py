"""Configuration management for propdash."""

import os
from dataclasses import dataclass, field

from propdash.exceptions import ConfigurationError


@dataclass
class ProviderConfig:
    """Data provider configuration."""

    provider_type: str = "memory"
    latency_ms: float = 0.0  # Simulated storage round-trip per operation
    seed_fixtures: bool = True

    @property
    def latency_seconds(self) -> float:
        """Simulated latency in seconds."""
        return max(0.0, self.latency_ms) / 1000.0


@dataclass
class GeneratorConfig:
    """Configuration for synthetic portfolio generation."""

    num_properties: int = 10
    occupancy_rate: float = 0.75
    payments_per_lease: int = 6
    maintenance_per_property: float = 1.0  # Average requests per property
    locale: str = "en_US"
    seed: int | None = None


@dataclass
class DashboardConfig:
    """Main configuration for propdash."""

    provider: ProviderConfig = field(default_factory=ProviderConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "DashboardConfig":
        """Create config from environment variables."""
        provider = ProviderConfig(
            provider_type=os.getenv("PROPDASH_PROVIDER", "memory"),
            latency_ms=_env_number("PROPDASH_LATENCY_MS", "0", float),
            seed_fixtures=os.getenv("PROPDASH_SEED_FIXTURES", "true").lower() == "true",
        )

        seed = os.getenv("PROPDASH_SEED")
        generator = GeneratorConfig(
            num_properties=_env_number("PROPDASH_NUM_PROPERTIES", "10", int),
            seed=_env_number("PROPDASH_SEED", seed, int) if seed else None,
        )

        return cls(
            provider=provider,
            generator=generator,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _env_number(name: str, raw: str, cast: type) -> int | float:
    value = os.getenv(name, raw)
    try:
        return cast(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from exc
