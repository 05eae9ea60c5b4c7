"""Scenarios for populating a provider with realistic portfolios."""

from propdash.scenarios.portfolio import PortfolioScenario

__all__ = ["PortfolioScenario"]
