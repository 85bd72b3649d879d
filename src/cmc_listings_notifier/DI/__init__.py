"""Dependency injection."""

from cmc_listings_notifier.DI.container import Container

__all__ = ["Container"]
