"""Dependency-injection container.

This module defines a dependency-injection (DI) container that wires together
the deal pipeline: the registry of active store scrapers, the aggregator that
fans out over them and the response formatter. Components are built from the
configuration tree instead of being created as module-level globals.
"""

from dependency_injector import containers, providers

from deals_bot.bot.aggregator import DealAggregator
from deals_bot.bot.response_formatter import ResponseFormatter
from deals_bot.scrapers import build_registry


class Container(containers.DeclarativeContainer):
    """DI container for the application."""

    config = providers.Configuration()

    scraper_registry = providers.Singleton(
        build_registry,
        active=config.stores.active,
        nuuvem_zero_price_without_discount=config.stores.nuuvem_zero_price_without_discount,
    )

    # Bot components
    aggregator = providers.Singleton(
        DealAggregator,
        registry=scraper_registry,
        priority=config.stores.priority,
    )
    response_formatter = providers.Singleton(ResponseFormatter)


def create_container(config_data: dict) -> Container:
    """Create a container loaded with a configuration tree.

    Args:
        config_data: Mapping with "bot" and "stores" sections, see Config.as_dict.

    Returns:
        Configured container.
    """
    container = Container()
    container.config.from_dict(config_data)
    return container
