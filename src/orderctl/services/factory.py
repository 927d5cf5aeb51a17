"""Wire an OrderProcessor from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from orderctl.infrastructure.pricing import CatalogPricing, FixedRatePricing
from orderctl.infrastructure.storage import InMemoryOrderStorage, LoggingOrderStorage
from orderctl.services.processor import OrderProcessor

if TYPE_CHECKING:
    from orderctl.config.models import PricingConfig, StorageConfig
    from orderctl.config.settings import OrderSettings
    from orderctl.infrastructure.pricing import PriceLookup
    from orderctl.infrastructure.storage import OrderStorage


def build_pricing(config: PricingConfig) -> PriceLookup:
    if config.backend == "catalog":
        return CatalogPricing(config.catalog)
    return FixedRatePricing(config.unit_rate)


def build_storage(config: StorageConfig) -> OrderStorage:
    if config.backend == "memory":
        return InMemoryOrderStorage()
    return LoggingOrderStorage()


def create_processor(settings: OrderSettings | None = None) -> OrderProcessor:
    """Create a processor from *settings*, or from code defaults when None."""
    if settings is None:
        from orderctl.config.models import OrderConfig

        config = OrderConfig()
        pricing_cfg, storage_cfg = config.pricing, config.storage
    else:
        pricing_cfg, storage_cfg = settings.pricing, settings.storage

    return OrderProcessor(
        build_pricing(pricing_cfg),
        build_storage(storage_cfg),
        zero_price=pricing_cfg.zero_price,
    )
