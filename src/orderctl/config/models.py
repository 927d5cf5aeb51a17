"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, orderctl.toml only contains
overrides. An empty file (or none at all) gives fixed-rate pricing and
log-only storage.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field

from orderctl.domain.pricing import ZeroPricePolicy


class PricingConfig(BaseModel):
    """[pricing] section."""

    model_config = {"frozen": True}

    backend: Literal["fixed_rate", "catalog"] = "fixed_rate"
    unit_rate: Decimal = Decimal("10.5")
    zero_price: ZeroPricePolicy = ZeroPricePolicy.REJECT
    catalog: dict[int, Decimal] = Field(default_factory=dict)


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    backend: Literal["log", "memory"] = "log"


class OrderConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    pricing: PricingConfig = Field(default_factory=PricingConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
