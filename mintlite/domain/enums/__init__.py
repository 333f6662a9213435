"""Domain enums package."""

from mintlite.domain.enums.asset_class import AssetClass
from mintlite.domain.enums.price_status import PriceStatus

__all__ = [
    "AssetClass",
    "PriceStatus",
]
