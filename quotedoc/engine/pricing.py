# quotedoc/engine/pricing.py
from __future__ import annotations

from typing import Protocol, runtime_checkable

from .context import OrderData, PricingSummary, UiFlags

ACCESSORY_CATEGORIES: tuple[str, ...] = ("motor", "remote", "remote-single", "charger", "cord")


@runtime_checkable
class PricingSummaryProvider(Protocol):
    """
    Seam to the calculation engine. The renderer never computes prices itself;
    it only formats what the provider hands back.
    """

    def get_summary(self, order_data: OrderData, ui: UiFlags) -> PricingSummary: ...

    def get_accessory_price(self, category: str) -> float: ...
