# app/services/pricing.py
from __future__ import annotations

from typing import Mapping, Optional

from quotedoc.engine.context import OrderData, PricingSummary, UiFlags, coerce_number


class PrecomputedPricingProvider:
    """
    Pricing provider for the HTTP service.

    The calculation engine runs in the browser app and attaches its figures to
    the order (``quoteData.summary``); this provider only validates them.
    Accessory unit prices come from settings.ACCESSORY_PRICES.
    """

    def __init__(self, accessory_prices: Optional[Mapping[str, float]] = None):
        self.accessory_prices = dict(accessory_prices or {})

    def get_summary(self, order_data: OrderData, ui: UiFlags) -> PricingSummary:
        return PricingSummary.model_validate(order_data.summary or {})

    def get_accessory_price(self, category: str) -> float:
        price = self.accessory_prices.get(category)
        # single-channel remotes fall back to the regular remote price
        if price is None and category == "remote-single":
            price = self.accessory_prices.get("remote")
        return coerce_number(price)
