# Services package for the quote service

from .pricing import PrecomputedPricingProvider

__all__ = ["PrecomputedPricingProvider"]
