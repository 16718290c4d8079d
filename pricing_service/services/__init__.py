# Service modules

from .pricing_calculator import PricingCalculator, PricingResult
from .checkout import CheckoutService

__all__ = ["PricingCalculator", "PricingResult", "CheckoutService"]
