# Services

from .checkout import CheckoutService, generate_order_id

__all__ = ["CheckoutService", "generate_order_id"]
