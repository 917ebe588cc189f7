# Storefront Models

from .product import Product
from .cart import Cart, CartLine, AddToCartRequest, AddToCartResponse, MessageResponse
from .checkout import OrderStatus, CustomerInfo, CheckoutRequest, Receipt, ReceiptItem

__all__ = [
    "Product",
    "Cart",
    "CartLine",
    "AddToCartRequest",
    "AddToCartResponse",
    "MessageResponse",
    "OrderStatus",
    "CustomerInfo",
    "CheckoutRequest",
    "Receipt",
    "ReceiptItem",
]
