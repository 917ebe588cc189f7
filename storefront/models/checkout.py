"""Checkout models for the storefront"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from .base import CamelModel


class OrderStatus(str, Enum):
    COMPLETED = "completed"


class CustomerInfo(CamelModel):
    """Customer details captured at checkout, echoed back on the receipt as sent"""
    name: Any = None
    email: Any = None

    class Config:
        extra = "allow"


class CheckoutRequest(CamelModel):
    """Request to checkout"""
    customer_info: Optional[CustomerInfo] = None


class ReceiptItem(CamelModel):
    """Cart line as it was at checkout time"""
    product_id: str
    name: str
    price: float
    quantity: int


class Receipt(CamelModel):
    """Completed checkout"""
    order_id: str
    customer_info: CustomerInfo
    items: list[ReceiptItem]
    total: float
    timestamp: datetime
    status: OrderStatus = OrderStatus.COMPLETED
