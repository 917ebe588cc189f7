"""Cart models for the storefront"""

from datetime import datetime
from typing import Optional, Any

from pydantic import field_validator

from .base import CamelModel


class CartLine(CamelModel):
    """Cart line joined with its product for display"""
    id: str
    product_id: str
    quantity: int
    added_at: datetime
    name: str
    price: float
    image: Optional[str] = None


class Cart(CamelModel):
    """Derived cart view"""
    items: list[CartLine] = []
    total: float = 0.0
    item_count: int = 0


class AddToCartRequest(CamelModel):
    """Request to add item to cart"""
    product_id: Optional[str] = None
    quantity: int = 1

    @field_validator("product_id", mode="before")
    @classmethod
    def _product_id_as_string(cls, value: Any) -> Any:
        # clients may send numeric ids
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class AddToCartResponse(CamelModel):
    """Cart mutation response"""
    message: str
    id: str


class MessageResponse(CamelModel):
    message: str
