"""Product models for the storefront catalog"""

from typing import Optional

from pydantic import Field

from .base import CamelModel


class Product(CamelModel):
    """Product in the catalog"""
    id: str
    name: str
    price: float = Field(ge=0)
    image: Optional[str] = None
    description: Optional[str] = None
