"""Cart API routes for the storefront"""

from typing import Optional

from fastapi import APIRouter, Depends

from ..database.store import Store
from ..models.cart import Cart, AddToCartRequest, AddToCartResponse, MessageResponse
from .deps import get_store

router = APIRouter(prefix="/cart", tags=["Cart"])


@router.get("", response_model=Cart)
async def get_cart(store: Store = Depends(get_store)):
    """Get cart items with total and item count"""
    return store.carts.list_cart()


@router.post("", response_model=AddToCartResponse)
async def add_to_cart(
    request: Optional[AddToCartRequest] = None,
    store: Store = Depends(get_store),
):
    """
    Add an item to the cart.

    Adding a product that is already in the cart increases the quantity of
    the existing line.
    """
    request = request or AddToCartRequest()
    result = store.carts.add_item(request.product_id, request.quantity)
    message = "Item added to cart" if result.created else "Cart updated successfully"
    return AddToCartResponse(message=message, id=result.line_id)


@router.delete("/{line_id}", response_model=MessageResponse)
async def remove_from_cart(line_id: str, store: Store = Depends(get_store)):
    """Remove an item from the cart"""
    store.carts.remove_item(line_id)
    return MessageResponse(message="Item removed from cart")
