"""Checkout API routes for the storefront"""

from typing import Optional

from fastapi import APIRouter, Depends

from ..models.checkout import CheckoutRequest, Receipt
from ..services.checkout import CheckoutService
from .deps import get_checkout_service

router = APIRouter(prefix="/checkout", tags=["Checkout"])


@router.post("", response_model=Receipt)
async def checkout(
    request: Optional[CheckoutRequest] = None,
    service: CheckoutService = Depends(get_checkout_service),
):
    """
    Mock checkout.

    Returns a receipt for the current cart and empties it. Nothing is
    charged and the order is not stored.
    """
    customer_info = request.customer_info if request else None
    return service.checkout(customer_info)
