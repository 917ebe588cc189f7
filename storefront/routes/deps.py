"""Request dependencies"""

from fastapi import Request

from ..database.store import Store
from ..services.checkout import CheckoutService


def get_store(request: Request) -> Store:
    """The store owned by the running application"""
    return request.app.state.store


def get_checkout_service(request: Request) -> CheckoutService:
    return CheckoutService(get_store(request))
