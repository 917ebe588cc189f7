"""
Checkout Service

Turns the current cart into a receipt and empties the cart. Receipts are
returned to the caller only; nothing about the order is stored.
"""

import time
import uuid
import logging
from typing import Optional

from ..core.errors import InvalidArgument
from ..database.store import Store
from ..models.checkout import CustomerInfo, OrderStatus, Receipt, ReceiptItem
from ..database.tables import utcnow

logger = logging.getLogger(__name__)


def generate_order_id() -> str:
    """Time-ordered id with a random suffix, so two checkouts in the same millisecond differ"""
    return f"ORD-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8].upper()}"


class CheckoutService:
    """Mock checkout over the shared cart"""

    def __init__(self, store: Store):
        self.store = store

    def checkout(self, customer_info: Optional[CustomerInfo]) -> Receipt:
        """
        Complete a checkout.

        The cart snapshot and the clear happen in the same transaction, so
        the receipt always describes exactly the lines that were removed.

        Raises:
            InvalidArgument: customer name or email missing
        """
        customer = self._validate_customer(customer_info)

        with self.store.transaction() as session:
            cart = self.store.carts.build_cart(session)
            receipt = Receipt(
                order_id=generate_order_id(),
                customer_info=customer,
                items=[
                    ReceiptItem(
                        product_id=line.product_id,
                        name=line.name,
                        price=line.price,
                        quantity=line.quantity,
                    )
                    for line in cart.items
                ],
                total=cart.total,
                timestamp=utcnow(),
                status=OrderStatus.COMPLETED,
            )
            self.store.carts.clear_lines(session)

        logger.info(
            f"Order {receipt.order_id} completed: ${receipt.total:.2f} "
            f"({cart.item_count} items)"
        )
        return receipt

    @staticmethod
    def _validate_customer(customer_info: Optional[CustomerInfo]) -> CustomerInfo:
        if customer_info is None or not (
            _is_present(customer_info.name) and _is_present(customer_info.email)
        ):
            raise InvalidArgument("Customer name and email are required")
        return customer_info


def _is_present(value) -> bool:
    # blank strings count as missing; any other truthy value is accepted
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)
