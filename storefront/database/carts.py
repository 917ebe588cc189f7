"""Cart storage for the storefront"""

import uuid
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from ..core.errors import InvalidArgument, NotFound
from ..core.money import D, to_float_money
from ..models.cart import Cart, CartLine
from .tables import CartItemRow, ProductRow, utcnow

if TYPE_CHECKING:
    from .store import Store

logger = logging.getLogger(__name__)

# largest value the quantity column can hold
MAX_QUANTITY = 2**63 - 1


@dataclass
class AddResult:
    """Outcome of adding a product to the cart"""
    line_id: str
    created: bool


class CartDatabase:
    """
    The single shared cart.

    Lines hold a product reference and a quantity only; prices are read from
    the catalog every time the cart is viewed.
    """

    def __init__(self, store: "Store"):
        self.store = store

    def add_item(self, product_id: Optional[str], quantity: int = 1) -> AddResult:
        """
        Add a product to the cart, merging with an existing line.

        Raises:
            InvalidArgument: product_id missing, quantity not a positive integer,
                or the line quantity would not fit the quantity column
            NotFound: product_id is not in the catalog
        """
        if not product_id:
            raise InvalidArgument("Product ID is required")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidArgument("Quantity must be a positive integer")
        if quantity > MAX_QUANTITY:
            raise InvalidArgument("Quantity is too large")

        with self.store.transaction() as session:
            if session.get(ProductRow, product_id) is None:
                raise NotFound("Product not found")

            existing = session.execute(
                select(CartItemRow).where(CartItemRow.product_id == product_id)
            ).scalar_one_or_none()

            if existing:
                if existing.quantity + quantity > MAX_QUANTITY:
                    raise InvalidArgument("Quantity is too large")
                existing.quantity += quantity
                logger.info(f"Cart line {existing.id}: {product_id} x{existing.quantity}")
                return AddResult(line_id=existing.id, created=False)

            line = CartItemRow(
                id=str(uuid.uuid4()),
                product_id=product_id,
                quantity=quantity,
                added_at=utcnow(),
            )
            session.add(line)
            logger.info(f"Cart line {line.id} added: {product_id} x{quantity}")
            return AddResult(line_id=line.id, created=True)

    def remove_item(self, line_id: str) -> None:
        """Remove a whole line from the cart"""
        with self.store.transaction() as session:
            line = session.get(CartItemRow, line_id)
            if line is None:
                raise NotFound("Cart item not found")
            session.delete(line)
        logger.info(f"Cart line {line_id} removed")

    def list_cart(self) -> Cart:
        """Get cart lines joined with current product data, plus totals"""
        with self.store.transaction() as session:
            return self.build_cart(session)

    def clear(self) -> int:
        """Delete every line. Returns the number of lines removed."""
        with self.store.transaction() as session:
            return self.clear_lines(session)

    # Session-level helpers, so checkout can snapshot and clear in one transaction

    def build_cart(self, session: Session) -> Cart:
        rows = session.execute(
            select(CartItemRow, ProductRow)
            .join(ProductRow, CartItemRow.product_id == ProductRow.id)
            .order_by(CartItemRow.added_at, CartItemRow.id)
        ).all()

        items = [
            CartLine(
                id=line.id,
                product_id=line.product_id,
                quantity=line.quantity,
                added_at=line.added_at,
                name=product.name,
                price=product.price,
                image=product.image,
            )
            for line, product in rows
        ]
        total = sum((D(item.price) * item.quantity for item in items), D(0))
        return Cart(
            items=items,
            total=to_float_money(total),
            item_count=sum(item.quantity for item in items),
        )

    def clear_lines(self, session: Session) -> int:
        result = session.execute(delete(CartItemRow))
        return result.rowcount
