"""Relational schema for the storefront"""

from datetime import datetime, timezone

from sqlalchemy import (
    Column, Integer, String, Text, ForeignKey, DateTime,
    Numeric, CheckConstraint, UniqueConstraint, TypeDecorator,
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """Timezone-aware UTC timestamps, also on backends that store them naive (SQLite)"""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


class ProductRow(Base):
    __tablename__ = "products"

    id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    image = Column(String(512), nullable=True)
    description = Column(Text, nullable=True)
    position = Column(Integer, nullable=False, default=0)  # seed order

    cart_items = relationship("CartItemRow", back_populates="product")

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_nonneg"),
    )


class CartItemRow(Base):
    __tablename__ = "cart_items"

    id = Column(String(36), primary_key=True)
    product_id = Column(String(64), ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    added_at = Column(UTCDateTime, nullable=False, default=utcnow)

    product = relationship("ProductRow", back_populates="cart_items")

    __table_args__ = (
        UniqueConstraint("product_id", name="uq_cart_items_product"),  # one line per product
        CheckConstraint("quantity > 0", name="ck_cart_items_quantity_pos"),
    )
