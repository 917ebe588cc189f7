"""Catalog storage for the storefront"""

from typing import TYPE_CHECKING

from sqlalchemy import select

from ..core.errors import NotFound
from ..models.product import Product
from .tables import ProductRow

if TYPE_CHECKING:
    from .store import Store

# Seed catalog
PRODUCTS: list[dict] = [
    {
        "id": "1",
        "name": "Wireless Headphones",
        "price": 99.99,
        "image": "https://images.unsplash.com/photo-1505740420928-5e560c06d30e?w=300&h=300&fit=crop",
        "description": "High-quality wireless headphones with noise cancellation",
    },
    {
        "id": "2",
        "name": "Smart Watch",
        "price": 199.99,
        "image": "https://images.unsplash.com/photo-1523275335684-37898b6baf30?w=300&h=300&fit=crop",
        "description": "Feature-rich smartwatch with health monitoring",
    },
    {
        "id": "3",
        "name": "Laptop Backpack",
        "price": 49.99,
        "image": "https://images.unsplash.com/photo-1553062407-98eeb64c6a62?w=300&h=300&fit=crop",
        "description": "Durable laptop backpack with multiple compartments",
    },
    {
        "id": "4",
        "name": "Bluetooth Speaker",
        "price": 79.99,
        "image": "https://images.unsplash.com/photo-1608043152269-423dbba4e7e1?w=300&h=300&fit=crop",
        "description": "Portable Bluetooth speaker with excellent sound quality",
    },
    {
        "id": "5",
        "name": "Phone Case",
        "price": 19.99,
        "image": "https://images.unsplash.com/photo-1601593346740-925612772716?w=300&h=300&fit=crop",
        "description": "Protective phone case with stylish design",
    },
    {
        "id": "6",
        "name": "USB-C Cable",
        "price": 14.99,
        "image": "https://images.unsplash.com/photo-1583394838336-acd977736f90?w=300&h=300&fit=crop",
        "description": "Fast charging USB-C cable, 6ft length",
    },
    {
        "id": "7",
        "name": "Wireless Mouse",
        "price": 29.99,
        "image": "https://images.unsplash.com/photo-1527864550417-7fd91fc51a46?w=300&h=300&fit=crop",
        "description": "Ergonomic wireless mouse with precision tracking",
    },
    {
        "id": "8",
        "name": "Desk Lamp",
        "price": 39.99,
        "image": "https://images.unsplash.com/photo-1507473885765-e6ed057f782c?w=300&h=300&fit=crop",
        "description": "LED desk lamp with adjustable brightness",
    },
]


class ProductDatabase:
    """Read-only product catalog backed by the products table"""

    def __init__(self, store: "Store"):
        self.store = store

    def seed(self, products: list[dict]) -> int:
        """
        Load the catalog.

        Rows are merged by id, so seeding an already populated database
        refreshes it instead of failing.

        Returns:
            Number of products seeded
        """
        with self.store.transaction() as session:
            for position, item in enumerate(products):
                # validates price and required fields before touching the table
                product = Product(**item)
                session.merge(
                    ProductRow(
                        id=product.id,
                        name=product.name,
                        price=product.price,
                        image=product.image,
                        description=product.description,
                        position=position,
                    )
                )
        return len(products)

    def list_products(self) -> list[Product]:
        """Get all products in catalog order"""
        with self.store.transaction() as session:
            rows = session.execute(
                select(ProductRow).order_by(ProductRow.position, ProductRow.id)
            ).scalars().all()
            return [Product.model_validate(row) for row in rows]

    def get_product(self, product_id: str) -> Product:
        """Get a product by ID"""
        with self.store.transaction() as session:
            row = session.get(ProductRow, product_id)
            if row is None:
                raise NotFound("Product not found")
            return Product.model_validate(row)
