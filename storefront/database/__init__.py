# Database modules

from .store import Store, open_store
from .products import ProductDatabase, PRODUCTS
from .carts import CartDatabase, AddResult

__all__ = [
    "Store",
    "open_store",
    "ProductDatabase",
    "PRODUCTS",
    "CartDatabase",
    "AddResult",
]
