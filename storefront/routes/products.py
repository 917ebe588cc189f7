"""Product API routes for the storefront"""

from fastapi import APIRouter, Depends

from ..database.store import Store
from ..models.product import Product
from .deps import get_store

router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=list[Product])
async def list_products(store: Store = Depends(get_store)):
    """List the catalog in seed order"""
    return store.products.list_products()


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: str, store: Store = Depends(get_store)):
    """Get a product by ID"""
    return store.products.get_product(product_id)
