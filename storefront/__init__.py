"""Storefront: catalog, shared cart and mock checkout"""

__version__ = "1.0.0"
