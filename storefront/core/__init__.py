# Core modules

from .config import Settings, get_settings
from .errors import StoreError, InvalidArgument, NotFound, Internal

__all__ = [
    "Settings",
    "get_settings",
    "StoreError",
    "InvalidArgument",
    "NotFound",
    "Internal",
]
