"""Models package."""
from katla.models.base import Base
from katla.models.user import User
from katla.models.hive import StoreHive, StoreHiveSection
from katla.models.category import ProductCategory

__all__ = [
    "Base",
    "User",
    "StoreHive",
    "StoreHiveSection",
    "ProductCategory",
]
