"""Product catalogue service."""
from typing import List

from sqlalchemy.orm import Session

from katla.models.category import ProductCategory
from katla.schemas.category import Category
from katla.services.mapping import category_to_schema


class CatalogueService:
    """Read access to product categories."""

    def __init__(self, db: Session):
        if db is None:
            raise ValueError("db session is required")
        self.db = db

    def list_categories(self) -> List[Category]:
        """All categories in storage order."""
        categories = self.db.query(ProductCategory).all()
        return [category_to_schema(c) for c in categories]
