"""Product category model."""
from typing import Optional
from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column
from katla.models.base import Base


class ProductCategory(Base):
    """Catalogue category that products are filed under."""
    __tablename__ = "product_categories"

    category_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(60), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(
        "category_description", String(300), nullable=True
    )
