"""Product category schemas."""
from typing import Optional
from pydantic import BaseModel


class Category(BaseModel):
    category_id: int
    name: str
    description: Optional[str] = None
