"""Product category routes."""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from katla.core.database import get_db
from katla.core.deps import get_current_user
from katla.models.user import User
from katla.schemas.category import Category
from katla.services.catalogue_service import CatalogueService

router = APIRouter()


@router.get("/", response_model=List[Category])
def list_categories(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """List all product categories."""
    return CatalogueService(db).list_categories()
