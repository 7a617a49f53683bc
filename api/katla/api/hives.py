"""Hive routes."""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from katla.core.database import get_db
from katla.core.deps import get_current_user
from katla.models.user import User
from katla.schemas.hive import Hive, HiveListItem, UpdateHiveRequest
from katla.schemas.hive_section import HiveSectionListItem
from katla.services.hive_service import HiveService
from katla.services.hive_section_service import HiveSectionService

router = APIRouter()


@router.get("/", response_model=List[HiveListItem])
def list_hives(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """List all hives with their section counts."""
    return HiveService(db).list_hives()


@router.get("/{hive_id}", response_model=Hive)
def get_hive(
    hive_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get a specific hive."""
    return HiveService(db).get_hive(hive_id)


@router.get("/{hive_id}/sections", response_model=List[HiveSectionListItem])
def list_hive_sections(
    hive_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """List the sections of a hive."""
    return HiveSectionService(db).list_sections(hive_id)


@router.post("/", response_model=Hive, status_code=status.HTTP_201_CREATED)
def create_hive(
    hive_data: UpdateHiveRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Create a new hive."""
    return HiveService(db).create_hive(hive_data, current_user.user_id)


@router.put("/{hive_id}", response_model=Hive)
def update_hive(
    hive_id: int,
    hive_data: UpdateHiveRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Update a hive's code and name."""
    return HiveService(db).update_hive(hive_id, hive_data, current_user.user_id)


@router.put("/{hive_id}/status/{deleted_status}", status_code=status.HTTP_204_NO_CONTENT)
def set_hive_status(
    hive_id: int,
    deleted_status: bool,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Soft-delete (true) or restore (false) a hive."""
    HiveService(db).set_status(hive_id, deleted_status, current_user.user_id)
    return None


@router.delete("/{hive_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_hive(
    hive_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Purge a soft-deleted hive."""
    HiveService(db).delete_hive(hive_id)
    return None
