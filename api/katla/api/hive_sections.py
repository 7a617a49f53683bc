"""Hive section routes."""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from katla.core.database import get_db
from katla.core.deps import get_current_user
from katla.models.user import User
from katla.schemas.hive_section import (
    HiveSection,
    HiveSectionListItem,
    UpdateHiveSectionRequest,
)
from katla.services.hive_section_service import HiveSectionService

router = APIRouter()


@router.get("/", response_model=List[HiveSectionListItem])
def list_sections(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """List all hive sections."""
    return HiveSectionService(db).list_sections()


@router.get("/{hive_section_id}", response_model=HiveSection)
def get_section(
    hive_section_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get a specific hive section."""
    return HiveSectionService(db).get_section(hive_section_id)


@router.post("/", response_model=HiveSection, status_code=status.HTTP_201_CREATED)
def create_section(
    section_data: UpdateHiveSectionRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Create a new section in an existing hive."""
    return HiveSectionService(db).create_section(section_data, current_user.user_id)


@router.put("/{hive_section_id}", response_model=HiveSection)
def update_section(
    hive_section_id: int,
    section_data: UpdateHiveSectionRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Update a hive section."""
    return HiveSectionService(db).update_section(
        hive_section_id, section_data, current_user.user_id
    )


@router.put("/{hive_section_id}/status/{deleted_status}", status_code=status.HTTP_204_NO_CONTENT)
def set_section_status(
    hive_section_id: int,
    deleted_status: bool,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Soft-delete (true) or restore (false) a hive section."""
    HiveSectionService(db).set_status(hive_section_id, deleted_status, current_user.user_id)
    return None


@router.delete("/{hive_section_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_section(
    hive_section_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Purge a soft-deleted hive section."""
    HiveSectionService(db).delete_section(hive_section_id)
    return None
