"""Hive section schemas."""
from datetime import datetime
from pydantic import BaseModel, Field


class UpdateHiveSectionRequest(BaseModel):
    """Body of both the create and the update section requests."""
    code: str = Field(..., min_length=1, max_length=5, description="Business code, unique among all sections")
    name: str = Field(..., min_length=1, max_length=60)
    store_hive_id: int = Field(..., description="Hive the section belongs to")


class HiveSectionListItem(BaseModel):
    hive_section_id: int
    code: str
    name: str
    store_hive_id: int
    is_deleted: bool
    last_updated: datetime


class HiveSection(HiveSectionListItem):
    """Section detail, including audit fields."""
    created_by: int
    last_updated_by: int
