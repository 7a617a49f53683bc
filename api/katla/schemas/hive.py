"""Hive schemas."""
from datetime import datetime
from pydantic import BaseModel, Field


class UpdateHiveRequest(BaseModel):
    """Body of both the create and the update hive requests."""
    code: str = Field(..., min_length=1, max_length=5, description="Business code, unique among hives")
    name: str = Field(..., min_length=1, max_length=60)


class HiveListItem(BaseModel):
    """Hive row as shown in the hive listing."""
    hive_id: int
    code: str
    name: str
    is_deleted: bool
    last_updated: datetime
    hive_section_count: int = 0


class Hive(BaseModel):
    """Hive detail, including audit fields."""
    hive_id: int
    code: str
    name: str
    is_deleted: bool
    created_by: int
    last_updated_by: int
    last_updated: datetime
