"""Conversions between ORM records and transfer objects.

Each pair of shapes gets its own function; fields are copied explicitly so
a column rename shows up as an error here rather than as a silently missing
value in a response.
"""
from katla.models.category import ProductCategory
from katla.models.hive import StoreHive, StoreHiveSection
from katla.schemas.category import Category
from katla.schemas.hive import Hive, HiveListItem, UpdateHiveRequest
from katla.schemas.hive_section import (
    HiveSection,
    HiveSectionListItem,
    UpdateHiveSectionRequest,
)


def hive_to_list_item(hive: StoreHive, hive_section_count: int = 0) -> HiveListItem:
    return HiveListItem(
        hive_id=hive.hive_id,
        code=hive.code,
        name=hive.name,
        is_deleted=hive.is_deleted,
        last_updated=hive.last_updated,
        hive_section_count=hive_section_count,
    )


def hive_to_detail(hive: StoreHive) -> Hive:
    return Hive(
        hive_id=hive.hive_id,
        code=hive.code,
        name=hive.name,
        is_deleted=hive.is_deleted,
        created_by=hive.created_by,
        last_updated_by=hive.last_updated_by,
        last_updated=hive.last_updated,
    )


def hive_from_request(request: UpdateHiveRequest) -> StoreHive:
    """Build a new, unsaved hive record from a create request."""
    hive = StoreHive(is_deleted=False)
    apply_hive_request(hive, request)
    return hive


def apply_hive_request(hive: StoreHive, request: UpdateHiveRequest) -> None:
    """Overwrite the user-editable fields of ``hive``."""
    hive.code = request.code
    hive.name = request.name


def section_to_list_item(section: StoreHiveSection) -> HiveSectionListItem:
    return HiveSectionListItem(
        hive_section_id=section.hive_section_id,
        code=section.code,
        name=section.name,
        store_hive_id=section.store_hive_id,
        is_deleted=section.is_deleted,
        last_updated=section.last_updated,
    )


def section_to_detail(section: StoreHiveSection) -> HiveSection:
    return HiveSection(
        hive_section_id=section.hive_section_id,
        code=section.code,
        name=section.name,
        store_hive_id=section.store_hive_id,
        is_deleted=section.is_deleted,
        last_updated=section.last_updated,
        created_by=section.created_by,
        last_updated_by=section.last_updated_by,
    )


def section_from_request(request: UpdateHiveSectionRequest) -> StoreHiveSection:
    """Build a new, unsaved section record from a create request."""
    section = StoreHiveSection(is_deleted=False)
    apply_section_request(section, request)
    return section


def apply_section_request(section: StoreHiveSection, request: UpdateHiveSectionRequest) -> None:
    """Overwrite the user-editable fields of ``section``, including its parent hive."""
    section.code = request.code
    section.name = request.name
    section.store_hive_id = request.store_hive_id


def category_to_schema(category: ProductCategory) -> Category:
    return Category(
        category_id=category.category_id,
        name=category.name,
        description=category.description,
    )
