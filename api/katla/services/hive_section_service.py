"""Hive section management service."""
from typing import List, Optional

from katla.core.exceptions import RequestedResourceNotFound
from katla.models.hive import StoreHive, StoreHiveSection
from katla.schemas.hive_section import (
    HiveSection,
    HiveSectionListItem,
    UpdateHiveSectionRequest,
)
from katla.services.lifecycle import SoftDeleteLifecycle
from katla.services.mapping import (
    apply_section_request,
    section_from_request,
    section_to_detail,
    section_to_list_item,
)


class HiveSectionService(SoftDeleteLifecycle[StoreHiveSection]):
    """Same lifecycle as hives; codes are unique across all sections, not per hive."""

    model = StoreHiveSection
    id_attribute = "hive_section_id"
    entity_name = "Hive section"

    def list_sections(self, hive_id: Optional[int] = None) -> List[HiveSectionListItem]:
        """Sections ordered by id, optionally only those of one hive.

        An unknown ``hive_id`` yields an empty list.
        """
        query = self.db.query(StoreHiveSection)
        if hive_id is not None:
            query = query.filter(StoreHiveSection.store_hive_id == hive_id)
        sections = query.order_by(StoreHiveSection.hive_section_id).all()
        return [section_to_list_item(s) for s in sections]

    def get_section(self, hive_section_id: int) -> HiveSection:
        return section_to_detail(self.get_record(hive_section_id))

    def create_section(self, request: UpdateHiveSectionRequest, user_id: int) -> HiveSection:
        self.ensure_code_available(request.code)
        self._ensure_hive_exists(request.store_hive_id)
        section = self.add(section_from_request(request), user_id)
        return section_to_detail(section)

    def update_section(
        self, hive_section_id: int, request: UpdateHiveSectionRequest, user_id: int
    ) -> HiveSection:
        self.ensure_code_available(request.code, exclude_id=hive_section_id)
        section = self.get_record(hive_section_id)
        self._ensure_hive_exists(request.store_hive_id)
        apply_section_request(section, request)
        return section_to_detail(self.save(section, user_id))

    def delete_section(self, hive_section_id: int) -> None:
        self.purge(hive_section_id)

    def set_status(self, hive_section_id: int, deleted: bool, user_id: int) -> bool:
        return self.set_deleted(hive_section_id, deleted, user_id)

    def _ensure_hive_exists(self, hive_id: int) -> None:
        exists = self.db.query(StoreHive.hive_id).filter(StoreHive.hive_id == hive_id).first()
        if exists is None:
            raise RequestedResourceNotFound("Hive not found")
