"""Hive management service."""
from typing import List

from sqlalchemy import func, select

from katla.models.hive import StoreHive, StoreHiveSection
from katla.schemas.hive import Hive, HiveListItem, UpdateHiveRequest
from katla.services.lifecycle import SoftDeleteLifecycle
from katla.services.mapping import (
    apply_hive_request,
    hive_from_request,
    hive_to_detail,
    hive_to_list_item,
)


class HiveService(SoftDeleteLifecycle[StoreHive]):
    """Lists, creates, edits, soft-deletes and purges store hives."""

    model = StoreHive
    id_attribute = "hive_id"
    entity_name = "Hive"

    def list_hives(self) -> List[HiveListItem]:
        """All hives ordered by id, each with the number of sections it holds."""
        section_count = (
            select(func.count(StoreHiveSection.hive_section_id))
            .where(StoreHiveSection.store_hive_id == StoreHive.hive_id)
            .correlate(StoreHive)
            .scalar_subquery()
        )
        rows = (
            self.db.query(StoreHive, section_count)
            .order_by(StoreHive.hive_id)
            .all()
        )
        return [hive_to_list_item(hive, count) for hive, count in rows]

    def get_hive(self, hive_id: int) -> Hive:
        return hive_to_detail(self.get_record(hive_id))

    def create_hive(self, request: UpdateHiveRequest, user_id: int) -> Hive:
        self.ensure_code_available(request.code)
        hive = self.add(hive_from_request(request), user_id)
        return hive_to_detail(hive)

    def update_hive(self, hive_id: int, request: UpdateHiveRequest, user_id: int) -> Hive:
        """Overwrite code and name.

        The code check runs first, so a taken code is reported even when
        ``hive_id`` does not exist.
        """
        self.ensure_code_available(request.code, exclude_id=hive_id)
        hive = self.get_record(hive_id)
        apply_hive_request(hive, request)
        return hive_to_detail(self.save(hive, user_id))

    def delete_hive(self, hive_id: int) -> None:
        self.purge(hive_id)

    def set_status(self, hive_id: int, deleted: bool, user_id: int) -> bool:
        """Returns True when the flag changed."""
        return self.set_deleted(hive_id, deleted, user_id)
