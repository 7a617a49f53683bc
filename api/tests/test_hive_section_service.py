"""Tests for the hive section lifecycle service."""
from datetime import datetime

import pytest

from katla.core.exceptions import RequestedResourceHasConflict, RequestedResourceNotFound
from katla.core.time import utc_now
from katla.models.hive import StoreHiveSection
from katla.schemas.hive_section import UpdateHiveSectionRequest
from katla.services.hive_section_service import HiveSectionService

MISSING_ID = 9999


@pytest.fixture
def service(db_session):
    return HiveSectionService(db_session)


@pytest.fixture
def two_hives(make_hive):
    return make_hive("H1"), make_hive("H2")


def request_for(hive, code="S1", name="Shelf"):
    return UpdateHiveSectionRequest(code=code, name=name, store_hive_id=hive.hive_id)


def test_requires_session():
    with pytest.raises(ValueError):
        HiveSectionService(None)


class TestListSections:

    def test_all_ordered_by_id(self, service, two_hives, make_section):
        h1, h2 = two_hives
        a = make_section(h2, "S2")
        b = make_section(h1, "S1")
        c = make_section(h1, "S3", is_deleted=True)

        items = service.list_sections()

        assert [i.hive_section_id for i in items] == [a.hive_section_id, b.hive_section_id, c.hive_section_id]
        assert items[2].is_deleted is True

    def test_filtered_by_hive(self, service, two_hives, make_section):
        h1, h2 = two_hives
        make_section(h2, "S2")
        b = make_section(h1, "S1")
        c = make_section(h1, "S3")

        items = service.list_sections(h1.hive_id)

        assert [i.hive_section_id for i in items] == [b.hive_section_id, c.hive_section_id]
        assert all(i.store_hive_id == h1.hive_id for i in items)

    def test_unknown_hive_is_empty(self, service):
        assert service.list_sections(MISSING_ID) == []


class TestCreateSection:

    def test_stamps_acting_user(self, service, two_hives, test_user):
        h1, _ = two_hives
        result = service.create_section(request_for(h1), test_user.user_id)
        assert result.store_hive_id == h1.hive_id
        assert result.created_by == test_user.user_id
        assert result.last_updated_by == test_user.user_id
        assert result.is_deleted is False

    def test_stamps_last_updated(self, service, two_hives, test_user):
        h1, _ = two_hives
        before = utc_now()
        result = service.create_section(request_for(h1), test_user.user_id)
        assert result.last_updated >= before

    def test_code_unique_across_hives(self, service, two_hives, make_section, db_session, test_user):
        """Section codes are not scoped to the parent hive."""
        h1, h2 = two_hives
        make_section(h1, "S1")
        with pytest.raises(RequestedResourceHasConflict) as exc_info:
            service.create_section(request_for(h2, code="S1"), test_user.user_id)
        assert exc_info.value.field == "code"
        assert db_session.query(StoreHiveSection).count() == 1

    def test_soft_deleted_section_still_reserves_code(self, service, two_hives, make_section, test_user):
        h1, _ = two_hives
        make_section(h1, "S1", is_deleted=True)
        with pytest.raises(RequestedResourceHasConflict):
            service.create_section(request_for(h1, code="S1"), test_user.user_id)

    def test_unknown_hive(self, service, db_session, test_user):
        request = UpdateHiveSectionRequest(code="S1", name="Shelf", store_hive_id=MISSING_ID)
        with pytest.raises(RequestedResourceNotFound):
            service.create_section(request, test_user.user_id)
        assert db_session.query(StoreHiveSection).count() == 0

    def test_conflict_reported_before_unknown_hive(self, service, two_hives, make_section, test_user):
        h1, _ = two_hives
        make_section(h1, "S1")
        request = UpdateHiveSectionRequest(code="S1", name="Shelf", store_hive_id=MISSING_ID)
        with pytest.raises(RequestedResourceHasConflict):
            service.create_section(request, test_user.user_id)


class TestUpdateSection:

    def test_moves_section_and_stamps(self, service, two_hives, make_section, second_user):
        h1, h2 = two_hives
        section = make_section(h1, "S1")
        result = service.update_section(
            section.hive_section_id, request_for(h2, code="S7", name="Moved"), second_user.user_id
        )
        assert result.store_hive_id == h2.hive_id
        assert result.code == "S7"
        assert result.name == "Moved"
        assert result.last_updated_by == second_user.user_id

    def test_moves_last_updated(self, service, two_hives, make_section, db_session, second_user, commit_counter):
        h1, _ = two_hives
        section = make_section(h1, "S1")
        stamp = datetime(2018, 1, 1, 12, 0, 0)
        section.last_updated = stamp
        db_session.commit()
        commit_counter["count"] = 0

        result = service.update_section(
            section.hive_section_id, request_for(h1, code="S1", name="Renamed"), second_user.user_id
        )

        assert commit_counter["count"] == 1
        assert result.last_updated > stamp
        db_session.expire_all()
        assert db_session.get(StoreHiveSection, section.hive_section_id).last_updated > stamp

    def test_code_held_by_other_section(self, service, two_hives, make_section, db_session, test_user):
        h1, h2 = two_hives
        s1 = make_section(h1, "S1")
        make_section(h2, "S2")
        with pytest.raises(RequestedResourceHasConflict):
            service.update_section(s1.hive_section_id, request_for(h1, code="S2"), test_user.user_id)
        db_session.expire_all()
        assert db_session.get(StoreHiveSection, s1.hive_section_id).code == "S1"

    def test_conflict_reported_before_missing_id(self, service, two_hives, make_section, test_user):
        h1, _ = two_hives
        make_section(h1, "S1")
        with pytest.raises(RequestedResourceHasConflict):
            service.update_section(MISSING_ID, request_for(h1, code="S1"), test_user.user_id)

    def test_missing(self, service, two_hives, test_user):
        h1, _ = two_hives
        with pytest.raises(RequestedResourceNotFound):
            service.update_section(MISSING_ID, request_for(h1), test_user.user_id)

    def test_unknown_target_hive(self, service, two_hives, make_section, test_user):
        h1, _ = two_hives
        section = make_section(h1, "S1")
        request = UpdateHiveSectionRequest(code="S1", name="Shelf", store_hive_id=MISSING_ID)
        with pytest.raises(RequestedResourceNotFound):
            service.update_section(section.hive_section_id, request, test_user.user_id)


class TestDeleteSection:

    def test_refuses_active_section(self, service, two_hives, make_section):
        h1, _ = two_hives
        section = make_section(h1, "S1")
        with pytest.raises(RequestedResourceHasConflict):
            service.delete_section(section.hive_section_id)

    def test_purges_soft_deleted_section(self, service, two_hives, make_section, db_session):
        h1, _ = two_hives
        section = make_section(h1, "S1", is_deleted=True)
        service.delete_section(section.hive_section_id)
        assert db_session.query(StoreHiveSection).count() == 0
        with pytest.raises(RequestedResourceNotFound):
            service.delete_section(section.hive_section_id)


class TestSetSectionStatus:

    def test_same_status_is_noop(self, service, two_hives, make_section, db_session, second_user, commit_counter):
        h1, _ = two_hives
        section = make_section(h1, "S1", is_deleted=True)
        stamp = datetime(2018, 1, 1, 12, 0, 0)
        section.last_updated = stamp
        db_session.commit()
        commit_counter["count"] = 0

        changed = service.set_status(section.hive_section_id, True, second_user.user_id)

        assert changed is False
        assert commit_counter["count"] == 0
        db_session.expire_all()
        reloaded = db_session.get(StoreHiveSection, section.hive_section_id)
        assert reloaded.last_updated == stamp
        assert reloaded.last_updated_by != second_user.user_id

    def test_flip_stamps_once(self, service, two_hives, make_section, db_session, second_user, commit_counter):
        h1, _ = two_hives
        section = make_section(h1, "S1")
        stamp = datetime(2018, 1, 1, 12, 0, 0)
        section.last_updated = stamp
        db_session.commit()
        commit_counter["count"] = 0

        changed = service.set_status(section.hive_section_id, True, second_user.user_id)

        assert changed is True
        assert commit_counter["count"] == 1
        detail = service.get_section(section.hive_section_id)
        assert detail.is_deleted is True
        assert detail.last_updated > stamp
        assert detail.last_updated_by == second_user.user_id

    def test_missing(self, service, test_user):
        with pytest.raises(RequestedResourceNotFound):
            service.set_status(MISSING_ID, True, test_user.user_id)


def test_get_missing(service):
    with pytest.raises(RequestedResourceNotFound):
        service.get_section(MISSING_ID)
