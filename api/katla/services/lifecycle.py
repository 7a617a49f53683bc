"""Soft-delete lifecycle shared by hives and hive sections.

Both entity kinds follow the same rules:

1. The business ``code`` must not be held by any other record of the same
   kind. Soft-deleted records are *not* excluded, so a deleted record keeps
   its code reserved until it is purged.
2. A record can only be purged once it has been soft-deleted.
3. Every mutation stamps ``last_updated`` and ``last_updated_by`` with the
   acting user, which callers pass in explicitly.
4. Setting the deletion flag to the value it already has is a no-op: no
   audit stamp and no commit.

Subclasses bind the model and the names of its id and code attributes.
"""
import logging
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy.orm import Session

from katla.core.exceptions import RequestedResourceHasConflict, RequestedResourceNotFound
from katla.core.time import utc_now

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


class SoftDeleteLifecycle(Generic[RecordT]):
    """Uniquely-keyed, soft-deletable entity lifecycle over one ORM model."""

    model: Any = None
    id_attribute: str = "id"
    code_attribute: str = "code"
    entity_name: str = "Resource"

    def __init__(self, db: Session):
        if db is None:
            raise ValueError("db session is required")
        self.db = db

    @property
    def id_column(self):
        return getattr(self.model, self.id_attribute)

    @property
    def code_column(self):
        return getattr(self.model, self.code_attribute)

    def record_id(self, record: RecordT) -> int:
        return getattr(record, self.id_attribute)

    def find(self, record_id: int) -> Optional[RecordT]:
        return self.db.query(self.model).filter(self.id_column == record_id).first()

    def get_record(self, record_id: int) -> RecordT:
        """Return the record with ``record_id`` or raise ``RequestedResourceNotFound``."""
        record = self.find(record_id)
        if record is None:
            raise RequestedResourceNotFound(f"{self.entity_name} not found")
        return record

    def ensure_code_available(self, code: str, exclude_id: Optional[int] = None) -> None:
        """Raise a ``code`` conflict if another record already holds ``code``.

        Deleted records count as holders.
        """
        query = self.db.query(self.model).filter(self.code_column == code)
        if exclude_id is not None:
            query = query.filter(self.id_column != exclude_id)
        if query.first() is not None:
            logger.warning("%s code %r is already taken", self.entity_name, code)
            raise RequestedResourceHasConflict("code")

    def stamp(self, record: RecordT, user_id: int) -> None:
        record.last_updated = utc_now()
        record.last_updated_by = user_id

    def add(self, record: RecordT, user_id: int) -> RecordT:
        """Persist a new record, stamping it as created by ``user_id``."""
        record.created_by = user_id
        self.stamp(record, user_id)
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        logger.info("%s %s created by user %s", self.entity_name, self.record_id(record), user_id)
        return record

    def save(self, record: RecordT, user_id: int) -> RecordT:
        """Commit pending edits to an existing record."""
        self.stamp(record, user_id)
        self.db.commit()
        self.db.refresh(record)
        logger.info("%s %s updated by user %s", self.entity_name, self.record_id(record), user_id)
        return record

    def purge(self, record_id: int) -> None:
        """Permanently remove a record that has already been soft-deleted."""
        record = self.get_record(record_id)
        if not record.is_deleted:
            logger.warning("Refusing to purge %s %s: not soft-deleted", self.entity_name, record_id)
            raise RequestedResourceHasConflict()

        self.db.delete(record)
        self.db.commit()
        logger.info("%s %s purged", self.entity_name, record_id)

    def set_deleted(self, record_id: int, deleted: bool, user_id: int) -> bool:
        """Set the soft-delete flag.

        Returns True when the flag changed, False when it already held
        ``deleted`` and nothing was written.
        """
        record = self.get_record(record_id)
        if record.is_deleted == deleted:
            return False

        record.is_deleted = deleted
        self.stamp(record, user_id)
        self.db.commit()
        logger.info(
            "%s %s %s by user %s",
            self.entity_name, record_id, "deleted" if deleted else "restored", user_id
        )
        return True
