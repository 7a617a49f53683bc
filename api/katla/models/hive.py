"""Store hive and hive section models."""
from datetime import datetime
from typing import List
from sqlalchemy import String, Integer, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from katla.models.base import Base
from katla.core.time import utc_now


class StoreHive(Base):
    """A storage hive: the physical or logical unit holding sections.

    ``is_deleted`` marks a soft-deleted hive; the row is only purged once
    that flag is set.
    """
    __tablename__ = "store_hives"

    hive_id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    code: Mapped[str] = mapped_column(String(5), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(60), nullable=False)
    is_deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="false"
    )
    created_by: Mapped[int] = mapped_column(Integer, nullable=False)
    last_updated_by: Mapped[int] = mapped_column(Integer, nullable=False)
    last_updated: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, nullable=False
    )

    sections: Mapped[List["StoreHiveSection"]] = relationship(
        "StoreHiveSection", back_populates="hive", cascade="all"
    )


class StoreHiveSection(Base):
    """A subdivision of a hive.

    The section only refers to its hive; purging a hive deletes its
    sections through the ``sections`` cascade on ``StoreHive``.
    """
    __tablename__ = "store_hive_sections"

    hive_section_id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    code: Mapped[str] = mapped_column(String(5), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(60), nullable=False)
    store_hive_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("store_hives.hive_id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    is_deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="false"
    )
    created_by: Mapped[int] = mapped_column(Integer, nullable=False)
    last_updated_by: Mapped[int] = mapped_column(Integer, nullable=False)
    last_updated: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now, nullable=False
    )

    hive: Mapped["StoreHive"] = relationship(
        "StoreHive", back_populates="sections"
    )
