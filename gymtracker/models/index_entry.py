"""
Secondary index entry database model.
"""
import uuid
from sqlalchemy import ForeignKey, Index, Integer, JSON, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from gymtracker.core.database import Base
from gymtracker.models.record import WorkoutRecord


class IndexEntry(Base):
    """
    One emitted (key, value) pair of a secondary index.

    `seq` is assigned in insertion order and defines iteration order
    among entries that share a key.
    """

    __tablename__ = "index_entries"

    seq: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True
    )
    view_name: Mapped[str] = mapped_column(String(32), nullable=False)
    key: Mapped[str] = mapped_column(Text, nullable=False)
    value: Mapped[list] = mapped_column(JSON, nullable=False)
    record_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey(WorkoutRecord.id),
        nullable=False
    )

    __table_args__ = (
        Index("ix_index_entries_view_key_seq", "view_name", "key", "seq"),
    )
