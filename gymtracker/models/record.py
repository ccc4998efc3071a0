"""
Workout Record database model.
"""
import uuid
from sqlalchemy import String, Float, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from gymtracker.core.database import Base


COLLECTION_NAME = "workout-data"


class WorkoutRecord(Base):
    """
    One logged training session.

    Rows are written once by the store and never updated or deleted.
    """

    __tablename__ = COLLECTION_NAME

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4
    )
    username: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[str] = mapped_column(String(64), nullable=False)  # 00-00-0000
    time: Mapped[str] = mapped_column(String(64), nullable=False)  # 00:00-00:00
    body_weight: Mapped[float] = mapped_column(Float, nullable=False)  # pounds
    muscle_group: Mapped[str] = mapped_column(Text, nullable=False)  # Back, Bicep
    intensity: Mapped[int] = mapped_column(Integer, nullable=False)  # 1-10
