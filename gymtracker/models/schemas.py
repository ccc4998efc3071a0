"""
Value objects returned by the record store.
"""
import uuid

from pydantic import BaseModel, ConfigDict, Field


class WorkoutInput(BaseModel):
    """The six fields of a workout as supplied by the caller."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(..., description="User's name")
    date: str = Field(..., description="Date of training, conventionally MM-DD-YYYY")
    time: str = Field(..., description="Start and stop time, conventionally HH:MM-HH:MM")
    body_weight: float = Field(..., description="Current body weight in pounds")
    muscle_group: str = Field(..., description="Comma-separated muscle groups trained")
    intensity: int = Field(..., description="Intensity of training, intended 1-10")


class WorkoutEntry(WorkoutInput):
    """A stored workout together with its store-assigned identity."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: uuid.UUID

    def fields(self) -> WorkoutInput:
        """Drop the identity, keeping only the caller-supplied fields."""
        return WorkoutInput(**self.model_dump(exclude={"id"}))
