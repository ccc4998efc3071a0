from gymtracker.models.record import WorkoutRecord, COLLECTION_NAME
from gymtracker.models.index_entry import IndexEntry
from gymtracker.models.schemas import WorkoutInput, WorkoutEntry

__all__ = [
    "WorkoutRecord",
    "COLLECTION_NAME",
    "IndexEntry",
    "WorkoutInput",
    "WorkoutEntry",
]
