"""
Services module - record storage and secondary indexes.

Modules:
- store: WorkoutStore, insert and indexed lookup
- views: by-user and by-date index definitions
"""
from gymtracker.services.store import WorkoutStore, open_store
from gymtracker.services.views import IndexView, IndexMapping, USER_VIEW, DATE_VIEW

__all__ = [
    "WorkoutStore",
    "open_store",
    "IndexView",
    "IndexMapping",
    "USER_VIEW",
    "DATE_VIEW",
]
