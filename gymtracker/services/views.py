"""
Secondary index definitions.

Each view maps a stored workout to one (key, value) pair. The value is a
tuple of the record's remaining fields. Entries sharing a key are kept in
insertion order, and single-result queries are answered with a last-wins
fold over that order.
"""
import uuid
from dataclasses import dataclass
from typing import Any, Sequence, Tuple

from gymtracker.core.exceptions import RecordNotFoundError
from gymtracker.models.record import WorkoutRecord


@dataclass(frozen=True)
class IndexMapping:
    """A single emitted index entry as seen by a query."""
    seq: int
    key: str
    value: Tuple[Any, ...]
    record_id: uuid.UUID


class IndexView:
    """
    Base class for a secondary index over the workout collection.

    Subclasses declare the key field and the ordered value fields.
    """

    name: str = ""
    key_field: str = ""
    value_fields: Tuple[str, ...] = ()

    def map(self, record: WorkoutRecord) -> Tuple[str, Tuple[Any, ...]]:
        """
        Emit the key and value tuple for a record.

        Args:
            record: The workout being inserted

        Returns:
            (key, value) pair
        """
        key = getattr(record, self.key_field)
        value = tuple(getattr(record, field) for field in self.value_fields)
        return key, value

    def value_of(self, mapping: IndexMapping, field: str) -> Any:
        """Read a named field from a mapping's stored value tuple."""
        return mapping.value[self.value_fields.index(field)]

    def reduce(self, mappings: Sequence[IndexMapping]) -> IndexMapping:
        """
        Pick the most recent entry for the first key.

        Scans every mapping and keeps the last one whose key equals the
        key of the first mapping. With ascending iteration order this is
        the most recently inserted entry for that key.

        Raises:
            RecordNotFoundError: no mappings were given
        """
        if not mappings:
            raise RecordNotFoundError(self.name)

        key = mappings[0].key
        latest = mappings[0]
        for mapping in mappings:
            if mapping.key == key:
                latest = mapping
        return latest


class UserView(IndexView):
    """Workouts keyed by user name."""
    name = "by-user"
    key_field = "username"
    value_fields = ("date", "time", "body_weight", "muscle_group", "intensity")


class DateView(IndexView):
    """Workouts keyed by training date."""
    name = "by-date"
    key_field = "date"
    value_fields = ("username", "time", "body_weight", "muscle_group", "intensity")


USER_VIEW = UserView()
DATE_VIEW = DateView()

VIEWS: Tuple[IndexView, ...] = (USER_VIEW, DATE_VIEW)
