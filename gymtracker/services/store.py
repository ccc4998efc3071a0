"""
Workout Store - the workout collection and its two secondary indexes.

Every insert writes the record and one entry per index in a single
transaction. Lookups walk an index in ascending order and join the
matching records.
"""
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, List, Optional, Tuple, Union

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from gymtracker.core.config import Settings
from gymtracker.core.database import create_db_engine, init_db, make_session_factory
from gymtracker.core.exceptions import (
    InvalidRecordError,
    RecordNotFoundError,
    StoreUnavailableError,
)
from gymtracker.core.logging import get_logger, track_operation
from gymtracker.models.index_entry import IndexEntry
from gymtracker.models.record import WorkoutRecord
from gymtracker.models.schemas import WorkoutEntry
from gymtracker.services.views import DATE_VIEW, USER_VIEW, VIEWS, IndexMapping, IndexView

logger = get_logger(__name__)


class WorkoutStore:
    """
    Embedded store for workout records.

    Usage:
        with open_store(settings) as store:
            store.insert("Andrew O", "2-24-2024", "13:00-14:30", 138.0, "Chest, Triceps", 4)
            entries = store.lookup_by_user("Andrew O")
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.path = settings.DB_PATH
        self.engine = create_db_engine(settings)
        init_db(self.engine, self.path)
        self._session_factory = make_session_factory(self.engine)
        logger.debug("Store opened", path=self.path)

    def __enter__(self) -> "WorkoutStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the database handle."""
        self.engine.dispose()
        logger.debug("Store closed", path=self.path)

    @contextmanager
    def _session(self) -> Generator[Session, None, None]:
        """Open a session, translating storage failures."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            session.rollback()
            raise InvalidRecordError(str(e.orig)) from e
        except SQLAlchemyError as e:
            session.rollback()
            raise StoreUnavailableError(self.path, str(e)) from e
        finally:
            session.close()

    # ========================================
    # Writes
    # ========================================

    def insert(
        self,
        username: str,
        date: str,
        time: str,
        body_weight: float,
        muscle_group: str,
        intensity: int,
    ) -> uuid.UUID:
        """
        Store one workout and index it under both views.

        Fields are stored verbatim; no format or range checks are made.

        Returns:
            The identity assigned to the new record

        Raises:
            InvalidRecordError: a value violates a column constraint,
                e.g. a NaN body weight, which SQLite stores as NULL
            StoreUnavailableError: the write could not be committed
        """
        with track_operation(logger, "insert", username=username, date=date):
            with self._session() as session:
                record = WorkoutRecord(
                    id=uuid.uuid4(),
                    username=username,
                    date=date,
                    time=time,
                    body_weight=body_weight,
                    muscle_group=muscle_group,
                    intensity=intensity,
                )
                session.add(record)
                # Index rows reference the record, so it must be written first
                session.flush()

                for view in VIEWS:
                    key, value = view.map(record)
                    session.add(IndexEntry(
                        view_name=view.name,
                        key=key,
                        value=list(value),
                        record_id=record.id,
                    ))

                session.commit()

        logger.info("Workout recorded", record_id=str(record.id), username=username)
        return record.id

    # ========================================
    # Index queries
    # ========================================

    def _query_view(
        self,
        session: Session,
        view: IndexView,
        key: Optional[str] = None,
    ) -> List[Tuple[IndexMapping, WorkoutEntry]]:
        """
        Walk a view in ascending (key, insertion) order.

        Each index entry is joined to the record it points at, so one
        query returns both the mapping and the stored workout.
        """
        stmt = (
            select(IndexEntry, WorkoutRecord)
            .join(WorkoutRecord, IndexEntry.record_id == WorkoutRecord.id)
            .where(IndexEntry.view_name == view.name)
        )
        if key is not None:
            stmt = stmt.where(IndexEntry.key == key)
        stmt = stmt.order_by(IndexEntry.key, IndexEntry.seq)

        return [
            (
                IndexMapping(
                    seq=entry.seq,
                    key=entry.key,
                    value=tuple(entry.value),
                    record_id=entry.record_id,
                ),
                WorkoutEntry.model_validate(record),
            )
            for entry, record in session.execute(stmt).tuples()
        ]

    def lookup_by_user(self, username: str) -> List[WorkoutEntry]:
        """
        Get every workout logged by a user.

        Args:
            username: Exact user name

        Returns:
            Workouts in insertion order, empty if the user has none
        """
        with track_operation(logger, "lookup_by_user", username=username):
            with self._session() as session:
                return [entry for _, entry in self._query_view(session, USER_VIEW, username)]

    def lookup_by_date(self, date: str, username: str) -> List[WorkoutEntry]:
        """
        Get a user's workouts on a date.

        The by-date index is keyed on date alone, so entries for other
        users on the same date are filtered out against the user name
        held in each entry's value tuple.

        Args:
            date: Exact date string
            username: Exact user name

        Returns:
            Workouts in insertion order, empty if none match
        """
        with track_operation(logger, "lookup_by_date", username=username, date=date):
            with self._session() as session:
                return [
                    entry
                    for mapping, entry in self._query_view(session, DATE_VIEW, date)
                    if DATE_VIEW.value_of(mapping, "username") == username
                ]

    def _latest(self, view: IndexView, key: Optional[str]) -> WorkoutEntry:
        with self._session() as session:
            rows = self._query_view(session, view, key)
        if not rows:
            raise RecordNotFoundError(view.name, key)
        if key is None:
            # Whole view: the last entry in ascending order
            return rows[-1][1]

        latest = view.reduce([mapping for mapping, _ in rows])
        return next(entry for mapping, entry in rows if mapping is latest)

    def latest_for_user(self, username: str) -> WorkoutEntry:
        """
        Get the most recently inserted workout for a user.

        Raises:
            RecordNotFoundError: the user has no workouts
        """
        with track_operation(logger, "latest_for_user", username=username):
            return self._latest(USER_VIEW, username)

    def latest_for_date(self, date: str) -> WorkoutEntry:
        """
        Get the most recently inserted workout on a date, for any user.

        Raises:
            RecordNotFoundError: nothing was logged on that date
        """
        with track_operation(logger, "latest_for_date", date=date):
            return self._latest(DATE_VIEW, date)

    def latest(self) -> WorkoutEntry:
        """
        Get the last entry of the by-user view.

        Keys ascend, so this is the newest workout of the user whose
        name sorts last.

        Raises:
            RecordNotFoundError: the store is empty
        """
        with track_operation(logger, "latest"):
            return self._latest(USER_VIEW, None)

    def usernames(self) -> List[str]:
        """Get the distinct keys of the by-user view, sorted."""
        with track_operation(logger, "usernames"):
            with self._session() as session:
                stmt = (
                    select(IndexEntry.key)
                    .where(IndexEntry.view_name == USER_VIEW.name)
                    .distinct()
                    .order_by(IndexEntry.key)
                )
                return list(session.execute(stmt).scalars())


def open_store(target: Union[Settings, str, Path]) -> WorkoutStore:
    """
    Open the store from settings or a storage directory path.

    The directory is created if it does not exist.

    Raises:
        StoreUnavailableError: the store cannot be opened
    """
    if isinstance(target, Settings):
        settings = target
    else:
        settings = Settings(DB_PATH=str(target))
    return WorkoutStore(settings)
