"""Shared Typer app object, shared option types, and store utility."""

from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Generator, Optional

import typer

from gymtracker.core.config import Settings, get_settings
from gymtracker.core.exceptions import (
    InvalidRecordError,
    RecordNotFoundError,
    StoreUnavailableError,
)
from gymtracker.core.logging import get_logger
from gymtracker.services.store import WorkoutStore, open_store
from . import views

logger = get_logger(__name__)

UserOption = Annotated[
    str,
    typer.Option("--user", "-u", help="User's name."),
]

DateOption = Annotated[
    str,
    typer.Option("--date", "-d", help="Date of training, e.g. 2-24-2024."),
]

TableOption = Annotated[
    bool,
    typer.Option("--table", help="Render results as a table."),
]

DbPathOption = Annotated[
    Optional[Path],
    typer.Option(
        "--db-path",
        "-p",
        help="Storage directory (default ./gymtracker or GYMTRACKER_DB_PATH).",
    ),
]

app = typer.Typer(
    name="gymtracker",
    help="A simple application to track workouts that I've done.",
    no_args_is_help=True,
)


def resolve_settings(db_path: Path | None) -> Settings:
    """Settings from the environment, with the storage path overridden if given."""
    settings = get_settings()
    if db_path is not None:
        settings = settings.model_copy(update={"DB_PATH": str(db_path)})
    return settings


def get_settings_from(ctx: typer.Context) -> Settings:
    """Settings resolved by the main callback for this invocation."""
    return ctx.obj


@contextmanager
def store_session(ctx: typer.Context) -> Generator[WorkoutStore, None, None]:
    """
    Open the store for one command and map store errors to exit codes.

    Missing data and storage failures exit with status 1. Values the
    store rejects are usage errors and exit with status 2.
    """
    settings = get_settings_from(ctx)
    try:
        with open_store(settings) as store:
            yield store
    except RecordNotFoundError as e:
        views.print_warning(str(e))
        raise typer.Exit(1)
    except InvalidRecordError as e:
        views.print_error(str(e))
        raise typer.Exit(2)
    except StoreUnavailableError as e:
        logger.error("Storage unavailable", path=e.path, reason=e.reason)
        views.print_error(str(e))
        raise typer.Exit(1)
