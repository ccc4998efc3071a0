"""
CLI entry point using Typer.

Provides commands for workout logging:
- write: Log a workout
- read-user: Show every workout logged by a user
- read-date: Show a user's workouts on a date
- latest: Show the most recently logged workout
- users: List users with logged workouts
"""

import math
from typing import Annotated, Optional

import typer

from gymtracker import __version__
from gymtracker.core.logging import get_logger, setup_logging
from . import views
from .app import (
    DateOption,
    DbPathOption,
    TableOption,
    UserOption,
    app,
    get_settings_from,
    resolve_settings,
    store_session,
)

logger = get_logger(__name__)

INTENSITY_MIN = 1
INTENSITY_MAX = 10


def _version_callback(value: bool) -> None:
    if value:
        views.console.print(f"gymtracker {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    db_path: DbPathOption = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """
    A simple application to track workouts that I've done.
    """
    settings = resolve_settings(db_path)
    setup_logging(settings)
    ctx.obj = settings


@app.command()
def write(
    ctx: typer.Context,
    user: UserOption,
    date: DateOption,
    time: Annotated[
        str,
        typer.Option("--time", "-t", help="Start and stop time of training, e.g. 13:00-14:30."),
    ],
    body_weight: Annotated[
        float,
        typer.Option("--body-weight", "--body_weight", "-w", help="Current body weight in pounds."),
    ],
    muscle_group: Annotated[
        str,
        typer.Option("--muscle-group", "--muscle_group", "-m", help="Muscle group that was exercised."),
    ],
    intensity: Annotated[
        int,
        typer.Option("--intensity", "-i", help="Intensity of training, 1-10."),
    ],
) -> None:
    """
    Log a workout.
    """
    if not math.isfinite(body_weight):
        raise typer.BadParameter(
            f"must be a finite number, got {body_weight}",
            param_hint="'--body-weight'",
        )

    settings = get_settings_from(ctx)
    if settings.STRICT_INTENSITY and not INTENSITY_MIN <= intensity <= INTENSITY_MAX:
        raise typer.BadParameter(
            f"must be between {INTENSITY_MIN} and {INTENSITY_MAX}, got {intensity}",
            param_hint="'--intensity'",
        )

    with store_session(ctx) as store:
        record_id = store.insert(user, date, time, body_weight, muscle_group, intensity)

    views.print_success(f"Logged workout for {user} on {date} ({record_id})")


@app.command("read-user")
def read_user(
    ctx: typer.Context,
    user: UserOption,
    table: TableOption = False,
) -> None:
    """
    Show every workout logged by a user.
    """
    with store_session(ctx) as store:
        entries = store.lookup_by_user(user)

    if not entries:
        views.print_info(f"No workouts logged for {user}.")
        return

    if table:
        views.print_table(entries, title=f"Workouts for {user}")
    else:
        views.print_entries(entries)


@app.command("read-date")
def read_date(
    ctx: typer.Context,
    user: UserOption,
    date: DateOption,
    table: TableOption = False,
) -> None:
    """
    Show a user's workouts on a date.
    """
    with store_session(ctx) as store:
        entries = store.lookup_by_date(date, user)

    if not entries:
        views.print_info(f"No workouts logged for {user} on {date}.")
        return

    if table:
        views.print_table(entries, title=f"Workouts for {user} on {date}")
    else:
        views.print_entries(entries)


@app.command()
def latest(
    ctx: typer.Context,
    user: Annotated[
        Optional[str],
        typer.Option("--user", "-u", help="Latest workout for this user."),
    ] = None,
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-d", help="Latest workout on this date."),
    ] = None,
) -> None:
    """
    Show the most recently logged workout.

    With --user or --date, the newest entry under that key; otherwise the
    last entry of the by-user index.
    """
    if user is not None and date is not None:
        raise typer.BadParameter("use either --user or --date, not both")

    with store_session(ctx) as store:
        if user is not None:
            entry = store.latest_for_user(user)
        elif date is not None:
            entry = store.latest_for_date(date)
        else:
            entry = store.latest()

    views.print_entry(entry)


@app.command()
def users(ctx: typer.Context) -> None:
    """
    List users with logged workouts.
    """
    with store_session(ctx) as store:
        names = store.usernames()

    if not names:
        views.print_info("No workouts logged yet.")
        return

    for name in names:
        views.print_info(name)


def main() -> None:
    app(prog_name="gymtracker")


if __name__ == "__main__":
    main()
