import pytest
from typer.testing import CliRunner

from gymtracker import __version__
from gymtracker.cli.main import app
from gymtracker.services.store import open_store

runner = CliRunner()


@pytest.fixture
def invoke(db_path):
    def _invoke(*args, env=None):
        return runner.invoke(app, ["--db-path", str(db_path), *args], env=env)
    return _invoke


def _write(invoke, user="Alice", date="1-1-2024", time="07:00-08:00",
           body_weight="140.5", muscle_group="Back, Bicep", intensity="7", env=None):
    return invoke(
        "write",
        "-u", user,
        "-d", date,
        "-t", time,
        "-w", body_weight,
        "-m", muscle_group,
        "-i", intensity,
        env=env,
    )


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_write_persists_record(invoke, db_path):
    result = _write(invoke)

    assert result.exit_code == 0, result.output
    assert "Logged workout for Alice on 1-1-2024" in result.output

    with open_store(db_path) as store:
        (entry,) = store.lookup_by_user("Alice")

    assert entry.time == "07:00-08:00"
    assert entry.body_weight == 140.5
    assert entry.muscle_group == "Back, Bicep"
    assert entry.intensity == 7


def test_write_accepts_long_option_names(invoke, db_path):
    result = invoke(
        "write",
        "--user", "Bob",
        "--date", "2-2-2024",
        "--time", "10:00-11:00",
        "--body_weight", "200",
        "--muscle_group", "Legs",
        "--intensity", "3",
    )

    assert result.exit_code == 0, result.output
    with open_store(db_path) as store:
        assert store.lookup_by_user("Bob")[0].body_weight == 200.0


def test_write_rejects_non_numeric_weight(invoke, db_path):
    result = _write(invoke, body_weight="heavy")

    assert result.exit_code == 2
    assert not db_path.exists()


def test_write_rejects_non_finite_weight(invoke, db_path):
    result = _write(invoke, body_weight="nan")

    assert result.exit_code == 2
    assert "body-weight" in result.output
    assert "unavailable" not in result.output
    assert not db_path.exists()


def test_write_missing_field(invoke):
    result = invoke("write", "-u", "Alice", "-d", "1-1-2024")

    assert result.exit_code == 2


def test_write_out_of_range_intensity_accepted_by_default(invoke, db_path):
    result = _write(invoke, intensity="11")

    assert result.exit_code == 0, result.output
    with open_store(db_path) as store:
        assert store.lookup_by_user("Alice")[0].intensity == 11


def test_write_strict_intensity(invoke, db_path):
    result = _write(invoke, intensity="11", env={"GYMTRACKER_STRICT_INTENSITY": "true"})

    assert result.exit_code == 2
    assert "intensity" in result.output
    assert not db_path.exists()


def test_read_user(invoke):
    _write(invoke, date="1-1-2024")
    _write(invoke, date="1-2-2024")
    _write(invoke, user="Bob", date="1-3-2024")

    result = invoke("read-user", "-u", "Alice")

    assert result.exit_code == 0, result.output
    assert result.output.count("Retrieved workout tracked for user Alice") == 2
    assert "1-1-2024" in result.output
    assert "1-2-2024" in result.output
    assert "1-3-2024" not in result.output
    assert "intensity of workout: 7" in result.output


def test_read_user_table(invoke):
    _write(invoke)

    result = invoke("read-user", "-u", "Alice", "--table")

    assert result.exit_code == 0, result.output
    assert "Workouts for Alice" in result.output
    assert "1-1-2024" in result.output


def test_read_user_no_data(invoke):
    result = invoke("read-user", "-u", "nonexistent")

    assert result.exit_code == 0
    assert "No workouts logged for nonexistent." in result.output


def test_read_date_filters_by_user(invoke):
    _write(invoke, user="Alice", date="5-5-2024", muscle_group="Chest")
    _write(invoke, user="Bob", date="5-5-2024", muscle_group="Legs")

    result = invoke("read-date", "-u", "Alice", "-d", "5-5-2024")

    assert result.exit_code == 0, result.output
    assert "Chest" in result.output
    assert "Legs" not in result.output
    assert "Bob" not in result.output


def test_read_date_no_data(invoke):
    _write(invoke, user="Bob", date="5-5-2024")

    result = invoke("read-date", "-u", "Alice", "-d", "5-5-2024")

    assert result.exit_code == 0
    assert "No workouts logged for Alice on 5-5-2024." in result.output


def test_latest_for_user(invoke):
    for date in ["1-1-2024", "1-2-2024", "1-3-2024"]:
        _write(invoke, date=date)

    result = invoke("latest", "-u", "Alice")

    assert result.exit_code == 0, result.output
    assert "date: 1-3-2024" in result.output
    assert "1-1-2024" not in result.output


def test_latest_for_date(invoke):
    _write(invoke, user="Alice", date="5-5-2024")
    _write(invoke, user="Bob", date="5-5-2024")

    result = invoke("latest", "-d", "5-5-2024")

    assert result.exit_code == 0, result.output
    assert "user Bob" in result.output


def test_latest_without_key(invoke):
    _write(invoke, user="Alice", date="1-1-2024")
    _write(invoke, user="Bob", date="1-2-2024")

    result = invoke("latest")

    assert result.exit_code == 0, result.output
    assert "user Bob" in result.output


def test_latest_not_found(invoke):
    result = invoke("latest", "-u", "Alice")

    assert result.exit_code == 1
    assert "No data found for 'Alice'" in result.output


def test_latest_rejects_both_keys(invoke):
    result = invoke("latest", "-u", "Alice", "-d", "1-1-2024")

    assert result.exit_code == 2


def test_users(invoke):
    _write(invoke, user="Carol")
    _write(invoke, user="Alice")
    _write(invoke, user="Carol")

    result = invoke("users")

    assert result.exit_code == 0, result.output
    assert result.output.split() == ["Alice", "Carol"]


def test_users_empty(invoke):
    result = invoke("users")

    assert result.exit_code == 0
    assert "No workouts logged yet." in result.output


def test_storage_unavailable(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    result = runner.invoke(app, ["--db-path", str(blocker), "users"])

    assert result.exit_code == 1
    assert "unavailable" in result.output


def test_db_path_from_environment(tmp_path):
    path = tmp_path / "from-env"

    result = runner.invoke(app, ["users"], env={"GYMTRACKER_DB_PATH": str(path)})

    assert result.exit_code == 0, result.output
    assert (path / "workout-data.sqlite3").is_file()
