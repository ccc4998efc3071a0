import pytest

from gymtracker.core.config import Settings, get_settings
from gymtracker.core.logging import setup_logging
from gymtracker.services.store import open_store


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run every test in a clean directory with no GYMTRACKER_* settings."""
    for name in list(Settings.model_fields):
        monkeypatch.delenv(f"GYMTRACKER_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    setup_logging(Settings())
    yield
    get_settings.cache_clear()


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "gymtracker"


@pytest.fixture
def store(db_path):
    with open_store(db_path) as store:
        yield store


@pytest.fixture
def workout():
    return {
        "username": "Andrew O",
        "date": "2-24-2024",
        "time": "13:00-14:30",
        "body_weight": 138.0,
        "muscle_group": "Chest, Triceps",
        "intensity": 4,
    }
