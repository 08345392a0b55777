"""Settings — required DATABASE_URL, URL normalization, not-found status choice."""

import pytest
from pydantic import ValidationError

from app.config import Settings, normalize_database_url


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("sqlite:students.db", "sqlite+aiosqlite:///students.db"),
        ("sqlite::memory:", "sqlite+aiosqlite:///:memory:"),
        ("sqlite:///students.db", "sqlite+aiosqlite:///students.db"),
        ("postgresql://u:p@db:5432/school", "postgresql+asyncpg://u:p@db:5432/school"),
        ("sqlite+aiosqlite:///x.db", "sqlite+aiosqlite:///x.db"),
        ("postgresql+asyncpg://db/school", "postgresql+asyncpg://db/school"),
    ],
)
def test_normalize_database_url(raw, expected):
    assert normalize_database_url(raw) == expected


def test_database_url_is_required(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_normalize_database_url_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:students.db")
    settings = Settings(_env_file=None)
    assert settings.database_url == "sqlite+aiosqlite:///students.db"


def test_defaults_bind_all_interfaces_on_3001():
    settings = Settings(_env_file=None, database_url="sqlite::memory:")
    assert settings.host == "0.0.0.0"
    assert settings.port == 3001
    assert settings.not_found_status == 503


def test_not_found_status_accepts_404_from_env(monkeypatch):
    monkeypatch.setenv("NOT_FOUND_STATUS", "404")
    settings = Settings(_env_file=None, database_url="sqlite::memory:")
    assert settings.not_found_status == 404


def test_not_found_status_rejects_other_codes():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, database_url="sqlite::memory:", not_found_status=418)
