"""
Tests for core/db.py - connection settings (no pool is opened).
"""

import pytest

from core import db


class TestDatabaseUrl:
    """Test DATABASE_URL handling."""

    def test_missing_url_raises(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        with pytest.raises(RuntimeError, match="DATABASE_URL is not set"):
            db.database_url()

    def test_plain_url_unchanged(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", " postgresql://u:p@localhost:5432/jobly ")

        assert db.database_url() == "postgresql://u:p@localhost:5432/jobly"

    def test_sslmode_is_stripped(self, monkeypatch):
        monkeypatch.setenv(
            "DATABASE_URL",
            "postgresql://u:p@db:5432/jobly?sslmode=require&application_name=jobly",
        )

        assert db.database_url() == "postgresql://u:p@db:5432/jobly?application_name=jobly"

    def test_pool_not_initialized(self):
        with pytest.raises(RuntimeError, match="not initialized"):
            db.pool()


class TestEnvInt:
    """Test pool sizing overrides."""

    def test_default_when_unset(self, monkeypatch):
        monkeypatch.delenv("DB_POOL_MAX_SIZE", raising=False)

        assert db._env_int("DB_POOL_MAX_SIZE", 5) == 5

    def test_default_when_not_a_number(self, monkeypatch):
        monkeypatch.setenv("DB_POOL_MAX_SIZE", "many")

        assert db._env_int("DB_POOL_MAX_SIZE", 5) == 5

    def test_override(self, monkeypatch):
        monkeypatch.setenv("DB_POOL_MAX_SIZE", "10")

        assert db._env_int("DB_POOL_MAX_SIZE", 5) == 10
