"""Unit tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from crud_sqlgen.config.settings import Settings, get_settings


@pytest.mark.unit
def test_defaults():
    """Settings load with no environment at all."""
    settings = Settings()

    assert settings.log_level == "INFO"
    assert settings.named_params is False
    assert settings.schema_file is None
    assert settings.database_url is None
    assert settings.db_schema is None


@pytest.mark.unit
def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SQLGEN_NAMED_PARAMS", "1")
    monkeypatch.setenv("SQLGEN_SCHEMA_FILE", "config/schema.yml")
    monkeypatch.setenv("SQLGEN_DATABASE_URL", "postgresql://u:p@localhost/app")
    monkeypatch.setenv("SQLGEN_DB_SCHEMA", "public")

    settings = Settings()

    assert settings.named_params is True
    assert settings.schema_file == "config/schema.yml"
    assert settings.database_url == "postgresql://u:p@localhost/app"
    assert settings.db_schema == "public"


@pytest.mark.unit
def test_env_file_in_working_directory(tmp_path):
    """The autouse fixture runs tests from tmp_path, so .env there is read."""
    (tmp_path / ".env").write_text("SQLGEN_NAMED_PARAMS=true\n", encoding="utf-8")

    assert Settings().named_params is True


@pytest.mark.unit
def test_log_level_normalized(monkeypatch):
    monkeypatch.setenv("SQLGEN_LOG_LEVEL", "debug")

    assert Settings().log_level == "DEBUG"


@pytest.mark.unit
def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setenv("SQLGEN_LOG_LEVEL", "LOUD")

    with pytest.raises(ValidationError) as exc_info:
        Settings()

    assert "Unknown log level" in str(exc_info.value)


@pytest.mark.unit
def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("SQLGEN_NAMED_PARAMS", "true")

    assert get_settings() is first
    assert first.named_params is False

    get_settings.cache_clear()
    assert get_settings().named_params is True
