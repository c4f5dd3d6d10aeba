"""Tests for settings loading."""

from pathlib import Path

import pytest

from food_macros.config import Settings

_ENV_VARS = (
    "SUPABASE_URL",
    "SUPABASE_SERVICE_KEY",
    "FOOD_TABLE",
    "HOST",
    "PORT",
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_settings_read_config_yaml(isolated_env: Path) -> None:
    (isolated_env / "config.yaml").write_text(
        "supabase_url: https://yaml.supabase.co\n"
        "supabase_service_key: yaml.key.value\n"
        "food_table: foods\n"
    )

    settings = Settings()

    assert settings.supabase_url == "https://yaml.supabase.co"
    assert settings.supabase_service_key == "yaml.key.value"
    assert settings.food_table == "foods"
    assert settings.port == 8080


def test_environment_overrides_config_yaml(
    isolated_env: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (isolated_env / "config.yaml").write_text(
        "supabase_url: https://yaml.supabase.co\n"
        "supabase_service_key: yaml.key.value\n"
    )
    monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
    monkeypatch.setenv("PORT", "9090")

    settings = Settings()

    assert settings.supabase_url == "https://env.supabase.co"
    assert settings.supabase_service_key == "yaml.key.value"
    assert settings.port == 9090


def test_settings_without_config_yaml_use_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
    monkeypatch.setenv("SUPABASE_SERVICE_KEY", "env.key.value")

    settings = Settings()

    assert settings.supabase_url == "https://env.supabase.co"
    assert settings.food_table == "fndds"
