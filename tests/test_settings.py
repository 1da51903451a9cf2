"""Tests for settings configuration loading."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest
from pydantic import ValidationError

from tsb_oracle.constants import ORACLE_CONTACTS_METHOD
from tsb_oracle.settings import OracleSettings


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep host env vars and config files out of these tests."""
    for key in (
        "TSB_ORACLE_CONFIG",
        "TSB_ORACLE_SOURCE_URL",
        "TSB_ORACLE_SOURCE_API_KEY",
        "TSB_ORACLE_LOG_LEVEL",
        "TSB_ORACLE_STATE_PATH",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


def test_defaults():
    settings = OracleSettings()

    assert settings.source_url is None
    assert settings.oracle_method == ORACLE_CONTACTS_METHOD
    assert settings.log_level == "INFO"
    assert settings.request_timeout > 0


def test_loads_toml_table(tmp_path, monkeypatch):
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        dedent(
            """
            [tsb_oracle]
            source_url = "https://tsb.example/"
            oracle_method = "list_oracles"
            request_timeout = 4.5
            state_path = "/var/lib/tsb/state.json"
            """
        ).strip()
    )
    monkeypatch.setenv("TSB_ORACLE_CONFIG", str(config_path))

    settings = OracleSettings()

    assert settings.source_url == "https://tsb.example"
    assert settings.oracle_method == "list_oracles"
    assert settings.request_timeout == 4.5
    assert settings.state_path == Path("/var/lib/tsb/state.json")


def test_local_config_file_is_discovered(tmp_path):
    (tmp_path / "tsb-oracle.toml").write_text('log_level = "debug"\n')

    assert OracleSettings().log_level == "DEBUG"


def test_precedence_cli_over_env_over_file(tmp_path, monkeypatch):
    config_path = tmp_path / "config.toml"
    config_path.write_text('source_url = "https://file"\noracle_method = "from_file"\n')
    monkeypatch.setenv("TSB_ORACLE_CONFIG", str(config_path))
    monkeypatch.setenv("TSB_ORACLE_SOURCE_URL", "https://env")

    assert OracleSettings().source_url == "https://env"
    assert OracleSettings(source_url="https://cli").source_url == "https://cli"
    assert OracleSettings().oracle_method == "from_file"


def test_secret_in_toml_is_rejected(tmp_path, monkeypatch):
    config_path = tmp_path / "config.toml"
    config_path.write_text('source_api_key = "leaked"\n')
    monkeypatch.setenv("TSB_ORACLE_CONFIG", str(config_path))

    with pytest.raises(ValueError, match="Security violation"):
        OracleSettings()


def test_safe_dict_redacts_api_key(monkeypatch):
    monkeypatch.setenv("TSB_ORACLE_SOURCE_API_KEY", "hunter2")

    settings = OracleSettings()

    assert settings.source_api_key is not None
    assert settings.source_api_key.get_secret_value() == "hunter2"
    assert settings.as_safe_dict()["source_api_key"] == "***redacted***"


def test_request_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        OracleSettings(request_timeout=0)
