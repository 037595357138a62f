from __future__ import annotations

import pytest

from stone_cli.config import DEFAULT_LOG_LEVEL, DEFAULT_VERIFIER_BIN, Settings, SettingsError


def test_defaults():
    settings = Settings.from_env({})
    assert settings.log_level == DEFAULT_LOG_LEVEL
    assert settings.verifier_bin == DEFAULT_VERIFIER_BIN
    assert settings.verifier_timeout is None


def test_environment_overrides():
    settings = Settings.from_env({
        "STONE_LOG_LEVEL": "debug",
        "STONE_VERIFIER_BIN": "/usr/local/bin/cpu_air_verifier",
        "STONE_VERIFIER_TIMEOUT": "2.5",
    })
    assert settings.log_level == "DEBUG"
    assert settings.verifier_bin == "/usr/local/bin/cpu_air_verifier"
    assert settings.verifier_timeout == 2.5


def test_bad_timeout_only_fails_when_read():
    settings = Settings.from_env({"STONE_VERIFIER_TIMEOUT": "soon"})
    assert settings.verifier_bin == DEFAULT_VERIFIER_BIN
    with pytest.raises(SettingsError, match="STONE_VERIFIER_TIMEOUT"):
        settings.verifier_timeout


def test_non_positive_timeout_rejected():
    with pytest.raises(SettingsError, match="positive"):
        Settings.from_env({"STONE_VERIFIER_TIMEOUT": "0"}).verifier_timeout
