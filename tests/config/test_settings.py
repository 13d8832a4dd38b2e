# topmark:header:start
#
#   project      : gitlabctl
#   file         : test_settings.py
#   file_relpath : tests/config/test_settings.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""Settings resolution: TOML file, environment overrides and error cases."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from gitlabctl.config.settings import (
    ClientSettings,
    SettingsError,
    load_settings,
    load_toml_table,
    resolve_config_path,
)
from gitlabctl.constants import (
    DEFAULT_GITLAB_URL,
    ENV_CONFIG_PATH,
    ENV_HTTP_URL,
    ENV_OAUTH_TOKEN,
    ENV_PRIVATE_TOKEN,
)

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_environment_only(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_PRIVATE_TOKEN, "tok")

    settings = load_settings()

    assert settings == ClientSettings(url=DEFAULT_GITLAB_URL, private_token="tok")


def test_file_values_are_read(tmp_path: Path) -> None:
    cfg = _write(
        tmp_path / "c.toml",
        '[gitlab]\nurl = "https://git.example.com"\noauth_token = "oauth"\n',
    )

    settings = load_settings(str(cfg), environ={})

    assert settings.url == "https://git.example.com"
    assert settings.oauth_token == "oauth"
    assert settings.private_token is None


def test_environment_overrides_file(tmp_path: Path) -> None:
    cfg = _write(tmp_path / "c.toml", '[gitlab]\nurl = "https://a"\nprivate_token = "file"\n')

    settings = load_settings(
        str(cfg), environ={ENV_HTTP_URL: "https://b", ENV_PRIVATE_TOKEN: "env"}
    )

    assert settings == ClientSettings(url="https://b", private_token="env")


def test_empty_environment_values_do_not_override(tmp_path: Path) -> None:
    cfg = _write(tmp_path / "c.toml", '[gitlab]\nprivate_token = "file"\n')

    settings = load_settings(str(cfg), environ={ENV_PRIVATE_TOKEN: "", ENV_OAUTH_TOKEN: ""})

    assert settings.private_token == "file"


def test_config_path_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg = _write(tmp_path / "c.toml", '[gitlab]\nprivate_token = "file"\n')
    monkeypatch.setenv(ENV_CONFIG_PATH, str(cfg))

    assert resolve_config_path(None) == cfg


def test_default_path_used_when_present(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg = _write(tmp_path / "config.toml", '[gitlab]\nprivate_token = "home"\n')
    monkeypatch.setattr("gitlabctl.config.settings.DEFAULT_CONFIG_PATH", cfg)

    assert load_settings(environ={}).private_token == "home"


def test_missing_default_path_is_not_an_error() -> None:
    assert resolve_config_path(None) is None


def test_missing_explicit_path_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(SettingsError, match="not found"):
        resolve_config_path(str(tmp_path / "absent.toml"))


def test_invalid_toml_is_an_error(tmp_path: Path) -> None:
    cfg = _write(tmp_path / "c.toml", "[gitlab\nurl = ")

    with pytest.raises(SettingsError, match="Invalid TOML"):
        load_toml_table(cfg)


def test_gitlab_key_must_be_a_table(tmp_path: Path) -> None:
    cfg = _write(tmp_path / "c.toml", 'gitlab = "nope"\n')

    with pytest.raises(SettingsError, match="must be a table"):
        load_toml_table(cfg)


def test_unknown_keys_are_ignored_with_warning(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    cfg = _write(tmp_path / "c.toml", '[gitlab]\nprivate_token = "t"\ntimeout = 3\n')

    with caplog.at_level("WARNING"):
        settings = load_settings(str(cfg), environ={})

    assert settings.private_token == "t"
    assert "timeout" in caplog.text


def test_no_credentials_is_an_error() -> None:
    with pytest.raises(SettingsError, match="No GitLab credentials found"):
        load_settings(environ={ENV_HTTP_URL: "https://git.example.com"})
