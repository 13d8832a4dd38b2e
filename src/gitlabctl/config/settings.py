# topmark:header:start
#
#   project      : gitlabctl
#   file         : settings.py
#   file_relpath : src/gitlabctl/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""Connection settings for the GitLab API client.

Settings are layered, lowest to highest precedence:

1. Built-in defaults (``https://gitlab.com``, no token).
2. A TOML file: the ``--config`` path, else ``$GITLABCTL_CONFIG``, else
   ``~/.config/gitlabctl/config.toml`` when it exists. Values are read from the
   ``[gitlab]`` table (``url``, ``private_token``, ``oauth_token``).
3. Environment variables ``GITLAB_HTTP_URL``, ``GITLAB_PRIVATE_TOKEN`` and
   ``GITLAB_OAUTH_TOKEN``.

Parsing is done with `tomlkit`; the document is unwrapped into plain Python
values before use.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from gitlabctl.config.logging import get_logger
from gitlabctl.constants import (
    CONFIG_TABLE,
    DEFAULT_CONFIG_PATH,
    DEFAULT_GITLAB_URL,
    ENV_CONFIG_PATH,
    ENV_HTTP_URL,
    ENV_OAUTH_TOKEN,
    ENV_PRIVATE_TOKEN,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from gitlabctl.config.logging import GitlabctlLogger

logger: GitlabctlLogger = get_logger(__name__)


class SettingsError(Exception):
    """Raised when the configuration file is unreadable or no credentials are available."""


@dataclass(frozen=True)
class ClientSettings:
    """Immutable connection settings.

    Attributes:
        url: Base URL of the GitLab instance (without the ``/api/v4`` suffix).
        private_token: Personal access token, sent as ``PRIVATE-TOKEN``.
        oauth_token: OAuth2 token, sent as ``Authorization: Bearer``.
    """

    url: str = DEFAULT_GITLAB_URL
    private_token: str | None = None
    oauth_token: str | None = None

    @property
    def has_credentials(self) -> bool:
        """True if either token is configured."""
        return bool(self.private_token or self.oauth_token)


def resolve_config_path(explicit: str | None) -> Path | None:
    """Return the configuration file to read, or None if there is none.

    An explicit path (``--config`` or ``$GITLABCTL_CONFIG``) must exist; the
    default location is only used when present.

    Raises:
        SettingsError: If an explicitly requested file does not exist.
    """
    requested = explicit or os.environ.get(ENV_CONFIG_PATH)
    if requested:
        path = Path(requested).expanduser()
        if not path.is_file():
            raise SettingsError(f"Config file not found: {path}")
        return path
    if DEFAULT_CONFIG_PATH.is_file():
        return DEFAULT_CONFIG_PATH
    return None


def load_toml_table(path: Path) -> dict[str, Any]:
    """Read ``path`` and return its ``[gitlab]`` table as a plain dict.

    Raises:
        SettingsError: If the file cannot be read or is not valid TOML, or the
            ``gitlab`` key is not a table.
    """
    try:
        text = path.read_text(encoding="utf-8")
        doc = tomlkit.parse(text)
    except OSError as exc:
        raise SettingsError(f"Cannot read config file {path}: {exc}") from exc
    except TomlkitParseError as exc:
        raise SettingsError(f"Invalid TOML in {path}: {exc}") from exc

    data: dict[str, Any] = doc.unwrap()
    table = data.get(CONFIG_TABLE, {})
    if not isinstance(table, dict):
        raise SettingsError(f"'{CONFIG_TABLE}' in {path} must be a table")
    logger.debug("Loaded [%s] from %s: keys=%s", CONFIG_TABLE, path, sorted(table))
    return table


def apply_mapping(settings: ClientSettings, values: Mapping[str, Any]) -> ClientSettings:
    """Return ``settings`` updated with the recognized, non-empty keys of ``values``."""
    updates: dict[str, str] = {}
    for key in ("url", "private_token", "oauth_token"):
        value = values.get(key)
        if value:
            updates[key] = str(value)
    unknown = set(values) - {"url", "private_token", "oauth_token"}
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))
    return replace(settings, **updates)


def apply_environment(settings: ClientSettings, environ: Mapping[str, str]) -> ClientSettings:
    """Return ``settings`` overridden by the GitLab environment variables."""
    return apply_mapping(
        settings,
        {
            "url": environ.get(ENV_HTTP_URL),
            "private_token": environ.get(ENV_PRIVATE_TOKEN),
            "oauth_token": environ.get(ENV_OAUTH_TOKEN),
        },
    )


def load_settings(
    config_path: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> ClientSettings:
    """Resolve the effective client settings.

    Args:
        config_path: Explicit configuration file (from ``--config``).
        environ: Environment mapping; defaults to `os.environ`.

    Returns:
        The merged, immutable settings.

    Raises:
        SettingsError: If the config file is unusable or no token is configured.
    """
    settings = ClientSettings()
    path = resolve_config_path(config_path)
    if path is not None:
        settings = apply_mapping(settings, load_toml_table(path))
    settings = apply_environment(settings, os.environ if environ is None else environ)

    if not settings.has_credentials:
        raise SettingsError(
            f"No GitLab credentials found: set {ENV_PRIVATE_TOKEN} or {ENV_OAUTH_TOKEN}, "
            f"or add private_token to the [{CONFIG_TABLE}] table of {DEFAULT_CONFIG_PATH}"
        )
    logger.debug("Using GitLab instance %s", settings.url)
    return settings
