# topmark:header:start
#
#   project      : gitlabctl
#   file         : constants.py
#   file_relpath : src/gitlabctl/constants.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""gitlabctl constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from pathlib import Path

try:
    GITLABCTL_VERSION: str = get_version("gitlabctl")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    GITLABCTL_VERSION = "0.0.0"

DEFAULT_GITLAB_URL: str = "https://gitlab.com"
API_PATH: str = "/api/v4"

# Environment variables consulted by the settings loader:
ENV_CONFIG_PATH: str = "GITLABCTL_CONFIG"
ENV_LOG_LEVEL: str = "GITLABCTL_LOG_LEVEL"
ENV_HTTP_URL: str = "GITLAB_HTTP_URL"
ENV_PRIVATE_TOKEN: str = "GITLAB_PRIVATE_TOKEN"
ENV_OAUTH_TOKEN: str = "GITLAB_OAUTH_TOKEN"

DEFAULT_CONFIG_PATH: Path = Path.home() / ".config" / "gitlabctl" / "config.toml"

# Name of the TOML table holding connection settings:
CONFIG_TABLE: str = "gitlab"
