# topmark:header:start
#
#   project      : gitlabctl
#   file         : __init__.py
#   file_relpath : src/gitlabctl/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""GitLab API access: request option shapes and the HTTP client."""

from __future__ import annotations

from gitlabctl.api.client import GitlabApiError, GitlabClient

__all__: list[str] = [
    "GitlabApiError",
    "GitlabClient",
]
