# topmark:header:start
#
#   project      : gitlabctl
#   file         : __init__.py
#   file_relpath : src/gitlabctl/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""Runtime configuration for gitlabctl: logging setup and connection settings."""

from __future__ import annotations
