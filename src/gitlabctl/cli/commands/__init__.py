# topmark:header:start
#
#   project      : gitlabctl
#   file         : __init__.py
#   file_relpath : src/gitlabctl/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""Leaf command specifications, grouped by verb (get, new, edit, delete)."""

from __future__ import annotations
