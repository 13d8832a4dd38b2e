# topmark:header:start
#
#   project      : gitlabctl
#   file         : __init__.py
#   file_relpath : src/gitlabctl/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""gitlabctl CLI package.

This package groups the Click command tree, the reusable flag catalog, the
validators and the dispatcher that drives every leaf command.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        gitlabctl = "gitlabctl.cli.main:main"

All leaf commands live in [`gitlabctl.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
