# topmark:header:start
#
#   project      : gitlabctl
#   file         : __init__.py
#   file_relpath : src/gitlabctl/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""Framework-agnostic building blocks shared by the gitlabctl frontends.

The modules in this package (exit codes, output formats) do not import Click
so they can be reused by library callers and tests.
"""

from __future__ import annotations
