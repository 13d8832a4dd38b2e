# topmark:header:start
#
#   project      : gitlabctl
#   file         : __init__.py
#   file_relpath : src/gitlabctl/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""gitlabctl package.

gitlabctl is a command-line client for the GitLab REST API. Every leaf command
parses its flags, validates enumerated values, assembles typed request options
and performs a single API call whose result is printed as json, yaml or a
simple table.
"""

from __future__ import annotations
