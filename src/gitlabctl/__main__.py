# topmark:header:start
#
#   project      : gitlabctl
#   file         : __main__.py
#   file_relpath : src/gitlabctl/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""Module entry point for running gitlabctl via ``python -m gitlabctl``.

Delegates to [`gitlabctl.cli.main.main`][], the same entry point as the
``gitlabctl`` console script.

Examples:
    List the projects of a group::

        python -m gitlabctl get projects --from-group=Group1
"""

from __future__ import annotations

from gitlabctl.cli.main import main

if __name__ == "__main__":
    main()
