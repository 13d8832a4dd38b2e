# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/gitlabctl/core/exit_codes.py
#   project      : gitlabctl
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""Exit codes for the gitlabctl CLI.

gitlabctl aligns with the BSD `sysexits` convention so that scripts wrapping
the tool can tell a mistyped flag from an unreachable GitLab instance.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for gitlabctl.

    Attributes:
        SUCCESS: The command ran and its single API call succeeded.
        FAILURE: Generic failure. Prefer a more specific code if available.
        USAGE_ERROR: Invalid invocation: wrong argument count, missing required
            flag or a flag value outside its allowed set. Mirrors BSD
            ``EX_USAGE (64)``.
        REMOTE_ERROR: The GitLab API call failed (network, authentication or a
            server-side rejection). Mirrors BSD ``EX_UNAVAILABLE (69)``.
        INTERNAL_ERROR: A flag registration defect was detected at runtime.
            Mirrors BSD ``EX_SOFTWARE (70)``.
        CONFIG_ERROR: Missing credentials or an unreadable configuration
            file. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    REMOTE_ERROR = 69  # EX_UNAVAILABLE
    INTERNAL_ERROR = 70  # EX_SOFTWARE
    CONFIG_ERROR = 78  # EX_CONFIG
