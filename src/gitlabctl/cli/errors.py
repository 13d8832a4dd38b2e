# topmark:header:start
#
#   project      : gitlabctl
#   file         : errors.py
#   file_relpath : src/gitlabctl/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""Exceptions for the gitlabctl CLI.

Usage:
    Raise these exceptions from validators, the dispatcher or flag accessors to
    signal errors with standardized messages and exit codes. Click prints the
    message as a single line on stderr and exits with `exit_code`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from gitlabctl.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gitlabctl.api.client import GitlabApiError


class GitlabctlError(click.ClickException):
    """Base class for all gitlabctl CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Unlike Click's default, this method does not add color; colorization is
        applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class GitlabctlUsageError(GitlabctlError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ArgumentCountError(GitlabctlUsageError):
    """Error when a command receives the wrong number of positional arguments."""

    def __init__(self, command_path: str, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            f"{command_path}: accepts {expected} arg(s), received {received}"
        )


class MissingRequiredFlagError(GitlabctlUsageError):
    """Error when a flag marked as required was not given on the command line."""

    def __init__(self, flags: Sequence[str]) -> None:
        self.flags: tuple[str, ...] = tuple(flags)
        quoted = ", ".join(f'"{name}"' for name in self.flags)
        super().__init__(f"required flag(s) {quoted} not set")


class InvalidFlagValueError(GitlabctlUsageError):
    """Error when an enumerated flag holds a value outside its allowed set.

    Attributes:
        flag: The flag name (without leading dashes).
        value: The offending value.
        allowed: The allowed values, in declaration order.
    """

    def __init__(self, flag: str, value: str, allowed: Sequence[str]) -> None:
        self.flag = flag
        self.value = value
        self.allowed: tuple[str, ...] = tuple(allowed)
        super().__init__(
            f"'{value}' is not a recognized value of '{flag}' flag. "
            f"Please choose from: [{', '.join(self.allowed)}]"
        )


class GitlabctlConfigError(GitlabctlError):
    """Error for configuration errors (missing credentials, malformed config file)."""

    exit_code = ExitCode.CONFIG_ERROR


class RemoteCallError(GitlabctlError):
    """Error raised when the GitLab API call fails.

    The message of the underlying `GitlabApiError` is surfaced verbatim.
    """

    exit_code = ExitCode.REMOTE_ERROR

    def __init__(self, cause: GitlabApiError) -> None:
        self.cause = cause
        super().__init__(str(cause))


class FlagAccessError(GitlabctlError):
    """Error for an inconsistent flag registration (a programming defect).

    Raised when code reads a flag that was never registered on the command or
    reads it with the wrong kind. The dispatcher never handles it; it ends the
    process with `ExitCode.INTERNAL_ERROR`.
    """

    exit_code = ExitCode.INTERNAL_ERROR
