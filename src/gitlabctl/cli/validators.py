# topmark:header:start
#
#   project      : gitlabctl
#   file         : validators.py
#   file_relpath : src/gitlabctl/cli/validators.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""Pre-execution validation of enumerated flag values.

Conventions:
    - `validate_*` helpers enforce a policy and raise `InvalidFlagValueError`
      (a `GitlabctlUsageError`) when the invocation is invalid.
    - Rules are scoped per command: ``order-by`` has distinct rules for
      groups, projects and tags, never a single global one.

Validation only reads already-parsed flag state; it performs no I/O and runs
before any request options are assembled or any client is created.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from gitlabctl.cli.errors import InvalidFlagValueError
from gitlabctl.config.logging import get_logger
from gitlabctl.core.formats import OutputFormat

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from gitlabctl.cli.flags import FlagValues
    from gitlabctl.config.logging import GitlabctlLogger

logger: GitlabctlLogger = get_logger(__name__)


@dataclass(frozen=True)
class ValidationRule:
    """Allowed values of one enumerated string flag.

    Attributes:
        flag: Flag name (without dashes).
        allowed: Allowed values, in the order shown to the user.
    """

    flag: str
    allowed: tuple[str, ...]

    def check(self, flags: FlagValues) -> None:
        """Validate ``flags`` against this rule.

        Raises:
            InvalidFlagValueError: If the flag value is not allowed.
        """
        validate_enum(flags, self.flag, self.allowed)


def validate_enum(flags: FlagValues, flag_name: str, allowed: Sequence[str]) -> None:
    """Ensure the string flag ``flag_name`` holds one of ``allowed``.

    Args:
        flags: Parsed flag values of the invocation.
        flag_name: Name of the string flag to check.
        allowed: Allowed values.

    Raises:
        InvalidFlagValueError: If the value is not in ``allowed``; the message
            names the value, the flag and every allowed value. An unset flag
            (not given, empty default) is accepted: it is omitted from the request.
    """
    value = flags.string(flag_name)
    if value in allowed or not flags.is_set(flag_name):
        return
    logger.debug("%s: rejected --%s=%r", flags.command_path, flag_name, value)
    raise InvalidFlagValueError(flag_name, value, allowed)


def run_validators(flags: FlagValues, rules: Iterable[ValidationRule]) -> None:
    """Run ``rules`` in order; the first failing rule aborts with its error."""
    for rule in rules:
        rule.check(flags)


OUT_RULE: Final = ValidationRule("out", tuple(f.value for f in OutputFormat))
SORT_RULE: Final = ValidationRule("sort", ("asc", "desc"))
GROUP_ORDER_BY_RULE: Final = ValidationRule("order-by", ("path", "name"))
PROJECT_ORDER_BY_RULE: Final = ValidationRule(
    "order-by", ("id", "name", "path", "created_at", "updated_at", "last_activity_at")
)
TAG_ORDER_BY_RULE: Final = ValidationRule("order-by", ("name", "updated"))
VISIBILITY_RULE: Final = ValidationRule("visibility", ("public", "private", "internal"))
MERGE_METHOD_RULE: Final = ValidationRule("merge-method", ("merge", "ff", "rebase_merge"))
