# topmark:header:start
#
#   project      : gitlabctl
#   file         : new_group.py
#   file_relpath : src/gitlabctl/cli/commands/new_group.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""`new group` command.

The group path is derived from NAME. ``--namespace`` takes the numeric ID of
the parent group and creates a subgroup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitlabctl.api.options import CreateGroupOptions
from gitlabctl.cli.dispatch import CommandSpec, RemoteCall
from gitlabctl.cli.errors import GitlabctlUsageError
from gitlabctl.cli.flag_catalog import NEW_GROUP_FLAGS
from gitlabctl.cli.printer import Resource
from gitlabctl.cli.validators import VISIBILITY_RULE

if TYPE_CHECKING:
    from gitlabctl.cli.flags import FlagValues


def namespace_id(flags: FlagValues) -> int | None:
    """Return the ``--namespace`` value as a group ID, or None when unset.

    Raises:
        GitlabctlUsageError: If the value is not a positive integer.
    """
    value = flags.optional_string("namespace")
    if value is None:
        return None
    if not value.isdigit() or int(value) == 0:
        raise GitlabctlUsageError(
            f"'{value}' is not a valid value of 'namespace' flag: expected a numeric group ID"
        )
    return int(value)


def assemble_create_group(flags: FlagValues, name: str) -> CreateGroupOptions:
    """Build the group creation options for group ``name``."""
    return CreateGroupOptions(
        name=name,
        path=name,
        description=flags.optional_string("desc"),
        visibility=flags.optional_string("visibility"),
        lfs_enabled=flags.optional_bool("lfs-enabled"),
        request_access_enabled=flags.optional_bool("request-access-enabled"),
        parent_id=namespace_id(flags),
    )


def _new_group(flags: FlagValues, args: tuple[str, ...]) -> RemoteCall:
    return RemoteCall("create_group", Resource.GROUP, options=assemble_create_group(flags, args[0]))


NEW_GROUP = CommandSpec(
    name="group",
    aliases=("g",),
    help="Create a new group",
    assemble=_new_group,
    args=("NAME",),
    flags=NEW_GROUP_FLAGS,
    validators=(VISIBILITY_RULE,),
    example="""\
# create a new group
gitlabctl new group GroupAZ

# create a subgroup of the group with ID 47
gitlabctl new group GroupAZ --namespace=47""",
)
