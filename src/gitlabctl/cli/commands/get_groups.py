# topmark:header:start
#
#   project      : gitlabctl
#   file         : get_groups.py
#   file_relpath : src/gitlabctl/cli/commands/get_groups.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""`get groups` and `get subgroups` commands.

Both list groups with the same filters; `get subgroups GROUP` scopes the
listing to the direct children of GROUP.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitlabctl.api.options import ListGroupsOptions
from gitlabctl.cli.dispatch import CommandSpec, RemoteCall
from gitlabctl.cli.flag_catalog import GET_GROUPS_FLAGS
from gitlabctl.cli.printer import Resource
from gitlabctl.cli.validators import GROUP_ORDER_BY_RULE, SORT_RULE

if TYPE_CHECKING:
    from gitlabctl.cli.flags import FlagValues


def assemble_list_groups(flags: FlagValues) -> ListGroupsOptions:
    """Build the group listing options from the parsed flags."""
    return ListGroupsOptions(
        all_available=flags.optional_bool("all-available"),
        order_by=flags.optional_string("order-by"),
        owned=flags.optional_bool("owned"),
        sort=flags.optional_string("sort"),
        statistics=flags.optional_bool("statistics"),
        search=flags.optional_string("search"),
    )


def _get_groups(flags: FlagValues, args: tuple[str, ...]) -> RemoteCall:
    return RemoteCall("list_groups", Resource.GROUP, options=assemble_list_groups(flags))


def _get_subgroups(flags: FlagValues, args: tuple[str, ...]) -> RemoteCall:
    return RemoteCall(
        "list_subgroups", Resource.GROUP, target=args, options=assemble_list_groups(flags)
    )


GET_GROUPS = CommandSpec(
    name="groups",
    aliases=("g",),
    help="List groups",
    assemble=_get_groups,
    flags=GET_GROUPS_FLAGS,
    validators=(GROUP_ORDER_BY_RULE, SORT_RULE),
    example="""\
# list all groups
gitlabctl get groups

# list groups you own, as json
gitlabctl get groups --owned -o json""",
)

GET_SUBGROUPS = CommandSpec(
    name="subgroups",
    aliases=("sg",),
    help="List the subgroups of a group",
    assemble=_get_subgroups,
    args=("GROUP",),
    flags=GET_GROUPS_FLAGS,
    validators=(GROUP_ORDER_BY_RULE, SORT_RULE),
    example="""\
# list the subgroups of Group1
gitlabctl get subgroups Group1""",
)
