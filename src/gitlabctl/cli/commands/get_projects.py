# topmark:header:start
#
#   project      : gitlabctl
#   file         : get_projects.py
#   file_relpath : src/gitlabctl/cli/commands/get_projects.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""`get projects` command.

Without ``--from-group`` the command lists every project visible to the user.
With ``--from-group=GROUP`` the same options are translated to the group
projects shape and the listing is scoped to GROUP.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitlabctl.api.options import LIST_PROJECTS_TO_GROUP_PROJECTS, ListProjectsOptions
from gitlabctl.cli.dispatch import CommandSpec, RemoteCall
from gitlabctl.cli.flag_catalog import GET_PROJECTS_FLAGS
from gitlabctl.cli.printer import Resource
from gitlabctl.cli.validators import PROJECT_ORDER_BY_RULE, SORT_RULE, VISIBILITY_RULE

if TYPE_CHECKING:
    from gitlabctl.cli.flags import FlagValues


def assemble_list_projects(flags: FlagValues) -> ListProjectsOptions:
    """Build the project listing options from the parsed flags."""
    return ListProjectsOptions(
        archived=flags.optional_bool("archived"),
        order_by=flags.optional_string("order-by"),
        sort=flags.optional_string("sort"),
        search=flags.optional_string("search"),
        simple=flags.optional_bool("simple"),
        owned=flags.optional_bool("owned"),
        membership=flags.optional_bool("membership"),
        starred=flags.optional_bool("starred"),
        statistics=flags.optional_bool("statistics"),
        visibility=flags.optional_string("visibility"),
        with_issues_enabled=flags.optional_bool("with-issues-enabled"),
        with_merge_requests_enabled=flags.optional_bool("with-merge-requests-enabled"),
    )


def _get_projects(flags: FlagValues, args: tuple[str, ...]) -> RemoteCall:
    opts = assemble_list_projects(flags)
    group = flags.optional_string("from-group")
    if group is None:
        return RemoteCall("list_projects", Resource.PROJECT, options=opts)
    return RemoteCall(
        "list_group_projects",
        Resource.PROJECT,
        target=(group,),
        options=LIST_PROJECTS_TO_GROUP_PROJECTS.translate(opts),
    )


GET_PROJECTS = CommandSpec(
    name="projects",
    aliases=("p",),
    help="List projects",
    assemble=_get_projects,
    flags=GET_PROJECTS_FLAGS,
    validators=(PROJECT_ORDER_BY_RULE, SORT_RULE, VISIBILITY_RULE),
    example="""\
# list all projects
gitlabctl get projects

# list the projects of a group, sorted ascending
gitlabctl get projects --from-group=Group1 --sort=asc""",
)
