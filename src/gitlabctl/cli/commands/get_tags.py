# topmark:header:start
#
#   project      : gitlabctl
#   file         : get_tags.py
#   file_relpath : src/gitlabctl/cli/commands/get_tags.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""`get tags` and `get releases` commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitlabctl.api.options import ListTagsOptions
from gitlabctl.cli.dispatch import CommandSpec, RemoteCall
from gitlabctl.cli.flag_catalog import PROJECT, SEARCH, SORT, TAG_ORDER_BY
from gitlabctl.cli.printer import Resource
from gitlabctl.cli.validators import SORT_RULE, TAG_ORDER_BY_RULE

if TYPE_CHECKING:
    from gitlabctl.cli.flags import FlagValues


def assemble_list_tags(flags: FlagValues) -> ListTagsOptions:
    """Build the tag listing options from the parsed flags."""
    return ListTagsOptions(
        order_by=flags.optional_string("order-by"),
        sort=flags.optional_string("sort"),
        search=flags.optional_string("search"),
    )


def _get_tags(flags: FlagValues, args: tuple[str, ...]) -> RemoteCall:
    return RemoteCall(
        "list_tags",
        Resource.TAG,
        target=(flags.string("project"),),
        options=assemble_list_tags(flags),
    )


def _get_releases(flags: FlagValues, args: tuple[str, ...]) -> RemoteCall:
    return RemoteCall("list_releases", Resource.RELEASE, target=(flags.string("project"),))


GET_TAGS = CommandSpec(
    name="tags",
    aliases=("t",),
    help="List the repository tags of a project",
    assemble=_get_tags,
    flags=(PROJECT, TAG_ORDER_BY, SORT, SEARCH),
    required=("project",),
    validators=(TAG_ORDER_BY_RULE, SORT_RULE),
    example="""\
# list the tags of a project
gitlabctl get tags --project=Group1/Project1""",
)

GET_RELEASES = CommandSpec(
    name="releases",
    aliases=("r",),
    help="List the releases of a project",
    assemble=_get_releases,
    flags=(PROJECT,),
    required=("project",),
    example="""\
# list the releases of a project
gitlabctl get releases --project=Group1/Project1""",
)
