# topmark:header:start
#
#   project      : gitlabctl
#   file         : delete.py
#   file_relpath : src/gitlabctl/cli/commands/delete.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""`delete` commands for groups, projects, tags and releases.

Group, project and tag deletions return no entity and print a one-line
confirmation; deleting a release prints the deleted release.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitlabctl.cli.dispatch import CommandSpec, RemoteCall
from gitlabctl.cli.flag_catalog import PROJECT
from gitlabctl.cli.printer import Resource

if TYPE_CHECKING:
    from gitlabctl.cli.flags import FlagValues


def _delete_group(flags: FlagValues, args: tuple[str, ...]) -> RemoteCall:
    return RemoteCall(
        "delete_group", Resource.GROUP, target=args, done_message=f"group {args[0]} deleted"
    )


def _delete_project(flags: FlagValues, args: tuple[str, ...]) -> RemoteCall:
    return RemoteCall(
        "delete_project", Resource.PROJECT, target=args, done_message=f"project {args[0]} deleted"
    )


def _delete_tag(flags: FlagValues, args: tuple[str, ...]) -> RemoteCall:
    project = flags.string("project")
    return RemoteCall(
        "delete_tag",
        Resource.TAG,
        target=(project, args[0]),
        done_message=f"tag {args[0]} deleted from {project}",
    )


def _delete_release(flags: FlagValues, args: tuple[str, ...]) -> RemoteCall:
    project = flags.string("project")
    return RemoteCall(
        "delete_release",
        Resource.RELEASE,
        target=(project, args[0]),
        done_message=f"release {args[0]} deleted from {project}",
    )


DELETE_GROUP = CommandSpec(
    name="group",
    aliases=("g",),
    help="Delete a group",
    assemble=_delete_group,
    args=("GROUP",),
    example="gitlabctl delete group Group1",
)

DELETE_PROJECT = CommandSpec(
    name="project",
    aliases=("p",),
    help="Delete a project",
    assemble=_delete_project,
    args=("PROJECT",),
    example="gitlabctl delete project Group1/Project1",
)

DELETE_TAG = CommandSpec(
    name="tag",
    aliases=("t",),
    help="Delete a repository tag",
    assemble=_delete_tag,
    args=("TAG",),
    flags=(PROJECT,),
    required=("project",),
    example="gitlabctl delete tag v1.0 --project=Group1/Project1",
)

DELETE_RELEASE = CommandSpec(
    name="release",
    aliases=("r",),
    help="Delete a release (the tag is kept)",
    assemble=_delete_release,
    args=("TAG",),
    flags=(PROJECT,),
    required=("project",),
    example="gitlabctl delete release v1.0 --project=Group1/Project1",
)
