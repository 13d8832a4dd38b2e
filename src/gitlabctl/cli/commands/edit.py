# topmark:header:start
#
#   project      : gitlabctl
#   file         : edit.py
#   file_relpath : src/gitlabctl/cli/commands/edit.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""`edit group` and `edit project` commands.

Edits only send the attributes given on the command line: a flag left at its
default never resets the remote value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitlabctl.api.options import EditProjectOptions, UpdateGroupOptions
from gitlabctl.cli.commands.new_project import project_settings
from gitlabctl.cli.dispatch import CommandSpec, RemoteCall
from gitlabctl.cli.flag_catalog import EDIT_GROUP_FLAGS, EDIT_PROJECT_FLAGS
from gitlabctl.cli.printer import Resource
from gitlabctl.cli.validators import MERGE_METHOD_RULE, VISIBILITY_RULE

if TYPE_CHECKING:
    from gitlabctl.cli.flags import FlagValues


def assemble_update_group(flags: FlagValues) -> UpdateGroupOptions:
    """Build the group update options from the explicitly given flags."""
    return UpdateGroupOptions(
        name=flags.explicit_string("change-name"),
        path=flags.explicit_string("change-path"),
        description=flags.explicit_string("desc"),
        visibility=flags.explicit_string("visibility"),
        lfs_enabled=flags.explicit_bool("lfs-enabled"),
        request_access_enabled=flags.explicit_bool("request-access-enabled"),
    )


def assemble_edit_project(flags: FlagValues) -> EditProjectOptions:
    """Build the project edit options from the explicitly given flags."""
    return EditProjectOptions(
        name=flags.explicit_string("change-name"),
        path=flags.explicit_string("change-path"),
        default_branch=flags.explicit_string("default-branch"),
        **project_settings(flags, explicit_only=True),
    )


def _edit_group(flags: FlagValues, args: tuple[str, ...]) -> RemoteCall:
    return RemoteCall(
        "update_group", Resource.GROUP, target=args, options=assemble_update_group(flags)
    )


def _edit_project(flags: FlagValues, args: tuple[str, ...]) -> RemoteCall:
    return RemoteCall(
        "edit_project", Resource.PROJECT, target=args, options=assemble_edit_project(flags)
    )


EDIT_GROUP = CommandSpec(
    name="group",
    aliases=("g",),
    help="Update a group",
    assemble=_edit_group,
    args=("GROUP",),
    flags=EDIT_GROUP_FLAGS,
    validators=(VISIBILITY_RULE,),
    example="""\
# rename Group1 and make it public
gitlabctl edit group Group1 --change-name=Group2 --visibility=public""",
)

EDIT_PROJECT = CommandSpec(
    name="project",
    aliases=("p",),
    help="Update a project",
    assemble=_edit_project,
    args=("PROJECT",),
    flags=EDIT_PROJECT_FLAGS,
    validators=(VISIBILITY_RULE, MERGE_METHOD_RULE),
    example="""\
# disable the wiki of a project
gitlabctl edit project Group1/Project1 --no-wiki-enabled

# change the default branch
gitlabctl edit project Group1/Project1 --default-branch=main""",
)
