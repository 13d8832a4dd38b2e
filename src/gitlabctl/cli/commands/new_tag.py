# topmark:header:start
#
#   project      : gitlabctl
#   file         : new_tag.py
#   file_relpath : src/gitlabctl/cli/commands/new_tag.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""`new tag` and `new release` commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gitlabctl.api.options import CreateReleaseOptions, CreateTagOptions
from gitlabctl.cli.dispatch import CommandSpec, RemoteCall
from gitlabctl.cli.flag_catalog import MESSAGE, PROJECT, REF, RELEASE_DESCRIPTION
from gitlabctl.cli.printer import Resource

if TYPE_CHECKING:
    from gitlabctl.cli.flags import FlagValues


def assemble_create_tag(flags: FlagValues, tag: str) -> CreateTagOptions:
    """Build the tag creation options for ``tag``."""
    return CreateTagOptions(
        tag_name=tag,
        ref=flags.string("ref"),
        message=flags.optional_string("message"),
    )


def assemble_create_release(flags: FlagValues, tag: str) -> CreateReleaseOptions:
    """Build the release creation options for the existing tag ``tag``."""
    return CreateReleaseOptions(tag_name=tag, description=flags.string("description"))


def _new_tag(flags: FlagValues, args: tuple[str, ...]) -> RemoteCall:
    return RemoteCall(
        "create_tag",
        Resource.TAG,
        target=(flags.string("project"),),
        options=assemble_create_tag(flags, args[0]),
    )


def _new_release(flags: FlagValues, args: tuple[str, ...]) -> RemoteCall:
    return RemoteCall(
        "create_release",
        Resource.RELEASE,
        target=(flags.string("project"),),
        options=assemble_create_release(flags, args[0]),
    )


NEW_TAG = CommandSpec(
    name="tag",
    aliases=("t",),
    help="Create a new tag in a project repository",
    assemble=_new_tag,
    args=("TAG",),
    flags=(PROJECT, REF, MESSAGE),
    required=("project", "ref"),
    example="""\
# create tag v1.0 on master
gitlabctl new tag v1.0 --project=Group1/Project1 --ref=master

# create an annotated tag
gitlabctl new tag v1.0 -p Group1/Project1 --ref=master -m 'first stable release'""",
)

NEW_RELEASE = CommandSpec(
    name="release",
    aliases=("r",),
    help="Create a release for an existing tag",
    assemble=_new_release,
    args=("TAG",),
    flags=(PROJECT, RELEASE_DESCRIPTION),
    required=("project", "description"),
    example="""\
# create a release for tag v1.0
gitlabctl new release v1.0 --project=Group1/Project1 --description='Release notes'""",
)
