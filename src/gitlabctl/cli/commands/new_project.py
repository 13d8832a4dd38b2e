# topmark:header:start
#
#   project      : gitlabctl
#   file         : new_project.py
#   file_relpath : src/gitlabctl/cli/commands/new_project.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""`new project` command."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gitlabctl.api.options import CreateProjectOptions
from gitlabctl.cli.commands.new_group import namespace_id
from gitlabctl.cli.dispatch import CommandSpec, RemoteCall
from gitlabctl.cli.flag_catalog import NEW_PROJECT_FLAGS
from gitlabctl.cli.printer import Resource
from gitlabctl.cli.validators import MERGE_METHOD_RULE, VISIBILITY_RULE

if TYPE_CHECKING:
    from gitlabctl.cli.flags import FlagValues


def project_settings(flags: FlagValues, *, explicit_only: bool) -> dict[str, Any]:
    """Collect the project attributes shared by `new project` and `edit project`.

    Args:
        flags: Parsed flag values.
        explicit_only: If True, only flags given on the command line are
            returned (edits must not reset attributes to flag defaults).

    Returns:
        Field values keyed by API parameter name.
    """
    string = flags.explicit_string if explicit_only else flags.optional_string
    boolean = flags.explicit_bool if explicit_only else flags.optional_bool
    string_set = flags.explicit_string_set if explicit_only else flags.optional_string_set
    return {
        "description": string("desc"),
        "issues_enabled": boolean("issues-enabled"),
        "merge_requests_enabled": boolean("merge-requests-enabled"),
        "jobs_enabled": boolean("jobs-enabled"),
        "wiki_enabled": boolean("wiki-enabled"),
        "snippets_enabled": boolean("snippets-enabled"),
        "resolve_outdated_diff_discussions": boolean("resolve-outdated-diff-discussions"),
        "container_registry_enabled": boolean("container-registry-enabled"),
        "shared_runners_enabled": boolean("shared-runners-enabled"),
        "visibility": string("visibility"),
        "public_jobs": boolean("public-jobs"),
        "only_allow_merge_if_pipeline_succeeds": boolean("only-allow-merge-if-pipeline-succeeds"),
        "only_allow_merge_if_all_discussions_are_resolved": boolean(
            "only-allow-merge-if-discussion-are-resolved"
        ),
        "merge_method": string("merge-method"),
        "lfs_enabled": boolean("lfs-enabled"),
        "request_access_enabled": boolean("request-access-enabled"),
        "tag_list": string_set("tag-list"),
        "printing_merge_request_link_enabled": boolean("printing-merge-request-link-enabled"),
        "ci_config_path": string("ci-config-path"),
    }


def assemble_create_project(flags: FlagValues, name: str) -> CreateProjectOptions:
    """Build the project creation options for project ``name``."""
    return CreateProjectOptions(
        name=name,
        path=name,
        namespace_id=namespace_id(flags),
        **project_settings(flags, explicit_only=False),
    )


def _new_project(flags: FlagValues, args: tuple[str, ...]) -> RemoteCall:
    return RemoteCall(
        "create_project", Resource.PROJECT, options=assemble_create_project(flags, args[0])
    )


NEW_PROJECT = CommandSpec(
    name="project",
    aliases=("p",),
    help="Create a new project",
    assemble=_new_project,
    args=("NAME",),
    flags=NEW_PROJECT_FLAGS,
    validators=(VISIBILITY_RULE, MERGE_METHOD_RULE),
    example="""\
# create a new project in your namespace
gitlabctl new project ProjectX

# create a public project in the group with ID 47
gitlabctl new project ProjectX --namespace=47 --visibility=public""",
)
