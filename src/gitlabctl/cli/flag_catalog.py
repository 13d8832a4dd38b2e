# topmark:header:start
#
#   project      : gitlabctl
#   file         : flag_catalog.py
#   file_relpath : src/gitlabctl/cli/flag_catalog.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""Catalog of reusable flags and the flag bundles shared by several commands.

Flag usage references:
    https://docs.gitlab.com/ee/api/groups.html
    https://docs.gitlab.com/ee/api/projects.html
"""

from __future__ import annotations

from typing import Final

from gitlabctl.cli.flags import FlagKind, FlagSpec
from gitlabctl.core.formats import DEFAULT_OUTPUT_FORMAT


def _string(name: str, default: str, help: str, shorthand: str | None = None) -> FlagSpec:
    return FlagSpec(name=name, kind=FlagKind.STRING, default=default, help=help, shorthand=shorthand)


def _bool(name: str, default: bool, help: str) -> FlagSpec:
    return FlagSpec(name=name, kind=FlagKind.BOOL, default=default, help=help)


# --- Global ---

OUT: Final = _string(
    "out",
    DEFAULT_OUTPUT_FORMAT.value,
    "Print the command output to the desired format. (json, yaml, simple)",
    shorthand="o",
)

# --- Listing and filtering ---

ALL_AVAILABLE: Final = _bool(
    "all-available",
    False,
    "Show all the groups you have access to "
    "(defaults to false for authenticated users, true for admin)",
)
GROUP_ORDER_BY: Final = _string("order-by", "name", "Order groups by name or path")
PROJECT_ORDER_BY: Final = _string(
    "order-by",
    "created_at",
    "Return projects ordered by id, name, path, created_at, updated_at, or last_activity_at fields",
)
TAG_ORDER_BY: Final = _string("order-by", "updated", "Return tags ordered by name or updated fields")
OWNED: Final = _bool("owned", False, "Limit to resources owned by the current user")
SORT: Final = _string("sort", "asc", "Order resources in asc or desc order")
STATISTICS: Final = _bool("statistics", False, "Include resource statistics (admins only)")
SEARCH: Final = _string("search", "", "Return the list of resources matching the search criteria")
FROM_GROUP: Final = _string(
    "from-group", "", "Use a group as the target namespace when performing the command"
)
ARCHIVED: Final = _bool("archived", False, "Limit by archived status")
SIMPLE: Final = _bool("simple", False, "Return only the ID, URL, name, and path of each project")
MEMBERSHIP: Final = _bool(
    "membership", False, "Limit by projects that the current user is a member of"
)
STARRED: Final = _bool("starred", False, "Limit by projects starred by the current user")
WITH_ISSUES_ENABLED: Final = _bool("with-issues-enabled", False, "Limit by enabled issues feature")
WITH_MERGE_REQUESTS_ENABLED: Final = _bool(
    "with-merge-requests-enabled", False, "Limit by enabled merge requests feature"
)
VISIBILITY_FILTER: Final = _string("visibility", "", "Limit by visibility: public, internal or private")

# --- Resource attributes ---

VISIBILITY: Final = _string("visibility", "private", "public, internal or private")
DESC: Final = _string("desc", "", "The description of the resource")
CHANGE_NAME: Final = _string(
    "change-name",
    "",
    "Use this flag to change the resource name that is displayed in the web user interface",
)
CHANGE_PATH: Final = _string(
    "change-path",
    "",
    "Use this flag to change the path name that is used when accessing "
    "the resource via http or ssh url",
)
NAMESPACE: Final = _string(
    "namespace",
    "",
    "The parent namespace (group) ID. Defaults to the current user namespace",
)
LFS_ENABLED: Final = _bool("lfs-enabled", False, "Enable LFS")
REQUEST_ACCESS_ENABLED: Final = _bool("request-access-enabled", False, "Enable request access")

# --- Project features ---

ISSUES_ENABLED: Final = _bool("issues-enabled", True, "Enable issues")
MERGE_REQUESTS_ENABLED: Final = _bool("merge-requests-enabled", True, "Enable merge requests")
JOBS_ENABLED: Final = _bool("jobs-enabled", True, "Enable jobs")
WIKI_ENABLED: Final = _bool("wiki-enabled", True, "Enable wiki")
SNIPPETS_ENABLED: Final = _bool("snippets-enabled", True, "Enable snippets")
RESOLVE_OUTDATED_DIFF_DISCUSSIONS: Final = _bool(
    "resolve-outdated-diff-discussions",
    False,
    "Automatically resolve merge request diffs discussions on lines changed with a push",
)
CONTAINER_REGISTRY_ENABLED: Final = _bool(
    "container-registry-enabled", False, "Enable container registry for this project"
)
SHARED_RUNNERS_ENABLED: Final = _bool(
    "shared-runners-enabled", False, "Enable shared runners for this project"
)
PUBLIC_JOBS: Final = _bool("public-jobs", False, "If true, jobs can be viewed by non-project-members")
ONLY_ALLOW_MERGE_IF_PIPELINE_SUCCEEDS: Final = _bool(
    "only-allow-merge-if-pipeline-succeeds",
    False,
    "Set whether merge requests can only be merged with successful jobs",
)
ONLY_ALLOW_MERGE_IF_DISCUSSION_ARE_RESOLVED: Final = _bool(
    "only-allow-merge-if-discussion-are-resolved",
    False,
    "Set whether merge requests can only be merged when all the discussions are resolved",
)
MERGE_METHOD: Final = _string(
    "merge-method", "merge", "Set the merge method used. (available: 'merge', 'rebase_merge', 'ff')"
)
TAG_LIST: Final = FlagSpec(
    name="tag-list",
    kind=FlagKind.STRING_SET,
    default=(),
    help="The list of tags for a project. Example: --tag-list='tag1,tag2'",
)
PRINTING_MERGE_REQUEST_LINK_ENABLED: Final = _bool(
    "printing-merge-request-link-enabled",
    True,
    "Show link to create/view merge request when pushing from the command line",
)
CI_CONFIG_PATH: Final = _string("ci-config-path", "", "The path to CI config file")
DEFAULT_BRANCH: Final = _string("default-branch", "master", "The default branch")

# --- Tags and releases ---

PROJECT: Final = _string("project", "", "The name or ID of the project", shorthand="p")
REF: Final = _string("ref", "", "Create tag using commit SHA, another tag name, or branch name")
MESSAGE: Final = _string("message", "", "Creates annotated tag", shorthand="m")
RELEASE_DESCRIPTION: Final = _string(
    "description", "", "The release note or description", shorthand="d"
)

# --- Bundles ---

GET_GROUPS_FLAGS: Final[tuple[FlagSpec, ...]] = (
    ALL_AVAILABLE,
    GROUP_ORDER_BY,
    OWNED,
    SORT,
    STATISTICS,
    SEARCH,
)

GET_PROJECTS_FLAGS: Final[tuple[FlagSpec, ...]] = (
    FROM_GROUP,
    PROJECT_ORDER_BY,
    SORT,
    SEARCH,
    STATISTICS,
    VISIBILITY_FILTER,
    OWNED,
    ARCHIVED,
    SIMPLE,
    MEMBERSHIP,
    STARRED,
    WITH_ISSUES_ENABLED,
    WITH_MERGE_REQUESTS_ENABLED,
)

NEW_GROUP_FLAGS: Final[tuple[FlagSpec, ...]] = (
    NAMESPACE,
    DESC,
    LFS_ENABLED,
    REQUEST_ACCESS_ENABLED,
    VISIBILITY,
)

EDIT_GROUP_FLAGS: Final[tuple[FlagSpec, ...]] = (
    CHANGE_NAME,
    CHANGE_PATH,
    DESC,
    LFS_ENABLED,
    REQUEST_ACCESS_ENABLED,
    VISIBILITY,
)

PROJECT_SETTINGS_FLAGS: Final[tuple[FlagSpec, ...]] = (
    DESC,
    LFS_ENABLED,
    REQUEST_ACCESS_ENABLED,
    VISIBILITY,
    ISSUES_ENABLED,
    MERGE_REQUESTS_ENABLED,
    JOBS_ENABLED,
    WIKI_ENABLED,
    SNIPPETS_ENABLED,
    RESOLVE_OUTDATED_DIFF_DISCUSSIONS,
    CONTAINER_REGISTRY_ENABLED,
    SHARED_RUNNERS_ENABLED,
    PUBLIC_JOBS,
    ONLY_ALLOW_MERGE_IF_PIPELINE_SUCCEEDS,
    ONLY_ALLOW_MERGE_IF_DISCUSSION_ARE_RESOLVED,
    MERGE_METHOD,
    TAG_LIST,
    PRINTING_MERGE_REQUEST_LINK_ENABLED,
    CI_CONFIG_PATH,
)

NEW_PROJECT_FLAGS: Final[tuple[FlagSpec, ...]] = (NAMESPACE, *PROJECT_SETTINGS_FLAGS)

EDIT_PROJECT_FLAGS: Final[tuple[FlagSpec, ...]] = (
    *PROJECT_SETTINGS_FLAGS,
    CHANGE_NAME,
    CHANGE_PATH,
    DEFAULT_BRANCH,
)
