# topmark:header:start
#
#   project      : gitlabctl
#   file         : options.py
#   file_relpath : src/gitlabctl/api/options.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""Typed request options for the GitLab API operations.

Every remote operation has its own frozen dataclass ("shape"). Field names are
the GitLab API parameter names; every field defaults to ``None`` which means
"omitted from the request". Rendering helpers drop ``None`` fields so that an
unset ``--search`` is never sent as an empty-string filter.

Cross-shape translation is explicit: a [`FieldMapping`][gitlabctl.api.options.FieldMapping]
names the fields copied from one shape to another. See
[`LIST_PROJECTS_TO_GROUP_PROJECTS`][gitlabctl.api.options.LIST_PROJECTS_TO_GROUP_PROJECTS]
for the table used by ``get projects --from-group``.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Final, Generic, TypeVar


@dataclass(frozen=True)
class RequestOptions:
    """Base class of all request option shapes."""

    def to_dict(self) -> dict[str, Any]:
        """Return the set fields as a plain dict (``None`` fields are dropped)."""
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                out[f.name] = list(value) if isinstance(value, tuple) else value
        return out

    def to_params(self) -> dict[str, str]:
        """Render the set fields as query-string parameters.

        Booleans become ``"true"``/``"false"`` and sequences are comma-joined,
        which is what the GitLab API expects in a query string.
        """
        params: dict[str, str] = {}
        for key, value in self.to_dict().items():
            if isinstance(value, bool):
                params[key] = "true" if value else "false"
            elif isinstance(value, list):
                params[key] = ",".join(str(v) for v in value)
            else:
                params[key] = str(value)
        return params

    def to_payload(self) -> dict[str, Any]:
        """Render the set fields as a JSON request body."""
        return self.to_dict()

    @classmethod
    def field_names(cls) -> frozenset[str]:
        """Names of the fields defined on this shape."""
        return frozenset(f.name for f in fields(cls))


# --- Listing shapes ---


@dataclass(frozen=True)
class ListGroupsOptions(RequestOptions):
    """Options for ``GET /groups`` and ``GET /groups/:id/subgroups``."""

    all_available: bool | None = None
    order_by: str | None = None
    owned: bool | None = None
    sort: str | None = None
    statistics: bool | None = None
    search: str | None = None


@dataclass(frozen=True)
class ListProjectsOptions(RequestOptions):
    """Options for ``GET /projects``."""

    archived: bool | None = None
    order_by: str | None = None
    sort: str | None = None
    search: str | None = None
    simple: bool | None = None
    owned: bool | None = None
    membership: bool | None = None
    starred: bool | None = None
    statistics: bool | None = None
    visibility: str | None = None
    with_issues_enabled: bool | None = None
    with_merge_requests_enabled: bool | None = None


@dataclass(frozen=True)
class ListGroupProjectsOptions(RequestOptions):
    """Options for ``GET /groups/:id/projects``."""

    archived: bool | None = None
    visibility: str | None = None
    order_by: str | None = None
    sort: str | None = None
    search: str | None = None
    simple: bool | None = None
    owned: bool | None = None
    starred: bool | None = None
    with_issues_enabled: bool | None = None
    with_merge_requests_enabled: bool | None = None
    with_shared: bool | None = None
    include_subgroups: bool | None = None


@dataclass(frozen=True)
class ListTagsOptions(RequestOptions):
    """Options for ``GET /projects/:id/repository/tags``."""

    order_by: str | None = None
    sort: str | None = None
    search: str | None = None


# --- Group shapes ---


@dataclass(frozen=True)
class CreateGroupOptions(RequestOptions):
    """Options for ``POST /groups``."""

    name: str | None = None
    path: str | None = None
    description: str | None = None
    visibility: str | None = None
    lfs_enabled: bool | None = None
    request_access_enabled: bool | None = None
    parent_id: int | None = None


@dataclass(frozen=True)
class UpdateGroupOptions(RequestOptions):
    """Options for ``PUT /groups/:id``."""

    name: str | None = None
    path: str | None = None
    description: str | None = None
    visibility: str | None = None
    lfs_enabled: bool | None = None
    request_access_enabled: bool | None = None


# --- Project shapes ---


@dataclass(frozen=True)
class ProjectSettingsOptions(RequestOptions):
    """Project attributes shared by project creation and edition."""

    name: str | None = None
    path: str | None = None
    description: str | None = None
    issues_enabled: bool | None = None
    merge_requests_enabled: bool | None = None
    jobs_enabled: bool | None = None
    wiki_enabled: bool | None = None
    snippets_enabled: bool | None = None
    resolve_outdated_diff_discussions: bool | None = None
    container_registry_enabled: bool | None = None
    shared_runners_enabled: bool | None = None
    visibility: str | None = None
    public_jobs: bool | None = None
    only_allow_merge_if_pipeline_succeeds: bool | None = None
    only_allow_merge_if_all_discussions_are_resolved: bool | None = None
    merge_method: str | None = None
    lfs_enabled: bool | None = None
    request_access_enabled: bool | None = None
    tag_list: tuple[str, ...] | None = None
    printing_merge_request_link_enabled: bool | None = None
    ci_config_path: str | None = None


@dataclass(frozen=True)
class CreateProjectOptions(ProjectSettingsOptions):
    """Options for ``POST /projects``."""

    namespace_id: int | None = None


@dataclass(frozen=True)
class EditProjectOptions(ProjectSettingsOptions):
    """Options for ``PUT /projects/:id``."""

    default_branch: str | None = None


# --- Tags and releases ---


@dataclass(frozen=True)
class CreateTagOptions(RequestOptions):
    """Options for ``POST /projects/:id/repository/tags``."""

    tag_name: str | None = None
    ref: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class CreateReleaseOptions(RequestOptions):
    """Options for ``POST /projects/:id/releases``."""

    tag_name: str | None = None
    description: str | None = None


# --- Cross-shape translation ---

S = TypeVar("S", bound=RequestOptions)
T = TypeVar("T", bound=RequestOptions)


@dataclass(frozen=True)
class FieldMapping(Generic[S, T]):
    """Explicit, name-for-name field mapping between two option shapes.

    Fields listed in ``shared`` are copied by name and value. Fields of the
    source that are not listed are dropped; fields of the target that are not
    listed keep the target's default (``None``).

    Attributes:
        source: Source shape.
        target: Target shape.
        shared: Field names present on both shapes and copied verbatim.
    """

    source: type[S]
    target: type[T]
    shared: tuple[str, ...]

    def __post_init__(self) -> None:
        missing_src = set(self.shared) - self.source.field_names()
        missing_dst = set(self.shared) - self.target.field_names()
        if missing_src or missing_dst:
            raise ValueError(
                f"Invalid mapping {self.source.__name__} -> {self.target.__name__}: "
                f"missing on source={sorted(missing_src)}, on target={sorted(missing_dst)}"
            )

    @property
    def dropped(self) -> frozenset[str]:
        """Source fields that have no counterpart on the target."""
        return self.source.field_names() - set(self.shared)

    @property
    def target_only(self) -> frozenset[str]:
        """Target fields left at their defaults by the translation."""
        return self.target.field_names() - set(self.shared)

    def translate(self, options: S) -> T:
        """Build a target shape from ``options``."""
        if not isinstance(options, self.source):
            raise TypeError(
                f"Expected {self.source.__name__}, got {type(options).__name__}"
            )
        return self.target(**{name: getattr(options, name) for name in self.shared})


#: ``get projects --from-group``: ``statistics`` and ``membership`` are dropped
#: (the group endpoint has no such filters); ``with_shared`` and
#: ``include_subgroups`` keep the API defaults.
LIST_PROJECTS_TO_GROUP_PROJECTS: Final[
    FieldMapping[ListProjectsOptions, ListGroupProjectsOptions]
] = FieldMapping(
    source=ListProjectsOptions,
    target=ListGroupProjectsOptions,
    shared=(
        "archived",
        "visibility",
        "order_by",
        "sort",
        "search",
        "simple",
        "owned",
        "starred",
        "with_issues_enabled",
        "with_merge_requests_enabled",
    ),
)
