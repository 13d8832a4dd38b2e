# topmark:header:start
#
#   project      : gitlabctl
#   file         : client.py
#   file_relpath : src/gitlabctl/api/client.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""Thin GitLab REST API v4 client.

Each public method performs exactly one HTTP request and returns the decoded
JSON entity (or list of entities). There is no retry and no pagination loop:
list methods return the page the server sends back.

Group and project identifiers may be numeric IDs or full paths
(``groupx/myapp``); paths are URL-encoded into a single path segment.
"""

from __future__ import annotations

import urllib.parse
from typing import TYPE_CHECKING, Any

import requests

from gitlabctl.config.logging import get_logger
from gitlabctl.constants import API_PATH, GITLABCTL_VERSION

if TYPE_CHECKING:
    from gitlabctl.api.options import (
        CreateGroupOptions,
        CreateProjectOptions,
        CreateReleaseOptions,
        CreateTagOptions,
        EditProjectOptions,
        ListGroupProjectsOptions,
        ListGroupsOptions,
        ListProjectsOptions,
        ListTagsOptions,
        UpdateGroupOptions,
    )
    from gitlabctl.config.logging import GitlabctlLogger
    from gitlabctl.config.settings import ClientSettings

logger: GitlabctlLogger = get_logger(__name__)

Entity = dict[str, Any]


class GitlabApiError(Exception):
    """A failed API request: transport error or non-2xx response.

    Attributes:
        status_code: HTTP status, or None for transport failures.
        method: HTTP method of the failed request.
        url: Request URL.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        method: str = "",
        url: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.method = method
        self.url = url


def encode_id(ident: str | int) -> str:
    """Encode a group/project ID or full path as a single URL path segment."""
    return urllib.parse.quote(str(ident), safe="")


def _error_detail(resp: requests.Response) -> str:
    """Extract GitLab's error message from a response body."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text.strip()[:500] or resp.reason
    if isinstance(body, dict):
        detail = body.get("message") or body.get("error") or body
        return str(detail)
    return str(body)


class GitlabClient:
    """GitLab API client bound to one instance and one token.

    Args:
        settings: Connection settings (base URL and token).
        session: Optional pre-configured session (useful for tests).
    """

    def __init__(self, settings: ClientSettings, session: requests.Session | None = None) -> None:
        self.base_url = settings.url.rstrip("/")
        self.api_url = f"{self.base_url}{API_PATH}"
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": f"gitlabctl/{GITLABCTL_VERSION}"})
        if settings.private_token:
            self.session.headers["PRIVATE-TOKEN"] = settings.private_token
        elif settings.oauth_token:
            self.session.headers["Authorization"] = f"Bearer {settings.oauth_token}"

    def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, str] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        url = f"{self.api_url}{endpoint}"
        logger.debug("%s %s params=%s json=%s", method, url, params or {}, payload or {})
        try:
            resp = self.session.request(method, url, params=params, json=payload)
        except requests.RequestException as exc:
            raise GitlabApiError(f"{method} {url}: {exc}", method=method, url=url) from exc

        if resp.status_code >= 400:
            detail = _error_detail(resp)
            logger.debug("API error %s: %s", resp.status_code, detail)
            raise GitlabApiError(
                f"{method} {url}: {resp.status_code} {detail}",
                status_code=resp.status_code,
                method=method,
                url=url,
            )
        if resp.status_code == 204 or not resp.content:
            return None
        return resp.json()

    # --- Groups ---

    def list_groups(self, opts: ListGroupsOptions) -> list[Entity]:
        """List the groups visible to the authenticated user."""
        return self._request("GET", "/groups", params=opts.to_params())

    def list_subgroups(self, group: str, opts: ListGroupsOptions) -> list[Entity]:
        """List the direct subgroups of ``group``."""
        return self._request("GET", f"/groups/{encode_id(group)}/subgroups", params=opts.to_params())

    def list_group_projects(self, group: str, opts: ListGroupProjectsOptions) -> list[Entity]:
        """List the projects of ``group``."""
        return self._request("GET", f"/groups/{encode_id(group)}/projects", params=opts.to_params())

    def create_group(self, opts: CreateGroupOptions) -> Entity:
        """Create a group."""
        return self._request("POST", "/groups", payload=opts.to_payload())

    def update_group(self, group: str, opts: UpdateGroupOptions) -> Entity:
        """Update an existing group."""
        return self._request("PUT", f"/groups/{encode_id(group)}", payload=opts.to_payload())

    def delete_group(self, group: str) -> None:
        """Delete (or schedule deletion of) a group."""
        self._request("DELETE", f"/groups/{encode_id(group)}")

    # --- Projects ---

    def list_projects(self, opts: ListProjectsOptions) -> list[Entity]:
        """List the projects visible to the authenticated user."""
        return self._request("GET", "/projects", params=opts.to_params())

    def create_project(self, opts: CreateProjectOptions) -> Entity:
        """Create a project."""
        return self._request("POST", "/projects", payload=opts.to_payload())

    def edit_project(self, project: str, opts: EditProjectOptions) -> Entity:
        """Update an existing project."""
        return self._request("PUT", f"/projects/{encode_id(project)}", payload=opts.to_payload())

    def delete_project(self, project: str) -> None:
        """Delete (or schedule deletion of) a project."""
        self._request("DELETE", f"/projects/{encode_id(project)}")

    # --- Tags ---

    def list_tags(self, project: str, opts: ListTagsOptions) -> list[Entity]:
        """List the repository tags of ``project``."""
        return self._request(
            "GET", f"/projects/{encode_id(project)}/repository/tags", params=opts.to_params()
        )

    def create_tag(self, project: str, opts: CreateTagOptions) -> Entity:
        """Create a repository tag."""
        return self._request(
            "POST", f"/projects/{encode_id(project)}/repository/tags", payload=opts.to_payload()
        )

    def delete_tag(self, project: str, tag: str) -> None:
        """Delete a repository tag."""
        self._request("DELETE", f"/projects/{encode_id(project)}/repository/tags/{encode_id(tag)}")

    # --- Releases ---

    def list_releases(self, project: str) -> list[Entity]:
        """List the releases of ``project``."""
        return self._request("GET", f"/projects/{encode_id(project)}/releases")

    def create_release(self, project: str, opts: CreateReleaseOptions) -> Entity:
        """Create a release for an existing tag."""
        return self._request(
            "POST", f"/projects/{encode_id(project)}/releases", payload=opts.to_payload()
        )

    def delete_release(self, project: str, tag: str) -> Entity:
        """Delete the release attached to ``tag`` (the tag itself is kept)."""
        return self._request("DELETE", f"/projects/{encode_id(project)}/releases/{encode_id(tag)}")
