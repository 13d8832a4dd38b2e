# topmark:header:start
#
#   project      : gitlabctl
#   file         : test_client.py
#   file_relpath : tests/api/test_client.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""HTTP client: URLs, authentication headers, parameters and error mapping.

The `requests.Session` is replaced by a stub that records requests and
returns canned responses; nothing leaves the process.
"""

from __future__ import annotations

import json
from typing import Any

import pytest
import requests

from gitlabctl.api.client import GitlabApiError, GitlabClient, encode_id
from gitlabctl.api.options import (
    CreateReleaseOptions,
    ListGroupProjectsOptions,
    UpdateGroupOptions,
)
from gitlabctl.config.settings import ClientSettings


def _response(status: int, body: Any = None, *, raw: bytes | None = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.reason = "Reason"
    if raw is not None:
        resp._content = raw
    else:
        resp._content = b"" if body is None else json.dumps(body).encode()
    return resp


class StubSession(requests.Session):
    """Session returning queued responses and recording each request."""

    def __init__(self, *responses: requests.Response | Exception) -> None:
        super().__init__()
        self.queue = list(responses)
        self.requests: list[dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:  # type: ignore[override]
        self.requests.append({"method": method, "url": url, **kwargs})
        item = self.queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def _client(session: StubSession, **settings: Any) -> GitlabClient:
    defaults: dict[str, Any] = {"url": "https://git.example.com/", "private_token": "tok"}
    defaults.update(settings)
    return GitlabClient(ClientSettings(**defaults), session=session)


def test_encode_id_escapes_full_paths() -> None:
    assert encode_id("team1/sub group/api") == "team1%2Fsub%20group%2Fapi"
    assert encode_id(42) == "42"


def test_private_token_header() -> None:
    session = StubSession()
    _client(session)

    assert session.headers["PRIVATE-TOKEN"] == "tok"
    assert "Authorization" not in session.headers
    assert session.headers["User-Agent"].startswith("gitlabctl/")


def test_oauth_token_header() -> None:
    session = StubSession()
    _client(session, private_token=None, oauth_token="oauth")

    assert session.headers["Authorization"] == "Bearer oauth"
    assert "PRIVATE-TOKEN" not in session.headers


def test_list_group_projects_sends_query_params() -> None:
    session = StubSession(_response(200, [{"id": 1}]))

    result = _client(session).list_group_projects(
        "team1/sub", ListGroupProjectsOptions(sort="asc", archived=False)
    )

    assert result == [{"id": 1}]
    req = session.requests[0]
    assert req["method"] == "GET"
    assert req["url"] == "https://git.example.com/api/v4/groups/team1%2Fsub/projects"
    assert req["params"] == {"sort": "asc", "archived": "false"}
    assert req["json"] is None


def test_update_group_sends_json_body() -> None:
    session = StubSession(_response(200, {"id": 3, "name": "Team"}))

    _client(session).update_group("team1", UpdateGroupOptions(name="Team"))

    req = session.requests[0]
    assert req["method"] == "PUT"
    assert req["json"] == {"name": "Team"}


def test_create_release_returns_entity() -> None:
    release = {"tag_name": "v1", "description": "notes"}
    session = StubSession(_response(201, release))

    result = _client(session).create_release(
        "team1/api", CreateReleaseOptions(tag_name="v1", description="notes")
    )

    assert result == release
    assert session.requests[0]["url"].endswith("/projects/team1%2Fapi/releases")


def test_delete_without_body_returns_none() -> None:
    session = StubSession(_response(204))

    assert _client(session).delete_tag("team1/api", "v1.0") is None
    assert session.requests[0]["url"].endswith("/repository/tags/v1.0")


def test_http_error_carries_status_and_server_message() -> None:
    session = StubSession(_response(404, {"message": "404 Group Not Found"}))

    with pytest.raises(GitlabApiError) as excinfo:
        _client(session).delete_group("missing")

    assert excinfo.value.status_code == 404
    assert excinfo.value.method == "DELETE"
    assert "404 Group Not Found" in str(excinfo.value)


def test_http_error_with_plain_text_body() -> None:
    session = StubSession(_response(502, raw=b"Bad gateway"))

    with pytest.raises(GitlabApiError, match="502 Bad gateway"):
        _client(session).list_releases("team1/api")


def test_transport_error_is_wrapped() -> None:
    session = StubSession(requests.ConnectionError("connection refused"))

    with pytest.raises(GitlabApiError, match="connection refused") as excinfo:
        _client(session).list_releases("team1/api")

    assert excinfo.value.status_code is None
