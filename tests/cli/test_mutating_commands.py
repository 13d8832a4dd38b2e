# topmark:header:start
#
#   project      : gitlabctl
#   file         : test_mutating_commands.py
#   file_relpath : tests/cli/test_mutating_commands.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""`new`, `edit` and `delete` commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import yaml

from gitlabctl.api.options import (
    CreateGroupOptions,
    CreateReleaseOptions,
    CreateTagOptions,
    EditProjectOptions,
    UpdateGroupOptions,
)
from tests.cli.conftest import (
    FakeClient,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
    stdout_json,
)
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from click.testing import Result


@mark_cli
def test_new_release_forwards_result_unchanged(client: FakeClient) -> None:
    """`new release` sends the tag and description and prints the API response as is."""
    release = {"tag_name": "v1.0", "name": "v1.0", "description": "notes", "extra": {"a": 1}}
    client.responses["create_release"] = release

    result: Result = run_cli(
        ["new", "release", "v1.0", "--project=team1/api", "--description=notes", "-o", "json"],
        client,
    )

    assert_SUCCESS(result)
    assert len(client.calls) == 1
    assert client.calls[0].operation == "create_release"
    assert client.calls[0].args == (
        "team1/api",
        CreateReleaseOptions(tag_name="v1.0", description="notes"),
    )
    assert stdout_json(result) == [release]


@mark_cli
def test_new_release_without_description_fails(client: FakeClient) -> None:
    """A missing required flag stops the command before the API is called."""
    result: Result = run_cli(["new", "release", "v1.0", "--project=team1/api"], client)

    assert_USAGE_ERROR(result)
    assert 'required flag(s) "description" not set' in result.stderr
    assert client.calls == []


@mark_cli
def test_new_tag_missing_flags_are_all_reported(client: FakeClient) -> None:
    """Every missing required flag is named in the error."""
    result: Result = run_cli(["new", "tag", "v1.0"], client)

    assert_USAGE_ERROR(result)
    assert 'required flag(s) "project", "ref" not set' in result.stderr


@mark_cli
def test_new_tag_annotated(client: FakeClient) -> None:
    """`-m` creates an annotated tag; no message means the field is omitted."""
    result: Result = run_cli(
        ["new", "t", "v1.0", "-p", "team1/api", "--ref=main", "-m", "stable"], client
    )

    assert_SUCCESS(result)
    assert client.calls[0].args == (
        "team1/api",
        CreateTagOptions(tag_name="v1.0", ref="main", message="stable"),
    )


@mark_cli
def test_new_group_derives_path_and_parent(client: FakeClient) -> None:
    """The group path equals NAME and `--namespace` becomes the parent ID."""
    result: Result = run_cli(["new", "group", "GroupAZ", "--namespace=47", "--lfs-enabled"], client)

    assert_SUCCESS(result)
    assert client.calls[0].options == CreateGroupOptions(
        name="GroupAZ",
        path="GroupAZ",
        visibility="private",
        lfs_enabled=True,
        parent_id=47,
    )


@mark_cli
def test_new_group_rejects_non_numeric_namespace(client: FakeClient) -> None:
    """`--namespace` must be a numeric group ID."""
    result: Result = run_cli(["new", "group", "GroupAZ", "--namespace=team1"], client)

    assert_USAGE_ERROR(result)
    assert "expected a numeric group ID" in result.stderr
    assert client.calls == []


@mark_cli
def test_new_group_rejects_extra_arguments(client: FakeClient) -> None:
    """Positional argument counts are exact."""
    result: Result = run_cli(["new", "group", "a", "b"], client)

    assert_USAGE_ERROR(result)
    assert "accepts 1 arg(s), received 2" in result.stderr


@mark_cli
def test_new_project_sends_feature_defaults(client: FakeClient) -> None:
    """Creation sends every flag whose default is not empty."""
    result: Result = run_cli(["new", "project", "api", "--tag-list=a,b", "--tag-list=b,c"], client)

    assert_SUCCESS(result)
    opts = client.calls[0].options
    assert opts.name == "api"
    assert opts.path == "api"
    assert opts.issues_enabled is True
    assert opts.visibility == "private"
    assert opts.merge_method == "merge"
    assert opts.tag_list == ("a", "b", "c")
    assert opts.namespace_id is None
    assert opts.public_jobs is None


@mark_cli
def test_new_project_rejects_unknown_merge_method(client: FakeClient) -> None:
    """`--merge-method` only accepts merge, ff or rebase_merge."""
    result: Result = run_cli(["new", "project", "api", "--merge-method=squash"], client)

    assert_USAGE_ERROR(result)
    assert "Please choose from: [merge, ff, rebase_merge]" in result.stderr


@mark_cli
def test_edit_project_sends_only_explicit_flags(client: FakeClient) -> None:
    """Flags left at their defaults never reset remote attributes."""
    result: Result = run_cli(
        ["edit", "project", "team1/api", "--no-wiki-enabled", "--default-branch=main"], client
    )

    assert_SUCCESS(result)
    assert client.calls[0].operation == "edit_project"
    assert client.calls[0].args == (
        "team1/api",
        EditProjectOptions(wiki_enabled=False, default_branch="main"),
    )


@mark_cli
def test_edit_group_renames(client: FakeClient) -> None:
    """`--change-name` and `--change-path` map to the group name and path."""
    result: Result = run_cli(
        ["edit", "group", "team1", "--change-name=Team One", "--change-path=team-one"], client
    )

    assert_SUCCESS(result)
    assert client.calls[0].args == (
        "team1",
        UpdateGroupOptions(name="Team One", path="team-one"),
    )


@mark_cli
@parametrize(
    "argv, operation, args, message",
    [
        (["delete", "group", "team1"], "delete_group", ("team1",), "group team1 deleted"),
        (
            ["delete", "project", "team1/api"],
            "delete_project",
            ("team1/api",),
            "project team1/api deleted",
        ),
        (
            ["delete", "tag", "v1.0", "--project=team1/api"],
            "delete_tag",
            ("team1/api", "v1.0"),
            "tag v1.0 deleted from team1/api",
        ),
    ],
)
def test_delete_prints_confirmation(
    argv: list[str], operation: str, args: tuple[str, ...], message: str
) -> None:
    """Deletions that return no entity print a one-line confirmation."""
    client = FakeClient(responses={operation: None})

    result: Result = run_cli(argv, client)

    assert_SUCCESS(result)
    assert client.calls[0].operation == operation
    assert client.calls[0].args == args
    assert result.stdout.strip() == message


@mark_cli
def test_delete_confirmation_follows_machine_formats() -> None:
    """With json or yaml output the confirmation is a `message` mapping."""
    client = FakeClient(responses={"delete_group": None, "delete_tag": None})

    result: Result = run_cli(["delete", "group", "team1", "-o", "json"], client)

    assert_SUCCESS(result)
    assert stdout_json(result) == {"message": "group team1 deleted"}

    result = run_cli(["-o", "yaml", "delete", "tag", "v1.0", "-p", "team1/api"], client)

    assert_SUCCESS(result)
    assert yaml.safe_load(result.stdout) == {"message": "tag v1.0 deleted from team1/api"}


@mark_cli
def test_delete_release_prints_deleted_release() -> None:
    """Deleting a release prints the release returned by the API."""
    client = FakeClient(responses={"delete_release": {"tag_name": "v1.0", "name": "First"}})

    result: Result = run_cli(["delete", "r", "v1.0", "-p", "team1/api"], client)

    assert_SUCCESS(result)
    assert client.calls[0].args == ("team1/api", "v1.0")
    assert result.stdout.splitlines()[1].split() == ["v1.0", "First"]
