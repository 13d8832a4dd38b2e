# topmark:header:start
#
#   project      : gitlabctl
#   file         : test_flags.py
#   file_relpath : tests/cli/test_flags.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""Flag registry: spec checks, registration and typed access to parsed values."""

from __future__ import annotations

import click
import pytest

from gitlabctl.cli.dispatch import AliasedGroup, CommandSpec, DispatchCommand, RemoteCall
from gitlabctl.cli.errors import FlagAccessError
from gitlabctl.cli.flag_catalog import OUT, PROJECT, SEARCH, SORT, TAG_LIST
from gitlabctl.cli.flags import (
    FlagKind,
    FlagSpec,
    FlagValues,
    register,
    split_string_set,
)
from gitlabctl.cli.printer import Resource
from tests.conftest import parametrize


def _noop(flags: FlagValues, args: tuple[str, ...]) -> RemoteCall:
    return RemoteCall("list_groups", Resource.GROUP)


def _command(*flags: FlagSpec) -> DispatchCommand:
    return DispatchCommand(CommandSpec(name="cmd", help="test", assemble=_noop, flags=flags))


def _parse(command: click.Command, argv: list[str]) -> FlagValues:
    ctx = command.make_context("cmd", argv)
    return FlagValues.from_context(ctx)


@parametrize(
    "kwargs",
    [
        {"name": "", "kind": FlagKind.STRING, "default": ""},
        {"name": "--dash", "kind": FlagKind.STRING, "default": ""},
        {"name": "x", "kind": FlagKind.STRING, "default": "", "shorthand": "ab"},
        {"name": "x", "kind": FlagKind.BOOL, "default": False, "shorthand": "x"},
        {"name": "x", "kind": FlagKind.BOOL, "default": "no"},
        {"name": "x", "kind": FlagKind.STRING_SET, "default": ""},
    ],
)
def test_malformed_specs_are_rejected(kwargs: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        FlagSpec(help="h", **kwargs)  # type: ignore[arg-type]


def test_register_is_idempotent() -> None:
    cmd = _command()
    before = len(cmd.params)

    register(SEARCH, cmd)
    register(SEARCH, cmd)

    assert len(cmd.params) == before + 1
    assert list(cmd.flag_specs) == ["search"]


def test_conflicting_registration_raises() -> None:
    cmd = _command(SEARCH)
    other = FlagSpec(name="search", kind=FlagKind.STRING, default="x", help="other")

    with pytest.raises(FlagAccessError):
        register(other, cmd)


def test_register_on_plain_command_raises() -> None:
    with pytest.raises(FlagAccessError):
        register(SEARCH, click.Command("plain"))


def test_values_track_explicit_and_unset() -> None:
    cmd = _command(SEARCH, SORT, TAG_LIST)

    flags = _parse(cmd, ["--sort", "desc"])

    assert flags.string("sort") == "desc"
    assert flags["sort"].explicit
    assert flags.optional_string("search") is None
    assert flags["search"].is_unset
    assert flags.string("search") == ""
    assert flags.string_set("tag-list") == ()
    assert flags.optional_string_set("tag-list") is None


def test_non_empty_default_counts_as_set() -> None:
    flags = _parse(_command(SORT), [])

    assert flags.is_set("sort")
    assert flags.optional_string("sort") == "asc"
    assert flags.explicit_string("sort") is None


def test_explicit_empty_string_is_kept() -> None:
    flags = _parse(_command(SEARCH), ["--search="])

    assert flags.explicit_string("search") == ""
    assert flags.optional_string("search") == ""


def test_bool_negation_is_explicit() -> None:
    spec = FlagSpec(name="wiki-enabled", kind=FlagKind.BOOL, default=True, help="h")

    flags = _parse(_command(spec), ["--no-wiki-enabled"])

    assert flags.boolean("wiki-enabled") is False
    assert flags.explicit_bool("wiki-enabled") is False


def test_wrong_kind_access_raises() -> None:
    flags = _parse(_command(SEARCH), [])

    with pytest.raises(FlagAccessError, match="flag is string, not bool"):
        flags.boolean("search")


def test_unregistered_access_raises() -> None:
    flags = _parse(_command(SEARCH), [])

    with pytest.raises(FlagAccessError, match="not registered"):
        flags.string("project")
    with pytest.raises(FlagAccessError):
        flags.is_set("project")


def test_shorthand_is_accepted() -> None:
    flags = _parse(_command(PROJECT), ["-p", "team1/api"])

    assert flags.string("project") == "team1/api"


def test_split_string_set_dedupes_and_keeps_order() -> None:
    assert split_string_set(None, None, ("b,a", " a , c", "")) == ("b", "a", "c")  # type: ignore[arg-type]


def test_persistent_flag_parent_value_survives_leaf_default() -> None:
    root = AliasedGroup(name="root")
    root.add_persistent_flag(OUT)
    leaf = _command()
    root.add_command(leaf)

    root_ctx = root.make_context("root", ["-o", "json", "cmd"])
    leaf_ctx = leaf.make_context("cmd", [], parent=root_ctx)

    assert FlagValues.from_context(leaf_ctx).string("out") == "json"


def test_persistent_flag_leaf_value_wins() -> None:
    root = AliasedGroup(name="root")
    leaf = _command()
    root.add_command(leaf)
    # added after the leaf: still propagated
    root.add_persistent_flag(OUT)

    root_ctx = root.make_context("root", ["-o", "json", "cmd"])
    leaf_ctx = leaf.make_context("cmd", ["-o", "yaml"], parent=root_ctx)

    assert FlagValues.from_context(leaf_ctx).string("out") == "yaml"
