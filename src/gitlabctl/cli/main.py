# topmark:header:start
#
#   project      : gitlabctl
#   file         : main.py
#   file_relpath : src/gitlabctl/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""Root of the gitlabctl command tree.

Key ideas:
- Root-level options are initialized once and placed into ``ctx.obj``.
- ``--out`` is a persistent flag: it is accepted on the root and on every
  command below it.
- Verb groups (get, new, edit, delete) hold declarative leaf commands that run
  through the dispatcher.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from gitlabctl.cli.commands.delete import (
    DELETE_GROUP,
    DELETE_PROJECT,
    DELETE_RELEASE,
    DELETE_TAG,
)
from gitlabctl.cli.commands.edit import EDIT_GROUP, EDIT_PROJECT
from gitlabctl.cli.commands.get_groups import GET_GROUPS, GET_SUBGROUPS
from gitlabctl.cli.commands.get_projects import GET_PROJECTS
from gitlabctl.cli.commands.get_tags import GET_RELEASES, GET_TAGS
from gitlabctl.cli.commands.new_group import NEW_GROUP
from gitlabctl.cli.commands.new_project import NEW_PROJECT
from gitlabctl.cli.commands.new_tag import NEW_RELEASE, NEW_TAG
from gitlabctl.cli.commands.version import version_command
from gitlabctl.cli.console import ClickConsole
from gitlabctl.cli.dispatch import AliasedGroup, DispatchCommand
from gitlabctl.cli.flag_catalog import OUT
from gitlabctl.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    config_file_option,
    resolve_color_mode,
    resolve_verbosity,
)
from gitlabctl.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gitlabctl.cli.dispatch import ClientFactory, CommandSpec

logger = get_logger(__name__)

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}

#: Verb groups: name -> (help, leaf commands).
VERBS: dict[str, tuple[str, tuple[CommandSpec, ...]]] = {
    "get": (
        "Display one or many resources",
        (GET_GROUPS, GET_SUBGROUPS, GET_PROJECTS, GET_TAGS, GET_RELEASES),
    ),
    "new": (
        "Create a new resource",
        (NEW_GROUP, NEW_PROJECT, NEW_TAG, NEW_RELEASE),
    ),
    "edit": (
        "Update a resource",
        (EDIT_GROUP, EDIT_PROJECT),
    ),
    "delete": (
        "Delete a resource",
        (DELETE_GROUP, DELETE_PROJECT, DELETE_TAG, DELETE_RELEASE),
    ),
}


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: str | None,
    client_factory: ClientFactory | None,
) -> None:
    """Initialize shared state (logging, color, settings source) on the Click context.

    Values already present in ``ctx.obj`` (for example a client factory passed
    by tests through ``obj=``) are kept.

    Args:
        ctx: Current Click context; will have ``obj`` and ``color`` set.
        verbose: Count of ``-v`` flags.
        quiet: Count of ``-q`` flags.
        color_mode: Explicit color mode from ``--color`` (or ``None``).
        no_color: Whether ``--no-color`` was passed; forces color off.
        config_path: Settings file given with ``--config``.
        client_factory: Factory building the API client.
    """
    ctx.obj = ctx.obj or {}

    # GITLABCTL_LOG_LEVEL wins over -v/-q
    level = resolve_env_log_level() or resolve_verbosity(verbose, quiet)
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj.setdefault("console", ClickConsole(enable_color=enable_color))

    ctx.obj["config_path"] = config_path
    if client_factory is not None:
        ctx.obj.setdefault("client_factory", client_factory)
    logger.debug("Initialized root state: level=%s color=%s config=%s", level, enable_color, config_path)


def build_verb(name: str, help: str, specs: Sequence[CommandSpec]) -> AliasedGroup:
    """Build the verb group ``name`` holding one command per spec."""
    group = AliasedGroup(name=name, help=help, context_settings=CONTEXT_SETTINGS)
    for spec in specs:
        group.add_command(DispatchCommand(spec))
    return group


def build_cli(client_factory: ClientFactory | None = None) -> AliasedGroup:
    """Build a fresh gitlabctl command tree.

    Args:
        client_factory: Builds the API client from the ``--config`` path.
            Defaults to loading the settings and creating a `GitlabClient`.

    Returns:
        The root command group.
    """

    @click.group(
        cls=AliasedGroup,
        name="gitlabctl",
        context_settings=CONTEXT_SETTINGS,
        invoke_without_command=True,
        help="gitlabctl: a command line client for the GitLab REST API.",
    )
    @common_verbose_options
    @common_color_options
    @config_file_option
    @click.pass_context
    def cli(
        ctx: click.Context,
        verbose: int,
        quiet: int,
        color_mode: str | None,
        no_color: bool,
        config_path: str | None,
        **_persistent: object,
    ) -> None:
        """Entry point for the gitlabctl CLI."""
        init_common_state(
            ctx,
            verbose=verbose,
            quiet=quiet,
            color_mode=ColorMode(color_mode) if color_mode else None,
            no_color=no_color,
            config_path=config_path,
            client_factory=client_factory,
        )
        if ctx.invoked_subcommand is None:
            ctx.obj["console"].print(ctx.get_help())

    assert isinstance(cli, AliasedGroup)
    cli.add_persistent_flag(OUT)
    for verb, (help_text, specs) in VERBS.items():
        cli.add_command(build_verb(verb, help_text, specs))
    cli.add_command(version_command)
    return cli


def main() -> None:
    """Console script entry point."""
    build_cli()(prog_name="gitlabctl")


if __name__ == "__main__":
    main()
