# topmark:header:start
#
#   project      : gitlabctl
#   file         : version.py
#   file_relpath : src/gitlabctl/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""gitlabctl `version` command.

Prints the current gitlabctl version as installed in the active Python
environment. ``--out`` (given on the root or after ``version``) selects plain
text, json or yaml.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click
import yaml

from gitlabctl.cli.console import get_console
from gitlabctl.cli.flags import FlagSurface, FlagValues
from gitlabctl.cli.validators import OUT_RULE
from gitlabctl.constants import GITLABCTL_VERSION
from gitlabctl.core.formats import OutputFormat

if TYPE_CHECKING:
    from gitlabctl.cli.console import ConsoleLike


class VersionCommand(FlagSurface, click.Command):
    """Plain Click command that still accepts the persistent flags of its parents."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.init_flag_surface()


@click.command(
    cls=VersionCommand,
    name="version",
    help="Show the current version of gitlabctl.",
)
def version_command(**_persistent: object) -> None:
    """Show the current version of gitlabctl."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    flags = FlagValues.from_context(ctx)
    OUT_RULE.check(flags)
    fmt = OutputFormat(flags.string("out"))

    if fmt is OutputFormat.JSON:
        console.print(json.dumps({"version": GITLABCTL_VERSION}))
    elif fmt is OutputFormat.YAML:
        console.print(yaml.safe_dump({"version": GITLABCTL_VERSION}).rstrip("\n"))
    else:
        console.print(console.styled(GITLABCTL_VERSION, bold=True))
