# topmark:header:start
#
#   project      : gitlabctl
#   file         : dispatch.py
#   file_relpath : src/gitlabctl/cli/dispatch.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""Command dispatcher: declarative leaf commands and the groups that hold them.

A leaf command is described by a [`CommandSpec`][gitlabctl.cli.dispatch.CommandSpec]
and exposed to Click as a [`DispatchCommand`][gitlabctl.cli.dispatch.DispatchCommand].
Running it walks a fixed sequence of states:

    PARSED     Click parsed the command line; flags are collected and the
               positional argument count and required flags are checked.
    VALIDATED  Enumerated flag values were checked (``--out`` first).
    ASSEMBLED  The command's assembler built a `RemoteCall`.
    CALLED     The client was created and the single API call returned.
    DONE       The result was written to the console.

Any error aborts forward progress and propagates to Click, which prints it on
stderr and exits with the error's code. Nothing is retried and no local state
survives the invocation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

import click

from gitlabctl.api.client import GitlabApiError, GitlabClient
from gitlabctl.cli.console import get_console
from gitlabctl.cli.errors import (
    ArgumentCountError,
    GitlabctlConfigError,
    MissingRequiredFlagError,
    RemoteCallError,
)
from gitlabctl.cli.flags import FlagSurface, FlagValues, register, register_required
from gitlabctl.cli.printer import Resource, print_entities, print_message
from gitlabctl.cli.validators import OUT_RULE, run_validators
from gitlabctl.config.logging import get_logger
from gitlabctl.config.settings import SettingsError, load_settings
from gitlabctl.core.formats import OutputFormat

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gitlabctl.api.options import RequestOptions
    from gitlabctl.cli.flags import FlagSpec
    from gitlabctl.cli.validators import ValidationRule
    from gitlabctl.config.logging import GitlabctlLogger

logger: GitlabctlLogger = get_logger(__name__)

#: Builds the API client from the ``--config`` path (None when not given).
ClientFactory = Callable[[Any], Any]


@dataclass(frozen=True)
class RemoteCall:
    """A fully assembled API call.

    Attributes:
        operation: Name of the client method to call (``list_projects``).
        resource: Kind of entity the call returns.
        target: Positional identifiers passed before the options
            (group/project path, tag name).
        options: Request options, or None for operations without options.
        done_message: Line printed when the call returns no entity (deletions).
    """

    operation: str
    resource: Resource
    target: tuple[str, ...] = ()
    options: RequestOptions | None = None
    done_message: str | None = None

    def invoke(self, client: Any) -> Any:
        """Perform the call on ``client``."""
        method = getattr(client, self.operation)
        args: list[Any] = list(self.target)
        if self.options is not None:
            args.append(self.options)
        return method(*args)


Assembler = Callable[[FlagValues, tuple[str, ...]], RemoteCall]


@dataclass(frozen=True)
class CommandSpec:
    """Declarative description of a leaf command.

    Attributes:
        name: Command name.
        help: One-line help text.
        assemble: Builds the `RemoteCall` from parsed flags and positional args.
        aliases: Alternative names.
        args: Metavars of the positional arguments; the command accepts
            exactly ``len(args)`` of them.
        flags: Flags of the command, in help order.
        required: Names of the flags (from ``flags``) that must be given.
        validators: Enumerated-value rules, run in order.
        example: Usage examples shown at the end of ``--help``.
    """

    name: str
    help: str
    assemble: Assembler
    aliases: tuple[str, ...] = ()
    args: tuple[str, ...] = ()
    flags: tuple[FlagSpec, ...] = ()
    required: tuple[str, ...] = ()
    validators: tuple[ValidationRule, ...] = field(default=())
    example: str = ""

    def __post_init__(self) -> None:
        names = {spec.name for spec in self.flags}
        unknown = [name for name in self.required if name not in names]
        if unknown:
            raise ValueError(f"Command '{self.name}': required flags not declared: {unknown}")
        unchecked = [rule.flag for rule in self.validators if rule.flag not in names]
        if unchecked:
            raise ValueError(f"Command '{self.name}': validated flags not declared: {unchecked}")

    @property
    def arity(self) -> int:
        """Exact number of positional arguments."""
        return len(self.args)


def default_client_factory(config_path: str | None) -> GitlabClient:
    """Load the connection settings and build a `GitlabClient`.

    Raises:
        GitlabctlConfigError: If the settings cannot be loaded.
    """
    try:
        settings = load_settings(config_path)
    except SettingsError as exc:
        raise GitlabctlConfigError(str(exc)) from exc
    return GitlabClient(settings)


def get_client(ctx: click.Context) -> Any:
    """Build the API client using the factory stored on the root context."""
    obj = ctx.find_root().ensure_object(dict)
    factory: ClientFactory = obj.get("client_factory") or default_client_factory
    return factory(obj.get("config_path"))


def emit(ctx: click.Context, fmt: OutputFormat, call: RemoteCall, result: Any) -> None:
    """Write the result of ``call`` to the console."""
    console = get_console(ctx)
    if result is None:
        print_message(console, fmt, call.done_message or "")
        return
    entities: Sequence[dict[str, Any]] = result if isinstance(result, list) else [result]
    print_entities(console, fmt, call.resource, entities)


def execute(spec: CommandSpec, ctx: click.Context, args: tuple[str, ...]) -> Any:
    """Run ``spec`` for the parsed context ``ctx``.

    Returns:
        The entity (or entities) returned by the API call.

    Raises:
        ArgumentCountError: Wrong number of positional arguments.
        MissingRequiredFlagError: A required flag was not given.
        InvalidFlagValueError: An enumerated flag holds an unknown value.
        GitlabctlConfigError: No usable connection settings.
        RemoteCallError: The API call failed.
    """
    path = ctx.command_path
    flags = FlagValues.from_context(ctx)
    logger.trace("%s: PARSED args=%s", path, args)

    if len(args) != spec.arity:
        raise ArgumentCountError(path, spec.arity, len(args))
    missing = [name for name in spec.required if not flags[name].explicit]
    if missing:
        raise MissingRequiredFlagError(missing)

    run_validators(flags, (OUT_RULE, *spec.validators))
    logger.trace("%s: VALIDATED", path)

    call = spec.assemble(flags, args)
    logger.trace("%s: ASSEMBLED %s", path, call)

    client = get_client(ctx)
    try:
        result = call.invoke(client)
    except GitlabApiError as exc:
        logger.debug("%s: %s failed: %s", path, call.operation, exc)
        raise RemoteCallError(exc) from exc
    logger.trace("%s: CALLED %s", path, call.operation)

    emit(ctx, OutputFormat(flags.string("out")), call, result)
    logger.trace("%s: DONE", path)
    return result


def _epilog(example: str) -> str | None:
    if not example:
        return None
    # \b keeps Click from rewrapping the example block
    return "\b\nExamples:\n\n" + "\n".join(f"  {line}" if line else "" for line in example.splitlines())


class DispatchCommand(FlagSurface, click.Command):
    """Click command running a `CommandSpec` through the dispatcher.

    Positional arguments are collected without an arity constraint so the
    dispatcher can report a wrong count with its own error.
    """

    def __init__(self, spec: CommandSpec) -> None:
        # an empty metavar keeps "[ARGS]..." out of the usage line
        metavar = " ".join(spec.args)
        params: list[click.Parameter] = [
            click.Argument(["args"], nargs=-1, metavar=metavar, expose_value=True)
        ]
        super().__init__(
            name=spec.name,
            params=params,
            help=spec.help,
            short_help=spec.help,
            epilog=_epilog(spec.example),
            context_settings={"help_option_names": ["-h", "--help"]},
        )
        self.init_flag_surface()
        self.spec = spec
        self.aliases: tuple[str, ...] = spec.aliases
        for flag in spec.flags:
            if flag.name in spec.required:
                register_required(flag, self)
            else:
                register(flag, self)

    def invoke(self, ctx: click.Context) -> Any:
        """Dispatch instead of calling a callback."""
        return execute(self.spec, ctx, tuple(ctx.params.get("args", ())))


class AliasedGroup(FlagSurface, click.Group):
    """Click group resolving command aliases and propagating persistent flags.

    Persistent flags are registered on the group and on every command added to
    it afterwards (recursively through nested groups), so ``--out`` may appear
    before or after the subcommand name.
    """

    def __init__(self, *args: Any, aliases: Sequence[str] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.init_flag_surface()
        self.aliases: tuple[str, ...] = tuple(aliases)
        self.persistent_flags: list[FlagSpec] = []
        self._alias_map: dict[str, str] = {}

    def add_persistent_flag(self, spec: FlagSpec) -> None:
        """Register ``spec`` here and on every command below, present or future."""
        register(spec, self)
        if spec not in self.persistent_flags:
            self.persistent_flags.append(spec)
        for cmd in self.commands.values():
            _inherit(spec, cmd)

    def add_command(self, cmd: click.Command, name: str | None = None) -> None:
        """Add ``cmd``, index its aliases and hand it the persistent flags."""
        super().add_command(cmd, name)
        for alias in getattr(cmd, "aliases", ()):
            self._alias_map[alias] = name or cmd.name or alias
        for spec in self.persistent_flags:
            _inherit(spec, cmd)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Resolve ``cmd_name`` as a command name or alias."""
        rv = super().get_command(ctx, cmd_name)
        if rv is not None:
            return rv
        target = self._alias_map.get(cmd_name)
        if target is None:
            return None
        return super().get_command(ctx, target)

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        """Always return the full command name, even when called by alias."""
        _, cmd, args = super().resolve_command(ctx, args)
        return (cmd.name if cmd else None), cmd, args


def _inherit(spec: FlagSpec, cmd: click.Command) -> None:
    # commands without a flag surface cannot take persistent flags
    if isinstance(cmd, AliasedGroup):
        cmd.add_persistent_flag(spec)
    elif isinstance(cmd, FlagSurface):
        register(spec, cmd)
