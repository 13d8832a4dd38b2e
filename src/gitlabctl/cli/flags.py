# topmark:header:start
#
#   project      : gitlabctl
#   file         : flags.py
#   file_relpath : src/gitlabctl/cli/flags.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""Flag registry: typed flag definitions and their parsed values.

A [`FlagSpec`][gitlabctl.cli.flags.FlagSpec] declares a reusable named flag
(string, bool or string-set) with a default, help text and an optional
one-letter shorthand. Specs are checked when they are created, so a command
can only ever expose well-formed flags.

[`register`][gitlabctl.cli.flags.register] attaches a spec to any command that
carries a [`FlagSurface`][gitlabctl.cli.flags.FlagSurface]; registering the same
flag twice on a command is a no-op.

After Click has parsed the command line, [`FlagValues`][gitlabctl.cli.flags.FlagValues]
exposes a typed, read-only view of every registered flag along the context
chain (root group, verb group, leaf command). Reading a flag that was never
registered, or reading it as the wrong kind, raises `FlagAccessError`: such a
read is a programming defect, never a user error.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

import click
from click.core import ParameterSource

from gitlabctl.cli.errors import FlagAccessError
from gitlabctl.config.logging import get_logger

if TYPE_CHECKING:
    from gitlabctl.config.logging import GitlabctlLogger

logger: GitlabctlLogger = get_logger(__name__)

FlagScalar = Union[str, bool, tuple[str, ...]]


class FlagKind(str, Enum):
    """Kind of value a flag holds."""

    STRING = "string"
    BOOL = "bool"
    STRING_SET = "string-set"


_EMPTY: dict[FlagKind, FlagScalar] = {
    FlagKind.STRING: "",
    FlagKind.BOOL: False,
    FlagKind.STRING_SET: (),
}


def split_string_set(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,  # pylint: disable=unused-argument
    value: tuple[str, ...] | None,
) -> tuple[str, ...]:
    """Click callback: split comma-separated entries and drop duplicates.

    ``--tag-list=a,b --tag-list=b,c`` yields ``("a", "b", "c")``.
    """
    out: list[str] = []
    for chunk in value or ():
        for item in chunk.split(","):
            item = item.strip()
            if item and item not in out:
                out.append(item)
    return tuple(out)


@dataclass(frozen=True)
class FlagSpec:
    """Immutable definition of a reusable flag.

    Attributes:
        name: Long flag name without dashes (``order-by``).
        kind: Kind of value the flag holds.
        default: Default value; must match ``kind``.
        help: Help text shown by ``--help``.
        shorthand: Optional one-letter alias (``p`` for ``-p``). Not
            supported for bool flags, which already expose ``--no-<name>``.
    """

    name: str
    kind: FlagKind
    default: FlagScalar
    help: str
    shorthand: str | None = None

    def __post_init__(self) -> None:
        if not self.name or self.name.startswith("-"):
            raise ValueError(f"Invalid flag name: {self.name!r}")
        if self.shorthand is not None:
            if len(self.shorthand) != 1 or not self.shorthand.isalpha():
                raise ValueError(f"Flag '{self.name}': shorthand must be a single letter")
            if self.kind is FlagKind.BOOL:
                raise ValueError(f"Flag '{self.name}': bool flags cannot have a shorthand")
        expected: type = {
            FlagKind.STRING: str,
            FlagKind.BOOL: bool,
            FlagKind.STRING_SET: tuple,
        }[self.kind]
        if not isinstance(self.default, expected):
            raise ValueError(
                f"Flag '{self.name}': default {self.default!r} does not match kind {self.kind.value}"
            )

    @property
    def dest(self) -> str:
        """Python identifier Click stores the parsed value under."""
        return self.name.replace("-", "_")

    @property
    def empty_default(self) -> bool:
        """True if the default is the kind's empty value."""
        return self.default == _EMPTY[self.kind]

    def to_option(self, *, required: bool = False) -> click.Option:
        """Build the Click option exposing this flag.

        Required flags are not marked as required for Click: the dispatcher
        checks them so that a missing flag raises `MissingRequiredFlagError`.
        """
        help_text = f"{self.help} (required)" if required else self.help
        if self.kind is FlagKind.BOOL:
            return click.Option(
                [f"--{self.name}/--no-{self.name}", self.dest],
                default=self.default,
                show_default=True,
                help=help_text,
            )
        decls = [f"--{self.name}"]
        if self.shorthand:
            decls.append(f"-{self.shorthand}")
        decls.append(self.dest)
        if self.kind is FlagKind.STRING_SET:
            return click.Option(
                decls,
                multiple=True,
                default=self.default,
                callback=split_string_set,
                metavar="LIST",
                help=help_text,
            )
        return click.Option(
            decls,
            type=str,
            default=self.default,
            show_default=not self.empty_default,
            help=help_text,
        )


class FlagSurface:
    """Mixin for Click commands whose flags are managed by the registry.

    Attributes:
        flag_specs: Registered flags by name, in registration order.
        required_flags: Names of the flags that must be given explicitly.
    """

    flag_specs: dict[str, FlagSpec]
    required_flags: list[str]

    def init_flag_surface(self) -> None:
        """Initialize the (empty) flag tables."""
        self.flag_specs = {}
        self.required_flags = []


def _surface(command: click.Command) -> FlagSurface:
    if not isinstance(command, FlagSurface):
        logger.critical("Command %s has no flag surface", command.name)
        raise FlagAccessError(f"command {command.name} does not accept registered flags")
    return command


def register(spec: FlagSpec, command: click.Command) -> None:
    """Attach ``spec`` to ``command``'s parse surface.

    Registering a flag twice is a no-op; registering a *different* definition
    under an already used name raises `FlagAccessError`.
    """
    surface = _surface(command)
    existing = surface.flag_specs.get(spec.name)
    if existing is not None:
        if existing != spec:
            logger.critical("Conflicting definitions for flag %s on %s", spec.name, command.name)
            raise FlagAccessError(
                f"flag '{spec.name}' is already registered on command {command.name} "
                "with a different definition"
            )
        return
    surface.flag_specs[spec.name] = spec
    command.params.append(spec.to_option(required=spec.name in surface.required_flags))
    logger.trace("Registered flag --%s on %s", spec.name, command.name)


def register_required(spec: FlagSpec, command: click.Command) -> None:
    """Attach ``spec`` to ``command`` and mark it mandatory."""
    surface = _surface(command)
    if spec.name not in surface.required_flags:
        surface.required_flags.append(spec.name)
    register(spec, command)


@dataclass(frozen=True)
class FlagValue:
    """A parsed flag value tagged with its kind.

    Attributes:
        kind: Kind of the flag.
        value: Parsed value (never None).
        explicit: True if the value came from the command line.
    """

    kind: FlagKind
    value: FlagScalar
    explicit: bool

    @property
    def is_unset(self) -> bool:
        """True if the flag was not given and its default is the empty value."""
        return not self.explicit and self.value == _EMPTY[self.kind]


class FlagValues(Mapping[str, FlagValue]):
    """Typed, read-only view of the parsed flags of one invocation.

    Args:
        command_path: Command path used in error messages (``gitlabctl get projects``).
        values: Parsed values by flag name.
    """

    def __init__(self, command_path: str, values: Mapping[str, FlagValue]) -> None:
        self.command_path = command_path
        self._values: dict[str, FlagValue] = dict(values)

    @classmethod
    def from_context(cls, ctx: click.Context) -> FlagValues:
        """Collect the registered flags of ``ctx`` and all of its parents.

        A flag registered at several levels (persistent flags) keeps the
        explicitly given value closest to the leaf; when no level was given
        explicitly, the leaf's default wins.
        """
        chain: list[click.Context] = []
        current: click.Context | None = ctx
        while current is not None:
            chain.append(current)
            current = current.parent

        values: dict[str, FlagValue] = {}
        for link in reversed(chain):
            command = link.command
            if not isinstance(command, FlagSurface):
                continue
            for spec in command.flag_specs.values():
                if spec.dest not in link.params:
                    logger.critical("Flag %s missing from parsed params of %s", spec.name, command.name)
                    raise FlagAccessError(
                        f"error accessing flag {spec.name} for command {command.name}: not parsed"
                    )
                raw = link.params[spec.dest]
                source = link.get_parameter_source(spec.dest)
                explicit = source not in (None, ParameterSource.DEFAULT, ParameterSource.DEFAULT_MAP)
                previous = values.get(spec.name)
                if previous is not None and previous.explicit and not explicit:
                    continue
                values[spec.name] = FlagValue(kind=spec.kind, value=raw, explicit=explicit)
        return cls(ctx.command_path, values)

    def __getitem__(self, name: str) -> FlagValue:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def _get(self, name: str, kind: FlagKind) -> FlagValue:
        flag = self._values.get(name)
        if flag is None:
            logger.critical("Flag %s is not registered for %s", name, self.command_path)
            raise FlagAccessError(
                f"error accessing flag {name} for command {self.command_path}: not registered"
            )
        if flag.kind is not kind:
            logger.critical("Flag %s read as %s but is %s", name, kind.value, flag.kind.value)
            raise FlagAccessError(
                f"error accessing flag {name} for command {self.command_path}: "
                f"flag is {flag.kind.value}, not {kind.value}"
            )
        return flag

    def string(self, name: str) -> str:
        """Return the value of string flag ``name``."""
        return str(self._get(name, FlagKind.STRING).value)

    def boolean(self, name: str) -> bool:
        """Return the value of bool flag ``name``."""
        return bool(self._get(name, FlagKind.BOOL).value)

    def string_set(self, name: str) -> tuple[str, ...]:
        """Return the value of string-set flag ``name``."""
        value = self._get(name, FlagKind.STRING_SET).value
        return tuple(value) if isinstance(value, tuple) else ()

    def is_set(self, name: str) -> bool:
        """True if ``name`` was given explicitly or has a non-empty default."""
        flag = self._values.get(name)
        if flag is None:
            raise FlagAccessError(
                f"error accessing flag {name} for command {self.command_path}: not registered"
            )
        return not flag.is_unset

    def optional_string(self, name: str) -> str | None:
        """Return the string value, or None when the flag is unset."""
        flag = self._get(name, FlagKind.STRING)
        return None if flag.is_unset else str(flag.value)

    def optional_bool(self, name: str) -> bool | None:
        """Return the bool value, or None when the flag is unset."""
        flag = self._get(name, FlagKind.BOOL)
        return None if flag.is_unset else bool(flag.value)

    def optional_string_set(self, name: str) -> tuple[str, ...] | None:
        """Return the string-set value, or None when the flag is unset."""
        flag = self._get(name, FlagKind.STRING_SET)
        return None if flag.is_unset else self.string_set(name)

    def explicit_string(self, name: str) -> str | None:
        """Return the string value only if it was given on the command line."""
        flag = self._get(name, FlagKind.STRING)
        return str(flag.value) if flag.explicit else None

    def explicit_bool(self, name: str) -> bool | None:
        """Return the bool value only if it was given on the command line."""
        flag = self._get(name, FlagKind.BOOL)
        return bool(flag.value) if flag.explicit else None

    def explicit_string_set(self, name: str) -> tuple[str, ...] | None:
        """Return the string-set value only if it was given on the command line."""
        flag = self._get(name, FlagKind.STRING_SET)
        return self.string_set(name) if flag.explicit else None
