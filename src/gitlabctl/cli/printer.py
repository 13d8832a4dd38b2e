# topmark:header:start
#
#   project      : gitlabctl
#   file         : printer.py
#   file_relpath : src/gitlabctl/cli/printer.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""Render API entities in the format chosen with ``--out``.

- ``json``: indented JSON array of the entities, as returned by the API.
- ``yaml``: YAML sequence of the entities (`yaml.safe_dump`).
- ``simple``: aligned columns; the columns depend on the resource kind.

Confirmations of calls that return no entity are a plain line in the simple
format and a ``message`` mapping in json and yaml.

Entities are never modified; the simple format only selects fields.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING, Any, Final

import yaml

from gitlabctl.core.formats import OutputFormat

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gitlabctl.cli.console import ConsoleLike


class Resource(str, Enum):
    """Kind of entity returned by a command."""

    GROUP = "group"
    PROJECT = "project"
    TAG = "tag"
    RELEASE = "release"


SIMPLE_COLUMNS: Final[dict[Resource, tuple[tuple[str, str], ...]]] = {
    Resource.GROUP: (("ID", "id"), ("PATH", "full_path"), ("URL", "web_url")),
    Resource.PROJECT: (("ID", "id"), ("PATH", "path_with_namespace"), ("URL", "web_url")),
    Resource.TAG: (("NAME", "name"), ("COMMIT", "commit.short_id"), ("MESSAGE", "message")),
    Resource.RELEASE: (("TAG", "tag_name"), ("NAME", "name"), ("CREATED", "created_at")),
}


def lookup(entity: dict[str, Any], dotted: str) -> str:
    """Return ``entity[a][b]`` for ``"a.b"``, or an empty string if absent."""
    value: Any = entity
    for part in dotted.split("."):
        if not isinstance(value, dict):
            return ""
        value = value.get(part)
    if value is None:
        return ""
    return str(value).splitlines()[0] if str(value) else ""


def render_simple(resource: Resource, entities: Sequence[dict[str, Any]]) -> str:
    """Render ``entities`` as left-aligned columns with a header row."""
    columns = SIMPLE_COLUMNS[resource]
    rows: list[list[str]] = [[title for title, _ in columns]]
    rows.extend([lookup(entity, key) for _, key in columns] for entity in entities)
    widths = [max(len(row[i]) for row in rows) for i in range(len(columns))]
    lines = ["  ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip() for row in rows]
    return "\n".join(lines)


def render(fmt: OutputFormat, resource: Resource, entities: Sequence[dict[str, Any]]) -> str:
    """Render ``entities`` in format ``fmt``."""
    if fmt is OutputFormat.JSON:
        return json.dumps(list(entities), indent=2, sort_keys=False)
    if fmt is OutputFormat.YAML:
        return yaml.safe_dump(list(entities), default_flow_style=False, sort_keys=False).rstrip("\n")
    return render_simple(resource, entities)


def print_entities(
    console: ConsoleLike,
    fmt: OutputFormat,
    resource: Resource,
    entities: Sequence[dict[str, Any]],
) -> None:
    """Write ``entities`` to the console in one call."""
    console.print(render(fmt, resource, entities))


def render_message(fmt: OutputFormat, message: str) -> str:
    """Render a one-line confirmation; machine formats wrap it as ``{"message": ...}``."""
    if fmt is OutputFormat.JSON:
        return json.dumps({"message": message})
    if fmt is OutputFormat.YAML:
        return yaml.safe_dump({"message": message}, default_flow_style=False).rstrip("\n")
    return message


def print_message(console: ConsoleLike, fmt: OutputFormat, message: str) -> None:
    """Write a confirmation ``message`` to the console in format ``fmt``."""
    console.print(render_message(fmt, message))
