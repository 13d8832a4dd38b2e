# topmark:header:start
#
#   project      : gitlabctl
#   file         : formats.py
#   file_relpath : src/gitlabctl/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 gitlabctl authors
#
# topmark:header:end

"""Output format vocabulary shared by the CLI and the printer.

Machine formats (JSON, YAML) are colorless and dump API entities verbatim.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format selected with the global ``--out`` flag.

    Attributes:
        JSON: Indented JSON document of the returned entities.
        YAML: YAML document of the returned entities.
        SIMPLE: Human-friendly table with a few columns per resource kind.
    """

    JSON = "json"
    YAML = "yaml"
    SIMPLE = "simple"


DEFAULT_OUTPUT_FORMAT: OutputFormat = OutputFormat.SIMPLE

